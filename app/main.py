"""
Main FastAPI application entry point.
Configures the app, middleware, routers, and startup/shutdown events.
"""

from contextlib import asynccontextmanager
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
import logging
from typing import Dict, Any, Optional

import sentry_sdk
from sentry_sdk.integrations.fastapi import FastApiIntegration
from sentry_sdk.integrations.sqlalchemy import SqlalchemyIntegration
from sqlalchemy.orm import sessionmaker

from app.config import Settings, get_settings
from app.domain.services.blob_store import BlobStore
from app.infrastructure.auth import JWTHandler
from app.infrastructure.db.database import create_db_engine, create_session_factory, create_all_tables
from app.infrastructure.storage.storage_service import build_storage_service
from app.infrastructure.web.middleware.error_handler import ErrorHandlerMiddleware
from app.infrastructure.web.routers import (
    profiles,
    listings,
    shared_profiles,
    audio_tracks,
)

logger = logging.getLogger(__name__)


def configure_logging(settings: Settings) -> None:
    """Configure root logging once for the process."""
    logging.basicConfig(
        level=logging.DEBUG if settings.debug else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def init_sentry(settings: Settings) -> None:
    """Initialize Sentry when a DSN is configured outside development."""
    if not settings.sentry_dsn or settings.is_development:
        return

    sentry_sdk.init(
        dsn=settings.sentry_dsn,
        traces_sample_rate=settings.sentry_traces_sample_rate,
        environment=settings.environment,
        integrations=[
            FastApiIntegration(transaction_style="endpoint"),
            SqlalchemyIntegration(),
        ],
    )
    logger.info("Sentry initialized")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manage application lifecycle.
    Builds every client not injected into create_application and
    disposes of the ones it built.
    """
    settings: Settings = app.state.settings

    # Startup
    logger.info(f"Starting {settings.api_title} v{settings.api_version}")
    logger.info(f"Environment: {settings.environment}")

    init_sentry(settings)

    engine = None
    if app.state.session_factory is None:
        engine = create_db_engine(settings.database_url, echo=settings.debug)
        create_all_tables(engine)
        app.state.session_factory = create_session_factory(engine)
        logger.info("Database engine initialized")

    if app.state.blob_store is None:
        app.state.blob_store = build_storage_service(settings)
        logger.info(f"Storage initialized for bucket {settings.audio_bucket}")

    if app.state.jwt_handler is None:
        app.state.jwt_handler = JWTHandler(settings.supabase_jwt_secret, settings.jwt_algorithm)

    yield

    # Shutdown
    logger.info("Shutting down application")
    if engine is not None:
        engine.dispose()


def create_application(
    settings: Optional[Settings] = None,
    session_factory: Optional[sessionmaker] = None,
    blob_store: Optional[BlobStore] = None,
    jwt_handler: Optional[JWTHandler] = None,
) -> FastAPI:
    """
    Create and configure the FastAPI application.
    Clients passed in are used as-is; the rest are built at startup.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    app = FastAPI(
        title=settings.api_title,
        version=settings.api_version,
        debug=settings.debug,
        docs_url=f"{settings.api_prefix}/docs" if settings.debug else None,
        redoc_url=f"{settings.api_prefix}/redoc" if settings.debug else None,
        openapi_url=f"{settings.api_prefix}/openapi.json" if settings.debug else None,
        lifespan=lifespan
    )

    app.state.settings = settings
    app.state.session_factory = session_factory
    app.state.blob_store = blob_store
    app.state.jwt_handler = jwt_handler

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=settings.cors_allow_credentials,
        allow_methods=settings.cors_allow_methods,
        allow_headers=settings.cors_allow_headers,
    )

    # Add trusted host middleware when hosts are configured
    if settings.trusted_hosts:
        app.add_middleware(
            TrustedHostMiddleware,
            allowed_hosts=settings.trusted_hosts
        )

    # Add custom error handler middleware
    app.add_middleware(ErrorHandlerMiddleware, debug=settings.debug)

    # Include routers
    app.include_router(
        profiles.router,
        prefix=f"{settings.api_prefix}/profiles",
        tags=["Profiles"]
    )
    app.include_router(
        audio_tracks.router,
        prefix=f"{settings.api_prefix}/profiles/me/audio-tracks",
        tags=["Audio Tracks"]
    )
    app.include_router(
        listings.router,
        prefix=settings.api_prefix,
        tags=["Listings"]
    )
    app.include_router(
        shared_profiles.router,
        prefix=f"{settings.api_prefix}/shared-profiles",
        tags=["Shared Profiles"]
    )

    # Root endpoint
    @app.get("/")
    async def root() -> Dict[str, Any]:
        """Root endpoint with API information."""
        return {
            "name": settings.api_title,
            "version": settings.api_version,
            "environment": settings.environment,
            "docs": f"{settings.api_prefix}/docs" if settings.debug else None,
            "health": f"{settings.api_prefix}/health"
        }

    # Health check endpoint
    @app.get(f"{settings.api_prefix}/health")
    async def health_check() -> Dict[str, Any]:
        """Health check endpoint for monitoring."""
        return {
            "status": "healthy",
            "environment": settings.environment,
            "version": settings.api_version
        }

    # Custom 404 handler
    @app.exception_handler(404)
    async def not_found_handler(request: Request, exc):
        """Custom 404 error handler."""
        return JSONResponse(
            status_code=404,
            content={
                "error": "Not Found",
                "message": f"The path {request.url.path} was not found",
                "path": request.url.path
            }
        )

    return app


# Create the FastAPI app instance
app = create_application()

if __name__ == "__main__":
    import uvicorn

    settings = get_settings()
    uvicorn.run(
        "app.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.is_development,
        log_level="debug" if settings.debug else "info",
    )

"""
Request dependencies for FastAPI routers.
Clients are built once at startup and read from ``app.state``; each request
gets its own database session.
"""

from typing import Annotated, Generator
from fastapi import Depends, Request
from sqlalchemy.orm import Session

from app.config import Settings
from app.domain.services.blob_store import BlobStore
from app.infrastructure.db.database import session_scope
from app.infrastructure.repositories import (
    SQLAlchemyUserRepository,
    SQLAlchemyProfileRepository,
    SQLAlchemySharedProfileRepository,
)


def get_app_settings(request: Request) -> Settings:
    """Dependency to get the settings the app was created with."""
    return request.app.state.settings


def get_db(request: Request) -> Generator[Session, None, None]:
    """Dependency to get a request-scoped database session."""
    yield from session_scope(request.app.state.session_factory)


def get_blob_store(request: Request) -> BlobStore:
    """Dependency to get the audio blob store."""
    return request.app.state.blob_store


def get_user_repository(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyUserRepository:
    """Dependency to get user repository."""
    return SQLAlchemyUserRepository(session)


def get_profile_repository(session: Annotated[Session, Depends(get_db)]) -> SQLAlchemyProfileRepository:
    """Dependency to get profile repository."""
    return SQLAlchemyProfileRepository(session)


def get_shared_profile_repository(
    session: Annotated[Session, Depends(get_db)]
) -> SQLAlchemySharedProfileRepository:
    """Dependency to get shared profile repository."""
    return SQLAlchemySharedProfileRepository(session)


SettingsDep = Annotated[Settings, Depends(get_app_settings)]
BlobStoreDep = Annotated[BlobStore, Depends(get_blob_store)]
UserRepositoryDep = Annotated[SQLAlchemyUserRepository, Depends(get_user_repository)]
ProfileRepositoryDep = Annotated[SQLAlchemyProfileRepository, Depends(get_profile_repository)]
SharedProfileRepositoryDep = Annotated[SQLAlchemySharedProfileRepository, Depends(get_shared_profile_repository)]

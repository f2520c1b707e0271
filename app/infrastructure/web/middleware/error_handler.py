"""
Global error handler middleware for the FastAPI application.
Catches and formats all exceptions consistently.
"""

import logging
import traceback
from typing import Any, Dict, Tuple, Type
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import JSONResponse
from fastapi import status

from app.domain.models.base import (
    DomainException,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    EntityNotFoundError,
    ExternalServiceError,
)

logger = logging.getLogger(__name__)


# Checked in order; subclasses before DomainException
DOMAIN_ERROR_STATUS: Tuple[Tuple[Type[DomainException], int, str], ...] = (
    (AuthenticationError, status.HTTP_401_UNAUTHORIZED, "Unauthorized"),
    (AuthorizationError, status.HTTP_403_FORBIDDEN, "Forbidden"),
    (EntityNotFoundError, status.HTTP_404_NOT_FOUND, "Not Found"),
    (ValidationError, status.HTTP_422_UNPROCESSABLE_ENTITY, "Validation Error"),
    (ExternalServiceError, status.HTTP_502_BAD_GATEWAY, "Bad Gateway"),
    (DomainException, status.HTTP_400_BAD_REQUEST, "Bad Request"),
)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """
    Middleware to handle all uncaught exceptions and format error responses.
    """

    def __init__(self, app, debug: bool = False):
        super().__init__(app)
        self.debug = debug

    async def dispatch(self, request: Request, call_next):
        """
        Process the request and handle any exceptions.
        """
        try:
            response = await call_next(request)
            return response
        except Exception as exc:
            return await self.handle_exception(request, exc)

    async def handle_exception(self, request: Request, exc: Exception) -> JSONResponse:
        """
        Handle different types of exceptions and return appropriate responses.
        """
        error_response = self.format_error_response(exc)

        if error_response["status_code"] >= 500:
            # Log the full exception with traceback
            logger.error(
                f"Unhandled exception: {type(exc).__name__}: {str(exc)}",
                exc_info=True,
                extra={
                    "request_path": request.url.path,
                    "request_method": request.method,
                    "client_host": request.client.host if request.client else None
                }
            )
        else:
            logger.info(
                f"{request.method} {request.url.path} -> {error_response['status_code']}: {error_response['message']}"
            )

        # In debug mode, add more debug information
        if self.debug:
            error_response["debug"] = {
                "exception_type": type(exc).__name__,
                "traceback": traceback.format_exc().split("\n")
            }

        headers = None
        if isinstance(exc, AuthenticationError):
            headers = {"WWW-Authenticate": "Bearer"}

        return JSONResponse(
            status_code=error_response["status_code"],
            content=error_response,
            headers=headers
        )

    def format_error_response(self, exc: Exception) -> Dict[str, Any]:
        """
        Format exception into a consistent error response structure.
        """
        # Default error response
        error_response = {
            "error": "Internal Server Error",
            "message": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
            "status_code": status.HTTP_500_INTERNAL_SERVER_ERROR
        }

        if isinstance(exc, DomainException):
            for exc_type, status_code, error in DOMAIN_ERROR_STATUS:
                if isinstance(exc, exc_type):
                    error_response.update({
                        "error": error,
                        "message": exc.message,
                        "code": exc.code,
                        "status_code": status_code
                    })
                    break

            if isinstance(exc, ValidationError) and exc.field:
                error_response["field"] = exc.field

        return error_response

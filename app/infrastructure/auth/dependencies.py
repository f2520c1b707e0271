"""
Authentication dependencies for FastAPI.
Resolves the bearer token of a request to the caller's external identity.
"""

from typing import Optional, Annotated
from fastapi import Depends, Request
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials

from app.infrastructure.auth.jwt_handler import JWTHandler, CallerIdentity
from app.domain.models.base import AuthenticationError


# Security scheme; a missing header is reported as AuthenticationError below
security = HTTPBearer(auto_error=False)


def get_jwt_handler(request: Request) -> JWTHandler:
    """Dependency to get the JWT handler built at startup."""
    return request.app.state.jwt_handler


async def get_current_caller(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(security)],
    jwt_handler: Annotated[JWTHandler, Depends(get_jwt_handler)]
) -> CallerIdentity:
    """
    FastAPI dependency to get the current authenticated caller.

    Raises:
        AuthenticationError: If no token is present or it fails verification
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError("Missing authentication token")

    return jwt_handler.get_caller(credentials.credentials)

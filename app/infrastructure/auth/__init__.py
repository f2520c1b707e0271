"""
Authentication infrastructure module.
Handles JWT validation and caller identity extraction.
"""

from .jwt_handler import JWTHandler, CallerIdentity
from .dependencies import get_current_caller, get_jwt_handler

__all__ = [
    "JWTHandler",
    "CallerIdentity",
    "get_current_caller",
    "get_jwt_handler",
]

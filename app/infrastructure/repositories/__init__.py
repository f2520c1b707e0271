"""
Infrastructure repositories module.
Contains SQLAlchemy implementations of domain repositories.
"""

from .user_repository import SQLAlchemyUserRepository
from .profile_repository import SQLAlchemyProfileRepository
from .shared_profile_repository import SQLAlchemySharedProfileRepository

__all__ = [
    "SQLAlchemyUserRepository",
    "SQLAlchemyProfileRepository",
    "SQLAlchemySharedProfileRepository",
]

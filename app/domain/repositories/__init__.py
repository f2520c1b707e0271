"""
Repository interfaces for the domain layer.
This module exports all repository interfaces (ports) for dependency injection.
"""

from .user_repository import UserRepositoryInterface
from .profile_repository import ProfileRepository
from .shared_profile_repository import SharedProfileRepository

__all__ = [
    "UserRepositoryInterface",
    "ProfileRepository",
    "SharedProfileRepository",
]

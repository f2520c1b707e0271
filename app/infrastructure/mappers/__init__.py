"""
Infrastructure mappers module.
Contains mappers for converting between domain entities and database models.
"""

from .user_mapper import UserMapper
from .profile_mapper import ProfileMapper
from .shared_profile_mapper import SharedProfileMapper

__all__ = [
    "UserMapper",
    "ProfileMapper",
    "SharedProfileMapper",
]

"""
Domain models for the gig marketplace.
This module exports all domain entities and value objects.
"""

from .base import (
    BaseEntity,
    DomainException,
    ValidationError,
    AuthenticationError,
    AuthorizationError,
    EntityNotFoundError,
    ExternalServiceError,
    new_id
)

from .user import (
    User,
    ProfileType
)

from .profile import (
    AudioTrack,
    Profile,
    Band,
    GigProvider,
    PROFILE_CLASSES,
    MAX_AUDIO_TRACKS
)

from .shared_profile import SharedProfile

__all__ = [
    "BaseEntity",
    "DomainException",
    "ValidationError",
    "AuthenticationError",
    "AuthorizationError",
    "EntityNotFoundError",
    "ExternalServiceError",
    "new_id",
    "User",
    "ProfileType",
    "AudioTrack",
    "Profile",
    "Band",
    "GigProvider",
    "PROFILE_CLASSES",
    "MAX_AUDIO_TRACKS",
    "SharedProfile",
]

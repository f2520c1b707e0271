"""
Application layer use cases.
Business logic for the band and gig provider marketplace.
"""

from .base_use_case import BaseUseCase, QueryUseCase, CommandUseCase, AuthorizedUseCase
from .profile_use_cases import (
    CreateOrUpdateProfileUseCase,
    GetProfileByIdUseCase,
    GetOwnProfileUseCase
)
from .listing_use_cases import ListProfilesUseCase, ListBandsUseCase, ListGigProvidersUseCase
from .shared_profile_use_cases import (
    ShareProfileUseCase,
    ListSharedProfilesUseCase,
    DeleteSharedProfileUseCase
)
from .audio_track_use_cases import (
    SetAudioTracksUseCase,
    UploadAudioTrackUseCase,
    RemoveAudioTrackUseCase,
    parse_audio_tracks
)

__all__ = [
    # Base Use Cases
    "BaseUseCase",
    "QueryUseCase",
    "CommandUseCase",
    "AuthorizedUseCase",

    # Profile Use Cases
    "CreateOrUpdateProfileUseCase",
    "GetProfileByIdUseCase",
    "GetOwnProfileUseCase",

    # Listing Use Cases
    "ListProfilesUseCase",
    "ListBandsUseCase",
    "ListGigProvidersUseCase",

    # Shared Profile Use Cases
    "ShareProfileUseCase",
    "ListSharedProfilesUseCase",
    "DeleteSharedProfileUseCase",

    # Audio Track Use Cases
    "SetAudioTracksUseCase",
    "UploadAudioTrackUseCase",
    "RemoveAudioTrackUseCase",
    "parse_audio_tracks",
]

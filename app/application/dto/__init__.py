"""
Data Transfer Objects for the application layer.
This module exports all DTOs used for request/response handling.
"""

from .base_dto import BaseDTO, RequestDTO, ResponseDTO, PageRequestDTO, PageResponseDTO, page_count
from .profile_dto import (
    CreateOrUpdateProfileRequestDTO,
    AudioTrackDTO,
    ProfileResponseDTO,
    BandResponseDTO,
    GigProviderResponseDTO,
    ProfileViewResponseDTO,
    OwnProfileResponseDTO,
    BandPageResponseDTO,
    GigProviderPageResponseDTO,
    ListProfilesRequestDTO,
    profile_to_response_dto
)
from .shared_profile_dto import (
    ShareProfileRequestDTO,
    SharerResponseDTO,
    SharedProfileResponseDTO,
    SharedProfilePageResponseDTO,
    DeleteResultResponseDTO
)
from .audio_track_dto import (
    SetAudioTracksRequestDTO,
    UploadAudioTrackRequestDTO,
    AudioTrackResultResponseDTO
)

__all__ = [
    "BaseDTO",
    "RequestDTO",
    "ResponseDTO",
    "PageRequestDTO",
    "PageResponseDTO",
    "page_count",
    "ListProfilesRequestDTO",
    "CreateOrUpdateProfileRequestDTO",
    "AudioTrackDTO",
    "ProfileResponseDTO",
    "BandResponseDTO",
    "GigProviderResponseDTO",
    "ProfileViewResponseDTO",
    "OwnProfileResponseDTO",
    "BandPageResponseDTO",
    "GigProviderPageResponseDTO",
    "profile_to_response_dto",
    "ShareProfileRequestDTO",
    "SharerResponseDTO",
    "SharedProfileResponseDTO",
    "SharedProfilePageResponseDTO",
    "DeleteResultResponseDTO",
    "SetAudioTracksRequestDTO",
    "UploadAudioTrackRequestDTO",
    "AudioTrackResultResponseDTO",
]

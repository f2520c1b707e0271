"""
Audio track DTOs for the application layer.
"""

from typing import Any, Optional
from pydantic import Field

from .base_dto import RequestDTO, ResponseDTO
from .profile_dto import AudioTrackDTO


class SetAudioTracksRequestDTO(RequestDTO):
    """
    DTO for replacing the caller's track list.
    The payload shape is checked by the use case, which reports a
    ValidationError when it is not a list of {name, url} objects.
    """

    audio_tracks: Any = Field(default=None, description="Full ordered track list, may be empty")


class UploadAudioTrackRequestDTO(RequestDTO):
    """An audio file received from the client."""

    filename: str = Field(min_length=1)
    content: bytes
    content_type: Optional[str] = None


class AudioTrackResultResponseDTO(ResponseDTO):
    """Result of an upload or removal."""

    track: AudioTrackDTO
    slots_remaining: int

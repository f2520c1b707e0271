"""
Shared profile DTOs for the application layer.
Data Transfer Objects for profile sharing operations.
"""

from typing import Optional, List
from datetime import datetime
from pydantic import Field

from app.domain.models.shared_profile import SharedProfile
from .base_dto import RequestDTO, ResponseDTO
from .profile_dto import BandResponseDTO, GigProviderResponseDTO, profile_to_response_dto


# Request DTOs
class ShareProfileRequestDTO(RequestDTO):
    """DTO for sharing the caller's profile with another user."""

    target_user_id: str = Field(min_length=1, description="Internal ID of the recipient")
    share_message: Optional[str] = Field(default=None, max_length=2000, description="Message shown to the recipient")


# Response DTOs
class SharerResponseDTO(ResponseDTO):
    """The user who shared a profile, with their profile row."""

    id: str
    name: Optional[str] = None
    image_url: Optional[str] = None
    profile_type: Optional[str] = None
    band: Optional[BandResponseDTO] = None
    gig_provider: Optional[GigProviderResponseDTO] = None


class SharedProfileResponseDTO(ResponseDTO):
    """A share edge."""

    id: str
    user_id: str
    shared_by: str
    profile_type: str
    share_message: Optional[str] = None
    share_date: Optional[datetime] = None
    user: Optional[SharerResponseDTO] = None

    @classmethod
    def from_domain(cls, shared_profile: SharedProfile) -> "SharedProfileResponseDTO":
        sharer = None
        if shared_profile.sharer is not None:
            profile_dto = None
            if shared_profile.sharer_profile is not None:
                profile_dto = profile_to_response_dto(shared_profile.sharer_profile)
            sharer = SharerResponseDTO(
                id=shared_profile.sharer.id,
                name=shared_profile.sharer.name,
                image_url=shared_profile.sharer.image_url,
                profile_type=shared_profile.sharer.profile_type.value if shared_profile.sharer.profile_type else None,
                band=profile_dto if isinstance(profile_dto, BandResponseDTO) else None,
                gig_provider=profile_dto if isinstance(profile_dto, GigProviderResponseDTO) else None,
            )

        return cls(
            id=shared_profile.id,
            user_id=shared_profile.user_id,
            shared_by=shared_profile.shared_by,
            profile_type=shared_profile.profile_type.value,
            share_message=shared_profile.share_message,
            share_date=shared_profile.share_date,
            user=sharer,
        )


class SharedProfilePageResponseDTO(ResponseDTO):
    """A page of profiles shared with the caller."""

    profiles: List[SharedProfileResponseDTO] = Field(default_factory=list)
    total_pages: int
    current_page: int


class DeleteResultResponseDTO(ResponseDTO):
    """Result of a delete."""

    success: bool = True

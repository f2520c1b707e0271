"""
Profile DTOs for the application layer.
Data Transfer Objects for band and gig provider profile operations.
"""

from typing import Annotated, Optional, List, Dict, Any, Union, Literal
from datetime import datetime
from pydantic import Field

from app.domain.models.profile import Profile, Band, GigProvider, AudioTrack
from app.domain.models.user import User
from .base_dto import RequestDTO, ResponseDTO, PageRequestDTO, PageResponseDTO


# Request DTOs
class CreateOrUpdateProfileRequestDTO(RequestDTO):
    """
    DTO for profile upsert requests.
    Required fields are checked by the use case so that a missing one is a
    domain validation error rather than a schema error.
    """

    name: Optional[str] = Field(default=None, max_length=255, description="Display name")
    image_url: Optional[str] = Field(default=None, description="Avatar image URL")
    profile_type: Optional[str] = Field(default=None, description="band or gigProvider")
    location: Optional[str] = Field(default=None, max_length=255, description="City or address")
    latitude: Optional[float] = Field(default=None, ge=-90, le=90)
    longitude: Optional[float] = Field(default=None, ge=-180, le=180)
    description: Optional[str] = None
    website: Optional[str] = None
    genre: Optional[str] = Field(default=None, description="Band only")
    services: Optional[str] = Field(default=None, description="Gig provider only")
    video_url: Optional[str] = Field(default=None, description="Band only")
    email: Optional[str] = None
    phone_number: Optional[str] = None
    header_image: Optional[str] = None
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    band_members: Optional[List[Any]] = Field(default=None, description="Band only")
    photos: Optional[List[str]] = None

    def profile_changes(self) -> Dict[str, Any]:
        """Field values the client sent, to copy onto the stored profile."""
        return self.model_dump(exclude_unset=True, exclude={"profile_type"})


# Response DTOs
class AudioTrackDTO(ResponseDTO):
    """A stored audio track."""

    name: str
    url: str

    @classmethod
    def from_domain(cls, track: AudioTrack) -> "AudioTrackDTO":
        return cls(name=track.name, url=track.url)


class ProfileResponseDTO(ResponseDTO):
    """Fields common to band and gig provider rows."""

    id: Optional[str] = None
    user_id: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    header_image: Optional[str] = None
    location: Optional[str] = None
    latitude: Optional[float] = None
    longitude: Optional[float] = None
    description: Optional[str] = None
    website: Optional[str] = None
    email: Optional[str] = None
    phone_number: Optional[str] = None
    facebook_url: Optional[str] = None
    instagram_url: Optional[str] = None
    photos: List[str] = Field(default_factory=list)
    audio_tracks: List[AudioTrackDTO] = Field(default_factory=list)
    created_at: Optional[datetime] = None

    @classmethod
    def _common_fields(cls, profile: Profile) -> Dict[str, Any]:
        return {
            "id": profile.id,
            "user_id": profile.user_id,
            "name": profile.name,
            "image_url": profile.image_url,
            "header_image": profile.header_image,
            "location": profile.location,
            "latitude": profile.latitude,
            "longitude": profile.longitude,
            "description": profile.description,
            "website": profile.website,
            "email": profile.email,
            "phone_number": profile.phone_number,
            "facebook_url": profile.facebook_url,
            "instagram_url": profile.instagram_url,
            "photos": list(profile.photos or []),
            "audio_tracks": [AudioTrackDTO.from_domain(t) for t in profile.audio_tracks],
            "created_at": profile.created_at,
        }


class BandResponseDTO(ProfileResponseDTO):
    """Band row."""

    profile_type: Literal["band"] = "band"
    genre: Optional[str] = None
    video_url: Optional[str] = None
    band_members: Optional[List[Any]] = None

    @classmethod
    def from_domain(cls, band: Band) -> "BandResponseDTO":
        return cls(
            genre=band.genre,
            video_url=band.video_url,
            band_members=band.band_members,
            **cls._common_fields(band),
        )


class GigProviderResponseDTO(ProfileResponseDTO):
    """Gig provider row."""

    profile_type: Literal["gigProvider"] = "gigProvider"
    services: Optional[str] = None

    @classmethod
    def from_domain(cls, gig_provider: GigProvider) -> "GigProviderResponseDTO":
        return cls(services=gig_provider.services, **cls._common_fields(gig_provider))


ProfileRowDTO = Annotated[Union[BandResponseDTO, GigProviderResponseDTO], Field(discriminator="profile_type")]


def profile_to_response_dto(profile: Profile) -> ProfileRowDTO:
    """Build the response DTO matching the profile kind."""
    if isinstance(profile, Band):
        return BandResponseDTO.from_domain(profile)
    return GigProviderResponseDTO.from_domain(profile)


class ProfileViewResponseDTO(ResponseDTO):
    """
    Public view of a user and their profile.
    ``profile`` carries the type fields plus ``userId`` and ``externalAuthId``.
    """

    name: str = ""
    image_url: str = ""
    profile_type: Optional[str] = None
    profile: Dict[str, Any] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, user: User, profile: Optional[Profile]) -> "ProfileViewResponseDTO":
        profile_data: Dict[str, Any] = {}
        if profile is not None:
            profile_data = profile_to_response_dto(profile).model_dump(by_alias=True, mode="json")
        profile_data["userId"] = user.id
        profile_data["externalAuthId"] = user.external_auth_id

        return cls(
            name=user.name or "",
            image_url=user.image_url or "",
            profile_type=profile.profile_type.value if profile is not None else None,
            profile=profile_data,
        )


class OwnProfileResponseDTO(ResponseDTO):
    """The caller's own profile with location shortcuts."""

    name: str = ""
    image_url: str = ""
    profile_type: Optional[str] = None
    profile: Optional[ProfileRowDTO] = None
    location: str = ""
    latitude: Optional[float] = None
    longitude: Optional[float] = None

    @classmethod
    def from_domain(cls, user: User, profile: Optional[Profile]) -> "OwnProfileResponseDTO":
        return cls(
            name=user.name or "",
            image_url=user.image_url or "",
            profile_type=user.profile_type.value if user.profile_type else None,
            profile=profile_to_response_dto(profile) if profile is not None else None,
            location=(profile.location if profile is not None else None) or "",
            latitude=profile.latitude if profile is not None else None,
            longitude=profile.longitude if profile is not None else None,
        )


class BandPageResponseDTO(PageResponseDTO[BandResponseDTO]):
    """A page of bands."""
    pass


class GigProviderPageResponseDTO(PageResponseDTO[GigProviderResponseDTO]):
    """A page of gig providers."""
    pass


class ListProfilesRequestDTO(PageRequestDTO):
    """Listing parameters with an optional free-text filter."""

    query: Optional[str] = Field(default=None, description="Case-insensitive substring filter")

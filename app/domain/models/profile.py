"""
Band and gig provider profile models.
Each profile is owned 1:1 by a User and embeds an ordered list of audio tracks.
"""

from dataclasses import dataclass, field
from typing import Optional, List, Any, Dict, ClassVar, Tuple
from urllib.parse import urlparse

from app.domain.models.base import BaseEntity, ValidationError
from app.domain.models.user import ProfileType


MAX_AUDIO_TRACKS = 4


@dataclass(frozen=True)
class AudioTrack:
    """A named reference to an externally stored audio file."""

    name: str
    url: str

    def __post_init__(self):
        self.validate()

    def validate(self) -> None:
        if not isinstance(self.name, str) or not self.name.strip():
            raise ValidationError("Audio track name is required", "name")
        if not isinstance(self.url, str) or not is_valid_url(self.url):
            raise ValidationError(f"Invalid audio track URL: {self.url!r}", "url")

    @classmethod
    def from_dict(cls, data: Any) -> "AudioTrack":
        """Build a track from a raw mapping, raising ValidationError on bad shape."""
        if not isinstance(data, dict):
            raise ValidationError("Audio track must be an object with name and url")
        return cls(name=data.get("name"), url=data.get("url"))

    def to_dict(self) -> Dict[str, str]:
        return {"name": self.name, "url": self.url}


def is_valid_url(value: str) -> bool:
    """Check that a string is an absolute http(s) URL."""
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


@dataclass
class Profile(BaseEntity):
    """
    Fields shared by band and gig provider profiles.
    Subclasses list their writable attributes in UPDATABLE_FIELDS.
    """

    PROFILE_TYPE: ClassVar[ProfileType]
    UPDATABLE_FIELDS: ClassVar[Tuple[str, ...]] = (
        "name", "image_url", "header_image", "location", "latitude", "longitude",
        "description", "website", "email", "phone_number", "facebook_url",
        "instagram_url", "photos",
    )
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ()

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
    photos: List[str] = field(default_factory=list)
    audio_tracks: List[AudioTrack] = field(default_factory=list)

    def apply_changes(self, changes: Dict[str, Any]) -> None:
        """Copy writable attributes from a change set, ignoring foreign keys."""
        for name in self.UPDATABLE_FIELDS:
            if name in changes:
                value = changes[name]
                if name == "photos" and value is None:
                    value = []
                setattr(self, name, value)

    def replace_audio_tracks(self, tracks: List[AudioTrack]) -> None:
        """Replace the whole track list."""
        if len(tracks) > MAX_AUDIO_TRACKS:
            raise ValidationError(
                f"Maximum {MAX_AUDIO_TRACKS} audio tracks allowed", "audio_tracks"
            )
        self.audio_tracks = list(tracks)

    @property
    def profile_type(self) -> ProfileType:
        return self.PROFILE_TYPE


@dataclass
class Band(Profile):
    """Band profile."""

    PROFILE_TYPE: ClassVar[ProfileType] = ProfileType.BAND
    UPDATABLE_FIELDS: ClassVar[Tuple[str, ...]] = Profile.UPDATABLE_FIELDS + (
        "genre", "video_url", "band_members",
    )
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "genre", "location", "description")

    genre: Optional[str] = None
    video_url: Optional[str] = None
    band_members: Optional[List[Any]] = None


@dataclass
class GigProvider(Profile):
    """Gig provider (venue, promoter, event organizer) profile."""

    PROFILE_TYPE: ClassVar[ProfileType] = ProfileType.GIG_PROVIDER
    UPDATABLE_FIELDS: ClassVar[Tuple[str, ...]] = Profile.UPDATABLE_FIELDS + ("services",)
    SEARCH_FIELDS: ClassVar[Tuple[str, ...]] = ("name", "services", "location", "description")

    services: Optional[str] = None


PROFILE_CLASSES = {
    ProfileType.BAND: Band,
    ProfileType.GIG_PROVIDER: GigProvider,
}

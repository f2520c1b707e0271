"""
User domain model.
Represents an account holder linked to an external identity, optionally
carrying a band or gig provider profile.
"""

from dataclasses import dataclass
from typing import Optional
from enum import Enum

from app.domain.models.base import BaseEntity, ValidationError


class ProfileType(str, Enum):
    """The two mutually exclusive profile kinds a user may adopt."""
    BAND = "band"
    GIG_PROVIDER = "gigProvider"

    @property
    def opposite(self) -> "ProfileType":
        """Profile kind on the other side of the marketplace."""
        if self is ProfileType.BAND:
            return ProfileType.GIG_PROVIDER
        return ProfileType.BAND

    @classmethod
    def parse(cls, value) -> "ProfileType":
        """Parse a raw profile type, raising ValidationError when unknown."""
        if isinstance(value, cls):
            return value
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Invalid profile type: {value}", "profile_type")


@dataclass
class User(BaseEntity):
    """
    User entity.
    Created on the first authenticated profile write and never hard-deleted.
    """

    external_auth_id: Optional[str] = None
    name: Optional[str] = None
    image_url: Optional[str] = None
    email: str = ""
    profile_type: Optional[ProfileType] = None

    def __post_init__(self):
        if isinstance(self.profile_type, str):
            self.profile_type = ProfileType.parse(self.profile_type)
        self.validate()

    def validate(self) -> None:
        """Validate user state."""
        if not self.external_auth_id:
            raise ValidationError("External auth ID is required", "external_auth_id")

    def adopt_profile(self, profile_type: ProfileType, name: str, image_url: str) -> None:
        """Set the profile kind and display fields from a profile write."""
        self.profile_type = profile_type
        self.name = name
        self.image_url = image_url

    @property
    def has_profile(self) -> bool:
        """Check if the user already picked a profile kind."""
        return self.profile_type is not None

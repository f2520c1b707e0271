"""
Shared profile domain model.
A directed recommendation edge: the owner of one profile shares it with a
user of the opposite profile kind.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional, Any

from app.domain.models.base import BaseEntity, ValidationError
from app.domain.models.user import User, ProfileType


@dataclass
class SharedProfile(BaseEntity):
    """
    Shared profile entity.

    ``user_id`` is the profile being shared (the sharer's own), ``shared_by``
    is the recipient. ``profile_type`` duplicates the sharer's kind for filtering.
    """

    user_id: Optional[str] = None
    shared_by: Optional[str] = None
    profile_type: Optional[ProfileType] = None
    share_message: Optional[str] = None
    share_date: Optional[datetime] = None

    # Populated on reads joined with the sharer's user and profile rows
    sharer: Optional[User] = None
    sharer_profile: Optional[Any] = None

    @classmethod
    def create(cls, sharer: User, recipient: User, share_message: Optional[str] = None) -> "SharedProfile":
        """
        Create a share edge from sharer to recipient.

        Raises:
            ValidationError: If the sharer has no profile or both users have the same kind
        """
        if not sharer.has_profile:
            raise ValidationError("Create a profile before sharing it", "profile_type")
        if sharer.profile_type == recipient.profile_type:
            raise ValidationError("Cannot share profile to the same profile type", "profile_type")

        return cls(
            user_id=sharer.id,
            shared_by=recipient.id,
            profile_type=sharer.profile_type,
            share_message=share_message,
            share_date=datetime.utcnow(),
        )

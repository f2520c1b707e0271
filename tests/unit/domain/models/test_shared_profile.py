"""
Unit tests for SharedProfile domain model.
"""

import pytest
from app.domain.models.base import ValidationError
from app.domain.models.shared_profile import SharedProfile
from app.domain.models.user import User, ProfileType


def make_user(user_id, profile_type=None):
    return User(id=user_id, external_auth_id=f"ext-{user_id}", profile_type=profile_type)


class TestSharedProfile:
    """Test cases for SharedProfile domain model."""

    def test_create_cross_type_share(self):
        """Sharing records the sharer's profile and the recipient."""
        sharer = make_user("band-1", ProfileType.BAND)
        recipient = make_user("gig-1", ProfileType.GIG_PROVIDER)

        shared = SharedProfile.create(sharer, recipient, "Check us out")

        assert shared.user_id == "band-1"
        assert shared.shared_by == "gig-1"
        assert shared.profile_type == ProfileType.BAND
        assert shared.share_message == "Check us out"
        assert shared.share_date is not None

    def test_same_type_share_rejected(self):
        sharer = make_user("band-1", ProfileType.BAND)
        recipient = make_user("band-2", ProfileType.BAND)

        with pytest.raises(ValidationError, match="same profile type"):
            SharedProfile.create(sharer, recipient)

    def test_share_to_self_rejected(self):
        sharer = make_user("band-1", ProfileType.BAND)

        with pytest.raises(ValidationError):
            SharedProfile.create(sharer, sharer)

    def test_sharer_without_profile_rejected(self):
        """Test a user must have a profile before sharing it."""
        sharer = make_user("u-1")
        recipient = make_user("gig-1", ProfileType.GIG_PROVIDER)

        with pytest.raises(ValidationError, match="Create a profile"):
            SharedProfile.create(sharer, recipient)

    def test_recipient_without_profile_allowed(self):
        sharer = make_user("gig-1", ProfileType.GIG_PROVIDER)
        recipient = make_user("u-1")

        shared = SharedProfile.create(sharer, recipient)

        assert shared.profile_type == ProfileType.GIG_PROVIDER

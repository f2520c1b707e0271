"""
Unit tests for SQLAlchemySharedProfileRepository against an in-memory database.
"""

from datetime import datetime

from app.domain.models.shared_profile import SharedProfile
from app.domain.models.user import ProfileType


class TestSharedProfileRepository:
    """Test cases for SQLAlchemySharedProfileRepository."""

    def _share(self, repository, sharer, recipient, when, message=None):
        shared = SharedProfile.create(sharer, recipient, message)
        shared.share_date = when
        return repository.save(shared)

    def test_find_for_recipient_joins_sharer(self, band_user, gig_user, shared_profile_repository):
        self._share(shared_profile_repository, band_user, gig_user, datetime(2024, 1, 1), "Hi")

        items, total = shared_profile_repository.find_for_recipient(gig_user.id, ProfileType.BAND)

        assert total == 1
        assert items[0].user_id == band_user.id
        assert items[0].sharer.id == band_user.id
        assert items[0].sharer_profile.name == "The Strokes"
        assert items[0].share_message == "Hi"

    def test_find_for_recipient_newest_first(self, make_user, gig_user, shared_profile_repository):
        first = make_user("b1", ProfileType.BAND, name="First")
        second = make_user("b2", ProfileType.BAND, name="Second")
        self._share(shared_profile_repository, first, gig_user, datetime(2024, 1, 1))
        self._share(shared_profile_repository, second, gig_user, datetime(2024, 2, 1))

        items, _ = shared_profile_repository.find_for_recipient(gig_user.id, ProfileType.BAND)

        assert [item.user_id for item in items] == [second.id, first.id]

    def test_find_for_recipient_filters_kind(self, band_user, gig_user, shared_profile_repository):
        self._share(shared_profile_repository, band_user, gig_user, datetime(2024, 1, 1))

        items, total = shared_profile_repository.find_for_recipient(gig_user.id, ProfileType.GIG_PROVIDER)

        assert items == []
        assert total == 0

    def test_duplicate_edges_allowed(self, band_user, gig_user, shared_profile_repository):
        self._share(shared_profile_repository, band_user, gig_user, datetime(2024, 1, 1))
        self._share(shared_profile_repository, band_user, gig_user, datetime(2024, 1, 2))

        _, total = shared_profile_repository.find_for_recipient(gig_user.id, ProfileType.BAND)

        assert total == 2

    def test_delete_only_by_recipient(self, band_user, gig_user, shared_profile_repository):
        shared = self._share(shared_profile_repository, band_user, gig_user, datetime(2024, 1, 1))

        assert shared_profile_repository.delete_for_recipient(shared.id, band_user.id) == 0
        assert shared_profile_repository.delete_for_recipient(shared.id, gig_user.id) == 1
        assert shared_profile_repository.delete_for_recipient(shared.id, gig_user.id) == 0

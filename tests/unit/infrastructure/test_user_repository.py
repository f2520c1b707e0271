"""
Unit tests for SQLAlchemyUserRepository against an in-memory database.
"""

from app.domain.models.user import User, ProfileType


class TestUserRepository:
    """Test cases for SQLAlchemyUserRepository."""

    def test_save_and_find(self, user_repository):
        user = user_repository.save(User(external_auth_id="ext-1", email="a@example.com"))

        assert user.id is not None
        assert user_repository.find_by_id(user.id).external_auth_id == "ext-1"
        assert user_repository.find_by_external_id("ext-1").id == user.id

    def test_find_by_any_id(self, user_repository):
        """Either the internal or the external ID finds the user."""
        user = user_repository.save(User(external_auth_id="ext-1"))

        assert user_repository.find_by_any_id(user.id).id == user.id
        assert user_repository.find_by_any_id("ext-1").id == user.id
        assert user_repository.find_by_any_id("missing") is None

    def test_update_existing(self, user_repository):
        user = user_repository.save(User(external_auth_id="ext-1"))
        user.adopt_profile(ProfileType.BAND, "The Band", "https://img.example.com/a.png")

        user_repository.save(user)

        stored = user_repository.find_by_external_id("ext-1")
        assert stored.profile_type == ProfileType.BAND
        assert stored.name == "The Band"

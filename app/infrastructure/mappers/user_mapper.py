"""
User mapper for converting between domain entities and database models.
"""

from app.domain.models.user import User
from app.infrastructure.db.models import UserModel


class UserMapper:
    """Maps between User domain entity and UserModel database model."""

    def domain_to_model(self, user: User) -> UserModel:
        """Convert User domain entity to UserModel."""
        model = UserModel(
            id=user.id,
            external_auth_id=user.external_auth_id,
            name=user.name,
            image_url=user.image_url,
            email=user.email or "",
            profile_type=user.profile_type,
        )
        if user.created_at is not None:
            model.created_at = user.created_at
        return model

    def update_model(self, model: UserModel, user: User) -> None:
        """Copy mutable user fields onto an existing row."""
        model.name = user.name
        model.image_url = user.image_url
        model.email = user.email or ""
        model.profile_type = user.profile_type

    def model_to_domain(self, model: UserModel) -> User:
        """Convert UserModel to User domain entity."""
        return User(
            id=model.id,
            created_at=model.created_at,
            external_auth_id=model.external_auth_id,
            name=model.name,
            image_url=model.image_url,
            email=model.email or "",
            profile_type=model.profile_type,
        )

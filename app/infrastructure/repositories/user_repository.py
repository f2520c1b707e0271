"""
User repository implementation using SQLAlchemy.
"""

from typing import Optional
from sqlalchemy.orm import Session
from sqlalchemy import or_

from app.domain.models.user import User
from app.domain.models.base import EntityNotFoundError, new_id
from app.domain.repositories.user_repository import UserRepositoryInterface
from app.infrastructure.db.models import UserModel
from app.infrastructure.mappers.user_mapper import UserMapper


class SQLAlchemyUserRepository(UserRepositoryInterface):
    """SQLAlchemy implementation of user repository."""

    def __init__(self, session: Session):
        self.session = session
        self.mapper = UserMapper()

    def save(self, user: User) -> User:
        """Save a user entity."""
        if user.is_new:
            user.id = new_id()
            model = self.mapper.domain_to_model(user)
            self.session.add(model)
        else:
            model = self.session.query(UserModel).filter_by(id=user.id).first()
            if not model:
                raise EntityNotFoundError("User", user.id)
            self.mapper.update_model(model, user)

        self.session.flush()
        user.created_at = model.created_at
        return user

    def find_by_id(self, user_id: str) -> Optional[User]:
        """Get user by ID."""
        model = self.session.query(UserModel).filter_by(id=user_id).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    def find_by_external_id(self, external_auth_id: str) -> Optional[User]:
        """Get user by identity provider subject."""
        model = self.session.query(UserModel).filter_by(
            external_auth_id=external_auth_id
        ).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

    def find_by_any_id(self, identifier: str) -> Optional[User]:
        """Get user by internal ID or external auth ID."""
        model = self.session.query(UserModel).filter(
            or_(
                UserModel.id == identifier,
                UserModel.external_auth_id == identifier
            )
        ).first()
        if not model:
            return None
        return self.mapper.model_to_domain(model)

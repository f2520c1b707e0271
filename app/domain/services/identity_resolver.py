"""
Identity resolver.
Maps an authenticated external identity to the internal user row.
"""

from typing import Optional

from app.domain.models.base import AuthenticationError, EntityNotFoundError
from app.domain.models.user import User
from app.domain.repositories.user_repository import UserRepositoryInterface


class IdentityResolver:
    """Resolves callers to internal users; never falls back to an anonymous identity."""

    def __init__(self, user_repository: UserRepositoryInterface):
        self.user_repository = user_repository

    def resolve(self, external_id: Optional[str]) -> User:
        """
        Get the internal user for an external identity.

        Raises:
            AuthenticationError: If no external identity is given
            EntityNotFoundError: If no user row exists for it
        """
        if not external_id:
            raise AuthenticationError()

        user = self.user_repository.find_by_external_id(external_id)
        if user is None:
            raise EntityNotFoundError("User", message="User not found in database")
        return user

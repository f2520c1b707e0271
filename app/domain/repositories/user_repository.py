"""
User repository interface.
Defines the contract for user data persistence operations.
"""

from abc import ABC, abstractmethod
from typing import Optional

from app.domain.models.user import User


class UserRepositoryInterface(ABC):
    """
    Repository interface for User entities.
    Defines all operations needed for user data persistence.
    """

    @abstractmethod
    def save(self, user: User) -> User:
        """
        Save a user entity.
        Inserts when new, otherwise updates the row with the same ID.
        """
        pass

    @abstractmethod
    def find_by_id(self, user_id: str) -> Optional[User]:
        """
        Find a user by internal ID.
        """
        pass

    @abstractmethod
    def find_by_external_id(self, external_auth_id: str) -> Optional[User]:
        """
        Find a user by the identity provider subject.
        """
        pass

    @abstractmethod
    def find_by_any_id(self, identifier: str) -> Optional[User]:
        """
        Find a user whose internal ID or external auth ID equals the identifier.
        """
        pass

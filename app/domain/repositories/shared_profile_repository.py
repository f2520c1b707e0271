"""
Shared profile repository interface.
Defines the contract for share edge persistence operations.
"""

from abc import ABC, abstractmethod
from typing import List, Tuple

from app.domain.models.shared_profile import SharedProfile
from app.domain.models.user import ProfileType


class SharedProfileRepository(ABC):
    """
    Repository interface for SharedProfile edges.
    """

    @abstractmethod
    def save(self, shared_profile: SharedProfile) -> SharedProfile:
        """
        Insert a new share edge.
        """
        pass

    @abstractmethod
    def find_for_recipient(self, recipient_id: str, sharer_type: ProfileType,
                           page: int = 1, limit: int = 9) -> Tuple[List[SharedProfile], int]:
        """
        Find edges shared with a recipient by users of the given profile kind,
        newest share first, joined with the sharer's user and profile.
        Returns the page items and the total match count.
        """
        pass

    @abstractmethod
    def delete_for_recipient(self, shared_profile_id: str, recipient_id: str) -> int:
        """
        Delete an edge only when the recipient matches.
        Returns the number of deleted rows.
        """
        pass

"""
Profile repository interface.
Defines the contract for band and gig provider persistence.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Tuple

from app.domain.models.profile import Profile, AudioTrack
from app.domain.models.user import ProfileType


class ProfileRepository(ABC):
    """
    Repository interface for Band and GigProvider profiles.
    Both kinds are keyed by the owning user's ID.
    """

    @abstractmethod
    def save(self, profile: Profile) -> Profile:
        """
        Upsert a profile keyed on its user ID.
        Returns the stored profile with ID and creation time set.
        """
        pass

    @abstractmethod
    def find_by_user_id(self, profile_type: ProfileType, user_id: str) -> Optional[Profile]:
        """
        Find the profile of the given kind owned by a user.
        """
        pass

    @abstractmethod
    def update_audio_tracks(self, profile_type: ProfileType, profile_id: str,
                            tracks: List[AudioTrack]) -> Profile:
        """
        Replace the stored audio track list in a single row update.
        """
        pass

    @abstractmethod
    def search(self, profile_type: ProfileType, query: Optional[str] = None,
               page: int = 1, limit: int = 9) -> Tuple[List[Profile], int]:
        """
        List profiles of a kind, newest first, optionally filtered by a
        case-insensitive substring over the kind's search fields.
        Returns the page items and the total match count.
        """
        pass

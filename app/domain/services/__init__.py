"""
Domain services for the gig marketplace.
This module exports all domain services for complex business logic.
"""

from .blob_store import BlobStore
from .audio_track_manager import AudioTrackManager
from .identity_resolver import IdentityResolver
from .media_url import with_media_flag, normalize_tracks

__all__ = [
    "BlobStore",
    "AudioTrackManager",
    "IdentityResolver",
    "with_media_flag",
    "normalize_tracks",
]

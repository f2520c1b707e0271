"""
Audio track lifecycle against the blob store.

The stored track list only changes through whole-list replacement. Upload
writes the blob first and the metadata second, so a failed metadata write
leaves an orphaned blob (tolerated). Removal drops the entry, tries to delete
the blob, then writes the metadata; a failed metadata write restores the list.
Blobs live under a per-owner prefix and only blobs under the owner's own
prefix are ever deleted.
"""

import logging
import time
from pathlib import Path
from typing import Any, Awaitable, Callable, List, Optional

from app.domain.models.base import ValidationError, EntityNotFoundError
from app.domain.models.profile import AudioTrack, MAX_AUDIO_TRACKS
from app.domain.services.blob_store import BlobStore
from app.domain.services.media_url import same_track_url

logger = logging.getLogger(__name__)

PersistTracks = Callable[[List[AudioTrack]], Awaitable[Any]]

SAFE_FILENAME_CHARS = "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789._-"


class AudioTrackManager:
    """
    Holds a profile's track list in memory and keeps it in step with the
    blob store and the persisted metadata.
    """

    def __init__(
        self,
        blob_store: BlobStore,
        persist: PersistTracks,
        owner_id: str,
        tracks: Optional[List[AudioTrack]] = None,
        max_tracks: int = MAX_AUDIO_TRACKS,
        max_size_bytes: int = 10 * 1024 * 1024,
        folder: str = "audio-tracks",
    ):
        self.blob_store = blob_store
        self.persist = persist
        self.owner_id = owner_id
        self.tracks: List[AudioTrack] = list(tracks or [])
        self.max_tracks = max_tracks
        self.max_size_bytes = max_size_bytes
        self.folder = folder

    @property
    def slots_remaining(self) -> int:
        return max(0, self.max_tracks - len(self.tracks))

    def validate_upload(self, content_type: Optional[str], size: int, count: int = 1) -> None:
        """
        Check type, size and track count before anything is uploaded.

        Raises:
            ValidationError: If the file is not audio, too large or would exceed the limit
        """
        if len(self.tracks) + count > self.max_tracks:
            raise ValidationError(f"Maximum {self.max_tracks} audio tracks allowed", "audio_tracks")
        if not content_type or not content_type.startswith("audio/"):
            raise ValidationError("Only audio files are allowed", "content_type")
        if size > self.max_size_bytes:
            max_mb = self.max_size_bytes / 1024 / 1024
            raise ValidationError(f"Files must be under {max_mb:g}MB", "file")
        if size == 0:
            raise ValidationError("File content is empty", "file")

    @property
    def owner_prefix(self) -> str:
        return f"{self.folder}/{self.owner_id}/"

    def owns_path(self, path: str) -> bool:
        """True when a storage path sits under this owner's prefix."""
        return path.startswith(self.owner_prefix) and ".." not in path.split("/")

    def build_path(self, filename: str) -> str:
        """Owner- and time-namespaced storage path for a new upload."""
        return f"{self.owner_prefix}{int(time.time() * 1000)}-{sanitize_filename(filename)}"

    async def upload(self, filename: str, content: bytes, content_type: Optional[str]) -> AudioTrack:
        """
        Upload one audio file and append it to the track list.

        Returns:
            The new track
        """
        self.validate_upload(content_type, len(content))

        path = self.build_path(filename)
        await self.blob_store.upload(path, content, content_type)
        url = await self.blob_store.get_download_url(path)

        track = AudioTrack(name=filename, url=url)
        previous = list(self.tracks)
        self.tracks.append(track)
        try:
            await self.persist(list(self.tracks))
        except Exception:
            self.tracks = previous
            logger.error(f"Track metadata write failed, blob left orphaned at {path}")
            raise

        logger.info(f"Uploaded audio track {filename!r} to {path}")
        return track

    async def remove(self, url: str) -> AudioTrack:
        """
        Remove the track with the given URL.

        Returns:
            The removed track

        Raises:
            EntityNotFoundError: If no track has that URL
        """
        track = self.find(url)
        if track is None:
            raise EntityNotFoundError("Audio track", url)

        previous = list(self.tracks)
        self.tracks = [t for t in self.tracks if t is not track]

        await self._delete_blob(track)

        try:
            await self.persist(list(self.tracks))
        except Exception:
            self.tracks = previous
            logger.error(f"Track metadata write failed, restored {track.name!r}")
            raise

        logger.info(f"Removed audio track {track.name!r}")
        return track

    def find(self, url: str) -> Optional[AudioTrack]:
        for track in self.tracks:
            if same_track_url(track.url, url):
                return track
        return None

    async def _delete_blob(self, track: AudioTrack) -> None:
        """Best-effort blob deletion; failures are logged and ignored."""
        path = self.blob_store.path_from_url(track.url)
        if path is None:
            logger.warning(f"Could not derive storage path from {track.url}, skipping blob delete")
            return
        if not self.owns_path(path):
            logger.warning(f"Blob {path} is outside {self.owner_prefix}, skipping blob delete")
            return
        try:
            await self.blob_store.delete(path)
        except Exception as e:
            logger.warning(f"Failed to delete blob {path}: {str(e)}")


def sanitize_filename(filename: str) -> str:
    """Sanitize filename for safe storage."""
    safe_name = "".join(c if c in SAFE_FILENAME_CHARS else "_" for c in filename)

    if len(safe_name) > 200:
        name_part = Path(safe_name).stem[:180]
        ext_part = Path(safe_name).suffix
        safe_name = f"{name_part}{ext_part}"

    return safe_name or "track"

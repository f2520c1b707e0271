"""Download URL helpers for audio tracks."""

from typing import List

from app.domain.models.profile import AudioTrack

MEDIA_FLAG = "alt=media"


def with_media_flag(url: str) -> str:
    """
    Make sure a track URL asks the store for the raw media.
    Applying it twice returns the same URL.
    """
    if MEDIA_FLAG in url:
        return url
    return f"{url}&{MEDIA_FLAG}"


def normalize_tracks(tracks) -> List[AudioTrack]:
    """Coerce a stored track list to AudioTrack objects with media URLs."""
    if not isinstance(tracks, list):
        return []
    return [AudioTrack(name=track.name, url=with_media_flag(track.url)) for track in tracks]


def same_track_url(stored_url: str, url: str) -> bool:
    """Compare a stored URL with one that may carry the media flag."""
    return stored_url == url or with_media_flag(stored_url) == with_media_flag(url)

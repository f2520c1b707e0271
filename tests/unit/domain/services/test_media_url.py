"""
Unit tests for track URL normalization.
"""

from app.domain.models.profile import AudioTrack
from app.domain.services.media_url import with_media_flag, normalize_tracks, same_track_url


class TestWithMediaFlag:
    """Test cases for the alt=media rewrite."""

    def test_appends_flag(self):
        assert with_media_flag("https://x/a.mp3") == "https://x/a.mp3&alt=media"

    def test_idempotent(self):
        """Applying the rewrite twice gives the same URL."""
        once = with_media_flag("https://x/a.mp3?token=abc")
        assert with_media_flag(once) == once

    def test_existing_flag_untouched(self):
        url = "https://x/a.mp3?alt=media&token=abc"
        assert with_media_flag(url) == url


class TestNormalizeTracks:
    """Test cases for track list normalization."""

    def test_non_list_reads_as_empty(self):
        assert normalize_tracks(None) == []
        assert normalize_tracks({"name": "Demo"}) == []

    def test_rewrites_every_url(self):
        tracks = [
            AudioTrack(name="Demo", url="https://x/a.mp3"),
            AudioTrack(name="Live", url="https://x/b.mp3&alt=media"),
        ]

        normalized = normalize_tracks(tracks)

        assert [t.url for t in normalized] == [
            "https://x/a.mp3&alt=media",
            "https://x/b.mp3&alt=media",
        ]
        assert [t.name for t in normalized] == ["Demo", "Live"]

    def test_same_track_url(self):
        assert same_track_url("https://x/a.mp3", "https://x/a.mp3&alt=media")
        assert same_track_url("https://x/a.mp3", "https://x/a.mp3")
        assert not same_track_url("https://x/a.mp3", "https://x/b.mp3")

"""
Unit tests for audio track use cases.
"""

import pytest
from unittest.mock import patch

from app.application.dto.audio_track_dto import SetAudioTracksRequestDTO, UploadAudioTrackRequestDTO
from app.application.use_cases.audio_track_use_cases import (
    SetAudioTracksUseCase, UploadAudioTrackUseCase, RemoveAudioTrackUseCase, parse_audio_tracks
)
from app.application.use_cases.profile_use_cases import GetProfileByIdUseCase
from app.domain.models.base import EntityNotFoundError, ExternalServiceError, ValidationError
from app.domain.models.user import ProfileType


STORAGE_BASE_URL = "https://project.supabase.co/storage/v1/object/public/audio-tracks"


def stored_url(user, name="1-a.mp3"):
    return f"{STORAGE_BASE_URL}/audio-tracks/{user.id}/{name}"


def stored_tracks(profile_repository, user):
    return profile_repository.find_by_user_id(ProfileType.BAND, user.id).audio_tracks


async def set_tracks(user_repository, profile_repository, tracks, external_id="ext-band"):
    use_case = SetAudioTracksUseCase(user_repository, profile_repository)
    use_case.set_current_user(external_id)
    return await use_case.execute(SetAudioTracksRequestDTO(audio_tracks=tracks))


def upload_use_case(user_repository, profile_repository, blob_store, external_id="ext-band"):
    use_case = UploadAudioTrackUseCase(user_repository, profile_repository, blob_store)
    use_case.set_current_user(external_id)
    return use_case


def remove_use_case(user_repository, profile_repository, blob_store, external_id="ext-band"):
    use_case = RemoveAudioTrackUseCase(user_repository, profile_repository, blob_store)
    use_case.set_current_user(external_id)
    return use_case


class TestParseAudioTracks:
    """Test cases for track list validation."""

    @pytest.mark.parametrize("payload", [None, "tracks", {"name": "Demo", "url": "https://x/a.mp3"}])
    def test_not_a_list(self, payload):
        with pytest.raises(ValidationError, match="must be an array"):
            parse_audio_tracks(payload)

    def test_empty_list(self):
        assert parse_audio_tracks([]) == []

    def test_too_many(self):
        tracks = [{"name": f"T{i}", "url": f"https://x/{i}.mp3"} for i in range(5)]
        with pytest.raises(ValidationError, match="Maximum 4"):
            parse_audio_tracks(tracks)


class TestSetAudioTracks:
    """Test cases for SetAudioTracksUseCase."""

    @pytest.mark.asyncio
    async def test_replace_list(self, band_user, user_repository, profile_repository):
        tracks = [{"name": "Demo", "url": "https://x/a.mp3"}, {"name": "Live", "url": "https://x/b.mp3"}]

        result = await set_tracks(user_repository, profile_repository, tracks)

        assert [t.model_dump() for t in result.audio_tracks] == tracks
        assert [t.to_dict() for t in stored_tracks(profile_repository, band_user)] == tracks

    @pytest.mark.asyncio
    async def test_empty_list_removes_all(self, band_user, user_repository, profile_repository):
        await set_tracks(user_repository, profile_repository, [{"name": "Demo", "url": "https://x/a.mp3"}])

        await set_tracks(user_repository, profile_repository, [])

        view = await GetProfileByIdUseCase(user_repository, profile_repository).execute(band_user.id)
        assert view.profile["audioTracks"] == []

    @pytest.mark.asyncio
    async def test_malformed_entry_leaves_list_unchanged(self, band_user, user_repository, profile_repository):
        """A missing url rejects the whole list; nothing is written."""
        original = [{"name": "Demo", "url": "https://x/a.mp3"}]
        await set_tracks(user_repository, profile_repository, original)

        with pytest.raises(ValidationError):
            await set_tracks(user_repository, profile_repository, [
                {"name": "New", "url": "https://x/new.mp3"},
                {"name": "Broken"},
            ])

        assert [t.to_dict() for t in stored_tracks(profile_repository, band_user)] == original

    @pytest.mark.asyncio
    async def test_not_an_array(self, band_user, user_repository, profile_repository):
        with pytest.raises(ValidationError, match="must be an array"):
            await set_tracks(user_repository, profile_repository, {"name": "Demo"})

    @pytest.mark.asyncio
    async def test_more_than_four_rejected(self, band_user, user_repository, profile_repository):
        tracks = [{"name": f"T{i}", "url": f"https://x/{i}.mp3"} for i in range(5)]

        with pytest.raises(ValidationError):
            await set_tracks(user_repository, profile_repository, tracks)

        assert stored_tracks(profile_repository, band_user) == []

    @pytest.mark.asyncio
    async def test_caller_without_profile(self, make_user, user_repository, profile_repository):
        make_user("ext-new")

        with pytest.raises(EntityNotFoundError):
            await set_tracks(user_repository, profile_repository, [], external_id="ext-new")

    @pytest.mark.asyncio
    async def test_media_flag_scenario(self, band_user, user_repository, profile_repository):
        await set_tracks(user_repository, profile_repository, [{"name": "Demo", "url": "https://x/a.mp3"}])

        view = await GetProfileByIdUseCase(user_repository, profile_repository).execute(band_user.id)

        assert view.profile["audioTracks"] == [{"name": "Demo", "url": "https://x/a.mp3&alt=media"}]


class TestUploadAudioTrack:
    """Test cases for UploadAudioTrackUseCase."""

    @pytest.mark.asyncio
    async def test_upload_appends_track(self, band_user, user_repository, profile_repository, blob_store):
        use_case = upload_use_case(user_repository, profile_repository, blob_store)

        result = await use_case.execute(
            UploadAudioTrackRequestDTO(filename="demo.mp3", content=b"audio", content_type="audio/mpeg")
        )

        blob_store.upload.assert_awaited_once()
        assert blob_store.upload.await_args.args[0].startswith(f"audio-tracks/{band_user.id}/")
        assert result.track.name == "demo.mp3"
        assert result.slots_remaining == 3
        assert [t.url for t in stored_tracks(profile_repository, band_user)] == [result.track.url]

    @pytest.mark.asyncio
    async def test_rejects_non_audio(self, band_user, user_repository, profile_repository, blob_store):
        use_case = upload_use_case(user_repository, profile_repository, blob_store)

        with pytest.raises(ValidationError, match="Only audio files"):
            await use_case.execute(
                UploadAudioTrackRequestDTO(filename="photo.png", content=b"img", content_type="image/png")
            )

        blob_store.upload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_rejects_fifth_track(self, band_user, user_repository, profile_repository, blob_store):
        await set_tracks(user_repository, profile_repository,
                         [{"name": f"T{i}", "url": f"https://x/{i}.mp3"} for i in range(4)])
        use_case = upload_use_case(user_repository, profile_repository, blob_store)

        with pytest.raises(ValidationError, match="Maximum 4"):
            await use_case.execute(
                UploadAudioTrackRequestDTO(filename="five.mp3", content=b"audio", content_type="audio/mpeg")
            )

        blob_store.upload.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_storage_failure(self, band_user, user_repository, profile_repository, blob_store):
        blob_store.upload.side_effect = ExternalServiceError("Supabase Storage", "down")
        use_case = upload_use_case(user_repository, profile_repository, blob_store)

        with pytest.raises(ExternalServiceError):
            await use_case.execute(
                UploadAudioTrackRequestDTO(filename="demo.mp3", content=b"audio", content_type="audio/mpeg")
            )

        assert stored_tracks(profile_repository, band_user) == []

    @pytest.mark.asyncio
    async def test_metadata_failure_orphans_blob(self, band_user, user_repository, profile_repository, blob_store):
        use_case = upload_use_case(user_repository, profile_repository, blob_store)

        with patch.object(profile_repository, "update_audio_tracks", side_effect=RuntimeError("db down")):
            with pytest.raises(RuntimeError):
                await use_case.execute(
                    UploadAudioTrackRequestDTO(filename="demo.mp3", content=b"audio", content_type="audio/mpeg")
                )

        blob_store.upload.assert_awaited_once()
        blob_store.delete.assert_not_awaited()


class TestRemoveAudioTrack:
    """Test cases for RemoveAudioTrackUseCase."""

    @pytest.mark.asyncio
    async def test_remove_uploaded_track(self, band_user, user_repository, profile_repository, blob_store):
        uploaded = await upload_use_case(user_repository, profile_repository, blob_store).execute(
            UploadAudioTrackRequestDTO(filename="demo.mp3", content=b"audio", content_type="audio/mpeg")
        )
        path = blob_store.upload.await_args.args[0]

        result = await remove_use_case(user_repository, profile_repository, blob_store).execute(
            uploaded.track.url + "&alt=media"
        )

        assert result.track.name == "demo.mp3"
        assert result.slots_remaining == 4
        blob_store.delete.assert_awaited_once_with(path)
        assert stored_tracks(profile_repository, band_user) == []

    @pytest.mark.asyncio
    async def test_blob_delete_failure_swallowed(self, band_user, user_repository, profile_repository, blob_store):
        url = stored_url(band_user)
        await set_tracks(user_repository, profile_repository, [{"name": "Demo", "url": url}])
        blob_store.delete.side_effect = ExternalServiceError("Supabase Storage", "gone")

        await remove_use_case(user_repository, profile_repository, blob_store).execute(url)

        blob_store.delete.assert_awaited_once_with(f"audio-tracks/{band_user.id}/1-a.mp3")
        assert stored_tracks(profile_repository, band_user) == []

    @pytest.mark.asyncio
    async def test_copied_url_does_not_delete_owner_blob(
        self, band_user, make_user, user_repository, profile_repository, blob_store
    ):
        """Removing another user's track URL from your own list leaves their file alone."""
        url = stored_url(band_user, "111-demo.mp3")
        await set_tracks(user_repository, profile_repository, [{"name": "Demo", "url": url}])
        other = make_user("ext-band-2", ProfileType.BAND)
        await set_tracks(user_repository, profile_repository, [{"name": "Copy", "url": url}],
                         external_id="ext-band-2")

        await remove_use_case(user_repository, profile_repository, blob_store, external_id="ext-band-2").execute(url)

        blob_store.delete.assert_not_awaited()
        assert stored_tracks(profile_repository, other) == []
        assert [t.url for t in stored_tracks(profile_repository, band_user)] == [url]

    @pytest.mark.asyncio
    async def test_metadata_failure_surfaces(self, band_user, user_repository, profile_repository, blob_store):
        await set_tracks(user_repository, profile_repository, [{"name": "Demo", "url": "https://x/a.mp3"}])
        use_case = remove_use_case(user_repository, profile_repository, blob_store)

        with patch.object(profile_repository, "update_audio_tracks", side_effect=RuntimeError("db down")):
            with pytest.raises(RuntimeError):
                await use_case.execute("https://x/a.mp3")

        assert [t.url for t in stored_tracks(profile_repository, band_user)] == ["https://x/a.mp3"]

    @pytest.mark.asyncio
    async def test_unknown_track(self, band_user, user_repository, profile_repository, blob_store):
        with pytest.raises(EntityNotFoundError):
            await remove_use_case(user_repository, profile_repository, blob_store).execute("https://x/none.mp3")

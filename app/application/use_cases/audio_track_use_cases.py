"""
Audio track use cases for the application layer.
The stored track list only changes by whole-list replacement; upload and
removal compute the new list and write it the same way.
"""

import logging
from typing import Any, List

from app.application.use_cases.base_use_case import AuthorizedUseCase, CommandUseCase
from app.application.dto.audio_track_dto import (
    SetAudioTracksRequestDTO, UploadAudioTrackRequestDTO, AudioTrackResultResponseDTO
)
from app.application.dto.profile_dto import AudioTrackDTO, ProfileRowDTO, profile_to_response_dto
from app.domain.models.base import EntityNotFoundError, ValidationError
from app.domain.models.profile import AudioTrack, Profile, MAX_AUDIO_TRACKS
from app.domain.repositories.profile_repository import ProfileRepository
from app.domain.repositories.user_repository import UserRepositoryInterface
from app.domain.services.audio_track_manager import AudioTrackManager
from app.domain.services.blob_store import BlobStore


logger = logging.getLogger(__name__)


def parse_audio_tracks(raw_tracks: Any, max_tracks: int = MAX_AUDIO_TRACKS) -> List[AudioTrack]:
    """
    Validate a raw track list in full before anything is written.

    Raises:
        ValidationError: If the payload is not a list, an entry is malformed
            or there are too many entries
    """
    if not isinstance(raw_tracks, list):
        raise ValidationError("audioTracks must be an array", "audio_tracks")

    tracks = []
    for index, entry in enumerate(raw_tracks):
        try:
            tracks.append(AudioTrack.from_dict(entry))
        except ValidationError as e:
            raise ValidationError(f"Invalid audio track at position {index}: {e.message}", "audio_tracks")

    if len(tracks) > max_tracks:
        raise ValidationError(f"Maximum {max_tracks} audio tracks allowed", "audio_tracks")

    return tracks


class AudioTrackUseCase(AuthorizedUseCase, CommandUseCase):
    """Shared plumbing for use cases acting on the caller's track list."""

    def __init__(self, user_repository: UserRepositoryInterface, profile_repository: ProfileRepository):
        super().__init__(user_repository)
        self.profile_repository = profile_repository

    def _load_own_profile(self) -> Profile:
        """
        Get the caller's band or gig provider row.

        Raises:
            EntityNotFoundError: If the caller has no profile yet
        """
        user = self._resolve_current_user()
        profile = None
        if user.has_profile:
            profile = self.profile_repository.find_by_user_id(user.profile_type, user.id)
        if profile is None:
            raise EntityNotFoundError("Profile", message="Create a profile before adding audio tracks")
        return profile

    def _replace_tracks(self, profile: Profile, tracks: List[AudioTrack]) -> Profile:
        """Write the full track list in one row update."""
        profile.replace_audio_tracks(tracks)
        return self.profile_repository.update_audio_tracks(
            profile.profile_type, profile.id, profile.audio_tracks
        )


class SetAudioTracksUseCase(AudioTrackUseCase):
    """
    Use case for replacing the caller's track list.
    An empty list removes every track. A malformed entry rejects the whole
    request and leaves the stored list untouched.
    """

    def __init__(self, user_repository: UserRepositoryInterface, profile_repository: ProfileRepository,
                 max_tracks: int = MAX_AUDIO_TRACKS):
        super().__init__(user_repository, profile_repository)
        self.max_tracks = max_tracks

    async def _validate_request(self, request: SetAudioTracksRequestDTO) -> None:
        await super()._validate_request(request)
        parse_audio_tracks(request.audio_tracks, self.max_tracks)

    async def _execute_command_logic(self, request: SetAudioTracksRequestDTO) -> ProfileRowDTO:
        tracks = parse_audio_tracks(request.audio_tracks, self.max_tracks)
        profile = self._load_own_profile()

        updated = self._replace_tracks(profile, tracks)
        logger.info(f"Set {len(tracks)} audio tracks on profile {updated.id}")

        return profile_to_response_dto(updated)


class BlobTrackUseCase(AudioTrackUseCase):
    """Track list changes that also touch the blob store."""

    def __init__(
        self,
        user_repository: UserRepositoryInterface,
        profile_repository: ProfileRepository,
        blob_store: BlobStore,
        max_tracks: int = MAX_AUDIO_TRACKS,
        max_size_bytes: int = 10 * 1024 * 1024,
        folder: str = "audio-tracks",
    ):
        super().__init__(user_repository, profile_repository)
        self.blob_store = blob_store
        self.max_tracks = max_tracks
        self.max_size_bytes = max_size_bytes
        self.folder = folder

    def _manager_for(self, profile: Profile) -> AudioTrackManager:
        async def persist(tracks: List[AudioTrack]) -> Profile:
            return self._replace_tracks(profile, tracks)

        return AudioTrackManager(
            self.blob_store,
            persist,
            profile.user_id,
            tracks=profile.audio_tracks,
            max_tracks=self.max_tracks,
            max_size_bytes=self.max_size_bytes,
            folder=self.folder,
        )


class UploadAudioTrackUseCase(BlobTrackUseCase):
    """
    Use case for uploading one audio file and appending it to the track list.
    A failed metadata write leaves the uploaded blob orphaned.
    """

    async def _execute_command_logic(self, request: UploadAudioTrackRequestDTO) -> AudioTrackResultResponseDTO:
        profile = self._load_own_profile()
        manager = self._manager_for(profile)

        track = await manager.upload(request.filename, request.content, request.content_type)

        return AudioTrackResultResponseDTO(
            track=AudioTrackDTO.from_domain(track),
            slots_remaining=manager.slots_remaining,
        )


class RemoveAudioTrackUseCase(BlobTrackUseCase):
    """
    Use case for removing one track by URL.
    Blob deletion is best effort; the metadata write must succeed.
    """

    async def _validate_request(self, request: str) -> None:
        await super()._validate_request(request)
        if not request:
            raise ValidationError("Track URL is required", "url")

    async def _execute_command_logic(self, request: str) -> AudioTrackResultResponseDTO:
        profile = self._load_own_profile()
        manager = self._manager_for(profile)

        track = await manager.remove(request)

        return AudioTrackResultResponseDTO(
            track=AudioTrackDTO.from_domain(track),
            slots_remaining=manager.slots_remaining,
        )

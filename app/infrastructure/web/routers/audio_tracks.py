"""
Audio track router.
Handles the caller's track list and audio file uploads.
"""

from typing import Annotated
from fastapi import APIRouter, Depends, File, Query, UploadFile, status

from app.infrastructure.auth import CallerIdentity, get_current_caller
from app.infrastructure.web.dependencies import (
    UserRepositoryDep, ProfileRepositoryDep, BlobStoreDep, SettingsDep
)
from app.application.use_cases.audio_track_use_cases import (
    SetAudioTracksUseCase,
    UploadAudioTrackUseCase,
    RemoveAudioTrackUseCase
)
from app.application.dto.audio_track_dto import (
    SetAudioTracksRequestDTO,
    UploadAudioTrackRequestDTO,
    AudioTrackResultResponseDTO
)
from app.application.dto.profile_dto import ProfileRowDTO


router = APIRouter()


@router.put("", response_model=ProfileRowDTO)
async def set_audio_tracks(
    request: SetAudioTracksRequestDTO,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    profile_repository: ProfileRepositoryDep,
    settings: SettingsDep
):
    """
    Replace the caller's track list.

    - **audioTracks**: full ordered list of `{name, url}`; empty removes all tracks
    """
    use_case = SetAudioTracksUseCase(
        user_repository, profile_repository, max_tracks=settings.max_audio_tracks
    )
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute(request)


@router.post("", status_code=status.HTTP_201_CREATED, response_model=AudioTrackResultResponseDTO)
async def upload_audio_track(
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    profile_repository: ProfileRepositoryDep,
    blob_store: BlobStoreDep,
    settings: SettingsDep,
    file: UploadFile = File(...)
):
    """
    Upload an audio file and append it to the caller's tracks.

    - **file**: audio file under the configured size limit
    """
    content = await file.read()

    use_case = UploadAudioTrackUseCase(
        user_repository,
        profile_repository,
        blob_store,
        max_tracks=settings.max_audio_tracks,
        max_size_bytes=settings.max_audio_size_bytes,
        folder=settings.audio_folder,
    )
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute(
        UploadAudioTrackRequestDTO(
            filename=file.filename or "track",
            content=content,
            content_type=file.content_type,
        )
    )


@router.delete("", response_model=AudioTrackResultResponseDTO)
async def remove_audio_track(
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    profile_repository: ProfileRepositoryDep,
    blob_store: BlobStoreDep,
    settings: SettingsDep,
    url: str = Query(..., description="URL of the track to remove")
):
    """Remove one track by URL and delete its file when possible."""
    use_case = RemoveAudioTrackUseCase(
        user_repository,
        profile_repository,
        blob_store,
        max_tracks=settings.max_audio_tracks,
        max_size_bytes=settings.max_audio_size_bytes,
        folder=settings.audio_folder,
    )
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute(url)

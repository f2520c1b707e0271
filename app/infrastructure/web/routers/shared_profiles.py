"""
Shared profile router.
Handles sharing the caller's profile and managing profiles shared with them.
"""

from typing import Annotated, Optional
from fastapi import APIRouter, Depends, Query, status

from app.infrastructure.auth import CallerIdentity, get_current_caller
from app.infrastructure.web.dependencies import (
    UserRepositoryDep, SharedProfileRepositoryDep, SettingsDep
)
from app.application.use_cases.shared_profile_use_cases import (
    ShareProfileUseCase,
    ListSharedProfilesUseCase,
    DeleteSharedProfileUseCase
)
from app.application.dto.base_dto import PageRequestDTO
from app.application.dto.shared_profile_dto import (
    ShareProfileRequestDTO,
    SharedProfileResponseDTO,
    SharedProfilePageResponseDTO,
    DeleteResultResponseDTO
)


router = APIRouter()


@router.post("", status_code=status.HTTP_201_CREATED, response_model=SharedProfileResponseDTO)
async def share_profile(
    request: ShareProfileRequestDTO,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    repository: SharedProfileRepositoryDep
):
    """
    Share the caller's profile with a user of the opposite profile type.

    - **targetUserId**: internal ID of the recipient
    - **shareMessage**: optional note
    """
    use_case = ShareProfileUseCase(user_repository, repository)
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute(request)


@router.get("", response_model=SharedProfilePageResponseDTO)
async def list_shared_profiles(
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    repository: SharedProfileRepositoryDep,
    settings: SettingsDep,
    page: int = Query(1, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Items per page")
):
    """List profiles shared with the caller, newest first."""
    use_case = ListSharedProfilesUseCase(user_repository, repository)
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute(
        PageRequestDTO(page=page, limit=limit if limit is not None else settings.default_page_size)
    )


@router.delete("/{shared_profile_id}", response_model=DeleteResultResponseDTO)
async def delete_shared_profile(
    shared_profile_id: str,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    repository: SharedProfileRepositoryDep
):
    """Delete a profile shared with the caller. Only the recipient may delete it."""
    use_case = DeleteSharedProfileUseCase(user_repository, repository)
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute(shared_profile_id)

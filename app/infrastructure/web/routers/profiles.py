"""
Profile router.
Handles band and gig provider profile reads and upserts.
"""

from typing import Annotated
from fastapi import APIRouter, Depends

from app.infrastructure.auth import CallerIdentity, get_current_caller
from app.infrastructure.web.dependencies import UserRepositoryDep, ProfileRepositoryDep
from app.application.use_cases.profile_use_cases import (
    CreateOrUpdateProfileUseCase,
    GetProfileByIdUseCase,
    GetOwnProfileUseCase
)
from app.application.dto.profile_dto import (
    CreateOrUpdateProfileRequestDTO,
    ProfileRowDTO,
    ProfileViewResponseDTO,
    OwnProfileResponseDTO
)


router = APIRouter()


@router.put("/me", response_model=ProfileRowDTO)
async def create_or_update_profile(
    request: CreateOrUpdateProfileRequestDTO,
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    profile_repository: ProfileRepositoryDep
):
    """
    Create or update the caller's profile.

    - **name**, **imageUrl**, **profileType**, **location**: required
    - **profileType**: `band` or `gigProvider`
    - Fields that do not apply to the chosen type are ignored
    """
    use_case = CreateOrUpdateProfileUseCase(user_repository, profile_repository)
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute(request)


@router.get("/me", response_model=OwnProfileResponseDTO)
async def get_own_profile(
    caller: Annotated[CallerIdentity, Depends(get_current_caller)],
    user_repository: UserRepositoryDep,
    profile_repository: ProfileRepositoryDep
):
    """Get the caller's own profile as stored."""
    use_case = GetOwnProfileUseCase(user_repository, profile_repository)
    use_case.set_current_user(caller.external_id, caller.email)
    return await use_case.execute()


@router.get("/{profile_id}", response_model=ProfileViewResponseDTO)
async def get_profile(
    profile_id: str,
    user_repository: UserRepositoryDep,
    profile_repository: ProfileRepositoryDep
):
    """
    Get a user's profile.

    - **profile_id**: internal user ID or external identity ID
    """
    use_case = GetProfileByIdUseCase(user_repository, profile_repository)
    return await use_case.execute(profile_id)

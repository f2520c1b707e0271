"""
Profile use cases for the application layer.
Implements business logic for band and gig provider profile operations.
"""

import logging
from typing import Optional

from app.application.use_cases.base_use_case import (
    AuthorizedUseCase, CommandUseCase, QueryUseCase
)
from app.application.dto.profile_dto import (
    CreateOrUpdateProfileRequestDTO, ProfileRowDTO, ProfileViewResponseDTO,
    OwnProfileResponseDTO, profile_to_response_dto
)
from app.domain.models.base import ValidationError, EntityNotFoundError
from app.domain.models.profile import Profile, PROFILE_CLASSES
from app.domain.models.user import User, ProfileType
from app.domain.repositories.profile_repository import ProfileRepository
from app.domain.repositories.user_repository import UserRepositoryInterface
from app.domain.services.media_url import normalize_tracks


logger = logging.getLogger(__name__)

# Attribute name -> wire name
REQUIRED_PROFILE_FIELDS = {
    "name": "name",
    "image_url": "imageUrl",
    "profile_type": "profileType",
    "location": "location",
}


def load_user_profile(profile_repository: ProfileRepository, user: User) -> Optional[Profile]:
    """Get the profile row matching the user's current profile type."""
    if not user.has_profile:
        return None
    return profile_repository.find_by_user_id(user.profile_type, user.id)


class CreateOrUpdateProfileUseCase(AuthorizedUseCase, CommandUseCase[CreateOrUpdateProfileRequestDTO, ProfileRowDTO]):
    """
    Use case for creating or updating the caller's profile.
    Upserts the user keyed by external identity, then the band or gig
    provider row keyed by user ID.
    """

    def __init__(self, user_repository: UserRepositoryInterface, profile_repository: ProfileRepository):
        super().__init__(user_repository)
        self.profile_repository = profile_repository

    async def _validate_request(self, request: CreateOrUpdateProfileRequestDTO) -> None:
        await super()._validate_request(request)

        missing = [
            wire_name for attr, wire_name in REQUIRED_PROFILE_FIELDS.items()
            if getattr(request, attr) in (None, "")
        ]
        if missing:
            raise ValidationError(f"Missing required fields: {', '.join(missing)}", missing[0])

        ProfileType.parse(request.profile_type)

    async def _execute_command_logic(self, request: CreateOrUpdateProfileRequestDTO) -> ProfileRowDTO:
        profile_type = ProfileType.parse(request.profile_type)

        user = self.user_repository.find_by_external_id(self.current_external_id)
        if user is None:
            user = User(external_auth_id=self.current_external_id, email=self.current_email or "")
        user.adopt_profile(profile_type, request.name, request.image_url)
        user = self.user_repository.save(user)

        profile = self.profile_repository.find_by_user_id(profile_type, user.id)
        if profile is None:
            profile = PROFILE_CLASSES[profile_type](user_id=user.id)
        profile.apply_changes(request.profile_changes())

        saved_profile = self.profile_repository.save(profile)
        logger.info(f"Saved {profile_type.value} profile {saved_profile.id} for user {user.id}")

        return profile_to_response_dto(saved_profile)


class GetProfileByIdUseCase(QueryUseCase[str, ProfileViewResponseDTO]):
    """
    Use case for viewing a user's profile by internal or external ID.
    Track URLs come back with the media flag set.
    """

    def __init__(self, user_repository: UserRepositoryInterface, profile_repository: ProfileRepository):
        super().__init__()
        self.user_repository = user_repository
        self.profile_repository = profile_repository

    async def _validate_request(self, request: str) -> None:
        if not request:
            raise ValidationError("Profile ID is required", "id")

    async def _execute_business_logic(self, request: str) -> ProfileViewResponseDTO:
        user = self.user_repository.find_by_any_id(request)
        if user is None:
            raise EntityNotFoundError("User", request)

        profile = load_user_profile(self.profile_repository, user)
        if profile is not None:
            profile.audio_tracks = normalize_tracks(profile.audio_tracks)

        return ProfileViewResponseDTO.from_domain(user, profile)


class GetOwnProfileUseCase(AuthorizedUseCase, QueryUseCase[None, OwnProfileResponseDTO]):
    """Use case for reading the caller's own profile as stored."""

    def __init__(self, user_repository: UserRepositoryInterface, profile_repository: ProfileRepository):
        super().__init__(user_repository)
        self.profile_repository = profile_repository

    async def _execute_business_logic(self, request: None = None) -> OwnProfileResponseDTO:
        user = self._resolve_current_user()
        profile = load_user_profile(self.profile_repository, user)
        return OwnProfileResponseDTO.from_domain(user, profile)

"""
Shared profile use cases for the application layer.
Implements business logic for recommending a profile to a user of the
opposite kind.
"""

import logging

from app.application.use_cases.base_use_case import (
    AuthorizedUseCase, CommandUseCase, QueryUseCase
)
from app.application.dto.base_dto import PageRequestDTO, page_count
from app.application.dto.shared_profile_dto import (
    ShareProfileRequestDTO, SharedProfileResponseDTO, SharedProfilePageResponseDTO,
    DeleteResultResponseDTO
)
from app.domain.models.base import EntityNotFoundError, ValidationError
from app.domain.models.shared_profile import SharedProfile
from app.domain.repositories.shared_profile_repository import SharedProfileRepository
from app.domain.repositories.user_repository import UserRepositoryInterface


logger = logging.getLogger(__name__)


class ShareProfileUseCase(AuthorizedUseCase, CommandUseCase[ShareProfileRequestDTO, SharedProfileResponseDTO]):
    """Use case for sharing the caller's profile with another user."""

    def __init__(self, user_repository: UserRepositoryInterface,
                 shared_profile_repository: SharedProfileRepository):
        super().__init__(user_repository)
        self.shared_profile_repository = shared_profile_repository

    async def _execute_command_logic(self, request: ShareProfileRequestDTO) -> SharedProfileResponseDTO:
        sharer = self._resolve_current_user()

        recipient = self.user_repository.find_by_id(request.target_user_id)
        if recipient is None:
            raise EntityNotFoundError("User", request.target_user_id)

        shared_profile = SharedProfile.create(sharer, recipient, request.share_message)
        saved = self.shared_profile_repository.save(shared_profile)
        logger.info(f"User {sharer.id} shared their {sharer.profile_type.value} profile with {recipient.id}")

        return SharedProfileResponseDTO.from_domain(saved)


class ListSharedProfilesUseCase(AuthorizedUseCase, QueryUseCase[PageRequestDTO, SharedProfilePageResponseDTO]):
    """
    Use case for listing profiles shared with the caller.
    Only edges from users of the opposite kind are returned, newest first.
    """

    def __init__(self, user_repository: UserRepositoryInterface,
                 shared_profile_repository: SharedProfileRepository):
        super().__init__(user_repository)
        self.shared_profile_repository = shared_profile_repository

    async def _execute_business_logic(self, request: PageRequestDTO) -> SharedProfilePageResponseDTO:
        recipient = self._resolve_current_user()

        if not recipient.has_profile:
            # No kind yet, so there is no opposite kind to list
            return SharedProfilePageResponseDTO(profiles=[], total_pages=0, current_page=request.page)

        shared_profiles, total = self.shared_profile_repository.find_for_recipient(
            recipient.id, recipient.profile_type.opposite, page=request.page, limit=request.limit
        )

        return SharedProfilePageResponseDTO(
            profiles=[SharedProfileResponseDTO.from_domain(sp) for sp in shared_profiles],
            total_pages=page_count(total, request.limit),
            current_page=request.page,
        )


class DeleteSharedProfileUseCase(AuthorizedUseCase, CommandUseCase[str, DeleteResultResponseDTO]):
    """Use case for the recipient removing a shared profile."""

    def __init__(self, user_repository: UserRepositoryInterface,
                 shared_profile_repository: SharedProfileRepository):
        super().__init__(user_repository)
        self.shared_profile_repository = shared_profile_repository

    async def _validate_request(self, request: str) -> None:
        await super()._validate_request(request)
        if not request:
            raise ValidationError("Shared profile ID is required", "id")

    async def _execute_command_logic(self, request: str) -> DeleteResultResponseDTO:
        recipient = self._resolve_current_user()

        deleted = self.shared_profile_repository.delete_for_recipient(request, recipient.id)
        if deleted == 0:
            raise EntityNotFoundError(
                "Shared profile", request,
                message="Shared profile not found or unauthorized to delete"
            )

        logger.info(f"User {recipient.id} deleted shared profile {request}")
        return DeleteResultResponseDTO(success=True)

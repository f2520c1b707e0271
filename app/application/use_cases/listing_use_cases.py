"""
Listing use cases for the application layer.
Paginated, optionally filtered reads over bands and gig providers.
"""

from typing import ClassVar, Type

from app.application.use_cases.base_use_case import QueryUseCase
from app.application.dto.base_dto import PageResponseDTO
from app.application.dto.profile_dto import (
    ListProfilesRequestDTO, BandPageResponseDTO, GigProviderPageResponseDTO,
    profile_to_response_dto
)
from app.domain.models.user import ProfileType
from app.domain.repositories.profile_repository import ProfileRepository


class ListProfilesUseCase(QueryUseCase[ListProfilesRequestDTO, PageResponseDTO]):
    """
    Newest-first listing of one profile kind.
    A page past the end yields no items but a valid page count.
    """

    PROFILE_TYPE: ClassVar[ProfileType]
    PAGE_DTO: ClassVar[Type[PageResponseDTO]]

    def __init__(self, profile_repository: ProfileRepository):
        super().__init__()
        self.profile_repository = profile_repository

    async def _execute_business_logic(self, request: ListProfilesRequestDTO) -> PageResponseDTO:
        query = request.query.strip() if request.query else None

        profiles, total = self.profile_repository.search(
            self.PROFILE_TYPE, query=query or None, page=request.page, limit=request.limit
        )

        return self.PAGE_DTO.create(
            items=[profile_to_response_dto(profile) for profile in profiles],
            total=total,
            page=request.page,
            limit=request.limit,
        )


class ListBandsUseCase(ListProfilesUseCase):
    """Matches name, genre, location or description."""

    PROFILE_TYPE = ProfileType.BAND
    PAGE_DTO = BandPageResponseDTO


class ListGigProvidersUseCase(ListProfilesUseCase):
    """Matches name, services, location or description."""

    PROFILE_TYPE = ProfileType.GIG_PROVIDER
    PAGE_DTO = GigProviderPageResponseDTO

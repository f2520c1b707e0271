"""
Listing router.
Paginated search over bands and gig providers.
"""

from typing import Optional
from fastapi import APIRouter, Query

from app.infrastructure.web.dependencies import ProfileRepositoryDep, SettingsDep
from app.application.use_cases.listing_use_cases import ListBandsUseCase, ListGigProvidersUseCase
from app.application.dto.profile_dto import (
    ListProfilesRequestDTO,
    BandPageResponseDTO,
    GigProviderPageResponseDTO
)


router = APIRouter()


def build_list_request(query: Optional[str], page: int, limit: Optional[int], settings) -> ListProfilesRequestDTO:
    return ListProfilesRequestDTO(
        query=query,
        page=page,
        limit=limit if limit is not None else settings.default_page_size,
    )


@router.get("/bands", response_model=BandPageResponseDTO)
async def list_bands(
    repository: ProfileRepositoryDep,
    settings: SettingsDep,
    query: Optional[str] = Query(None, description="Match name, genre, location or description"),
    page: int = Query(1, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Items per page")
):
    """List bands, most recent first."""
    use_case = ListBandsUseCase(repository)
    return await use_case.execute(build_list_request(query, page, limit, settings))


@router.get("/gig-providers", response_model=GigProviderPageResponseDTO)
async def list_gig_providers(
    repository: ProfileRepositoryDep,
    settings: SettingsDep,
    query: Optional[str] = Query(None, description="Match name, services, location or description"),
    page: int = Query(1, description="Page number (1-based)"),
    limit: Optional[int] = Query(None, description="Items per page")
):
    """List gig providers, most recent first."""
    use_case = ListGigProvidersUseCase(repository)
    return await use_case.execute(build_list_request(query, page, limit, settings))

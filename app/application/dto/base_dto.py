"""
Base DTOs for the application layer.
Provides common patterns for request/response data transfer objects.
"""

from typing import List, TypeVar, Generic
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


def page_count(total: int, limit: int) -> int:
    """Number of pages needed for ``total`` items, 0 when limit is not positive."""
    if limit <= 0:
        return 0
    return (total + limit - 1) // limit  # Ceiling division


class BaseDTO(BaseModel):
    """
    Base DTO with common configuration.
    Fields are snake_case in Python and camelCase on the wire.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        # Allow population by field name or alias
        populate_by_name=True,
        # Convert enum values to their values
        use_enum_values=True,
    )


class RequestDTO(BaseDTO):
    """Base class for request DTOs."""

    model_config = ConfigDict(extra="forbid")


class ResponseDTO(BaseDTO):
    """Base class for response DTOs."""
    pass


class PageRequestDTO(RequestDTO):
    """
    Offset pagination parameters.
    Bounds are not checked: a page past the end simply comes back empty.
    """

    page: int = Field(default=1, description="Page number (1-based)")
    limit: int = Field(default=9, description="Items per page")


T = TypeVar('T')


class PageResponseDTO(ResponseDTO, Generic[T]):
    """Base class for paginated list responses."""

    items: List[T] = Field(default_factory=list, description="Items on this page")
    total_pages: int = Field(description="Total number of pages")
    current_page: int = Field(description="Current page number")

    @classmethod
    def create(cls, items: List[T], total: int, page: int, limit: int):
        """Create a paginated response."""
        return cls(items=items, total_pages=page_count(total, limit), current_page=page)

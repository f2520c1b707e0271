"""
Offset pagination and search utilities for SQLAlchemy queries.
"""

from typing import List, Optional, Any, Tuple, Sequence
from dataclasses import dataclass
from sqlalchemy.orm import Query
from sqlalchemy import or_


@dataclass
class PaginationMetadata:
    """Pagination metadata for responses."""
    page: int
    limit: int
    total_items: int


class OffsetPagination:
    """
    Offset-based pagination.
    Page and limit are used as given; a page past the end yields no items.
    """

    def paginate(
        self,
        query: Query,
        page: int = 1,
        limit: int = 9,
        count_query: Optional[Query] = None
    ) -> Tuple[List[Any], PaginationMetadata]:
        """
        Paginate query using offset-based pagination.

        Args:
            query: SQLAlchemy query to paginate, already ordered
            page: Page number (1-based)
            limit: Number of items per page
            count_query: Optional query to count with instead of the ordered one

        Returns:
            Tuple of (items, pagination_metadata)
        """
        offset = max(0, (page - 1) * limit)

        if count_query is not None:
            total_items = count_query.count()
        else:
            total_items = query.order_by(None).count()

        items = query.offset(offset).limit(limit).all() if limit > 0 else []

        metadata = PaginationMetadata(
            page=page,
            limit=limit,
            total_items=total_items,
        )

        return items, metadata


class PaginationHelper:
    """Helper class with utility methods for pagination."""

    @staticmethod
    def apply_search(query: Query, model: Any, search_term: Optional[str],
                     search_fields: Sequence[str]) -> Query:
        """
        Keep rows where any of the fields contains the term, ignoring case.
        An empty or missing term leaves the query untouched.
        """
        if not search_term:
            return query

        conditions = [
            getattr(model, field_name).icontains(search_term, autoescape=True)
            for field_name in search_fields
            if hasattr(model, field_name)
        ]
        if conditions:
            query = query.filter(or_(*conditions))
        return query


offset_paginator = OffsetPagination()

"""
Pagination Utilities.

Page-number pagination for list endpoints: the page request shape
accepted by services, the page container they return, and the FastAPI
dependency that parses query parameters into a request.
"""

import enum
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from fastapi import Query

from mindnote.backend.core.exceptions import ValidationError
from mindnote.backend.schemas.base import PaginatedResponse, PaginationInfo, ResponseMetadata

T = TypeVar("T")
U = TypeVar("U")

DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class SortDirection(str, enum.Enum):
    """Sort direction for a page request."""

    ASC = "asc"
    DESC = "desc"


# =============================================================================
# Page Request
# =============================================================================


@dataclass(frozen=True)
class PageRequest:
    """
    One slice of an ordered result set.

    ``page`` is zero-based. ``sort`` must belong to the allow-list of the
    entity being listed; repositories check it with ``ensure_sortable``.
    """

    page: int = 0
    size: int = DEFAULT_PAGE_SIZE
    sort: str = "created_at"
    direction: SortDirection = SortDirection.DESC

    def __post_init__(self) -> None:
        if self.page < 0:
            raise ValidationError(
                "Page index must not be negative",
                details={"page": self.page},
            )
        if self.size < 1:
            raise ValidationError(
                "Page size must be positive",
                details={"size": self.size},
            )

    @property
    def offset(self) -> int:
        """Number of rows to skip."""
        return self.page * self.size

    @property
    def descending(self) -> bool:
        return self.direction == SortDirection.DESC

    def ensure_sortable(self, allowed: Iterable[str]) -> None:
        """
        Check the sort field against an entity's allow-list.

        Raises:
            ValidationError: If the sort field is not allowed
        """
        allowed = sorted(allowed)
        if self.sort not in allowed:
            raise ValidationError(
                f"Cannot sort by {self.sort!r}",
                details={"sort": self.sort, "allowed": allowed},
            )


# =============================================================================
# Page Result
# =============================================================================


@dataclass
class Page(Generic[T]):
    """Items of one page plus the numbers needed to navigate the rest."""

    items: list[T]
    page: int
    size: int
    total: int
    sort: str | None = None
    direction: SortDirection | None = None

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total / self.size) if self.size else 0

    @property
    def has_next(self) -> bool:
        return (self.page + 1) * self.size < self.total

    def map(self, func: Callable[[T], U]) -> "Page[U]":
        """Return the same page with every item passed through ``func``."""
        return Page(
            items=[func(item) for item in self.items],
            page=self.page,
            size=self.size,
            total=self.total,
            sort=self.sort,
            direction=self.direction,
        )


# =============================================================================
# FastAPI Dependency
# =============================================================================


def page_request_dependency(
    default_sort: str,
    default_direction: SortDirection,
) -> Callable[..., PageRequest]:
    """
    Build a FastAPI dependency that parses paging query parameters.

    Each list endpoint has its own default ordering, so the dependency is
    produced per endpoint:

        note_page = page_request_dependency("updated_at", SortDirection.DESC)

        @router.get("")
        async def list_notes(page: PageRequest = Depends(note_page)):
            ...
    """

    def get_page_request(
        page: int = Query(
            default=0,
            ge=0,
            description="Zero-based page index",
        ),
        size: int = Query(
            default=DEFAULT_PAGE_SIZE,
            ge=1,
            le=MAX_PAGE_SIZE,
            description="Number of items per page",
        ),
        sort: str = Query(
            default=default_sort,
            description="Field to sort by",
        ),
        direction: SortDirection = Query(
            default=default_direction,
            description="Sort direction",
        ),
    ) -> PageRequest:
        return PageRequest(page=page, size=size, sort=sort, direction=direction)

    return get_page_request


# =============================================================================
# Response Builder
# =============================================================================


def create_paginated_response(
    page: Page[Any],
    request_id: str | None = None,
) -> dict[str, Any]:
    """
    Create a standardized paginated response.

    Args:
        page: Page whose items are pydantic response models
        request_id: Request ID for metadata

    Returns:
        Dict matching PaginatedResponse structure
    """
    pagination = PaginationInfo(
        page=page.page,
        size=page.size,
        total=page.total,
        total_pages=page.total_pages,
        has_more=page.has_next,
        sort=page.sort,
        direction=page.direction.value if page.direction else None,
    )

    response = PaginatedResponse(
        data=[item.model_dump(mode="json") for item in page.items],
        pagination=pagination,
        metadata=ResponseMetadata(request_id=request_id),
    )

    return response.model_dump(mode="json")

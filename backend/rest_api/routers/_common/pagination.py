"""
Standardized Pagination for the mobile list endpoints.

Parsing is lenient: a missing, non-numeric or non-positive
page becomes 1, the same for limit becomes the default page size, and a
limit above the configured maximum is clamped. A huge page is capped at
the last page whose offset the database can represent, which is always
past the end of the data. Requests never fail
because of pagination parameters.

Usage:
    from rest_api.routers._common.pagination import Pagination, get_pagination

    @router.get("/api/stores")
    def list_stores(
        pagination: Pagination = Depends(get_pagination),
        db: Session = Depends(get_db),
    ):
        items, total = StoreService(db).list_active_page(pagination.offset, pagination.limit)
        return pagination.envelope(items, total)
"""

from dataclasses import dataclass
from typing import Any

from fastapi import Query

from shared.config.constants import Limits
from shared.config.settings import settings


def parse_positive_int(raw: Any, default: int) -> int:
    """Parse a query value as an int >= 1, falling back to `default`."""
    if raw is None:
        return default
    try:
        value = int(str(raw).strip())
    except ValueError:
        return default
    return value if value >= 1 else default


@dataclass
class Pagination:
    """
    Page/limit parameters.

    Attributes:
        page: 1-indexed page number
        limit: Items per page (1 to max_limit)
        max_limit: Upper bound for limit
    """

    page: int = Limits.DEFAULT_PAGE
    limit: int = Limits.DEFAULT_PAGE_SIZE
    max_limit: int = Limits.MAX_PAGE_SIZE

    def __post_init__(self):
        """Normalize values. page is capped so offset fits a 64-bit integer."""
        self.limit = min(max(1, self.limit), self.max_limit)
        self.page = min(max(1, self.page), Limits.MAX_OFFSET // self.limit + 1)

    @classmethod
    def from_query(
        cls,
        page: Any = None,
        limit: Any = None,
        *,
        default_limit: int = Limits.DEFAULT_PAGE_SIZE,
        max_limit: int = Limits.MAX_PAGE_SIZE,
    ) -> "Pagination":
        return cls(
            page=parse_positive_int(page, Limits.DEFAULT_PAGE),
            limit=parse_positive_int(limit, default_limit),
            max_limit=max_limit,
        )

    @property
    def offset(self) -> int:
        """Number of rows to skip: (page - 1) * limit."""
        return (self.page - 1) * self.limit

    def to_dict(self, total: int) -> dict[str, int]:
        return {"page": self.page, "limit": self.limit, "total": total}

    def envelope(self, items: list[Any], total: int) -> dict[str, Any]:
        """Wrap one page of items in the mobile response envelope."""
        return {"success": True, "data": items, "pagination": self.to_dict(total)}


def get_pagination(
    page: str | None = Query(default=None, description="Page number, starting at 1"),
    limit: str | None = Query(default=None, description="Items per page"),
) -> Pagination:
    """
    FastAPI dependency for pagination.

    Declared as strings so malformed values fall back to defaults instead
    of failing request validation.
    """
    return Pagination.from_query(
        page,
        limit,
        default_limit=settings.default_page_size,
        max_limit=settings.max_page_size,
    )

"""
Common utilities shared across routers.
"""

from .pagination import (
    Pagination,
    get_pagination,
    parse_positive_int,
)

__all__ = [
    "Pagination",
    "get_pagination",
    "parse_positive_int",
]

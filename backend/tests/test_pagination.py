"""
Tests for page/limit parsing and the pagination envelope.
"""

import pytest

from rest_api.routers._common.pagination import Pagination, parse_positive_int
from shared.config.constants import Limits


class TestParsePositiveInt:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, 7),
            ("3", 3),
            (" 4 ", 4),
            ("abc", 7),
            ("0", 7),
            ("-2", 7),
            ("2.5", 7),
            ("", 7),
        ],
    )
    def test_lenient_parsing(self, raw, expected):
        assert parse_positive_int(raw, 7) == expected


class TestPagination:
    """Test page/limit normalization."""

    def test_defaults(self):
        pagination = Pagination.from_query()
        assert pagination.page == 1
        assert pagination.limit == 10
        assert pagination.offset == 0

    def test_offset_arithmetic(self):
        pagination = Pagination.from_query("3", "20")
        assert pagination.offset == 40

    def test_invalid_values_fall_back(self):
        pagination = Pagination.from_query("zero", "-5")
        assert (pagination.page, pagination.limit) == (1, 10)

    def test_limit_clamped_to_maximum(self):
        pagination = Pagination.from_query("1", "1000", max_limit=100)
        assert pagination.limit == 100

    def test_envelope_shape(self):
        pagination = Pagination.from_query("2", "5")
        body = pagination.envelope(["a", "b"], total=7)
        assert body == {
            "success": True,
            "data": ["a", "b"],
            "pagination": {"page": 2, "limit": 5, "total": 7},
        }

    def test_huge_page_keeps_offset_in_range(self):
        pagination = Pagination.from_query("99999999999999999999", "10")
        assert pagination.offset <= Limits.MAX_OFFSET
        assert pagination.offset > Limits.MAX_OFFSET - 10

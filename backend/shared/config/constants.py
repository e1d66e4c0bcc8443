"""
Centralized constants for the backend application.
Avoid magic strings and repeated constants.

Usage:
    from shared.config.constants import EntityStatus, Limits

    if entity.status == EntityStatus.ACTIVE:
        ...
"""

from typing import Final


# =============================================================================
# Entity Status Constants
# =============================================================================


class EntityStatus:
    """Status values shared by users, stores and brands."""

    ACTIVE: Final[str] = "active"
    INACTIVE: Final[str] = "inactive"

    DEFAULT: Final[str] = ACTIVE
    ALL: Final[list[str]] = [ACTIVE, INACTIVE]


def validate_entity_status(status: str) -> bool:
    """Validate that an entity status is valid."""
    return status in EntityStatus.ALL


# =============================================================================
# Validation Constants
# =============================================================================


class Limits:
    """Validation limits."""

    # String lengths (mirror the column sizes)
    MAX_NAME_LENGTH: Final[int] = 255
    MAX_EMAIL_LENGTH: Final[int] = 255
    MAX_PHONE_LENGTH: Final[int] = 50
    MAX_STATUS_LENGTH: Final[int] = 50
    MAX_URL_LENGTH: Final[int] = 500

    # Pagination defaults
    DEFAULT_PAGE: Final[int] = 1
    DEFAULT_PAGE_SIZE: Final[int] = 10
    MAX_PAGE_SIZE: Final[int] = 100
    MAX_OFFSET: Final[int] = 2**63 - 1  # signed 64-bit SQL integer

    # Admin grid
    DESCRIPTION_PREVIEW_LENGTH: Final[int] = 100


# =============================================================================
# Error Messages
# =============================================================================


class ErrorMessages:
    """Standardized error messages."""

    ENTITY_NOT_FOUND: Final[str] = "{entity} not found"
    ENTITY_EXISTS: Final[str] = "{entity} with {field} '{value}' already exists"
    FIELD_REQUIRED: Final[str] = "{field} is required"
    INVALID_STATUS: Final[str] = "status must be one of: {allowed}"
    PERSISTENCE_FAILED: Final[str] = "Failed to {operation}"
    INTERNAL_ERROR: Final[str] = "Internal server error"

"""
Utilities module: Exceptions, validators, schemas, health checks.
"""

from shared.utils.exceptions import (
    AppException,
    NotFoundError,
    ValidationError,
    DuplicateEntityError,
    DatabaseError,
)
from shared.utils.validators import (
    validate_image_url,
    validate_status,
)
from shared.utils.schemas import ErrorResponse

__all__ = [
    # exceptions
    "AppException",
    "NotFoundError",
    "ValidationError",
    "DuplicateEntityError",
    "DatabaseError",
    # validators
    "validate_image_url",
    "validate_status",
    # schemas
    "ErrorResponse",
]

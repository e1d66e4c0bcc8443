"""
Centralized HTTP exceptions for consistent error handling.
Standardized HTTP status codes and error messages.

Usage:
    from shared.utils.exceptions import NotFoundError, ValidationError

    raise NotFoundError("Store", store_id)
    raise ValidationError("name is required", field="name")
    raise DatabaseError("create user")

Every exception is rendered as ``{"error": detail}`` by the handlers in
rest_api.core.exception_handlers.
"""

from fastapi import HTTPException, status
from typing import Any

from shared.config.constants import ErrorMessages
from shared.config.logging import get_logger

logger = get_logger(__name__)


class AppException(HTTPException):
    """
    Base exception with automatic logging.

    All custom exceptions should inherit from this class
    to ensure consistent logging and response format.
    """

    def __init__(
        self,
        status_code: int,
        detail: str,
        log_level: str = "warning",
        headers: dict[str, str] | None = None,
        **log_context: Any,
    ):
        log_fn = getattr(logger, log_level, logger.warning)
        log_fn(detail, status_code=status_code, **log_context)

        super().__init__(status_code=status_code, detail=detail, headers=headers)


# =============================================================================
# 404 Not Found Errors
# =============================================================================


class NotFoundError(AppException):
    """
    Entity not found error (404).

    The id only goes to the log; the response message stays
    "<Entity> not found".

    Usage:
        raise NotFoundError("User", 123)
    """

    def __init__(self, entity: str, entity_id: int | str | None = None, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=ErrorMessages.ENTITY_NOT_FOUND.format(entity=entity),
            log_level="warning",
            entity=entity,
            entity_id=entity_id,
            **log_context,
        )


# =============================================================================
# 400 Bad Request Errors
# =============================================================================


class ValidationError(AppException):
    """
    Input validation error (400).

    Usage:
        raise ValidationError("name is required", field="name")
    """

    def __init__(self, detail: str, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=detail,
            log_level="warning",
            **log_context,
        )


class RequiredFieldError(ValidationError):
    """A required field is missing or blank."""

    def __init__(self, field: str, **log_context: Any):
        super().__init__(ErrorMessages.FIELD_REQUIRED.format(field=field), field=field, **log_context)


class DuplicateEntityError(ValidationError):
    """Entity already exists."""

    def __init__(self, entity: str, field: str, value: str, **log_context: Any):
        detail = ErrorMessages.ENTITY_EXISTS.format(entity=entity, field=field, value=value)
        super().__init__(detail, entity=entity, field=field, **log_context)


# =============================================================================
# 500 Internal Server Errors
# =============================================================================


class InternalError(AppException):
    """
    Internal server error (500).

    Usage:
        raise InternalError()
    """

    def __init__(self, detail: str = ErrorMessages.INTERNAL_ERROR, **log_context: Any):
        super().__init__(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=detail,
            log_level="error",
            **log_context,
        )


class DatabaseError(InternalError):
    """
    Database operation failed.

    The message stays generic, e.g. "Failed to create user".
    Driver errors are only logged.
    """

    def __init__(self, operation: str, **log_context: Any):
        detail = ErrorMessages.PERSISTENCE_FAILED.format(operation=operation)
        super().__init__(detail, operation=operation, **log_context)

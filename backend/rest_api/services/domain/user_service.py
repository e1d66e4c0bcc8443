"""
User Service.

Handles user-related business logic on top of BaseCRUDService.

Usage:
    from rest_api.services.domain import UserService

    service = UserService(db)
    user = service.create({"name": "Ann", "email": "ann@x.com"})
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from rest_api.models import User
from rest_api.services.base_service import BaseCRUDService
from shared.config.logging import get_logger, mask_email
from shared.utils.exceptions import DuplicateEntityError
from shared.utils.schemas import UserOutput

logger = get_logger(__name__)


class UserService(BaseCRUDService[User, UserOutput]):
    """
    Service for user management.

    Business rules:
    - Email is unique among non-deleted users
    - A deleted user's email can be registered again
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=User,
            output_schema=UserOutput,
            entity_name="User",
        )

    def _ensure_email_free(self, email: str | None, exclude_id: int | None = None) -> None:
        if not email:
            return
        if self._repo.find_by("email", email, exclude_id=exclude_id) is not None:
            raise DuplicateEntityError("User", "email", email, email_masked=mask_email(email))

    def _validate_create(self, data: dict[str, Any]) -> None:
        self._ensure_email_free(data.get("email"))

    def _validate_update(self, entity_id: int, data: dict[str, Any]) -> None:
        # 404 takes precedence over a conflicting email
        self._repo.find_by_id(entity_id)
        self._ensure_email_free(data.get("email"), exclude_id=entity_id)

    def _after_create(self, entity: User) -> None:
        logger.info("User registered", user_id=entity.id, email=mask_email(entity.email))

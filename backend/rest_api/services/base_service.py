"""
Base Service Class for the CRUD endpoints.

Architecture:
    Router (thin) → Service (business logic) → Repository (data access) → Model

The service owns the unit of work: the repository only flushes, the
service commits with safe_commit and maps storage failures to
DatabaseError ("Failed to create user" and friends).

Usage:
    from rest_api.services.base_service import BaseCRUDService

    class StoreService(BaseCRUDService[Store, StoreOutput]):
        def __init__(self, db: Session):
            super().__init__(
                db=db,
                model=Store,
                output_schema=StoreOutput,
                entity_name="Store",
            )
"""

from __future__ import annotations

from typing import Any, Callable, Generic, TypeVar, Type

from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from rest_api.models import Base
from rest_api.repositories import SoftDeleteRepository
from shared.infrastructure.db import safe_commit
from shared.config.logging import get_logger
from shared.utils.exceptions import DatabaseError

logger = get_logger(__name__)

ModelT = TypeVar("ModelT", bound=Base)
OutputT = TypeVar("OutputT", bound=BaseModel)
R = TypeVar("R")


class BaseCRUDService(Generic[ModelT, OutputT]):
    """
    Base service for entities with CRUD operations.

    Provides standard CRUD methods plus the paginated listing used by the
    mobile API. Subclasses customize behaviour through the _validate_*
    and _after_* hooks.
    """

    def __init__(
        self,
        db: Session,
        model: Type[ModelT],
        output_schema: Type[OutputT],
        entity_name: str,
        *,
        plural_name: str | None = None,
    ):
        self._db = db
        self._model = model
        self._output_schema = output_schema
        self._entity_name = entity_name
        self._plural_name = plural_name or f"{entity_name.lower()}s"
        self._repo = SoftDeleteRepository(model, db, entity_name=entity_name)

    @property
    def db(self) -> Session:
        """Database session."""
        return self._db

    @property
    def repo(self) -> SoftDeleteRepository[ModelT]:
        """Repository for data access."""
        return self._repo

    @property
    def entity_name(self) -> str:
        """Human-readable entity name for messages."""
        return self._entity_name

    # =========================================================================
    # Read Operations
    # =========================================================================

    def list_all(self) -> list[OutputT]:
        """Every non-deleted entity, any status, ordered by id."""
        entities = self._read(self._repo.find_all)
        return [self.to_output(e) for e in entities]

    def get(self, entity_id: int) -> OutputT:
        """
        Get entity by ID.

        Raises:
            NotFoundError: If the entity is missing or soft-deleted.
        """
        return self.to_output(self._read(self._repo.find_by_id, entity_id))

    def list_active_page(self, offset: int, limit: int) -> tuple[list[OutputT], int]:
        """
        One page of active entities plus the total active count.

        Returns:
            (items, total)
        """
        entities = self._read(self._repo.find_active_page, offset, limit)
        total = self._read(self._repo.count_active)
        return [self.to_output(e) for e in entities], total

    # =========================================================================
    # Write Operations
    # =========================================================================

    def create(self, data: dict[str, Any]) -> OutputT:
        """
        Create new entity.

        Raises:
            ValidationError: If data is invalid.
            DatabaseError: If the insert fails.
        """
        try:
            self._validate_create(data)
            entity = self._repo.create(data)
            safe_commit(self._db)
            self._db.refresh(entity)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to create {self._entity_name}", error=str(e))
            raise DatabaseError(f"create {self._entity_name.lower()}")

        logger.info(f"{self._entity_name} created", entity_id=entity.id)
        self._after_create(entity)
        return self.to_output(entity)

    def update(self, entity_id: int, data: dict[str, Any]) -> OutputT:
        """
        Partially update an entity. None and "" values are skipped.

        Raises:
            NotFoundError: If entity not found.
            ValidationError: If data is invalid.
            DatabaseError: If the update fails.
        """
        try:
            self._validate_update(entity_id, data)
            entity = self._repo.update(entity_id, data)
            safe_commit(self._db)
            self._db.refresh(entity)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to update {self._entity_name}", error=str(e), entity_id=entity_id)
            raise DatabaseError(f"update {self._entity_name.lower()}")

        logger.info(f"{self._entity_name} updated", entity_id=entity_id, fields=sorted(data))
        self._after_update(entity)
        return self.to_output(entity)

    def delete(self, entity_id: int) -> None:
        """
        Soft delete an entity.

        Raises:
            NotFoundError: If entity not found (or already deleted).
            DatabaseError: If the update fails.
        """
        try:
            self._repo.soft_delete(entity_id)
            safe_commit(self._db)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to delete {self._entity_name}", error=str(e), entity_id=entity_id)
            raise DatabaseError(f"delete {self._entity_name.lower()}")

        logger.info(f"{self._entity_name} deleted", entity_id=entity_id)

    # =========================================================================
    # Helpers
    # =========================================================================

    def _read(self, query: Callable[..., R], *args: Any) -> R:
        """Run a repository read, mapping storage failures to DatabaseError."""
        try:
            return query(*args)
        except SQLAlchemyError as e:
            self._db.rollback()
            logger.error(f"Failed to fetch {self._plural_name}", error=str(e))
            raise DatabaseError(f"fetch {self._plural_name}")

    def to_output(self, entity: ModelT) -> OutputT:
        """Convert entity to output DTO."""
        return self._output_schema.model_validate(entity)

    # =========================================================================
    # Validation Hooks (override in subclasses)
    # =========================================================================

    def _validate_create(self, data: dict[str, Any]) -> None:
        """
        Validate data before create.

        Raises:
            ValidationError: If validation fails.
        """
        pass

    def _validate_update(self, entity_id: int, data: dict[str, Any]) -> None:
        """Validate data before update."""
        pass

    # =========================================================================
    # Post-Operation Hooks (override in subclasses)
    # =========================================================================

    def _after_create(self, entity: ModelT) -> None:
        """Hook called after successful create."""
        pass

    def _after_update(self, entity: ModelT) -> None:
        """Hook called after successful update."""
        pass

"""
Repository Pattern for database access.

SoftDeleteRepository is the only place that builds queries against the
catalog tables. Every read filters out soft-deleted rows, so a deleted
entity is invisible to find, update and delete alike.

The repository flushes but never commits: the calling service owns the
unit of work (see rest_api.services.base_service).

Usage:
    from rest_api.repositories import SoftDeleteRepository

    repo = SoftDeleteRepository(User, db)
    users = repo.find_all()
    user = repo.find_by_id(42)            # NotFoundError if missing/deleted
    page = repo.find_active_page(offset=10, limit=10)
"""

from __future__ import annotations

from typing import Any, Generic, Mapping, Sequence, TypeVar

from sqlalchemy import func, select
from sqlalchemy.orm import Session
from sqlalchemy.sql import Select

from rest_api.models import Base
from shared.config.constants import EntityStatus
from shared.utils.exceptions import NotFoundError, RequiredFieldError

ModelT = TypeVar("ModelT", bound=Base)


class SoftDeleteRepository(Generic[ModelT]):
    """
    Generic data access for models built on SoftDeleteMixin.

    The model must expose id, status and deleted_at columns.
    """

    def __init__(self, model: type[ModelT], session: Session, entity_name: str | None = None):
        self._model = model
        self._session = session
        self._entity_name = entity_name or model.__name__

    @property
    def model(self) -> type[ModelT]:
        """The SQLAlchemy model class."""
        return self._model

    @property
    def session(self) -> Session:
        """The database session."""
        return self._session

    @property
    def entity_name(self) -> str:
        return self._entity_name

    # =========================================================================
    # Query builders
    # =========================================================================

    def _live_query(self) -> Select:
        """Select non-deleted rows."""
        return select(self._model).where(self._model.deleted_at.is_(None))

    def _active_query(self) -> Select:
        """Select non-deleted rows whose status is active."""
        return self._live_query().where(self._model.status == EntityStatus.ACTIVE)

    # =========================================================================
    # Reads
    # =========================================================================

    def find_all(self) -> Sequence[ModelT]:
        """All non-deleted rows regardless of status, ordered by id."""
        query = self._live_query().order_by(self._model.id.asc())
        return self._session.scalars(query).all()

    def find_by_id(self, entity_id: int) -> ModelT:
        """
        Find a non-deleted row by primary key.

        Raises:
            NotFoundError: No row with that id, or the row is soft-deleted.
        """
        query = self._live_query().where(self._model.id == entity_id)
        entity = self._session.scalar(query)
        if entity is None:
            raise NotFoundError(self._entity_name, entity_id)
        return entity

    def find_by(self, column: str, value: Any, *, exclude_id: int | None = None) -> ModelT | None:
        """First non-deleted row where column == value, optionally skipping one id."""
        query = self._live_query().where(getattr(self._model, column) == value)
        if exclude_id is not None:
            query = query.where(self._model.id != exclude_id)
        return self._session.scalar(query.order_by(self._model.id.asc()).limit(1))

    def count_active(self) -> int:
        """Number of non-deleted rows whose status is active."""
        query = select(func.count()).select_from(self._active_query().subquery())
        return self._session.scalar(query) or 0

    def find_active_page(self, offset: int, limit: int) -> Sequence[ModelT]:
        """
        One page of active, non-deleted rows in ascending id order.

        Offsets past the end yield an empty sequence.
        """
        query = (
            self._active_query()
            .order_by(self._model.id.asc())
            .offset(offset)
            .limit(limit)
        )
        return self._session.scalars(query).all()

    # =========================================================================
    # Writes (flush only)
    # =========================================================================

    def _editable(self) -> tuple[str, ...]:
        return getattr(self._model, "EDITABLE_FIELDS", ())

    def create(self, fields: Mapping[str, Any]) -> ModelT:
        """
        Insert a new row from the editable fields in `fields`.

        Required fields must be present and non-blank; status defaults to
        active. Unknown keys are ignored.

        Raises:
            RequiredFieldError: A required field is missing or blank.
        """
        for field in getattr(self._model, "REQUIRED_FIELDS", ()):
            value = fields.get(field)
            if value is None or (isinstance(value, str) and not value.strip()):
                raise RequiredFieldError(field, entity=self._entity_name)

        data = {key: value for key, value in fields.items() if key in self._editable()}
        if not data.get("status"):
            data["status"] = EntityStatus.DEFAULT

        entity = self._model(**data)
        self._session.add(entity)
        self._session.flush()
        self._session.refresh(entity)
        return entity

    def update(self, entity_id: int, partial: Mapping[str, Any]) -> ModelT:
        """
        Overwrite the fields of `partial` that carry a value.

        None and "" both mean "leave unchanged", so a field can never be
        cleared through this method. updated_at is always refreshed.

        Raises:
            NotFoundError: No live row with that id.
        """
        entity = self.find_by_id(entity_id)
        editable = self._editable()
        for key, value in partial.items():
            if key not in editable or value is None or value == "":
                continue
            setattr(entity, key, value)

        entity.touch()
        self._session.flush()
        self._session.refresh(entity)
        return entity

    def soft_delete(self, entity_id: int) -> ModelT:
        """
        Mark a live row as deleted.

        Raises:
            NotFoundError: No live row with that id (including a row that
                was already deleted).
        """
        entity = self.find_by_id(entity_id)
        entity.soft_delete()
        self._session.flush()
        return entity

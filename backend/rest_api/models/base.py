"""
Base class and SoftDeleteMixin for all SQLAlchemy ORM models.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Optional

from sqlalchemy import BigInteger, DateTime, Integer, String, func
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column

from shared.config.constants import EntityStatus, Limits

# BIGINT on server databases; SQLite only auto-increments INTEGER primary keys
IdType = BigInteger().with_variant(Integer(), "sqlite")


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class SoftDeleteMixin:
    """
    Mixin providing the columns every catalog entity shares.

    Fields added:
    - id: Server-assigned ascending integer key
    - status: "active" or "inactive" (business flag, independent of deletion)
    - created_at, updated_at: Audit timestamps
    - deleted_at: Soft delete marker (NULL = live row)

    Rows with deleted_at set are invisible to every repository read.
    """

    id: Mapped[int] = mapped_column(IdType, primary_key=True, autoincrement=True)
    status: Mapped[str] = mapped_column(
        String(Limits.MAX_STATUS_LENGTH),
        default=EntityStatus.DEFAULT,
        server_default=EntityStatus.DEFAULT,
        nullable=False,
        index=True,
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False
    )
    deleted_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True), nullable=True, index=True
    )

    # Columns a caller may write through create/update
    EDITABLE_FIELDS = ()
    # Editable columns that must be non-blank on create
    REQUIRED_FIELDS = ("name",)

    @property
    def is_deleted(self) -> bool:
        return self.deleted_at is not None

    def soft_delete(self) -> None:
        """Mark the row as deleted. The row itself is kept."""
        self.deleted_at = datetime.now(timezone.utc)

    def touch(self) -> None:
        self.updated_at = datetime.now(timezone.utc)

    def __repr__(self) -> str:
        class_name = self.__class__.__name__
        id_val = getattr(self, "id", None)
        state = "deleted" if self.is_deleted else self.status
        return f"<{class_name}(id={id_val}, {state})>"

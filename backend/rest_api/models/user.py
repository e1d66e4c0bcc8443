"""
User Model.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import Index, String, text
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits

from .base import Base, SoftDeleteMixin


class User(SoftDeleteMixin, Base):
    """
    A registered customer of the mobile app.
    Inherits: id, status, created_at, updated_at, deleted_at from SoftDeleteMixin.
    """

    __tablename__ = "users"

    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False)
    email: Mapped[str] = mapped_column(String(Limits.MAX_EMAIL_LENGTH), nullable=False)
    phone: Mapped[Optional[str]] = mapped_column(String(Limits.MAX_PHONE_LENGTH))

    # Email is unique among live rows only, so a deleted user's address can be reused
    __table_args__ = (
        Index(
            "uq_users_email_live",
            "email",
            unique=True,
            postgresql_where=text("deleted_at IS NULL"),
            sqlite_where=text("deleted_at IS NULL"),
        ),
    )

    EDITABLE_FIELDS = ("name", "email", "phone", "status")
    REQUIRED_FIELDS = ("name", "email")

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', status='{self.status}')>"

"""
Store Model.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits

from .base import Base, SoftDeleteMixin


class Store(SoftDeleteMixin, Base):
    """
    A physical retail location.
    Inherits: id, status, created_at, updated_at, deleted_at from SoftDeleteMixin.
    """

    __tablename__ = "stores"

    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False)
    address: Mapped[Optional[str]] = mapped_column(Text)
    phone: Mapped[Optional[str]] = mapped_column(String(Limits.MAX_PHONE_LENGTH))
    email: Mapped[Optional[str]] = mapped_column(String(Limits.MAX_EMAIL_LENGTH))

    EDITABLE_FIELDS = ("name", "address", "phone", "email", "status")

"""
Brand Model.
"""

from __future__ import annotations

from typing import Optional

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column

from shared.config.constants import Limits

from .base import Base, SoftDeleteMixin


class Brand(SoftDeleteMixin, Base):
    """
    A product brand. logo holds an http(s) image URL.
    Inherits: id, status, created_at, updated_at, deleted_at from SoftDeleteMixin.
    """

    __tablename__ = "brands"

    name: Mapped[str] = mapped_column(String(Limits.MAX_NAME_LENGTH), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text)
    logo: Mapped[Optional[str]] = mapped_column(String(Limits.MAX_URL_LENGTH))

    EDITABLE_FIELDS = ("name", "description", "logo", "status")

"""
Store Service.

Stores have no rules beyond the shared CRUD behaviour: name required,
status defaulting to active, soft delete.
"""

from __future__ import annotations

from sqlalchemy.orm import Session

from rest_api.models import Store
from rest_api.services.base_service import BaseCRUDService
from shared.utils.schemas import StoreOutput


class StoreService(BaseCRUDService[Store, StoreOutput]):
    """Service for store management."""

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Store,
            output_schema=StoreOutput,
            entity_name="Store",
        )

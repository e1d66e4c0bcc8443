"""
Brand Service.

Usage:
    from rest_api.services.domain import BrandService

    service = BrandService(db)
    brand = service.create({"name": "Acme", "logo": "https://cdn.example.com/acme.png"})
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.orm import Session

from rest_api.models import Brand
from rest_api.services.base_service import BaseCRUDService
from shared.utils.exceptions import ValidationError
from shared.utils.schemas import BrandOutput
from shared.utils.validators import validate_image_url


class BrandService(BaseCRUDService[Brand, BrandOutput]):
    """
    Service for brand management.

    Business rules:
    - logo, when given, must be an http(s) URL that does not point at an
      internal host
    """

    def __init__(self, db: Session):
        super().__init__(
            db=db,
            model=Brand,
            output_schema=BrandOutput,
            entity_name="Brand",
        )

    def _check_logo(self, data: dict[str, Any]) -> None:
        if not data.get("logo"):
            return
        try:
            data["logo"] = validate_image_url(data["logo"])
        except ValueError as e:
            raise ValidationError(str(e), field="logo")

    def _validate_create(self, data: dict[str, Any]) -> None:
        self._check_logo(data)

    def _validate_update(self, entity_id: int, data: dict[str, Any]) -> None:
        self._check_logo(data)

"""
Brand management endpoints (back office).
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import BrandService
from shared.infrastructure.db import get_db
from shared.utils.schemas import (
    DataResponse,
    ListResponse,
    MessageDataResponse,
    MessageResponse,
    BrandCreate,
    BrandOutput,
    BrandUpdate,
)


router = APIRouter(tags=["admin-brands"])


@router.get("/brands", response_model=ListResponse[BrandOutput])
def list_brands(db: Session = Depends(get_db)) -> ListResponse[BrandOutput]:
    """List every non-deleted brand, active or not."""
    brands = BrandService(db).list_all()
    return ListResponse(data=brands, total=len(brands))


@router.get("/brands/{brand_id}", response_model=DataResponse[BrandOutput])
def get_brand(brand_id: int, db: Session = Depends(get_db)) -> DataResponse[BrandOutput]:
    """Get a specific brand."""
    return DataResponse(data=BrandService(db).get(brand_id))


@router.post(
    "/brands",
    response_model=MessageDataResponse[BrandOutput],
    status_code=status.HTTP_201_CREATED,
)
def create_brand(body: BrandCreate, db: Session = Depends(get_db)) -> MessageDataResponse[BrandOutput]:
    """Create a new brand. Status defaults to active."""
    brand = BrandService(db).create(body.model_dump(exclude_none=True))
    return MessageDataResponse(data=brand, message="Brand created successfully")


@router.put("/brands/{brand_id}", response_model=MessageDataResponse[BrandOutput])
def update_brand(
    brand_id: int,
    body: BrandUpdate,
    db: Session = Depends(get_db),
) -> MessageDataResponse[BrandOutput]:
    """Update a brand. Omitted or empty fields keep their current value."""
    brand = BrandService(db).update(brand_id, body.model_dump(exclude_none=True))
    return MessageDataResponse(data=brand, message="Brand updated successfully")


@router.delete("/brands/{brand_id}", response_model=MessageResponse)
def delete_brand(brand_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    """Soft delete a brand."""
    BrandService(db).delete(brand_id)
    return MessageResponse(message="Brand deleted successfully")

"""
Mobile brand listing.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rest_api.routers._common.pagination import Pagination, get_pagination
from rest_api.services.domain import BrandService
from shared.infrastructure.db import get_db
from shared.utils.schemas import BrandOutput, PageResponse


router = APIRouter(tags=["mobile-brands"])


@router.get("/brands", response_model=PageResponse[BrandOutput])
def list_active_brands(
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
):
    brands, total = BrandService(db).list_active_page(pagination.offset, pagination.limit)
    return pagination.envelope(brands, total)

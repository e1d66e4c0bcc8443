"""
Mobile store listing.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rest_api.routers._common.pagination import Pagination, get_pagination
from rest_api.services.domain import StoreService
from shared.infrastructure.db import get_db
from shared.utils.schemas import PageResponse, StoreOutput


router = APIRouter(tags=["mobile-stores"])


@router.get("/stores", response_model=PageResponse[StoreOutput])
def list_active_stores(
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
):
    stores, total = StoreService(db).list_active_page(pagination.offset, pagination.limit)
    return pagination.envelope(stores, total)

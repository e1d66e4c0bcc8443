"""
Mobile user listing.
"""

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from rest_api.routers._common.pagination import Pagination, get_pagination
from rest_api.services.domain import UserService
from shared.infrastructure.db import get_db
from shared.utils.schemas import PageResponse, UserOutput


router = APIRouter(tags=["mobile-users"])


@router.get("/users", response_model=PageResponse[UserOutput])
def list_active_users(
    pagination: Pagination = Depends(get_pagination),
    db: Session = Depends(get_db),
):
    """One page of active users, ordered by id."""
    users, total = UserService(db).list_active_page(pagination.offset, pagination.limit)
    return pagination.envelope(users, total)

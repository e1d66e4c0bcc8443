"""
Store management endpoints (back office).
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import StoreService
from shared.infrastructure.db import get_db
from shared.utils.schemas import (
    DataResponse,
    ListResponse,
    MessageDataResponse,
    MessageResponse,
    StoreCreate,
    StoreOutput,
    StoreUpdate,
)


router = APIRouter(tags=["admin-stores"])


@router.get("/stores", response_model=ListResponse[StoreOutput])
def list_stores(db: Session = Depends(get_db)) -> ListResponse[StoreOutput]:
    """List every non-deleted store, active or not."""
    stores = StoreService(db).list_all()
    return ListResponse(data=stores, total=len(stores))


@router.get("/stores/{store_id}", response_model=DataResponse[StoreOutput])
def get_store(store_id: int, db: Session = Depends(get_db)) -> DataResponse[StoreOutput]:
    """Get a specific store."""
    return DataResponse(data=StoreService(db).get(store_id))


@router.post(
    "/stores",
    response_model=MessageDataResponse[StoreOutput],
    status_code=status.HTTP_201_CREATED,
)
def create_store(body: StoreCreate, db: Session = Depends(get_db)) -> MessageDataResponse[StoreOutput]:
    """Create a new store. Status defaults to active."""
    store = StoreService(db).create(body.model_dump(exclude_none=True))
    return MessageDataResponse(data=store, message="Store created successfully")


@router.put("/stores/{store_id}", response_model=MessageDataResponse[StoreOutput])
def update_store(
    store_id: int,
    body: StoreUpdate,
    db: Session = Depends(get_db),
) -> MessageDataResponse[StoreOutput]:
    """Update a store. Omitted or empty fields keep their current value."""
    store = StoreService(db).update(store_id, body.model_dump(exclude_none=True))
    return MessageDataResponse(data=store, message="Store updated successfully")


@router.delete("/stores/{store_id}", response_model=MessageResponse)
def delete_store(store_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    """Soft delete a store."""
    StoreService(db).delete(store_id)
    return MessageResponse(message="Store deleted successfully")

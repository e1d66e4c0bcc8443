"""
User management endpoints (back office).
"""

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from rest_api.services.domain import UserService
from shared.infrastructure.db import get_db
from shared.utils.schemas import (
    DataResponse,
    ListResponse,
    MessageDataResponse,
    MessageResponse,
    UserCreate,
    UserOutput,
    UserUpdate,
)


router = APIRouter(tags=["admin-users"])


@router.get("/users", response_model=ListResponse[UserOutput])
def list_users(db: Session = Depends(get_db)) -> ListResponse[UserOutput]:
    """List every non-deleted user, active or not."""
    users = UserService(db).list_all()
    return ListResponse(data=users, total=len(users))


@router.get("/users/{user_id}", response_model=DataResponse[UserOutput])
def get_user(user_id: int, db: Session = Depends(get_db)) -> DataResponse[UserOutput]:
    """Get a specific user."""
    return DataResponse(data=UserService(db).get(user_id))


@router.post(
    "/users",
    response_model=MessageDataResponse[UserOutput],
    status_code=status.HTTP_201_CREATED,
)
def create_user(body: UserCreate, db: Session = Depends(get_db)) -> MessageDataResponse[UserOutput]:
    """Create a new user. Status defaults to active."""
    user = UserService(db).create(body.model_dump(exclude_none=True))
    return MessageDataResponse(data=user, message="User created successfully")


@router.put("/users/{user_id}", response_model=MessageDataResponse[UserOutput])
def update_user(
    user_id: int,
    body: UserUpdate,
    db: Session = Depends(get_db),
) -> MessageDataResponse[UserOutput]:
    """Update a user. Omitted or empty fields keep their current value."""
    user = UserService(db).update(user_id, body.model_dump(exclude_none=True))
    return MessageDataResponse(data=user, message="User updated successfully")


@router.delete("/users/{user_id}", response_model=MessageResponse)
def delete_user(user_id: int, db: Session = Depends(get_db)) -> MessageResponse:
    """Soft delete a user."""
    UserService(db).delete(user_id)
    return MessageResponse(message="User deleted successfully")

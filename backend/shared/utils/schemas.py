"""
Shared Pydantic schemas used across the application.

Request bodies for the admin CRUD endpoints, entity outputs shared by the
admin and mobile routers, and the generic JSON envelopes every endpoint
answers with.
"""

from datetime import datetime
from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, EmailStr, Field, field_validator

from shared.config.constants import ErrorMessages, Limits
from shared.utils.validators import (
    blank_to_none,
    sanitize_text,
    validate_image_url,
    validate_status,
)

T = TypeVar("T")


def _required_text(field: str, value: str) -> str:
    value = sanitize_text(value)
    if not value:
        raise ValueError(ErrorMessages.FIELD_REQUIRED.format(field=field))
    return value


def _optional_text(value: str | None) -> str | None:
    """Sanitize a non-blank value; nothing left means "leave unchanged"."""
    return sanitize_text(value) or None


# =============================================================================
# Response Envelopes
# =============================================================================


class ErrorResponse(BaseModel):
    """Body of every non-2xx response."""

    error: str


class DataResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T


class MessageDataResponse(BaseModel, Generic[T]):
    success: bool = True
    data: T
    message: str


class MessageResponse(BaseModel):
    success: bool = True
    message: str


class ListResponse(BaseModel, Generic[T]):
    """Admin list envelope: every non-deleted row plus its count."""

    success: bool = True
    data: list[T]
    total: int


class PageInfo(BaseModel):
    page: int
    limit: int
    total: int


class PageResponse(BaseModel, Generic[T]):
    """Mobile list envelope: one page of active rows."""

    success: bool = True
    data: list[T]
    pagination: PageInfo


# =============================================================================
# User Schemas
# =============================================================================


class UserOutput(BaseModel):
    id: int
    name: str
    email: str
    phone: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class UserCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    email: EmailStr
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    status: str | None = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text("name", v)

    @field_validator("email", mode="before")
    @classmethod
    def email_required(cls, v):
        if isinstance(v, str) and not v.strip():
            raise ValueError(ErrorMessages.FIELD_REQUIRED.format(field="email"))
        return v.strip() if isinstance(v, str) else v

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return validate_status(blank_to_none(v))


class UserUpdate(BaseModel):
    """All fields optional. Empty strings mean "leave unchanged"."""

    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    email: EmailStr | None = None
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    status: str | None = None

    @field_validator("name", "email", "phone", mode="before")
    @classmethod
    def empty_means_unchanged(cls, v):
        return blank_to_none(v)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: str | None) -> str | None:
        return _optional_text(v)

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return validate_status(blank_to_none(v))


# =============================================================================
# Store Schemas
# =============================================================================


class StoreOutput(BaseModel):
    id: int
    name: str
    address: str | None = None
    phone: str | None = None
    email: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class StoreCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    address: str | None = None
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    email: Optional[EmailStr] = None
    status: str | None = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text("name", v)

    @field_validator("email", mode="before")
    @classmethod
    def optional_email(cls, v):
        return blank_to_none(v)

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return validate_status(blank_to_none(v))


class StoreUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    address: str | None = None
    phone: str | None = Field(default=None, max_length=Limits.MAX_PHONE_LENGTH)
    email: Optional[EmailStr] = None
    status: str | None = None

    @field_validator("name", "address", "phone", "email", mode="before")
    @classmethod
    def empty_means_unchanged(cls, v):
        return blank_to_none(v)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: str | None) -> str | None:
        return _optional_text(v)

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return validate_status(blank_to_none(v))


# =============================================================================
# Brand Schemas
# =============================================================================


class BrandOutput(BaseModel):
    id: int
    name: str
    description: str | None = None
    logo: str | None = None
    status: str
    created_at: datetime
    updated_at: datetime

    class Config:
        from_attributes = True


class BrandCreate(BaseModel):
    name: str = Field(max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = None
    logo: str | None = None
    status: str | None = None

    @field_validator("name")
    @classmethod
    def name_required(cls, v: str) -> str:
        return _required_text("name", v)

    @field_validator("logo", mode="before")
    @classmethod
    def check_logo(cls, v):
        return validate_image_url(v)

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return validate_status(blank_to_none(v))


class BrandUpdate(BaseModel):
    name: str | None = Field(default=None, max_length=Limits.MAX_NAME_LENGTH)
    description: str | None = None
    logo: str | None = None
    status: str | None = None

    @field_validator("name", "description", mode="before")
    @classmethod
    def empty_means_unchanged(cls, v):
        return blank_to_none(v)

    @field_validator("name")
    @classmethod
    def clean_name(cls, v: str | None) -> str | None:
        return _optional_text(v)

    @field_validator("logo", mode="before")
    @classmethod
    def check_logo(cls, v):
        return validate_image_url(blank_to_none(v))

    @field_validator("status", mode="before")
    @classmethod
    def check_status(cls, v):
        return validate_status(blank_to_none(v))

"""
Pydantic schemas for catalog API request/response validation.

These schemas enforce input validation and define the API contract.
No business logic belongs here.
"""

from datetime import datetime, timezone
from decimal import Decimal
from typing import Generic, TypeVar

from pydantic import BaseModel, Field, field_validator

T = TypeVar("T")

EMAIL_PATTERN = r"^[^@\s]+@[^@\s]+\.[^@\s]+$"


class HealthResponse(BaseModel):
    """Response schema for health check endpoint."""

    status: str
    version: str


class ErrorResponse(BaseModel):
    """Standard error response body."""

    timestamp: datetime
    status: int
    error: str
    message: str | None = None
    path: str


class IdReference(BaseModel):
    """Reference to an existing entity by id."""

    id: int = Field(..., ge=1)


class PageResponse(BaseModel, Generic[T]):
    """One page of results with paging metadata."""

    content: list[T]
    page: int
    size: int
    total_elements: int
    total_pages: int
    number_of_elements: int
    first: bool
    last: bool
    empty: bool


# --- Categories ---


class CategoryRequest(BaseModel):
    """Request schema for creating or updating a category."""

    name: str = Field(..., min_length=1, max_length=255, description="Category name")


class CategoryResponse(BaseModel):
    id: int
    name: str


# --- Products ---


class ProductRequest(BaseModel):
    """Request schema for creating or updating a product.

    Attributes:
        name: Product name (5-60 chars).
        description: Free-text description.
        price: Unit price, strictly positive.
        img_url: Picture URL.
        date: Publication timestamp; must not be in the future.
        categories: Existing categories, referenced by id.
    """

    name: str = Field(..., min_length=5, max_length=60)
    description: str | None = None
    price: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2)
    img_url: str | None = Field(default=None, max_length=512)
    date: datetime | None = None
    categories: list[IdReference] = Field(default_factory=list)

    @field_validator("date")
    @classmethod
    def date_not_in_future(cls, value: datetime | None) -> datetime | None:
        if value is None:
            return value
        now = datetime.now(timezone.utc) if value.tzinfo else datetime.now()
        if value > now:
            raise ValueError("date cannot be in the future")
        return value


class ProductResponse(BaseModel):
    id: int
    name: str
    description: str | None
    price: Decimal | None
    img_url: str | None
    date: datetime | None
    categories: list[CategoryResponse]


# --- Roles ---


class RoleResponse(BaseModel):
    id: int
    authority: str


# --- Users ---


class UserUpdateRequest(BaseModel):
    """Request schema for updating a user's profile and roles."""

    first_name: str = Field(..., min_length=1, max_length=255)
    last_name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., max_length=255, pattern=EMAIL_PATTERN)
    roles: list[IdReference] = Field(default_factory=list)


class UserInsertRequest(UserUpdateRequest):
    """Request schema for creating a user; adds the initial password."""

    password: str = Field(..., min_length=6, max_length=128)


class UserResponse(BaseModel):
    id: int
    first_name: str
    last_name: str
    email: str
    roles: list[RoleResponse]

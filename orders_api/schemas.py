"""
Pydantic Schemas for Request/Response Validation

DTOs used at the HTTP boundary. Keys are camelCase on the wire
(``clientId``, ``itemId``, ``createdAt``...), snake_case in Python.
"""

import base64
import binascii
import re
from datetime import datetime
from decimal import Decimal
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator
from pydantic.alias_generators import to_camel

from orders_api.entities import ItemCategory, OrderStatus

# Identifiers are stored in 32-bit INTEGER columns
MAX_ID = 2_147_483_647
MAX_LINE_QUANTITY = 1000


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _check_base64(v: str) -> str:
    try:
        base64.b64decode(v, validate=True)
    except (binascii.Error, ValueError):
        raise ValueError("Invalid base64 format")
    return v


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class IdentifierParams(BaseModel):
    """Path identifier: a positive integer, possibly sent as a string."""
    id: int = Field(..., gt=0, le=MAX_ID)


class CustomerCreate(CamelModel):
    """Request schema for registering a customer."""
    cpf: str = Field(..., min_length=1, max_length=14, examples=["123.456.789-00"])
    name: str = Field(..., min_length=1, max_length=100, examples=["John Doe"])
    email: str = Field(..., max_length=255, examples=["john@example.com"])
    phone: str = Field(..., min_length=1, max_length=20, examples=["11999999999"])
    address: str = Field(..., min_length=1, max_length=255, examples=["Rua A, 123"])

    @field_validator("email")
    @classmethod
    def validate_email(cls, v: str) -> str:
        # Basic email validation
        if not re.match(r'^[\w\.+-]+@[\w\.-]+\.\w+$', v):
            raise ValueError('Invalid email format')
        return v.lower()


class ItemCreate(CamelModel):
    """Request schema for creating a menu item."""
    name: str = Field(..., min_length=1, max_length=100, examples=["X Bacon"])
    description: str = Field(..., examples=["Burger with bacon"])
    category: ItemCategory
    value: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2, examples=[19.0])
    image: str = Field(..., description="Base64-encoded image")

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: str) -> str:
        return _check_base64(v)

    @property
    def image_bytes(self) -> bytes:
        return base64.b64decode(self.image)


class ItemUpdate(CamelModel):
    """Partial update: every field optional, at least one required."""
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    description: Optional[str] = None
    category: Optional[ItemCategory] = None
    value: Optional[Decimal] = Field(None, ge=0, max_digits=10, decimal_places=2)
    image: Optional[str] = None

    @field_validator("image")
    @classmethod
    def validate_image(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            return v
        return _check_base64(v)

    @model_validator(mode="after")
    def at_least_one(self) -> "ItemUpdate":
        if not self.model_dump(exclude_none=True):
            raise ValueError("At least one is required")
        return self

    def changes(self) -> dict:
        changes = self.model_dump(exclude_none=True)
        if "image" in changes:
            changes["image"] = base64.b64decode(changes["image"])
        return changes


class ItemQuery(CamelModel):
    category: Optional[ItemCategory] = None


class OrderLineCreate(CamelModel):
    """Single line of an order request."""
    item_id: int = Field(..., gt=0, le=MAX_ID, examples=[1])
    quantity: int = Field(..., ge=1, le=MAX_LINE_QUANTITY, examples=[2])


class OrderCreate(CamelModel):
    """Request schema for creating a new order."""
    items: List[OrderLineCreate] = Field(..., min_length=1)
    client_id: Optional[int] = Field(None, gt=0, le=MAX_ID)


class OrderQuery(CamelModel):
    client_id: Optional[int] = Field(None, gt=0, le=MAX_ID)
    status: Optional[OrderStatus] = None


class OrderStatusUpdate(CamelModel):
    status: Literal["InPreparation", "Finished"]


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class CustomerResponse(CamelModel):
    id: int
    cpf: str
    name: str
    email: str
    address: str
    phone: str


class ItemResponse(CamelModel):
    id: int
    name: str
    description: str
    category: ItemCategory
    value: float
    quantity: int
    image: str


class OrderResponse(CamelModel):
    id: int
    status: OrderStatus
    client_id: Optional[int]
    total: float
    created_at: datetime
    updated_at: datetime
    items: List[ItemResponse]


class MessageResponse(BaseModel):
    message: str


class CustomerCreatedResponse(CamelModel):
    message: str
    customer_id: int


class ItemCreatedResponse(CamelModel):
    message: str
    item_id: int


class ErrorResponse(BaseModel):
    """Standard error response."""
    message: str
    issues: Optional[list] = None


class HealthResponse(CamelModel):
    """Health check response."""
    status: str
    database: str
    preparation_service: str
    timestamp: datetime

"""
Pydantic Schemas for Request/Response Validation

Request bodies and responses wrap their payload in a ``data`` envelope:

    {"data": {"name": "Taco", "price": 8, ...}}

Field-level rules (presence, price, quantities, status) are enforced by the
validation chain in ``app.services.validation`` so that every failure is
reported with its own message; the request schema only checks the envelope.

Author: Khalil Bannouri
Version: 3.0.0
"""

from pydantic import AliasChoices, BaseModel, Field
from typing import Optional, List, Any
from datetime import datetime

from app.models import OrderStatus


# =============================================================================
# REQUEST SCHEMAS
# =============================================================================

class RequestEnvelope(BaseModel):
    """Request body for create and update calls."""
    data: Optional[dict[str, Any]] = Field(
        None,
        examples=[{
            "name": "Taco",
            "description": "Crispy corn shell",
            "price": 8,
            "image_url": "https://example.com/taco.jpg",
        }],
    )

    @property
    def payload(self) -> dict[str, Any]:
        return self.data or {}


# =============================================================================
# RESPONSE SCHEMAS
# =============================================================================

class DishSchema(BaseModel):
    """A single dish."""
    id: str
    name: str
    description: str
    price: int
    image_url: str

    class Config:
        from_attributes = True


class OrderLineSchema(BaseModel):
    """A dish line inside an order."""
    id: Optional[str] = None
    name: Optional[str] = None
    description: Optional[str] = None
    image_url: Optional[str] = None
    price: Optional[Any] = None
    quantity: int

    class Config:
        from_attributes = True


class OrderSchema(BaseModel):
    """A single order, camelCase on the wire."""
    id: str
    deliver_to: str = Field(
        ...,
        validation_alias=AliasChoices("deliver_to", "deliverTo"),
        serialization_alias="deliverTo",
    )
    mobile_number: str = Field(
        ...,
        validation_alias=AliasChoices("mobile_number", "mobileNumber"),
        serialization_alias="mobileNumber",
    )
    status: OrderStatus
    dishes: List[OrderLineSchema]

    class Config:
        from_attributes = True


class DishResponse(BaseModel):
    data: DishSchema


class DishListResponse(BaseModel):
    data: List[DishSchema]


class OrderResponse(BaseModel):
    data: OrderSchema


class OrderListResponse(BaseModel):
    data: List[OrderSchema]


class ErrorResponse(BaseModel):
    """Standard error response."""
    error: str


class HealthResponse(BaseModel):
    """Health check response."""
    status: str
    dish_store: str
    order_store: str
    dishes: int
    orders: int
    timestamp: datetime

"""Pydantic v2 schemas for the order endpoints."""

from __future__ import annotations

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator

from merchflow.models.enums import DimensionUnit, OrderBucket, OrderStatus
from merchflow.modules.order.constants import DEFAULT_DIMENSION_UNIT, MAX_QUANTITY
from merchflow.modules.order.lifecycle import classify

# ---------------------------------------------------------------------------
# Request schemas
# ---------------------------------------------------------------------------


class OrderCreate(BaseModel):
    """Dealer order for a single product.

    ``width``/``height`` are kept as the dealer typed them; they end up
    verbatim in the order notes.
    """

    product_id: uuid.UUID
    quantity: int | None = Field(None, le=MAX_QUANTITY)
    width: str | None = Field(None, max_length=20)
    height: str | None = Field(None, max_length=20)
    dimension_unit: DimensionUnit = DEFAULT_DIMENSION_UNIT
    notes: str | None = Field(None, max_length=2000)

    @field_validator("width", "height", mode="before")
    @classmethod
    def coerce_dimension(cls, v):
        if isinstance(v, bool):
            raise ValueError("Dimension must be a number")
        if isinstance(v, float) and v.is_integer():
            return str(int(v))
        if isinstance(v, (int, float)):
            return str(v)
        return v


class OrderUpdate(BaseModel):
    """Vendor update. Omitted fields are left unchanged; blank strings clear a field."""

    status: OrderStatus | None = None
    vendor_comments: str | None = Field(None, max_length=2000)
    courier_details: str | None = Field(None, max_length=200)
    tracking_number: str | None = Field(None, max_length=100)


# ---------------------------------------------------------------------------
# Response schemas
# ---------------------------------------------------------------------------


class OrderItemResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    order_id: uuid.UUID
    product_id: uuid.UUID
    quantity: int
    created_at: datetime


class DealerSummary(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    full_name: str | None = None
    company_name: str | None = None


class OrderResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    order_number: str
    status: OrderStatus
    total_items: int
    notes: str | None = None
    vendor_comments: str | None = None
    courier_details: str | None = None
    tracking_number: str | None = None
    dealer_id: uuid.UUID
    dealer: DealerSummary | None = None
    items: list[OrderItemResponse] = Field(default_factory=list)
    created_at: datetime
    updated_at: datetime

    @computed_field
    @property
    def bucket(self) -> OrderBucket:
        return classify(self.status)


class OrderListResponse(BaseModel):
    items: list[OrderResponse]
    total: int


class TransitionOption(BaseModel):
    status: OrderStatus
    label: str


class OrderTransitionsResponse(BaseModel):
    order_id: uuid.UUID
    current_status: OrderStatus
    terminal: bool
    options: list[TransitionOption]

"""Pydantic v2 schemas for the role dashboards."""

from __future__ import annotations

from pydantic import BaseModel, Field

from merchflow.modules.order.schemas import OrderResponse
from merchflow.modules.product.schemas import ProductResponse


class BucketedOrders(BaseModel):
    """Orders split into the pending / active / completed tabs."""

    pending: list[OrderResponse] = Field(default_factory=list)
    active: list[OrderResponse] = Field(default_factory=list)
    completed: list[OrderResponse] = Field(default_factory=list)


class DealerDashboardResponse(BaseModel):
    total_orders: int
    orders: list[OrderResponse]
    buckets: BucketedOrders
    catalog_preview: list[ProductResponse]


class VendorDashboardResponse(BaseModel):
    total_orders: int
    pending_count: int
    active_count: int
    completed_count: int
    buckets: BucketedOrders


class AdminStats(BaseModel):
    total_orders: int
    pending_orders: int
    active_orders: int
    completed_orders: int
    delivered_orders: int
    total_dealers: int


class AdminDashboardResponse(BaseModel):
    stats: AdminStats
    buckets: BucketedOrders

"""Dashboard aggregation.

Every call re-reads the full role-scoped order collection and buckets it in
memory; nothing is cached between requests.
"""

from __future__ import annotations

import uuid

from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.config import settings
from merchflow.models.enums import OrderBucket, OrderStatus, UserRole
from merchflow.modules.auth.service import ProfileService
from merchflow.modules.dashboard.schemas import (
    AdminDashboardResponse,
    AdminStats,
    BucketedOrders,
    DealerDashboardResponse,
    VendorDashboardResponse,
)
from merchflow.modules.order.lifecycle import partition
from merchflow.modules.order.schemas import OrderResponse
from merchflow.modules.order.service import OrderService
from merchflow.modules.product.schemas import ProductResponse
from merchflow.modules.product.service import ProductService


def bucket_orders(orders: list) -> BucketedOrders:
    buckets = partition(orders)
    return BucketedOrders(
        pending=[OrderResponse.model_validate(o) for o in buckets[OrderBucket.PENDING]],
        active=[OrderResponse.model_validate(o) for o in buckets[OrderBucket.ACTIVE]],
        completed=[OrderResponse.model_validate(o) for o in buckets[OrderBucket.COMPLETED]],
    )


class DashboardService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def dealer_dashboard(self, dealer_id: uuid.UUID) -> DealerDashboardResponse:
        orders = await OrderService(self.db).list_dealer_orders(dealer_id)
        products = await ProductService(self.db).list_products(
            limit=settings.catalog_preview_limit
        )
        return DealerDashboardResponse(
            total_orders=len(orders),
            orders=[OrderResponse.model_validate(o) for o in orders],
            buckets=bucket_orders(orders),
            catalog_preview=[ProductResponse.model_validate(p) for p in products],
        )

    async def vendor_dashboard(self) -> VendorDashboardResponse:
        orders = await OrderService(self.db).list_orders()
        buckets = bucket_orders(orders)
        return VendorDashboardResponse(
            total_orders=len(orders),
            pending_count=len(buckets.pending),
            active_count=len(buckets.active),
            completed_count=len(buckets.completed),
            buckets=buckets,
        )

    async def admin_dashboard(self) -> AdminDashboardResponse:
        orders = await OrderService(self.db).list_orders()
        total_dealers = await ProfileService(self.db).count_by_role(UserRole.DEALER)
        buckets = bucket_orders(orders)
        stats = AdminStats(
            total_orders=len(orders),
            pending_orders=len(buckets.pending),
            active_orders=len(buckets.active),
            completed_orders=len(buckets.completed),
            delivered_orders=sum(1 for o in orders if o.status == OrderStatus.DELIVERED),
            total_dealers=total_dealers,
        )
        return AdminDashboardResponse(stats=stats, buckets=buckets)

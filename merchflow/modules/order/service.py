"""Order service — dealer order creation, role-scoped reads, vendor updates."""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable
from datetime import UTC, datetime

from sqlalchemy import func, select, text
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import joinedload

from merchflow.exceptions import NotFoundException
from merchflow.models.enums import OrderStatus
from merchflow.models.order import Order
from merchflow.models.order_item import OrderItem
from merchflow.modules.order.constants import (
    INITIAL_STATUS,
    ORDER_NUMBER_PREFIX,
    ORDER_NUMBER_SEQUENCE,
)
from merchflow.modules.order.lifecycle import ensure_transition
from merchflow.modules.order.schemas import OrderCreate, OrderUpdate
from merchflow.modules.order.validators import validate_order_request
from merchflow.modules.product.service import ProductService

logger = logging.getLogger(__name__)

_VENDOR_TEXT_FIELDS = ("vendor_comments", "courier_details", "tracking_number")


class OrderService:
    def __init__(self, db: AsyncSession):
        self.db = db

    # ------------------------------------------------------------------
    # Reference number generation
    # ------------------------------------------------------------------

    async def _generate_order_number(self) -> str:
        """Generate ORD-YYYY-NNNNNN reference using a DB sequence."""
        result = await self.db.execute(text(f"SELECT nextval('{ORDER_NUMBER_SEQUENCE}')"))
        seq_val = result.scalar()
        year = datetime.now(UTC).year
        return f"{ORDER_NUMBER_PREFIX}-{year}-{seq_val:06d}"

    # ------------------------------------------------------------------
    # Create
    # ------------------------------------------------------------------

    async def create_order(self, dealer_id: uuid.UUID, body: OrderCreate) -> Order:
        """Create a pending order and its single item for *dealer_id*.

        Validation happens before any write.  The order and the item are
        flushed in the caller's transaction, so a failure on the item insert
        rolls back the order as well.
        """
        product = await ProductService(self.db).get_active_product(body.product_id)
        draft = validate_order_request(product, body)

        order_number = await self._generate_order_number()
        order = Order(
            order_number=order_number,
            dealer_id=dealer_id,
            status=INITIAL_STATUS,
            total_items=draft.total_items,
            notes=draft.notes,
        )
        self.db.add(order)
        await self.db.flush()

        item = OrderItem(
            order_id=order.id,
            product_id=product.id,
            quantity=draft.item_quantity,
        )
        self.db.add(item)
        await self.db.flush()

        logger.info(
            "Created order %s (%s) for dealer %s: product %s x%d",
            order.id, order_number, dealer_id, product.id, draft.item_quantity,
        )
        return await self.get_order(order.id)

    # ------------------------------------------------------------------
    # Read
    # ------------------------------------------------------------------

    async def get_order(self, order_id: uuid.UUID) -> Order:
        """Get an order with its items and dealer profile."""
        result = await self.db.execute(
            select(Order)
            .options(joinedload(Order.items), joinedload(Order.dealer))
            .where(Order.id == order_id)
            .execution_options(populate_existing=True)
        )
        order = result.unique().scalar_one_or_none()
        if order is None:
            raise NotFoundException(f"Order {order_id} not found")
        return order

    async def list_dealer_orders(
        self,
        dealer_id: uuid.UUID,
        statuses: Iterable[OrderStatus] | None = None,
    ) -> list[Order]:
        """All orders owned by *dealer_id*, newest first."""
        query = select(Order).where(Order.dealer_id == dealer_id)
        if statuses is not None:
            query = query.where(Order.status.in_(list(statuses)))
        query = query.order_by(Order.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def list_orders(
        self,
        statuses: Iterable[OrderStatus] | None = None,
    ) -> list[Order]:
        """All orders with their dealer profile, newest first."""
        query = select(Order).options(joinedload(Order.dealer))
        if statuses is not None:
            query = query.where(Order.status.in_(list(statuses)))
        query = query.order_by(Order.created_at.desc())
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def count_orders(self, status: OrderStatus | None = None) -> int:
        query = select(func.count()).select_from(Order)
        if status is not None:
            query = query.where(Order.status == status)
        result = await self.db.execute(query)
        return result.scalar() or 0

    # ------------------------------------------------------------------
    # Vendor update
    # ------------------------------------------------------------------

    async def update_order(
        self,
        order_id: uuid.UUID,
        body: OrderUpdate,
        vendor_id: uuid.UUID,
    ) -> Order:
        """Apply a vendor update after checking the status transition.

        Only fields present in *body* change.  No locking: concurrent
        updates from different sessions are last-write-wins.
        """
        order = await self.get_order(order_id)
        changes = body.model_dump(exclude_unset=True)

        old_status = order.status
        new_status = changes.pop("status", None)
        if new_status is not None:
            ensure_transition(old_status, new_status)
            order.status = new_status

        for field in _VENDOR_TEXT_FIELDS:
            if field in changes:
                value = changes[field]
                if value is not None:
                    value = value.strip() or None
                setattr(order, field, value)

        await self.db.flush()

        logger.info(
            "Vendor %s updated order %s (%s -> %s)",
            vendor_id, order_id, old_status.value, order.status.value,
        )
        return await self.get_order(order_id)

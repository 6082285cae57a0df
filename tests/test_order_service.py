"""Unit tests for OrderService — creation, scoped reads, vendor updates."""

from __future__ import annotations

import uuid
from unittest.mock import patch

import pytest
from sqlalchemy.exc import IntegrityError

from merchflow.exceptions import (
    InvalidTransitionException,
    NotFoundException,
    ValidationException,
)
from merchflow.models.enums import OrderStatus
from merchflow.models.order import Order
from merchflow.models.order_item import OrderItem
from merchflow.modules.order.schemas import OrderCreate, OrderUpdate
from merchflow.modules.order.service import OrderService
from tests.factories import make_order, make_product, make_scalar_result


@pytest.fixture
def order_service(mock_db):
    return OrderService(mock_db)


def _added(mock_db, model) -> list:
    return [c.args[0] for c in mock_db.add.call_args_list if isinstance(c.args[0], model)]


# ---------------------------------------------------------------------------
# Create
# ---------------------------------------------------------------------------


class TestCreateOrder:
    @pytest.mark.asyncio
    async def test_dimensioned_order_inserts_one_order_and_one_item(self, order_service, mock_db):
        product = make_product(requires_dimensions=True)
        dealer_id = uuid.uuid4()
        created = make_order(dealer_id=dealer_id)
        mock_db.execute.side_effect = [
            make_scalar_result(product),  # product lookup
            make_scalar_result(42),  # nextval
            make_scalar_result(created),  # re-fetch
        ]

        result = await order_service.create_order(
            dealer_id,
            OrderCreate(product_id=product.id, width="10", height="5", dimension_unit="feet"),
        )

        assert result is created
        orders = _added(mock_db, Order)
        items = _added(mock_db, OrderItem)
        assert len(orders) == 1
        assert len(items) == 1
        order = orders[0]
        assert order.dealer_id == dealer_id
        assert order.status == OrderStatus.PENDING
        assert order.total_items == 1
        assert order.notes.startswith("Dimensions: 10 x 5 feet")
        assert order.order_number.endswith("-000042")
        assert order.order_number.startswith("ORD-")
        assert items[0].product_id == product.id
        assert items[0].quantity == 1
        assert mock_db.flush.await_count == 2

    @pytest.mark.asyncio
    async def test_quantity_order_uses_requested_quantity(self, order_service, mock_db):
        product = make_product(requires_dimensions=False, min_quantity=5)
        mock_db.execute.side_effect = [
            make_scalar_result(product),
            make_scalar_result(7),
            make_scalar_result(make_order(total_items=8)),
        ]

        await order_service.create_order(
            uuid.uuid4(), OrderCreate(product_id=product.id, quantity=8)
        )

        assert _added(mock_db, Order)[0].total_items == 8
        assert _added(mock_db, OrderItem)[0].quantity == 8

    @pytest.mark.asyncio
    async def test_below_minimum_rejected_before_any_insert(self, order_service, mock_db):
        product = make_product(requires_dimensions=False, min_quantity=5)
        mock_db.execute.return_value = make_scalar_result(product)

        with pytest.raises(ValidationException):
            await order_service.create_order(
                uuid.uuid4(), OrderCreate(product_id=product.id, quantity=3)
            )

        mock_db.add.assert_not_called()
        mock_db.flush.assert_not_awaited()
        # Only the product lookup ran; no sequence value was consumed
        assert mock_db.execute.await_count == 1

    @pytest.mark.asyncio
    async def test_zero_width_rejected_before_any_insert(self, order_service, mock_db):
        product = make_product(requires_dimensions=True)
        mock_db.execute.return_value = make_scalar_result(product)

        with pytest.raises(ValidationException):
            await order_service.create_order(
                uuid.uuid4(), OrderCreate(product_id=product.id, width="0", height="5")
            )

        mock_db.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_inactive_or_missing_product_is_not_found(self, order_service, mock_db):
        mock_db.execute.return_value = make_scalar_result(None)

        with pytest.raises(NotFoundException):
            await order_service.create_order(
                uuid.uuid4(), OrderCreate(product_id=uuid.uuid4(), quantity=1)
            )

        mock_db.add.assert_not_called()

    @pytest.mark.asyncio
    async def test_item_insert_failure_propagates_for_rollback(self, order_service, mock_db):
        product = make_product(requires_dimensions=False)
        mock_db.execute.side_effect = [make_scalar_result(product), make_scalar_result(1)]
        mock_db.flush.side_effect = [None, IntegrityError("INSERT", {}, Exception("fk"))]

        with pytest.raises(IntegrityError):
            await order_service.create_order(
                uuid.uuid4(), OrderCreate(product_id=product.id, quantity=2)
            )

        # Nothing was committed by the service; the request session rolls back both rows
        mock_db.commit.assert_not_awaited()


# ---------------------------------------------------------------------------
# Read
# ---------------------------------------------------------------------------


class TestReads:
    @pytest.mark.asyncio
    async def test_get_order_not_found(self, order_service, mock_db):
        mock_db.execute.return_value = make_scalar_result(None)

        with pytest.raises(NotFoundException):
            await order_service.get_order(uuid.uuid4())

    @pytest.mark.asyncio
    async def test_list_dealer_orders_scopes_by_dealer(self, order_service, mock_db):
        dealer_id = uuid.uuid4()
        orders = [make_order(dealer_id=dealer_id), make_order(dealer_id=dealer_id)]
        mock_db.execute.return_value = make_scalar_result(orders)

        result = await order_service.list_dealer_orders(
            dealer_id, statuses=[OrderStatus.DELIVERED, OrderStatus.REJECTED]
        )

        assert result == orders
        query = mock_db.execute.call_args.args[0]
        compiled = str(query)
        assert "orders.dealer_id" in compiled
        assert "orders.status IN" in compiled
        assert "ORDER BY orders.created_at DESC" in compiled

    @pytest.mark.asyncio
    async def test_list_orders_without_filter(self, order_service, mock_db):
        mock_db.execute.return_value = make_scalar_result([])

        assert await order_service.list_orders() == []

        compiled = str(mock_db.execute.call_args.args[0])
        assert "WHERE" not in compiled

    @pytest.mark.asyncio
    async def test_count_orders(self, order_service, mock_db):
        mock_db.execute.return_value = make_scalar_result(11)

        assert await order_service.count_orders(OrderStatus.PENDING) == 11


# ---------------------------------------------------------------------------
# Vendor update
# ---------------------------------------------------------------------------


class TestUpdateOrder:
    @pytest.mark.asyncio
    async def test_accept_pending_order_with_details(self, order_service, mock_db):
        order = make_order(status=OrderStatus.PENDING)
        mock_db.execute.return_value = make_scalar_result(order)

        result = await order_service.update_order(
            order.id,
            OrderUpdate(
                status=OrderStatus.ACCEPTED,
                vendor_comments="  Printing starts Monday ",
                courier_details="Blue Dart",
            ),
            vendor_id=uuid.uuid4(),
        )

        assert result is order
        assert order.status == OrderStatus.ACCEPTED
        assert order.vendor_comments == "Printing starts Monday"
        assert order.courier_details == "Blue Dart"
        assert order.tracking_number is None
        mock_db.flush.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_illegal_transition_rejected_before_write(self, order_service, mock_db):
        order = make_order(status=OrderStatus.PENDING)
        mock_db.execute.return_value = make_scalar_result(order)

        with pytest.raises(InvalidTransitionException):
            await order_service.update_order(
                order.id,
                OrderUpdate(status=OrderStatus.DELIVERED, tracking_number="BD123"),
                vendor_id=uuid.uuid4(),
            )

        assert order.status == OrderStatus.PENDING
        assert order.tracking_number is None
        mock_db.flush.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_terminal_order_cannot_be_reopened(self, order_service, mock_db):
        order = make_order(status=OrderStatus.NOT_IN_STOCK)
        mock_db.execute.return_value = make_scalar_result(order)

        with pytest.raises(InvalidTransitionException):
            await order_service.update_order(
                order.id, OrderUpdate(status=OrderStatus.ACCEPTED), vendor_id=uuid.uuid4()
            )

    @pytest.mark.asyncio
    async def test_details_only_update_keeps_status(self, order_service, mock_db):
        order = make_order(status=OrderStatus.DISPATCHED)
        order.courier_details = "FedEx"
        mock_db.execute.return_value = make_scalar_result(order)

        await order_service.update_order(
            order.id, OrderUpdate(tracking_number="FX998877"), vendor_id=uuid.uuid4()
        )

        assert order.status == OrderStatus.DISPATCHED
        assert order.tracking_number == "FX998877"
        assert order.courier_details == "FedEx"

    @pytest.mark.asyncio
    async def test_blank_string_clears_field(self, order_service, mock_db):
        order = make_order(status=OrderStatus.ACCEPTED)
        order.vendor_comments = "old"
        mock_db.execute.return_value = make_scalar_result(order)

        await order_service.update_order(
            order.id, OrderUpdate(vendor_comments=""), vendor_id=uuid.uuid4()
        )

        assert order.vendor_comments is None

    @pytest.mark.asyncio
    @patch("merchflow.modules.order.service.ensure_transition")
    async def test_transition_checked_against_current_status(
        self, mock_ensure, order_service, mock_db
    ):
        order = make_order(status=OrderStatus.ACCEPTED)
        mock_db.execute.return_value = make_scalar_result(order)

        await order_service.update_order(
            order.id, OrderUpdate(status=OrderStatus.DISPATCHED), vendor_id=uuid.uuid4()
        )

        mock_ensure.assert_called_once_with(OrderStatus.ACCEPTED, OrderStatus.DISPATCHED)

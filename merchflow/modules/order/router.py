"""Order API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.database.session import get_db
from merchflow.exceptions import AccessDeniedException
from merchflow.models.enums import OrderBucket, OrderStatus, UserRole
from merchflow.models.profile import Profile
from merchflow.modules.auth.constants import ACCESS_DENIED_MESSAGE, LOGIN_ROUTE
from merchflow.modules.auth.guard import require_dealer, require_role, require_vendor
from merchflow.modules.order.lifecycle import (
    allowed_transitions,
    bucket_statuses,
    is_terminal,
)
from merchflow.modules.order.schemas import (
    OrderCreate,
    OrderListResponse,
    OrderResponse,
    OrderTransitionsResponse,
    OrderUpdate,
    TransitionOption,
)
from merchflow.modules.order.service import OrderService

router = APIRouter(prefix="/orders", tags=["orders"])

_require_staff = require_role(UserRole.VENDOR, UserRole.ADMIN)
_require_any = require_role(*UserRole)


def _list_response(orders) -> OrderListResponse:
    return OrderListResponse(
        items=[OrderResponse.model_validate(o) for o in orders],
        total=len(orders),
    )


# ---------------------------------------------------------------------------
# Dealer
# ---------------------------------------------------------------------------


@router.post("/", response_model=OrderResponse, status_code=201)
async def create_order(
    body: OrderCreate,
    profile: Profile = Depends(require_dealer),
    db: AsyncSession = Depends(get_db),
):
    """Place an order for one product."""
    svc = OrderService(db)
    order = await svc.create_order(dealer_id=profile.id, body=body)
    return OrderResponse.model_validate(order)


@router.get("/mine", response_model=OrderListResponse)
async def list_my_orders(
    profile: Profile = Depends(require_dealer),
    db: AsyncSession = Depends(get_db),
):
    """All of the calling dealer's orders, newest first."""
    svc = OrderService(db)
    return _list_response(await svc.list_dealer_orders(profile.id))


@router.get("/history", response_model=OrderListResponse)
async def list_past_orders(
    profile: Profile = Depends(require_dealer),
    db: AsyncSession = Depends(get_db),
):
    """The calling dealer's completed orders (delivered, rejected, not in stock)."""
    svc = OrderService(db)
    orders = await svc.list_dealer_orders(
        profile.id, statuses=bucket_statuses(OrderBucket.COMPLETED)
    )
    return _list_response(orders)


# ---------------------------------------------------------------------------
# Vendor / admin
# ---------------------------------------------------------------------------


@router.get("/", response_model=OrderListResponse)
async def list_orders(
    status: list[OrderStatus] | None = Query(None),
    profile: Profile = Depends(_require_staff),
    db: AsyncSession = Depends(get_db),
):
    """All orders across dealers, optionally filtered by status."""
    svc = OrderService(db)
    return _list_response(await svc.list_orders(statuses=status))


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: uuid.UUID,
    profile: Profile = Depends(_require_any),
    db: AsyncSession = Depends(get_db),
):
    """Get a single order. Dealers may only read their own."""
    svc = OrderService(db)
    order = await svc.get_order(order_id)
    if profile.role == UserRole.DEALER and order.dealer_id != profile.id:
        raise AccessDeniedException(ACCESS_DENIED_MESSAGE, redirect_to=LOGIN_ROUTE)
    return OrderResponse.model_validate(order)


@router.get("/{order_id}/transitions", response_model=OrderTransitionsResponse)
async def get_order_transitions(
    order_id: uuid.UUID,
    profile: Profile = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    """Statuses the vendor may move this order to."""
    svc = OrderService(db)
    order = await svc.get_order(order_id)
    return OrderTransitionsResponse(
        order_id=order.id,
        current_status=order.status,
        terminal=is_terminal(order.status),
        options=[
            TransitionOption(status=s, label=label)
            for s, label in allowed_transitions(order.status)
        ],
    )


@router.patch("/{order_id}", response_model=OrderResponse)
async def update_order(
    order_id: uuid.UUID,
    body: OrderUpdate,
    profile: Profile = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    """Update status, comments, courier details and tracking number (vendor action)."""
    svc = OrderService(db)
    order = await svc.update_order(order_id=order_id, body=body, vendor_id=profile.id)
    return OrderResponse.model_validate(order)

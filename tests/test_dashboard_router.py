"""Unit tests for dashboard router endpoints and their role guards."""

from __future__ import annotations

import uuid
from unittest.mock import AsyncMock, patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from merchflow.app import register_exception_handlers
from merchflow.database.session import get_db
from merchflow.models.enums import OrderStatus, UserRole
from merchflow.modules.auth.auth import AuthenticatedIdentity, get_current_identity
from merchflow.modules.dashboard.router import router
from merchflow.modules.dashboard.schemas import (
    AdminDashboardResponse,
    AdminStats,
    BucketedOrders,
    DealerDashboardResponse,
    VendorDashboardResponse,
)
from merchflow.modules.dashboard.service import bucket_orders
from merchflow.modules.order.schemas import OrderResponse
from tests.factories import make_order, make_profile

# ── Test app setup ────────────────────────────────────────────────────────

app = FastAPI()
app.include_router(router)
register_exception_handlers(app)

_identity = AuthenticatedIdentity(id=uuid.uuid4(), email="ops@merchflow.in")

_mock_db = AsyncMock()


async def _override_get_current_identity():
    return _identity


async def _override_get_db():
    yield _mock_db


app.dependency_overrides[get_current_identity] = _override_get_current_identity
app.dependency_overrides[get_db] = _override_get_db

client = TestClient(app)


@pytest.fixture
def acting_as():
    with patch("merchflow.modules.auth.guard.ProfileService") as MockProfiles:

        def _set(role: UserRole):
            profile = make_profile(role=role, profile_id=_identity.id)
            MockProfiles.return_value.get_profile = AsyncMock(return_value=profile)
            return profile

        yield _set


@pytest.fixture
def dashboard_svc():
    with patch("merchflow.modules.dashboard.router.DashboardService") as MockSvc:
        yield MockSvc.return_value


# ---------------------------------------------------------------------------
# Own dashboard per role
# ---------------------------------------------------------------------------


def test_dealer_dashboard(acting_as, dashboard_svc):
    profile = acting_as(UserRole.DEALER)
    orders = [make_order(status=OrderStatus.PENDING, dealer_id=profile.id)]
    dashboard_svc.dealer_dashboard = AsyncMock(
        return_value=DealerDashboardResponse(
            total_orders=1,
            orders=[OrderResponse.model_validate(o) for o in orders],
            buckets=bucket_orders(orders),
            catalog_preview=[],
        )
    )

    response = client.get("/dashboard/dealer")

    assert response.status_code == 200
    data = response.json()
    assert data["total_orders"] == 1
    assert data["buckets"]["pending"][0]["bucket"] == "pending"
    dashboard_svc.dealer_dashboard.assert_awaited_once_with(profile.id)


def test_vendor_dashboard(acting_as, dashboard_svc):
    acting_as(UserRole.VENDOR)
    dashboard_svc.vendor_dashboard = AsyncMock(
        return_value=VendorDashboardResponse(
            total_orders=0,
            pending_count=0,
            active_count=0,
            completed_count=0,
            buckets=BucketedOrders(),
        )
    )

    response = client.get("/dashboard/vendor")

    assert response.status_code == 200
    assert response.json()["buckets"] == {"pending": [], "active": [], "completed": []}


def test_admin_dashboard(acting_as, dashboard_svc):
    acting_as(UserRole.ADMIN)
    dashboard_svc.admin_dashboard = AsyncMock(
        return_value=AdminDashboardResponse(
            stats=AdminStats(
                total_orders=4,
                pending_orders=1,
                active_orders=1,
                completed_orders=2,
                delivered_orders=1,
                total_dealers=2,
            ),
            buckets=BucketedOrders(),
        )
    )

    response = client.get("/dashboard/admin")

    assert response.status_code == 200
    assert response.json()["stats"]["total_dealers"] == 2


# ---------------------------------------------------------------------------
# Role gates
# ---------------------------------------------------------------------------


@pytest.mark.parametrize(
    "path,role",
    [
        ("/dashboard/vendor", UserRole.DEALER),
        ("/dashboard/admin", UserRole.DEALER),
        ("/dashboard/dealer", UserRole.VENDOR),
        ("/dashboard/admin", UserRole.VENDOR),
        ("/dashboard/dealer", UserRole.ADMIN),
        ("/dashboard/vendor", UserRole.ADMIN),
    ],
)
def test_other_roles_are_denied(acting_as, dashboard_svc, path, role):
    acting_as(role)

    response = client.get(path)

    assert response.status_code == 403
    error = response.json()["error"]
    assert error["code"] == "ACCESS_DENIED"
    assert error["redirectTo"] == "/auth"
    dashboard_svc.dealer_dashboard.assert_not_called()
    dashboard_svc.vendor_dashboard.assert_not_called()
    dashboard_svc.admin_dashboard.assert_not_called()

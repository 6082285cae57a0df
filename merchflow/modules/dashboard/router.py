"""Role dashboard endpoints."""

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.database.session import get_db
from merchflow.models.profile import Profile
from merchflow.modules.auth.guard import require_admin, require_dealer, require_vendor
from merchflow.modules.dashboard.schemas import (
    AdminDashboardResponse,
    DealerDashboardResponse,
    VendorDashboardResponse,
)
from merchflow.modules.dashboard.service import DashboardService

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/dealer", response_model=DealerDashboardResponse)
async def dealer_dashboard(
    profile: Profile = Depends(require_dealer),
    db: AsyncSession = Depends(get_db),
):
    return await DashboardService(db).dealer_dashboard(profile.id)


@router.get("/vendor", response_model=VendorDashboardResponse)
async def vendor_dashboard(
    profile: Profile = Depends(require_vendor),
    db: AsyncSession = Depends(get_db),
):
    return await DashboardService(db).vendor_dashboard()


@router.get("/admin", response_model=AdminDashboardResponse)
async def admin_dashboard(
    profile: Profile = Depends(require_admin),
    db: AsyncSession = Depends(get_db),
):
    """Order statistics across all dealers plus the bucketed order list."""
    return await DashboardService(db).admin_dashboard()

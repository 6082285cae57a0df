"""Centralized v1 API router — all module routers are included here."""

from fastapi import APIRouter

from merchflow.modules.auth.router import router as auth_router
from merchflow.modules.dashboard.router import router as dashboard_router
from merchflow.modules.order.router import router as order_router
from merchflow.modules.product.router import router as product_router

v1_router = APIRouter(prefix="/api/v1")
v1_router.include_router(auth_router)
v1_router.include_router(product_router)
v1_router.include_router(order_router)
v1_router.include_router(dashboard_router)

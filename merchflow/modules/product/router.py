"""Catalog API router."""

from __future__ import annotations

import uuid

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.database.session import get_db
from merchflow.models.profile import Profile
from merchflow.modules.auth.guard import require_dealer
from merchflow.modules.product.schemas import ProductListResponse, ProductResponse
from merchflow.modules.product.service import ProductService

router = APIRouter(prefix="/products", tags=["products"])


@router.get("/", response_model=ProductListResponse)
async def list_products(
    limit: int | None = Query(None, ge=1, le=500),
    profile: Profile = Depends(require_dealer),
    db: AsyncSession = Depends(get_db),
):
    """List the active catalog ordered by name."""
    svc = ProductService(db)
    products = await svc.list_products(limit=limit)
    return ProductListResponse(
        items=[ProductResponse.model_validate(p) for p in products],
        total=len(products),
    )


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: uuid.UUID,
    profile: Profile = Depends(require_dealer),
    db: AsyncSession = Depends(get_db),
):
    """Get an active product for the order form."""
    svc = ProductService(db)
    product = await svc.get_active_product(product_id)
    return ProductResponse.model_validate(product)

"""Catalog reads over active products."""

from __future__ import annotations

import uuid

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from merchflow.exceptions import NotFoundException
from merchflow.models.product import Product
from merchflow.modules.product.constants import POPULAR_KEYWORDS


def is_popular(name: str) -> bool:
    lowered = name.lower()
    return any(keyword in lowered for keyword in POPULAR_KEYWORDS)


class ProductService:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def list_products(self, limit: int | None = None) -> list[Product]:
        """Active products ordered by name, optionally capped at *limit*."""
        query = select(Product).where(Product.is_active.is_(True)).order_by(Product.name)
        if limit is not None:
            query = query.limit(limit)
        result = await self.db.execute(query)
        return list(result.scalars().all())

    async def get_active_product(self, product_id: uuid.UUID) -> Product:
        result = await self.db.execute(
            select(Product).where(
                Product.id == product_id,
                Product.is_active.is_(True),
            )
        )
        product = result.scalar_one_or_none()
        if product is None:
            raise NotFoundException("Product not found")
        return product

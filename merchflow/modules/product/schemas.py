"""Pydantic v2 schemas for the catalog endpoints."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, ConfigDict, computed_field

from merchflow.modules.product.service import is_popular as name_is_popular


class ProductResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: uuid.UUID
    name: str
    category: str | None = None
    sku: str | None = None
    description: str | None = None
    image_url: str | None = None
    unit_type: str | None = None
    min_quantity: int | None = None
    requires_dimensions: bool = False

    @computed_field
    @property
    def is_popular(self) -> bool:
        return name_is_popular(self.name)


class ProductListResponse(BaseModel):
    items: list[ProductResponse]
    total: int

"""Order creation validation.

Everything here runs before any write: a request that fails validation
never reaches the database.
"""

from __future__ import annotations

from dataclasses import dataclass

from merchflow.exceptions import ValidationException
from merchflow.models.product import Product
from merchflow.modules.order.constants import (
    DEFAULT_MIN_QUANTITY,
    DIMENSION_PATTERN,
    MSG_DIMENSIONS_NOT_NUMERIC,
    MSG_DIMENSIONS_NOT_POSITIVE,
    MSG_DIMENSIONS_REQUIRED,
    MSG_MIN_QUANTITY,
)
from merchflow.modules.order.schemas import OrderCreate


@dataclass(frozen=True)
class OrderDraft:
    """Validated values for the order row and its single item."""

    total_items: int
    item_quantity: int
    notes: str | None


def minimum_quantity(product: Product) -> int:
    return product.min_quantity or DEFAULT_MIN_QUANTITY


def format_dimension_notes(width: str, height: str, unit: str, notes: str | None) -> str:
    text = f"Dimensions: {width} x {height} {unit}"
    if notes:
        text = f"{text}\n{notes}"
    return text


def _parse_dimension(raw: str) -> float:
    if not DIMENSION_PATTERN.match(raw):
        raise ValidationException(
            MSG_DIMENSIONS_NOT_NUMERIC,
            details=[{"field": "dimensions", "message": MSG_DIMENSIONS_NOT_NUMERIC}],
        )
    return float(raw)


def validate_order_request(product: Product, body: OrderCreate) -> OrderDraft:
    """Check *body* against *product* and derive the rows to insert.

    Dimensioned products need positive width and height and always count as
    one item; other products need at least the product's minimum quantity.
    """
    notes = body.notes.strip() if body.notes and body.notes.strip() else None

    if product.requires_dimensions:
        width = (body.width or "").strip()
        height = (body.height or "").strip()
        if not width or not height:
            raise ValidationException(
                MSG_DIMENSIONS_REQUIRED,
                details=[{"field": "dimensions", "message": MSG_DIMENSIONS_REQUIRED}],
            )
        if _parse_dimension(width) <= 0 or _parse_dimension(height) <= 0:
            raise ValidationException(
                MSG_DIMENSIONS_NOT_POSITIVE,
                details=[{"field": "dimensions", "message": MSG_DIMENSIONS_NOT_POSITIVE}],
            )
        return OrderDraft(
            total_items=1,
            item_quantity=1,
            notes=format_dimension_notes(width, height, body.dimension_unit.value, notes),
        )

    min_qty = minimum_quantity(product)
    quantity = body.quantity if body.quantity is not None else min_qty
    if quantity < min_qty:
        message = MSG_MIN_QUANTITY.format(min_quantity=min_qty)
        raise ValidationException(
            message,
            details=[{"field": "quantity", "message": message}],
        )
    return OrderDraft(total_items=quantity, item_quantity=quantity, notes=notes)

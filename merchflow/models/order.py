"""Order model — a dealer's merchandise order and its vendor-side tracking fields."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import CheckConstraint, ForeignKey, Index, Integer, String, Text
from sqlalchemy.dialects.postgresql import UUID
from sqlalchemy.orm import Mapped, mapped_column, relationship

from merchflow.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, pg_enum
from merchflow.models.enums import OrderStatus

if TYPE_CHECKING:
    from merchflow.models.order_item import OrderItem
    from merchflow.models.profile import Profile


class Order(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    __tablename__ = "orders"

    order_number: Mapped[str] = mapped_column(
        String(50), nullable=False, unique=True
    )
    dealer_id: Mapped[uuid.UUID] = mapped_column(
        UUID(as_uuid=True),
        ForeignKey("profiles.id", ondelete="RESTRICT"),
        nullable=False,
    )
    status: Mapped[OrderStatus] = mapped_column(
        pg_enum(OrderStatus, "order_status"), nullable=False, server_default="pending"
    )
    total_items: Mapped[int] = mapped_column(Integer, nullable=False)
    notes: Mapped[str | None] = mapped_column(Text)

    # Vendor-maintained fields
    vendor_comments: Mapped[str | None] = mapped_column(Text)
    courier_details: Mapped[str | None] = mapped_column(String(200))
    tracking_number: Mapped[str | None] = mapped_column(String(100))

    # Relationships
    dealer: Mapped[Profile] = relationship(
        "Profile", back_populates="orders", lazy="noload"
    )
    items: Mapped[list[OrderItem]] = relationship(
        "OrderItem", back_populates="order", lazy="noload"
    )

    __table_args__ = (
        CheckConstraint("total_items > 0", name="ck_orders_total_items_positive"),
        Index("ix_orders_dealer_id_created_at", "dealer_id", "created_at"),
        Index("ix_orders_status", "status"),
    )

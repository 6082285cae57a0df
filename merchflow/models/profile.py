from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import Index, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from merchflow.database.base import Base, TimestampMixin, UUIDPrimaryKeyMixin, pg_enum
from merchflow.models.enums import UserRole

if TYPE_CHECKING:
    from merchflow.models.order import Order


class Profile(UUIDPrimaryKeyMixin, TimestampMixin, Base):
    """Application profile of an identity-provider user.

    ``id`` is the identity subject, so it is always assigned explicitly.
    """

    __tablename__ = "profiles"

    role: Mapped[UserRole] = mapped_column(
        pg_enum(UserRole, "user_role"), nullable=False, server_default="dealer"
    )
    full_name: Mapped[str | None] = mapped_column(String(200))
    company_name: Mapped[str | None] = mapped_column(String(200))

    # Relationships
    orders: Mapped[list[Order]] = relationship(
        "Order", back_populates="dealer", lazy="noload"
    )

    __table_args__ = (
        Index("ix_profiles_role", "role"),
    )

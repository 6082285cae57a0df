# Import all models so SQLAlchemy metadata is populated for Alembic autogenerate
from merchflow.models.enums import DimensionUnit, OrderBucket, OrderStatus, UserRole
from merchflow.models.order import Order
from merchflow.models.order_item import OrderItem
from merchflow.models.product import Product
from merchflow.models.profile import Profile

__all__ = [
    "DimensionUnit",
    "Order",
    "OrderBucket",
    "OrderItem",
    "OrderStatus",
    "Product",
    "Profile",
    "UserRole",
]

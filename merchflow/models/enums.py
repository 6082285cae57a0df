import enum


class UserRole(str, enum.Enum):
    DEALER = "dealer"
    VENDOR = "vendor"
    ADMIN = "admin"


class OrderStatus(str, enum.Enum):
    PENDING = "pending"
    ACCEPTED = "accepted"
    REJECTED = "rejected"
    NOT_IN_STOCK = "not_in_stock"
    DISPATCHED = "dispatched"
    DELIVERED = "delivered"


class OrderBucket(str, enum.Enum):
    PENDING = "pending"
    ACTIVE = "active"
    COMPLETED = "completed"


class DimensionUnit(str, enum.Enum):
    FEET = "feet"
    CM = "cm"
    INCH = "inch"

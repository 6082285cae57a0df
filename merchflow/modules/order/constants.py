"""Order status transitions, buckets, and validation messages."""

from __future__ import annotations

import re

from merchflow.models.enums import DimensionUnit, OrderBucket, OrderStatus

# ---------------------------------------------------------------------------
# Valid status transitions: current_status -> set of allowed next statuses
# ---------------------------------------------------------------------------

ORDER_TRANSITIONS: dict[OrderStatus, set[OrderStatus]] = {
    OrderStatus.PENDING: {
        OrderStatus.ACCEPTED,
        OrderStatus.REJECTED,
        OrderStatus.NOT_IN_STOCK,
    },
    OrderStatus.ACCEPTED: {
        OrderStatus.DISPATCHED,
    },
    OrderStatus.DISPATCHED: {
        OrderStatus.DELIVERED,
    },
}

# Terminal statuses (no further transitions)
ORDER_TERMINAL_STATUSES: set[OrderStatus] = {
    OrderStatus.REJECTED,
    OrderStatus.NOT_IN_STOCK,
    OrderStatus.DELIVERED,
}

INITIAL_STATUS = OrderStatus.PENDING

# ---------------------------------------------------------------------------
# Dashboard buckets
# ---------------------------------------------------------------------------

STATUS_BUCKETS: dict[OrderStatus, OrderBucket] = {
    OrderStatus.PENDING: OrderBucket.PENDING,
    OrderStatus.ACCEPTED: OrderBucket.ACTIVE,
    OrderStatus.DISPATCHED: OrderBucket.ACTIVE,
    OrderStatus.REJECTED: OrderBucket.COMPLETED,
    OrderStatus.NOT_IN_STOCK: OrderBucket.COMPLETED,
    OrderStatus.DELIVERED: OrderBucket.COMPLETED,
}

# Vendor update form labels
STATUS_LABELS: dict[OrderStatus, str] = {
    OrderStatus.PENDING: "Pending",
    OrderStatus.ACCEPTED: "Accept Order",
    OrderStatus.REJECTED: "Reject Order",
    OrderStatus.NOT_IN_STOCK: "Not in Stock",
    OrderStatus.DISPATCHED: "Dispatched",
    OrderStatus.DELIVERED: "Delivered",
}

# ---------------------------------------------------------------------------
# Order numbering
# ---------------------------------------------------------------------------

ORDER_NUMBER_SEQUENCE = "order_number_seq"
ORDER_NUMBER_PREFIX = "ORD"

# ---------------------------------------------------------------------------
# Creation
# ---------------------------------------------------------------------------

DEFAULT_DIMENSION_UNIT = DimensionUnit.FEET
DEFAULT_MIN_QUANTITY = 1

MSG_DIMENSIONS_REQUIRED = "Please enter dimensions"
MSG_DIMENSIONS_NOT_NUMERIC = "Dimensions must be numbers"
MSG_DIMENSIONS_NOT_POSITIVE = "Dimensions must be greater than 0"
MSG_MIN_QUANTITY = "Minimum quantity is {min_quantity}"

# Plain decimal notation only: no exponents, underscores, nan or inf
DIMENSION_PATTERN = re.compile(r"^[+-]?(\d+(\.\d*)?|\.\d+)$")

# orders.total_items and order_items.quantity are INTEGER columns
MAX_QUANTITY = 2_147_483_647

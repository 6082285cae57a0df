"""Order lifecycle: transition checks and status buckets.

Only vendors move an order between statuses; dealers create orders in
``pending`` and never touch status afterwards.  Every status belongs to
exactly one bucket, so :func:`partition` splits any order collection into
three disjoint lists that together cover it.
"""

from __future__ import annotations

from collections.abc import Iterable

from merchflow.exceptions import InvalidTransitionException
from merchflow.models.enums import OrderBucket, OrderStatus
from merchflow.modules.order.constants import (
    ORDER_TERMINAL_STATUSES,
    ORDER_TRANSITIONS,
    STATUS_BUCKETS,
    STATUS_LABELS,
)


def is_terminal(status: OrderStatus) -> bool:
    return status in ORDER_TERMINAL_STATUSES


def can_transition(current: OrderStatus, target: OrderStatus) -> bool:
    """True if *target* is reachable from *current*.

    Keeping the same status is always allowed; it lets a vendor amend
    comments or shipment details without moving the order.
    """
    if current == target:
        return True
    return target in ORDER_TRANSITIONS.get(current, set())


def ensure_transition(current: OrderStatus, target: OrderStatus) -> None:
    """Raise InvalidTransitionException unless current -> target is allowed."""
    if can_transition(current, target):
        return
    allowed = sorted(s.value for s in ORDER_TRANSITIONS.get(current, set()))
    raise InvalidTransitionException(
        f"Cannot transition order from '{current.value}' to '{target.value}'. "
        f"Allowed: {allowed}",
        details=[{"field": "status", "message": f"allowed targets: {allowed}"}],
    )


def allowed_transitions(current: OrderStatus) -> list[tuple[OrderStatus, str]]:
    """Next statuses a vendor may pick for an order in *current*, with form labels."""
    targets = ORDER_TRANSITIONS.get(current, set())
    ordered = [s for s in OrderStatus if s in targets]
    return [(s, STATUS_LABELS[s]) for s in ordered]


def classify(status: OrderStatus) -> OrderBucket:
    return STATUS_BUCKETS[status]


def bucket_statuses(bucket: OrderBucket) -> list[OrderStatus]:
    """All statuses in *bucket*, in declaration order."""
    return [s for s in OrderStatus if STATUS_BUCKETS[s] == bucket]


def partition(orders: Iterable) -> dict[OrderBucket, list]:
    """Split *orders* by bucket, preserving input order within each bucket."""
    buckets: dict[OrderBucket, list] = {b: [] for b in OrderBucket}
    for order in orders:
        buckets[classify(order.status)].append(order)
    return buckets

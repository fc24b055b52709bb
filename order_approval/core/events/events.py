"""
Domain event models.

These events represent immutable facts observed while running a use case.
They are consumed by loggers and recorders.
"""
from __future__ import annotations

from dataclasses import dataclass

from order_approval.core.domain.types import OrderStatus


@dataclass(frozen=True, slots=True)
class OrderStatusTransitionEvent:
    order_id: int

    prev_status: OrderStatus
    next_status: OrderStatus

    # "approve", "reject" or "ship"
    action: str


@dataclass(frozen=True, slots=True)
class OrderTransitionRejectedEvent:
    order_id: int

    status: OrderStatus
    action: str

    reason: str

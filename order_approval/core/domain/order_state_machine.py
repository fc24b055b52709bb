"""
Order status state machine definitions.

This module defines the terminal order statuses and the allowed transitions
between them. It is passive: the guards that raise live on the Order entity.
The use cases check every applied transition against this table and log a
warning for an undeclared edge.
"""

from __future__ import annotations

from order_approval.core.domain.types import OrderStatus

# Terminal statuses: no operation moves an order out of them.
ORDER_TERMINAL_STATES: frozenset[OrderStatus] = frozenset(
    {
        OrderStatus.REJECTED,
        OrderStatus.SHIPPED,
    }
)


# Allowed order status transitions.
#
# Key   : current status
# Value : set of statuses reachable through approve / reject / ship
#
# Notes:
# - Repeated statuses (approved -> approved, rejected -> rejected) are allowed,
#   approving twice or rejecting twice is a no-op.
# - Shipped orders have no outgoing edges.
ORDER_ALLOWED_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.CREATED: frozenset(
        {
            OrderStatus.APPROVED,
            OrderStatus.REJECTED,
        }
    ),

    OrderStatus.APPROVED: frozenset(
        {
            OrderStatus.APPROVED,
            OrderStatus.SHIPPED,
        }
    ),

    OrderStatus.REJECTED: frozenset(
        {
            OrderStatus.REJECTED,
        }
    ),

    OrderStatus.SHIPPED: frozenset(),
}


def is_terminal_state(status: OrderStatus) -> bool:
    """Return True if the given status is terminal."""
    return status in ORDER_TERMINAL_STATES


def is_valid_transition(prev_status: OrderStatus, next_status: OrderStatus) -> bool:
    """Return True if the transition prev_status -> next_status is allowed."""
    allowed = ORDER_ALLOWED_TRANSITIONS.get(prev_status)
    if allowed is None:
        return False
    return next_status in allowed

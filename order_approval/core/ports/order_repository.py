"""Order repository protocol.

This module defines the storage boundary consumed by the use cases. Concrete
implementations own the persisted records; the use cases only fetch an order
by id and hand the mutated order back.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from order_approval.core.domain.order import Order


class OrderRepository(Protocol):
    """Storage-facing boundary for orders."""

    def find_by_id(self, order_id: int) -> Order:
        """Return the order with the given id.

        Implementations signal a missing order by raising OrderNotFound.
        """

    def save(self, order: Order) -> None:
        """Persist the given order."""

"""In-memory order repository.

Backs the CLI and the tests. Saved orders are recorded in call order so that
callers can check whether, and what, a use case persisted.
"""

from __future__ import annotations

from typing import Iterable

from order_approval.core.domain.errors import OrderNotFound
from order_approval.core.domain.order import Order


class InMemoryOrderRepository:
    """Dict-backed OrderRepository that records every save() call."""

    def __init__(self, orders: Iterable[Order] | None = None) -> None:
        self._orders: dict[int, Order] = {}
        self.saved_orders: list[Order] = []

        for order in orders or ():
            self.add_order(order)

    def add_order(self, order: Order) -> None:
        """Seed an order without counting it as a save."""
        self._orders[order.id] = order

    def find_by_id(self, order_id: int) -> Order:
        order = self._orders.get(order_id)
        if order is None:
            raise OrderNotFound(order_id)
        return order

    def save(self, order: Order) -> None:
        self._orders[order.id] = order
        self.saved_orders.append(order)

    @property
    def saved_order(self) -> Order | None:
        """Return the most recently saved order, or None if nothing was saved."""
        return self.saved_orders[-1] if self.saved_orders else None

    def __len__(self) -> int:
        return len(self._orders)

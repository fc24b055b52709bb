from __future__ import annotations

from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from order_approval.core.domain.order import Order


class ShipmentService(Protocol):
    """External service that physically ships an approved order."""

    def ship(self, order: Order) -> None:
        """Ship the order. Raising aborts the status change."""

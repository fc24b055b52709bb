"""Order entity.

The order owns its status and exposes the only operations allowed to change
it. Each operation checks its guards first and leaves the status untouched
when a guard fails.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from order_approval.core.domain.errors import (
    ApprovedOrderCannotBeRejected,
    OrderAlreadyShipped,
    OrderNotShippable,
    RejectedOrderCannotBeApproved,
    ShippedOrdersCannotBeChanged,
)
from order_approval.core.domain.types import OrderStatus

if TYPE_CHECKING:
    from order_approval.core.ports.shipment_service import ShipmentService


class Order:
    """An order identified by an immutable integer id."""

    __slots__ = ("_id", "_status")

    def __init__(self, order_id: int, status: OrderStatus = OrderStatus.CREATED) -> None:
        if isinstance(order_id, bool) or not isinstance(order_id, int):
            raise TypeError(f"order_id must be an int, got {type(order_id).__name__}")
        self._id = order_id
        self._status = OrderStatus(status)

    @classmethod
    def create(cls, order_id: int, status: OrderStatus) -> Order:
        return cls(order_id, status)

    @property
    def id(self) -> int:
        return self._id

    @property
    def status(self) -> OrderStatus:
        return self._status

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def approve(self) -> None:
        """Move the order to APPROVED.

        Raises:
            ShippedOrdersCannotBeChanged: the order has been shipped.
            RejectedOrderCannotBeApproved: the order was rejected.
        """
        self._assert_not_shipped()

        if self.is_rejected():
            raise RejectedOrderCannotBeApproved(self._id, self._status)

        self._status = OrderStatus.APPROVED

    def reject(self) -> None:
        """Move the order to REJECTED.

        Raises:
            ShippedOrdersCannotBeChanged: the order has been shipped.
            ApprovedOrderCannotBeRejected: the order was approved.
        """
        self._assert_not_shipped()

        if self.is_approved():
            raise ApprovedOrderCannotBeRejected(self._id, self._status)

        self._status = OrderStatus.REJECTED

    def ship(self, shipment_service: ShipmentService) -> None:
        """Hand the order to the shipment service, then move it to SHIPPED.

        The status only changes once the service returned without raising.
        """
        if self.is_created() or self.is_rejected():
            raise OrderNotShippable(self._id, self._status)

        if self.is_shipped():
            raise OrderAlreadyShipped(self._id, self._status)

        shipment_service.ship(self)

        self._status = OrderStatus.SHIPPED

    # ------------------------------------------------------------------
    # Predicates
    # ------------------------------------------------------------------

    def is_created(self) -> bool:
        return self._status is OrderStatus.CREATED

    def is_approved(self) -> bool:
        return self._status is OrderStatus.APPROVED

    def is_rejected(self) -> bool:
        return self._status is OrderStatus.REJECTED

    def is_shipped(self) -> bool:
        return self._status is OrderStatus.SHIPPED

    def to_dict(self) -> dict[str, object]:
        return {"id": self._id, "status": self._status.value}

    def _assert_not_shipped(self) -> None:
        # Shipment is final, checked before any other guard.
        if self.is_shipped():
            raise ShippedOrdersCannotBeChanged(self._id, self._status)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Order):
            return NotImplemented
        return self._id == other._id and self._status is other._status

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"Order(id={self._id}, status={self._status.value})"

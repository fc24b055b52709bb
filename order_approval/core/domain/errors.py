"""Domain errors raised by order guards and repositories.

Every error carries a ``reason`` code from :class:`RejectReason` so callers
can present it as a validation failure without matching on class names.
"""

from __future__ import annotations

from order_approval.core.domain.reject_reasons import RejectReason
from order_approval.core.domain.types import OrderStatus


class OrderDomainError(Exception):
    """Base class for business-rule violations on orders."""

    reason: str = ""
    message: str = "order operation rejected"

    def __init__(self, order_id: int, status: OrderStatus | None = None) -> None:
        self.order_id = order_id
        self.status = status
        super().__init__(f"{self.message} (order_id={order_id}, status={_status_value(status)})")

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-compatible description of the error."""
        return {
            "error": self.reason,
            "order_id": self.order_id,
            "status": _status_value(self.status),
        }


class ShippedOrdersCannotBeChanged(OrderDomainError):
    reason = RejectReason.SHIPPED_ORDER_IMMUTABLE
    message = "shipped orders cannot be changed"


class RejectedOrderCannotBeApproved(OrderDomainError):
    reason = RejectReason.REJECTED_ORDER_NOT_APPROVABLE
    message = "rejected order cannot be approved"


class ApprovedOrderCannotBeRejected(OrderDomainError):
    reason = RejectReason.APPROVED_ORDER_NOT_REJECTABLE
    message = "approved order cannot be rejected"


class OrderNotShippable(OrderDomainError):
    reason = RejectReason.ORDER_NOT_SHIPPABLE
    message = "order is not approved and cannot be shipped"


class OrderAlreadyShipped(ShippedOrdersCannotBeChanged):
    reason = RejectReason.ORDER_ALREADY_SHIPPED
    message = "order has already been shipped"


class OrderNotFound(OrderDomainError, LookupError):
    reason = RejectReason.ORDER_NOT_FOUND
    message = "order not found"


def _status_value(status: OrderStatus | None) -> str | None:
    return None if status is None else status.value

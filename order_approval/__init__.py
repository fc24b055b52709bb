"""Public API for the order_approval package.

Only symbols imported here are considered part of the stable,
supported external interface.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ----------------------------------------------------------------------
# Adapters
# ----------------------------------------------------------------------
from order_approval.adapters.in_memory_repository import InMemoryOrderRepository

# ----------------------------------------------------------------------
# Domain
# ----------------------------------------------------------------------
from order_approval.core.domain.errors import (
    ApprovedOrderCannotBeRejected,
    OrderAlreadyShipped,
    OrderDomainError,
    OrderNotFound,
    OrderNotShippable,
    RejectedOrderCannotBeApproved,
    ShippedOrdersCannotBeChanged,
)
from order_approval.core.domain.order import Order
from order_approval.core.domain.reject_reasons import RejectReason
from order_approval.core.domain.types import (
    OrderApprovalRequest,
    OrderShipmentRequest,
    OrderStatus,
)

# ----------------------------------------------------------------------
# Events
# ----------------------------------------------------------------------
from order_approval.core.events.event_bus import EventBus
from order_approval.core.events.events import (
    OrderStatusTransitionEvent,
    OrderTransitionRejectedEvent,
)

# ----------------------------------------------------------------------
# Ports
# ----------------------------------------------------------------------
from order_approval.core.ports.order_repository import OrderRepository
from order_approval.core.ports.shipment_service import ShipmentService

# ----------------------------------------------------------------------
# Use cases
# ----------------------------------------------------------------------
from order_approval.use_cases.order_approval import OrderApprovalUseCase
from order_approval.use_cases.order_shipment import OrderShipmentUseCase

# ----------------------------------------------------------------------
# Public API definition
# ----------------------------------------------------------------------

__all__ = [
    # Domain
    "Order",
    "OrderStatus",
    "OrderApprovalRequest",
    "OrderShipmentRequest",
    "RejectReason",

    # Errors
    "OrderDomainError",
    "ShippedOrdersCannotBeChanged",
    "RejectedOrderCannotBeApproved",
    "ApprovedOrderCannotBeRejected",
    "OrderNotShippable",
    "OrderAlreadyShipped",
    "OrderNotFound",

    # Ports
    "OrderRepository",
    "ShipmentService",

    # Use cases
    "OrderApprovalUseCase",
    "OrderShipmentUseCase",

    # Adapters
    "InMemoryOrderRepository",

    # Events
    "EventBus",
    "OrderStatusTransitionEvent",
    "OrderTransitionRejectedEvent",

    # Version
    "__version__",
]

# ----------------------------------------------------------------------
# Package version
# ----------------------------------------------------------------------

try:
    __version__ = version("order-approval")
except PackageNotFoundError:
    __version__ = "0.0.0"

"""Order approval use case.

Loads one order, applies the requested approve / reject transition and
persists the result. Guard violations propagate to the caller and nothing is
saved.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from order_approval.core.domain.errors import OrderDomainError
from order_approval.core.domain.order_state_machine import is_valid_transition
from order_approval.core.events.events import (
    OrderStatusTransitionEvent,
    OrderTransitionRejectedEvent,
)
from order_approval.core.events.sinks.null_event_bus import NullEventBus

if TYPE_CHECKING:
    from order_approval.core.domain.order import Order
    from order_approval.core.domain.types import OrderApprovalRequest
    from order_approval.core.events.event_bus import EventBus
    from order_approval.core.ports.order_repository import OrderRepository

LOGGER = logging.getLogger(__name__)


class OrderApprovalUseCase:
    """Approve or reject an existing order.

    Per invocation:
    - exactly one repository fetch
    - at most one repository save, and only when the transition succeeded
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        event_bus: EventBus | None = None,
    ) -> None:
        self._order_repository = order_repository
        self._event_bus = event_bus if event_bus is not None else NullEventBus()

    def run(self, request: OrderApprovalRequest) -> Order:
        order = self._order_repository.find_by_id(request.order_id)
        LOGGER.debug("Loaded order %s in status %s", order.id, order.status.value)

        action = "approve" if request.approve else "reject"
        prev_status = order.status

        try:
            if request.approve:
                order.approve()
            else:
                order.reject()
        except OrderDomainError as exc:
            LOGGER.info("Order %s %s rejected: %s", order.id, action, exc.reason)
            self._event_bus.emit(
                OrderTransitionRejectedEvent(
                    order_id=order.id,
                    status=prev_status,
                    action=action,
                    reason=exc.reason,
                )
            )
            raise

        if not is_valid_transition(prev_status, order.status):
            LOGGER.warning(
                "Order %s took an undeclared transition %s -> %s",
                order.id,
                prev_status.value,
                order.status.value,
            )

        self._order_repository.save(order)

        LOGGER.info(
            "Order %s %s: %s -> %s",
            order.id,
            action,
            prev_status.value,
            order.status.value,
        )
        self._event_bus.emit(
            OrderStatusTransitionEvent(
                order_id=order.id,
                prev_status=prev_status,
                next_status=order.status,
                action=action,
            )
        )
        return order

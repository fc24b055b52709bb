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
    from order_approval.core.domain.types import OrderShipmentRequest
    from order_approval.core.events.event_bus import EventBus
    from order_approval.core.ports.order_repository import OrderRepository
    from order_approval.core.ports.shipment_service import ShipmentService

LOGGER = logging.getLogger(__name__)


class OrderShipmentUseCase:
    """Ship an approved order and persist it as SHIPPED."""

    def __init__(
        self,
        order_repository: OrderRepository,
        shipment_service: ShipmentService,
        event_bus: EventBus | None = None,
    ) -> None:
        self._order_repository = order_repository
        self._shipment_service = shipment_service
        self._event_bus = event_bus if event_bus is not None else NullEventBus()

    def run(self, request: OrderShipmentRequest) -> Order:
        order = self._order_repository.find_by_id(request.order_id)
        prev_status = order.status

        try:
            order.ship(self._shipment_service)
        except OrderDomainError as exc:
            LOGGER.info("Order %s ship rejected: %s", order.id, exc.reason)
            self._event_bus.emit(
                OrderTransitionRejectedEvent(
                    order_id=order.id,
                    status=prev_status,
                    action="ship",
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

        LOGGER.info("Order %s shipped", order.id)
        self._event_bus.emit(
            OrderStatusTransitionEvent(
                order_id=order.id,
                prev_status=prev_status,
                next_status=order.status,
                action="ship",
            )
        )
        return order

"""
Event sink interface.

Sinks consume the order events emitted by the use cases.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, Union

if TYPE_CHECKING:
    from order_approval.core.events.events import (
        OrderStatusTransitionEvent,
        OrderTransitionRejectedEvent,
    )

    OrderEvent = Union[OrderStatusTransitionEvent, OrderTransitionRejectedEvent]


class EventSink(Protocol):
    def on_event(self, event: OrderEvent) -> None:
        """Consume an order event."""

from __future__ import annotations

from typing import TYPE_CHECKING

from order_approval.core.events.event_bus import EventBus

if TYPE_CHECKING:
    from order_approval.core.events.event_sink import OrderEvent


class _NullSink:
    """Event sink that discards all events."""

    def on_event(self, event: OrderEvent) -> None:
        return


class NullEventBus(EventBus):
    """EventBus that discards all events (default for use cases and tests)."""

    def __init__(self) -> None:
        super().__init__(sinks=[_NullSink()])

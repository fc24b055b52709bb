"""
Synchronous order event bus.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

if TYPE_CHECKING:
    from order_approval.core.events.event_sink import EventSink, OrderEvent


class EventBus:
    """Dispatches order events to registered sinks, in registration order."""

    def __init__(self, sinks: Iterable[EventSink] | None = None) -> None:
        self._sinks: list[EventSink] = list(sinks) if sinks is not None else []
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def register(self, sink: EventSink) -> None:
        """Register a new sink."""
        if self._closed:
            raise RuntimeError("cannot register a sink on a closed event bus")
        self._sinks.append(sink)

    def emit(self, event: OrderEvent) -> None:
        """Emit an event to all sinks. Events emitted after close() are dropped."""
        if self._closed:
            return
        for sink in self._sinks:
            sink.on_event(event)

    def close(self) -> None:
        """
        Finalize all sinks that expose a close() method.

        Every sink gets its close() call even if an earlier one raised; the
        first error is re-raised once all sinks were visited.
        """
        if self._closed:
            return
        self._closed = True

        first_error: Exception | None = None
        for sink in self._sinks:
            close_fn = getattr(sink, "close", None)
            if not callable(close_fn):
                continue
            try:
                close_fn()
            except Exception as exc:  # pylint: disable=broad-exception-caught
                if first_error is None:
                    first_error = exc

        if first_error is not None:
            raise first_error

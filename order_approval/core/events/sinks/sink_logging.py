"""
Logging event sink.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from order_approval.core.events.events import OrderTransitionRejectedEvent

if TYPE_CHECKING:
    from order_approval.core.events.event_sink import OrderEvent


class LoggingEventSink:
    """Logs order events using the standard logging module.

    Rejections are logged at WARNING, transitions at INFO.
    """

    def __init__(self, logger: logging.Logger) -> None:
        self._logger = logger

    def on_event(self, event: OrderEvent) -> None:
        level = logging.WARNING if isinstance(event, OrderTransitionRejectedEvent) else logging.INFO
        self._logger.log(
            level,
            "domain_event %s order_id=%s",
            type(event).__name__,
            event.order_id,
            extra={"event": event},
        )

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Sequence

from order_approval.adapters.in_memory_repository import InMemoryOrderRepository
from order_approval.core.domain.errors import OrderDomainError
from order_approval.core.domain.types import OrderApprovalRequest
from order_approval.core.events.event_bus import EventBus
from order_approval.core.events.sinks.file_recorder import FileRecorderSink
from order_approval.core.events.sinks.sink_logging import LoggingEventSink
from order_approval.runtime.runtime_config import RuntimeConfig
from order_approval.use_cases.order_approval import OrderApprovalUseCase

LOGGER = logging.getLogger(__name__)

# Exit status for business-rule violations (argparse uses 2 for usage errors too).
EXIT_DOMAIN_ERROR = 2

# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _load_json(path: Path) -> dict[str, Any]:
    if not path.exists():
        raise FileNotFoundError(path)
    return json.loads(path.read_text(encoding="utf-8"))


def _build_event_bus(cfg: RuntimeConfig) -> EventBus:
    event_bus = EventBus([LoggingEventSink(logging.getLogger("bus"))])
    if cfg.event_log_path is not None:
        event_bus.register(FileRecorderSink(cfg.event_log_path))
    return event_bus


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        "order-approval",
        description="Approve or reject a single order",
    )
    parser.add_argument("--config", type=Path, required=True)
    parser.add_argument("--order-id", type=int, required=True)

    decision = parser.add_mutually_exclusive_group(required=True)
    decision.add_argument("--approve", dest="approve", action="store_true")
    decision.add_argument("--reject", dest="approve", action="store_false")
    return parser


# ---------------------------------------------------------------------------
# Main
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)

    cfg = RuntimeConfig.from_json_obj(_load_json(args.config))

    logging.basicConfig(
        level=cfg.log_level,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )

    repository = InMemoryOrderRepository(cfg.build_orders())
    event_bus = _build_event_bus(cfg)
    use_case = OrderApprovalUseCase(repository, event_bus=event_bus)

    request = OrderApprovalRequest(order_id=args.order_id, approve=args.approve)

    try:
        order = use_case.run(request)
    except OrderDomainError as exc:
        LOGGER.warning("Order %s not changed: %s", exc.order_id, exc)
        print(json.dumps(exc.to_dict()), file=sys.stderr)
        return EXIT_DOMAIN_ERROR
    finally:
        event_bus.close()

    print(json.dumps(order.to_dict()))
    return 0


if __name__ == "__main__":
    sys.exit(main())

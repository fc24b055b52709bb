"""
Append-only JSON lines recorder sink.
"""
from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from enum import Enum
from pathlib import Path
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from order_approval.core.events.event_sink import OrderEvent


def _to_record(event: Any) -> dict[str, Any]:
    if not is_dataclass(event):
        return {"event_type": type(event).__name__, "event": str(event)}

    record: dict[str, Any] = {"event_type": type(event).__name__}
    for key, value in asdict(event).items():
        record[key] = value.value if isinstance(value, Enum) else value
    return record


class FileRecorderSink:
    """Writes each event as a JSON line to a file."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._fh = self._path.open("a", encoding="utf-8")
        self._closed = False

    @property
    def path(self) -> Path:
        return self._path

    def on_event(self, event: OrderEvent) -> None:
        self._fh.write(json.dumps(_to_record(event)) + "\n")
        self._fh.flush()

    def close(self) -> None:
        if self._closed:
            return
        self._fh.flush()
        self._fh.close()
        self._closed = True

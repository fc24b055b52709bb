"""Runtime configuration model for the order approval CLI."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from order_approval.core.domain.order import Order
from order_approval.core.domain.types import OrderStatus


class OrderSeed(BaseModel):
    id: int = Field(..., strict=True)
    status: OrderStatus

    model_config = ConfigDict(extra="forbid")

    def to_order(self) -> Order:
        return Order.create(self.id, self.status)


class RuntimeConfig(BaseModel):
    """Orders to seed the in-memory repository with, plus logging options.

    JSON example:
        {
          "log_level": "DEBUG",
          "event_log_path": "out/events.jsonl",
          "orders": [{"id": 1, "status": "created"}]
        }
    """

    orders: list[OrderSeed] = Field(default_factory=list)
    log_level: str = "INFO"
    event_log_path: Path | None = None

    model_config = ConfigDict(extra="forbid")

    @classmethod
    def from_json_obj(cls, cfg_obj: dict[str, Any]) -> RuntimeConfig:
        """Create a RuntimeConfig instance from a JSON-compatible object."""
        return cls.model_validate(cfg_obj)

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @model_validator(mode="after")
    def validate_unique_order_ids(self) -> RuntimeConfig:
        """Reject configurations that seed the same order id twice."""
        seen: set[int] = set()
        for seed in self.orders:
            if seed.id in seen:
                raise ValueError(f"duplicate order id: {seed.id}")
            seen.add(seed.id)
        return self

    def build_orders(self) -> list[Order]:
        return [seed.to_order() for seed in self.orders]

"""Core shared data models.

This module defines the order status enumeration and the Pydantic request
models accepted by the use cases. The request models mirror the JSON Schemas
under ``order_approval/core/schemas``.
"""

# pylint: disable=missing-class-docstring
from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

# ---------------------------------------------------------------------------
# Order status
# ---------------------------------------------------------------------------


class OrderStatus(str, Enum):
    CREATED = "created"
    APPROVED = "approved"
    REJECTED = "rejected"
    SHIPPED = "shipped"


# ---------------------------------------------------------------------------
# Use case requests
# ---------------------------------------------------------------------------


class OrderApprovalRequest(BaseModel):
    """
    Approve or reject a single order.

    Notes:
    - approve=True approves the order, approve=False rejects it.
    - orderId is accepted as an alias of order_id for camelCase callers.
    """

    order_id: int = Field(
        ...,
        strict=True,
        validation_alias="orderId",
        description="Identifier of the order to approve or reject.",
    )
    approve: bool = Field(
        ...,
        strict=True,
        description="True to approve the order, False to reject it.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)


class OrderShipmentRequest(BaseModel):
    order_id: int = Field(
        ...,
        strict=True,
        validation_alias="orderId",
        description="Identifier of the order to ship.",
    )

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True)

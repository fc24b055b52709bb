"""Stable reason codes attached to rejected order operations."""

from __future__ import annotations


class RejectReason:
    """String constants used as machine-readable rejection reasons."""

    SHIPPED_ORDER_IMMUTABLE = "SHIPPED_ORDER_IMMUTABLE"
    REJECTED_ORDER_NOT_APPROVABLE = "REJECTED_ORDER_NOT_APPROVABLE"
    APPROVED_ORDER_NOT_REJECTABLE = "APPROVED_ORDER_NOT_REJECTABLE"
    ORDER_NOT_SHIPPABLE = "ORDER_NOT_SHIPPABLE"
    ORDER_ALREADY_SHIPPED = "ORDER_ALREADY_SHIPPED"
    ORDER_NOT_FOUND = "ORDER_NOT_FOUND"

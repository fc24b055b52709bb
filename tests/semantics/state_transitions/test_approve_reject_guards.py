"""
Semantic test: approve / reject are mutually exclusive decisions.

Invariant:
A REJECTED order cannot be approved and an APPROVED order cannot be
rejected. A failed guard leaves the status unchanged.
"""

from __future__ import annotations

import pytest

from order_approval.core.domain.errors import (
    ApprovedOrderCannotBeRejected,
    OrderDomainError,
    RejectedOrderCannotBeApproved,
)
from order_approval.core.domain.order import Order
from order_approval.core.domain.reject_reasons import RejectReason
from order_approval.core.domain.types import OrderStatus


def test_rejected_order_cannot_be_approved() -> None:
    order = Order(1, OrderStatus.REJECTED)

    with pytest.raises(RejectedOrderCannotBeApproved) as exc_info:
        order.approve()

    assert order.status is OrderStatus.REJECTED
    assert exc_info.value.reason == RejectReason.REJECTED_ORDER_NOT_APPROVABLE


def test_approved_order_cannot_be_rejected() -> None:
    order = Order(1, OrderStatus.APPROVED)

    with pytest.raises(ApprovedOrderCannotBeRejected) as exc_info:
        order.reject()

    assert order.status is OrderStatus.APPROVED
    assert exc_info.value.reason == RejectReason.APPROVED_ORDER_NOT_REJECTABLE


def test_guard_errors_share_domain_base() -> None:
    order = Order(3, OrderStatus.APPROVED)

    with pytest.raises(OrderDomainError) as exc_info:
        order.reject()

    assert exc_info.value.to_dict() == {
        "error": RejectReason.APPROVED_ORDER_NOT_REJECTABLE,
        "order_id": 3,
        "status": "approved",
    }

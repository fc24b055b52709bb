"""Schema conformance tests for order models.

These tests validate that the Pydantic request models and the Order entity
serialization accept and reject the same payloads as their JSON Schemas.
"""

# pylint: disable=missing-function-docstring,global-statement
from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest
from jsonschema import ValidationError as JsonSchemaValidationError
from jsonschema import validate as jsonschema_validate
from pydantic import TypeAdapter
from pydantic import ValidationError as PydanticValidationError
from referencing import Registry, Resource
from referencing.jsonschema import DRAFT202012

import order_approval
from order_approval.core.domain.order import Order
from order_approval.core.domain.types import OrderApprovalRequest, OrderStatus
from order_approval.runtime.runtime_config import OrderSeed

SCHEMA_REGISTRY = Registry()

SCHEMA_DIR = Path(order_approval.__file__).parent / "core" / "schemas"


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def load_schema(name: str) -> dict:
    """
    Load a JSON schema shipped with the package and register it by $id.
    """
    global SCHEMA_REGISTRY

    with (SCHEMA_DIR / name).open("r", encoding="utf-8") as f:
        schema = json.load(f)

    schema_id = schema.get("$id")
    if isinstance(schema_id, str) and schema_id:
        resource = Resource.from_contents(schema, default_specification=DRAFT202012)
        SCHEMA_REGISTRY = SCHEMA_REGISTRY.with_resource(schema_id, resource)

    return schema


def pydantic_validate(model_type: Any, data: dict[str, Any]) -> Any:
    return TypeAdapter(model_type).validate_python(data)


def assert_pydantic_then_schema_ok(model_type: Any, data: dict[str, Any], schema: dict[str, Any]) -> dict:
    """
    Validate with Pydantic first, then validate both the raw payload and the
    dumped instance with JSON Schema. Whatever Pydantic accepts, the schema must
    accept too.
    """
    obj = pydantic_validate(model_type, data)
    jsonschema_validate(instance=data, schema=schema, registry=SCHEMA_REGISTRY)
    instance = obj.model_dump(mode="json", exclude_none=True)
    jsonschema_validate(instance=instance, schema=schema, registry=SCHEMA_REGISTRY)
    return instance


def assert_schema_invalid_but_pydantic_rejects(model_type: Any, data: dict[str, Any], schema: dict[str, Any]):
    """
    If the schema rejects a payload, Pydantic must reject it too.
    """
    with pytest.raises(JsonSchemaValidationError):
        jsonschema_validate(instance=data, schema=schema, registry=SCHEMA_REGISTRY)

    with pytest.raises(PydanticValidationError):
        pydantic_validate(model_type, data)


# ---------------------------------------------------------------------------
# Fixtures
# ---------------------------------------------------------------------------

@pytest.fixture(scope="module", autouse=True)
def _load_status_schema() -> None:
    load_schema("order_status.schema.json")


@pytest.fixture(scope="module")
def order_schema() -> dict:
    return load_schema("order.schema.json")


@pytest.fixture(scope="module")
def approval_request_schema() -> dict:
    return load_schema("order_approval_request.schema.json")


# ---------------------------------------------------------------------------
# OrderApprovalRequest
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("approve", [True, False])
def test_approval_request_valid(approval_request_schema, approve):
    instance = assert_pydantic_then_schema_ok(
        OrderApprovalRequest,
        {"order_id": 1, "approve": approve},
        approval_request_schema,
    )
    assert instance == {"order_id": 1, "approve": approve}


def test_approval_request_accepts_camel_case_alias(approval_request_schema):
    instance = assert_pydantic_then_schema_ok(
        OrderApprovalRequest,
        {"orderId": 9, "approve": False},
        approval_request_schema,
    )
    assert instance == {"order_id": 9, "approve": False}


@pytest.mark.parametrize(
    "data",
    [
        {"order_id": 1},
        {"approve": True},
        {"orderId": "9", "approve": True},
        {"order_id": "1", "approve": True},
        {"order_id": True, "approve": True},
        {"order_id": 1, "approve": "true"},
        {"order_id": 1, "approve": 1},
        {"order_id": 1, "approve": True, "reason": "n/a"},
    ],
)
def test_approval_request_invalid(approval_request_schema, data):
    assert_schema_invalid_but_pydantic_rejects(OrderApprovalRequest, data, approval_request_schema)


def test_approval_request_is_immutable():
    request = OrderApprovalRequest(order_id=1, approve=True)
    with pytest.raises(PydanticValidationError):
        request.approve = False


# ---------------------------------------------------------------------------
# Order
# ---------------------------------------------------------------------------

@pytest.mark.parametrize("status", list(OrderStatus))
def test_order_serialization_matches_schema(order_schema, status):
    jsonschema_validate(
        instance=Order(1, status).to_dict(),
        schema=order_schema,
        registry=SCHEMA_REGISTRY,
    )


def test_order_seed_valid(order_schema):
    instance = assert_pydantic_then_schema_ok(OrderSeed, {"id": 3, "status": "approved"}, order_schema)
    assert instance == {"id": 3, "status": "approved"}


@pytest.mark.parametrize(
    "data",
    [
        {"id": 1},
        {"id": 1, "status": "cancelled"},
        {"id": "1", "status": "created"},
        {"id": 1, "status": "created", "total": 10},
    ],
)
def test_order_seed_invalid(order_schema, data):
    assert_schema_invalid_but_pydantic_rejects(OrderSeed, data, order_schema)

"""Shared pytest fixtures for paymill_models tests."""

import json
from pathlib import Path

import pytest

from paymill_models.domain.registry import REGISTRY, ModelRegistry
from paymill_models.domain.resources import ALL_SCHEMAS
from paymill_models.mapping.mapper import FieldMapper


@pytest.fixture
def registry():
    """Return the built-in, frozen registry."""
    return REGISTRY


@pytest.fixture
def fresh_registry():
    """Create an unfrozen registry with every built-in schema."""
    return ModelRegistry(ALL_SCHEMAS)


@pytest.fixture
def field_mapper(registry):
    """Create a FieldMapper over the built-in registry."""
    return FieldMapper(registry)


@pytest.fixture
def payment_payload():
    """Return a well-typed credit card payment payload."""
    return {
        "id": "pay_917018675b21ca03c4fb",
        "type": "creditcard",
        "client": "client_64b025ee5955abd5af66",
        "card_type": "visa",
        "country": None,
        "expire_month": 12,
        "expire_year": 2025,
        "card_holder": None,
        "last4": "1111",
        "created_at": 1349942085,
        "updated_at": 1349942085,
        "app_id": None,
    }


@pytest.fixture
def refund_payloads():
    """Return two refund payloads in API order."""
    return [
        {
            "id": "refund_87bc404a95d5ce616049",
            "transaction": "tran_54645bcb98ba7acfe204",
            "amount": 1000,
            "status": "refunded",
            "livemode": False,
            "response_code": 20000,
            "created_at": 1349947042,
        },
        {
            "id": "refund_9a17e7bc1fd6a1eb2dc3",
            "transaction": "tran_54645bcb98ba7acfe204",
            "amount": 500,
            "status": "refunded",
            "livemode": False,
            "response_code": 20000,
            "created_at": 1349948042,
        },
    ]


@pytest.fixture
def transaction_payload(payment_payload, refund_payloads):
    """Return a well-typed transaction payload with nested resources."""
    return {
        "id": "tran_54645bcb98ba7acfe204",
        "amount": "4200",
        "origin_amount": 4200,
        "status": "closed",
        "description": "Order 1042",
        "livemode": False,
        "currency": "EUR",
        "response_code": 20000,
        "short_id": "0000.1212.3434",
        "fee_amount": 420,
        "fee_payment": "pay_917018675b21ca03c4fb",
        "refunds": refund_payloads,
        "invoices": [],
        "fees": [
            {
                "type": "application",
                "application": "app_1d70acbf80c8c35ce83680715c06be0d",
                "payment": "pay_917018675b21ca03c4fb",
                "amount": 420,
                "currency": "EUR",
                "billed_at": None,
            }
        ],
        "payment": payment_payload,
        "client": {
            "id": "client_64b025ee5955abd5af66",
            "email": "lovely-client@example.com",
            "description": None,
            "payment": [payment_payload],
            "subscription": None,
            "created_at": 1349942085,
            "updated_at": 1349942085,
            "app_id": None,
        },
        "created_at": 1349946151,
        "updated_at": 1349946151,
        "app_id": None,
    }


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def fixtures_dir():
    """Return the path to the test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def load_fixture(fixtures_dir):
    """Return a loader for JSON fixture files."""

    def _load(name: str):
        with open(fixtures_dir / name) as f:
            return json.load(f)

    return _load


@pytest.fixture
def short_id_schema():
    """Schema whose field names differ from their wire keys."""
    from paymill_models.domain.entities import Field, FieldKind, ScalarType, Schema
    from paymill_models.domain.resources import REFUND

    return Schema(
        name="renamed",
        fields=(
            Field("short_identifier", wire_key="short_id"),
            Field("amount", scalar_type=ScalarType.STRING),
            Field("refunds", kind=FieldKind.NESTED_LIST, schema=REFUND, wire_key="refund_list"),
        ),
    )

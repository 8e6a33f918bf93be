"""Domain layer for paymill_models."""

from paymill_models.domain.entities import NOT_SET, Field, FieldKind, Record, ScalarType, Schema
from paymill_models.domain.registry import REGISTRY, ModelRegistry
from paymill_models.domain.resources import TransactionStatus

__all__ = [
    "NOT_SET",
    "Field",
    "FieldKind",
    "Record",
    "ScalarType",
    "Schema",
    "REGISTRY",
    "ModelRegistry",
    "TransactionStatus",
]

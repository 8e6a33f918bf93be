"""Field mapper: populate records from raw API payloads.

The mapper walks a schema in declaration order and looks each field up by its
wire key. Scalars are coerced best-effort, nested objects and lists of nested
objects are mapped recursively. Unknown payload keys are ignored so new API
attributes never break existing clients.
"""

import logging
from collections.abc import Mapping
from typing import Any, Iterable, Optional

from paymill_models.domain.entities import NOT_SET, Field, FieldKind, Record, Schema
from paymill_models.domain.errors import (
    SchemaMismatchError,
    expected_list,
    expected_mapping,
    required_field_missing,
)
from paymill_models.domain.registry import REGISTRY, ModelRegistry
from paymill_models.mapping.coercion import coerce_scalar

logger = logging.getLogger(__name__)


def _map_scalar(field: Field, value: Any, path: str) -> Any:
    try:
        return coerce_scalar(value, field.scalar_type)
    except (ValueError, TypeError) as e:
        logger.debug("Keeping raw value for %s: %s", path, e)
        return value


def _map_nested(field: Field, value: Any, path: str) -> Any:
    if value is None:
        if field.required:
            raise SchemaMismatchError(required_field_missing(path), path=path)
        return NOT_SET
    if not isinstance(value, Mapping):
        raise SchemaMismatchError(expected_mapping(path, value), path=path)
    return map_payload(field.schema, value, path=path)


def _map_nested_list(field: Field, value: Any, path: str) -> Any:
    if value is None:
        return field.default
    if not isinstance(value, (list, tuple)):
        raise SchemaMismatchError(expected_list(path, value), path=path)

    records = []
    for index, element in enumerate(value):
        element_path = f"{path}[{index}]"
        if not isinstance(element, Mapping):
            raise SchemaMismatchError(expected_mapping(element_path, element), path=element_path)
        records.append(map_payload(field.schema, element, path=element_path))
    return records


def map_payload(schema: Schema, payload: Mapping[str, Any], path: Optional[str] = None) -> Record:
    """Map a raw payload onto a new record of ``schema``.

    Args:
        schema: Schema of the resource kind
        payload: Raw key/value mapping as decoded from JSON
        path: Location of ``payload`` within the enclosing payload, used in
            error messages (defaults to the schema name)

    Returns:
        Populated record

    Raises:
        SchemaMismatchError: If a required nested field is missing or null, or
            a nested field does not hold an object (or list of objects)
    """
    path = path or schema.name
    if not isinstance(payload, Mapping):
        raise SchemaMismatchError(expected_mapping(path, payload), path=path)

    values: dict[str, Any] = {}
    for field in schema.fields:
        field_path = f"{path}.{field.wire_key}"

        if field.wire_key not in payload:
            if field.required:
                raise SchemaMismatchError(required_field_missing(field_path), path=field_path)
            values[field.name] = field.default
            continue

        raw = payload[field.wire_key]
        if field.kind is FieldKind.SCALAR:
            values[field.name] = _map_scalar(field, raw, field_path)
        elif field.kind is FieldKind.NESTED_LIST:
            values[field.name] = _map_nested_list(field, raw, field_path)
        else:
            values[field.name] = _map_nested(field, raw, field_path)

    if logger.isEnabledFor(logging.DEBUG):
        known = {f.wire_key for f in schema.fields}
        ignored = sorted(str(key) for key in payload if key not in known)
        if ignored:
            logger.debug("Ignoring unknown keys for %s: %s", path, ", ".join(ignored))

    return Record(schema, values)


def map_list(schema: Schema, payloads: Iterable[Mapping[str, Any]]) -> list[Record]:
    """Map every payload of a list response, preserving order."""
    if isinstance(payloads, (str, bytes, Mapping)):
        raise SchemaMismatchError(expected_list(schema.name, payloads), path=schema.name)
    return [
        map_payload(schema, payload, path=f"{schema.name}[{index}]")
        for index, payload in enumerate(payloads)
    ]


class FieldMapper:
    """Maps payloads by resource kind, resolving schemas through a registry."""

    def __init__(self, registry: ModelRegistry = REGISTRY):
        """Initialize field mapper.

        Args:
            registry: Registry used to look up schemas by kind
        """
        self.registry = registry

    def map(self, kind: str, payload: Mapping[str, Any]) -> Record:
        """Map a single payload of resource ``kind``.

        Raises:
            UnknownResourceKindError: If the kind is not registered
            SchemaMismatchError: If the payload does not fit the schema
        """
        return map_payload(self.registry.get(kind), payload)

    def map_list(self, kind: str, payloads: Iterable[Mapping[str, Any]]) -> list[Record]:
        """Map a list of payloads of resource ``kind``."""
        return map_list(self.registry.get(kind), payloads)

"""Convert records back into wire payloads."""

from typing import Any

from paymill_models.domain.entities import NOT_SET, FieldKind, Record


def to_payload(record: Record) -> dict[str, Any]:
    """Serialize a record to a JSON-compatible mapping keyed by wire keys.

    Fields that were absent (``NOT_SET``) are omitted; ``None`` scalars are
    emitted as null.
    """
    payload: dict[str, Any] = {}
    for field in record.schema.fields:
        value = record.get(field.name)
        if value is NOT_SET:
            continue

        if field.kind is FieldKind.NESTED_LIST:
            payload[field.wire_key] = [to_payload(item) for item in value]
        elif field.kind.is_nested and isinstance(value, Record):
            payload[field.wire_key] = to_payload(value)
        else:
            payload[field.wire_key] = value
    return payload

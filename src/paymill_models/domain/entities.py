"""Domain model entities for paymill_models.

Every API resource is represented by the same generic ``Record`` shape. What
distinguishes a transaction from a refund is the ``Schema`` the record carries,
not a dedicated class. Schemas are plain frozen dataclasses so they can be
declared as static tables (see ``paymill_models.domain.resources``).
"""

from dataclasses import dataclass, field as dataclass_field
from enum import Enum
from typing import Any, Iterator, Optional

from paymill_models.domain.errors import FrozenRecordError, unknown_field


class _NotSet:
    """Sentinel type for fields absent from a payload."""

    _instance: Optional["_NotSet"] = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "NOT_SET"

    def __reduce__(self):
        return (_NotSet, ())


NOT_SET = _NotSet()


class FieldKind(str, Enum):
    """How a field's raw value is mapped."""

    SCALAR = "scalar"
    NESTED = "nested"
    NESTED_LIST = "nested-list"
    NESTED_NULLABLE = "nested-nullable"

    @property
    def is_nested(self) -> bool:
        return self is not FieldKind.SCALAR


class ScalarType(str, Enum):
    """Primitive type a scalar field is coerced to."""

    STRING = "string"
    INTEGER = "integer"
    BOOLEAN = "boolean"
    FLOAT = "float"
    RAW = "raw"


@dataclass(frozen=True)
class Field:
    """Field declaration within a schema."""

    name: str
    kind: FieldKind = FieldKind.SCALAR
    scalar_type: ScalarType = ScalarType.STRING
    schema: Optional["Schema"] = None
    wire_key: Optional[str] = None
    default: Any = NOT_SET

    def __post_init__(self):
        if self.kind.is_nested and self.schema is None:
            raise ValueError(f"Nested field '{self.name}' requires a schema")
        if self.wire_key is None:
            object.__setattr__(self, "wire_key", self.name)

    @property
    def required(self) -> bool:
        """Only plain nested fields are required to be present."""
        return self.kind is FieldKind.NESTED


@dataclass(frozen=True)
class Schema:
    """Declared field list for one resource kind."""

    name: str
    fields: tuple[Field, ...] = dataclass_field(default_factory=tuple)

    def __post_init__(self):
        names = [f.name for f in self.fields]
        duplicates = {n for n in names if names.count(n) > 1}
        if duplicates:
            raise ValueError(
                f"Schema '{self.name}' declares duplicate fields: {', '.join(sorted(duplicates))}"
            )

    @property
    def field_names(self) -> tuple[str, ...]:
        return tuple(f.name for f in self.fields)

    def field(self, name: str) -> Field:
        """Return the field declared under ``name``.

        Raises:
            KeyError: If the schema has no such field
        """
        for f in self.fields:
            if f.name == name:
                return f
        raise KeyError(unknown_field(self.name, name))

    def has_field(self, name: str) -> bool:
        return name in self.field_names

    def new_record(self, **values: Any) -> "Record":
        """Create a record of this schema, defaulting unspecified fields."""
        return Record(self, values)


class Record:
    """Generic model instance bound to a schema.

    Field values are exposed as attributes (``record.amount``) and through
    ``get``. Records are immutable; use ``replace`` to derive a changed copy.
    """

    __slots__ = ("_schema", "_values")

    def __init__(self, schema: Schema, values: Optional[dict[str, Any]] = None):
        values = dict(values or {})
        unknown = [name for name in values if not schema.has_field(name)]
        if unknown:
            raise TypeError(unknown_field(schema.name, unknown[0]))

        resolved = {f.name: values.get(f.name, f.default) for f in schema.fields}
        object.__setattr__(self, "_schema", schema)
        object.__setattr__(self, "_values", resolved)

    @property
    def schema(self) -> Schema:
        return self._schema

    @property
    def kind(self) -> str:
        return self._schema.name

    def __getattr__(self, name: str) -> Any:
        # Only reached for names that are not slots or class attributes
        values = object.__getattribute__(self, "_values")
        try:
            return values[name]
        except KeyError:
            schema = object.__getattribute__(self, "_schema")
            raise AttributeError(unknown_field(schema.name, name)) from None

    def __setattr__(self, name: str, value: Any) -> None:
        raise FrozenRecordError(f"cannot assign to field '{name}' of {self._schema.name}")

    def __delattr__(self, name: str) -> None:
        raise FrozenRecordError(f"cannot delete field '{name}' of {self._schema.name}")

    def get(self, name: str) -> Any:
        """Return the value of field ``name``."""
        if not self._schema.has_field(name):
            raise KeyError(unknown_field(self._schema.name, name))
        return self._values[name]

    def is_set(self, name: str) -> bool:
        """Whether field ``name`` was present in the source payload."""
        return self.get(name) is not NOT_SET

    def replace(self, **changes: Any) -> "Record":
        """Return a copy with the given fields changed."""
        values = dict(self._values)
        values.update(changes)
        return Record(self._schema, values)

    def items(self) -> Iterator[tuple[str, Any]]:
        """Iterate over (field name, value) in declaration order."""
        for name in self._schema.field_names:
            yield name, self._values[name]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Record):
            return NotImplemented
        return self._schema == other._schema and self._values == other._values

    __hash__ = None  # type: ignore[assignment]

    def __reduce__(self):
        return (Record, (self._schema, dict(self._values)))

    def __repr__(self) -> str:
        set_fields = ", ".join(
            f"{name}={value!r}" for name, value in self.items() if value is not NOT_SET
        )
        return f"{self._schema.name}({set_fields})"

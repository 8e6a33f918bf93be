"""Registry of resource kinds and their schemas."""

from typing import Iterable

from paymill_models.domain.entities import Schema
from paymill_models.domain.errors import (
    ConflictError,
    UnknownResourceKindError,
    duplicate_resource_kind,
    registry_frozen,
    unknown_resource_kind,
)
from paymill_models.domain.resources import ALL_SCHEMAS


class ModelRegistry:
    """Lookup table from resource kind to schema.

    Kinds are matched case-insensitively and stored lowercase. Once frozen the
    registry is read-only and can be shared across threads.
    """

    def __init__(self, schemas: Iterable[Schema] = ()):
        self._schemas: dict[str, Schema] = {}
        self._frozen = False
        for schema in schemas:
            self.register(schema)

    @staticmethod
    def _normalize(kind: str) -> str:
        return kind.strip().lower()

    @property
    def frozen(self) -> bool:
        return self._frozen

    def register(self, schema: Schema, kind: str | None = None) -> str:
        """Register a schema.

        Args:
            schema: Schema to register
            kind: Kind identifier (defaults to the schema name)

        Returns:
            Normalized kind identifier

        Raises:
            ConflictError: If the kind is already registered or the registry is frozen
        """
        key = self._normalize(kind if kind is not None else schema.name)
        if self._frozen:
            raise ConflictError(registry_frozen(key))
        if key in self._schemas:
            raise ConflictError(duplicate_resource_kind(key))
        self._schemas[key] = schema
        return key

    def get(self, kind: str) -> Schema:
        """Return the schema registered for ``kind``.

        Raises:
            UnknownResourceKindError: If no schema is registered for the kind
        """
        try:
            return self._schemas[self._normalize(kind)]
        except KeyError:
            raise UnknownResourceKindError(unknown_resource_kind(kind, self.kinds())) from None

    def kinds(self) -> list[str]:
        return sorted(self._schemas)

    def freeze(self) -> "ModelRegistry":
        self._frozen = True
        return self

    def __contains__(self, kind: object) -> bool:
        return isinstance(kind, str) and self._normalize(kind) in self._schemas

    def __len__(self) -> int:
        return len(self._schemas)


def build_default_registry() -> ModelRegistry:
    """Create a frozen registry holding every built-in resource kind."""
    return ModelRegistry(ALL_SCHEMAS).freeze()


REGISTRY = build_default_registry()

"""Shared domain error messages and error types."""


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class SchemaMismatchError(DomainError):
    """A payload cannot be mapped onto its schema.

    Raised for required nested fields that are missing or null, and for nested
    fields whose raw value has the wrong shape.
    """

    def __init__(self, message: str, path: str | None = None):
        super().__init__(message)
        self.path = path


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class UnknownResourceKindError(NotFoundError):
    """No schema is registered for the requested resource kind."""


class ConflictError(DomainError):
    """Domain conflict, such as duplicate registrations."""


class ApiResponseError(DomainError):
    """The API answered with an error envelope instead of data."""

    def __init__(
        self, message: str, status_code: int | None = None, exception: str | None = None
    ):
        super().__init__(message)
        self.status_code = status_code
        self.exception = exception


class FrozenRecordError(AttributeError):
    """Assignment to a field of an immutable record."""


def required_field_missing(path: str) -> str:
    """Return message for a required nested field that is absent or null."""
    return f"Required field '{path}' is missing or null"


def expected_mapping(path: str, value: object) -> str:
    """Return message for a nested field that is not an object."""
    return f"Field '{path}' must be an object, got {type(value).__name__}"


def expected_list(path: str, value: object) -> str:
    """Return message for a nested-list field that is not an array."""
    return f"Field '{path}' must be a list of objects, got {type(value).__name__}"


def unknown_resource_kind(kind: str, known: list[str]) -> str:
    """Return message for a kind with no registered schema."""
    return f"Unknown resource kind '{kind}'. Known kinds: {', '.join(known)}"


def duplicate_resource_kind(kind: str) -> str:
    """Return message for a kind registered twice."""
    return f"Resource kind '{kind}' is already registered"


def registry_frozen(kind: str) -> str:
    """Return message when registering into a frozen registry."""
    return f"Cannot register '{kind}': registry is frozen"


def unknown_field(schema_name: str, field_name: str) -> str:
    """Return message for a field name not declared by a schema."""
    return f"{schema_name} has no field '{field_name}'"


def missing_response_data(kind: str) -> str:
    """Return message for a response body without a ``data`` entry."""
    return f"Response for '{kind}' has no 'data' entry"

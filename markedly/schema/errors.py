"""Schema and literal exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ..document.models import SourcePosition


class MarkedlyError(Exception):
    """Base exception for all Markedly errors."""

    pass


# Schema construction errors. These are fatal to registry setup.


class SchemaError(MarkedlyError):
    """Raised when the component schema cannot be built."""

    pass


class UnknownType(SchemaError):
    """Raised when an attribute type name is not registered."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown attribute type '{name}'")


class UnknownAttributeSet(SchemaError):
    """Raised when an attribute set name is not in the catalog."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Unknown attribute set '{name}'")


class DuplicateSetName(SchemaError):
    """Raised when an attribute set name is registered twice."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Attribute set '{name}' is already registered")


class DuplicateAttributeName(SchemaError):
    """Raised when two attribute declarations share a name in one namespace."""

    def __init__(self, name: str, owner: str, sources: tuple[str, ...] = ()):
        self.name = name
        self.owner = owner
        self.sources = sources
        message = f"Attribute '{name}' is declared more than once in '{owner}'"
        if sources:
            message += f" (from {', '.join(sources)})"
        super().__init__(message)


class DuplicateComponentKind(SchemaError):
    """Raised when a component kind is registered twice."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Component kind '{kind}' is already registered")


class RegistryFrozenError(SchemaError):
    """Raised when registering into a registry that has been frozen."""

    pass


class SchemaLoadError(SchemaError):
    """Raised when a schema YAML file cannot be loaded."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class SchemaValidationError(SchemaError):
    """Raised when a schema document fails model validation."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        self.errors = errors or []
        super().__init__(message)


# Lookup and literal errors, reported per document by the validator.


class UnknownComponentKind(MarkedlyError):
    """Raised when a component kind has no registered schema."""

    def __init__(self, kind: str):
        self.kind = kind
        super().__init__(f"Unknown component kind '{kind}'")


class InvalidLiteral(MarkedlyError):
    """Raised when a raw value does not conform to its declared type."""

    def __init__(
        self,
        raw: str,
        expected: str,
        reason: str | None = None,
        position: SourcePosition | None = None,
    ):
        self.raw = raw
        self.expected = expected
        self.reason = reason
        self.position = position
        message = f"Invalid {expected} literal {raw!r}"
        if reason:
            message += f": {reason}"
        super().__init__(message)



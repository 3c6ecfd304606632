"""Parsed and validated document models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Any

from ..schema.types import TypedValue, is_quoted, unquote

if TYPE_CHECKING:
    from ..schema.registry import ComponentSchema

# Bare value that resets an attribute to its declared default.
DEFAULT_KEYWORD = "default"


@dataclass(frozen=True, order=True)
class SourcePosition:
    """A 1-indexed line and column in source text."""

    line: int
    column: int

    def __str__(self) -> str:
        return f"{self.line}:{self.column}"


class ValueKind(str, Enum):
    """Syntactic shape of a raw attribute value."""

    STRING = "string"
    BARE = "bare"
    TUPLE = "tuple"


@dataclass(frozen=True)
class RawValue:
    """An attribute value as written in the source, before typing."""

    text: str
    position: SourcePosition = field(compare=False)

    @property
    def kind(self) -> ValueKind:
        if is_quoted(self.text):
            return ValueKind.STRING
        if self.text.startswith("("):
            return ValueKind.TUPLE
        return ValueKind.BARE

    @property
    def content(self) -> str:
        """The string body for quoted values, the raw text otherwise."""
        if self.kind == ValueKind.STRING:
            return unquote(self.text)
        return self.text

    @property
    def is_default(self) -> bool:
        return self.text == DEFAULT_KEYWORD


@dataclass(frozen=True)
class AttributeAssignment:
    """A single ``name: value;`` item in a declaration body."""

    name: str
    value: RawValue
    position: SourcePosition = field(compare=False)


@dataclass(frozen=True)
class ComponentDeclaration:
    """A parsed component declaration, not yet checked against any schema.

    Equality is structural and ignores source positions, so a tree parsed
    from reformatted source compares equal to the original.
    """

    kind: str
    position: SourcePosition = field(compare=False)
    assignments: tuple[AttributeAssignment, ...] = ()
    children: tuple["ComponentDeclaration", ...] = ()

    @property
    def attribute_values(self) -> dict[str, RawValue]:
        """Map attribute names to raw values; the last assignment wins."""
        return {a.name: a.value for a in self.assignments}

    def walk(self):
        """Yield this declaration and all descendants, depth first."""
        yield self
        for child in self.children:
            yield from child.walk()


@dataclass(frozen=True)
class ValidatedComponent:
    """A component whose attributes have been checked and typed."""

    kind: str
    attributes: Mapping[str, TypedValue] = field(default_factory=dict, hash=False)
    children: tuple["ValidatedComponent", ...] = ()
    position: SourcePosition | None = field(default=None, compare=False)

    def get(self, name: str, default: Any = None) -> Any:
        """Get an explicitly set attribute value."""
        return self.attributes.get(name, default)

    def with_defaults(self, schema: ComponentSchema) -> dict[str, TypedValue]:
        """Get explicit values merged over the schema's declared defaults."""
        values = dict(schema.typed_defaults)
        values.update(self.attributes)
        return values

    def to_dict(self) -> dict[str, Any]:
        """Convert to plain data for JSON output."""
        return {
            "kind": self.kind,
            "attributes": {k: _plain(v) for k, v in self.attributes.items()},
            "children": [c.to_dict() for c in self.children],
        }


def _plain(value: TypedValue) -> Any:
    if isinstance(value, (str, int, float)):
        return value
    return str(value)

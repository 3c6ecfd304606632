"""Attribute value types and their literal grammars."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, Union

from .errors import InvalidLiteral, UnknownType

if TYPE_CHECKING:
    from ..document.models import RawValue


class AttributeType(str, Enum):
    """Primitive type of an attribute value."""

    STRING = "string"
    COLOR = "color"
    INTEGER = "integer"
    FLOAT = "float"
    EVENT = "event"


@dataclass(frozen=True)
class Color:
    """An sRGB color with 8-bit channels."""

    red: int
    green: int
    blue: int
    alpha: int = 255

    def to_hex(self) -> str:
        """Render as #RRGGBB, or #RRGGBBAA when not fully opaque."""
        text = f"#{self.red:02X}{self.green:02X}{self.blue:02X}"
        if self.alpha != 255:
            text += f"{self.alpha:02X}"
        return text

    def __str__(self) -> str:
        return self.to_hex()


@dataclass(frozen=True)
class EventHook:
    """A reference to a named event handler."""

    handler: str

    def __str__(self) -> str:
        return self.handler


TypedValue = Union[str, int, float, Color, EventHook]

IDENTIFIER_PATTERN = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")
INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")
FLOAT_PATTERN = re.compile(
    r"[+-]?(?:(?:[0-9]+\.[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|[0-9]+[eE][+-]?[0-9]+)"
)
HEX_COLOR_PATTERN = re.compile(
    r"#(?:[0-9A-Fa-f]{3}|[0-9A-Fa-f]{6}|[0-9A-Fa-f]{8})"
)

NAMED_COLORS = {
    "black": Color(0, 0, 0),
    "silver": Color(192, 192, 192),
    "gray": Color(128, 128, 128),
    "grey": Color(128, 128, 128),
    "white": Color(255, 255, 255),
    "maroon": Color(128, 0, 0),
    "red": Color(255, 0, 0),
    "purple": Color(128, 0, 128),
    "fuchsia": Color(255, 0, 255),
    "green": Color(0, 128, 0),
    "lime": Color(0, 255, 0),
    "olive": Color(128, 128, 0),
    "yellow": Color(255, 255, 0),
    "navy": Color(0, 0, 128),
    "blue": Color(0, 0, 255),
    "teal": Color(0, 128, 128),
    "aqua": Color(0, 255, 255),
    "orange": Color(255, 165, 0),
    "transparent": Color(0, 0, 0, 0),
}

_ESCAPES = {"n": "\n", "t": "\t", "\\": "\\", '"': '"', "'": "'"}


def is_quoted(text: str) -> bool:
    """Check whether raw text is a quoted string literal."""
    return len(text) >= 2 and text[0] in ('"', "'") and text[-1] == text[0]


def unquote(text: str) -> str:
    """Strip the quotes from a string literal and resolve its escapes."""
    body = text[1:-1]
    chars: list[str] = []
    i = 0
    while i < len(body):
        ch = body[i]
        if ch == "\\" and i + 1 < len(body):
            nxt = body[i + 1]
            chars.append(_ESCAPES.get(nxt, nxt))
            i += 2
        else:
            chars.append(ch)
            i += 1
    return "".join(chars)


def quote(value: str) -> str:
    """Render a Python string as a double-quoted literal."""
    escaped = (
        value.replace("\\", "\\\\")
        .replace('"', '\\"')
        .replace("\n", "\\n")
        .replace("\t", "\\t")
    )
    return f'"{escaped}"'


class AttributeTypeRegistry:
    """The fixed set of attribute types and their literal parsers.

    The registry is not user-extensible: every ``AttributeType`` member is
    registered at construction time and nothing can be added afterwards.
    """

    def __init__(self):
        self._types = {t.value: t for t in AttributeType}
        self._parsers = {
            AttributeType.STRING: self._parse_string,
            AttributeType.COLOR: self._parse_color,
            AttributeType.INTEGER: self._parse_integer,
            AttributeType.FLOAT: self._parse_float,
            AttributeType.EVENT: self._parse_event,
        }

    def names(self) -> list[str]:
        """Get all registered type names."""
        return list(self._types)

    def type_of(self, name: str | AttributeType) -> AttributeType:
        """Look up an attribute type by name.

        Raises:
            UnknownType: If no type with that name exists.
        """
        if isinstance(name, AttributeType):
            return name
        try:
            return self._types[name]
        except KeyError:
            raise UnknownType(name) from None

    def validate_literal(
        self, attr_type: AttributeType | str, raw: RawValue | str
    ) -> TypedValue:
        """Parse a raw literal as the given type.

        Args:
            attr_type: The declared type, or its name.
            raw: A parsed RawValue, or raw literal text.

        Returns:
            The typed value.

        Raises:
            UnknownType: If attr_type names no registered type.
            InvalidLiteral: If the text does not conform to the type.
        """
        attr_type = self.type_of(attr_type)
        if isinstance(raw, str):
            text, position = raw, None
        else:
            text, position = raw.text, raw.position

        try:
            return self._parsers[attr_type](text.strip())
        except InvalidLiteral as e:
            raise InvalidLiteral(text, attr_type.value, e.reason, position) from None

    # Each parser raises InvalidLiteral with a reason; validate_literal
    # fills in the raw text, type and position.

    def _parse_string(self, text: str) -> str:
        if not is_quoted(text):
            raise InvalidLiteral(text, "string", "strings must be quoted")
        return unquote(text)

    def _parse_integer(self, text: str) -> int:
        text = _strip_quotes(text)
        if not INTEGER_PATTERN.fullmatch(text):
            raise InvalidLiteral(text, "integer", "expected an optionally signed whole number")
        return int(text)

    def _parse_float(self, text: str) -> float:
        text = _strip_quotes(text)
        if not FLOAT_PATTERN.fullmatch(text):
            raise InvalidLiteral(
                text, "float", "expected a number with a decimal point or exponent"
            )
        value = float(text)
        if not math.isfinite(value):
            raise InvalidLiteral(text, "float", "value is too large")
        return value

    def _parse_event(self, text: str) -> EventHook:
        text = _strip_quotes(text)
        if not IDENTIFIER_PATTERN.fullmatch(text):
            raise InvalidLiteral(text, "event", "expected a handler name")
        return EventHook(text)

    def _parse_color(self, text: str) -> Color:
        text = _strip_quotes(text)

        if text.startswith("#"):
            if not HEX_COLOR_PATTERN.fullmatch(text):
                raise InvalidLiteral(
                    text, "color", "hex colors must have 3, 6 or 8 hex digits"
                )
            digits = text[1:]
            if len(digits) == 3:
                digits = "".join(c * 2 for c in digits)
            channels = [int(digits[i : i + 2], 16) for i in range(0, len(digits), 2)]
            return Color(*channels)

        if text.startswith("(") and text.endswith(")"):
            return self._parse_color_tuple(text)

        named = NAMED_COLORS.get(text.lower())
        if named is None:
            raise InvalidLiteral(text, "color", "unrecognized color name")
        return named

    def _parse_color_tuple(self, text: str) -> Color:
        parts = [p.strip() for p in text[1:-1].split(",")]
        if len(parts) not in (3, 4):
            raise InvalidLiteral(text, "color", "color tuples need 3 or 4 values")

        channels = []
        for index, part in enumerate(parts[:3], start=1):
            if not INTEGER_PATTERN.fullmatch(part):
                raise InvalidLiteral(text, "color", f"value {index} is not an integer")
            value = int(part)
            if not 0 <= value <= 255:
                raise InvalidLiteral(
                    text, "color", f"value {index} out of range, valid range is 0 to 255"
                )
            channels.append(value)

        alpha = 255
        if len(parts) == 4:
            if not FLOAT_PATTERN.fullmatch(parts[3]):
                raise InvalidLiteral(text, "color", "value 4 is not a float")
            fraction = float(parts[3])
            if not 0.0 <= fraction <= 1.0:
                raise InvalidLiteral(
                    text, "color", "value 4 out of range, valid range is 0.0 to 1.0"
                )
            alpha = round(255 * fraction)

        return Color(channels[0], channels[1], channels[2], alpha)


def _strip_quotes(text: str) -> str:
    """Non-string types accept their literal bare or quoted."""
    if is_quoted(text):
        return unquote(text).strip()
    return text


TYPES = AttributeTypeRegistry()

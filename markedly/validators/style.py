"""Style documents supplying default attribute values per component kind."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from types import MappingProxyType

from ..document.errors import DocumentValidationError
from ..document.loader import read_document
from ..document.models import ComponentDeclaration, RawValue
from ..document.parser import parse_document
from ..schema.registry import ComponentSchemaRegistry
from .document import DocumentValidator

logger = logging.getLogger(__name__)

_EMPTY: Mapping[str, RawValue] = MappingProxyType({})


class Style:
    """Default attribute values keyed by component kind.

    A style is written in the same syntax as any document. Every
    declaration of a kind, nested or not, contributes its assignments to
    that kind's defaults; later assignments override earlier ones. A
    component's own assignments in turn override the style's.
    """

    def __init__(
        self,
        defaults: Mapping[str, Mapping[str, RawValue]] | None = None,
        source: str | None = None,
    ):
        self.source = source
        self._defaults = {
            kind: MappingProxyType(dict(values)) for kind, values in (defaults or {}).items()
        }

    @classmethod
    def from_declarations(
        cls,
        declarations: Iterable[ComponentDeclaration],
        registry: ComponentSchemaRegistry,
        source: str | None = None,
    ) -> Style:
        """Build a style from parsed declarations.

        Raises:
            DocumentValidationError: If the declarations do not validate.
        """
        declarations = list(declarations)
        document = DocumentValidator(registry, check_required=False).validate(
            declarations, source=source
        )
        if not document.is_valid:
            raise DocumentValidationError(
                f"Style {source or '<string>'} has {len(document.result.errors)} error(s)",
                document.result.errors,
            )

        defaults: dict[str, dict[str, RawValue]] = {}
        for declaration in declarations:
            for node in declaration.walk():
                defaults.setdefault(node.kind, {}).update(node.attribute_values)

        logger.debug("Loaded style %s for %d kind(s)", source or "<string>", len(defaults))
        return cls(defaults, source)

    @classmethod
    def from_string(
        cls, text: str, registry: ComponentSchemaRegistry, source: str | None = None
    ) -> Style:
        """Parse and validate style source text.

        Raises:
            DeclarationSyntaxError: If the source is malformed.
            DocumentValidationError: If the declarations do not validate.
        """
        return cls.from_declarations(parse_document(text, source), registry, source)

    @classmethod
    def from_file(cls, path: str | Path, registry: ComponentSchemaRegistry) -> Style:
        """Read, parse and validate a style file.

        Raises:
            DocumentLoadError: If the file cannot be read.
            DeclarationSyntaxError: If the source is malformed.
            DocumentValidationError: If the declarations do not validate.
        """
        return cls.from_string(read_document(path), registry, str(path))

    def kinds(self) -> list[str]:
        """Get the kinds this style provides values for."""
        return list(self._defaults)

    def values_for(self, kind: str) -> Mapping[str, RawValue]:
        """Get the default raw values for a kind."""
        return self._defaults.get(kind, _EMPTY)

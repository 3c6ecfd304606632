"""Validation runner that ties parsing and schema validation together."""

from pathlib import Path

from ..document.errors import DeclarationSyntaxError
from ..document.loader import read_document
from ..document.parser import parse_document
from ..schema.loader import default_registry
from ..schema.registry import ComponentSchemaRegistry
from .base import ValidationResult
from .document import DocumentValidator, ValidatedDocument
from .style import Style


def validate_source(
    text: str,
    registry: ComponentSchemaRegistry | None = None,
    source: str | None = None,
    style: Style | None = None,
) -> ValidatedDocument:
    """Parse and validate document source text.

    A syntax error stops parsing and is reported as a single
    ``SYNTAX_ERROR`` issue.

    Args:
        text: Document source text.
        registry: The schema registry; defaults to the built-in components.
        source: Source name recorded on issues.
        style: Optional style supplying default values.

    Returns:
        The ValidatedDocument.
    """
    if registry is None:
        registry = default_registry()

    try:
        declarations = parse_document(text, source)
    except DeclarationSyntaxError as e:
        result = ValidationResult()
        result.add_error(
            code="SYNTAX_ERROR",
            message=e.message,
            position=e.position,
            source=source,
        )
        return ValidatedDocument((), result)

    return DocumentValidator(registry, style=style).validate(declarations, source=source)


def validate_document_file(
    path: str | Path,
    registry: ComponentSchemaRegistry | None = None,
    style: Style | None = None,
) -> ValidatedDocument:
    """Load and validate a document file.

    Args:
        path: Path to the document.
        registry: The schema registry; defaults to the built-in components.
        style: Optional style supplying default values.

    Returns:
        The ValidatedDocument.

    Raises:
        DocumentLoadError: If the document cannot be read.
    """
    return validate_source(read_document(path), registry, source=str(path), style=style)

"""Markedly: a schema-driven parser and validator for UI component declarations."""

from .document import ComponentDeclaration, ValidatedComponent, parse_document
from .schema import ComponentSchemaRegistry, default_registry, load_registry
from .validators import DocumentValidator, Style, validate_document_file, validate_source

__all__ = [
    "ComponentDeclaration",
    "ValidatedComponent",
    "parse_document",
    "ComponentSchemaRegistry",
    "default_registry",
    "load_registry",
    "DocumentValidator",
    "Style",
    "validate_document_file",
    "validate_source",
]

"""Document layer: tokenizing, parsing and re-emitting Markedly source."""

from .errors import DeclarationSyntaxError, DocumentLoadError, DocumentValidationError
from .lexer import Token, TokenType, find_comments, tokenize
from .loader import load_document, read_document
from .models import (
    AttributeAssignment,
    ComponentDeclaration,
    RawValue,
    SourcePosition,
    ValidatedComponent,
    ValueKind,
)
from .parser import DeclarationParser, parse_document
from .serializer import format_declaration, format_document

__all__ = [
    "DeclarationSyntaxError",
    "DocumentLoadError",
    "DocumentValidationError",
    "Token",
    "TokenType",
    "find_comments",
    "tokenize",
    "load_document",
    "read_document",
    "AttributeAssignment",
    "ComponentDeclaration",
    "RawValue",
    "SourcePosition",
    "ValidatedComponent",
    "ValueKind",
    "DeclarationParser",
    "parse_document",
    "format_declaration",
    "format_document",
]

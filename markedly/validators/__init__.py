"""Validators that check parsed documents against component schemas."""

from .base import Severity, ValidationIssue, ValidationResult
from .document import DocumentValidator, ValidatedDocument
from .runner import validate_document_file, validate_source
from .style import Style

__all__ = [
    "Severity",
    "ValidationIssue",
    "ValidationResult",
    "DocumentValidator",
    "ValidatedDocument",
    "validate_document_file",
    "validate_source",
    "Style",
]

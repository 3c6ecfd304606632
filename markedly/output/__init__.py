"""Output formatting for validation results and schemas."""

from .formatter import format_documents, format_schema_table, format_validation_result

__all__ = [
    "format_documents",
    "format_schema_table",
    "format_validation_result",
]

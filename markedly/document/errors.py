"""Document-related exceptions."""

from __future__ import annotations

from typing import TYPE_CHECKING

from ..schema.errors import MarkedlyError

if TYPE_CHECKING:
    from ..validators.base import ValidationIssue
    from .models import SourcePosition


class DeclarationSyntaxError(MarkedlyError):
    """Raised when document source text is malformed."""

    def __init__(
        self,
        message: str,
        position: SourcePosition,
        source: str | None = None,
    ):
        self.message = message
        self.position = position
        self.source = source
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        location = str(self.position)
        if self.source:
            location = f"{self.source}:{location}"
        return f"{location}: {self.message}"


class DocumentLoadError(MarkedlyError):
    """Raised when a document file cannot be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class DocumentValidationError(MarkedlyError):
    """Raised when a document that must be valid has errors."""

    def __init__(self, message: str, issues: list[ValidationIssue] | None = None):
        self.issues = issues or []
        super().__init__(message)

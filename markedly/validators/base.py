"""Base classes for validation results."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from ..document.models import SourcePosition


class Severity(str, Enum):
    """Severity level of a validation issue."""

    ERROR = "error"
    WARNING = "warning"
    INFO = "info"


@dataclass
class ValidationIssue:
    """A single validation issue."""

    code: str
    message: str
    severity: Severity
    component: str | None = None
    attribute: str | None = None
    position: SourcePosition | None = None
    source: str | None = None
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def location(self) -> str:
        """Render the issue location as ``source:line:column``."""
        parts = []
        if self.source:
            parts.append(self.source)
        if self.position:
            parts.append(str(self.position))
        return ":".join(parts)

    def __str__(self) -> str:
        target = ""
        if self.component:
            target = f" [{self.component}"
            if self.attribute:
                target += f".{self.attribute}"
            target += "]"
        prefix = f"{self.location}: " if self.location else ""
        return f"{prefix}{self.severity.value.upper()}: {self.code}{target} - {self.message}"


@dataclass
class ValidationResult:
    """Result of running validation on a document."""

    issues: list[ValidationIssue] = field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        """Get all error-level issues."""
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        """Get all warning-level issues."""
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def has_errors(self) -> bool:
        """Check if there are any errors."""
        return len(self.errors) > 0

    @property
    def has_warnings(self) -> bool:
        """Check if there are any warnings."""
        return len(self.warnings) > 0

    @property
    def is_valid(self) -> bool:
        """Check if the document is valid (no errors)."""
        return not self.has_errors

    def add_issue(self, issue: ValidationIssue) -> None:
        """Add an issue to the result."""
        self.issues.append(issue)

    def add_error(
        self,
        code: str,
        message: str,
        component: str | None = None,
        attribute: str | None = None,
        position: SourcePosition | None = None,
        source: str | None = None,
        **details: Any,
    ) -> None:
        """Add an error issue."""
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=Severity.ERROR,
                component=component,
                attribute=attribute,
                position=position,
                source=source,
                details=details,
            )
        )

    def add_warning(
        self,
        code: str,
        message: str,
        component: str | None = None,
        attribute: str | None = None,
        position: SourcePosition | None = None,
        source: str | None = None,
        **details: Any,
    ) -> None:
        """Add a warning issue."""
        self.issues.append(
            ValidationIssue(
                code=code,
                message=message,
                severity=Severity.WARNING,
                component=component,
                attribute=attribute,
                position=position,
                source=source,
                details=details,
            )
        )

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.issues.extend(other.issues)

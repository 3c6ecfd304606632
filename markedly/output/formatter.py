"""Output formatting for validation results and schemas."""

import json
from typing import Literal

from ..schema.registry import ComponentSchemaRegistry
from ..validators.base import Severity, ValidationIssue, ValidationResult
from ..validators.document import ValidatedDocument


def format_validation_result(
    result: ValidationResult,
    format: Literal["text", "json"] = "text",
) -> str:
    """Format a validation result for output.

    Args:
        result: The validation result to format.
        format: Output format ("text" or "json").

    Returns:
        Formatted string representation.
    """
    if format == "json":
        return json.dumps(_result_data(result), indent=2)
    return _format_text(result)


def format_documents(
    documents: dict[str, ValidatedDocument],
    format: Literal["text", "json"] = "text",
) -> str:
    """Format the results of validating several documents.

    Args:
        documents: Validated documents keyed by path.
        format: Output format ("text" or "json").
    """
    if format == "json":
        data = {
            "valid": all(d.is_valid for d in documents.values()),
            "documents": {
                path: {
                    **_result_data(document.result),
                    "components": [c.to_dict() for c in document.components],
                }
                for path, document in documents.items()
            },
        }
        return json.dumps(data, indent=2)

    if len(documents) == 1:
        return _format_text(next(iter(documents.values())).result)

    sections = [
        f"== {path}\n{_format_text(document.result)}" for path, document in documents.items()
    ]
    return "\n\n".join(sections)


def _format_text(result: ValidationResult) -> str:
    """Format result as human-readable text."""
    lines: list[str] = []

    errors = result.errors
    warnings = result.warnings

    # Errors section
    lines.append("ERRORS:")
    if errors:
        for issue in errors:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    lines.append("")

    # Warnings section
    lines.append("WARNINGS:")
    if warnings:
        for issue in warnings:
            lines.append(f"  {_format_issue_text(issue)}")
    else:
        lines.append("  (none)")

    # Summary
    lines.append("")
    if result.is_valid:
        if warnings:
            lines.append(f"Validation passed with {len(warnings)} warning(s)")
        else:
            lines.append("Validation passed")
    else:
        lines.append(
            f"Validation failed: {len(errors)} error(s), {len(warnings)} warning(s)"
        )

    return "\n".join(lines)


def _format_issue_text(issue: ValidationIssue) -> str:
    """Format a single issue as text."""
    location = f"{issue.location} " if issue.location else ""

    target = ""
    if issue.component:
        target = f"[{issue.component}"
        if issue.attribute:
            target += f".{issue.attribute}"
        target += "] "

    # Severity symbol
    if issue.severity == Severity.ERROR:
        symbol = "✘"
    elif issue.severity == Severity.WARNING:
        symbol = "⚠"
    else:
        symbol = "ℹ"

    return f"{symbol} {location}{issue.code}: {target}{issue.message}"


def _result_data(result: ValidationResult) -> dict:
    return {
        "valid": result.is_valid,
        "error_count": len(result.errors),
        "warning_count": len(result.warnings),
        "issues": [
            {
                "code": issue.code,
                "message": issue.message,
                "severity": issue.severity.value,
                "component": issue.component,
                "attribute": issue.attribute,
                "source": issue.source,
                "line": issue.position.line if issue.position else None,
                "column": issue.position.column if issue.position else None,
                "details": issue.details,
            }
            for issue in result.issues
        ],
    }


def format_schema_table(registry: ComponentSchemaRegistry) -> str:
    """Render the registry as Markdown tables of attributes.

    Each component kind gets a table of its own attributes followed by a
    line naming the attribute sets it includes; each set gets its own
    table after the components.
    """
    sections: list[str] = []

    for schema in registry:
        lines = [f"## {schema.kind}", ""]
        if schema.description:
            lines += [schema.description, ""]
        if schema.own_attributes:
            lines += _attribute_table(schema.own_attributes)
        if schema.included_sets:
            names = ", ".join(s.name for s in schema.included_sets)
            if schema.own_attributes:
                lines.append("")
            lines.append(f"Includes: {names}")
        sections.append("\n".join(lines))

    for attribute_set in registry.catalog:
        lines = [f"## {attribute_set.name} (attribute set)", ""]
        if attribute_set.description:
            lines += [attribute_set.description, ""]
        lines += _attribute_table(attribute_set.attributes)
        sections.append("\n".join(lines))

    return "\n\n".join(sections) + "\n"


def _attribute_table(attributes) -> list[str]:
    lines = ["| Name | Type | Description |", "| --- | --- | --- |"]
    for attr in attributes:
        description = attr.description
        if attr.required:
            description = f"{description} (required)".strip()
        if attr.default is not None:
            description = f"{description} Default: `{attr.default}`".strip()
        lines.append(f"| {attr.name} | {attr.type.value} | {description} |")
    return lines

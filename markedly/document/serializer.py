"""Canonical source output for declaration trees."""

from collections.abc import Iterable

from .models import ComponentDeclaration


def format_declaration(
    declaration: ComponentDeclaration, indent: int = 4, level: int = 0
) -> str:
    """Render a declaration and its children as Markedly source.

    Raw values are written exactly as they were parsed, so the output
    parses back to an equal tree.
    """
    pad = " " * (indent * level)
    inner = " " * (indent * (level + 1))

    if not declaration.assignments and not declaration.children:
        return f"{pad}{declaration.kind} {{}}"

    lines = [f"{pad}{declaration.kind} {{"]
    for assignment in declaration.assignments:
        lines.append(f"{inner}{assignment.name}: {assignment.value.text};")
    for child in declaration.children:
        lines.append(format_declaration(child, indent, level + 1))
    lines.append(f"{pad}}}")
    return "\n".join(lines)


def format_document(declarations: Iterable[ComponentDeclaration], indent: int = 4) -> str:
    """Render top-level declarations separated by blank lines."""
    blocks = [format_declaration(d, indent) for d in declarations]
    if not blocks:
        return ""
    return "\n\n".join(blocks) + "\n"

"""Command-line interface for Markedly."""

import logging
import sys

import click

from .document.errors import DeclarationSyntaxError, DocumentLoadError, DocumentValidationError
from .output.formatter import format_documents, format_schema_table
from .schema.errors import InvalidLiteral, SchemaError, SchemaValidationError


def _load_registry(schema_file: str | None):
    """Load the registry from a schema file, or the built-in one."""
    from .schema.loader import default_registry, load_registry

    try:
        if schema_file:
            return load_registry(schema_file)
        return default_registry()
    except SchemaValidationError as e:
        click.echo(f"Schema validation error: {e}", err=True)
        for err in e.errors:
            click.echo(f"  - {err['loc']}: {err['msg']}", err=True)
        sys.exit(2)
    except (SchemaError, InvalidLiteral) as e:
        click.echo(f"Schema error: {e}", err=True)
        sys.exit(2)


@click.group()
@click.version_option(package_name="markedly")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging")
def main(verbose: bool):
    """Markedly: validate UI component declaration documents."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@main.command()
@click.argument("documents", nargs=-1, required=True, type=click.Path(exists=True))
@click.option(
    "--schema",
    "schema_file",
    type=click.Path(exists=True),
    default=None,
    help="Schema YAML file (defaults to the built-in components)",
)
@click.option(
    "--style",
    "style_file",
    type=click.Path(exists=True),
    default=None,
    help="Style document supplying default attribute values",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
@click.option(
    "--strict",
    is_flag=True,
    default=False,
    help="Treat warnings as errors",
)
def validate(
    documents: tuple[str, ...],
    schema_file: str | None,
    style_file: str | None,
    output_format: str,
    strict: bool,
):
    """Validate Markedly documents.

    DOCUMENTS are paths to .markedly files.

    Exit codes:
      0 - Validation passed
      1 - Validation failed (errors found)
      2 - File, schema or style error
    """
    from .validators.runner import validate_document_file
    from .validators.style import Style

    registry = _load_registry(schema_file)

    style = None
    if style_file:
        try:
            style = Style.from_file(style_file, registry)
        except (DocumentLoadError, DeclarationSyntaxError) as e:
            click.echo(f"Error loading style: {e}", err=True)
            sys.exit(2)
        except DocumentValidationError as e:
            click.echo(f"Style validation error: {e}", err=True)
            for issue in e.issues:
                click.echo(f"  - {issue}", err=True)
            sys.exit(2)

    results = {}
    for path in documents:
        try:
            results[path] = validate_document_file(path, registry, style)
        except DocumentLoadError as e:
            click.echo(f"Error loading file: {e}", err=True)
            sys.exit(2)

    # Output the result
    output = format_documents(results, output_format)  # type: ignore
    click.echo(output)

    # Determine exit code
    if any(d.result.has_errors for d in results.values()):
        sys.exit(1)
    elif strict and any(d.result.has_warnings for d in results.values()):
        sys.exit(1)
    else:
        sys.exit(0)


@main.command("fmt")
@click.argument("document", type=click.Path(exists=True))
@click.option("--indent", default=4, show_default=True, help="Spaces per nesting level")
@click.option(
    "--check",
    is_flag=True,
    default=False,
    help="Only report whether the file is already formatted",
)
@click.option(
    "--write",
    is_flag=True,
    default=False,
    help="Rewrite the file in place",
)
def fmt(document: str, indent: int, check: bool, write: bool):
    """Print a Markedly document in canonical form.

    DOCUMENT is the path to a .markedly file.

    Exit codes:
      0 - Success (or already formatted with --check)
      1 - Syntax error, not formatted with --check, or comments that
          --check or --write would remove
      2 - File error
    """
    from pathlib import Path

    from .document.lexer import find_comments
    from .document.loader import read_document
    from .document.parser import parse_document
    from .document.serializer import format_document

    try:
        text = read_document(document)
    except DocumentLoadError as e:
        click.echo(f"Error loading file: {e}", err=True)
        sys.exit(2)

    try:
        declarations = parse_document(text, source=document)
    except DeclarationSyntaxError as e:
        click.echo(f"Syntax error: {e}", err=True)
        sys.exit(1)

    formatted = format_document(declarations, indent=indent)

    # Canonical output has no comments, so rewriting would lose them.
    comments = find_comments(text, source=document)
    if comments:
        first = comments[0].position
        if check or write:
            click.echo(
                f"Cannot format {document}: it contains {len(comments)} comment(s), "
                f"the first at {first}, which formatting would remove",
                err=True,
            )
            sys.exit(1)
        click.echo(
            f"Warning: {len(comments)} comment(s) in {document} are not preserved",
            err=True,
        )

    if check:
        if formatted != text:
            click.echo(f"Would reformat: {document}")
            sys.exit(1)
        sys.exit(0)

    if write:
        Path(document).write_text(formatted, encoding="utf-8")
        click.echo(f"Formatted: {document}")
    else:
        click.echo(formatted, nl=False)
    sys.exit(0)


@main.command("schema")
@click.option(
    "--schema",
    "schema_file",
    type=click.Path(exists=True),
    default=None,
    help="Schema YAML file (defaults to the built-in components)",
)
def schema_cmd(schema_file: str | None):
    """Print the component attribute tables as Markdown.

    Exit codes:
      0 - Success
      2 - Schema error
    """
    registry = _load_registry(schema_file)
    click.echo(format_schema_table(registry), nl=False)
    sys.exit(0)


if __name__ == "__main__":
    main()

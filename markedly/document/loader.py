"""Reading Markedly documents from disk."""

from pathlib import Path

from .errors import DocumentLoadError
from .models import ComponentDeclaration
from .parser import parse_document


def read_document(path: str | Path) -> str:
    """Read a document's source text.

    Raises:
        DocumentLoadError: If the file does not exist or cannot be read.
    """
    path = Path(path)

    if not path.exists():
        raise DocumentLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise DocumentLoadError(f"Not a file: {path}", str(path))

    try:
        return path.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentLoadError(f"File is not valid UTF-8: {e}", str(path)) from e
    except OSError as e:
        raise DocumentLoadError(f"Cannot read file: {e}", str(path)) from e


def load_document(path: str | Path) -> list[ComponentDeclaration]:
    """Read and parse a document file.

    Raises:
        DocumentLoadError: If the file cannot be read.
        DeclarationSyntaxError: If the source is malformed.
    """
    return parse_document(read_document(path), source=str(path))

"""Tokenizer for Markedly documents.

Converts source text into a lazy stream of tokens with source location
tracking. Whitespace is dropped, and so are comments (``// line`` and
``/* block */``) unless the caller asks to keep them.
"""

import re
from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum

from .errors import DeclarationSyntaxError
from .models import SourcePosition


class TokenType(Enum):
    """Token types in a Markedly document."""

    WORD = "word"
    STRING = "string"
    TUPLE = "tuple"
    LBRACE = "{"
    RBRACE = "}"
    COLON = ":"
    SEMICOLON = ";"
    COMMENT = "comment"
    EOF = "end of input"


@dataclass(frozen=True)
class Token:
    """A single token with the position of its first character."""

    type: TokenType
    value: str
    position: SourcePosition

    def describe(self) -> str:
        if self.type == TokenType.EOF:
            return "end of input"
        return repr(self.value)


_TOKEN_SPEC = [
    ("COMMENT", r"//[^\n]*|/\*.*?\*/"),
    ("OPEN_COMMENT", r"/\*"),
    ("WHITESPACE", r"\s+"),
    ("STRING", r'"(?:[^"\\\n]|\\.)*"' + r"|'(?:[^'\\\n]|\\.)*'"),
    ("OPEN_STRING", r"[\"']"),
    ("TUPLE", r"\([^()\n;{}]*\)"),
    ("OPEN_TUPLE", r"\("),
    ("LBRACE", r"\{"),
    ("RBRACE", r"\}"),
    ("COLON", r":"),
    ("SEMICOLON", r";"),
    ("WORD", r"[^\s{}:;\"'()]+"),
    ("MISMATCH", r"."),
]

_TOKEN_PATTERN = re.compile(
    "|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC), re.DOTALL
)

_UNTERMINATED = {
    "OPEN_COMMENT": "Unterminated block comment",
    "OPEN_STRING": "Unterminated string literal",
    "OPEN_TUPLE": "Unterminated tuple, expected ')'",
}


def tokenize(
    text: str, source: str | None = None, keep_comments: bool = False
) -> Iterator[Token]:
    """Lazily tokenize source text.

    Args:
        text: Source text to tokenize.
        source: Source name for error reporting, usually a file path.
        keep_comments: Yield COMMENT tokens instead of dropping them.

    Yields:
        Tokens in source order, ending with a single EOF token.

    Raises:
        DeclarationSyntaxError: On an unterminated literal or comment, or an
            unexpected character.
    """
    line = 1
    line_start = 0

    for match in _TOKEN_PATTERN.finditer(text):
        kind = match.lastgroup
        value = match.group()
        position = SourcePosition(line, match.start() - line_start + 1)

        if kind in _UNTERMINATED:
            raise DeclarationSyntaxError(_UNTERMINATED[kind], position, source)
        if kind == "MISMATCH":
            raise DeclarationSyntaxError(f"Unexpected character {value!r}", position, source)

        newlines = value.count("\n")
        if newlines:
            line += newlines
            line_start = match.start() + value.rindex("\n") + 1

        if kind == "WHITESPACE" or (kind == "COMMENT" and not keep_comments):
            continue
        yield Token(TokenType[kind], value, position)

    yield Token(TokenType.EOF, "", SourcePosition(line, len(text) - line_start + 1))


def find_comments(text: str, source: str | None = None) -> list[Token]:
    """Get every comment token in source text, in order.

    Raises:
        DeclarationSyntaxError: If the text cannot be tokenized.
    """
    return [
        t for t in tokenize(text, source, keep_comments=True) if t.type == TokenType.COMMENT
    ]

"""Declaration parser for Markedly documents.

The parser is purely syntactic: it builds ComponentDeclaration trees
without consulting any schema, so it reports malformed source but never
type errors. It stops at the first syntax error.

Grammar::

    document    := declaration*
    declaration := IDENTIFIER '{' item* '}'
    item        := IDENTIFIER ':' value ';' | declaration
    value       := STRING | WORD | TUPLE
"""

import logging
from collections.abc import Iterator

from ..schema.types import IDENTIFIER_PATTERN
from .errors import DeclarationSyntaxError
from .lexer import Token, TokenType, tokenize
from .models import AttributeAssignment, ComponentDeclaration, RawValue

logger = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 64

_VALUE_TOKENS = (TokenType.STRING, TokenType.WORD, TokenType.TUPLE)


class _TokenStream:
    """A token iterator with single-token lookahead."""

    def __init__(self, tokens: Iterator[Token]):
        self._tokens = tokens
        self._peeked: Token | None = None

    def peek(self) -> Token:
        if self._peeked is None:
            self._peeked = next(self._tokens)
        return self._peeked

    def next(self) -> Token:
        token = self.peek()
        if token.type != TokenType.EOF:
            self._peeked = None
        return token


class DeclarationParser:
    """A lazy, restartable sequence of top-level component declarations.

    Each iteration makes one fresh pass over the source text, yielding every
    top-level declaration as soon as its closing brace has been read.
    """

    def __init__(
        self,
        text: str,
        source: str | None = None,
        max_depth: int = DEFAULT_MAX_DEPTH,
    ):
        """Initialize the parser.

        Args:
            text: Source text to parse.
            source: Source name for error reporting, usually a file path.
            max_depth: Maximum nesting depth of declarations.
        """
        self.text = text
        self.source = source
        self.max_depth = max_depth

    def __iter__(self) -> Iterator[ComponentDeclaration]:
        stream = _TokenStream(tokenize(self.text, self.source))
        while stream.peek().type != TokenType.EOF:
            kind = self._expect_identifier(stream, "component kind")
            yield self._parse_block(stream, kind, depth=1)

    def _error(self, message: str, token: Token) -> DeclarationSyntaxError:
        return DeclarationSyntaxError(message, token.position, self.source)

    def _expect_identifier(self, stream: _TokenStream, what: str) -> Token:
        token = stream.next()
        if token.type != TokenType.WORD:
            raise self._error(f"Expected {what}, found {token.describe()}", token)
        if not IDENTIFIER_PATTERN.fullmatch(token.value):
            raise self._error(f"Invalid {what} {token.value!r}", token)
        return token

    def _parse_block(
        self, stream: _TokenStream, kind: Token, depth: int
    ) -> ComponentDeclaration:
        """Parse the braced body following an already-consumed kind."""
        if depth > self.max_depth:
            raise self._error(
                f"Maximum nesting depth of {self.max_depth} exceeded", kind
            )

        brace = stream.next()
        if brace.type != TokenType.LBRACE:
            raise self._error(
                f"Expected '{{' after '{kind.value}', found {brace.describe()}", brace
            )

        assignments: list[AttributeAssignment] = []
        children: list[ComponentDeclaration] = []

        while True:
            token = stream.peek()
            if token.type == TokenType.RBRACE:
                stream.next()
                break
            if token.type == TokenType.EOF:
                raise self._error(
                    f"Unterminated block for '{kind.value}' opened at {kind.position}",
                    token,
                )

            name = self._expect_identifier(stream, "attribute name or component kind")
            follow = stream.peek()
            if follow.type == TokenType.COLON:
                stream.next()
                assignments.append(self._parse_assignment(stream, name))
            elif follow.type == TokenType.LBRACE:
                children.append(self._parse_block(stream, name, depth + 1))
            else:
                raise self._error(
                    f"Expected ':' or '{{' after '{name.value}', found {follow.describe()}",
                    follow,
                )

        return ComponentDeclaration(
            kind=kind.value,
            position=kind.position,
            assignments=tuple(assignments),
            children=tuple(children),
        )

    def _parse_assignment(self, stream: _TokenStream, name: Token) -> AttributeAssignment:
        value = stream.next()
        if value.type not in _VALUE_TOKENS:
            raise self._error(
                f"Expected a value for '{name.value}', found {value.describe()}", value
            )

        end = stream.next()
        if end.type != TokenType.SEMICOLON:
            raise self._error(
                f"Expected ';' after the value of '{name.value}', found {end.describe()}",
                end,
            )

        return AttributeAssignment(
            name=name.value,
            value=RawValue(value.value, value.position),
            position=name.position,
        )


def parse_document(
    text: str, source: str | None = None, max_depth: int = DEFAULT_MAX_DEPTH
) -> list[ComponentDeclaration]:
    """Parse source text into a list of top-level declarations.

    Raises:
        DeclarationSyntaxError: At the first syntax error.
    """
    declarations = list(DeclarationParser(text, source, max_depth))
    logger.debug(
        "Parsed %d top-level declaration(s) from %s", len(declarations), source or "<string>"
    )
    return declarations

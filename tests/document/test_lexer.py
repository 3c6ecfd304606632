"""Tests for the document tokenizer."""

import pytest

from markedly.document.errors import DeclarationSyntaxError
from markedly.document.lexer import TokenType, find_comments, tokenize
from markedly.document.models import SourcePosition


def _types(text):
    return [t.type for t in tokenize(text)]


class TestTokenize:
    def test_simple_declaration(self):
        tokens = list(tokenize('button { text: "OK"; }'))

        assert [t.type for t in tokens] == [
            TokenType.WORD,
            TokenType.LBRACE,
            TokenType.WORD,
            TokenType.COLON,
            TokenType.STRING,
            TokenType.SEMICOLON,
            TokenType.RBRACE,
            TokenType.EOF,
        ]
        assert tokens[4].value == '"OK"'

    def test_positions_are_one_indexed(self):
        tokens = list(tokenize("button {\n    text: 'OK';\n}"))

        assert tokens[0].position == SourcePosition(1, 1)
        assert tokens[2].position == SourcePosition(2, 5)
        assert tokens[4].position == SourcePosition(2, 11)
        assert tokens[6].position == SourcePosition(3, 1)

    def test_comments_are_skipped(self):
        text = "// header\nbutton /* inline\ncomment */ {}"
        tokens = list(tokenize(text))

        assert [t.type for t in tokens] == [
            TokenType.WORD,
            TokenType.LBRACE,
            TokenType.RBRACE,
            TokenType.EOF,
        ]
        assert tokens[1].position == SourcePosition(3, 12)

    def test_hex_color_is_a_word(self):
        tokens = list(tokenize("color: #FF0000;"))
        assert tokens[2].type == TokenType.WORD
        assert tokens[2].value == "#FF0000"

    def test_tuple_is_one_token(self):
        tokens = list(tokenize("color: (255, 0, 0, 0.5);"))
        assert tokens[2].type == TokenType.TUPLE
        assert tokens[2].value == "(255, 0, 0, 0.5)"

    def test_signed_numbers_are_words(self):
        assert _types("-16.5e3") == [TokenType.WORD, TokenType.EOF]

    def test_empty_input(self):
        tokens = list(tokenize(""))
        assert len(tokens) == 1
        assert tokens[0].type == TokenType.EOF

    def test_is_lazy(self):
        tokens = tokenize('a { b: "unterminated }')
        # The error is only raised once the bad token is reached.
        assert next(tokens).value == "a"

    @pytest.mark.parametrize(
        "text,message,position",
        [
            ('text: "OK', "Unterminated string", SourcePosition(1, 7)),
            ("/* never closed", "Unterminated block comment", SourcePosition(1, 1)),
            ("color: (1, 2, 3;", "Unterminated tuple", SourcePosition(1, 8)),
            ("a )", "Unexpected character", SourcePosition(1, 3)),
        ],
    )
    def test_errors(self, text, message, position):
        with pytest.raises(DeclarationSyntaxError) as exc_info:
            list(tokenize(text, source="doc.markedly"))
        assert message in exc_info.value.message
        assert exc_info.value.position == position
        assert str(exc_info.value).startswith(f"doc.markedly:{position.line}:{position.column}")


class TestFindComments:
    def test_comments_are_kept_on_request(self):
        tokens = list(tokenize("// a\nbutton {}", keep_comments=True))

        assert tokens[0].type == TokenType.COMMENT
        assert tokens[0].value == "// a"
        assert tokens[1].type == TokenType.WORD

    def test_find_comments(self):
        comments = find_comments("button {\n    /* inline */ text: 'x'; // end\n}")

        assert [c.value for c in comments] == ["/* inline */", "// end"]
        assert comments[0].position == SourcePosition(2, 5)

    def test_no_comments(self):
        assert find_comments('button { text: "OK"; }') == []

"""Tests for the validation runner."""

import pytest

from markedly.document.errors import DocumentLoadError
from markedly.document.models import SourcePosition
from markedly.schema.loader import default_registry
from markedly.validators.runner import validate_document_file, validate_source
from markedly.validators.style import Style


class TestValidateSource:
    def test_uses_builtin_components_by_default(self):
        document = validate_source('button { text: "OK"; text-color: white; }')

        assert document.is_valid
        assert document.components[0].get("text") == "OK"

    def test_custom_registry(self, widgets_registry):
        document = validate_source("slider { maximum: 10; }", widgets_registry)
        assert document.is_valid

    def test_syntax_error_becomes_issue(self):
        document = validate_source('button {\n    text: "OK"\n}', source="menu.markedly")

        assert not document.is_valid
        assert document.components == ()
        assert len(document.issues) == 1
        issue = document.issues[0]
        assert issue.code == "SYNTAX_ERROR"
        assert issue.position == SourcePosition(3, 1)
        assert issue.source == "menu.markedly"
        assert "Expected ';'" in issue.message

    def test_overflowing_float_is_invalid(self):
        document = validate_source("container { border-radius: 1e999; }")

        assert not document.is_valid
        assert [i.code for i in document.issues] == ["INVALID_LITERAL"]

    def test_with_style(self, examples_dir):
        style = Style.from_file(examples_dir / "style.markedly", default_registry())
        document = validate_source('button { text: "OK"; }', style=style)

        assert document.components[0].get("border-radius") == 4.0


class TestValidateDocumentFile:
    def test_valid_example(self, examples_dir):
        document = validate_document_file(examples_dir / "minimal_valid.markedly")

        assert document.is_valid
        assert document.issues == []

    def test_issues_carry_source_path(self, examples_dir):
        path = examples_dir / "invalid" / "unknown_attribute.markedly"
        document = validate_document_file(path)

        assert [i.code for i in document.issues] == ["UNKNOWN_ATTRIBUTE"]
        assert document.issues[0].source == str(path)

    def test_syntax_error_example(self, examples_dir):
        document = validate_document_file(examples_dir / "invalid" / "syntax_error.markedly")

        issue = document.issues[0]
        assert issue.code == "SYNTAX_ERROR"
        assert issue.position == SourcePosition(3, 5)

    def test_missing_file(self, tmp_path):
        with pytest.raises(DocumentLoadError) as exc_info:
            validate_document_file(tmp_path / "missing.markedly")
        assert "not found" in str(exc_info.value)

    def test_directory_is_not_a_file(self, tmp_path):
        with pytest.raises(DocumentLoadError) as exc_info:
            validate_document_file(tmp_path)
        assert "Not a file" in str(exc_info.value)

    def test_invalid_utf8(self, tmp_path):
        path = tmp_path / "binary.markedly"
        path.write_bytes(b"button { text: \"\xff\"; }")

        with pytest.raises(DocumentLoadError) as exc_info:
            validate_document_file(path)
        assert "UTF-8" in str(exc_info.value)

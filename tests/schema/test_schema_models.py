"""Tests for schema models."""

import pytest
from pydantic import ValidationError

from markedly.schema.models import AttributeDeclaration, AttributeSet, SchemaDocument
from markedly.schema.types import AttributeType


class TestAttributeDeclaration:
    def test_basic_declaration(self):
        attr = AttributeDeclaration(name="text", type="string")
        assert attr.name == "text"
        assert attr.type == AttributeType.STRING
        assert attr.required is False
        assert attr.default is None
        assert attr.description == ""

    def test_hyphenated_name(self):
        attr = AttributeDeclaration(name="color-hovering", type="color")
        assert attr.name == "color-hovering"

    def test_invalid_name(self):
        with pytest.raises(ValidationError):
            AttributeDeclaration(name="1st", type="string")

    def test_is_immutable(self):
        attr = AttributeDeclaration(name="text", type="string")
        with pytest.raises(ValidationError):
            attr.name = "label"

    def test_integer_default_becomes_text(self):
        attr = AttributeDeclaration.model_validate(
            {"name": "size", "type": "integer", "default": 12}
        )
        assert attr.default == "12"

    def test_boolean_default_rejected(self):
        with pytest.raises(ValidationError):
            AttributeDeclaration.model_validate(
                {"name": "enabled", "type": "string", "default": True}
            )


class TestAttributeSet:
    def test_attribute_names_in_order(self, background_set):
        assert background_set.attribute_names() == ["color", "color-hovering", "border-radius"]

    def test_shorthand_entries(self):
        attribute_set = AttributeSet.model_validate(
            {"name": "Label", "attributes": ["text", {"size": "integer"}]}
        )
        assert [a.type for a in attribute_set.attributes] == [
            AttributeType.STRING,
            AttributeType.INTEGER,
        ]


class TestSchemaDocument:
    def test_empty_document(self):
        document = SchemaDocument.model_validate({})
        assert document.attribute_sets == {}
        assert document.components == {}

    def test_null_component_body(self):
        document = SchemaDocument.model_validate({"components": {"spacer": None}})
        assert document.components["spacer"].kind == "spacer"
        assert document.components["spacer"].attributes == []

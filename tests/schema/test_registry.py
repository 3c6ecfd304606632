"""Tests for the attribute set catalog and component schema registry."""

import pytest

from markedly.schema.catalog import AttributeSetCatalog
from markedly.schema.errors import (
    DuplicateAttributeName,
    DuplicateComponentKind,
    DuplicateSetName,
    InvalidLiteral,
    RegistryFrozenError,
    SchemaValidationError,
    UnknownAttributeSet,
    UnknownComponentKind,
)
from markedly.schema.models import AttributeDeclaration, AttributeSet
from markedly.schema.registry import ComponentSchemaRegistry
from markedly.schema.types import AttributeType, Color


def _set(name, *attrs):
    return AttributeSet(
        name=name,
        attributes=tuple(AttributeDeclaration(name=a, type=AttributeType.STRING) for a in attrs),
    )


class TestAttributeSetCatalog:
    def test_register_and_lookup(self, background_set):
        catalog = AttributeSetCatalog()
        catalog.register(background_set)

        assert catalog.lookup("Background") is background_set
        assert "Background" in catalog
        assert len(catalog) == 1
        assert catalog.names() == ["Background"]

    def test_duplicate_set_name(self, background_set):
        catalog = AttributeSetCatalog()
        catalog.register(background_set)

        with pytest.raises(DuplicateSetName) as exc_info:
            catalog.register(_set("Background", "other"))
        assert exc_info.value.name == "Background"

    def test_unknown_set(self):
        with pytest.raises(UnknownAttributeSet):
            AttributeSetCatalog().lookup("Border")

    def test_duplicate_attribute_within_set(self):
        with pytest.raises(DuplicateAttributeName) as exc_info:
            AttributeSetCatalog().register(_set("Text", "text", "text"))
        assert exc_info.value.name == "text"
        assert exc_info.value.owner == "Text"

    def test_invalid_default_rejected(self):
        bad = AttributeSet(
            name="Sizing",
            attributes=(
                AttributeDeclaration(name="width", type=AttributeType.FLOAT, default="wide"),
            ),
        )
        with pytest.raises(InvalidLiteral):
            AttributeSetCatalog().register(bad)

    def test_frozen_catalog_rejects_registration(self, background_set):
        catalog = AttributeSetCatalog()
        catalog.freeze()

        assert catalog.frozen
        with pytest.raises(RegistryFrozenError):
            catalog.register(background_set)


class TestComponentSchemaRegistry:
    def test_resolves_included_and_own_attributes(self, registry):
        schema = registry.schema_for("button")

        assert list(schema.attributes) == ["color", "color-hovering", "border-radius", "text"]
        assert schema.attribute("text").type == AttributeType.STRING
        assert schema.attribute("color").type == AttributeType.COLOR
        assert schema.source_of("color") == "Background"
        assert schema.source_of("text") == "button"

    def test_included_sets_are_shared_not_copied(self, registry, background_set):
        button = registry.schema_for("button")
        container = registry.schema_for("container")

        assert button.included_sets[0] is background_set
        assert container.included_sets[0] is background_set

    def test_resolved_attributes_are_read_only(self, registry):
        schema = registry.schema_for("button")
        with pytest.raises(TypeError):
            schema.attributes["extra"] = schema.attributes["text"]

    def test_unknown_kind(self, registry):
        with pytest.raises(UnknownComponentKind) as exc_info:
            registry.schema_for("slider")
        assert exc_info.value.kind == "slider"

    def test_unknown_set_fails_at_registration(self, catalog):
        registry = ComponentSchemaRegistry(catalog)
        with pytest.raises(UnknownAttributeSet):
            registry.register("label", ["Font"])
        assert "label" not in registry

    def test_duplicate_kind(self, registry):
        with pytest.raises(DuplicateComponentKind):
            registry.register("button")

    def test_disjoint_sets_do_not_collide(self):
        catalog = AttributeSetCatalog()
        catalog.register(_set("A", "a1", "a2"))
        catalog.register(_set("B", "b1", "b2"))
        registry = ComponentSchemaRegistry(catalog)

        schema = registry.register("widget", ["A", "B"], [{"name": "own", "type": "integer"}])

        assert set(schema.attributes) == {"a1", "a2", "b1", "b2", "own"}

    def test_collision_between_sets(self):
        catalog = AttributeSetCatalog()
        catalog.register(_set("A", "shared", "a"))
        catalog.register(_set("B", "shared", "b"))
        registry = ComponentSchemaRegistry(catalog)

        with pytest.raises(DuplicateAttributeName) as exc_info:
            registry.register("widget", ["A", "B"])
        assert exc_info.value.name == "shared"
        assert exc_info.value.sources == ("A", "B")

    @pytest.mark.parametrize("order", [("A", "B"), ("B", "A")])
    def test_collision_between_set_and_own_attribute_any_order(self, order):
        catalog = AttributeSetCatalog()
        catalog.register(_set("A", "color"))
        catalog.register(_set("B", "size"))
        registry = ComponentSchemaRegistry(catalog)

        with pytest.raises(DuplicateAttributeName) as exc_info:
            registry.register(
                "widget", order, [AttributeDeclaration(name="color", type="color")]
            )
        assert exc_info.value.name == "color"
        assert "widget" not in registry

    def test_typed_defaults(self, catalog):
        registry = ComponentSchemaRegistry(catalog)
        schema = registry.register(
            "label",
            own_attributes=[
                {"name": "text-color", "type": "color", "default": "#000000"},
                {"name": "size", "type": "integer", "default": "12"},
            ],
        )

        assert schema.typed_defaults == {"text-color": Color(0, 0, 0), "size": 12}

    def test_required_attributes_exclude_defaulted(self, catalog):
        registry = ComponentSchemaRegistry(catalog)
        schema = registry.register(
            "slider",
            own_attributes=[
                {"name": "maximum", "type": "integer", "required": True},
                {"name": "minimum", "type": "integer", "required": True, "default": "0"},
            ],
        )

        assert [a.name for a in schema.required_attributes()] == ["maximum"]

    def test_freeze_is_a_one_time_barrier(self, registry):
        registry.freeze()
        registry.freeze()

        assert registry.frozen
        assert registry.catalog.frozen
        with pytest.raises(RegistryFrozenError):
            registry.register("label")
        assert registry.schema_for("button").kind == "button"

    def test_kinds_in_registration_order(self, registry):
        assert registry.kinds() == ["button", "container"]
        assert [s.kind for s in registry] == ["button", "container"]
        assert len(registry) == 2

    @pytest.mark.parametrize("kind", ["my button", "1st", ""])
    def test_kind_must_be_an_identifier(self, catalog, kind):
        registry = ComponentSchemaRegistry(catalog)

        with pytest.raises(SchemaValidationError) as exc_info:
            registry.register(kind)
        assert exc_info.value.errors[0]["loc"] == "kind"
        assert kind not in registry

    def test_malformed_own_attribute_is_a_schema_error(self, catalog):
        registry = ComponentSchemaRegistry(catalog)

        with pytest.raises(SchemaValidationError) as exc_info:
            registry.register("label", own_attributes=[{"name": "size", "type": "vector"}])
        assert "label" in str(exc_info.value)
        assert exc_info.value.errors[0]["loc"] == "type"
        assert "label" not in registry

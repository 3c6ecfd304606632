"""Shared fixtures for tests."""

from pathlib import Path

import pytest

from markedly.schema.catalog import AttributeSetCatalog
from markedly.schema.loader import load_registry
from markedly.schema.models import AttributeDeclaration, AttributeSet
from markedly.schema.registry import ComponentSchemaRegistry
from markedly.schema.types import AttributeType


@pytest.fixture
def examples_dir() -> Path:
    """Return the path to the examples directory."""
    return Path(__file__).parent.parent / "examples"


@pytest.fixture
def background_set() -> AttributeSet:
    """Return the shared Background attribute set."""
    return AttributeSet(
        name="Background",
        attributes=(
            AttributeDeclaration(name="color", type=AttributeType.COLOR),
            AttributeDeclaration(name="color-hovering", type=AttributeType.COLOR),
            AttributeDeclaration(name="border-radius", type=AttributeType.FLOAT),
        ),
    )


@pytest.fixture
def catalog(background_set) -> AttributeSetCatalog:
    """Return a catalog holding the Background set."""
    catalog = AttributeSetCatalog()
    catalog.register(background_set)
    return catalog


@pytest.fixture
def registry(catalog) -> ComponentSchemaRegistry:
    """Return a registry with a button (text + Background) and a container."""
    registry = ComponentSchemaRegistry(catalog)
    registry.register(
        "button",
        ["Background"],
        [AttributeDeclaration(name="text", type=AttributeType.STRING)],
    )
    registry.register("container", ["Background"])
    return registry


@pytest.fixture
def widgets_registry(examples_dir) -> ComponentSchemaRegistry:
    """Return the registry loaded from the widgets example schema."""
    return load_registry(examples_dir / "widgets.yaml")

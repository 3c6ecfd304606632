"""YAML loading for Markedly component schemas."""

import logging
from functools import lru_cache
from importlib import resources
from pathlib import Path

import yaml
from pydantic import ValidationError

from .catalog import AttributeSetCatalog
from .errors import SchemaLoadError, SchemaValidationError
from .models import SchemaDocument, error_list
from .registry import ComponentSchemaRegistry
from .types import TYPES, AttributeTypeRegistry

logger = logging.getLogger(__name__)

BUILTIN_SCHEMA = "components.yaml"


def load_yaml(path: str | Path) -> dict:
    """Load a YAML file and return the raw data.

    Args:
        path: Path to the YAML file.

    Returns:
        The parsed YAML data as a dictionary.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
    """
    path = Path(path)

    if not path.exists():
        raise SchemaLoadError(f"File not found: {path}", str(path))

    if not path.is_file():
        raise SchemaLoadError(f"Not a file: {path}", str(path))

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}", str(path)) from e
    except OSError as e:
        raise SchemaLoadError(f"Cannot read file: {e}", str(path)) from e

    if data is None:
        return {}

    if not isinstance(data, dict):
        raise SchemaLoadError(
            f"Expected YAML mapping at root, got {type(data).__name__}", str(path)
        )

    return data


def parse_schema(path: str | Path, types: AttributeTypeRegistry = TYPES) -> SchemaDocument:
    """Load and parse a schema YAML file into a SchemaDocument.

    Raises:
        SchemaLoadError: If the file cannot be read or parsed.
        UnknownType: If an attribute names an unregistered type.
        SchemaValidationError: If the data fails validation.
    """
    data = load_yaml(path)
    return _parse_schema_data(data, types)


def parse_schema_from_string(
    yaml_string: str, types: AttributeTypeRegistry = TYPES
) -> SchemaDocument:
    """Parse a YAML string into a SchemaDocument.

    Raises:
        SchemaLoadError: If the YAML cannot be parsed.
        UnknownType: If an attribute names an unregistered type.
        SchemaValidationError: If the data fails validation.
    """
    try:
        data = yaml.safe_load(yaml_string)
    except yaml.YAMLError as e:
        raise SchemaLoadError(f"Invalid YAML: {e}") from e

    if data is None:
        data = {}

    if not isinstance(data, dict):
        raise SchemaLoadError(f"Expected YAML mapping at root, got {type(data).__name__}")

    return _parse_schema_data(data, types)


def build_registry(
    document: SchemaDocument, types: AttributeTypeRegistry = TYPES
) -> ComponentSchemaRegistry:
    """Build and freeze a registry from a parsed schema document.

    All attribute sets are registered before any component kind, so kinds
    may include sets declared anywhere in the document.

    Raises:
        SchemaError: If any set or kind fails to register.
        InvalidLiteral: If a declared default does not fit its type.
    """
    catalog = AttributeSetCatalog(types)
    for attribute_set in document.attribute_sets.values():
        catalog.register(attribute_set)

    registry = ComponentSchemaRegistry(catalog)
    for definition in document.components.values():
        registry.register(
            definition.kind,
            definition.include,
            definition.attributes,
            description=definition.description,
        )

    registry.freeze()
    logger.info(
        "Loaded schema with %d attribute set(s) and %d component kind(s)",
        len(catalog),
        len(registry),
    )
    return registry


def load_registry(
    path: str | Path, types: AttributeTypeRegistry = TYPES
) -> ComponentSchemaRegistry:
    """Load a schema file and build a frozen registry from it."""
    return build_registry(parse_schema(path, types), types)


def load_registry_from_string(
    yaml_string: str, types: AttributeTypeRegistry = TYPES
) -> ComponentSchemaRegistry:
    """Parse a schema YAML string and build a frozen registry from it."""
    return build_registry(parse_schema_from_string(yaml_string, types), types)


@lru_cache(maxsize=1)
def default_registry() -> ComponentSchemaRegistry:
    """Get the registry of built-in component kinds.

    The registry is frozen, so one shared instance serves every caller.
    """
    text = resources.files(__package__).joinpath(BUILTIN_SCHEMA).read_text(encoding="utf-8")
    return load_registry_from_string(text)


def _parse_schema_data(data: dict, types: AttributeTypeRegistry) -> SchemaDocument:
    """Parse raw data into a SchemaDocument.

    Raises:
        UnknownType: If an attribute names an unregistered type.
        SchemaValidationError: If the data fails validation.
    """
    _check_type_names(data, types)
    try:
        return SchemaDocument.model_validate(data)
    except ValidationError as e:
        errors = error_list(e)
        raise SchemaValidationError(
            f"Schema validation failed with {len(errors)} error(s)", errors
        ) from e


def _check_type_names(data: dict, types: AttributeTypeRegistry) -> None:
    """Resolve every declared type name so unknown types fail by name."""
    for section in ("attribute_sets", "components"):
        entries = data.get(section)
        if not isinstance(entries, dict):
            continue
        for entry in entries.values():
            if not isinstance(entry, dict):
                continue
            for attr in entry.get("attributes") or []:
                if not isinstance(attr, dict):
                    continue
                if "name" in attr:
                    type_name = attr.get("type")
                elif len(attr) == 1:
                    type_name = next(iter(attr.values()))
                else:
                    type_name = None
                if isinstance(type_name, str):
                    types.type_of(type_name)

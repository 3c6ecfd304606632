"""Schema layer: attribute types, shared sets and component kinds."""

from .catalog import AttributeSetCatalog
from .errors import (
    DuplicateAttributeName,
    DuplicateComponentKind,
    DuplicateSetName,
    InvalidLiteral,
    MarkedlyError,
    RegistryFrozenError,
    SchemaError,
    SchemaLoadError,
    SchemaValidationError,
    UnknownAttributeSet,
    UnknownComponentKind,
    UnknownType,
)
from .loader import (
    build_registry,
    default_registry,
    load_registry,
    load_registry_from_string,
    load_yaml,
    parse_schema,
    parse_schema_from_string,
)
from .models import AttributeDeclaration, AttributeSet, ComponentDefinition, SchemaDocument
from .registry import ComponentSchema, ComponentSchemaRegistry
from .types import TYPES, AttributeType, AttributeTypeRegistry, Color, EventHook

__all__ = [
    "AttributeSetCatalog",
    "DuplicateAttributeName",
    "DuplicateComponentKind",
    "DuplicateSetName",
    "InvalidLiteral",
    "MarkedlyError",
    "RegistryFrozenError",
    "SchemaError",
    "SchemaLoadError",
    "SchemaValidationError",
    "UnknownAttributeSet",
    "UnknownComponentKind",
    "UnknownType",
    "build_registry",
    "default_registry",
    "load_registry",
    "load_registry_from_string",
    "load_yaml",
    "parse_schema",
    "parse_schema_from_string",
    "AttributeDeclaration",
    "AttributeSet",
    "ComponentDefinition",
    "SchemaDocument",
    "ComponentSchema",
    "ComponentSchemaRegistry",
    "TYPES",
    "AttributeType",
    "AttributeTypeRegistry",
    "Color",
    "EventHook",
]

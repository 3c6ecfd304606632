"""Pydantic models for Markedly component schemas."""

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    ValidationError,
    field_validator,
    model_validator,
)

from .types import IDENTIFIER_PATTERN, AttributeType


def _check_identifier(value: str) -> str:
    if not IDENTIFIER_PATTERN.fullmatch(value):
        raise ValueError(f"'{value}' is not a valid identifier")
    return value


class AttributeDeclaration(BaseModel):
    """A named, typed attribute a component may set."""

    model_config = ConfigDict(frozen=True)

    name: str
    type: AttributeType
    description: str = ""
    required: bool = False
    default: str | None = None

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _check_identifier(value)

    @field_validator("default", mode="before")
    @classmethod
    def stringify_default(cls, value):
        """YAML scalars such as 0.0 arrive typed; keep them as literal text."""
        if value is None or isinstance(value, str):
            return value
        if isinstance(value, bool):
            raise ValueError("boolean defaults are not supported")
        return str(value)


class AttributeSet(BaseModel):
    """A reusable, named group of attribute declarations."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    attributes: tuple[AttributeDeclaration, ...] = ()

    @field_validator("name")
    @classmethod
    def check_name(cls, value: str) -> str:
        return _check_identifier(value)

    @model_validator(mode="before")
    @classmethod
    def normalize_attributes(cls, data):
        return _normalize_attribute_list(data)

    def attribute_names(self) -> list[str]:
        """Get attribute names in declaration order."""
        return [a.name for a in self.attributes]


class ComponentDefinition(BaseModel):
    """The configuration of one component kind, before resolution."""

    kind: str = ""  # Will be set from the key
    description: str = ""
    include: list[str] = Field(default_factory=list)
    attributes: list[AttributeDeclaration] = Field(default_factory=list)

    @field_validator("kind")
    @classmethod
    def check_kind(cls, value: str) -> str:
        return _check_identifier(value)

    @model_validator(mode="before")
    @classmethod
    def normalize_definition(cls, data):
        if not isinstance(data, dict):
            return data
        include = data.get("include")
        if isinstance(include, str):
            data["include"] = [include]
        return _normalize_attribute_list(data)


class SchemaDocument(BaseModel):
    """Root model for a Markedly schema YAML file."""

    attribute_sets: dict[str, AttributeSet] = Field(default_factory=dict)
    components: dict[str, ComponentDefinition] = Field(default_factory=dict)

    @model_validator(mode="before")
    @classmethod
    def normalize_document(cls, data):
        """Set set names and component kinds from their keys."""
        if not isinstance(data, dict):
            return data

        sets = data.get("attribute_sets") or {}
        if isinstance(sets, dict):
            for name, set_data in sets.items():
                if set_data is None:
                    sets[name] = set_data = {}
                if isinstance(set_data, dict):
                    set_data["name"] = name
            data["attribute_sets"] = sets

        components = data.get("components") or {}
        if isinstance(components, dict):
            for kind, component_data in components.items():
                if component_data is None:
                    components[kind] = component_data = {}
                if isinstance(component_data, dict):
                    component_data["kind"] = kind
            data["components"] = components

        return data


def _normalize_attribute_list(data):
    """Expand shorthand attribute entries.

    A bare string is a string attribute, and a single-key mapping such as
    ``{size: integer}`` names the attribute and its type.
    """
    if not isinstance(data, dict):
        return data

    attributes = data.get("attributes") or []
    normalized = []
    for attr in attributes:
        if isinstance(attr, str):
            normalized.append({"name": attr, "type": "string"})
        elif isinstance(attr, dict) and len(attr) == 1 and "name" not in attr:
            name, attr_type = next(iter(attr.items()))
            normalized.append({"name": name, "type": attr_type})
        else:
            normalized.append(attr)
    data["attributes"] = normalized
    return data


def error_list(error: ValidationError) -> list[dict]:
    """Flatten a pydantic ValidationError into loc/msg/type dicts."""
    return [
        {
            "loc": ".".join(str(x) for x in err["loc"]),
            "msg": err["msg"],
            "type": err["type"],
        }
        for err in error.errors()
    ]

"""Registry of component kinds and their resolved attribute schemas."""

import logging
from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType

from pydantic import ValidationError

from .catalog import AttributeSetCatalog
from .errors import (
    DuplicateAttributeName,
    DuplicateComponentKind,
    RegistryFrozenError,
    SchemaValidationError,
    UnknownComponentKind,
)
from .models import AttributeDeclaration, AttributeSet, error_list
from .types import IDENTIFIER_PATTERN, TypedValue

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ComponentSchema:
    """The resolved attribute schema of one component kind."""

    kind: str
    included_sets: tuple[AttributeSet, ...] = ()
    own_attributes: tuple[AttributeDeclaration, ...] = ()
    description: str = ""
    attributes: Mapping[str, AttributeDeclaration] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )
    typed_defaults: Mapping[str, TypedValue] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )
    sources: Mapping[str, str] = field(
        default_factory=lambda: MappingProxyType({}), compare=False
    )

    def attribute(self, name: str) -> AttributeDeclaration | None:
        """Get the declaration for an attribute name, if any."""
        return self.attributes.get(name)

    def required_attributes(self) -> list[AttributeDeclaration]:
        """Get attributes that must be set because they have no default."""
        return [
            a for a in self.attributes.values() if a.required and a.default is None
        ]

    def source_of(self, name: str) -> str:
        """Get the name of the set declaring an attribute, or the kind itself."""
        return self.sources[name]


class ComponentSchemaRegistry:
    """Maps component kinds to their resolved schemas.

    Schemas are resolved eagerly at registration: included sets are looked
    up, their attributes merged with the kind's own, and the resulting name
    map is cached. Call ``freeze()`` once registration is complete; the
    registry is read-only from then on.
    """

    def __init__(self, catalog: AttributeSetCatalog | None = None):
        self.catalog = catalog if catalog is not None else AttributeSetCatalog()
        self._schemas: dict[str, ComponentSchema] = {}
        self._frozen = False

    @property
    def types(self):
        return self.catalog.types

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make this registry and its catalog read-only."""
        if not self._frozen:
            logger.debug("Freezing component registry with %d kind(s)", len(self._schemas))
        self.catalog.freeze()
        self._frozen = True

    def register(
        self,
        kind: str,
        included_set_names: Iterable[str] = (),
        own_attributes: Iterable[AttributeDeclaration | dict] = (),
        description: str = "",
    ) -> ComponentSchema:
        """Register a component kind.

        Args:
            kind: The component kind name.
            included_set_names: Names of catalog sets the kind includes.
            own_attributes: Attributes declared directly on the kind.
            description: Human-readable description.

        Returns:
            The resolved ComponentSchema.

        Raises:
            RegistryFrozenError: If the registry has been frozen.
            SchemaValidationError: If the kind is not an identifier or an own
                attribute mapping is malformed.
            DuplicateComponentKind: If the kind is already registered.
            UnknownAttributeSet: If an included set is not in the catalog.
            DuplicateAttributeName: If any attribute name is declared twice.
            InvalidLiteral: If a declared default does not fit its type.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register component kind '{kind}': registry is frozen"
            )
        if not IDENTIFIER_PATTERN.fullmatch(kind):
            raise SchemaValidationError(
                f"Invalid component kind {kind!r}",
                [
                    {
                        "loc": "kind",
                        "msg": f"'{kind}' is not a valid identifier",
                        "type": "value_error",
                    }
                ],
            )
        if kind in self._schemas:
            raise DuplicateComponentKind(kind)

        included = tuple(self.catalog.lookup(name) for name in included_set_names)
        try:
            own = tuple(
                a if isinstance(a, AttributeDeclaration) else AttributeDeclaration.model_validate(a)
                for a in own_attributes
            )
        except ValidationError as e:
            raise SchemaValidationError(
                f"Invalid attribute declaration in component kind '{kind}'", error_list(e)
            ) from e

        # Collect every declaring source per name before merging so that a
        # collision is reported the same way whatever the declaration order.
        declared: dict[str, list[tuple[str, AttributeDeclaration]]] = {}
        for attribute_set in included:
            for attr in attribute_set.attributes:
                declared.setdefault(attr.name, []).append((attribute_set.name, attr))
        for attr in own:
            declared.setdefault(attr.name, []).append((kind, attr))

        collisions = sorted(name for name, decls in declared.items() if len(decls) > 1)
        if collisions:
            name = collisions[0]
            raise DuplicateAttributeName(
                name, kind, tuple(source for source, _ in declared[name])
            )

        attributes = {name: decls[0][1] for name, decls in declared.items()}
        sources = {name: decls[0][0] for name, decls in declared.items()}

        defaults: dict[str, TypedValue] = {}
        for attr in own:
            if attr.default is not None:
                defaults[attr.name] = self.types.validate_literal(attr.type, attr.default)
        for attribute_set in included:
            for attr in attribute_set.attributes:
                if attr.default is not None:
                    defaults[attr.name] = self.types.validate_literal(
                        attr.type, attr.default
                    )

        schema = ComponentSchema(
            kind=kind,
            included_sets=included,
            own_attributes=own,
            description=description,
            attributes=MappingProxyType(attributes),
            typed_defaults=MappingProxyType(defaults),
            sources=MappingProxyType(sources),
        )
        self._schemas[kind] = schema
        logger.debug(
            "Registered component kind '%s' with %d attribute(s) from %d set(s)",
            kind,
            len(attributes),
            len(included),
        )
        return schema

    def schema_for(self, kind: str) -> ComponentSchema:
        """Get the resolved schema for a component kind.

        Raises:
            UnknownComponentKind: If the kind is not registered.
        """
        try:
            return self._schemas[kind]
        except KeyError:
            raise UnknownComponentKind(kind) from None

    def kinds(self) -> list[str]:
        """Get all registered kinds in registration order."""
        return list(self._schemas)

    def __contains__(self, kind: str) -> bool:
        return kind in self._schemas

    def __iter__(self):
        return iter(self._schemas.values())

    def __len__(self) -> int:
        return len(self._schemas)

"""Catalog of shared attribute sets."""

import logging

from .errors import (
    DuplicateAttributeName,
    DuplicateSetName,
    RegistryFrozenError,
    UnknownAttributeSet,
)
from .models import AttributeSet
from .types import TYPES, AttributeTypeRegistry

logger = logging.getLogger(__name__)


class AttributeSetCatalog:
    """Holds named attribute sets that component kinds include by reference.

    Sets are stored once and shared; schemas keep references to the same
    AttributeSet instances rather than copies.
    """

    def __init__(self, types: AttributeTypeRegistry = TYPES):
        self.types = types
        self._sets: dict[str, AttributeSet] = {}
        self._frozen = False

    @property
    def frozen(self) -> bool:
        return self._frozen

    def freeze(self) -> None:
        """Make the catalog read-only."""
        if not self._frozen:
            logger.debug("Freezing attribute set catalog with %d set(s)", len(self._sets))
        self._frozen = True

    def register(self, attribute_set: AttributeSet) -> AttributeSet:
        """Register an attribute set.

        Args:
            attribute_set: The set to register.

        Returns:
            The registered set.

        Raises:
            RegistryFrozenError: If the catalog has been frozen.
            DuplicateSetName: If a set with the same name exists.
            DuplicateAttributeName: If the set declares a name twice.
            InvalidLiteral: If a declared default does not fit its type.
        """
        if self._frozen:
            raise RegistryFrozenError(
                f"Cannot register attribute set '{attribute_set.name}': catalog is frozen"
            )
        if attribute_set.name in self._sets:
            raise DuplicateSetName(attribute_set.name)

        seen: set[str] = set()
        for attr in attribute_set.attributes:
            if attr.name in seen:
                raise DuplicateAttributeName(attr.name, attribute_set.name)
            seen.add(attr.name)
            if attr.default is not None:
                self.types.validate_literal(attr.type, attr.default)

        self._sets[attribute_set.name] = attribute_set
        logger.debug(
            "Registered attribute set '%s' with %d attribute(s)",
            attribute_set.name,
            len(attribute_set.attributes),
        )
        return attribute_set

    def lookup(self, name: str) -> AttributeSet:
        """Get an attribute set by name.

        Raises:
            UnknownAttributeSet: If no set with that name is registered.
        """
        try:
            return self._sets[name]
        except KeyError:
            raise UnknownAttributeSet(name) from None

    def names(self) -> list[str]:
        """Get all set names in registration order."""
        return list(self._sets)

    def __contains__(self, name: str) -> bool:
        return name in self._sets

    def __iter__(self):
        return iter(self._sets.values())

    def __len__(self) -> int:
        return len(self._sets)

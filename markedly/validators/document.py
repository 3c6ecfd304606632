"""Schema validation of parsed declaration trees."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import TYPE_CHECKING

from ..document.errors import DocumentValidationError
from ..document.models import ComponentDeclaration, RawValue, ValidatedComponent
from ..schema.errors import InvalidLiteral, UnknownComponentKind
from ..schema.registry import ComponentSchemaRegistry
from ..schema.types import TYPES, AttributeTypeRegistry, TypedValue
from .base import ValidationIssue, ValidationResult

if TYPE_CHECKING:
    from .style import Style

logger = logging.getLogger(__name__)


@dataclass
class ValidatedDocument:
    """The outcome of validating a document.

    ``components`` holds the typed tree only when validation found no
    errors; otherwise it is empty and ``result`` lists every issue.
    """

    components: tuple[ValidatedComponent, ...] = ()
    result: ValidationResult = field(default_factory=ValidationResult)

    @property
    def is_valid(self) -> bool:
        return self.result.is_valid

    @property
    def issues(self) -> list[ValidationIssue]:
        return self.result.issues

    def raise_for_errors(self) -> None:
        """Raise DocumentValidationError if validation found errors."""
        if self.result.has_errors:
            errors = self.result.errors
            raise DocumentValidationError(
                f"Document validation failed with {len(errors)} error(s)", errors
            )


class DocumentValidator:
    """Checks declaration trees against a component schema registry.

    Every issue across the whole tree is collected rather than stopping at
    the first. With ``check_required`` off, absent required attributes are
    not reported, which suits partial documents such as styles.

    The registry is frozen on construction, and validation only reads it,
    so one validator can be shared between threads.
    """

    def __init__(
        self,
        registry: ComponentSchemaRegistry,
        types: AttributeTypeRegistry = TYPES,
        style: Style | None = None,
        check_required: bool = True,
    ):
        registry.freeze()
        self.registry = registry
        self.types = types
        self.style = style
        self.check_required = check_required

    def validate(
        self, declarations: Iterable[ComponentDeclaration], source: str | None = None
    ) -> ValidatedDocument:
        """Validate top-level declarations and their descendants.

        Args:
            declarations: Parsed top-level declarations.
            source: Source name recorded on issues.

        Returns:
            A ValidatedDocument with the typed tree or the issues found.
        """
        result = ValidationResult()
        components = []
        for declaration in declarations:
            component = self._validate_node(declaration, result, source)
            if component is not None:
                components.append(component)

        logger.debug(
            "Validated %d component(s) from %s: %d error(s), %d warning(s)",
            len(components),
            source or "<string>",
            len(result.errors),
            len(result.warnings),
        )

        if result.has_errors:
            return ValidatedDocument((), result)
        return ValidatedDocument(tuple(components), result)

    def validate_component(self, declaration: ComponentDeclaration) -> ValidatedComponent:
        """Validate a single declaration tree, raising if it has any errors.

        Raises:
            DocumentValidationError: If the tree has any errors.
        """
        document = self.validate([declaration])
        document.raise_for_errors()
        return document.components[0]

    def _validate_node(
        self,
        declaration: ComponentDeclaration,
        result: ValidationResult,
        source: str | None,
    ) -> ValidatedComponent | None:
        kind = declaration.kind

        try:
            schema = self.registry.schema_for(kind)
        except UnknownComponentKind as e:
            result.add_error(
                code="UNKNOWN_COMPONENT_KIND",
                message=str(e),
                component=kind,
                position=declaration.position,
                source=source,
                known_kinds=self.registry.kinds(),
            )
            schema = None

        # Children are checked even under an unknown parent so that every
        # problem in the tree is reported together.
        children = [
            child
            for child in (
                self._validate_node(c, result, source) for c in declaration.children
            )
            if child is not None
        ]

        if schema is None:
            return None

        raw: dict[str, RawValue] = {}
        if self.style is not None:
            for name, value in self.style.values_for(kind).items():
                if schema.attribute(name) is not None:
                    raw[name] = value

        seen: set[str] = set()
        for assignment in declaration.assignments:
            name = assignment.name
            if name in seen:
                result.add_warning(
                    code="DUPLICATE_ATTRIBUTE",
                    message=f"Attribute '{name}' is set more than once; the last value is used",
                    component=kind,
                    attribute=name,
                    position=assignment.position,
                    source=source,
                )
            seen.add(name)

            if schema.attribute(name) is None:
                result.add_error(
                    code="UNKNOWN_ATTRIBUTE",
                    message=f"Component '{kind}' has no attribute '{name}'",
                    component=kind,
                    attribute=name,
                    position=assignment.position,
                    source=source,
                )
                continue
            raw[name] = assignment.value

        values: dict[str, TypedValue] = {}
        invalid: set[str] = set()
        for name, value in raw.items():
            if value.is_default:
                continue
            attr = schema.attributes[name]
            try:
                values[name] = self.types.validate_literal(attr.type, value)
            except InvalidLiteral as e:
                invalid.add(name)
                result.add_error(
                    code="INVALID_LITERAL",
                    message=str(e),
                    component=kind,
                    attribute=name,
                    position=value.position,
                    source=source,
                    raw=e.raw,
                    expected=e.expected,
                )

        required = schema.required_attributes() if self.check_required else []
        for attr in required:
            if attr.name not in values and attr.name not in invalid:
                result.add_error(
                    code="MISSING_REQUIRED_ATTRIBUTE",
                    message=f"Component '{kind}' requires attribute '{attr.name}'",
                    component=kind,
                    attribute=attr.name,
                    position=declaration.position,
                    source=source,
                    expected=attr.type.value,
                )

        return ValidatedComponent(
            kind=kind,
            attributes=MappingProxyType(values),
            children=tuple(children),
            position=declaration.position,
        )

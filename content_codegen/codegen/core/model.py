"""
Class model built from a content type.

A ClassSpec is the language-neutral description of one generated class:
its fields, getter/setter pairs and the provenance annotations that let
the delivery runtime map API data back onto instances.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, Optional, Tuple

from ...logging_config import get_logger
from .config import GeneratorConfig
from .errors import ModelError
from .naming import NameSanitizer
from .schema import ContentType, Element
from .types import TypeDescriptor, TypeMapper

logger = get_logger(__name__)

UnsupportedElementHook = Callable[[ContentType, Element], None]


class AccessorKind(Enum):
    GETTER = "get"
    SETTER = "set"


@dataclass(frozen=True)
class FieldSpec:
    """One generated member, annotated with its element codename."""

    name: str
    type: TypeDescriptor
    source_codename: str


@dataclass(frozen=True)
class AccessorSpec:
    """A getter or setter for exactly one field."""

    name: str
    kind: AccessorKind
    field: FieldSpec


@dataclass(frozen=True)
class ClassSpec:
    """A generated class, annotated with its content type codename."""

    name: str
    provenance: str
    fields: Tuple[FieldSpec, ...] = ()
    accessors: Tuple[AccessorSpec, ...] = ()
    documentation: Tuple[str, ...] = ()
    package_name: str = ""

    def getter_for(self, field_spec: FieldSpec) -> AccessorSpec:
        return self._accessor(field_spec, AccessorKind.GETTER)

    def setter_for(self, field_spec: FieldSpec) -> AccessorSpec:
        return self._accessor(field_spec, AccessorKind.SETTER)

    def _accessor(self, field_spec: FieldSpec, kind: AccessorKind) -> AccessorSpec:
        for accessor in self.accessors:
            if accessor.field == field_spec and accessor.kind == kind:
                return accessor
        raise KeyError(f"No {kind.name.lower()} for field {field_spec.name}")

    @property
    def types_used(self) -> Tuple[TypeDescriptor, ...]:
        """Distinct field types in field order."""
        seen = []
        for field_spec in self.fields:
            if field_spec.type not in seen:
                seen.append(field_spec.type)
        return tuple(seen)


class ClassModelBuilder:
    """Turns one ContentType into one ClassSpec.

    The builder is a pure transformation: no filesystem access and no state
    kept between calls. Elements whose type tag has no descriptor are left
    out of the class; they are logged at DEBUG level and reported to the
    optional ``on_unsupported`` hook, neither of which changes the output.
    """

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        type_mapper: Optional[TypeMapper] = None,
        on_unsupported: Optional[UnsupportedElementHook] = None,
        reserved_words=None,
    ):
        self.config = config or GeneratorConfig()
        self.type_mapper = type_mapper or TypeMapper.from_config(
            self.config.type_overrides
        )
        self.sanitizer = NameSanitizer(
            member_case=self.config.member_naming,
            type_case=self.config.type_naming,
            reserved_words=reserved_words,
        )
        self.on_unsupported = on_unsupported

    def build(self, content_type: ContentType) -> ClassSpec:
        """
        Build the class specification for a content type.

        Args:
            content_type: Content type to describe

        Returns:
            ClassSpec with one field and two accessors per supported element

        Raises:
            ModelError: If two element codenames produce the same field name
            NamingError: If a codename is not lower_snake_case
        """
        fields = []
        accessors = []
        claimed: Dict[str, str] = {}

        for codename, element in content_type.elements.items():
            descriptor = self.type_mapper.map_type(element.type_tag)
            if descriptor is None:
                self._report_unsupported(content_type, element)
                continue

            field_name = self.sanitizer.member_name(codename)
            if field_name in claimed:
                raise ModelError(
                    f"Elements '{claimed[field_name]}' and '{codename}' of content type "
                    f"'{content_type.codename}' both map to field '{field_name}'"
                )
            claimed[field_name] = codename

            field_spec = FieldSpec(
                name=field_name, type=descriptor, source_codename=codename
            )
            fields.append(field_spec)
            accessors.extend(self._accessors_for(field_spec))

        class_name = self.sanitizer.type_name(content_type.codename)
        logger.debug(
            "Built class %s from content type %s (%d fields)",
            class_name,
            content_type.codename,
            len(fields),
        )

        return ClassSpec(
            name=class_name,
            provenance=content_type.codename,
            fields=tuple(fields),
            accessors=tuple(accessors),
            documentation=tuple(self.config.documentation)
            if self.config.add_comments
            else (),
            package_name=self.config.package_name,
        )

    def _accessors_for(self, field_spec: FieldSpec) -> Tuple[AccessorSpec, AccessorSpec]:
        return tuple(
            AccessorSpec(
                name=self.sanitizer.accessor_name(kind.value, field_spec.name),
                kind=kind,
                field=field_spec,
            )
            for kind in (AccessorKind.GETTER, AccessorKind.SETTER)
        )

    def _report_unsupported(self, content_type: ContentType, element: Element):
        logger.debug(
            "Skipping element %s.%s: unsupported type '%s'",
            content_type.codename,
            element.codename,
            element.type_tag,
        )
        if self.on_unsupported is not None:
            self.on_unsupported(content_type, element)

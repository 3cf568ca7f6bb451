"""
Type descriptors for content element kinds.

Maps the type tag of a schema element ("text", "asset", ...) to an abstract,
language-neutral type. Language emitters turn descriptors into concrete type
names and imports.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Union

from .errors import ConfigError


class ScalarKind(Enum):
    """Scalar value types."""

    STRING = "string"
    FLOAT = "float"  # double precision
    DATETIME = "datetime"  # timezone-aware


class DomainType(Enum):
    """Types provided by the delivery runtime library."""

    OPTION = "Option"
    ASSET = "Asset"
    TAXONOMY = "Taxonomy"
    CONTENT_ITEM = "ContentItem"


@dataclass(frozen=True)
class Scalar:
    """A single scalar value."""

    kind: ScalarKind


@dataclass(frozen=True)
class ListOf:
    """A list of runtime domain objects."""

    element: DomainType


@dataclass(frozen=True)
class Reference:
    """An opaque reference to a runtime domain object."""

    target: DomainType


TypeDescriptor = Union[Scalar, ListOf, Reference]


# Single source of truth for element kinds understood by the generator.
# modular_content stays a generic ContentItem: the element metadata does not
# say which content type it links to, so callers downcast at runtime.
TYPE_TABLE: Dict[str, TypeDescriptor] = {
    "text": Scalar(ScalarKind.STRING),
    "rich_text": Scalar(ScalarKind.STRING),
    "url_slug": Scalar(ScalarKind.STRING),
    "number": Scalar(ScalarKind.FLOAT),
    "date_time": Scalar(ScalarKind.DATETIME),
    "multiple_choice": ListOf(DomainType.OPTION),
    "asset": ListOf(DomainType.ASSET),
    "taxonomy": ListOf(DomainType.TAXONOMY),
    "modular_content": Reference(DomainType.CONTENT_ITEM),
}


def map_type(type_tag: str) -> Optional[TypeDescriptor]:
    """Return the descriptor for a type tag, or None for unsupported tags."""
    return TYPE_TABLE.get(type_tag)


def parse_descriptor(text: str) -> TypeDescriptor:
    """
    Parse a descriptor from its configuration form.

    Accepted forms: ``string``, ``float``, ``datetime``, ``list:<Domain>``
    and ``ref:<Domain>`` where ``<Domain>`` is one of Option, Asset,
    Taxonomy or ContentItem.

    Raises:
        ValueError: If the text names no known descriptor
    """
    value = text.strip()
    if ":" in value:
        variant, _, domain_name = value.partition(":")
        try:
            domain = DomainType(domain_name.strip())
        except ValueError:
            raise ValueError(f"Unknown domain type: {domain_name!r}")
        variant = variant.strip().lower()
        if variant == "list":
            return ListOf(domain)
        if variant == "ref":
            return Reference(domain)
        raise ValueError(f"Unknown type variant: {variant!r}")

    try:
        return Scalar(ScalarKind(value.lower()))
    except ValueError:
        raise ValueError(f"Unknown scalar type: {value!r}")


class TypeMapper:
    """Type table lookup with optional per-project overrides."""

    def __init__(self, overrides: Optional[Mapping[str, TypeDescriptor]] = None):
        self._table: Dict[str, TypeDescriptor] = dict(TYPE_TABLE)
        if overrides:
            self._table.update(overrides)

    @classmethod
    def from_config(cls, type_overrides: Mapping[str, str]) -> "TypeMapper":
        """Build a mapper from ``{tag: "list:Asset", ...}`` style overrides.

        Raises:
            ConfigError: If an override names no known descriptor
        """
        overrides = {}
        for tag, text in type_overrides.items():
            try:
                overrides[tag] = parse_descriptor(text)
            except (AttributeError, ValueError) as e:
                raise ConfigError(f"Invalid type override for '{tag}': {e}") from e
        return cls(overrides)

    def map_type(self, type_tag: str) -> Optional[TypeDescriptor]:
        """Return the descriptor for a type tag, or None if unsupported."""
        return self._table.get(type_tag)

    def is_supported(self, type_tag: str) -> bool:
        return type_tag in self._table

    @property
    def supported_tags(self) -> list:
        return sorted(self._table)

"""
Content schema representation.

Normalizes the content type listing returned by the Delivery API into
read-only objects the class model builder works with.
"""

from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .errors import SchemaError


@dataclass(frozen=True)
class Element:
    """One typed element of a content type."""

    codename: str
    type_tag: str
    name: Optional[str] = None

    @classmethod
    def from_dict(cls, codename: str, payload: Dict[str, Any]) -> "Element":
        if not isinstance(payload, dict) or "type" not in payload:
            raise SchemaError(f"Element '{codename}' has no type")
        return cls(codename=codename, type_tag=payload["type"], name=payload.get("name"))


@dataclass(frozen=True)
class ContentType:
    """A content type: a codename and its elements in API order."""

    codename: str
    elements: Mapping[str, Element] = field(default_factory=dict)
    name: Optional[str] = None

    def __post_init__(self):
        # Freeze a private copy so callers cannot mutate the schema afterwards
        object.__setattr__(self, "elements", MappingProxyType(dict(self.elements)))

    @classmethod
    def from_elements(
        cls, codename: str, elements: Iterable[Element], name: Optional[str] = None
    ) -> "ContentType":
        """Build a content type from an ordered iterable of elements."""
        return cls(codename, {element.codename: element for element in elements}, name)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "ContentType":
        """
        Parse one entry of a ``/types`` response.

        Args:
            payload: ``{"system": {"codename": ...}, "elements": {...}}``

        Returns:
            ContentType with elements in payload order

        Raises:
            SchemaError: If the codename or the element map is missing
        """
        if not isinstance(payload, dict):
            raise SchemaError(f"Content type must be an object, got {type(payload).__name__}")

        system = payload.get("system") or {}
        codename = system.get("codename")
        if not codename:
            raise SchemaError("Content type has no system.codename")

        raw_elements = payload.get("elements", {})
        if not isinstance(raw_elements, dict):
            raise SchemaError(f"Elements of content type '{codename}' must be an object")

        elements = [
            Element.from_dict(element_codename, element_data)
            for element_codename, element_data in raw_elements.items()
        ]
        return cls.from_elements(codename, elements, name=system.get("name"))

    def __hash__(self):
        return hash((self.codename, tuple(self.elements.items()), self.name))

    def __eq__(self, other):
        if not isinstance(other, ContentType):
            return NotImplemented
        return (
            self.codename == other.codename
            and list(self.elements.items()) == list(other.elements.items())
            and self.name == other.name
        )


def parse_content_types(payload: Any) -> List[ContentType]:
    """
    Parse a full ``/types`` response.

    Accepts either the response object (``{"types": [...]}``) or a bare
    list of content type entries.
    """
    if isinstance(payload, dict):
        if "types" not in payload:
            raise SchemaError("Response has no 'types' list")
        payload = payload["types"]

    if not isinstance(payload, list):
        raise SchemaError(f"Expected a list of content types, got {type(payload).__name__}")

    return [ContentType.from_dict(entry) for entry in payload]

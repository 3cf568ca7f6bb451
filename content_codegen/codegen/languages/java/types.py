"""
Java type mapping for class specifications.

Turns language-neutral type descriptors into Java type names and the
imports they need. A type whose simple name equals the generated class
name is written fully qualified instead of imported.
"""

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable, Optional, Set

from ...core.types import ListOf, Reference, Scalar, ScalarKind, TypeDescriptor


@dataclass(frozen=True)
class JavaType:
    """A rendered Java type and its required imports."""

    name: str
    imports_needed: FrozenSet[str] = field(default_factory=frozenset)


JAVA_SCALAR_TYPES = {
    ScalarKind.STRING: "java.lang.String",
    ScalarKind.FLOAT: "java.lang.Double",
    ScalarKind.DATETIME: "java.time.ZonedDateTime",
}

JAVA_LIST_TYPE = "java.util.List"


class JavaTypeMapper:
    """Maps descriptors to Java types using the configured runtime package."""

    def __init__(self, runtime_package: str):
        self.runtime_package = runtime_package

    def runtime_class(self, name: str) -> str:
        """Fully qualified name of a runtime class."""
        if not self.runtime_package:
            return name
        return f"{self.runtime_package}.{name}"

    def reference(self, qualified_name: str, owner: Optional[str] = None) -> JavaType:
        """How a class is referred to from inside the class ``owner``."""
        package, _, simple_name = qualified_name.rpartition(".")
        if simple_name == owner:
            return JavaType(qualified_name)
        # java.lang and the default package need no import
        if not package or package == "java.lang":
            return JavaType(simple_name)
        return JavaType(simple_name, frozenset({qualified_name}))

    def map_type(
        self, descriptor: TypeDescriptor, owner: Optional[str] = None
    ) -> JavaType:
        if isinstance(descriptor, Scalar):
            return self.reference(JAVA_SCALAR_TYPES[descriptor.kind], owner)

        if isinstance(descriptor, ListOf):
            container = self.reference(JAVA_LIST_TYPE, owner)
            element = self.reference(self.runtime_class(descriptor.element.value), owner)
            return JavaType(
                f"{container.name}<{element.name}>",
                container.imports_needed | element.imports_needed,
            )

        if isinstance(descriptor, Reference):
            return self.reference(self.runtime_class(descriptor.target.value), owner)

        raise TypeError(f"Unknown type descriptor: {descriptor!r}")

    def collect_imports(
        self, descriptors: Iterable[TypeDescriptor], owner: Optional[str] = None
    ) -> Set[str]:
        imports: Set[str] = set()
        for descriptor in descriptors:
            imports.update(self.map_type(descriptor, owner).imports_needed)
        return imports

"""
Python source emitter.

Renders class specifications as plain Python classes: typed attributes,
get/set methods and class-level provenance mappings, one module per
content type under the package directory.
"""

from pathlib import Path
from typing import Any, Dict, List, Set

from ...core.generator import SourceEmitter
from ...core.model import ClassSpec
from ...core.types import ListOf, Reference, Scalar, ScalarKind, TypeDescriptor
from .naming import PYTHON_RESERVED_WORDS, module_name


PYTHON_SCALAR_TYPES = {
    ScalarKind.STRING: "str",
    ScalarKind.FLOAT: "float",
    ScalarKind.DATETIME: "datetime",
}

PYTHON_CLASS_TEMPLATE = '''\
{% if documentation %}
"""
{% for line in documentation %}
{{ line }}
{% endfor %}
"""
{% endif %}

from __future__ import annotations
{% if uses_datetime %}

from datetime import datetime
{% endif %}
{% if runtime_imports and runtime_package %}

from {{ runtime_package }} import {{ runtime_imports | join(", ") }}
{% endif %}


class {{ class_name }}:
{% if documentation %}
    """Model for the {{ provenance | quote }} content type."""

{% endif %}
    __content_type__ = {{ provenance | quote }}
    __element_mapping__ = {
{% for field in fields %}
        {{ field.name | quote }}: {{ field.source_codename | quote }},
{% endfor %}
    }
{% if fields %}

{% endif %}
{% for field in fields %}
    {{ field.name }}: {{ field.type }} | None = None
{% endfor %}
{% for field in fields %}

    def {{ field.getter }}(self) -> {{ field.type }} | None:
        return self.{{ field.name }}

    def {{ field.setter }}(self, {{ field.name }}: {{ field.type }} | None) -> None:
        self.{{ field.name }} = {{ field.name }}
{% endfor %}
'''


class PythonEmitter(SourceEmitter):
    """Emitter for Python model classes."""

    reserved_words = PYTHON_RESERVED_WORDS

    @property
    def language_name(self) -> str:
        return "python"

    @property
    def file_extension(self) -> str:
        return ".py"

    def get_templates(self) -> Dict[str, str]:
        return {"class.py.j2": PYTHON_CLASS_TEMPLATE}

    def path_for(self, spec: ClassSpec, target_directory: Path) -> Path:
        package_dir = Path(*spec.package_name.split(".")) if spec.package_name else Path()
        file_name = f"{module_name(spec.provenance)}{self.file_extension}"
        return target_directory / package_dir / file_name

    def render(self, spec: ClassSpec) -> str:
        return self.render_template("class.py.j2", self._class_context(spec))

    def get_python_type(self, descriptor: TypeDescriptor) -> str:
        """Get Python type annotation for a descriptor."""
        if isinstance(descriptor, Scalar):
            return PYTHON_SCALAR_TYPES[descriptor.kind]
        if isinstance(descriptor, ListOf):
            return f"list[{descriptor.element.value}]"
        if isinstance(descriptor, Reference):
            return descriptor.target.value
        raise TypeError(f"Unknown type descriptor: {descriptor!r}")

    def _runtime_imports(self, spec: ClassSpec) -> Set[str]:
        names = set()
        for descriptor in spec.types_used:
            if isinstance(descriptor, ListOf):
                names.add(descriptor.element.value)
            elif isinstance(descriptor, Reference):
                names.add(descriptor.target.value)
        return names

    def _class_context(self, spec: ClassSpec) -> Dict[str, Any]:
        return {
            "documentation": list(spec.documentation),
            "uses_datetime": Scalar(ScalarKind.DATETIME) in spec.types_used,
            "runtime_package": self.config.runtime_package,
            "runtime_imports": sorted(self._runtime_imports(spec)),
            "class_name": spec.name,
            "provenance": spec.provenance,
            "fields": self._field_context(spec),
        }

    def _field_context(self, spec: ClassSpec) -> List[Dict[str, str]]:
        return [
            {
                "name": field_spec.name,
                "type": self.get_python_type(field_spec.type),
                "source_codename": field_spec.source_codename,
                "getter": spec.getter_for(field_spec).name,
                "setter": spec.setter_for(field_spec).name,
            }
            for field_spec in spec.fields
        ]

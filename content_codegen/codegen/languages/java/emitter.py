"""
Java source emitter.

Renders class specifications as annotated Java classes with a field,
a getter and a setter per element, one file per class under the package
directory.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional

from ...core.config import GeneratorConfig
from ...core.generator import SourceEmitter
from ...core.model import ClassSpec
from .naming import JAVA_RESERVED_WORDS
from .types import JavaTypeMapper


JAVA_CLASS_TEMPLATE = """\
{% if package_name %}
package {{ package_name }};

{% endif %}
{% for import in imports %}
import {{ import }};
{% endfor %}

{% if documentation %}
/**
{{ documentation | doc_lines(" *") }}
 */
{% endif %}
@{{ content_item_mapping }}({{ provenance | quote }})
public class {{ class_name }} {
{% for field in fields %}
{% if not loop.first %}

{% endif %}
    @{{ element_mapping }}({{ field.source_codename | quote }})
    {{ field.type }} {{ field.name }};
{% endfor %}
{% for field in fields %}

    public {{ field.type }} {{ field.getter }}() {
        return {{ field.name }};
    }

    public void {{ field.setter }}({{ field.type }} {{ field.name }}) {
        this.{{ field.name }} = {{ field.name }};
    }
{% endfor %}
}
"""


class JavaEmitter(SourceEmitter):
    """Emitter for Java classes mapped by the delivery runtime."""

    reserved_words = JAVA_RESERVED_WORDS

    def __init__(self, config: Optional[GeneratorConfig] = None):
        super().__init__(config)
        self.type_mapper = JavaTypeMapper(self.config.runtime_package)

    @property
    def language_name(self) -> str:
        return "java"

    @property
    def file_extension(self) -> str:
        return ".java"

    def get_templates(self) -> Dict[str, str]:
        return {"class.java.j2": JAVA_CLASS_TEMPLATE}

    def path_for(self, spec: ClassSpec, target_directory: Path) -> Path:
        package_dir = Path(*spec.package_name.split(".")) if spec.package_name else Path()
        return target_directory / package_dir / f"{spec.name}{self.file_extension}"

    def render(self, spec: ClassSpec) -> str:
        return self.render_template("class.java.j2", self._class_context(spec))

    def _class_context(self, spec: ClassSpec) -> Dict[str, Any]:
        mapper = self.type_mapper
        imports = mapper.collect_imports(spec.types_used, spec.name)

        item_mapping = mapper.reference(mapper.runtime_class("ContentItemMapping"), spec.name)
        element_mapping = mapper.reference(mapper.runtime_class("ElementMapping"), spec.name)
        imports.update(item_mapping.imports_needed)
        if spec.fields:
            imports.update(element_mapping.imports_needed)

        return {
            "package_name": spec.package_name,
            "imports": sorted(imports),
            "documentation": list(spec.documentation),
            "provenance": spec.provenance,
            "class_name": spec.name,
            "fields": self._field_context(spec),
            "content_item_mapping": item_mapping.name,
            "element_mapping": element_mapping.name,
        }

    def _field_context(self, spec: ClassSpec) -> List[Dict[str, str]]:
        return [
            {
                "name": field_spec.name,
                "type": self.type_mapper.map_type(field_spec.type, spec.name).name,
                "source_codename": field_spec.source_codename,
                "getter": spec.getter_for(field_spec).name,
                "setter": spec.setter_for(field_spec).name,
            }
            for field_spec in spec.fields
        ]

"""
Jinja2 rendering for generated classes.

Each emitter ships its templates as in-memory strings. A template directory
may be supplied to override any of them by name.
"""

from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from jinja2 import (
    ChoiceLoader,
    DictLoader,
    Environment,
    FileSystemLoader,
    StrictUndefined,
    TemplateError as Jinja2TemplateError,
)

from .errors import TemplateError


def quote(value: Any) -> str:
    """Double-quoted string literal, valid in Java and Python."""
    escaped = str(value).replace("\\", "\\\\").replace('"', '\\"')
    return f'"{escaped}"'


def doc_lines(lines: List[str], prefix: str) -> str:
    """Prefix documentation lines, leaving blank lines without trailing space."""
    return "\n".join(f"{prefix} {line}" if line else prefix for line in lines)


class TemplateEngine:
    """Jinja2 environment configured for source code output."""

    def __init__(
        self,
        templates: Optional[Dict[str, str]] = None,
        template_dir: Optional[Union[str, Path]] = None,
    ):
        """
        Args:
            templates: Built-in templates by name
            template_dir: Optional directory whose templates take precedence
        """
        builtin = DictLoader(dict(templates or {}))
        loaders = [builtin]
        if template_dir is not None:
            template_dir = Path(template_dir)
            if not template_dir.is_dir():
                raise TemplateError(f"Template directory not found: {template_dir}")
            loaders.insert(0, FileSystemLoader(str(template_dir)))

        self._env = Environment(
            loader=ChoiceLoader(loaders),
            autoescape=False,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
            undefined=StrictUndefined,
        )
        self._env.filters["quote"] = quote
        self._env.filters["doc_lines"] = doc_lines

    def has_template(self, name: str) -> bool:
        return name in self._env.list_templates()

    def render_template(self, name: str, context: Dict[str, Any]) -> str:
        try:
            return self._env.get_template(name).render(**context)
        except Jinja2TemplateError as e:
            raise TemplateError(f"Failed to render template {name}: {e}") from e

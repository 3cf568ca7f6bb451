from pathlib import Path

import pytest

from content_codegen.codegen.core.config import GeneratorConfig
from content_codegen.codegen.core.errors import TemplateError
from content_codegen.codegen.core.model import ClassModelBuilder
from content_codegen.codegen.core.templates import TemplateEngine, doc_lines, quote
from content_codegen.codegen.languages.java import JavaEmitter


def test_quote_escapes() -> None:
    assert quote("article") == '"article"'
    assert quote('say "hi" \\ bye') == '"say \\"hi\\" \\\\ bye"'


def test_doc_lines() -> None:
    assert doc_lines(["First", "", "Last"], " *") == " * First\n *\n * Last"


def test_render_builtin_template() -> None:
    engine = TemplateEngine({"greeting.j2": "Hello {{ name | quote }}\n"})

    assert engine.has_template("greeting.j2")
    assert engine.render_template("greeting.j2", {"name": "world"}) == 'Hello "world"\n'


def test_missing_variable_is_an_error() -> None:
    engine = TemplateEngine({"greeting.j2": "Hello {{ name }}"})

    with pytest.raises(TemplateError, match="greeting.j2"):
        engine.render_template("greeting.j2", {})


def test_unknown_template() -> None:
    with pytest.raises(TemplateError):
        TemplateEngine().render_template("nope.j2", {})


def test_directory_overrides_builtin(tmp_path: Path) -> None:
    (tmp_path / "greeting.j2").write_text("Hi {{ name }}\n", encoding="utf-8")
    engine = TemplateEngine(
        {"greeting.j2": "Hello {{ name }}\n", "farewell.j2": "Bye\n"}, tmp_path
    )

    assert engine.render_template("greeting.j2", {"name": "you"}) == "Hi you\n"
    assert engine.render_template("farewell.j2", {}) == "Bye\n"


def test_missing_template_directory(tmp_path: Path) -> None:
    with pytest.raises(TemplateError, match="not found"):
        TemplateEngine(template_dir=tmp_path / "missing")


def test_emitter_uses_configured_template_dir(tmp_path: Path, article_type) -> None:
    (tmp_path / "class.java.j2").write_text(
        "{{ class_name }}:{% for field in fields %} {{ field.name }}{% endfor %}\n",
        encoding="utf-8",
    )
    config = GeneratorConfig(custom={"template_dir": str(tmp_path)})
    emitter = JavaEmitter(config)

    spec = ClassModelBuilder(config).build(article_type)

    assert emitter.render(spec) == "Article: title postDate"

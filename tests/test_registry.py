import pytest

from content_codegen.codegen.core.config import GeneratorConfig
from content_codegen.codegen.core.errors import ConfigError, RegistryError
from content_codegen.codegen.languages.java import JavaEmitter
from content_codegen.codegen.languages.python import PythonEmitter
from content_codegen.codegen.registry import (
    EmitterRegistry,
    get_emitter,
    get_language_info,
    is_language_supported,
    list_supported_languages,
)


def test_builtin_languages() -> None:
    assert list_supported_languages() == ["java", "python"]
    assert is_language_supported("JVM")
    assert is_language_supported("py")
    assert not is_language_supported("go")


def test_get_emitter_by_alias() -> None:
    emitter = get_emitter("py")

    assert isinstance(emitter, PythonEmitter)
    assert emitter.config.language == "python"


def test_get_emitter_with_dict_config() -> None:
    emitter = get_emitter("java", {"package_name": "com.acme"})

    assert isinstance(emitter, JavaEmitter)
    assert emitter.config.package_name == "com.acme"


def test_config_for_other_language_is_rejected() -> None:
    with pytest.raises(ConfigError):
        get_emitter("java", GeneratorConfig(language="python"))


def test_unknown_language() -> None:
    with pytest.raises(RegistryError, match="Available: java, python"):
        get_emitter("cobol")


def test_language_info() -> None:
    info = get_language_info("jvm")

    assert info["name"] == "java"
    assert info["file_extension"] == ".java"
    assert info["class"] == "JavaEmitter"
    assert info["aliases"] == ["jvm"]


def test_register_and_unregister() -> None:
    registry = EmitterRegistry()
    registry.register("java", JavaEmitter, aliases=["jvm"])

    with pytest.raises(RegistryError):
        registry.register("python", PythonEmitter, aliases=["jvm"])
    with pytest.raises(RegistryError):
        registry.register("text", dict)

    registry.unregister("java")
    assert "java" not in registry.list_languages()
    assert not registry.is_supported("jvm")


def test_config_may_name_language_by_alias() -> None:
    emitter = get_emitter("python", GeneratorConfig(language="py", member_case="snake"))

    assert isinstance(emitter, PythonEmitter)

import json
from pathlib import Path

import pytest

from content_codegen.codegen.core.config import ConfigManager, GeneratorConfig
from content_codegen.codegen.core.errors import ConfigError
from content_codegen.codegen.core.naming import NamingCase


def _write_config(tmp_path: Path, data, name: str = "codegen.json") -> Path:
    path = tmp_path / name
    path.write_text(json.dumps(data), encoding="utf-8")
    return path


def test_language_defaults() -> None:
    manager = ConfigManager()

    java = manager.get_config("java")
    python = manager.get_config("python")

    assert java.runtime_package == "com.kenticocloud.delivery"
    assert java.member_naming == NamingCase.CAMEL_CASE
    assert python.language == "python"
    assert python.member_naming == NamingCase.SNAKE_CASE
    assert python.type_naming == NamingCase.PASCAL_CASE


def test_file_then_overrides(tmp_path: Path) -> None:
    path = _write_config(
        tmp_path,
        {
            "package_name": "com.acme.models",
            "output_dir": "build/generated",
            "type_overrides": {"custom": "string"},
            "indent_size": 2,
        },
    )

    config = ConfigManager().get_config(
        "java", {"package_name": "com.acme.override", "runtime_package": None}, path
    )

    assert config.package_name == "com.acme.override"
    assert config.output_dir == "build/generated"
    assert config.runtime_package == "com.kenticocloud.delivery"
    assert config.type_overrides == {"custom": "string"}
    assert config.custom == {"indent_size": 2}


def test_config_file_can_choose_language(tmp_path: Path) -> None:
    path = _write_config(tmp_path, {"language": "Python"})

    config = ConfigManager().get_config(config_file=path)

    assert config.language == "python"
    assert config.member_case == "snake"


@pytest.mark.parametrize(
    "name, content, message",
    [
        ("missing.json", None, "not found"),
        ("codegen.yaml", "language: java", "must be JSON"),
        ("broken.json", "{not json", "Invalid JSON"),
        ("list.json", "[1, 2]", "JSON object"),
    ],
)
def test_invalid_config_files(tmp_path: Path, name, content, message) -> None:
    path = tmp_path / name
    if content is not None:
        path.write_text(content, encoding="utf-8")

    with pytest.raises(ConfigError, match=message):
        ConfigManager().get_config("java", config_file=path)


def test_save_and_reload(tmp_path: Path) -> None:
    manager = ConfigManager()
    config = GeneratorConfig(package_name="com.acme", custom={"header": "x"})
    path = tmp_path / "saved.json"

    manager.save_config(config, path)

    reloaded = manager.get_config("java", config_file=path)
    assert reloaded == config


def test_invalid_naming_case_raises() -> None:
    with pytest.raises(ConfigError, match="member_case"):
        GeneratorConfig(member_case="kebab").member_naming


def test_validate_config() -> None:
    manager = ConfigManager()
    config = GeneratorConfig(
        member_case="kebab",
        package_name="com.acme.1models",
        type_overrides={"custom": "list:Widget"},
    )

    warnings = manager.validate_config(config)

    assert "Invalid member_case: kebab" in warnings
    assert "Invalid package name: com.acme.1models" in warnings
    assert any(w.startswith("Invalid type override for 'custom'") for w in warnings)
    assert manager.validate_config(GeneratorConfig()) == []

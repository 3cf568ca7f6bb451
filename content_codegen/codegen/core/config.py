"""
Generator settings.

Settings come from three layers, later ones winning: per-language
defaults, an optional JSON file, and explicit overrides (CLI flags or
keyword arguments).
"""

import json
from pathlib import Path
from typing import Dict, Any, List, Optional, Union
from dataclasses import dataclass, field, fields, asdict

from .errors import ConfigError
from .naming import NamingCase
from .types import parse_descriptor


DEFAULT_DOCUMENTATION = (
    "This code was generated by the content-codegen tool",
    "",
    "Changes to this file may cause incorrect behavior and will be lost if the code is regenerated.",
    "For further modifications of the class, create a separate file and extend this class.",
)

LANGUAGE_DEFAULTS: Dict[str, Dict[str, Any]] = {
    "java": {
        "package_name": "com.example.models",
        "runtime_package": "com.kenticocloud.delivery",
        "member_case": "camel",
        "type_case": "pascal",
    },
    "python": {
        "package_name": "models",
        "runtime_package": "kontent_delivery",
        "member_case": "snake",
        "type_case": "pascal",
    },
}


@dataclass
class GeneratorConfig:
    """Settings shared by the class model builder and the emitters."""

    language: str = "java"
    package_name: str = "com.example.models"
    output_dir: Optional[str] = None

    # Namespace of the delivery runtime (Option, Asset, ContentItem, ...)
    runtime_package: str = "com.kenticocloud.delivery"

    member_case: str = "camel"  # camel, snake or pascal
    type_case: str = "pascal"

    add_comments: bool = True
    documentation: List[str] = field(default_factory=lambda: list(DEFAULT_DOCUMENTATION))

    # {type_tag: "string" | "float" | "datetime" | "list:Asset" | "ref:ContentItem"}
    type_overrides: Dict[str, str] = field(default_factory=dict)

    # Anything else from the config file, e.g. template_dir
    custom: Dict[str, Any] = field(default_factory=dict)

    @property
    def member_naming(self) -> NamingCase:
        return _naming_case(self.member_case, "member_case")

    @property
    def type_naming(self) -> NamingCase:
        return _naming_case(self.type_case, "type_case")


def _naming_case(value: str, setting: str) -> NamingCase:
    try:
        return NamingCase(value)
    except ValueError:
        raise ConfigError(f"Invalid {setting}: {value}")


class ConfigManager:
    """Builds GeneratorConfig objects from defaults, files and overrides."""

    def __init__(self, defaults: Optional[Dict[str, Dict[str, Any]]] = None):
        self.defaults = {
            language: dict(values)
            for language, values in (defaults or LANGUAGE_DEFAULTS).items()
        }

    def get_config(
        self,
        language: str = "java",
        custom_config: Optional[Dict[str, Any]] = None,
        config_file: Optional[Union[str, Path]] = None,
    ) -> GeneratorConfig:
        """
        Merge the settings layers into one configuration.

        The target language is taken from the overrides, then the file, then
        the ``language`` argument, and selects the defaults layer. ``None``
        override values are ignored so unset CLI flags do not mask the file.

        Raises:
            ConfigError: If the config file cannot be used
        """
        from_file = self._load_config_file(config_file) if config_file else {}
        overrides = {k: v for k, v in (custom_config or {}).items() if v is not None}

        language = (overrides.get("language") or from_file.get("language") or language).lower()

        merged: Dict[str, Any] = {}
        merged.update(self.defaults.get(language, {}))
        merged.update(from_file)
        merged.update(overrides)
        merged["language"] = language

        return self._dict_to_config(merged)

    def _load_config_file(self, config_path: Union[str, Path]) -> Dict[str, Any]:
        path = Path(config_path)

        if not path.exists():
            raise ConfigError(f"Configuration file not found: {path}")
        if path.suffix.lower() != ".json":
            raise ConfigError(f"Configuration file must be JSON: {path}")

        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON in configuration file {path}: {e}") from e
        except OSError as e:
            raise ConfigError(f"Cannot read configuration file {path}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Configuration file must contain a JSON object: {path}")
        return data

    def _dict_to_config(self, values: Dict[str, Any]) -> GeneratorConfig:
        known = {f.name for f in fields(GeneratorConfig)}
        kwargs = {key: value for key, value in values.items() if key in known}
        extra = {key: value for key, value in values.items() if key not in known}

        # Unknown keys are kept for emitters in ``custom``
        if extra:
            kwargs["custom"] = {**kwargs.get("custom", {}), **extra}

        return GeneratorConfig(**kwargs)

    def save_config(self, config: GeneratorConfig, output_path: Union[str, Path]):
        """Write a configuration as a JSON file that get_config can read back."""
        path = Path(output_path)
        data = asdict(config)
        data.update(data.pop("custom"))

        try:
            path.write_text(json.dumps(data, indent=2, ensure_ascii=False), encoding="utf-8")
        except OSError as e:
            raise ConfigError(f"Failed to save configuration to {path}: {e}") from e

    def validate_config(self, config: GeneratorConfig) -> List[str]:
        """
        Check a configuration for problems the builder would trip over.

        Returns:
            Human-readable warnings, empty when the configuration is fine
        """
        warnings = []

        valid_cases = {case.value for case in NamingCase}
        for setting in ("member_case", "type_case"):
            value = getattr(config, setting)
            if value not in valid_cases:
                warnings.append(f"Invalid {setting}: {value}")

        if not config.package_name:
            warnings.append("Empty package_name, classes will be generated in the root")
        elif not all(part.isidentifier() for part in config.package_name.split(".")):
            warnings.append(f"Invalid package name: {config.package_name}")

        for tag, text in config.type_overrides.items():
            try:
                parse_descriptor(text)
            except (AttributeError, ValueError) as e:
                warnings.append(f"Invalid type override for '{tag}': {e}")

        return warnings


_config_manager: Optional[ConfigManager] = None


def get_config_manager() -> ConfigManager:
    global _config_manager
    if _config_manager is None:
        _config_manager = ConfigManager()
    return _config_manager


def load_config(
    language: str = "java",
    custom_config: Optional[Dict[str, Any]] = None,
    config_file: Optional[Union[str, Path]] = None,
) -> GeneratorConfig:
    """Merged configuration from the global ConfigManager."""
    return get_config_manager().get_config(language, custom_config, config_file)

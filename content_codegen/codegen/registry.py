"""
Registry of target languages.

Maps language names and their aliases to emitter classes and builds
configured emitters for the CLI and the package helpers.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Type, Union

from .core.config import GeneratorConfig, load_config
from .core.errors import ConfigError, RegistryError
from .core.generator import SourceEmitter

ConfigSource = Union[GeneratorConfig, Dict[str, Any], str, Path, None]


@dataclass(frozen=True)
class _Registration:
    emitter_class: Type[SourceEmitter]
    aliases: Tuple[str, ...] = ()


class EmitterRegistry:
    """Language name (or alias) to emitter class lookup."""

    def __init__(self):
        self._languages: Dict[str, _Registration] = {}

    def _owner_of(self, name: str) -> Optional[str]:
        key = name.lower()
        if key in self._languages:
            return key
        for language, registration in self._languages.items():
            if key in registration.aliases:
                return language
        return None

    def register(
        self,
        language: str,
        emitter_class: Type[SourceEmitter],
        aliases: Optional[List[str]] = None,
        replace: bool = False,
    ):
        """
        Register an emitter class under a language name.

        An existing registration is kept unless ``replace`` is set.

        Raises:
            RegistryError: If the class is not a SourceEmitter or an alias
                already belongs to another language
        """
        if not (isinstance(emitter_class, type) and issubclass(emitter_class, SourceEmitter)):
            raise RegistryError(f"{emitter_class!r} is not a SourceEmitter subclass")

        key = language.lower()
        if key in self._languages and not replace:
            return

        alias_keys = tuple(
            dict.fromkeys(a.lower() for a in aliases or [] if a.lower() != key)
        )
        for alias in alias_keys:
            owner = self._owner_of(alias)
            if owner is not None and owner != key:
                raise RegistryError(f"Alias '{alias}' is already used by '{owner}'")

        self._languages[key] = _Registration(emitter_class, alias_keys)

    def unregister(self, language: str):
        self._languages.pop(language.lower(), None)

    def resolve(self, language: str) -> str:
        """
        Primary name for a language name or alias.

        Raises:
            RegistryError: If nothing is registered under that name
        """
        owner = self._owner_of(language)
        if owner is None:
            raise RegistryError(
                f"No emitter registered for language: {language}. "
                f"Available: {', '.join(self.list_languages())}"
            )
        return owner

    def create_emitter(self, language: str, config: ConfigSource = None) -> SourceEmitter:
        """
        Instantiate the emitter for a language.

        Args:
            language: Language name or alias
            config: A GeneratorConfig, a dict of overrides, a JSON config
                file path, or None for the language defaults

        Raises:
            RegistryError: If the language is unknown or config has a bad type
            ConfigError: If the config cannot be loaded or targets another language
        """
        key = self.resolve(language)

        if isinstance(config, GeneratorConfig):
            final_config = config
        elif isinstance(config, dict):
            final_config = load_config(key, custom_config=config)
        elif isinstance(config, (str, Path)):
            final_config = load_config(key, config_file=config)
        elif config is None:
            final_config = load_config(key)
        else:
            raise RegistryError(f"Invalid config type: {type(config).__name__}")

        if self._owner_of(final_config.language) != key:
            raise ConfigError(
                f"Configuration is for '{final_config.language}', not '{key}'"
            )
        return self._languages[key].emitter_class(final_config)

    def list_languages(self) -> List[str]:
        return sorted(self._languages)

    def get_aliases_for_language(self, language: str) -> List[str]:
        registration = self._languages.get(language.lower())
        return sorted(registration.aliases) if registration else []

    def is_supported(self, language: str) -> bool:
        return self._owner_of(language) is not None

    def get_language_info(self, language: str) -> Dict[str, Any]:
        """Describe a language using its default configuration."""
        emitter = self.create_emitter(language)
        return {
            "name": emitter.language_name,
            "class": type(emitter).__name__,
            "file_extension": emitter.file_extension,
            "aliases": self.get_aliases_for_language(emitter.language_name),
            "package_name": emitter.config.package_name,
            "runtime_package": emitter.config.runtime_package,
        }


_global_registry: Optional[EmitterRegistry] = None


def get_registry() -> EmitterRegistry:
    """Global registry with the built-in emitters, created on first use."""
    global _global_registry
    if _global_registry is None:
        _global_registry = EmitterRegistry()
        _register_builtin_emitters(_global_registry)
    return _global_registry


def _register_builtin_emitters(registry: EmitterRegistry):
    from .languages.java import JavaEmitter
    from .languages.python import PythonEmitter

    registry.register("java", JavaEmitter, aliases=["jvm"])
    registry.register("python", PythonEmitter, aliases=["py"])


def register_emitter(
    language: str,
    emitter_class: Type[SourceEmitter],
    aliases: Optional[List[str]] = None,
):
    get_registry().register(language, emitter_class, aliases)


def get_emitter(language: str, config: ConfigSource = None) -> SourceEmitter:
    """Configured emitter for a language from the global registry."""
    return get_registry().create_emitter(language, config)


def list_supported_languages() -> List[str]:
    return get_registry().list_languages()


def is_language_supported(language: str) -> bool:
    return get_registry().is_supported(language)


def get_language_info(language: str) -> Dict[str, Any]:
    return get_registry().get_language_info(language)

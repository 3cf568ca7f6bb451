"""
Core code generation components.

Provides the schema model, type table, naming rules and class model used
by all language emitters.
"""

from .errors import (
    GeneratorError,
    ConfigError,
    SchemaProviderError,
    SchemaError,
    ModelError,
    EmissionError,
    RegistryError,
    TemplateError,
)
from .schema import Element, ContentType, parse_content_types
from .types import (
    ScalarKind,
    DomainType,
    Scalar,
    ListOf,
    Reference,
    TypeDescriptor,
    TYPE_TABLE,
    TypeMapper,
    map_type,
    parse_descriptor,
)
from .naming import (
    NameSanitizer,
    NamingCase,
    NamingError,
    to_lower_camel,
    to_upper_camel,
)
from .model import AccessorKind, AccessorSpec, ClassModelBuilder, ClassSpec, FieldSpec
from .config import GeneratorConfig, ConfigManager, load_config
from .templates import TemplateEngine
from .generator import (
    SourceEmitter,
    GenerationPipeline,
    GenerationResult,
    check_output_directory,
    prepare_output_directory,
    generate_all,
    write_all,
)

__all__ = [
    # Errors
    "GeneratorError",
    "ConfigError",
    "SchemaProviderError",
    "SchemaError",
    "ModelError",
    "EmissionError",
    "RegistryError",
    "TemplateError",
    # Schema
    "Element",
    "ContentType",
    "parse_content_types",
    # Type table
    "ScalarKind",
    "DomainType",
    "Scalar",
    "ListOf",
    "Reference",
    "TypeDescriptor",
    "TYPE_TABLE",
    "TypeMapper",
    "map_type",
    "parse_descriptor",
    # Naming utilities
    "NameSanitizer",
    "NamingCase",
    "NamingError",
    "to_lower_camel",
    "to_upper_camel",
    # Class model
    "AccessorKind",
    "AccessorSpec",
    "ClassModelBuilder",
    "ClassSpec",
    "FieldSpec",
    # Configuration
    "GeneratorConfig",
    "ConfigManager",
    "load_config",
    # Templates
    "TemplateEngine",
    # Driver
    "SourceEmitter",
    "GenerationPipeline",
    "GenerationResult",
    "check_output_directory",
    "prepare_output_directory",
    "generate_all",
    "write_all",
]

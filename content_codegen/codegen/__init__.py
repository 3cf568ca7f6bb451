"""
Content model code generation.

Turns content type schemas into class specifications and renders them as
source files in the supported target languages.
"""

from .registry import (
    EmitterRegistry,
    get_emitter,
    get_language_info,
    is_language_supported,
    list_supported_languages,
    register_emitter,
)
from .core import (
    ClassModelBuilder,
    ClassSpec,
    ContentType,
    Element,
    FieldSpec,
    AccessorSpec,
    GenerationPipeline,
    GenerationResult,
    GeneratorConfig,
    GeneratorError,
    ConfigError,
    EmissionError,
    ModelError,
    SchemaError,
    SchemaProviderError,
    RegistryError,
    SourceEmitter,
    TypeMapper,
    generate_all,
    load_config,
    map_type,
    prepare_output_directory,
    write_all,
)


# Convenience functions
def generate_sources(content_types, language="java", config=None, on_unsupported=None):
    """
    Build class specifications for a list of content types.

    Args:
        content_types: ContentType objects in the order to generate
        language: Target language name, decides naming rules
        config: GeneratorConfig, dict of overrides or config file path
        on_unsupported: Optional hook called for each skipped element

    Returns:
        List of ClassSpec, one per content type
    """
    emitter = get_emitter(language, config)
    builder = emitter.create_builder(on_unsupported=on_unsupported)
    return generate_all(content_types, builder)


def render_sources(content_types, language="java", config=None):
    """
    Render content types to source code without writing files.

    Returns:
        Dict mapping class name to rendered source
    """
    emitter = get_emitter(language, config)
    specs = generate_all(content_types, emitter.create_builder())
    return {spec.name: emitter.format_code(emitter.render(spec)) for spec in specs}


__all__ = [
    "EmitterRegistry",
    "get_emitter",
    "get_language_info",
    "is_language_supported",
    "list_supported_languages",
    "register_emitter",
    "ClassModelBuilder",
    "ClassSpec",
    "ContentType",
    "Element",
    "FieldSpec",
    "AccessorSpec",
    "GenerationPipeline",
    "GenerationResult",
    "GeneratorConfig",
    "GeneratorError",
    "ConfigError",
    "EmissionError",
    "ModelError",
    "SchemaError",
    "SchemaProviderError",
    "RegistryError",
    "SourceEmitter",
    "TypeMapper",
    "generate_all",
    "load_config",
    "map_type",
    "prepare_output_directory",
    "write_all",
    "generate_sources",
    "render_sources",
]

"""
Content model code generator.

Generates model classes for a headless content delivery API from its
content type definitions.
"""

__version__ = "0.1.0"

from .codegen import (
    ClassModelBuilder,
    ClassSpec,
    ContentType,
    Element,
    GenerationPipeline,
    GeneratorConfig,
    GeneratorError,
    generate_sources,
    get_emitter,
    load_config,
    render_sources,
)
from .provider import DeliveryClient, FileSchemaProvider, load_content_types

__all__ = [
    "__version__",
    "ClassModelBuilder",
    "ClassSpec",
    "ContentType",
    "Element",
    "GenerationPipeline",
    "GeneratorConfig",
    "GeneratorError",
    "generate_sources",
    "get_emitter",
    "load_config",
    "render_sources",
    "DeliveryClient",
    "FileSchemaProvider",
    "load_content_types",
]

"""
Generation driver and the source emitter interface.

The driver maps content types to class specifications and hands each
specification, in order, to a language emitter that renders and writes it.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence, Union

from ...logging_config import get_logger
from .config import GeneratorConfig, load_config
from .errors import ConfigError, EmissionError, GeneratorError, ModelError
from .model import ClassModelBuilder, ClassSpec
from .schema import ContentType, Element
from .templates import TemplateEngine
from .types import TypeMapper

logger = get_logger(__name__)


class SourceEmitter(ABC):
    """Abstract base class for language emitters."""

    # Names the target language cannot use as identifiers
    reserved_words: frozenset = frozenset()

    def __init__(self, config: Optional[GeneratorConfig] = None):
        """Initialize emitter with optional configuration."""
        self.config = config or load_config(self.language_name)
        self._template_engine = None

    @property
    @abstractmethod
    def language_name(self) -> str:
        """Return the name of the target language (e.g., 'java', 'python')."""
        pass

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Return the file extension for generated files (e.g., '.java')."""
        pass

    @abstractmethod
    def get_templates(self) -> Dict[str, str]:
        """Return the in-memory templates used by this emitter."""
        pass

    @abstractmethod
    def render(self, spec: ClassSpec) -> str:
        """
        Render a class specification as source code.

        Args:
            spec: Class to render

        Returns:
            Complete file contents
        """
        pass

    @abstractmethod
    def path_for(self, spec: ClassSpec, target_directory: Path) -> Path:
        """Return the file a class specification is written to."""
        pass

    @property
    def template_engine(self) -> TemplateEngine:
        """Get the template engine for this emitter."""
        if self._template_engine is None:
            self._template_engine = TemplateEngine(
                self.get_templates(), self.config.custom.get("template_dir")
            )
        return self._template_engine

    def render_template(self, template_name: str, context: Dict[str, Any]) -> str:
        return self.template_engine.render_template(template_name, context)

    def write(self, spec: ClassSpec, target_directory: Union[str, Path]) -> Path:
        """
        Render a class specification and write it below target_directory.

        Raises:
            OSError: If the file cannot be written
        """
        path = self.path_for(spec, Path(target_directory))
        code = self.format_code(self.render(spec))
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(code, encoding="utf-8")
        logger.info("Wrote %s", path)
        return path

    def format_code(self, code: str) -> str:
        """
        Normalize whitespace in generated code.

        Trailing whitespace is stripped, runs of more than two blank lines
        are collapsed and the file ends with exactly one newline.
        """
        lines = code.split("\n")
        formatted_lines = []
        blank_count = 0

        for line in lines:
            stripped = line.rstrip()
            if not stripped:
                blank_count += 1
                if blank_count <= 2:  # Allow max 2 consecutive blank lines
                    formatted_lines.append("")
            else:
                blank_count = 0
                formatted_lines.append(stripped)

        return "\n".join(formatted_lines).strip("\n") + "\n"

    def create_builder(self, on_unsupported=None, type_mapper=None) -> ClassModelBuilder:
        """Class model builder configured for this emitter's naming rules.

        Raises:
            ConfigError: If the naming cases or type overrides are invalid
        """
        return ClassModelBuilder(
            self.config,
            type_mapper=type_mapper,
            on_unsupported=on_unsupported,
            reserved_words=self.reserved_words,
        )


def check_output_directory(path: Union[str, Path]) -> Path:
    """
    Validate an output location without touching the filesystem.

    Raises:
        ConfigError: If the path exists and is not a directory
    """
    path = Path(path)
    if path.exists() and not path.is_dir():
        raise ConfigError(f"{path.absolute()} exists and is not a directory")
    return path


def prepare_output_directory(path: Union[str, Path]) -> Path:
    """
    Make sure the output directory exists, creating it if needed.

    Raises:
        ConfigError: If the path is not a directory or cannot be created
    """
    path = check_output_directory(path)
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise ConfigError(f"Unable to create directory {path.absolute()}: {e}") from e
    logger.debug("Output directory ready: %s", path)
    return path


def generate_all(
    content_types: Iterable[ContentType], builder: ClassModelBuilder
) -> List[ClassSpec]:
    """
    Build one class specification per content type, preserving input order.

    Raises:
        ModelError: If two content types produce the same class name
    """
    specs = []
    seen: Dict[str, str] = {}

    for content_type in content_types:
        spec = builder.build(content_type)
        if spec.name in seen:
            raise ModelError(
                f"Content types '{seen[spec.name]}' and '{content_type.codename}' "
                f"both map to class '{spec.name}'"
            )
        seen[spec.name] = content_type.codename
        specs.append(spec)

    logger.info("Generated %d class specifications", len(specs))
    return specs


def write_all(
    specs: Sequence[ClassSpec],
    emitter: SourceEmitter,
    target_directory: Union[str, Path],
) -> List[Path]:
    """
    Write class specifications in order through the emitter.

    Stops at the first failure. Files written before the failure are kept;
    rerunning the generation overwrites them with identical content.

    Returns:
        Paths of the written files

    Raises:
        EmissionError: If the emitter fails on any specification
    """
    written = []
    for spec in specs:
        try:
            written.append(emitter.write(spec, target_directory))
        except EmissionError:
            raise
        except (OSError, GeneratorError) as e:
            logger.error("Failed to write class %s: %s", spec.name, e)
            raise EmissionError(
                f"Failed to write class {spec.name}: {e}", class_name=spec.name
            ) from e
    return written


@dataclass
class GenerationResult:
    """Container for generation results and metadata."""

    specs: List[ClassSpec] = field(default_factory=list)
    written: List[Path] = field(default_factory=list)
    skipped: List[str] = field(default_factory=list)
    warnings: List[str] = field(default_factory=list)

    @property
    def metadata(self) -> Dict[str, Any]:
        return {
            "class_count": len(self.specs),
            "field_count": sum(len(spec.fields) for spec in self.specs),
            "files_written": len(self.written),
            "skipped_elements": len(self.skipped),
        }


class GenerationPipeline:
    """Fetches content types, builds class specifications and writes them.

    Construction validates the output location, the naming cases and the
    type overrides, so a bad setup fails before any request is sent.
    Nothing is created on disk until :meth:`run`.
    """

    def __init__(
        self,
        provider,
        emitter: SourceEmitter,
        output_dir: Union[str, Path],
        on_unsupported=None,
    ):
        """
        Args:
            provider: Object with a ``fetch_content_types()`` method
            emitter: Language emitter that renders and writes classes
            output_dir: Source root receiving generated files
            on_unsupported: Optional hook called for each skipped element
        """
        self.provider = provider
        self.emitter = emitter
        self.output_dir = check_output_directory(output_dir)
        self._on_unsupported = on_unsupported

        # Raises ConfigError on bad naming cases or type overrides
        self.type_mapper = TypeMapper.from_config(emitter.config.type_overrides)
        emitter.create_builder(type_mapper=self.type_mapper)

    def generate(self, content_types: Iterable[ContentType]) -> GenerationResult:
        """Build class specifications without writing anything."""
        result = GenerationResult()

        def record_unsupported(content_type: ContentType, element: Element):
            result.skipped.append(f"{content_type.codename}.{element.codename}")
            if self._on_unsupported is not None:
                self._on_unsupported(content_type, element)

        builder = self.emitter.create_builder(
            on_unsupported=record_unsupported, type_mapper=self.type_mapper
        )
        result.specs = generate_all(content_types, builder)
        result.warnings = [
            f"Content type {spec.provenance} has no supported elements"
            for spec in result.specs
            if not spec.fields
        ]
        return result

    def run(self) -> GenerationResult:
        """Prepare the output directory, fetch, generate and write."""
        prepare_output_directory(self.output_dir)
        content_types = self.provider.fetch_content_types()
        logger.info("Fetched %d content types", len(content_types))

        result = self.generate(content_types)
        result.written = write_all(result.specs, self.emitter, self.output_dir)
        return result

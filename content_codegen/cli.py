"""
Command-line interface for content model generation.

Fetches content types from the Delivery API (or a saved response) and
writes one model class per content type.
"""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Any

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from . import __version__
from .codegen import (
    GenerationPipeline,
    GenerationResult,
    GeneratorError,
    get_emitter,
    get_language_info,
    list_supported_languages,
    load_config,
)
from .codegen.core.config import get_config_manager
from .codegen.registry import get_registry
from .codegen.core.schema import ContentType, Element
from .logging_config import get_logger, setup_logging
from .provider import DeliveryClient, FileSchemaProvider

logger = get_logger(__name__)

# Initialize rich console
console = Console()


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="content-codegen",
        description="Generate model classes from content type definitions",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  content-codegen --project-id 975bf280-fd91-488c-994c-2f04416e5ee3 \\
      --package-name com.example.models --output src/main/java
  content-codegen --types-file types.json -l python --output src --dry-run
  content-codegen --list-languages
        """.strip(),
    )

    # Input options (mutually exclusive)
    input_group = parser.add_mutually_exclusive_group(required=False)
    input_group.add_argument("--project-id", help="Project id to fetch content types for")
    input_group.add_argument(
        "--types-file", metavar="FILE", help="Saved /types response (JSON)"
    )

    parser.add_argument("--preview-api-key", help="Use the preview API with this key")
    parser.add_argument("--base-url", help="Override the Delivery API endpoint")
    parser.add_argument(
        "--timeout", type=int, default=30, help="Request timeout in seconds (default: 30)"
    )

    # Generation options
    gen_group = parser.add_argument_group("generation")
    gen_group.add_argument(
        "--language", "-l", help="Target language (default: java, or the config file's)"
    )
    gen_group.add_argument(
        "--output", "-o", metavar="DIR", help="Source root for generated files"
    )
    gen_group.add_argument("--config", metavar="FILE", help="JSON configuration file")
    gen_group.add_argument("--package-name", "--package", help="Package for generated classes")
    gen_group.add_argument(
        "--runtime-package", help="Package providing Option, Asset, ContentItem, ..."
    )
    gen_group.add_argument(
        "--no-comments",
        action="store_true",
        help="Don't add documentation comments to generated classes",
    )
    gen_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    gen_group.add_argument(
        "--warn-unsupported",
        action="store_true",
        help="Print a warning for every element with an unsupported type",
    )

    # Informational commands
    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-languages", action="store_true", help="List supported languages and exit"
    )
    info_group.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    info_group.add_argument("--log-file", metavar="FILE", help="Also write the log to a file")
    info_group.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Entry point for the ``content-codegen`` command."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(
        logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file
    )

    try:
        if args.list_languages:
            return _list_languages()

        if not (args.project_id or args.types_file):
            console.print("[red]✗[/red] Input source required (--project-id or --types-file)")
            return 1

        return _generate(args)

    except GeneratorError as e:
        logger.error("Generation failed: %s", e)
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _build_config(args: argparse.Namespace):
    registry = get_registry()
    overrides: dict[str, Any] = {
        "language": registry.resolve(args.language) if args.language else None,
        "package_name": args.package_name,
        "runtime_package": args.runtime_package,
        "output_dir": args.output,
    }
    if args.no_comments:
        overrides["add_comments"] = False

    config = load_config(custom_config=overrides, config_file=args.config)

    # A config file may name the language by alias
    language = registry.resolve(config.language)
    if language != config.language:
        overrides["language"] = language
        config = load_config(custom_config=overrides, config_file=args.config)

    for warning in get_config_manager().validate_config(config):
        console.print(f"[yellow]⚠️ {warning}[/yellow]")
    return config


def _build_provider(args: argparse.Namespace):
    if args.types_file:
        return FileSchemaProvider(args.types_file)
    return DeliveryClient(
        args.project_id,
        base_url=args.base_url,
        preview_api_key=args.preview_api_key,
        timeout=args.timeout,
    )


def _generate(args: argparse.Namespace) -> int:
    config = _build_config(args)
    emitter = get_emitter(config.language, config)

    if not args.dry_run and not config.output_dir:
        console.print("[red]✗[/red] --output is required unless --dry-run is given")
        return 1

    on_unsupported = _warn_unsupported if args.warn_unsupported else None

    # Constructing the pipeline validates the output directory before any request
    pipeline = GenerationPipeline(
        _build_provider(args),
        emitter,
        config.output_dir or ".",
        on_unsupported=on_unsupported,
    )

    if args.dry_run:
        result = pipeline.generate(pipeline.provider.fetch_content_types())
        for spec in result.specs:
            code = emitter.format_code(emitter.render(spec))
            console.print(
                Panel(
                    Syntax(code, emitter.language_name, line_numbers=False),
                    title=f"{spec.name}{emitter.file_extension}",
                    border_style="blue",
                )
            )
    else:
        result = pipeline.run()

    _print_summary(result, dry_run=args.dry_run)
    return 0


def _warn_unsupported(content_type: ContentType, element: Element) -> None:
    console.print(
        f"[yellow]⚠️ Skipped {content_type.codename}.{element.codename}: "
        f"unsupported type '{element.type_tag}'[/yellow]"
    )


def _print_summary(result: GenerationResult, dry_run: bool = False) -> None:
    table = Table(title="📋 Generated Classes", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Class", style="bold green", no_wrap=True)
    table.add_column("Content type", style="cyan")
    table.add_column("Fields", justify="right")
    if not dry_run:
        table.add_column("File", style="dim")

    for index, spec in enumerate(result.specs):
        row = [spec.name, spec.provenance, str(len(spec.fields))]
        if not dry_run:
            row.append(str(result.written[index]) if index < len(result.written) else "")
        table.add_row(*row)

    console.print(table)

    for warning in result.warnings:
        console.print(f"[yellow]⚠️ {warning}[/yellow]")

    metadata = result.metadata
    console.print(
        f"✅ [green]{metadata['class_count']} classes, {metadata['field_count']} fields"
        f"[/green] ({metadata['skipped_elements']} unsupported elements skipped)"
    )


def _list_languages() -> int:
    """List supported languages with details."""
    table = Table(title="📋 Supported Languages", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Language", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Emitter Class", style="dim")
    table.add_column("Aliases", style="blue")
    table.add_column("Default Package")

    for language in list_supported_languages():
        info = get_language_info(language)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(
            f"🔧 {language}",
            info["file_extension"],
            info["class"],
            aliases,
            info["package_name"],
        )

    console.print(table)
    return 0


if __name__ == "__main__":
    sys.exit(main())

"""
Command-line interface for view config generation.

Usage:
  viewconfig-gen schema.json --library MyLib --output-dir generated/
  viewconfig-gen schema.json --library MyLib --stdout
  viewconfig-gen --list-generators
"""

import argparse
import sys
from typing import Optional, Sequence

from rich.console import Console
from rich.table import Table
from rich.syntax import Syntax
from rich import box

from .codegen import (
    GeneratorError,
    RegistryError,
    ConfigError,
    generate_code,
    get_generator,
    get_language_info,
    list_supported_languages,
    load_config,
)
from .codegen.core.config import GeneratorConfig, get_config_manager
from .codegen.core.templates import TemplateError
from .logging_config import get_logger, setup_logging
from .utils import JSONLoaderError, load_json_from_file, write_files

logger = get_logger(__name__)

# Generated code goes to stdout, status and errors to stderr
console = Console()
err_console = Console(stderr=True)


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="viewconfig-gen",
        description="Generate native component view config modules from a component schema",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  viewconfig-gen schema.json --library MyLib --output-dir generated/
  viewconfig-gen schema.json -l MyLib --stdout
  viewconfig-gen --list-generators
        """.strip(),
    )

    parser.add_argument("schema", nargs="?", help="Component schema JSON file")
    parser.add_argument("--library", "-l", help="Library name for the output file")
    parser.add_argument(
        "--output-dir", "-o", help="Directory to write generated files to"
    )
    parser.add_argument(
        "--stdout", action="store_true", help="Print generated code instead of writing files"
    )
    parser.add_argument("--config", help="Configuration file path (JSON)")
    parser.add_argument(
        "--generator",
        "-g",
        default="viewconfig",
        help="Generator to use (default: viewconfig)",
    )

    style_group = parser.add_argument_group("code style")
    style_group.add_argument("--indent-size", type=int, help="Spaces per indent level")
    style_group.add_argument(
        "--no-trailing-comma",
        action="store_true",
        help="Omit trailing commas in multi-line object literals",
    )

    diag_group = parser.add_argument_group("diagnostics")
    diag_group.add_argument(
        "--verbose", "-v", action="store_true", help="Show generation metadata"
    )
    diag_group.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: $VIEWCONFIG_GEN_LOG_LEVEL or WARNING)",
    )
    diag_group.add_argument("--log-file", help="Also write logs to this file")

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--list-generators",
        action="store_true",
        help="List available generators and exit",
    )

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Run the CLI.

    Returns:
        Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging(args.log_level, args.log_file)

    try:
        if args.list_generators:
            return _list_generators()

        if not args.schema:
            raise CLIError("A schema file is required")
        if not args.library:
            raise CLIError("--library is required")
        if not args.stdout and not args.output_dir and not _config_output_dir(args):
            raise CLIError("Either --output-dir or --stdout is required")

        config = _build_config(args)
        return _generate_and_output(args, config)

    except CLIError as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1
    except (JSONLoaderError, ConfigError, RegistryError) as e:
        err_console.print(f"[red]✗ Error:[/red] {e}")
        return 1


def _config_output_dir(args: argparse.Namespace) -> Optional[str]:
    if not args.config:
        return None
    return load_config(args.generator.lower(), config_file=args.config).output_dir


def _build_config(args: argparse.Namespace) -> GeneratorConfig:
    """Merge the config file with command-line overrides."""
    overrides = {}

    if args.output_dir:
        overrides["output_dir"] = args.output_dir
    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.no_trailing_comma:
        overrides["trailing_comma"] = False

    config = load_config(
        args.generator.lower(), custom_config=overrides, config_file=args.config
    )

    for warning in get_config_warnings(config):
        err_console.print(f"[yellow]⚠️  {warning}[/yellow]")

    return config


def get_config_warnings(config: GeneratorConfig) -> list[str]:
    """Non-fatal problems with the merged configuration."""
    return get_config_manager().validate_config(config)


def _list_generators() -> int:
    """List available generators."""
    table = Table(title="📋 Available Generators", box=box.ROUNDED, title_style="bold cyan")

    table.add_column("Generator", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for name in list_supported_languages():
        info = get_language_info(name)
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(f"🔧 {name}", info["file_extension"], info["class"], aliases)

    console.print(table)
    return 0


def _generate_and_output(args: argparse.Namespace, config: GeneratorConfig) -> int:
    """Generate code and write or print it."""
    source, raw_schema = load_json_from_file(args.schema)
    if not isinstance(raw_schema, dict):
        raise JSONLoaderError(f"Schema must be a JSON object: {args.schema}")
    err_console.print(f"Loaded: {source}")
    logger.debug("Generating %s with %s", args.library, args.generator)

    generator = get_generator(args.generator, config)

    try:
        result = generate_code(generator, args.library, raw_schema)
    except (GeneratorError, TemplateError) as e:
        err_console.print(f"[red]✗ Code generation failed:[/red] {e}")
        return 1
    except Exception as e:
        err_console.print(f"[red]✗ Unexpected failure:[/red] {e}")
        return 1

    if args.stdout:
        for code in result.files.values():
            if console.is_terminal:
                console.print(Syntax(code, "javascript", theme="monokai"))
            else:
                console.out(code, end="", highlight=False)
    else:
        try:
            written = write_files(result.files, config.output_dir, generator.file_extension)
        except OSError as e:
            err_console.print(f"[red]✗ Failed to write output:[/red] {e}")
            return 1
        for path in written:
            err_console.print(f"[green]✓[/green] Generated view config saved to [cyan]{path}[/cyan]")

    if args.verbose and result.metadata:
        metadata_table = Table(
            title="📊 Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        metadata_table.add_column("Property", style="bold")
        metadata_table.add_column("Value", style="green")

        for key, value in result.metadata.items():
            metadata_table.add_row(key.replace("_", " ").title(), str(value))

        err_console.print(metadata_table)

    if result.warnings:
        err_console.print("\n[yellow]⚠️  Warnings:[/yellow]")
        for warning in result.warnings:
            err_console.print(f"  [yellow]•[/yellow] {warning}")

    return 0


if __name__ == "__main__":
    sys.exit(main())

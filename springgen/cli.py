"""
Command-line interface for springgen.

Loads a project document, configures the Spring generator and writes the
generated project (or prints it with ``--dry-run``).
"""

from __future__ import annotations

import argparse
from pathlib import Path
from typing import Any, Dict, List, Optional

from rich import box
from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax
from rich.table import Table

from .codegen import (
    ConfigError,
    GenerationResult,
    GeneratorError,
    ProjectError,
    RegistryError,
    __version__,
    generate_code,
    get_config_manager,
    get_generator,
    list_all_language_info,
    load_config,
    load_project,
)
from .logging_config import get_logger, setup_logging
from .utils import ProjectLoaderError, load_project_document

logger = get_logger(__name__)

console = Console()


class CLIError(Exception):
    """Exception raised for CLI-related errors."""

    pass


def create_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="springgen",
        description="Generate Spring Boot code from an API project description",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  springgen project.json --name petstore -o build/petstore
  springgen project.json --name petstore --interface --pkg com.example.server
  springgen --url https://example.com/project.json --name petstore --demo
  springgen project.json --name petstore --dry-run
        """.strip(),
    )

    input_group = parser.add_mutually_exclusive_group()
    input_group.add_argument("file", nargs="?", help="Project document (JSON)")
    input_group.add_argument("--url", help="URL to fetch the project document from")

    parser.add_argument(
        "--output", "-o", default="out", help="Output directory (default: out)"
    )
    parser.add_argument("--config", metavar="FILE", help="JSON configuration file")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    spring_group = parser.add_argument_group("Spring options")
    spring_group.add_argument("--name", help="The name of the spring project")
    spring_group.add_argument(
        "--pkg", help="Package of the generated code (default: the project's package)"
    )
    spring_group.add_argument(
        "--api", action="store_true", help="Also generate API model classes"
    )
    spring_group.add_argument(
        "--interface",
        action="store_true",
        help="Generate interfaces instead of classes",
    )
    spring_group.add_argument(
        "--demo", action="store_true", help="Generate demo (fake) response data"
    )
    spring_group.add_argument(
        "--inc",
        action="store_true",
        help="Incremental: keep the output directory and skip template files",
    )

    style_group = parser.add_argument_group("style")
    style_group.add_argument(
        "--indent-size", type=int, metavar="N", help="Spaces per indentation level"
    )
    style_group.add_argument(
        "--use-tabs", action="store_true", help="Indent with tabs instead of spaces"
    )

    info_group = parser.add_argument_group("information")
    info_group.add_argument(
        "--dry-run",
        action="store_true",
        help="Print generated code instead of writing files",
    )
    info_group.add_argument(
        "--verbose", action="store_true", help="Show generation metadata"
    )
    info_group.add_argument(
        "--list-languages", action="store_true", help="List generators and exit"
    )
    info_group.add_argument(
        "--log-level",
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level (default: WARNING)",
    )
    info_group.add_argument("--log-file", metavar="FILE", help="Also log to FILE")

    return parser


def _build_config_overrides(args: argparse.Namespace) -> Dict[str, Any]:
    """Translate CLI flags into configuration overrides."""
    overrides: Dict[str, Any] = {"custom": {}}
    custom = overrides["custom"]

    if args.name:
        custom["name"] = args.name
    if args.pkg:
        custom["package"] = args.pkg
    if args.api:
        custom["include_api"] = True
    if args.interface:
        custom["use_interface"] = True
    if args.demo:
        custom["use_demo"] = True
    if args.inc:
        custom["incremental"] = True

    if args.indent_size is not None:
        overrides["indent_size"] = args.indent_size
    if args.use_tabs:
        overrides["use_tabs"] = True

    return overrides


def _list_languages() -> int:
    """Print the registered generators."""
    table = Table(title="Supported Generators", box=box.ROUNDED, title_style="bold cyan")
    table.add_column("Generator", style="bold green", no_wrap=True)
    table.add_column("Extension", style="cyan")
    table.add_column("Generator Class", style="dim")
    table.add_column("Aliases", style="blue")

    for name, info in sorted(list_all_language_info().items()):
        aliases = ", ".join(info["aliases"]) if info["aliases"] else "[dim]none[/dim]"
        table.add_row(name, info["file_extension"], info["class"], aliases)

    console.print(table)
    return 0


def _load_input(args: argparse.Namespace):
    if not (args.file or args.url):
        raise CLIError("Input source required (file or --url)")
    try:
        source, document = load_project_document(file_path=args.file, url=args.url)
    except (ProjectLoaderError, FileNotFoundError) as e:
        raise CLIError(f"Failed to load input: {e}") from e
    return source, load_project(document)


def _print_files(result: GenerationResult):
    for generated in result.files:
        console.print(Panel.fit(str(generated.path), border_style="green"))
        console.print(Syntax(generated.content, "java", theme="monokai"))


def _print_report(result: GenerationResult, verbose: bool):
    if verbose and result.metadata:
        table = Table(
            title="Generation Metadata",
            box=box.SIMPLE,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Property", style="bold")
        table.add_column("Value", style="green")
        for key, value in result.metadata.items():
            if isinstance(value, list):
                value = "\n".join(str(v) for v in value)
            table.add_row(key.replace("_", " ").title(), str(value))
        console.print(table)

    if result.warnings:
        console.print("[yellow]Warnings:[/yellow]")
        for warning in result.warnings:
            console.print(f"  [yellow]•[/yellow] {warning}")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the CLI.

    Args:
        argv: Argument list (defaults to ``sys.argv[1:]``)

    Returns:
        Exit code (0 for success, 1 for errors)
    """
    parser = create_parser()
    args = parser.parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    try:
        if args.list_languages:
            return _list_languages()

        # Configuration errors abort before anything is loaded or emitted
        config = load_config(
            "spring",
            custom_config=_build_config_overrides(args),
            config_file=args.config,
        )
        for warning in get_config_manager().validate_config(config):
            logger.warning("%s", warning)
        generator = get_generator("spring", config)

        source, project = _load_input(args)
        logger.info("Generating Spring code for %s", source)

        if args.dry_run:
            result = generate_code(generator, project)
            if not result.success:
                raise GeneratorError(result.error_message)
            _print_files(result)
        else:
            result = generator.process(project, Path(args.output))
            if not result.success:
                raise GeneratorError(result.error_message)
            console.print(
                f"[green]✓[/green] Generated {len(result.files)} source file(s) in "
                f"[cyan]{args.output}[/cyan]"
            )

        _print_report(result, args.verbose)
        return 0

    except ConfigError as e:
        console.print(f"[red]✗ Configuration error:[/red] {e}")
        console.print("[dim]Please check with -h[/dim]")
        return 1
    except (CLIError, ProjectError, RegistryError, GeneratorError) as e:
        console.print(f"[red]✗ Error:[/red] {e}")
        return 1

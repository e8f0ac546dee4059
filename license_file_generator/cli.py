"""CLI entry point for license-file-generator."""

from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, SpinnerColumn, TextColumn

from license_file_generator import __version__
from license_file_generator.config import GeneratorConfig, load_config
from license_file_generator.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from license_file_generator.exceptions import (
    DirectoryNotFoundError,
    LicenseFileGeneratorError,
    OutputError,
)
from license_file_generator.models.license import LicenseReport
from license_file_generator.output.eol import apply_line_ending
from license_file_generator.output.report_json import LicenseJsonFormatter
from license_file_generator.output.report_markdown import LicenseMarkdownFormatter
from license_file_generator.output.report_text import LicenseTextFormatter
from license_file_generator.output.terminal import TerminalFormatter
from license_file_generator.scanner import get_project_licenses, read_appendices

# Module-level console for consistent output
_console = Console()
# Separate console for error output (writes to stderr)
_error_console = Console(stderr=True)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """Python License File Generator - Group dependency licenses for compliance.

    Collects the license of every production dependency of a Python project
    and writes each distinct license once, listing the packages it covers.

    \b
    Examples:
        license-file-generator generate
        license-file-generator generate path/to/project -o THIRD-PARTY-LICENSES.txt
        license-file-generator generate --format markdown -o licenses.md
        license-file-generator list
    """
    pass


@main.command()
@click.argument("project_path", default=".")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "markdown", "json"], case_sensitive=False),
    default="text",
    help="Output format for the license file (default: text).",
)
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False),
    default=None,
    help="Write the license file to this path instead of stdout.",
)
@click.option(
    "--eol",
    type=click.Choice(["lf", "crlf"], case_sensitive=False),
    default=None,
    help="Line ending for the generated file (default: from config, else as-is).",
)
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--pypi",
    "pypi_flag",
    is_flag=True,
    default=False,
    help="Look up missing license types on PyPI.",
)
@click.option(
    "--no-spinner",
    "no_spinner",
    is_flag=True,
    default=False,
    help="Do not show a progress spinner.",
)
def generate(
    project_path: str,
    output_format: str,
    output_path: str | None,
    eol: str | None,
    config_path: str | None,
    pypi_flag: bool,
    no_spinner: bool,
) -> None:
    """Generate a third-party licenses file for a Python project.

    Dependencies that share the same license text are listed together,
    followed by that license text once.

    Exits with code 1 when a dependency has no license information.

    \b
    Examples:
        license-file-generator generate
        license-file-generator generate path/to/project
        license-file-generator generate -o THIRD-PARTY-LICENSES.txt --eol crlf
        license-file-generator generate --format json
        license-file-generator generate --config custom-config.yaml
    """
    format_value = output_format.lower()

    try:
        config = _load_config(config_path, project_path, pypi_flag)

        # Spinner only when stdout does not carry the report
        show_spinner = output_path is not None and not no_spinner
        report = _build_report(project_path, config, show_spinner)

        content = _format_report(report, format_value)
        line_ending = eol.lower() if eol else config.line_ending
        content = apply_line_ending(content, line_ending)

        if output_path:
            _write_output_to_file(content, output_path)
        else:
            click.echo(content, nl=False)

        if report.has_unknown_licenses:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except DirectoryNotFoundError:
        # Already reported by the scanner
        sys.exit(EXIT_ERROR)
    except LicenseFileGeneratorError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


@main.command(name="list")
@click.argument("project_path", default=".")
@click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)
@click.option(
    "--pypi",
    "pypi_flag",
    is_flag=True,
    default=False,
    help="Look up missing license types on PyPI.",
)
@click.option(
    "--no-spinner",
    "no_spinner",
    is_flag=True,
    default=False,
    help="Do not show a progress spinner.",
)
def list_licenses(
    project_path: str,
    config_path: str | None,
    pypi_flag: bool,
    no_spinner: bool,
) -> None:
    """Show a project's dependencies grouped by license.

    Exits with code 1 when a dependency has no license information.

    \b
    Examples:
        license-file-generator list
        license-file-generator list path/to/project
        license-file-generator list --pypi
    """
    try:
        config = _load_config(config_path, project_path, pypi_flag)
        report = _build_report(project_path, config, not no_spinner)

        TerminalFormatter(console=_console).format_report(report)

        if report.has_unknown_licenses:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except DirectoryNotFoundError:
        sys.exit(EXIT_ERROR)
    except LicenseFileGeneratorError as e:
        _display_error(e)
        sys.exit(EXIT_ERROR)


def _load_config(
    config_path: str | None, project_path: str, pypi_flag: bool
) -> GeneratorConfig:
    """Load configuration and apply command line overrides.

    Raises:
        ConfigurationError: If the configuration file is invalid.
    """
    config = load_config(Path(project_path), config_path)
    if pypi_flag:
        config = config.model_copy(update={"pypi_fallback": True})
    return config


def _build_report(
    project_path: str, config: GeneratorConfig, show_spinner: bool
) -> LicenseReport:
    """Resolve and group licenses, then read the files to append.

    Args:
        project_path: Project directory to scan.
        config: Configuration for exclusions, replacements and appendices.
        show_spinner: Whether to show a progress spinner.

    Returns:
        LicenseReport with groups and appendices.
    """

    async def run() -> LicenseReport:
        groups = await get_project_licenses(project_path, config)
        appendices = await read_appendices(config.append or [], Path(project_path))
        return LicenseReport(groups=groups, appendices=appendices)

    if not show_spinner:
        return asyncio.run(run())

    with Progress(
        SpinnerColumn(),
        TextColumn("[progress.description]{task.description}"),
        console=_console,
        transient=True,
    ) as progress:
        progress.add_task("Resolving licenses...", total=None)
        return asyncio.run(run())


def _format_report(report: LicenseReport, format_type: str) -> str:
    """Format a report as text, markdown or json."""
    if format_type == "json":
        return LicenseJsonFormatter().format_report(report)
    if format_type == "markdown":
        return LicenseMarkdownFormatter().format_report(report)
    return LicenseTextFormatter().format_report(report)


def _write_output_to_file(content: str, path: str) -> None:
    """Write report content to file.

    Line endings in content are written unchanged.

    Args:
        content: The report content to write.
        path: The file path to write to.

    Raises:
        OutputError: If file cannot be written.
    """
    file_path = Path(path)

    try:
        if file_path.exists():
            _console.print(
                f"[yellow]Warning: Overwriting existing file: {escape(path)}[/yellow]"
            )

        file_path.write_text(content, encoding="utf-8", newline="")
        # User read/write, group/other read
        file_path.chmod(0o644)
    except OSError as e:
        raise OutputError(f"Cannot write to file '{path}': {e}") from e

    _console.print(f"[green]License file written to {escape(path)}[/green]")


def _display_error(error: LicenseFileGeneratorError) -> None:
    """Display error message on stderr.

    Args:
        error: The exception that occurred.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"
    _error_console.print(f"[red bold]{escape(message)}[/red bold]")


if __name__ == "__main__":
    main()

"""CLI entry point for pkgmeta."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from pkgmeta import __version__
from pkgmeta.config import DEFAULT_WORK_DIR, load_config, resolve_rule_kind
from pkgmeta.constants import EXIT_ERROR, EXIT_ISSUES, EXIT_SUCCESS
from pkgmeta.exceptions import PkgMetaError
from pkgmeta.generators import NuspecGenerator
from pkgmeta.models.chocolatey import ChocolateyMetadata
from pkgmeta.models.package import PackageData
from pkgmeta.models.rules import RuleKind, ValidationResult
from pkgmeta.output import ValidationFormatter, ValidationJsonFormatter
from pkgmeta.parsers import dump_yaml, read_file, write_file
from pkgmeta.rules import validate_metadata

# Module-level console for consistent output
_console = Console()
# Separate console for errors and log records (writes to stderr)
_error_console = Console(stderr=True)

logger = logging.getLogger(__name__)


def _setup_logging(verbose: bool) -> None:
    """Configure the pkgmeta loggers based on the verbosity flag."""
    package_logger = logging.getLogger("pkgmeta")
    if not any(isinstance(h, RichHandler) for h in package_logger.handlers):
        package_logger.addHandler(
            RichHandler(console=_error_console, show_time=False, show_path=False)
        )
    package_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


# Options shared by several commands
_package_file_argument = click.argument(
    "package_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
_verbose_option = click.option(
    "--verbose",
    "-v",
    "verbose_flag",
    is_flag=True,
    default=False,
    help="Show debug logging on stderr.",
)
_config_option = click.option(
    "--config",
    "-c",
    "config_path",
    type=click.Path(exists=True, dir_okay=False),
    default=None,
    help="Path to configuration file.",
)


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """pkgmeta - Validate package metadata and generate package files.

    \b
    Examples:
        pkgmeta validate package.toml
        pkgmeta validate package.toml --rule community
        pkgmeta generate package.toml --output build
        pkgmeta minimize package.toml --output package.yaml
    """
    pass


@main.command()
@_package_file_argument
@click.option(
    "--rule",
    "rule_option",
    type=click.Choice([kind.value for kind in RuleKind], case_sensitive=False),
    default=None,
    help="Rules the metadata should conform to (default: core). "
    "Can also be set with PKGMETA_RULE.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["terminal", "json"], case_sensitive=False),
    default="terminal",
    help="Output format for validation results (default: terminal).",
)
@_config_option
@_verbose_option
def validate(
    package_file: Path,
    rule_option: str | None,
    output_format: str,
    config_path: str | None,
    verbose_flag: bool,
) -> None:
    """Validate the metadata of a package file.

    The `core` rules only report what would prevent a package from being
    created, `community` also reports best practices for community
    repositories. Exits with 1 when requirements are not met.

    \b
    Examples:
        pkgmeta validate package.toml
        pkgmeta validate package.yaml --rule community --format json
    """
    _setup_logging(verbose_flag)
    format_value = output_format.lower()

    try:
        config = load_config(config_path)
        rule_kind = resolve_rule_kind(rule_option, config)

        logger.info("Loading metadata file from '%s'", package_file)
        data = read_file(package_file)
        result = validate_metadata(data.metadata, rule_kind)
        _display_result(result, format_value)

        if result.has_requirements:
            sys.exit(EXIT_ISSUES)
        sys.exit(EXIT_SUCCESS)

    except PkgMetaError as e:
        _display_error(e, format_value)
        sys.exit(EXIT_ERROR)


@main.command()
@_package_file_argument
@click.option(
    "--output",
    "-o",
    "work_dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Directory to create the package in (default: {DEFAULT_WORK_DIR}).",
)
@_config_option
@_verbose_option
def generate(
    package_file: Path,
    work_dir: Path | None,
    config_path: str | None,
    verbose_flag: bool,
) -> None:
    """Generate the Chocolatey nuspec file of a package.

    Values that are not set in the chocolatey section are inherited from
    the generic metadata. Nothing is generated when the metadata does not
    pass the core rules.

    \b
    Examples:
        pkgmeta generate package.toml
        pkgmeta generate package.toml --output build
    """
    _setup_logging(verbose_flag)

    try:
        config = load_config(config_path)
        if work_dir is None:
            work_dir = Path(config.work_dir or DEFAULT_WORK_DIR)

        data = read_file(package_file)
        result = validate_metadata(data.metadata, RuleKind.CORE)
        if result.has_requirements:
            _error_console.print(
                "[red bold]The package data does not meet the core "
                "requirements, no package was generated.[/red bold]"
            )
            ValidationFormatter(console=_error_console).format_validation_result(
                result
            )
            sys.exit(EXIT_ISSUES)

        chocolatey = data.metadata.chocolatey_or_default()
        chocolatey.update_from(data.metadata)

        nuspec_path = NuspecGenerator(chocolatey).generate(work_dir)
        _console.print(f"[green]Package created at {nuspec_path}[/green]")
        sys.exit(EXIT_SUCCESS)

    except PkgMetaError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)


@main.command()
@_package_file_argument
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the package data to file instead of stdout.",
)
@_verbose_option
def minimize(
    package_file: Path,
    output_path: Path | None,
    verbose_flag: bool,
) -> None:
    """Remove chocolatey values that are inherited from the generic metadata.

    The result is written as YAML.

    \b
    Examples:
        pkgmeta minimize package.toml
        pkgmeta minimize package.toml --output package.yaml
    """
    _setup_logging(verbose_flag)

    try:
        data = read_file(package_file)
        _minimize(data)

        if output_path is None:
            click.echo(dump_yaml(data), nl=False)
        else:
            write_file(data, output_path)
            _console.print(f"[green]Package data written to {output_path}[/green]")
        sys.exit(EXIT_SUCCESS)

    except PkgMetaError as e:
        _display_error(e, "terminal")
        sys.exit(EXIT_ERROR)


def _minimize(data: PackageData) -> None:
    """Prune the chocolatey record of values inherited from the metadata."""
    metadata = data.metadata
    if not metadata.has_chocolatey():
        logger.info("No chocolatey metadata found, nothing to minimize")
        return

    chocolatey = metadata.chocolatey_or_default()
    chocolatey.update_from(metadata)
    chocolatey.reset_same(metadata)

    # Only values differing from the defaults count as set afterwards
    metadata.set_chocolatey(
        ChocolateyMetadata.model_validate(
            chocolatey.model_dump(mode="json", exclude_defaults=True)
        )
    )


def _display_result(result: ValidationResult, format_type: str) -> None:
    """Display a validation result in the requested format."""
    if format_type == "json":
        click.echo(ValidationJsonFormatter().format_validation_result(result))
    else:
        ValidationFormatter(console=_console).format_validation_result(result)


def _display_error(error: PkgMetaError, format_type: str) -> None:
    """Display error message to user.

    All errors are written to stderr for consistent CI/CD behavior.

    Args:
        error: The exception that occurred.
        format_type: Output format type for styling.
    """
    error_type = type(error).__name__
    message = f"Error: {error_type}: {error}"

    if format_type == "terminal":
        _error_console.print(f"[red bold]{escape(message)}[/red bold]")
    else:
        click.echo(message, err=True)


if __name__ == "__main__":
    main()

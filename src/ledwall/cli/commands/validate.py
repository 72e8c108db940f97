"""Validate command for checking project files.

Checks a JSON project file for syntax and schema errors, then runs the
rigging advisories (motor loads, truss length, installation mode).
"""

from pathlib import Path
from typing import Annotated

import typer

from ledwall.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation":
        for detail in error.details:
            path = detail.get("path", "unknown")
            message = detail.get("message", "Unknown error")
            typer.echo(f"  {path}: {message}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  {error.path}: {error.message}", err=True)
            if error.value is not None:
                typer.echo(f"    Value: {error.value!r}", err=True)
        typer.echo()

    if result.warnings:
        typer.echo("Warnings:")
        for warning in result.warnings:
            typer.echo(f"  {warning.path}: {warning.message}")
            if warning.suggestion:
                typer.echo(f"    Suggestion: {warning.suggestion}")
        typer.echo()

    if result.errors:
        typer.echo(
            f"Validation failed: {len(result.errors)} error(s), "
            f"{len(result.warnings)} warning(s)",
            err=True,
        )
    elif result.warnings:
        typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
    else:
        typer.echo("Validation passed. Configuration is valid.")


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON project file to validate"),
    ],
) -> None:
    """Validate an LED wall project file.

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        ledwall validate main-stage.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)

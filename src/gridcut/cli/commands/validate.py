"""`gridcut validate`: check a layout configuration file without cutting.

Reports schema problems, input values the layout command would reject,
and layouts that are valid but will not place a single piece.
"""

from pathlib import Path
from typing import Annotated

import typer

from gridcut.application.config import (
    ConfigError,
    LayoutConfiguration,
    ValidationResult,
    config_to_input,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Layout configuration (JSON) to check"),
    ],
) -> None:
    """Validate a layout configuration file.

    Exit codes:
        0 - configuration is usable as is
        1 - configuration has errors
        2 - configuration is usable but will waste the sheet

    Example:
        gridcut validate flyers.json
    """
    typer.echo(f"Checking {config_file}")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)

    _echo_resolved_input(config)
    result = validate_config(config)
    _report(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Print a ConfigError raised while loading a file to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            typer.echo(
                f"    line {detail.get('line', '?')}, column "
                f"{detail.get('column', '?')}: {detail.get('message', '')}",
                err=True,
            )
    elif error.error_type == "validation":
        for detail in error.details:
            typer.echo(f"  {detail.get('path') or '(root)'}: {detail['message']}", err=True)
            if detail.get("value") is not None and not isinstance(detail["value"], dict):
                typer.echo(f"    got {detail['value']!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)
    typer.echo("Validation failed.", err=True)


def _echo_resolved_input(config: LayoutConfiguration) -> None:
    layout_input = config_to_input(config)
    unit = config.unit.value
    typer.echo(
        f"  sheet {layout_input.sheet_width:g} x {layout_input.sheet_height:g} {unit}, "
        f"piece {layout_input.piece_width:g} x {layout_input.piece_height:g} {unit}, "
        f"margin {layout_input.margin:g}, spacing {layout_input.spacing:g}"
    )
    typer.echo()


def _report(result: ValidationResult) -> None:
    for error in result.errors:
        typer.echo(f"  error   {error.path}: {error.message}", err=True)
    for warning in result.warnings:
        typer.echo(f"  warning {warning.path}: {warning.message}")
        if warning.suggestion:
            typer.echo(f"          Suggestion: {warning.suggestion}")

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

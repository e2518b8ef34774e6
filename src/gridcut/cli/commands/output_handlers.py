"""Output handling for the layout CLI.

Writes the chosen console format to stdout or a file, and drives
multi-format export through the exporter registry.
"""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from gridcut.infrastructure import LayoutRenderer, LayoutSummaryFormatter
from gridcut.infrastructure.exporters import ExporterRegistry, ExportManager

if TYPE_CHECKING:
    from gridcut.application.dtos import LayoutOutput

__all__ = [
    "parse_formats",
    "handle_multi_format_export",
    "render_console_output",
]


def parse_formats(output_formats_str: str) -> list[str]:
    """Split a comma-separated format list; "all" expands to every format."""
    if output_formats_str.strip().lower() == "all":
        return ExporterRegistry.available_formats()
    return [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]


def handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: LayoutOutput,
) -> dict[str, Path]:
    """Export ``result`` to every requested format.

    Exits with code 1 on unknown formats or export failures.
    """
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)

    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)

    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except (OSError, ValueError) as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("\nExported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")
    return files


def render_console_output(result: LayoutOutput, output_format: str) -> str:
    """Render ``result`` in one of the console formats."""
    if output_format == "summary":
        return LayoutSummaryFormatter().format(result)
    if output_format == "ascii":
        renderer = LayoutRenderer(render_limit=result.render_limit)
        return renderer.render_ascii(result.chosen)
    if output_format in ("json", "svg"):
        return ExporterRegistry.get(output_format)().export_string(result)
    raise ValueError(f"Unknown output format: {output_format}")

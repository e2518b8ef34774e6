"""Typer CLI for single-sheet grid layouts."""

import logging
from pathlib import Path
from typing import Annotated

import typer

from gridcut.application import ComputeLayoutCommand
from gridcut.application.config import (
    ConfigError,
    LayoutConfiguration,
    config_to_input,
    load_config,
    merge_config_with_cli,
)
from gridcut.application.presets import SHEET_PRESETS
from gridcut.application.units import Unit, to_display
from gridcut.cli.commands import (
    display_load_error,
    handle_multi_format_export,
    parse_formats,
    render_console_output,
    validate_command,
)

app = typer.Typer(
    name="gridcut",
    help="Fit as many identical pieces as possible on one rectangular sheet.",
)

app.command(name="validate")(validate_command)


@app.callback()
def main(
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log engine decisions to stderr"),
    ] = False,
) -> None:
    """Single-sheet grid layout planner."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s: %(message)s")


@app.command()
def layout(
    config_file: Annotated[
        Path | None,
        typer.Option("--config", "-c", help="Path to JSON configuration file"),
    ] = None,
    sheet_width: Annotated[
        float | None,
        typer.Option("--sheet-width", help="Sheet width in the chosen unit"),
    ] = None,
    sheet_height: Annotated[
        float | None,
        typer.Option("--sheet-height", help="Sheet height in the chosen unit"),
    ] = None,
    preset: Annotated[
        str | None,
        typer.Option("--preset", "-p", help="Sheet preset label or index (see 'presets')"),
    ] = None,
    piece_width: Annotated[
        float | None,
        typer.Option("--piece-width", help="Piece width in the chosen unit"),
    ] = None,
    piece_height: Annotated[
        float | None,
        typer.Option("--piece-height", help="Piece height in the chosen unit"),
    ] = None,
    margin: Annotated[
        float | None,
        typer.Option("--margin", "-m", help="Clearance from every sheet edge"),
    ] = None,
    spacing: Annotated[
        float | None,
        typer.Option("--spacing", "-s", help="Kerf between neighbouring pieces"),
    ] = None,
    unit: Annotated[
        str | None,
        typer.Option("--unit", "-u", help="Length unit: mm, cm, inch, meter"),
    ] = None,
    backfill: Annotated[
        bool | None,
        typer.Option(
            "--backfill/--no-backfill",
            help="Fill leftover strips with rotated pieces",
        ),
    ] = None,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: summary, ascii, json, svg"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Write the output to a file"),
    ] = None,
    render_limit: Annotated[
        int | None,
        typer.Option("--render-limit", help="Maximum pieces drawn in previews"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: dxf,json,svg (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = None,
) -> None:
    """Compute the best layout of one piece size on one sheet.

    Dimensions come from CLI options or from a JSON configuration file.
    When using --config, CLI options override config file values. Without
    a config file, unspecified values default to a 25 x 35.5 sheet and a
    5 x 7 piece in inches.

    Examples:
        gridcut layout --sheet-width 1200 --sheet-height 800 --piece-width 200 --piece-height 150 --unit mm
        gridcut layout --preset "28 x 22" --piece-width 4 --piece-height 6 --format ascii
        gridcut layout --config flyers.json --spacing 3 --output-formats all --output-dir ./out
    """
    if preset is not None and (sheet_width is not None or sheet_height is not None):
        typer.echo("Error: use either --preset or --sheet-width/--sheet-height", err=True)
        raise typer.Exit(code=1)

    if config_file is not None:
        try:
            config = load_config(config_file)
        except ConfigError as e:
            display_load_error(e)
            raise typer.Exit(code=1)
    else:
        config = LayoutConfiguration()

    try:
        config = merge_config_with_cli(
            config,
            unit=unit,
            sheet_width=sheet_width,
            sheet_height=sheet_height,
            preset=preset,
            piece_width=piece_width,
            piece_height=piece_height,
            margin=margin,
            spacing=spacing,
            backfill=backfill,
            output_format=output_format,
            render_limit=render_limit,
        )
    except ConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)

    command = ComputeLayoutCommand()
    result = command.execute(
        config_to_input(config), render_limit=config.output.render_limit
    )

    if not result.is_valid:
        typer.echo("Errors:", err=True)
        for error in result.errors:
            typer.echo(f"  - {error}", err=True)
        raise typer.Exit(code=1)

    # Multi-format export from CLI or config
    formats = (
        parse_formats(output_formats)
        if output_formats is not None
        else list(config.output.formats)
    )
    if formats:
        out_dir = output_dir
        if out_dir is None and config.output.output_dir is not None:
            out_dir = Path(config.output.output_dir)
        handle_multi_format_export(
            formats,
            out_dir,
            project_name or config.output.project_name,
            result,
        )
        return

    content = render_console_output(result, config.output.format)
    if output_file is not None:
        try:
            output_file.write_text(content + "\n", encoding="utf-8")
        except OSError as e:
            typer.echo(f"Error writing {output_file}: {e}", err=True)
            raise typer.Exit(code=1)
        typer.echo(f"Wrote {config.output.format} output to {output_file}")
    else:
        typer.echo(content)


@app.command()
def presets(
    unit: Annotated[
        str,
        typer.Option("--unit", "-u", help="Display unit: mm, cm, inch, meter"),
    ] = Unit.INCH.value,
) -> None:
    """List the stock sheet presets."""
    try:
        display_unit = Unit(unit)
    except ValueError:
        typer.echo(
            f"Error: unknown unit '{unit}'. "
            f"Use one of: {', '.join(u.value for u in Unit)}",
            err=True,
        )
        raise typer.Exit(code=1)

    typer.echo(f"{'#':<4} {'Preset':<12} {'Width':>10} {'Height':>10}  Unit")
    typer.echo("-" * 46)
    for index, sheet_preset in enumerate(SHEET_PRESETS):
        typer.echo(
            f"{index:<4} {sheet_preset.label:<12} "
            f"{to_display(sheet_preset.width_mm, display_unit):>10} "
            f"{to_display(sheet_preset.height_mm, display_unit):>10}  "
            f"{display_unit.value}"
        )


if __name__ == "__main__":
    app()

"""Adapter from LayoutConfiguration to the LayoutInput DTO."""

from __future__ import annotations

from gridcut.application.config.schema import LayoutConfiguration
from gridcut.application.dtos import LayoutInput
from gridcut.application.presets import get_preset
from gridcut.application.units import Unit, from_mm


def resolve_preset_size(preset: str, unit: Unit | str) -> tuple[float, float]:
    """Return a preset's width and height expressed in ``unit``.

    Presets are defined in their stock unit, so a "28 x 22" preset in a
    millimetre configuration resolves to 711.2 x 558.8.
    """
    found = get_preset(preset)
    return from_mm(found.width_mm, unit), from_mm(found.height_mm, unit)


def config_to_input(config: LayoutConfiguration) -> LayoutInput:
    """Convert a validated configuration into a LayoutInput.

    Example:
        >>> config = load_config(Path("layout.json"))
        >>> output = ComputeLayoutCommand().execute(
        ...     config_to_input(config), render_limit=config.output.render_limit
        ... )
    """
    sheet = config.sheet
    if sheet.preset is not None:
        sheet_width, sheet_height = resolve_preset_size(sheet.preset, config.unit)
    else:
        # Both set when no preset; guaranteed by SheetSizeConfig.
        assert sheet.width is not None and sheet.height is not None
        sheet_width, sheet_height = sheet.width, sheet.height

    return LayoutInput(
        sheet_width=sheet_width,
        sheet_height=sheet_height,
        piece_width=config.piece.width,
        piece_height=config.piece.height,
        margin=config.margin,
        spacing=config.spacing,
        backfill=config.backfill,
        unit=config.unit,
    )

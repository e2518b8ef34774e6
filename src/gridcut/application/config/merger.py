"""Merge CLI overrides into a loaded configuration.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError as PydanticValidationError

from gridcut.application.config.adapter import resolve_preset_size
from gridcut.application.config.loader import (
    ConfigError,
    _extract_validation_errors,
    _format_validation_error_message,
)
from gridcut.application.config.schema import LayoutConfiguration
from gridcut.application.units import Unit


def merge_config_with_cli(
    config: LayoutConfiguration,
    *,
    unit: str | None = None,
    sheet_width: float | None = None,
    sheet_height: float | None = None,
    preset: str | None = None,
    piece_width: float | None = None,
    piece_height: float | None = None,
    margin: float | None = None,
    spacing: float | None = None,
    backfill: bool | None = None,
    output_format: str | None = None,
    render_limit: int | None = None,
) -> LayoutConfiguration:
    """Merge CLI arguments with configuration values.

    Explicit sheet dimensions replace a configured preset and a CLI preset
    replaces configured dimensions.

    Returns:
        A new, re-validated LayoutConfiguration.

    Raises:
        ConfigError: If an override makes the configuration invalid.

    Example:
        >>> merged = merge_config_with_cli(config, piece_width=4.0)
        >>> merged.piece.width
        4.0
    """
    data = config.model_dump(mode="json")

    if unit is not None:
        if unit not in {u.value for u in Unit}:
            message = (
                f"Unsupported unit '{unit}'. "
                f"Supported units: {', '.join(u.value for u in Unit)}"
            )
            raise ConfigError(
                message=message,
                error_type="validation",
                details=[{"path": "unit", "message": message, "value": unit}],
            )
        data["unit"] = unit

    data["sheet"] = _build_sheet_data(
        data["sheet"], sheet_width, sheet_height, preset, data["unit"]
    )

    if piece_width is not None:
        data["piece"]["width"] = piece_width
    if piece_height is not None:
        data["piece"]["height"] = piece_height
    if margin is not None:
        data["margin"] = margin
    if spacing is not None:
        data["spacing"] = spacing
    if backfill is not None:
        data["backfill"] = backfill

    if output_format is not None:
        data["output"]["format"] = output_format
    if render_limit is not None:
        data["output"]["render_limit"] = render_limit

    try:
        return LayoutConfiguration.model_validate(data)
    except PydanticValidationError as e:
        details = _extract_validation_errors(e)
        raise ConfigError(
            message=_format_validation_error_message(details),
            error_type="validation",
            details=details,
        )


def _build_sheet_data(
    sheet: dict[str, Any],
    width: float | None,
    height: float | None,
    preset: str | None,
    unit: str,
) -> dict[str, Any]:
    if preset is not None:
        return {"preset": preset}
    if width is None and height is None:
        return sheet
    if sheet.get("preset") is not None:
        # A partial override of a preset sheet keeps the preset's other side.
        preset_w, preset_h = resolve_preset_size(sheet["preset"], unit)
        sheet = {"width": preset_w, "height": preset_h}
    return {
        "width": width if width is not None else sheet["width"],
        "height": height if height is not None else sheet["height"],
    }

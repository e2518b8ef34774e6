"""Pydantic request schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field

from gridcut.application.config import resolve_preset_size
from gridcut.application.dtos import DEFAULT_RENDER_LIMIT, LayoutInput
from gridcut.application.presets import (
    DEFAULT_BACKFILL,
    DEFAULT_MARGIN,
    DEFAULT_PIECE_HEIGHT,
    DEFAULT_PIECE_WIDTH,
    DEFAULT_SHEET_HEIGHT,
    DEFAULT_SHEET_WIDTH,
    DEFAULT_SPACING,
    DEFAULT_UNIT,
)
from gridcut.application.units import Unit


class LayoutRequest(BaseModel):
    """Request for computing a layout.

    Lengths are in ``unit``. Range checks happen in the layout command so
    that every input problem is reported at once.
    """

    sheet_width: float = Field(default=DEFAULT_SHEET_WIDTH, description="Sheet width")
    sheet_height: float = Field(
        default=DEFAULT_SHEET_HEIGHT, description="Sheet height"
    )
    preset: str | None = Field(
        default=None, description="Sheet preset label or index; overrides sheet size"
    )
    piece_width: float = Field(default=DEFAULT_PIECE_WIDTH, description="Piece width")
    piece_height: float = Field(
        default=DEFAULT_PIECE_HEIGHT, description="Piece height"
    )
    margin: float = Field(default=DEFAULT_MARGIN, description="Edge margin")
    spacing: float = Field(default=DEFAULT_SPACING, description="Kerf between pieces")
    backfill: bool = Field(
        default=DEFAULT_BACKFILL, description="Fill leftover strips with rotated pieces"
    )
    unit: Unit = Field(default=DEFAULT_UNIT, description="Length unit")
    render_limit: int = Field(
        default=DEFAULT_RENDER_LIMIT, ge=1, description="Maximum pieces in previews"
    )

    def to_layout_input(self) -> LayoutInput:
        """Convert to the command DTO, resolving the preset if one is given.

        Raises:
            PresetNotFoundError: If ``preset`` does not exist.
        """
        sheet_width, sheet_height = self.sheet_width, self.sheet_height
        if self.preset is not None:
            sheet_width, sheet_height = resolve_preset_size(self.preset, self.unit)
        return LayoutInput(
            sheet_width=sheet_width,
            sheet_height=sheet_height,
            piece_width=self.piece_width,
            piece_height=self.piece_height,
            margin=self.margin,
            spacing=self.spacing,
            backfill=self.backfill,
            unit=self.unit,
        )


class LayoutFromConfigRequest(BaseModel):
    """Request for computing a layout from a full configuration document."""

    config: dict[str, Any] = Field(..., description="Layout configuration JSON")


class ConfigValidateRequest(BaseModel):
    """Request for validating a configuration."""

    config: dict[str, Any] = Field(..., description="Layout configuration JSON")

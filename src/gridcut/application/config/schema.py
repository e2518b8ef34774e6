"""Pydantic models for layout configuration files.

A configuration file describes one layout request: the sheet (explicit
dimensions or a named preset), the piece, margin, spacing, the backfill
flag, the display unit all lengths are written in, and output options.
"""

from __future__ import annotations

from typing import Literal

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
    model_validator,
)

from gridcut.application.dtos import DEFAULT_RENDER_LIMIT
from gridcut.application.presets import (
    DEFAULT_BACKFILL,
    DEFAULT_MARGIN,
    DEFAULT_PIECE_HEIGHT,
    DEFAULT_PIECE_WIDTH,
    DEFAULT_SHEET_HEIGHT,
    DEFAULT_SHEET_WIDTH,
    DEFAULT_SPACING,
    DEFAULT_UNIT,
    get_preset,
)
from gridcut.application.units import Unit

# Supported schema versions for configuration files
# Version 1.0: sheet, piece, margin, spacing, backfill, unit, output
SUPPORTED_VERSIONS: frozenset[str] = frozenset({"1.0"})

OutputFormat = Literal["summary", "ascii", "json", "svg"]


class SheetSizeConfig(BaseModel):
    """Sheet dimensions, given explicitly or as a preset.

    When ``preset`` is set, ``width`` and ``height`` must be omitted; the
    preset's stock size is used instead.

    Attributes:
        width: Sheet width in the configuration unit.
        height: Sheet height in the configuration unit.
        preset: Preset label (e.g. "28 x 22") or 0-based index.
    """

    model_config = ConfigDict(extra="forbid")

    width: float | None = Field(default=None, gt=0, description="Sheet width")
    height: float | None = Field(default=None, gt=0, description="Sheet height")
    preset: str | None = Field(default=None, description="Sheet preset label or index")

    @field_validator("preset")
    @classmethod
    def validate_preset_exists(cls, v: str | None) -> str | None:
        if v is not None:
            try:
                get_preset(v)
            except KeyError as e:
                raise ValueError(str(e)) from e
        return v

    @model_validator(mode="after")
    def validate_dimensions_or_preset(self) -> SheetSizeConfig:
        """Require either both dimensions or a preset, not a mix."""
        has_dims = self.width is not None or self.height is not None
        if self.preset is not None and has_dims:
            raise ValueError("Specify either 'preset' or 'width'/'height', not both")
        if self.preset is None and (self.width is None or self.height is None):
            raise ValueError("Both 'width' and 'height' are required without 'preset'")
        return self


class PieceSizeConfig(BaseModel):
    """Dimensions of the piece to cut, in the configuration unit."""

    model_config = ConfigDict(extra="forbid")

    width: float = Field(default=DEFAULT_PIECE_WIDTH, ge=0, description="Piece width")
    height: float = Field(
        default=DEFAULT_PIECE_HEIGHT, ge=0, description="Piece height"
    )


class OutputConfig(BaseModel):
    """Configuration for console output and exported files.

    Attributes:
        format: Console output format.
        formats: Formats for multi-format export (e.g. ["svg", "json"]).
        output_dir: Directory for exported files.
        project_name: Base name for exported files.
        render_limit: Maximum number of pieces drawn in previews.
    """

    model_config = ConfigDict(extra="forbid")

    format: OutputFormat = Field(default="summary", description="Console output format")
    formats: list[str] = Field(default_factory=list, description="Export formats")
    output_dir: str | None = Field(default=None, description="Export directory")
    project_name: str = Field(default="layout", min_length=1)
    render_limit: int = Field(default=DEFAULT_RENDER_LIMIT, ge=1)


def _default_sheet() -> SheetSizeConfig:
    return SheetSizeConfig(width=DEFAULT_SHEET_WIDTH, height=DEFAULT_SHEET_HEIGHT)


class LayoutConfiguration(BaseModel):
    """Root configuration model for a layout request.

    Attributes:
        schema_version: Version string in format "major.minor" (e.g., "1.0").
        unit: Unit every length in the file is expressed in.
        sheet: Sheet dimensions or preset.
        piece: Piece dimensions.
        margin: Clearance from every sheet edge.
        spacing: Kerf between neighbouring pieces.
        backfill: Whether leftover strips get rotated pieces.
        output: Output options.

    Example:
        >>> config = LayoutConfiguration(
        ...     schema_version="1.0",
        ...     unit="mm",
        ...     sheet=SheetSizeConfig(width=1200, height=800),
        ...     piece=PieceSizeConfig(width=200, height=150),
        ... )
    """

    model_config = ConfigDict(extra="forbid")

    schema_version: str = Field(default="1.0", pattern=r"^\d+\.\d+$")
    unit: Unit = Field(default=DEFAULT_UNIT, description="Length unit")
    sheet: SheetSizeConfig = Field(default_factory=_default_sheet)
    piece: PieceSizeConfig = Field(default_factory=PieceSizeConfig)
    margin: float = Field(default=DEFAULT_MARGIN, ge=0, description="Edge margin")
    spacing: float = Field(default=DEFAULT_SPACING, ge=0, description="Cut spacing")
    backfill: bool = Field(default=DEFAULT_BACKFILL, description="Rotated backfill")
    output: OutputConfig = Field(default_factory=OutputConfig)

    @field_validator("schema_version")
    @classmethod
    def validate_supported_version(cls, v: str) -> str:
        """Validate that schema version is supported.

        Newer minor versions of a supported major version are accepted for
        forward compatibility.
        """
        if v in SUPPORTED_VERSIONS:
            return v

        major_version = int(v.split(".")[0])
        supported_majors = {int(sv.split(".")[0]) for sv in SUPPORTED_VERSIONS}
        if major_version in supported_majors:
            return v

        raise ValueError(
            f"Unsupported schema version '{v}'. "
            f"Supported versions: {sorted(SUPPORTED_VERSIONS)}"
        )

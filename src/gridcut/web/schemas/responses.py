"""Pydantic response schemas for the REST API."""

from typing import Any

from pydantic import BaseModel, Field


class SizeSchema(BaseModel):
    """Width and height in millimetres."""

    width: float = Field(..., description="Width in mm")
    height: float = Field(..., description="Height in mm")


class StripSchema(BaseModel):
    """Leftover region outside the primary grid."""

    x: float = Field(..., description="Left edge in mm")
    y: float = Field(..., description="Top edge in mm")
    width: float = Field(..., description="Width in mm")
    height: float = Field(..., description="Height in mm")


class PlacementSchema(StripSchema):
    """One placed piece."""

    rotated: bool = Field(..., description="Whether the piece is turned 90 degrees")


class LayoutSummarySchema(BaseModel):
    """Counts and waste of one orientation."""

    orientation: str | None = Field(..., description="normal or rotated")
    piece: SizeSchema = Field(..., description="Piece size as laid out")
    fit_count_x: int = Field(..., description="Primary grid columns")
    fit_count_y: int = Field(..., description="Primary grid rows")
    primary_count: int = Field(..., description="Pieces in the primary grid")
    rotated_right_count: int = Field(..., description="Backfill pieces, right strip")
    rotated_bottom_count: int = Field(..., description="Backfill pieces, bottom strip")
    total_count: int = Field(..., description="Total pieces")
    leftover_width: float = Field(..., description="Right strip width in mm")
    leftover_height: float = Field(..., description="Bottom strip height in mm")
    waste_area: float = Field(..., description="Uncovered sheet area in square mm")
    waste_percent: float = Field(..., description="Waste as percent of sheet area")


class LayoutDetailSchema(LayoutSummarySchema):
    """Chosen layout including geometry."""

    right_strip: StripSchema | None = Field(default=None, description="Right strip")
    bottom_strip: StripSchema | None = Field(default=None, description="Bottom strip")
    placements: list[PlacementSchema] = Field(
        default_factory=list, description="Placed pieces, primary grid first"
    )


class LayoutResponseSchema(BaseModel):
    """Response for layout computation."""

    unit: str = Field(default="mm", description="Unit of every length")
    display_unit: str = Field(..., description="Unit the request was made in")
    sheet: SizeSchema = Field(..., description="Sheet size")
    chosen: LayoutDetailSchema = Field(..., description="Chosen layout")
    alternate: LayoutSummarySchema = Field(..., description="Rejected orientation")


class PresetSchema(BaseModel):
    """Stock sheet preset."""

    index: int = Field(..., description="0-based preset index")
    label: str = Field(..., description="Preset label")
    width: float = Field(..., description="Width in the preset unit")
    height: float = Field(..., description="Height in the preset unit")
    unit: str = Field(..., description="Preset unit")
    width_mm: float = Field(..., description="Width in mm")
    height_mm: float = Field(..., description="Height in mm")


class PresetListSchema(BaseModel):
    """Response for preset listing."""

    presets: list[PresetSchema] = Field(..., description="Available presets")


class ExportFormatsSchema(BaseModel):
    """Response for available export formats."""

    formats: list[str] = Field(..., description="Available format names")


class ValidationResultSchema(BaseModel):
    """Response for configuration validation."""

    is_valid: bool = Field(..., description="Whether configuration is valid")
    errors: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation errors"
    )
    warnings: list[dict[str, Any]] = Field(
        default_factory=list, description="Validation warnings"
    )


class ErrorResponseSchema(BaseModel):
    """Standard error response."""

    error: str = Field(..., description="Error message")
    error_type: str = Field(..., description="Error type identifier")
    details: list[dict[str, Any]] | dict[str, Any] | None = Field(
        default=None, description="Additional error details"
    )

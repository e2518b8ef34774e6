"""Data transfer objects between the front ends and the layout engine."""

from __future__ import annotations

import math
from dataclasses import dataclass, field

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
from gridcut.application.units import Unit, to_mm
from gridcut.domain.value_objects import LayoutResult, LayoutSelection, Piece, Sheet

DEFAULT_RENDER_LIMIT = 3000


class LayoutInputError(ValueError):
    """Raised by front ends when a layout request fails input validation.

    Attributes:
        errors: Validation messages, one per problem.
    """

    def __init__(self, errors: list[str]) -> None:
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid layout input")


@dataclass(frozen=True)
class CanonicalInput:
    """Engine inputs resolved to millimetres."""

    sheet: Sheet
    piece: Piece
    margin: float
    spacing: float
    backfill: bool


@dataclass
class LayoutInput:
    """Input DTO for a layout request, in a display unit."""

    sheet_width: float = DEFAULT_SHEET_WIDTH
    sheet_height: float = DEFAULT_SHEET_HEIGHT
    piece_width: float = DEFAULT_PIECE_WIDTH
    piece_height: float = DEFAULT_PIECE_HEIGHT
    margin: float = DEFAULT_MARGIN
    spacing: float = DEFAULT_SPACING
    backfill: bool = DEFAULT_BACKFILL
    unit: Unit = DEFAULT_UNIT

    def validate(self) -> list[str]:
        """Validate input and return list of error messages."""
        errors: list[str] = []
        values = {
            "Sheet width": self.sheet_width,
            "Sheet height": self.sheet_height,
            "Piece width": self.piece_width,
            "Piece height": self.piece_height,
            "Margin": self.margin,
            "Spacing": self.spacing,
        }
        for name, value in values.items():
            if not math.isfinite(value):
                errors.append(f"{name} must be a finite number")
        if errors:
            return errors

        if self.sheet_width <= 0:
            errors.append("Sheet width must be positive")
        if self.sheet_height <= 0:
            errors.append("Sheet height must be positive")
        if self.piece_width < 0:
            errors.append("Piece width cannot be negative")
        if self.piece_height < 0:
            errors.append("Piece height cannot be negative")
        if self.margin < 0:
            errors.append("Margin cannot be negative")
        if self.spacing < 0:
            errors.append("Spacing cannot be negative")
        try:
            Unit(self.unit)
        except ValueError:
            valid_units = ", ".join(u.value for u in Unit)
            errors.append(f"Unit must be one of: {valid_units}")
        return errors

    def to_canonical(self) -> CanonicalInput:
        """Convert every length to millimetres."""
        unit = Unit(self.unit)
        return CanonicalInput(
            sheet=Sheet(
                width=to_mm(self.sheet_width, unit),
                height=to_mm(self.sheet_height, unit),
            ),
            piece=Piece(
                width=to_mm(self.piece_width, unit),
                height=to_mm(self.piece_height, unit),
            ),
            margin=to_mm(self.margin, unit),
            spacing=to_mm(self.spacing, unit),
            backfill=self.backfill,
        )


@dataclass
class LayoutOutput:
    """Output DTO carrying the engine result to formatters and exporters.

    Attributes:
        selection: Chosen and alternate layouts (millimetres).
        unit: Display unit the user works in.
        render_limit: Maximum number of pieces drawn by renderers.
        errors: Input validation errors; empty on success.
    """

    selection: LayoutSelection | None
    unit: Unit = DEFAULT_UNIT
    render_limit: int = DEFAULT_RENDER_LIMIT
    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors and self.selection is not None

    @property
    def chosen(self) -> LayoutResult:
        """The chosen layout; raises ValueError for failed requests."""
        if self.selection is None:
            raise ValueError("Layout output has no result")
        return self.selection.chosen

    @property
    def alternate(self) -> LayoutResult:
        """The rejected layout; raises ValueError for failed requests."""
        if self.selection is None:
            raise ValueError("Layout output has no result")
        return self.selection.alternate

    def raise_for_errors(self) -> None:
        """Raise LayoutInputError if the request failed validation."""
        if self.errors:
            raise LayoutInputError(self.errors)

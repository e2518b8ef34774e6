"""Value objects for single-sheet grid layouts.

All dimensions are in the canonical unit (millimetres). Conversion to and
from display units happens in the application layer.

All dataclasses are frozen (immutable) so results can be compared, hashed
and shared between the renderer and the exporters without copying.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Orientation(str, Enum):
    """Piece orientation evaluated by the layout selector."""

    NORMAL = "normal"
    ROTATED = "rotated"


@dataclass(frozen=True)
class Sheet:
    """Stock sheet dimensions.

    Attributes:
        width: Sheet width in mm.
        height: Sheet height in mm.
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        """Sheet area in square mm."""
        return self.width * self.height


@dataclass(frozen=True)
class Piece:
    """Dimensions of the piece being cut.

    Non-positive dimensions are allowed; the planner treats them as
    pieces that never fit.
    """

    width: float
    height: float

    @property
    def area(self) -> float:
        """Piece area in square mm."""
        return self.width * self.height

    def swapped(self) -> Piece:
        """Return the piece turned 90 degrees."""
        return Piece(width=self.height, height=self.width)


@dataclass(frozen=True)
class Strip:
    """Axis-aligned rectangular region of the sheet.

    Used for the effective (inside margin) region and for the leftover
    strips to the right of and below the primary grid.

    Attributes:
        x: Left edge in mm from the sheet's left edge.
        y: Top edge in mm from the sheet's top edge.
        width: Region width in mm.
        height: Region height in mm.
    """

    x: float
    y: float
    width: float
    height: float

    @property
    def is_empty(self) -> bool:
        """True when the region cannot hold anything."""
        return self.width <= 0 or self.height <= 0

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def area(self) -> float:
        """Region area in square mm (0 for empty regions)."""
        if self.is_empty:
            return 0.0
        return self.width * self.height


@dataclass(frozen=True)
class Placement:
    """A single piece placed on the sheet.

    Attributes:
        x: Left edge in mm.
        y: Top edge in mm.
        width: Placed width in mm.
        height: Placed height in mm.
        rotated: True for pieces added by the backfill pass, whose
            dimensions are swapped relative to the primary grid.
    """

    x: float
    y: float
    width: float
    height: float
    rotated: bool = False

    @property
    def right(self) -> float:
        """X coordinate of the right edge."""
        return self.x + self.width

    @property
    def bottom(self) -> float:
        """Y coordinate of the bottom edge."""
        return self.y + self.height

    @property
    def area(self) -> float:
        """Placed area in square mm."""
        return self.width * self.height

    def overlaps(self, other: Placement) -> bool:
        """Check whether two placements share interior area.

        Touching edges do not count as overlap.
        """
        return (
            self.x < other.right
            and other.x < self.right
            and self.y < other.bottom
            and other.y < self.bottom
        )


@dataclass(frozen=True)
class LayoutResult:
    """Complete layout of one piece orientation on one sheet.

    Attributes:
        sheet: The sheet the layout was computed for.
        piece: The piece as evaluated (already swapped for the rotated
            orientation).
        margin: Edge clearance in mm.
        spacing: Kerf between adjacent pieces in mm.
        backfill: Whether rotated backfill was enabled.
        fit_count_x: Primary grid columns.
        fit_count_y: Primary grid rows.
        primary_count: Pieces in the primary grid.
        rotated_right_count: Backfill pieces in the right strip.
        rotated_bottom_count: Backfill pieces in the bottom strip.
        placements: Every placed piece, primary grid first.
        right_strip: Leftover region right of the grid, if any.
        bottom_strip: Leftover region below the grid, if any.
        leftover_width: Width of the right strip (0 when absent).
        leftover_height: Height of the bottom strip (0 when absent).
        waste_area: Sheet area not covered by pieces, in square mm.
        waste_percent: Waste as a percentage of the sheet area.
        chosen_orientation: Set by the selector; None for untagged results.
    """

    sheet: Sheet
    piece: Piece
    margin: float
    spacing: float
    backfill: bool
    fit_count_x: int
    fit_count_y: int
    primary_count: int
    rotated_right_count: int
    rotated_bottom_count: int
    placements: tuple[Placement, ...]
    right_strip: Strip | None
    bottom_strip: Strip | None
    leftover_width: float
    leftover_height: float
    waste_area: float
    waste_percent: float
    chosen_orientation: Orientation | None = None

    @property
    def total_count(self) -> int:
        """Total pieces cut from the sheet."""
        return self.primary_count + self.rotated_right_count + self.rotated_bottom_count

    @property
    def rotated_count(self) -> int:
        """Pieces recovered by the backfill pass."""
        return self.rotated_right_count + self.rotated_bottom_count

    @property
    def grid_width(self) -> float:
        """Width spanned by the primary grid, kerfs included."""
        gaps = max(0, self.fit_count_x - 1)
        return self.fit_count_x * self.piece.width + gaps * self.spacing

    @property
    def grid_height(self) -> float:
        """Height spanned by the primary grid, kerfs included."""
        gaps = max(0, self.fit_count_y - 1)
        return self.fit_count_y * self.piece.height + gaps * self.spacing

    @property
    def used_area(self) -> float:
        """Area covered by pieces in square mm."""
        return sum(p.area for p in self.placements)

    @property
    def primary_placements(self) -> tuple[Placement, ...]:
        return tuple(p for p in self.placements if not p.rotated)

    @property
    def rotated_placements(self) -> tuple[Placement, ...]:
        return tuple(p for p in self.placements if p.rotated)


@dataclass(frozen=True)
class LayoutSelection:
    """Outcome of comparing both orientations.

    Attributes:
        chosen: The better layout, tagged with its orientation.
        alternate: The rejected layout, tagged with the other orientation.
    """

    chosen: LayoutResult
    alternate: LayoutResult

    @property
    def orientation(self) -> Orientation:
        """Orientation of the chosen layout."""
        assert self.chosen.chosen_orientation is not None
        return self.chosen.chosen_orientation

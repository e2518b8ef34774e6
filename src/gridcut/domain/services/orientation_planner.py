"""Single-orientation layout planning.

Builds the primary grid for one piece orientation, derives the leftover
strips to the right of and below it, and optionally backfills those strips
with pieces turned 90 degrees.
"""

from __future__ import annotations

import logging
from dataclasses import replace

from gridcut.domain.services.grid_packer import GridPacker
from gridcut.domain.value_objects import LayoutResult, Piece, Placement, Sheet, Strip

logger = logging.getLogger(__name__)


class OrientationPlanner:
    """Plans the layout of one piece orientation on one sheet.

    Attributes:
        packer: Grid packer used for the primary grid and the backfill.
    """

    def __init__(self, packer: GridPacker | None = None) -> None:
        self.packer = packer or GridPacker()

    def plan(
        self,
        sheet: Sheet,
        piece: Piece,
        margin: float,
        spacing: float,
        backfill: bool,
    ) -> LayoutResult:
        """Compute the layout for ``piece`` exactly as given.

        The returned result is not tagged with an orientation; the
        selector does that once it has compared both candidates.

        Args:
            sheet: Sheet dimensions in mm.
            piece: Piece dimensions in mm, in the orientation to evaluate.
            margin: Clearance from every sheet edge in mm.
            spacing: Kerf between neighbouring pieces in mm.
            backfill: Whether to fill leftover strips with rotated pieces.

        Returns:
            LayoutResult with placements, strips, counts and waste.
        """
        effective = Strip(
            x=margin,
            y=margin,
            width=max(0.0, sheet.width - 2 * margin),
            height=max(0.0, sheet.height - 2 * margin),
        )

        fit_x, fit_y = self.packer.fit_counts(
            effective, piece.width, piece.height, spacing
        )
        primary = self.packer.pack(effective, piece.width, piece.height, spacing)

        used_w = fit_x * piece.width + max(0, fit_x - 1) * spacing
        used_h = fit_y * piece.height + max(0, fit_y - 1) * spacing
        leftover_w = max(0.0, effective.width - used_w)
        leftover_h = max(0.0, effective.height - used_h)

        right_strip = (
            Strip(
                x=margin + used_w,
                y=margin,
                width=leftover_w,
                height=effective.height,
            )
            if leftover_w > 0
            else None
        )
        bottom_strip = (
            Strip(
                x=margin,
                y=margin + used_h,
                width=effective.width,
                height=leftover_h,
            )
            if leftover_h > 0
            else None
        )

        rotated_right: tuple[Placement, ...] = ()
        rotated_bottom: tuple[Placement, ...] = ()
        if backfill:
            # Both strips contain the bottom-right corner. Each backfill region
            # drops it: the right one loses leftover_h of height, the bottom
            # one loses leftover_w of width.
            right_region = (
                replace(right_strip, height=max(0.0, right_strip.height - leftover_h))
                if right_strip is not None
                else None
            )
            bottom_region = (
                replace(bottom_strip, width=max(0.0, bottom_strip.width - leftover_w))
                if bottom_strip is not None
                else None
            )
            turned = piece.swapped()
            rotated_right = self.packer.pack(
                right_region, turned.width, turned.height, spacing, rotated=True
            )
            rotated_bottom = self.packer.pack(
                bottom_region, turned.width, turned.height, spacing, rotated=True
            )

        placements = primary + rotated_right + rotated_bottom
        sheet_area = sheet.area
        # Exact fits can round slightly below zero.
        waste_area = max(0.0, sheet_area - sum(p.area for p in placements))
        waste_percent = waste_area / sheet_area * 100 if sheet_area > 0 else 0.0

        result = LayoutResult(
            sheet=sheet,
            piece=piece,
            margin=margin,
            spacing=spacing,
            backfill=backfill,
            fit_count_x=fit_x,
            fit_count_y=fit_y,
            primary_count=fit_x * fit_y,
            rotated_right_count=len(rotated_right),
            rotated_bottom_count=len(rotated_bottom),
            placements=placements,
            right_strip=right_strip,
            bottom_strip=bottom_strip,
            leftover_width=leftover_w,
            leftover_height=leftover_h,
            waste_area=waste_area,
            waste_percent=waste_percent,
        )

        logger.debug(
            "Piece %sx%s: %dx%d primary, %d right, %d bottom, %.2f%% waste",
            piece.width,
            piece.height,
            fit_x,
            fit_y,
            result.rotated_right_count,
            result.rotated_bottom_count,
            waste_percent,
        )
        return result

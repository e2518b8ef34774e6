"""Orientation comparison for single-sheet layouts."""

from __future__ import annotations

import logging
from dataclasses import replace

from gridcut.domain.services.orientation_planner import OrientationPlanner
from gridcut.domain.value_objects import (
    LayoutResult,
    LayoutSelection,
    Orientation,
    Piece,
    Sheet,
)

logger = logging.getLogger(__name__)


def prefers_rotated(normal: LayoutResult, rotated: LayoutResult) -> bool:
    """Decide whether the rotated candidate beats the normal one.

    Higher piece count wins; on equal counts the lower waste percentage
    wins. An exact tie keeps the normal orientation.
    """
    if rotated.total_count != normal.total_count:
        return rotated.total_count > normal.total_count
    return rotated.waste_percent < normal.waste_percent


class LayoutSelector:
    """Evaluates both piece orientations and keeps the better layout.

    Attributes:
        planner: Planner used for each orientation.
    """

    def __init__(self, planner: OrientationPlanner | None = None) -> None:
        self.planner = planner or OrientationPlanner()

    def compare(
        self,
        sheet: Sheet,
        piece: Piece,
        margin: float,
        spacing: float,
        backfill: bool,
    ) -> LayoutSelection:
        """Plan both orientations and rank them.

        Args:
            sheet: Sheet dimensions in mm.
            piece: Piece dimensions in mm as entered (normal orientation).
            margin: Clearance from every sheet edge in mm.
            spacing: Kerf between neighbouring pieces in mm.
            backfill: Whether leftover strips get rotated backfill.

        Returns:
            LayoutSelection with the chosen and the alternate layout, each
            tagged with its orientation.
        """
        normal = self.planner.plan(sheet, piece, margin, spacing, backfill)
        rotated = self.planner.plan(sheet, piece.swapped(), margin, spacing, backfill)

        normal = replace(normal, chosen_orientation=Orientation.NORMAL)
        rotated = replace(rotated, chosen_orientation=Orientation.ROTATED)

        if prefers_rotated(normal, rotated):
            selection = LayoutSelection(chosen=rotated, alternate=normal)
        else:
            selection = LayoutSelection(chosen=normal, alternate=rotated)

        logger.debug(
            "Chose %s orientation: %d pieces (%.2f%% waste) vs %d pieces (%.2f%% waste)",
            selection.orientation.value,
            selection.chosen.total_count,
            selection.chosen.waste_percent,
            selection.alternate.total_count,
            selection.alternate.waste_percent,
        )
        return selection

    def select(
        self,
        sheet: Sheet,
        piece: Piece,
        margin: float,
        spacing: float,
        backfill: bool,
    ) -> LayoutResult:
        """Return only the chosen layout.

        See ``compare`` for the arguments.
        """
        return self.compare(sheet, piece, margin, spacing, backfill).chosen

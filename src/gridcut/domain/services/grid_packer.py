"""Uniform grid placement of identical rectangles inside a region."""

from __future__ import annotations

import logging
import math

from gridcut.domain.value_objects import Placement, Strip

logger = logging.getLogger(__name__)

# Tolerance added before flooring a fit count; 0.3 / 0.1 must count 3.
EPSILON = 1e-9


def fit_count(extent: float, piece_size: float, spacing: float) -> int:
    """Number of pieces of ``piece_size`` that fit along ``extent``.

    Each pair of neighbouring pieces is separated by ``spacing``; no
    spacing is needed after the last piece.

    Args:
        extent: Available length in mm.
        piece_size: Piece length along the same axis in mm.
        spacing: Gap between neighbouring pieces in mm.

    Returns:
        The piece count, 0 when the piece size is not positive.
    """
    if piece_size <= 0 or extent <= 0:
        return 0
    pitch = piece_size + spacing
    if pitch <= 0:
        return 0
    return max(0, math.floor((extent + spacing + EPSILON) / pitch))


class GridPacker:
    """Places a row-major grid of identical pieces inside a region.

    The packer is stateless; one instance can serve any number of calls.
    """

    def fit_counts(
        self,
        region: Strip | None,
        piece_width: float,
        piece_height: float,
        spacing: float,
    ) -> tuple[int, int]:
        """Columns and rows of the grid that ``pack`` would produce.

        Args:
            region: Region to fill, or None.
            piece_width: Piece width in mm.
            piece_height: Piece height in mm.
            spacing: Gap between neighbouring pieces in mm.

        Returns:
            Tuple of (columns, rows); (0, 0) for a missing or empty region.
        """
        if region is None or region.is_empty:
            return (0, 0)
        return (
            fit_count(region.width, piece_width, spacing),
            fit_count(region.height, piece_height, spacing),
        )

    def pack(
        self,
        region: Strip | None,
        piece_width: float,
        piece_height: float,
        spacing: float,
        rotated: bool = False,
    ) -> tuple[Placement, ...]:
        """Fill a region with a uniform grid of pieces.

        Pieces are emitted row by row, top to bottom, left to right within
        a row, so the output order is deterministic.

        Args:
            region: Region to fill, or None.
            piece_width: Piece width in mm.
            piece_height: Piece height in mm.
            spacing: Gap between neighbouring pieces in mm.
            rotated: Tag applied to every emitted placement.

        Returns:
            Tuple of placements; empty when nothing fits.
        """
        columns, rows = self.fit_counts(region, piece_width, piece_height, spacing)
        if columns == 0 or rows == 0:
            return ()

        assert region is not None
        pitch_x = piece_width + spacing
        pitch_y = piece_height + spacing

        placements = tuple(
            Placement(
                x=region.x + ix * pitch_x,
                y=region.y + iy * pitch_y,
                width=piece_width,
                height=piece_height,
                rotated=rotated,
            )
            for iy in range(rows)
            for ix in range(columns)
        )

        logger.debug(
            "Packed %dx%d grid of %sx%s into %sx%s region at (%s, %s)",
            columns,
            rows,
            piece_width,
            piece_height,
            region.width,
            region.height,
            region.x,
            region.y,
        )
        return placements

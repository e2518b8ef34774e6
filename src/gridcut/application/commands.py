"""Application commands (use cases) for sheet layout computation."""

from __future__ import annotations

import logging

from gridcut.domain.services import LayoutSelector

from .dtos import DEFAULT_RENDER_LIMIT, LayoutInput, LayoutOutput

logger = logging.getLogger(__name__)


class ComputeLayoutCommand:
    """Command to compute the best single-sheet layout for a piece size.

    The command is stateless between calls; front ends invoke it again
    whenever an input changes.
    """

    def __init__(self, selector: LayoutSelector | None = None) -> None:
        self.selector = selector or LayoutSelector()

    def execute(
        self,
        layout_input: LayoutInput,
        render_limit: int = DEFAULT_RENDER_LIMIT,
    ) -> LayoutOutput:
        """Execute the layout command.

        Args:
            layout_input: Sheet, piece, margin and spacing in a display unit.
            render_limit: Maximum number of pieces renderers should draw.

        Returns:
            LayoutOutput with the selection, or with ``errors`` populated
            when the input is invalid.
        """
        errors = layout_input.validate()
        if errors:
            logger.debug("Rejected layout input: %s", "; ".join(errors))
            return LayoutOutput(
                selection=None,
                unit=layout_input.unit,
                render_limit=render_limit,
                errors=errors,
            )

        canonical = layout_input.to_canonical()
        selection = self.selector.compare(
            canonical.sheet,
            canonical.piece,
            canonical.margin,
            canonical.spacing,
            canonical.backfill,
        )

        logger.info(
            "Layout %sx%s mm on %sx%s mm sheet: %d pieces, %.2f%% waste (%s)",
            canonical.piece.width,
            canonical.piece.height,
            canonical.sheet.width,
            canonical.sheet.height,
            selection.chosen.total_count,
            selection.chosen.waste_percent,
            selection.orientation.value,
        )

        return LayoutOutput(
            selection=selection,
            unit=layout_input.unit,
            render_limit=render_limit,
        )

"""JSON exporter for layout results.

The document carries the inputs, the chosen layout with every placement
and strip, and a summary of the rejected orientation. Lengths are in
millimetres; the display unit is recorded for consumers that convert.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from gridcut.application.units import CANONICAL_UNIT, Unit
from gridcut.domain.value_objects import (
    LayoutResult,
    Orientation,
    Piece,
    Placement,
    Strip,
)
from gridcut.infrastructure.exporters.base import ExporterRegistry, require_selection

if TYPE_CHECKING:
    from gridcut.application.dtos import LayoutOutput

logger = logging.getLogger(__name__)

SCHEMA_VERSION = "1.0"


def strip_to_dict(strip: Strip | None) -> dict[str, float] | None:
    if strip is None:
        return None
    return {"x": strip.x, "y": strip.y, "width": strip.width, "height": strip.height}


def placement_to_dict(placement: Placement) -> dict[str, Any]:
    return {
        "x": placement.x,
        "y": placement.y,
        "width": placement.width,
        "height": placement.height,
        "rotated": placement.rotated,
    }


def result_summary(result: LayoutResult) -> dict[str, Any]:
    """Counts, waste and orientation of a layout without its placements."""
    return {
        "orientation": (
            result.chosen_orientation.value
            if result.chosen_orientation is not None
            else None
        ),
        "piece": {"width": result.piece.width, "height": result.piece.height},
        "fit_count_x": result.fit_count_x,
        "fit_count_y": result.fit_count_y,
        "primary_count": result.primary_count,
        "rotated_right_count": result.rotated_right_count,
        "rotated_bottom_count": result.rotated_bottom_count,
        "total_count": result.total_count,
        "leftover_width": result.leftover_width,
        "leftover_height": result.leftover_height,
        "waste_area": result.waste_area,
        "waste_percent": result.waste_percent,
    }


def result_to_dict(result: LayoutResult) -> dict[str, Any]:
    """Full layout including placements and strips."""
    data = result_summary(result)
    data["right_strip"] = strip_to_dict(result.right_strip)
    data["bottom_strip"] = strip_to_dict(result.bottom_strip)
    data["placements"] = [placement_to_dict(p) for p in result.placements]
    return data


def entered_piece(output: LayoutOutput) -> Piece:
    """The piece as the user entered it, whichever orientation won."""
    chosen = output.chosen
    if chosen.chosen_orientation is Orientation.ROTATED:
        return chosen.piece.swapped()
    return chosen.piece


@ExporterRegistry.register("json")
class JsonLayoutExporter:
    """Exports the chosen layout and the alternate summary as JSON.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"
    media_type: ClassVar[str] = "application/json"

    def __init__(self, indent: int = 2, include_placements: bool = True) -> None:
        self.indent = indent
        self.include_placements = include_placements

    def export(self, output: LayoutOutput, path: Path) -> None:
        content = self.export_string(output)
        path.write_text(content, encoding="utf-8")
        logger.info("Exported layout JSON to %s", path)

    def export_string(self, output: LayoutOutput) -> str:
        return json.dumps(self.build(output), indent=self.indent)

    def build(self, output: LayoutOutput) -> dict[str, Any]:
        """Build the JSON-compatible document for ``output``."""
        require_selection(output, self.format_name)
        chosen = output.chosen
        entered = entered_piece(output)
        chosen_data = (
            result_to_dict(chosen)
            if self.include_placements
            else result_summary(chosen)
        )
        return {
            "schema_version": SCHEMA_VERSION,
            "unit": CANONICAL_UNIT,
            "display_unit": Unit(output.unit).value,
            "input": {
                "sheet": {"width": chosen.sheet.width, "height": chosen.sheet.height},
                "piece": {"width": entered.width, "height": entered.height},
                "margin": chosen.margin,
                "spacing": chosen.spacing,
                "backfill": chosen.backfill,
            },
            "chosen": chosen_data,
            "alternate": result_summary(output.alternate),
        }

"""Text formatters for layout results."""

from __future__ import annotations

from gridcut.application.dtos import LayoutOutput
from gridcut.application.units import Unit, area_to_display, to_display
from gridcut.domain.value_objects import LayoutResult, Strip


class LayoutSummaryFormatter:
    """Formats a layout output as a plain-text report in the display unit."""

    def format(self, output: LayoutOutput) -> str:
        """Format the chosen layout in detail and the alternate in one line."""
        if not output.is_valid:
            return "\n".join(["LAYOUT ERRORS", *(f"  - {e}" for e in output.errors)])

        unit = Unit(output.unit)
        chosen = output.chosen
        alternate = output.alternate

        lines = [
            "SHEET LAYOUT",
            "=" * 60,
            f"Sheet:       {self._size(chosen.sheet.width, chosen.sheet.height, unit)}",
            f"Piece:       {self._size(chosen.piece.width, chosen.piece.height, unit)}"
            f" ({self._orientation(chosen)})",
            f"Margin:      {to_display(chosen.margin, unit)} {unit.value}",
            f"Spacing:     {to_display(chosen.spacing, unit)} {unit.value}",
            f"Backfill:    {'on' if chosen.backfill else 'off'}",
            "-" * 60,
            f"Grid:        {chosen.fit_count_x} x {chosen.fit_count_y} "
            f"= {chosen.primary_count}",
            f"Rotated:     {chosen.rotated_right_count} right, "
            f"{chosen.rotated_bottom_count} bottom",
            f"Total:       {chosen.total_count} pieces",
            f"Waste:       {area_to_display(chosen.waste_area, unit):.2f} sq {unit.value}"
            f" ({chosen.waste_percent:.2f}%)",
            f"Right strip: {self._strip(chosen.right_strip, unit)}",
            f"Bottom strip: {self._strip(chosen.bottom_strip, unit)}",
            "-" * 60,
            f"Alternative ({self._orientation(alternate)}): "
            f"{alternate.total_count} pieces, {alternate.waste_percent:.2f}% waste",
        ]
        return "\n".join(lines)

    def _size(self, width: float, height: float, unit: Unit) -> str:
        return f"{to_display(width, unit)} x {to_display(height, unit)} {unit.value}"

    def _strip(self, strip: Strip | None, unit: Unit) -> str:
        if strip is None:
            return "none"
        return self._size(strip.width, strip.height, unit)

    def _orientation(self, result: LayoutResult) -> str:
        if result.chosen_orientation is None:
            return "unranked"
        return result.chosen_orientation.value

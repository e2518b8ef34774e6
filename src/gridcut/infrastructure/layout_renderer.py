"""Sheet layout rendering.

This module provides SVG and ASCII previews of a computed layout showing
the margin, the primary grid, rotated backfill pieces, the leftover strips
and the cut lines through the kerf between grid rows and columns.
"""

from __future__ import annotations

import logging

from gridcut.application.dtos import DEFAULT_RENDER_LIMIT
from gridcut.application.units import Unit, to_display
from gridcut.domain.value_objects import LayoutResult, Placement, Strip

logger = logging.getLogger(__name__)


def stroke_scale(result: LayoutResult) -> float:
    """Stroke width in mm proportional to the smaller sheet side."""
    min_dim = min(result.sheet.width, result.sheet.height)
    return max(0.12, min(3.0, min_dim / 200))


def cut_line_positions(result: LayoutResult) -> tuple[list[float], list[float]]:
    """Return x positions of vertical and y positions of horizontal cuts.

    Cuts run through the middle of the kerf between neighbouring columns
    and rows of the primary grid.
    """
    piece, s, m = result.piece, result.spacing, result.margin
    xs = [
        m + ix * (piece.width + s) - s / 2 for ix in range(1, result.fit_count_x)
    ]
    ys = [
        m + iy * (piece.height + s) - s / 2 for iy in range(1, result.fit_count_y)
    ]
    return xs, ys


def _fmt(value: float) -> str:
    return f"{value:.3f}".rstrip("0").rstrip(".") or "0"


class LayoutRenderer:
    """Renders layout previews in SVG and ASCII form.

    All SVG coordinates are in millimetres; the document's ``viewBox``
    maps them to whatever size the viewer chooses.

    Attributes:
        render_limit: Maximum number of pieces drawn.
        primary_fill: Fill color for pieces in the entered orientation.
        primary_stroke: Outline color for those pieces.
        rotated_fill: Fill color for backfill pieces.
        rotated_stroke: Outline color for backfill pieces.
        strip_fill: Fill color for leftover strips.
        strip_opacity: Opacity of leftover strips.
        cut_line_color: Color of the dashed cut lines.
        show_cut_lines: Whether to draw cut lines.
    """

    def __init__(
        self,
        render_limit: int = DEFAULT_RENDER_LIMIT,
        primary_fill: str = "#60a5fa",
        primary_stroke: str = "#1e3a8a",
        rotated_fill: str = "#34d399",
        rotated_stroke: str = "#065f46",
        strip_fill: str = "#fecaca",
        strip_opacity: float = 0.35,
        cut_line_color: str = "#ef4444",
        show_cut_lines: bool = True,
    ) -> None:
        self.render_limit = render_limit
        self.primary_fill = primary_fill
        self.primary_stroke = primary_stroke
        self.rotated_fill = rotated_fill
        self.rotated_stroke = rotated_stroke
        self.strip_fill = strip_fill
        self.strip_opacity = strip_opacity
        self.cut_line_color = cut_line_color
        self.show_cut_lines = show_cut_lines

    def visible_placements(self, result: LayoutResult) -> tuple[Placement, ...]:
        """Placements that fit under the render limit, in placement order."""
        if len(result.placements) > self.render_limit:
            logger.warning(
                "Rendering %d of %d pieces (render limit)",
                self.render_limit,
                len(result.placements),
            )
            return result.placements[: self.render_limit]
        return result.placements

    def header_text(self, result: LayoutResult, shown: int | None = None) -> str:
        """One-line caption: count, waste, orientation and truncation."""
        orientation = (
            result.chosen_orientation.value
            if result.chosen_orientation is not None
            else "unranked"
        )
        text = (
            f"{result.total_count} pieces - {result.waste_percent:.2f}% waste - "
            f"{orientation}"
        )
        if shown is not None and shown < len(result.placements):
            text += f" (showing {shown} of {len(result.placements)})"
        return text

    def render_svg(self, result: LayoutResult, unit: Unit | str = Unit.MM) -> str:
        """Generate an SVG drawing of one layout.

        Args:
            result: Layout to draw (millimetres).
            unit: Display unit for the dimension caption.

        Returns:
            SVG document as a string.
        """
        sheet = result.sheet
        stroke = stroke_scale(result)
        header_height = max(sheet.width, sheet.height, 1.0) * 0.05
        font_size = header_height * 0.6
        total_height = sheet.height + header_height
        placements = self.visible_placements(result)

        caption = (
            f"{to_display(sheet.width, unit)} x {to_display(sheet.height, unit)} "
            f"{Unit(unit).value} - {self.header_text(result, len(placements))}"
        )

        parts: list[str] = [
            f'<svg xmlns="http://www.w3.org/2000/svg" '
            f'viewBox="0 {_fmt(-header_height)} {_fmt(sheet.width)} '
            f'{_fmt(total_height)}" '
            f'width="{_fmt(sheet.width)}mm" height="{_fmt(total_height)}mm">',
            "",
            "  <!-- Header -->",
            f'  <text x="0" y="{_fmt(-header_height * 0.3)}" '
            f'font-family="sans-serif" font-size="{_fmt(font_size)}" '
            f'fill="#111827">{caption}</text>',
            "",
            "  <!-- Sheet -->",
            f'  <rect x="0" y="0" width="{_fmt(sheet.width)}" '
            f'height="{_fmt(sheet.height)}" fill="#ffffff" stroke="#111827" '
            f'stroke-width="{_fmt(stroke)}"/>',
        ]

        if result.margin > 0:
            parts.append("  <!-- Usable area (inside margin) -->")
            parts.append(
                f'  <rect x="{_fmt(result.margin)}" y="{_fmt(result.margin)}" '
                f'width="{_fmt(max(0.0, sheet.width - 2 * result.margin))}" '
                f'height="{_fmt(max(0.0, sheet.height - 2 * result.margin))}" '
                f'fill="none" stroke="#9ca3af" stroke-width="{_fmt(stroke)}" '
                f'stroke-dasharray="{_fmt(stroke * 4)},{_fmt(stroke * 4)}"/>'
            )

        parts.append("")
        parts.append("  <!-- Leftover strips -->")
        for strip in (result.right_strip, result.bottom_strip):
            if strip is not None:
                parts.append(self._render_strip(strip))

        parts.append("")
        parts.append("  <!-- Pieces -->")
        for placement in placements:
            parts.append(self._render_piece(placement, stroke))

        if self.show_cut_lines:
            parts.append("")
            parts.append("  <!-- Cut lines -->")
            parts.extend(self._render_cut_lines(result, stroke))

        parts.append("")
        parts.append("</svg>")
        return "\n".join(parts)

    def _render_strip(self, strip: Strip) -> str:
        return (
            f'  <rect class="strip" x="{_fmt(strip.x)}" y="{_fmt(strip.y)}" '
            f'width="{_fmt(strip.width)}" height="{_fmt(strip.height)}" '
            f'fill="{self.strip_fill}" fill-opacity="{self.strip_opacity}"/>'
        )

    def _render_piece(self, placement: Placement, stroke: float) -> str:
        if placement.rotated:
            fill, outline, css = self.rotated_fill, self.rotated_stroke, "rotated"
        else:
            fill, outline, css = self.primary_fill, self.primary_stroke, "piece"
        return (
            f'  <rect class="{css}" x="{_fmt(placement.x)}" y="{_fmt(placement.y)}" '
            f'width="{_fmt(placement.width)}" height="{_fmt(placement.height)}" '
            f'fill="{fill}" stroke="{outline}" stroke-width="{_fmt(stroke)}"/>'
        )

    def _render_cut_lines(self, result: LayoutResult, stroke: float) -> list[str]:
        xs, ys = cut_line_positions(result)
        if not xs and not ys:
            return []
        m = result.margin
        used_w, used_h = result.grid_width, result.grid_height
        dash = f'stroke-dasharray="{_fmt(stroke * 3)},{_fmt(stroke * 2)}"'
        style = (
            f'class="cut" stroke="{self.cut_line_color}" '
            f'stroke-width="{_fmt(stroke)}" {dash}'
        )
        lines = [
            f'  <line x1="{_fmt(x)}" y1="{_fmt(m)}" x2="{_fmt(x)}" '
            f'y2="{_fmt(m + used_h)}" {style}/>'
            for x in xs
        ]
        lines.extend(
            f'  <line x1="{_fmt(m)}" y1="{_fmt(y)}" x2="{_fmt(m + used_w)}" '
            f'y2="{_fmt(y)}" {style}/>'
            for y in ys
        )
        return lines

    def render_ascii(self, result: LayoutResult, width: int = 80) -> str:
        """Generate a text preview of one layout for terminal display.

        Primary pieces are drawn with ``#``, rotated pieces with ``@`` and
        leftover strips with ``.``.

        Args:
            result: Layout to draw.
            width: Terminal width in characters (default 80).

        Returns:
            ASCII string representation of the layout.
        """
        sheet = result.sheet
        usable_width = max(width - 2, 10)
        if sheet.width <= 0 or sheet.height <= 0:
            return self.header_text(result)

        scale_x = usable_width / sheet.width
        # 0.5 for the character aspect ratio
        grid_height = max(int(usable_width * sheet.height / sheet.width * 0.5), 5)
        scale_y = grid_height / sheet.height

        grid = [[" " for _ in range(usable_width)] for _ in range(grid_height)]

        for strip in (result.right_strip, result.bottom_strip):
            if strip is not None:
                self._fill_ascii(
                    grid, strip.x, strip.y, strip.right, strip.bottom,
                    scale_x, scale_y, ".",
                )

        placements = self.visible_placements(result)
        for p in placements:
            self._fill_ascii(
                grid, p.x, p.y, p.right, p.bottom,
                scale_x, scale_y, "@" if p.rotated else "#",
            )

        lines = [self.header_text(result, len(placements))]
        lines.append("+" + "-" * usable_width + "+")
        for row in grid:
            lines.append("|" + "".join(row) + "|")
        lines.append("+" + "-" * usable_width + "+")
        lines.append("# piece   @ rotated   . leftover strip")
        return "\n".join(lines)

    def _fill_ascii(
        self,
        grid: list[list[str]],
        x1: float,
        y1: float,
        x2: float,
        y2: float,
        scale_x: float,
        scale_y: float,
        char: str,
    ) -> None:
        grid_height = len(grid)
        grid_width = len(grid[0]) if grid else 0
        col1 = max(0, min(int(x1 * scale_x), grid_width - 1))
        row1 = max(0, min(int(y1 * scale_y), grid_height - 1))
        col2 = max(col1 + 1, min(int(x2 * scale_x), grid_width))
        row2 = max(row1 + 1, min(int(y2 * scale_y), grid_height))
        for row in range(row1, row2):
            for col in range(col1, col2):
                grid[row][col] = char

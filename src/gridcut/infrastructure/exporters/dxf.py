"""DXF format exporter for sheet layouts.

Generates 2D DXF files (R2010 format) in millimetres for CNC and CAD
tools. Sheet coordinates grow downwards; DXF grows upwards, so every Y
coordinate is flipped against the sheet height.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar, cast

import ezdxf
from ezdxf import units

from gridcut.domain.value_objects import LayoutResult
from gridcut.infrastructure.exporters.base import ExporterRegistry, require_selection
from gridcut.infrastructure.layout_renderer import cut_line_positions

if TYPE_CHECKING:
    from ezdxf.document import Drawing
    from ezdxf.layouts import Modelspace

    from gridcut.application.dtos import LayoutOutput


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "SHEET": {"color": 7, "linetype": "CONTINUOUS"},  # White - sheet outline
    "MARGIN": {"color": 8, "linetype": "DASHED"},  # Gray - usable area
    "PIECES": {"color": 5, "linetype": "CONTINUOUS"},  # Blue - primary grid
    "ROTATED": {"color": 3, "linetype": "CONTINUOUS"},  # Green - backfill
    "STRIPS": {"color": 1, "linetype": "CONTINUOUS"},  # Red - leftover strips
    "CUTS": {"color": 1, "linetype": "DASHED"},  # Red - kerf centre lines
}


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports the chosen layout to DXF.

    Each rectangle is a closed LWPOLYLINE on the layer for its kind.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"
    media_type: ClassVar[str] = "application/dxf"

    def __init__(self, include_cut_lines: bool = True) -> None:
        self.include_cut_lines = include_cut_lines

    def export(self, output: LayoutOutput, path: Path) -> None:
        require_selection(output, self.format_name)
        doc = self.build_document(output.chosen)
        doc.saveas(path)
        logger.info("Exported layout DXF to %s", path)

    def export_string(self, output: LayoutOutput) -> str:
        require_selection(output, self.format_name)
        doc = self.build_document(output.chosen)
        stream = StringIO()
        doc.write(stream)
        return stream.getvalue()

    def build_document(self, result: LayoutResult) -> Drawing:
        """Create a DXF document containing one layout."""
        doc = ezdxf.new("R2010")
        doc.units = units.MM
        self._setup_layers(doc)
        msp = doc.modelspace()

        sheet = result.sheet
        self._draw_rect(msp, 0.0, 0.0, sheet.width, sheet.height, "SHEET", sheet.height)

        if result.margin > 0:
            self._draw_rect(
                msp,
                result.margin,
                result.margin,
                max(0.0, sheet.width - 2 * result.margin),
                max(0.0, sheet.height - 2 * result.margin),
                "MARGIN",
                sheet.height,
            )

        for strip in (result.right_strip, result.bottom_strip):
            if strip is not None:
                self._draw_rect(
                    msp, strip.x, strip.y, strip.width, strip.height,
                    "STRIPS", sheet.height,
                )

        for p in result.placements:
            layer = "ROTATED" if p.rotated else "PIECES"
            self._draw_rect(msp, p.x, p.y, p.width, p.height, layer, sheet.height)

        if self.include_cut_lines:
            self._draw_cut_lines(msp, result)

        return doc

    def _setup_layers(self, doc: Drawing) -> None:
        for name, props in LAYERS.items():
            layer = doc.layers.add(name, color=cast(int, props["color"]))
            if props["linetype"] == "DASHED":
                if "DASHED" not in doc.linetypes:
                    doc.linetypes.add(
                        "DASHED",
                        pattern=[0.5, 0.25, -0.25],
                        description="Dashed line",
                    )
                layer.dxf.linetype = "DASHED"

    def _draw_rect(
        self,
        msp: Modelspace,
        x: float,
        y: float,
        width: float,
        height: float,
        layer: str,
        sheet_height: float,
    ) -> None:
        top = sheet_height - y
        bottom = sheet_height - (y + height)
        points = [(x, bottom), (x + width, bottom), (x + width, top), (x, top)]
        msp.add_lwpolyline(points, close=True, dxfattribs={"layer": layer})

    def _draw_cut_lines(self, msp: Modelspace, result: LayoutResult) -> None:
        xs, ys = cut_line_positions(result)
        m = result.margin
        h = result.sheet.height
        used_w, used_h = result.grid_width, result.grid_height
        for x in xs:
            msp.add_line((x, h - m), (x, h - m - used_h), dxfattribs={"layer": "CUTS"})
        for y in ys:
            msp.add_line((m, h - y), (m + used_w, h - y), dxfattribs={"layer": "CUTS"})

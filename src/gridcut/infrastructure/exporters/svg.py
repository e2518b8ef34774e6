"""SVG exporter wrapping LayoutRenderer."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from gridcut.infrastructure.exporters.base import ExporterRegistry, require_selection
from gridcut.infrastructure.layout_renderer import LayoutRenderer

if TYPE_CHECKING:
    from gridcut.application.dtos import LayoutOutput

logger = logging.getLogger(__name__)


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the chosen sheet layout.

    The output's render limit caps the number of pieces drawn.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"
    media_type: ClassVar[str] = "image/svg+xml"

    def __init__(self, show_cut_lines: bool = True) -> None:
        self.show_cut_lines = show_cut_lines

    def export(self, output: LayoutOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info("Exported layout SVG to %s", path)

    def export_string(self, output: LayoutOutput) -> str:
        require_selection(output, self.format_name)
        renderer = LayoutRenderer(
            render_limit=output.render_limit,
            show_cut_lines=self.show_cut_lines,
        )
        return renderer.render_svg(output.chosen, output.unit)

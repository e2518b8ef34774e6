"""Exporter framework for layout outputs.

Registered exporters:
- dxf: DXF drawing for CAD and CNC tools
- json: Full layout document with placements and strips
- svg: Sheet preview drawing

Usage:
    from gridcut.infrastructure.exporters import ExportManager, ExporterRegistry

    formats = ExporterRegistry.available_formats()
    svg = ExporterRegistry.get("svg")().export_string(layout_output)

    manager = ExportManager(output_dir=Path("./output"))
    manager.export_all(["svg", "json"], layout_output, project_name="flyers")
"""

from gridcut.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
    require_selection,
)

# Import exporters to trigger registration
from gridcut.infrastructure.exporters.dxf import DxfExporter
from gridcut.infrastructure.exporters.json_exporter import (
    JsonLayoutExporter,
    result_summary,
    result_to_dict,
)
from gridcut.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "JsonLayoutExporter",
    "SvgExporter",
    "require_selection",
    "result_summary",
    "result_to_dict",
]

"""Infrastructure layer - rendering, formatting and export."""

from .formatters import LayoutSummaryFormatter
from .layout_renderer import LayoutRenderer

__all__ = [
    "LayoutRenderer",
    "LayoutSummaryFormatter",
]

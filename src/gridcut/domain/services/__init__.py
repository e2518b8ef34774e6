"""Layout engine services.

- GridPacker: uniform grid of identical pieces inside a region
- OrientationPlanner: primary grid, leftover strips and rotated backfill
  for one piece orientation
- LayoutSelector: compares both orientations and keeps the better one
"""

from gridcut.domain.services.grid_packer import EPSILON, GridPacker, fit_count
from gridcut.domain.services.layout_selector import LayoutSelector, prefers_rotated
from gridcut.domain.services.orientation_planner import OrientationPlanner

__all__ = [
    "EPSILON",
    "GridPacker",
    "LayoutSelector",
    "OrientationPlanner",
    "fit_count",
    "prefers_rotated",
]

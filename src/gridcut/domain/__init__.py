"""Domain layer: value objects and the layout engine."""

from gridcut.domain.services import (
    EPSILON,
    GridPacker,
    LayoutSelector,
    OrientationPlanner,
)
from gridcut.domain.value_objects import (
    LayoutResult,
    LayoutSelection,
    Orientation,
    Piece,
    Placement,
    Sheet,
    Strip,
)

__all__ = [
    "EPSILON",
    "GridPacker",
    "LayoutResult",
    "LayoutSelection",
    "LayoutSelector",
    "Orientation",
    "OrientationPlanner",
    "Piece",
    "Placement",
    "Sheet",
    "Strip",
]

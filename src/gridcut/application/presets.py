"""Stock sheet presets and default inputs.

Preset dimensions are stored in the unit they are sold in (inches) and
converted to millimetres when applied.
"""

from __future__ import annotations

from dataclasses import dataclass

from gridcut.application.units import Unit, to_mm


@dataclass(frozen=True)
class SheetPreset:
    """A named stock sheet size.

    Attributes:
        label: Display label, e.g. "28 × 22".
        width: Sheet width in ``unit``.
        height: Sheet height in ``unit``.
        unit: Unit of width and height.
    """

    label: str
    width: float
    height: float
    unit: Unit = Unit.INCH

    @property
    def width_mm(self) -> float:
        return to_mm(self.width, self.unit)

    @property
    def height_mm(self) -> float:
        return to_mm(self.height, self.unit)


SHEET_PRESETS: tuple[SheetPreset, ...] = (
    SheetPreset("28 × 22", 28, 22),
    SheetPreset("44 × 28", 44, 28),
    SheetPreset("30 × 20", 30, 20),
    SheetPreset("36 × 23", 36, 23),
    SheetPreset("43 × 31", 43, 31),
    SheetPreset("44 × 29", 44, 29),
    SheetPreset("35.5 × 25", 35.5, 25),
    SheetPreset("37 × 25", 37, 25),
)

# Defaults of the interactive tool, in inches.
DEFAULT_UNIT = Unit.INCH
DEFAULT_SHEET_WIDTH = 25.0
DEFAULT_SHEET_HEIGHT = 35.5
DEFAULT_PIECE_WIDTH = 5.0
DEFAULT_PIECE_HEIGHT = 7.0
DEFAULT_MARGIN = 0.0
DEFAULT_SPACING = 0.0
DEFAULT_BACKFILL = True


class PresetNotFoundError(KeyError):
    """Raised when a preset name or index does not exist."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        available = ", ".join(p.label for p in SHEET_PRESETS)
        return f"Unknown sheet preset '{self.name}'. Available: {available}"


def _normalize_label(label: str) -> str:
    return label.replace("×", "x").replace(" ", "").lower()


def get_preset(name: str | int) -> SheetPreset:
    """Look up a preset by 0-based index or by label.

    Labels match loosely: "28x22", "28 x 22" and "28 × 22" are the same
    preset.

    Raises:
        PresetNotFoundError: If nothing matches.
    """
    if isinstance(name, int) or str(name).isdigit():
        index = int(name)
        if 0 <= index < len(SHEET_PRESETS):
            return SHEET_PRESETS[index]
        raise PresetNotFoundError(str(name))

    wanted = _normalize_label(str(name))
    for preset in SHEET_PRESETS:
        if _normalize_label(preset.label) == wanted:
            return preset
    raise PresetNotFoundError(str(name))

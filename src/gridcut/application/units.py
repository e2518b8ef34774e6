"""Conversion between display units and the canonical millimetre unit.

The layout engine only ever sees millimetres. Everything a user types or
reads passes through this module.
"""

from __future__ import annotations

import re
from enum import Enum

CANONICAL_UNIT = "mm"


class Unit(str, Enum):
    """Length units accepted from users."""

    MM = "mm"
    CM = "cm"
    INCH = "inch"
    METER = "meter"

    @property
    def factor(self) -> float:
        """Millimetres per one of this unit."""
        return UNIT_FACTORS[self]


UNIT_FACTORS: dict[Unit, float] = {
    Unit.MM: 1.0,
    Unit.CM: 10.0,
    Unit.INCH: 25.4,
    Unit.METER: 1000.0,
}

_NON_NUMERIC = re.compile(r"[^0-9.]")
_TRAILING_ZEROS = re.compile(r"(?:\.0+|(\.\d+?)0+)$")


def sanitize_number_input(value: object) -> str:
    """Reduce raw text input to an unsigned decimal literal.

    Every character other than digits and dots is dropped. When more than
    one dot remains, the first one is kept as the decimal separator and the
    others are removed.

    Examples:
        >>> sanitize_number_input("12,5 mm")
        '125'
        >>> sanitize_number_input("1.2.3")
        '1.23'
        >>> sanitize_number_input(None)
        ''
    """
    if value is None:
        return ""
    cleaned = _NON_NUMERIC.sub("", str(value))
    parts = cleaned.split(".")
    if len(parts) > 2:
        return parts[0] + "." + "".join(parts[1:])
    return cleaned


def _as_float(value: object) -> float:
    """Parse a number, treating anything unparsable as 0."""
    if isinstance(value, (int, float)):
        return float(value)
    try:
        return float(str(value))
    except ValueError:
        return 0.0


def to_mm(value: object, unit: Unit | str) -> float:
    """Convert a display-unit value to millimetres.

    Args:
        value: Number or numeric text in ``unit``.
        unit: Unit the value is expressed in.

    Returns:
        The value in millimetres; unparsable text converts to 0.
    """
    return _as_float(value) * Unit(unit).factor


def from_mm(mm_value: float, unit: Unit | str) -> float:
    """Convert millimetres to a display-unit number."""
    return mm_value / Unit(unit).factor


def to_display(mm_value: float, unit: Unit | str) -> str:
    """Format a millimetre value for display in ``unit``.

    Whole numbers are shown without decimals; other values are rounded to
    three decimals with trailing zeros removed.

    Examples:
        >>> to_display(635.0, "inch")
        '25'
        >>> to_display(901.7, "inch")
        '35.5'
    """
    value = from_mm(mm_value, unit)
    if float(value).is_integer():
        return str(int(value))
    return _TRAILING_ZEROS.sub(r"\1", f"{value:.3f}")


def parse_length(raw: object, unit: Unit | str) -> float:
    """Sanitize raw user input and convert it to millimetres."""
    return to_mm(sanitize_number_input(raw), unit)


def area_to_display(mm2_value: float, unit: Unit | str) -> float:
    """Convert an area in square millimetres to square ``unit``."""
    factor = Unit(unit).factor
    return mm2_value / (factor * factor)

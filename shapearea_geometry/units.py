"""
Measurement Units
=================

Conversion between internal pixel units and user-facing units.

Internal coordinates are pixels at a fixed screen density (96 DPI).
Areas convert with the square of the linear factor.
"""

import math
from enum import Enum
from typing import Dict, List


DPI = 96


class MeasurementUnit(str, Enum):
    """User-facing measurement units."""

    PX = "px"
    CM = "cm"
    MM = "mm"
    IN = "in"


# Pixels per unit
UNIT_CONVERSION_FACTORS: Dict[MeasurementUnit, float] = {
    MeasurementUnit.PX: 1.0,
    MeasurementUnit.CM: DPI / 2.54,
    MeasurementUnit.MM: DPI / 25.4,
    MeasurementUnit.IN: float(DPI),
}

BASE_GRID_SIZES: Dict[MeasurementUnit, List[float]] = {
    MeasurementUnit.PX: [1, 5, 10, 20, 50, 100],
    MeasurementUnit.CM: [0.1, 0.5, 1, 2, 5, 10],
    MeasurementUnit.MM: [1, 2, 5, 10, 20, 50],
    MeasurementUnit.IN: [0.125, 0.25, 0.5, 1, 2, 5],
}

MAJOR_GRID_INTERVALS: Dict[MeasurementUnit, int] = {
    MeasurementUnit.PX: 5,
    MeasurementUnit.CM: 1,
    MeasurementUnit.MM: 10,
    MeasurementUnit.IN: 1,
}

UNIT_LABELS: Dict[MeasurementUnit, str] = {
    MeasurementUnit.PX: "pixels",
    MeasurementUnit.CM: "centimeters",
    MeasurementUnit.MM: "millimeters",
    MeasurementUnit.IN: "inches",
}


def parse_unit(value) -> MeasurementUnit:
    """
    Parse a unit name ("px", "cm", "mm", "in").

    Raises:
        ValueError: If the unit is unknown
    """
    if isinstance(value, MeasurementUnit):
        return value
    try:
        return MeasurementUnit(str(value).lower())
    except ValueError:
        valid = ", ".join(u.value for u in MeasurementUnit)
        raise ValueError(f"Unknown measurement unit: {value!r}. Must be one of: {valid}")


def pixels_to_unit(pixels: float, unit: MeasurementUnit) -> float:
    return pixels / UNIT_CONVERSION_FACTORS[parse_unit(unit)]


def unit_to_pixels(value: float, unit: MeasurementUnit) -> float:
    return value * UNIT_CONVERSION_FACTORS[parse_unit(unit)]


def area_to_unit(area_px: float, unit: MeasurementUnit) -> float:
    """Convert an area in square pixels to square units."""
    factor = UNIT_CONVERSION_FACTORS[parse_unit(unit)]
    return area_px / (factor * factor)


def format_with_unit(value: float, unit: MeasurementUnit, precision: int = 2) -> str:
    """
    Format a value with its unit suffix.

    Example:
        >>> format_with_unit(12, MeasurementUnit.CM)
        '12.00 cm'
    """
    return f"{value:.{precision}f} {parse_unit(unit).value}"


def appropriate_grid_size(zoom_level: float, unit: MeasurementUnit) -> float:
    """
    Pick a grid size for the zoom level, returned in pixels.

    Higher zoom selects a coarser base size; the index is clamped to the
    available sizes for the unit.
    """
    unit = parse_unit(unit)
    sizes = BASE_GRID_SIZES[unit]
    index = max(0, min(math.floor(zoom_level / 0.5), len(sizes) - 1))
    return unit_to_pixels(sizes[index], unit)


def major_grid_interval(unit: MeasurementUnit) -> int:
    """Number of grid lines between major lines."""
    return MAJOR_GRID_INTERVALS[parse_unit(unit)]


def unit_label(unit: MeasurementUnit) -> str:
    return UNIT_LABELS[parse_unit(unit)]

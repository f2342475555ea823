"""
Coordinate Systems
==================

Conversion between canvas coordinates (origin top-left, Y down) and
mathematical coordinates (origin at canvas center, Y up), plus grid
snapping and distance helpers.

All functions are pure and return new Point instances.
"""

import math
from dataclasses import dataclass

from shapearea_geometry.shapes import Point
from shapearea_geometry.units import (
    MeasurementUnit,
    format_with_unit,
    parse_unit,
    pixels_to_unit,
    unit_to_pixels,
)


@dataclass(frozen=True)
class GridSettings:
    """
    Grid configuration.

    Attributes:
        grid_size: Grid cell size in internal units (pixels)
        unit: User-facing measurement unit
        show_grid: Whether the grid is displayed
        snap_to_grid: Whether points snap to grid lines
    """

    grid_size: float = 20.0
    unit: MeasurementUnit = MeasurementUnit.PX
    show_grid: bool = True
    snap_to_grid: bool = True

    def __post_init__(self):
        if self.grid_size <= 0:
            raise ValueError(f"grid_size must be > 0, got {self.grid_size}")
        object.__setattr__(self, "unit", parse_unit(self.unit))


def canvas_to_math(x: float, y: float, canvas_width: float, canvas_height: float) -> Point:
    center_x = canvas_width / 2
    center_y = canvas_height / 2
    return Point(x=x - center_x, y=-(y - center_y))


def math_to_canvas(x: float, y: float, canvas_width: float, canvas_height: float) -> Point:
    center_x = canvas_width / 2
    center_y = canvas_height / 2
    return Point(x=x + center_x, y=-y + center_y)


def snap_to_grid(value: float, grid_size: float) -> float:
    """Snap a coordinate to the nearest grid line."""
    # Half-up rounding
    return math.floor(value / grid_size + 0.5) * grid_size


def canvas_to_grid_point(
    x: float,
    y: float,
    canvas_width: float,
    canvas_height: float,
    grid_settings: GridSettings,
) -> Point:
    """Convert canvas coordinates to (optionally snapped) math coordinates."""
    math_point = canvas_to_math(x, y, canvas_width, canvas_height)

    if grid_settings.snap_to_grid:
        return Point(
            x=snap_to_grid(math_point.x, grid_settings.grid_size),
            y=snap_to_grid(math_point.y, grid_settings.grid_size),
        )

    return math_point


def grid_to_unit_coordinates(point: Point, grid_settings: GridSettings) -> Point:
    return Point(
        x=pixels_to_unit(point.x, grid_settings.unit),
        y=pixels_to_unit(point.y, grid_settings.unit),
    )


def unit_to_grid_coordinates(point: Point, grid_settings: GridSettings) -> Point:
    return Point(
        x=unit_to_pixels(point.x, grid_settings.unit),
        y=unit_to_pixels(point.y, grid_settings.unit),
    )


def format_point(point: Point, grid_settings: GridSettings, precision: int = 2) -> str:
    """
    Format a point in display units.

    Example:
        >>> format_point(Point(96, 0), GridSettings(unit="in"))
        '(1.00 in, 0.00 in)'
    """
    unit_point = grid_to_unit_coordinates(point, grid_settings)
    return (
        f"({format_with_unit(unit_point.x, grid_settings.unit, precision)}, "
        f"{format_with_unit(unit_point.y, grid_settings.unit, precision)})"
    )


def distance(p1: Point, p2: Point) -> float:
    return math.hypot(p2.x - p1.x, p2.y - p1.y)

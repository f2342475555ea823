"""
Shape Area Geometry
===================

Bounded Context: Shape validation and area computation.

Responsibilities:
- Shape representation (immutable)
- Validation rules per shape
- Area computation (rectangle, circle, Shoelace polygon)
- Unit and coordinate conversion helpers
- NO transport, NO state

Usage:

    from shapearea_geometry import Point, Rectangle, compute_area

    rect = Rectangle(top_left=Point(4, 3), bottom_right=Point(0, 0))
    compute_area(rect)  # 12
"""

from shapearea_geometry.shapes import (
    Point,
    Rectangle,
    Circle,
    Polygon,
    LegacyRectangle,
    Shape,
)
from shapearea_geometry.area import compute_area, compute_legacy_area
from shapearea_geometry.errors import (
    ShapeError,
    InvalidShapeError,
    InvalidRectangleError,
    InvalidCircleError,
    InvalidPolygonError,
    LegacyRectangleError,
)
from shapearea_geometry.units import MeasurementUnit, area_to_unit, parse_unit

__all__ = [
    # Shapes
    "Point",
    "Rectangle",
    "Circle",
    "Polygon",
    "LegacyRectangle",
    "Shape",
    # Computation
    "compute_area",
    "compute_legacy_area",
    # Errors
    "ShapeError",
    "InvalidShapeError",
    "InvalidRectangleError",
    "InvalidCircleError",
    "InvalidPolygonError",
    "LegacyRectangleError",
    # Units
    "MeasurementUnit",
    "area_to_unit",
    "parse_unit",
]

__version__ = "1.0.0"

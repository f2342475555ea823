"""
Area Computation Module
=======================

Stateless validate-then-measure logic over the closed Shape union.

Design:
- Pure functions (no state)
- Validation always runs before measurement
- Specific validation errors propagate verbatim
- A bare False from validate() maps to the generic InvalidShapeError
"""

from shapearea_geometry.errors import InvalidShapeError
from shapearea_geometry.shapes import Circle, LegacyRectangle, Number, Polygon, Rectangle, Shape

SHAPE_TYPES = (Rectangle, Circle, Polygon)


def compute_area(shape: Shape) -> Number:
    """
    Validate a shape and compute its area.

    Args:
        shape: Rectangle, Circle or Polygon

    Returns:
        Non-negative area

    Raises:
        InvalidShapeError: If the shape is invalid (subclass carries the reason)
        TypeError: If shape is not one of the supported variants
    """
    if not isinstance(shape, SHAPE_TYPES):
        raise TypeError(
            f"Unsupported shape type: {type(shape).__name__}. "
            f"Expected one of: {', '.join(t.__name__ for t in SHAPE_TYPES)}"
        )

    if not shape.validate():
        raise InvalidShapeError()

    return shape.area()


def compute_legacy_area(rectangle: LegacyRectangle) -> int:
    """
    Compute the area of a strictly ordered integer rectangle.

    Raises:
        LegacyRectangleError: If corners are not top-left/bottom-right ordered
    """
    return rectangle.area()

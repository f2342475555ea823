"""
Geometric Shapes Module
========================

Pure geometric representations - NO state, NO side effects.

Design:
- Immutable shapes (frozen dataclass pattern)
- Closed variant set: Rectangle, Circle, Polygon (plus the strict
  integer LegacyRectangle, which is not part of the Shape union)
- Each shape offers validate() and area()
- Thread-safe by design (immutability)
"""

import math
from dataclasses import dataclass
from numbers import Real
from typing import Tuple, Union

import numpy as np

from shapearea_geometry.errors import (
    InvalidCircleError,
    InvalidPolygonError,
    InvalidRectangleError,
    LegacyRectangleError,
)


Number = Union[int, float]


def _check_number(name: str, value) -> None:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise TypeError(f"{name} must be int or float, got {type(value).__name__}")


@dataclass(frozen=True)
class Point:
    """
    Immutable 2D point.

    Attributes:
        x: Horizontal coordinate
        y: Vertical coordinate
    """

    x: Number
    y: Number

    def __post_init__(self):
        _check_number("x", self.x)
        _check_number("y", self.y)


@dataclass(frozen=True)
class Rectangle:
    """
    Axis-aligned rectangle defined by two opposite corners.

    Corners may be given in any orientation; measurements are taken on
    the normalized rectangle.

    Attributes:
        top_left: First corner
        bottom_right: Opposite corner
    """

    top_left: Point
    bottom_right: Point

    def normalized(self) -> "Rectangle":
        """
        Return an equivalent rectangle with ordered corners.

        Guarantees top_left.x <= bottom_right.x and top_left.y <= bottom_right.y
        by taking the componentwise min/max of both corners.
        """
        a, b = self.top_left, self.bottom_right
        return Rectangle(
            top_left=Point(x=min(a.x, b.x), y=min(a.y, b.y)),
            bottom_right=Point(x=max(a.x, b.x), y=max(a.y, b.y)),
        )

    def length(self) -> Number:
        rect = self.normalized()
        return abs(rect.bottom_right.x - rect.top_left.x)

    def height(self) -> Number:
        rect = self.normalized()
        return abs(rect.bottom_right.y - rect.top_left.y)

    def validate(self) -> bool:
        """
        Check rectangle validity.

        A rectangle is accepted when length > 0 OR height > 0, so a
        rectangle collapsed along one axis is still valid (area 0).

        Raises:
            InvalidRectangleError: If both length and height are <= 0
        """
        if self.length() > 0 or self.height() > 0:
            return True
        raise InvalidRectangleError()

    def area(self) -> Number:
        return self.length() * self.height()


@dataclass(frozen=True)
class Circle:
    """
    Circle defined by center and radius.

    Attributes:
        center: Circle center
        radius: Circle radius
    """

    center: Point
    radius: Number

    def __post_init__(self):
        _check_number("radius", self.radius)

    def validate(self) -> bool:
        """
        Raises:
            InvalidCircleError: If radius <= 0
        """
        if self.radius > 0:
            return True
        raise InvalidCircleError()

    def area(self) -> float:
        return math.pi * self.radius ** 2


@dataclass(frozen=True)
class Polygon:
    """
    Polygon as an ordered closed loop of points.

    The last point implicitly connects back to the first. No convexity
    or self-intersection check is performed.

    Attributes:
        points: Ordered vertices (stored as a tuple)
    """

    points: Tuple[Point, ...]

    # Strictly greater: a triangle is rejected.
    MIN_POINTS_EXCLUSIVE = 3

    def __post_init__(self):
        # Accept any sequence, store as tuple (using object.__setattr__ for frozen)
        object.__setattr__(self, "points", tuple(self.points))
        for point in self.points:
            if not isinstance(point, Point):
                raise TypeError(f"points must contain Point, got {type(point).__name__}")

    def validate(self) -> bool:
        """
        Raises:
            InvalidPolygonError: If point count <= 3
        """
        if len(self.points) > self.MIN_POINTS_EXCLUSIVE:
            return True
        raise InvalidPolygonError()

    def area(self) -> float:
        """
        Shoelace formula over the closed point loop.

        area = |sum(x_i * y_{i+1} - x_{i+1} * y_i)| / 2 with wraparound.
        """
        if not self.points:
            return 0.0

        xs = np.array([p.x for p in self.points], dtype=float)
        ys = np.array([p.y for p in self.points], dtype=float)

        # np.roll(-1) pairs each vertex with its successor (last -> first)
        cross_sum = np.dot(xs, np.roll(ys, -1)) - np.dot(np.roll(xs, -1), ys)
        return float(abs(cross_sum) / 2.0)


@dataclass(frozen=True)
class LegacyRectangle:
    """
    Strict integer rectangle.

    The caller is trusted to supply top_left above-left of bottom_right.
    Unordered corners are rejected, never normalized.

    Attributes:
        top_left: Top-left corner (integer coordinates)
        bottom_right: Bottom-right corner (integer coordinates)
    """

    top_left: Point
    bottom_right: Point

    def __post_init__(self):
        for name, point in (("top_left", self.top_left), ("bottom_right", self.bottom_right)):
            if not (isinstance(point.x, int) and isinstance(point.y, int)):
                raise TypeError(f"{name} must have integer coordinates, got {point}")

    def length(self) -> int:
        return self.bottom_right.x - self.top_left.x

    def height(self) -> int:
        return self.bottom_right.y - self.top_left.y

    def area(self) -> int:
        """
        Raises:
            LegacyRectangleError: If length or height is negative
        """
        if self.length() < 0:
            raise LegacyRectangleError("Length cannot be negative")
        if self.height() < 0:
            raise LegacyRectangleError("Width cannot be negative!")
        return self.length() * self.height()


Shape = Union[Rectangle, Circle, Polygon]

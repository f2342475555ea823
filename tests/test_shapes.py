"""Tests for shape validation and area computation."""

import math

import pytest

from shapearea_geometry import (
    Circle,
    InvalidCircleError,
    InvalidPolygonError,
    InvalidRectangleError,
    InvalidShapeError,
    LegacyRectangle,
    LegacyRectangleError,
    Point,
    Polygon,
    Rectangle,
    compute_area,
    compute_legacy_area,
)

SQUARE = [Point(0, 0), Point(4, 0), Point(4, 4), Point(0, 4)]


def test_rectangle_area() -> None:
    assert compute_area(Rectangle(Point(0, 0), Point(4, 3))) == 12


def test_rectangle_reversed_corners_normalized() -> None:
    assert compute_area(Rectangle(Point(4, 3), Point(0, 0))) == 12


@pytest.mark.parametrize(
    "a, b",
    [
        (Point(0, 0), Point(4, 3)),
        (Point(4, 0), Point(0, 3)),
        (Point(0, 3), Point(4, 0)),
        (Point(-1.5, 2.0), Point(2.5, -1.0)),
    ],
)
def test_rectangle_area_independent_of_corner_order(a: Point, b: Point) -> None:
    rect = Rectangle(a, b)
    assert compute_area(rect) == compute_area(rect.normalized())
    assert compute_area(rect) == compute_area(Rectangle(b, a))


def test_rectangle_normalized_orders_corners() -> None:
    rect = Rectangle(Point(4, 0), Point(0, 3)).normalized()
    assert rect.top_left == Point(0, 0)
    assert rect.bottom_right == Point(4, 3)


def test_rectangle_zero_length_positive_height_is_valid() -> None:
    rect = Rectangle(Point(2, 0), Point(2, 5))
    assert rect.validate() is True
    assert compute_area(rect) == 0


def test_rectangle_collapsed_to_point_is_invalid() -> None:
    with pytest.raises(InvalidRectangleError, match="invalid rectangle"):
        compute_area(Rectangle(Point(1, 1), Point(1, 1)))


def test_circle_area() -> None:
    area = compute_area(Circle(Point(0, 0), 2))
    assert area == pytest.approx(math.pi * 4)
    assert area == pytest.approx(12.566, abs=1e-3)


@pytest.mark.parametrize("radius", [0, -1, -0.5])
def test_circle_non_positive_radius_rejected(radius) -> None:
    with pytest.raises(InvalidCircleError, match="invalid circle"):
        compute_area(Circle(Point(0, 0), radius))


def test_polygon_square_area() -> None:
    assert compute_area(Polygon(SQUARE)) == 16


def test_polygon_triangle_rejected() -> None:
    with pytest.raises(InvalidPolygonError, match="invalid polygon"):
        compute_area(Polygon([Point(0, 0), Point(4, 0), Point(0, 4)]))


def test_polygon_rotation_and_reversal_invariant() -> None:
    pentagon = [Point(0, 0), Point(5, 0), Point(6, 3), Point(2, 6), Point(-1, 3)]
    expected = compute_area(Polygon(pentagon))

    for shift in range(len(pentagon)):
        rotated = pentagon[shift:] + pentagon[:shift]
        assert compute_area(Polygon(rotated)) == pytest.approx(expected)
    assert compute_area(Polygon(list(reversed(pentagon)))) == pytest.approx(expected)


def test_polygon_self_intersecting_still_measured() -> None:
    bowtie = [Point(0, 0), Point(4, 4), Point(4, 0), Point(0, 4)]
    # Shoelace of a bow-tie cancels to zero; no shape check is applied
    assert compute_area(Polygon(bowtie)) == 0


def test_polygon_points_stored_as_tuple() -> None:
    polygon = Polygon(SQUARE)
    assert isinstance(polygon.points, tuple)


def test_compute_area_is_idempotent() -> None:
    shape = Polygon(SQUARE)
    assert compute_area(shape) == compute_area(shape)


def test_generic_error_when_validate_returns_false() -> None:
    class Silent(Circle):
        def validate(self) -> bool:
            return False

    with pytest.raises(InvalidShapeError, match="the shape object is invalid"):
        compute_area(Silent(Point(0, 0), 1))


def test_unsupported_shape_type() -> None:
    with pytest.raises(TypeError):
        compute_area(Point(0, 0))


def test_point_rejects_non_numbers() -> None:
    with pytest.raises(TypeError):
        Point("1", 2)
    with pytest.raises(TypeError):
        Point(True, 2)


def test_legacy_rectangle_area() -> None:
    assert compute_legacy_area(LegacyRectangle(Point(0, 0), Point(4, 3))) == 12


def test_legacy_rectangle_zero_extent_allowed() -> None:
    assert compute_legacy_area(LegacyRectangle(Point(0, 0), Point(0, 3))) == 0


def test_legacy_rectangle_reversed_corners_rejected() -> None:
    with pytest.raises(LegacyRectangleError, match="Length cannot be negative"):
        compute_legacy_area(LegacyRectangle(Point(4, 3), Point(0, 0)))


def test_legacy_rectangle_negative_height_rejected() -> None:
    with pytest.raises(LegacyRectangleError, match="Width cannot be negative!"):
        compute_legacy_area(LegacyRectangle(Point(0, 3), Point(4, 0)))


def test_legacy_rectangle_requires_integers() -> None:
    with pytest.raises(TypeError):
        LegacyRectangle(Point(0.5, 0), Point(4, 3))

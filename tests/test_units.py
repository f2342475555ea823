"""Tests for measurement units and coordinate conversion."""

import pytest

from shapearea_geometry import MeasurementUnit, Point, area_to_unit, parse_unit
from shapearea_geometry.coordinates import (
    GridSettings,
    canvas_to_grid_point,
    canvas_to_math,
    distance,
    format_point,
    grid_to_unit_coordinates,
    math_to_canvas,
    snap_to_grid,
    unit_to_grid_coordinates,
)
from shapearea_geometry.units import (
    appropriate_grid_size,
    format_with_unit,
    major_grid_interval,
    pixels_to_unit,
    unit_label,
    unit_to_pixels,
)


def test_parse_unit() -> None:
    assert parse_unit("cm") is MeasurementUnit.CM
    assert parse_unit("IN") is MeasurementUnit.IN
    assert parse_unit(MeasurementUnit.PX) is MeasurementUnit.PX
    with pytest.raises(ValueError, match="Unknown measurement unit"):
        parse_unit("furlong")


def test_pixel_conversions() -> None:
    assert pixels_to_unit(96, MeasurementUnit.IN) == pytest.approx(1.0)
    assert unit_to_pixels(2.54, "cm") == pytest.approx(96.0)
    assert unit_to_pixels(25.4, "mm") == pytest.approx(96.0)
    assert pixels_to_unit(unit_to_pixels(3.5, "cm"), "cm") == pytest.approx(3.5)


def test_area_to_unit_uses_squared_factor() -> None:
    assert area_to_unit(96 * 96, "in") == pytest.approx(1.0)
    assert area_to_unit(16, "px") == 16


def test_format_with_unit() -> None:
    assert format_with_unit(12, "cm") == "12.00 cm"
    assert format_with_unit(1.23456, MeasurementUnit.MM, precision=3) == "1.235 mm"


def test_appropriate_grid_size_clamped() -> None:
    assert appropriate_grid_size(0, "px") == 1
    assert appropriate_grid_size(1.0, "px") == 10
    assert appropriate_grid_size(100, "px") == 100
    assert appropriate_grid_size(-3, "in") == pytest.approx(0.125 * 96)


def test_major_grid_interval_and_labels() -> None:
    assert major_grid_interval("mm") == 10
    assert major_grid_interval("px") == 5
    assert unit_label("in") == "inches"


def test_canvas_math_round_trip() -> None:
    point = canvas_to_math(0, 0, 800, 600)
    assert point == Point(-400, 300)
    assert math_to_canvas(point.x, point.y, 800, 600) == Point(0, 0)


def test_snap_to_grid() -> None:
    assert snap_to_grid(14, 10) == 10
    assert snap_to_grid(15, 10) == 20
    assert snap_to_grid(-14, 10) == -10


def test_canvas_to_grid_point_snaps_when_enabled() -> None:
    snapped = canvas_to_grid_point(417, 283, 800, 600, GridSettings(grid_size=10))
    assert snapped == Point(20, 20)

    raw = canvas_to_grid_point(417, 283, 800, 600, GridSettings(grid_size=10, snap_to_grid=False))
    assert raw == Point(17, 17)


def test_grid_unit_coordinates() -> None:
    settings = GridSettings(unit="in")
    assert grid_to_unit_coordinates(Point(96, 192), settings) == Point(1.0, 2.0)
    assert unit_to_grid_coordinates(Point(1, 2), settings) == Point(96.0, 192.0)


def test_format_point() -> None:
    assert format_point(Point(96, 0), GridSettings(unit="in")) == "(1.00 in, 0.00 in)"


def test_grid_settings_validation() -> None:
    with pytest.raises(ValueError):
        GridSettings(grid_size=0)


def test_distance() -> None:
    assert distance(Point(0, 0), Point(3, 4)) == 5

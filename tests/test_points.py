#!/usr/bin/env python3
"""
Tests for Point construction, distance, addition and display
"""

import io
import math
import sys
import numpy as np
import pytest
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from pointgeometry import (
    ORIGIN_X,
    ORIGIN_Y,
    Point,
    create_point,
    distance_to_origin,
    distance_between,
    add_points,
    format_point,
    display_point,
)


def test_create_point_keeps_coordinates():
    """Coordinates are stored without rounding"""
    for x, y in [(3.0, 4.0), (-1.0, 2.5), (0.1, 0.2), (1e-300, -1e300), (-0.0, 0.0)]:
        p = create_point(x, y)
        assert p.x == x
        assert p.y == y
    assert math.copysign(1.0, create_point(-0.0, 0.0).x) == -1.0


def test_create_point_accepts_nan_and_inf():
    p = create_point(float("nan"), float("inf"))
    assert math.isnan(p.x)
    assert p.y == float("inf")


def test_point_is_immutable():
    p = create_point(1.0, 2.0)
    with pytest.raises(AttributeError):
        p.x = 5.0
    with pytest.raises(AttributeError):
        p.z = 5.0


def test_distance_classic_triangle():
    """3-4-5 triangle"""
    assert distance_to_origin(create_point(3, 4)) == 5.0
    assert create_point(3, 4).distance_to_origin() == 5.0


def test_distance_at_origin():
    assert distance_to_origin(create_point(0, 0)) == 0.0
    assert distance_to_origin(create_point(ORIGIN_X, ORIGIN_Y)) == 0.0


def test_distance_matches_sqrt_of_squares():
    """Bit-for-bit sqrt(x*x + y*y), not hypot"""
    rng = np.random.default_rng(1234)
    for x, y in rng.normal(scale=1e3, size=(200, 2)):
        x, y = float(x), float(y)
        assert distance_to_origin(create_point(x, y)) == math.sqrt(x * x + y * y)


def test_distance_ieee_special_values():
    nan = float("nan")
    inf = float("inf")
    assert math.isnan(distance_to_origin(create_point(nan, 1.0)))
    assert math.isnan(distance_to_origin(create_point(inf, nan)))
    assert distance_to_origin(create_point(-inf, 2.0)) == inf
    assert distance_to_origin(create_point(3.0, inf)) == inf
    assert distance_to_origin(create_point(1e200, 1e200)) == inf


def test_distance_between():
    assert distance_between(create_point(1, 1), create_point(4, 5)) == 5.0
    p = create_point(-2.5, 7.25)
    assert distance_between(create_point(0, 0), p) == distance_to_origin(p)


def test_add_points():
    result = add_points(create_point(3, 4), create_point(-1, 2.5))
    assert result == create_point(2, 6.5)
    assert create_point(3, 4) + create_point(-1, 2.5) == create_point(2, 6.5)


def test_add_points_commutative():
    rng = np.random.default_rng(99)
    for row in rng.normal(scale=1e6, size=(100, 4)):
        p1 = create_point(row[0], row[1])
        p2 = create_point(row[2], row[3])
        assert add_points(p1, p2) == add_points(p2, p1)


def test_add_points_returns_new_point():
    p1 = create_point(1, 2)
    p2 = create_point(3, 4)
    result = add_points(p1, p2)
    assert result is not p1 and result is not p2
    assert p1 == create_point(1, 2)
    assert p2 == create_point(3, 4)


def test_add_points_propagates_nan():
    result = add_points(create_point(float("inf"), 1.0), create_point(float("-inf"), 1.0))
    assert math.isnan(result.x)
    assert result.y == 2.0


def test_point_equality_and_hash():
    assert create_point(1, 2) == create_point(1.0, 2.0)
    assert create_point(1, 2) != create_point(2, 1)
    assert len({create_point(1, 2), create_point(1.0, 2.0)}) == 1
    nan_point = create_point(float("nan"), 0.0)
    assert nan_point != nan_point
    assert (create_point(1, 2) == (1, 2)) is False


def test_point_array_conversion():
    p = Point.from_array(np.array([3.0, 4.0]))
    assert p == create_point(3, 4)
    assert np.array_equal(p.to_array(), [3.0, 4.0])
    with pytest.raises(ValueError):
        Point.from_array([1.0, 2.0, 3.0])


def test_display_point(capsys):
    display_point(create_point(3.0, 4.0))
    display_point(create_point(-1.0, 2.5))
    captured = capsys.readouterr()
    assert captured.out == "Point(x: 3.00, y: 4.00)\nPoint(x: -1.00, y: 2.50)\n"


def test_display_point_rounds_to_two_decimals(capsys):
    display_point(create_point(2.0, 6.5))
    display_point(create_point(1.005, -0.004))
    captured = capsys.readouterr()
    lines = captured.out.splitlines()
    assert lines[0] == "Point(x: 2.00, y: 6.50)"
    assert lines[1] == "Point(x: %.2f, y: %.2f)" % (1.005, -0.004)


def test_display_point_to_stream():
    buf = io.StringIO()
    display_point(create_point(3.0, 4.0), file=buf)
    assert buf.getvalue() == "Point(x: 3.00, y: 4.00)\n"


def test_display_point_closed_stream_raises():
    buf = io.StringIO()
    buf.close()
    with pytest.raises(ValueError):
        display_point(create_point(1.0, 1.0), file=buf)


def test_str_and_repr():
    p = create_point(-1.0, 2.5)
    assert str(p) == "Point(x: -1.00, y: 2.50)"
    assert format_point(p) == str(p)
    assert repr(p) == "Point(x=-1.0, y=2.5)"


def test_special_values_format():
    p = create_point(float("nan"), float("-inf"))
    assert format_point(p) == "Point(x: nan, y: -inf)"

import math

import pytest

from linesect.line import Line
from linesect.vectors import Vector2, Vector3


def test_from_slope_intercept():
    line = Line.from_slope_intercept(2, 1)
    assert line.direction.x == pytest.approx(1)
    assert line.direction.y == pytest.approx(2)
    assert line.point.x == pytest.approx(0)
    assert line.point.y == pytest.approx(1)


def test_intersection_basic():
    result = Line.from_slope_intercept(1, 0).intersect(Line.from_slope_intercept(-1, 2))
    assert result.x == pytest.approx(1)
    assert result.y == pytest.approx(1)


def test_parallel_lines():
    line1 = Line.from_slope_intercept(2, 0)
    line2 = Line.from_slope_intercept(2, 1)
    assert not line1.is_intersected(line2)
    assert all(math.isnan(c) for c in line1.intersect(line2))


def test_crossing_lines_are_intersected():
    assert Line.from_slope_intercept(1, 0).is_intersected(Line.from_slope_intercept(-1, 2))


def test_default_line_is_zero():
    line = Line()
    assert line.direction == Vector3()
    assert line.point == Vector3()


@pytest.mark.parametrize(
    "first, second",
    [((1.5, -2), (-0.5, 3)), ((0, 4), (3, -1)), ((-2, 0.5), (0.25, 0.25))],
)
def test_intersection_lies_on_both_lines(first, second):
    line1 = Line.from_slope_intercept(*first)
    line2 = Line.from_slope_intercept(*second)
    p = line1.intersect(line2)
    for k, b in (first, second):
        assert p.y == pytest.approx(k * p.x + b)
    assert p.z == pytest.approx(0)


def test_intersection_is_symmetric():
    a = Line.from_slope_intercept(1.5, -2)
    b = Line.from_slope_intercept(-0.5, 3)
    assert a.intersect(b).equal(b.intersect(a), 1e-9)


def test_intersection_in_three_dimensions():
    a = Line(Vector3(1, 0, 0), Vector3(0, 0, 0))
    b = Line(Vector3(0, 0, 1), Vector3(2, 0, -3))
    assert tuple(a.intersect(b)) == pytest.approx((2, 0, 0))


def test_from_2d_lifts_to_plane():
    line = Line.from_2d(Vector2(1.5, 2.5), Vector2(-1, 4))
    assert line.direction == Vector3(1.5, 2.5, 0)
    assert line.point == Vector3(-1, 4, 0)


def test_set_accepts_3d_and_copies():
    direction = Vector3(1, 2, 3)
    line = Line()
    line.set(direction, Vector3(4, 5, 6))
    direction.x = 99
    assert line.direction == Vector3(1, 2, 3)
    assert line.point == Vector3(4, 5, 6)


def test_set_rejects_non_vectors():
    with pytest.raises(TypeError):
        Line().set((1, 2), Vector2(0, 0))


def test_set_slope_intercept_matches_constructor():
    line = Line(Vector3(7, 7, 7), Vector3(1, 1, 1))
    line.set_slope_intercept(2, 1)
    assert line == Line.from_slope_intercept(2, 1)


def test_str():
    assert str(Line.from_slope_intercept(2, 1)) == (
        "Line\n====\nDirection: (1, 2, 0)\n    Point: (0, 1, 0)"
    )
import numpy as np
import pytest

from rastertrace.mathutils import clamp, cubic_point, lerp, quadratic_point


@pytest.mark.parametrize("a,b", [(0, 10), (-5, 5), (3.5, 7.25)])
def test_lerp_endpoints(a, b):
    assert lerp(a, b, 0.0) == a
    assert lerp(a, b, 1.0) == b


def test_lerp_integers_truncate():
    result = lerp(0, 10, 0.25)
    assert result == 2
    assert isinstance(result, int)


def test_lerp_arrays():
    a = np.array([0.0, 2.0, 4.0])
    b = np.array([2.0, 4.0, 8.0])
    np.testing.assert_allclose(lerp(a, b, 0.5), (a + b) / 2)


@pytest.mark.parametrize(
    "value,expected", [(-3, 0), (0, 0), (128, 128), (255, 255), (300, 255)]
)
def test_clamp(value, expected):
    assert clamp(value, 0, 255) == expected


def test_clamp_floats():
    assert clamp(1.5, 0.0, 1.0) == 1.0
    assert clamp(-0.5, 0.0, 1.0) == 0.0


def test_quadratic_point_end():
    assert quadratic_point(1, 2, 30, 40, 50, 60, 1.0) == (50, 60)


def test_quadratic_point_start_with_zero_control():
    assert quadratic_point(7, 9, 0, 0, 50, 60, 0.0) == (7, 9)


def test_cubic_point_endpoints():
    assert cubic_point(1, 2, 10, 20, 30, 40, 50, 60, 0.0) == (1, 2)
    assert cubic_point(1, 2, 10, 20, 30, 40, 50, 60, 1.0) == (50, 60)


def test_cubic_point_on_straight_line_stays_on_line():
    for step in range(11):
        x, y = cubic_point(0, 0, 10, 10, 20, 20, 30, 30, step / 10)
        assert abs(x - y) <= 1
        assert 0 <= x <= 30
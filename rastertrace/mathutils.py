"""Interpolation, clamping and Bezier curve helpers."""

from __future__ import annotations

from typing import Any


def lerp(a: Any, b: Any, t: float) -> Any:
    """Linearly interpolate from ``a`` to ``b`` by ``t``.

    When both ends are integers the result is truncated to an integer.
    Works on scalars and numpy arrays alike.
    """
    result = a + (b - a) * t
    if isinstance(a, int) and isinstance(b, int):
        return int(result)
    return result


def clamp(value: Any, low: Any, high: Any) -> Any:
    """Return ``value`` limited to the closed range ``[low, high]``."""
    if value < low:
        return low
    if value > high:
        return high
    return value


def quadratic_point(
    x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, t: float
) -> tuple[int, int]:
    """Return the integer point of the quadratic curve at parameter ``t``."""
    one_minus_t = 1 - t
    a = one_minus_t * one_minus_t
    b = 2 * one_minus_t
    c = t * t
    return int(a * x1 + b * x2 + c * x3), int(a * y1 + b * y2 + c * y3)


def cubic_point(
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    x3: int,
    y3: int,
    x4: int,
    y4: int,
    t: float,
) -> tuple[int, int]:
    """Return the integer point of the cubic Bezier curve at parameter ``t``."""
    one_minus_t = 1 - t
    a = one_minus_t * one_minus_t * one_minus_t
    b = 3 * (one_minus_t * one_minus_t) * t
    c = 3 * one_minus_t * (t * t)
    d = t * t * t
    x = int(a * x1 + b * x2 + c * x3 + d * x4)
    y = int(a * y1 + b * y2 + c * y3 + d * y4)
    return x, y
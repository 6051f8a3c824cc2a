"""RGBA colours, blending and colour-space conversions."""

from __future__ import annotations

import math
from enum import Enum
from typing import Callable, NamedTuple, Sequence

import numpy as np

from rastertrace.mathutils import clamp


class Color(NamedTuple):
    """An 8-bit RGBA colour."""

    r: int
    g: int
    b: int
    a: int = 255


class BlendMode(Enum):
    NORMAL = "normal"
    ALPHA = "alpha"
    ADDITIVE = "additive"
    MULTIPLY = "multiply"


BlendFunc = Callable[[Color, Color], Color]


def normal_blend(src: Color, dest: Color) -> Color:
    """Replace the destination with the source."""
    return Color(src.r, src.g, src.b, src.a)


def alpha_blend(src: Color, dest: Color) -> Color:
    """Mix source over destination weighted by the source alpha."""
    alpha = src.a
    inv_alpha = 255 - src.a
    return Color(
        (src.r * alpha + dest.r * inv_alpha) >> 8,
        (src.g * alpha + dest.g * inv_alpha) >> 8,
        (src.b * alpha + dest.b * inv_alpha) >> 8,
        alpha,
    )


def additive_blend(src: Color, dest: Color) -> Color:
    """Add the channels, saturating at 255."""
    return Color(
        min(src.r + dest.r, 255),
        min(src.g + dest.g, 255),
        min(src.b + dest.b, 255),
        src.a,
    )


def multiply_blend(src: Color, dest: Color) -> Color:
    """Multiply the channels, saturating at 255."""
    return Color(
        min(src.r * dest.r, 255),
        min(src.g * dest.g, 255),
        min(src.b * dest.b, 255),
        src.a,
    )


_BLEND_FUNCS: dict[BlendMode, BlendFunc] = {
    BlendMode.NORMAL: normal_blend,
    BlendMode.ALPHA: alpha_blend,
    BlendMode.ADDITIVE: additive_blend,
    BlendMode.MULTIPLY: multiply_blend,
}

_active: dict[str, BlendFunc] = {}


def set_blend_mode(mode: BlendMode) -> None:
    """Select the blend function used by :func:`color_blend`."""
    _active["func"] = _BLEND_FUNCS[BlendMode(mode)]


def color_blend(src: Color, dest: Color) -> Color:
    """Blend ``src`` onto ``dest`` with the active blend mode."""
    try:
        func = _active["func"]
    except KeyError:
        raise RuntimeError("no blend mode has been set") from None
    return func(src, dest)


def to_color(value: Sequence[float]) -> Color:
    """Convert an RGB or RGBA colour with channels in [0, 1] to 8 bits."""
    channels = [float(c) for c in value]
    if len(channels) not in (3, 4):
        raise ValueError("a colour needs 3 or 4 channels")
    r, g, b, *rest = (int(clamp(c, 0.0, 1.0) * 255) for c in channels)
    return Color(r, g, b, rest[0] if rest else 255)


def to_float(color: Color) -> np.ndarray:
    """Convert an 8-bit colour to RGBA floats in [0, 1]."""
    return np.array([color.r, color.g, color.b, color.a], dtype=float) / 255.0


def hsv_to_rgb(hue: float, saturation: float, value: float) -> np.ndarray:
    """Convert hue (degrees), saturation and value to linear RGB floats."""
    if saturation == 0:
        return np.full(3, float(value))
    scaled = (hue % 360.0) / 60.0
    sector = math.floor(scaled)
    frac = scaled - sector
    o = value * (1 - saturation)
    p = value * (1 - saturation * frac)
    q = value * (1 - saturation * (1 - frac))
    rgb = {
        0: (value, q, o),
        1: (p, value, o),
        2: (o, value, q),
        3: (o, p, value),
        4: (q, o, value),
        5: (value, o, p),
    }[sector % 6]
    return np.array(rgb, dtype=float)


def linear_to_gamma(linear: float) -> float:
    """Apply a gamma of 2 to a linear channel value; non-positive gives 0."""
    if linear > 0:
        return math.sqrt(linear)
    return 0.0
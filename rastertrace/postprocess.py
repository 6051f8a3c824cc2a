"""Whole-buffer colour effects and 3x3 convolution filters.

Every function takes a list of :class:`Color` pixels and returns a new list;
the input is left untouched. Alpha is preserved unless stated otherwise.
"""

from __future__ import annotations

import random
from typing import Sequence

import numpy as np

from rastertrace.color import Color
from rastertrace.mathutils import clamp

Kernel = Sequence[Sequence[int]]

_BOX = ((1, 1, 1), (1, 1, 1), (1, 1, 1))
_GAUSSIAN = ((1, 2, 1), (2, 4, 2), (1, 2, 1))
_SHARPEN = ((0, -1, 0), (-1, 5, -1), (0, -1, 0))
_EMBOSS = ((-1, -1, 0), (-1, 0, 1), (0, 1, 1))
_SOBEL_H = ((1, 0, -1), (2, 0, -2), (1, 0, -1))
_SOBEL_V = ((1, 2, 1), (0, 0, 0), (-1, -2, -1))


def _channel(value: int) -> int:
    return int(clamp(value, 0, 255))


def _to_array(buffer: Sequence[Color], width: int, height: int) -> np.ndarray:
    if width < 0 or height < 0 or len(buffer) != width * height:
        raise ValueError("buffer size does not match width x height")
    flat = np.array([tuple(c) for c in buffer], dtype=np.int64)
    return flat.reshape(height, width, 4)


def _to_colors(pixels: np.ndarray) -> list[Color]:
    return [Color(*px) for px in pixels.reshape(-1, 4).tolist()]


def _correlate(source: np.ndarray, kernel: Kernel) -> np.ndarray:
    """Weighted sums of each interior pixel's 3x3 neighbourhood."""
    height, width = source.shape[:2]
    total = np.zeros((height - 2, width - 2) + source.shape[2:], dtype=np.int64)
    for iy, row in enumerate(kernel):
        for ix, weight in enumerate(row):
            if weight:
                total += weight * source[iy : iy + height - 2, ix : ix + width - 2]
    return total


def _filter(
    buffer: Sequence[Color],
    width: int,
    height: int,
    kernel: Kernel,
    divisor: int = 1,
    bias: int = 0,
) -> list[Color]:
    pixels = _to_array(buffer, width, height)
    if width < 3 or height < 3:
        return list(buffer)
    sums = _correlate(pixels[:, :, :3], kernel) + bias
    if divisor != 1:
        sums //= divisor
    result = pixels.copy()
    result[1:-1, 1:-1, :3] = np.clip(sums, 0, 255)
    return _to_colors(result)


def invert(buffer: Sequence[Color]) -> list[Color]:
    """Invert the red, green and blue channels."""
    return [Color(255 - c.r, 255 - c.g, 255 - c.b, c.a) for c in buffer]


def monochrome(buffer: Sequence[Color]) -> list[Color]:
    """Replace each colour with the integer mean of its channels."""
    result = []
    for c in buffer:
        average = (c.r + c.g + c.b) // 3
        result.append(Color(average, average, average, c.a))
    return result


def brightness(buffer: Sequence[Color], brightness: int) -> list[Color]:
    """Add ``brightness`` to every channel, saturating at 0 and 255."""
    return [
        Color(
            _channel(c.r + brightness),
            _channel(c.g + brightness),
            _channel(c.b + brightness),
            c.a,
        )
        for c in buffer
    ]


def color_balance(buffer: Sequence[Color], ro: int, go: int, bo: int) -> list[Color]:
    """Offset the red, green and blue channels separately, saturating."""
    return [
        Color(_channel(c.r + ro), _channel(c.g + go), _channel(c.b + bo), c.a)
        for c in buffer
    ]


def noise(buffer: Sequence[Color], noise: int) -> list[Color]:
    """Shift each channel by its own random offset in ``[-noise, noise]``."""
    if noise < 0:
        raise ValueError("noise must not be negative")
    result = []
    for c in buffer:
        r_offset = random.randint(-noise, noise)
        g_offset = random.randint(-noise, noise)
        b_offset = random.randint(-noise, noise)
        result.append(
            Color(
                _channel(c.r + r_offset),
                _channel(c.g + g_offset),
                _channel(c.b + b_offset),
                c.a,
            )
        )
    return result


def threshold(buffer: Sequence[Color], threshold: int) -> list[Color]:
    """Turn pixels white where luminance reaches ``threshold``, black elsewhere."""
    result = []
    for c in buffer:
        luminance = int(0.299 * c.r + 0.587 * c.g + 0.114 * c.b)
        value = 255 if luminance >= threshold else 0
        result.append(Color(value, value, value, c.a))
    return result


def posterize(buffer: Sequence[Color], levels: int) -> list[Color]:
    """Quantise each channel down to a multiple of ``255 // levels``."""
    if not 1 <= levels <= 255:
        raise ValueError("levels must be between 1 and 255")
    step = 255 // levels
    return [
        Color((c.r // step) * step, (c.g // step) * step, (c.b // step) * step, c.a)
        for c in buffer
    ]


def alpha(buffer: Sequence[Color], alpha: int) -> list[Color]:
    """Set the alpha channel of every pixel."""
    if not 0 <= alpha <= 255:
        raise ValueError("alpha must be between 0 and 255")
    return [c._replace(a=alpha) for c in buffer]


def box_blur(buffer: Sequence[Color], width: int, height: int) -> list[Color]:
    """Average each interior pixel with its eight neighbours."""
    return _filter(buffer, width, height, _BOX, divisor=9)


def gaussian_blur(buffer: Sequence[Color], width: int, height: int) -> list[Color]:
    """Blur interior pixels with a 3x3 Gaussian kernel."""
    return _filter(buffer, width, height, _GAUSSIAN, divisor=16)


def sharpen(buffer: Sequence[Color], width: int, height: int) -> list[Color]:
    """Sharpen interior pixels with a 3x3 Laplacian-based kernel."""
    return _filter(buffer, width, height, _SHARPEN)


def edge(buffer: Sequence[Color], width: int, height: int, threshold: int) -> list[Color]:
    """Sobel edge magnitude of the red channel, zeroed below ``threshold``."""
    pixels = _to_array(buffer, width, height)
    if width < 3 or height < 3:
        return list(buffer)
    red = pixels[:, :, 0]
    h = _correlate(red, _SOBEL_H)
    v = _correlate(red, _SOBEL_V)
    magnitude = np.sqrt(h * h + v * v).astype(np.int64)
    magnitude = np.where(magnitude >= threshold, magnitude, 0)
    magnitude = np.clip(magnitude, 0, 255)
    result = pixels.copy()
    for channel in range(3):
        result[1:-1, 1:-1, channel] = magnitude
    return _to_colors(result)


def emboss(buffer: Sequence[Color], width: int, height: int) -> list[Color]:
    """Emboss interior pixels around a mid-grey of 128."""
    return _filter(buffer, width, height, _EMBOSS, bias=128)
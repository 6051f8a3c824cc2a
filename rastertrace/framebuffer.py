"""An in-memory RGBA pixel buffer with 2D drawing primitives."""

from __future__ import annotations

import math
from enum import IntFlag

from rastertrace.color import Color, color_blend
from rastertrace.image import Image
from rastertrace.mathutils import cubic_point, lerp, quadratic_point

_BLANK = Color(0, 0, 0, 0)


class OutCode(IntFlag):
    """Cohen-Sutherland region bits of a point relative to the buffer."""

    INSIDE = 0
    LEFT = 1
    RIGHT = 2
    BOTTOM = 4
    TOP = 8


def _round(value: float) -> int:
    """Round half away from zero."""
    if value >= 0:
        return math.floor(value + 0.5)
    return -math.floor(-value + 0.5)


def _div(numerator: int, denominator: int) -> int:
    """Integer division truncating toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator > 0) else -quotient


class Framebuffer:
    """A width x height grid of RGBA pixels stored row by row."""

    def __init__(self, width: int, height: int) -> None:
        if width < 0 or height < 0:
            raise ValueError("framebuffer dimensions must not be negative")
        self.width = width
        self.height = height
        self.buffer: list[Color] = [_BLANK] * (width * height)

    @property
    def pitch(self) -> int:
        """Number of bytes in one row."""
        return self.width * 4

    def _inside(self, x: int, y: int) -> bool:
        return 0 <= x < self.width and 0 <= y < self.height

    def clear(self, color: Color) -> None:
        """Fill every pixel with ``color``."""
        self.buffer = [Color(*color)] * (self.width * self.height)

    def draw_point(self, x: int, y: int, color: Color) -> None:
        """Blend ``color`` onto the pixel; raise IndexError if it is off the buffer."""
        if not self._inside(x, y):
            raise IndexError(f"point ({x}, {y}) is outside the framebuffer")
        index = x + y * self.width
        self.buffer[index] = color_blend(color, self.buffer[index])

    def draw_point_clip(self, x: int, y: int, color: Color) -> None:
        """Blend ``color`` onto the pixel, ignoring points off the buffer."""
        if self._inside(x, y):
            index = x + y * self.width
            self.buffer[index] = color_blend(color, self.buffer[index])

    def draw_rect(self, x: int, y: int, width: int, height: int, color: Color) -> None:
        """Fill the rectangle clipped to the buffer with ``color``."""
        x1, x2 = max(x, 0), min(x + width, self.width)
        y1, y2 = max(y, 0), min(y + height, self.height)
        if x1 >= x2:
            return
        fill = [Color(*color)] * (x2 - x1)
        for sy in range(y1, y2):
            start = x1 + sy * self.width
            self.buffer[start : start + len(fill)] = fill

    def draw_line_slope(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Draw a clipped line by evaluating its slope-intercept equation."""
        dx = x2 - x1
        dy = y2 - y1
        if dx == 0:
            for y in range(min(y1, y2), max(y1, y2)):
                self.draw_point_clip(x1, y, color)
            return
        m = dy / dx
        b = y1 - m * x1
        if abs(dx) > abs(dy):
            for x in range(min(x1, x2), max(x1, x2) + 1):
                self.draw_point_clip(x, _round(m * x + b), color)
        else:
            for y in range(min(y1, y2), max(y1, y2) + 1):
                self.draw_point_clip(_round((y - b) / m), y, color)

    def draw_line(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Draw a line with Bresenham's algorithm, endpoints included."""
        steep = abs(y2 - y1) > abs(x2 - x1)
        if steep:
            x1, y1 = y1, x1
            x2, y2 = y2, x2
        if x1 > x2:
            x1, x2 = x2, x1
            y1, y2 = y2, y1
        dx = x2 - x1
        dy = abs(y2 - y1)
        error = dx // 2
        ystep = 1 if y1 < y2 else -1
        y = y1
        for x in range(x1, x2 + 1):
            if steep:
                self.draw_point(y, x, color)
            else:
                self.draw_point(x, y, color)
            error -= dy
            if error < 0:
                y += ystep
                error += dx

    def draw_triangle(
        self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: Color
    ) -> None:
        """Draw the outline of a triangle; skipped if a vertex lies past the far edges."""
        for vx, vy in ((x1, y1), (x2, y2), (x3, y3)):
            if vx > self.width or vy > self.height:
                return
        self.draw_line(x1, y1, x2, y2, color)
        self.draw_line(x2, y2, x3, y3, color)
        self.draw_line(x3, y3, x1, y1, color)

    def draw_octants(self, xc: int, yc: int, x: int, y: int, color: Color) -> None:
        """Draw the eight symmetric circle points for offset (x, y) around (xc, yc)."""
        for px, py in (
            (xc + x, yc + y),
            (xc - x, yc + y),
            (xc + x, yc - y),
            (xc - x, yc - y),
            (xc + y, yc + x),
            (xc - y, yc + x),
            (xc + y, yc - x),
            (xc - y, yc - x),
        ):
            self.draw_point(px, py, color)

    def draw_circle(self, xc: int, yc: int, r: int, color: Color) -> None:
        """Draw a circle outline with Bresenham's midpoint algorithm."""
        x, y = 0, r
        d = 3 - 2 * r
        self.draw_octants(xc, yc, x, y, color)
        while y >= x:
            x += 1
            if d > 0:
                y -= 1
                d += 4 * (x - y) + 10
            else:
                d += 4 * x + 6
            self.draw_octants(xc, yc, x, y, color)

    def clipping_region_code(self, x: int, y: int) -> OutCode:
        """Return the Cohen-Sutherland region code of a point."""
        code = OutCode.INSIDE
        if x < 0:
            code |= OutCode.LEFT
        if x > self.width:
            code |= OutCode.RIGHT
        if y < 0:
            code |= OutCode.TOP
        if y > self.height:
            code |= OutCode.BOTTOM
        return code

    def clip_line(
        self, x1: int, y1: int, x2: int, y2: int
    ) -> tuple[int, int, int, int] | None:
        """Clip a segment to the buffer; return its new endpoints or None if it misses."""
        code1 = self.clipping_region_code(x1, y1)
        code2 = self.clipping_region_code(x2, y2)
        while True:
            if not code1 and not code2:
                return x1, y1, x2, y2
            if code1 & code2:
                return None
            out = code1 if code1 else code2
            if out & OutCode.TOP:
                x, y = x1 + _div((x2 - x1) * (0 - y1), y2 - y1), 0
            elif out & OutCode.BOTTOM:
                x, y = x1 + _div((x2 - x1) * (self.height - y1), y2 - y1), self.height
            elif out & OutCode.RIGHT:
                x, y = self.width, y1 + _div((y2 - y1) * (self.width - x1), x2 - x1)
            else:
                x, y = 0, y1 + _div((y2 - y1) * (0 - x1), x2 - x1)
            if out == code1:
                x1, y1 = x, y
                code1 = self.clipping_region_code(x1, y1)
            else:
                x2, y2 = x, y
                code2 = self.clipping_region_code(x2, y2)

    def draw_linear_curve(self, x1: int, y1: int, x2: int, y2: int, color: Color) -> None:
        """Draw a straight segment as ten interpolated pieces."""
        steps = 10
        dt = 1 / steps
        t1 = 0.0
        for _ in range(steps):
            t2 = t1 + dt
            self.draw_line(
                lerp(x1, x2, t1), lerp(y1, y2, t1), lerp(x1, x2, t2), lerp(y1, y2, t2), color
            )
            t1 += dt

    def draw_quadratic_curve(
        self, x1: int, y1: int, x2: int, y2: int, x3: int, y3: int, color: Color
    ) -> None:
        """Draw a quadratic curve as one hundred line pieces."""
        steps = 100
        dt = 1 / steps
        t1 = 0.0
        for _ in range(steps):
            sx1, sy1 = quadratic_point(x1, y1, x2, y2, x3, y3, t1)
            sx2, sy2 = quadratic_point(x1, y1, x2, y2, x3, y3, t1 + dt)
            t1 += dt
            self.draw_line(sx1, sy1, sx2, sy2, color)

    def draw_cubic_curve(
        self,
        x1: int,
        y1: int,
        x2: int,
        y2: int,
        x3: int,
        y3: int,
        x4: int,
        y4: int,
        color: Color,
    ) -> None:
        """Draw a cubic Bezier curve as ten line pieces."""
        steps = 10
        dt = 1 / steps
        t1 = 0.0
        for _ in range(steps):
            sx1, sy1 = cubic_point(x1, y1, x2, y2, x3, y3, x4, y4, t1)
            sx2, sy2 = cubic_point(x1, y1, x2, y2, x3, y3, x4, y4, t1 + dt)
            t1 += dt
            self.draw_line(sx1, sy1, sx2, sy2, color)

    def draw_image(self, x: int, y: int, image: Image) -> None:
        """Blend an image with its top-left corner at (x, y), skipping transparent pixels."""
        if (
            x + image.width < 0
            or x >= self.width
            or y + image.height < 0
            or y >= self.height
        ):
            return
        for iy in range(image.height):
            sy = y + iy
            if not 0 <= sy < self.height:
                continue
            row = image.pixels[iy * image.width : (iy + 1) * image.width]
            for ix, color in enumerate(row):
                sx = x + ix
                if 0 <= sx < self.width and color.a != 0:
                    self.draw_point(sx, sy, color)

    def to_bytes(self) -> bytes:
        """Return the pixels as packed RGBA bytes, row by row."""
        return bytes(channel for color in self.buffer for channel in color)
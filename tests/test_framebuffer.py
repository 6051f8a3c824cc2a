import pytest

from rastertrace.color import BlendMode, Color, alpha_blend, set_blend_mode
from rastertrace.framebuffer import Framebuffer, OutCode
from rastertrace.image import Image

RED = Color(255, 0, 0, 255)
BLUE = Color(0, 0, 255, 255)
BLANK = Color(0, 0, 0, 0)


@pytest.fixture(autouse=True)
def normal_blending():
    set_blend_mode(BlendMode.NORMAL)
    yield
    set_blend_mode(BlendMode.NORMAL)


def painted(fb, color=RED):
    return {
        (i % fb.width, i // fb.width)
        for i, c in enumerate(fb.buffer)
        if c == color
    }


def test_new_buffer_is_blank():
    fb = Framebuffer(4, 3)
    assert fb.to_bytes() == bytes(4 * 3 * 4)
    assert fb.pitch == 16


def test_negative_size_rejected():
    with pytest.raises(ValueError):
        Framebuffer(-1, 5)


def test_clear_fills_every_pixel():
    fb = Framebuffer(3, 2)
    fb.clear(BLUE)
    assert fb.to_bytes() == bytes(BLUE) * 6


def test_draw_point_sets_pixel():
    fb = Framebuffer(5, 5)
    fb.draw_point(2, 3, RED)
    assert painted(fb) == {(2, 3)}


@pytest.mark.parametrize("x, y", [(-1, 0), (5, 0), (0, 5), (0, -1)])
def test_draw_point_outside_raises(x, y):
    fb = Framebuffer(5, 5)
    with pytest.raises(IndexError):
        fb.draw_point(x, y, RED)


@pytest.mark.parametrize("x, y", [(-1, 0), (5, 0), (0, 5), (0, -1)])
def test_draw_point_clip_ignores_outside(x, y):
    fb = Framebuffer(5, 5)
    fb.draw_point_clip(x, y, RED)
    assert fb.buffer == [BLANK] * 25


def test_draw_point_uses_blend_mode():
    fb = Framebuffer(2, 2)
    fb.clear(BLUE)
    src = Color(200, 100, 50, 128)
    set_blend_mode(BlendMode.ALPHA)
    fb.draw_point(1, 1, src)
    assert fb.buffer[3] == alpha_blend(src, BLUE)
    assert fb.buffer[0] == BLUE


def test_draw_rect_inside():
    fb = Framebuffer(6, 6)
    fb.draw_rect(1, 2, 3, 2, RED)
    assert painted(fb) == {(x, y) for x in range(1, 4) for y in range(2, 4)}


def test_draw_rect_clipped():
    fb = Framebuffer(4, 4)
    fb.draw_rect(-2, 3, 4, 5, RED)
    assert painted(fb) == {(0, 3), (1, 3)}


def test_draw_rect_fully_outside():
    fb = Framebuffer(4, 4)
    fb.draw_rect(10, 10, 3, 3, RED)
    assert painted(fb) == set()


def test_draw_line_horizontal():
    fb = Framebuffer(8, 4)
    fb.draw_line(1, 2, 5, 2, RED)
    assert painted(fb) == {(x, 2) for x in range(1, 6)}


def test_draw_line_vertical_is_steep():
    fb = Framebuffer(4, 8)
    fb.draw_line(2, 1, 2, 6, RED)
    assert painted(fb) == {(2, y) for y in range(1, 7)}


def test_draw_line_diagonal():
    fb = Framebuffer(6, 6)
    fb.draw_line(0, 0, 5, 5, RED)
    assert painted(fb) == {(i, i) for i in range(6)}


@pytest.mark.parametrize("points", [(0, 0, 7, 3), (1, 6, 4, 0), (6, 1, 0, 5)])
def test_draw_line_is_symmetric_and_includes_endpoints(points):
    x1, y1, x2, y2 = points
    forward = Framebuffer(8, 8)
    forward.draw_line(x1, y1, x2, y2, RED)
    backward = Framebuffer(8, 8)
    backward.draw_line(x2, y2, x1, y1, RED)
    assert (x1, y1) in painted(forward)
    assert (x2, y2) in painted(forward)
    assert len(painted(forward)) == max(abs(x2 - x1), abs(y2 - y1)) + 1
    assert len(painted(backward)) == len(painted(forward))


def test_draw_line_slope_horizontal():
    fb = Framebuffer(8, 4)
    fb.draw_line_slope(1, 1, 6, 1, RED)
    assert painted(fb) == {(x, 1) for x in range(1, 7)}


def test_draw_line_slope_vertical_excludes_last():
    fb = Framebuffer(4, 8)
    fb.draw_line_slope(2, 5, 2, 1, RED)
    assert painted(fb) == {(2, y) for y in range(1, 5)}


def test_draw_line_slope_clips():
    fb = Framebuffer(4, 4)
    fb.draw_line_slope(-3, 0, 10, 0, RED)
    assert painted(fb) == {(x, 0) for x in range(4)}


def test_draw_triangle_touches_vertices():
    fb = Framebuffer(10, 10)
    fb.draw_triangle(1, 1, 8, 1, 4, 7, RED)
    pixels = painted(fb)
    assert {(1, 1), (8, 1), (4, 7)} <= pixels
    assert {(x, 1) for x in range(1, 9)} <= pixels


def test_draw_triangle_skipped_beyond_edges():
    fb = Framebuffer(10, 10)
    fb.draw_triangle(1, 1, 11, 1, 4, 7, RED)
    assert painted(fb) == set()


def test_draw_circle_cardinal_points_and_symmetry():
    fb = Framebuffer(20, 20)
    fb.draw_circle(10, 10, 5, RED)
    pixels = painted(fb)
    assert {(10, 5), (10, 15), (5, 10), (15, 10)} <= pixels
    assert all((20 - x, y) in pixels for x, y in pixels)
    assert all((y, x) in pixels for x, y in pixels)
    assert (10, 10) not in pixels


def test_draw_octants_mirrors_point():
    fb = Framebuffer(10, 10)
    fb.draw_octants(5, 5, 1, 2, RED)
    assert painted(fb) == {
        (6, 7), (4, 7), (6, 3), (4, 3), (7, 6), (3, 6), (7, 4), (3, 4)
    }


@pytest.mark.parametrize(
    "x, y, code",
    [
        (5, 5, OutCode.INSIDE),
        (-1, 5, OutCode.LEFT),
        (11, 5, OutCode.RIGHT),
        (5, 11, OutCode.BOTTOM),
        (5, -1, OutCode.TOP),
        (-1, -1, OutCode.LEFT | OutCode.TOP),
        (10, 10, OutCode.INSIDE),
    ],
)
def test_clipping_region_code(x, y, code):
    fb = Framebuffer(10, 10)
    assert fb.clipping_region_code(x, y) == code


@pytest.mark.parametrize(
    "x, y, value",
    [(5, 5, 0), (-1, 5, 1), (11, 5, 2), (5, 11, 4), (5, -1, 8), (11, 11, 6)],
)
def test_region_code_bits_match_source_values(x, y, value):
    fb = Framebuffer(10, 10)
    assert int(fb.clipping_region_code(x, y)) == value


def test_clip_line_inside_unchanged():
    fb = Framebuffer(20, 20)
    assert fb.clip_line(1, 2, 15, 18) == (1, 2, 15, 18)


def test_clip_line_rejects_same_side():
    fb = Framebuffer(20, 20)
    assert fb.clip_line(-5, 1, -1, 9) is None


def test_clip_line_crossing_left_edge():
    fb = Framebuffer(20, 20)
    assert fb.clip_line(-10, 5, 10, 5) == (0, 5, 10, 5)


def test_clip_line_crossing_both_edges_stays_inside():
    fb = Framebuffer(20, 20)
    result = fb.clip_line(-10, -10, 30, 30)
    assert result == (0, 0, 20, 20)
    x1, y1, x2, y2 = result
    assert fb.clipping_region_code(x1, y1) == OutCode.INSIDE
    assert fb.clipping_region_code(x2, y2) == OutCode.INSIDE


def test_linear_curve_stays_on_segment():
    fb = Framebuffer(12, 4)
    fb.draw_linear_curve(0, 1, 9, 1, RED)
    pixels = painted(fb)
    assert (0, 1) in pixels
    assert all(y == 1 and 0 <= x <= 9 for x, y in pixels)


def test_quadratic_curve_degenerate_is_single_point():
    fb = Framebuffer(4, 4)
    fb.draw_quadratic_curve(0, 0, 0, 0, 0, 0, RED)
    assert painted(fb) == {(0, 0)}


def test_cubic_curve_degenerate_is_single_point():
    fb = Framebuffer(6, 6)
    fb.draw_cubic_curve(3, 2, 3, 2, 3, 2, 3, 2, RED)
    assert painted(fb) == {(3, 2)}


def test_cubic_curve_starts_at_first_point():
    fb = Framebuffer(12, 12)
    fb.draw_cubic_curve(1, 1, 4, 8, 7, 8, 10, 1, RED)
    assert (1, 1) in painted(fb)


def test_draw_image_skips_transparent_pixels():
    fb = Framebuffer(4, 4)
    clear = Color(9, 9, 9, 0)
    image = Image(2, 2, [RED, clear, BLUE, RED])
    fb.draw_image(1, 1, image)
    assert fb.buffer[1 + 1 * 4] == RED
    assert fb.buffer[2 + 1 * 4] == BLANK
    assert fb.buffer[1 + 2 * 4] == BLUE
    assert fb.buffer[2 + 2 * 4] == RED


def test_draw_image_clipped_at_edges():
    fb = Framebuffer(3, 3)
    image = Image(2, 2, [RED] * 4)
    fb.draw_image(-1, 2, image)
    assert painted(fb) == {(0, 2)}


def test_draw_image_offscreen_draws_nothing():
    fb = Framebuffer(3, 3)
    image = Image(2, 2, [RED] * 4)
    fb.draw_image(5, 0, image)
    assert painted(fb) == set()


def test_to_bytes_layout_is_row_major_rgba():
    fb = Framebuffer(2, 2)
    fb.draw_point(1, 0, Color(1, 2, 3, 4))
    data = fb.to_bytes()
    assert len(data) == 16
    assert data[4:8] == bytes([1, 2, 3, 4])
    assert data[:4] == bytes(4)
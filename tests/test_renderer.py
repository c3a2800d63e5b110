import numpy as np

from renderer import CanvasSurface, diagonal_gradient, hex_to_bgr
from sim import Circle, Line

COLORS = ["#d4362b", "#f89334", "#e4e706", "#00c975", "#1091e7"]


def test_hex_to_bgr():
    assert hex_to_bgr("#d4362b") == (0x2B, 0x36, 0xD4)


def test_gradient_runs_corner_to_corner():
    img = diagonal_gradient(100, 100, COLORS)
    assert img.shape == (100, 100, 3)
    assert tuple(img[0, 0]) == hex_to_bgr(COLORS[0])
    np.testing.assert_allclose(img[99, 99], hex_to_bgr(COLORS[-1]), atol=6)


def test_clear_gives_black_frame():
    s = CanvasSurface(40, 30, COLORS)
    s.fill_circle(Circle(10.0, 10.0, 3.0))
    s.clear()
    frame = s.present()
    assert frame.shape == (30, 40, 3)
    assert frame.dtype == np.uint8
    assert not frame.any()


def test_circle_is_opaque_and_covers_line():
    s = CanvasSurface(50, 50, COLORS)
    s.stroke_line(Line(0.0, 25.0, 49.0, 25.0, 0.2))
    s.fill_circle(Circle(25.0, 25.0, 5.0))
    assert s.mask[25, 25] == 255
    assert 0 < s.mask[25, 5] <= round(0.2 * 255)
    assert s.present()[25, 25].any()


def test_transparent_line_is_skipped():
    s = CanvasSurface(20, 20, COLORS)
    s.stroke_line(Line(0.0, 0.0, 19.0, 19.0, 0.0))
    assert not s.mask.any()


def test_resize_reallocates():
    s = CanvasSurface(20, 20, COLORS)
    s.resize(64, 32)
    assert s.mask.shape == (32, 64)
    assert s.present().shape == (32, 64, 3)

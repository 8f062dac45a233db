"""
Tests for the numpy-backed drawing surface.
"""

import math

import numpy as np
import pytest
from PIL import Image

from engine.pixel_surface import PixelSurface


RED = (255, 0, 0, 255)


class TestRectangles:

    def test_fill_rect_is_clipped(self):
        surface = PixelSurface(10, 10)
        surface.fill_rect(-5, -5, 8, 8, RED)

        assert surface.pixel(0, 0) == RED
        assert surface.pixel(2, 2) == RED
        assert surface.pixel(3, 3) == (0, 0, 0, 0)

    def test_negative_width_is_normalised(self):
        surface = PixelSurface(10, 10)
        surface.fill_rect(5, 0, -3, 2, RED)

        assert surface.pixel(2, 0) == RED
        assert surface.pixel(4, 1) == RED
        assert surface.pixel(5, 0) == (0, 0, 0, 0)

    def test_non_finite_geometry_is_ignored(self):
        surface = PixelSurface(10, 10)
        surface.fill_rect(math.nan, 0, 5, 5, RED)
        surface.fill_rect(0, 0, math.inf, 5, RED)

        assert not surface.buffer.any()

    def test_alpha_blends_over_content(self):
        surface = PixelSurface(4, 4)
        surface.fill_rect(0, 0, 4, 4, (0, 0, 255, 255))
        surface.fill_rect(0, 0, 4, 4, (255, 0, 0, 128))

        r, g, b, a = surface.pixel(1, 1)
        assert 126 <= r <= 129
        assert 126 <= b <= 129
        assert g == 0
        assert a == 255

    def test_transparent_color_writes_nothing(self):
        surface = PixelSurface(4, 4)
        surface.fill_rect(0, 0, 4, 4, (255, 0, 0, 0))

        assert not surface.buffer.any()

    def test_clear_rect(self):
        surface = PixelSurface(4, 4)
        surface.fill_rect(0, 0, 4, 4, RED)
        surface.clear_rect(0, 0, 2, 4)

        assert surface.pixel(0, 0) == (0, 0, 0, 0)
        assert surface.pixel(3, 0) == RED


class TestStrokes:

    def test_horizontal_line(self):
        surface = PixelSurface(20, 10)
        surface.stroke_begin(RED, 1)
        surface.line_to(0, 5)
        surface.line_to(9, 5)
        surface.stroke_end()

        assert all(surface.pixel(x, 5) == RED for x in range(10))
        assert surface.pixel(15, 5) == (0, 0, 0, 0)
        assert surface.pixel(5, 2) == (0, 0, 0, 0)

    def test_thick_line_covers_pen_width(self):
        surface = PixelSurface(20, 10)
        surface.stroke_begin(RED, 3)
        surface.line_to(2, 5)
        surface.line_to(17, 5)
        surface.stroke_end()

        assert all(surface.pixel(10, y) == RED for y in (4, 5, 6))
        assert surface.pixel(10, 2) == (0, 0, 0, 0)
        assert surface.pixel(10, 8) == (0, 0, 0, 0)

    def test_line_to_without_begin_is_ignored(self):
        surface = PixelSurface(10, 10)
        surface.line_to(0, 0)
        surface.line_to(9, 9)
        surface.stroke_end()

        assert not surface.buffer.any()

    def test_non_finite_points_are_dropped(self):
        surface = PixelSurface(10, 10)
        surface.stroke_begin(RED, 1)
        surface.line_to(math.nan, 3)
        surface.line_to(2, 2)
        surface.stroke_end()

        assert surface.pixel(2, 2) == RED


class TestShapes:

    def test_fill_circle(self):
        surface = PixelSurface(20, 20)
        surface.fill_circle(10, 10, 5, RED)

        assert surface.pixel(10, 10) == RED
        assert surface.pixel(0, 0) == (0, 0, 0, 0)
        assert surface.pixel(10, 16) == (0, 0, 0, 0)

    def test_translucent_circle_blends(self):
        surface = PixelSurface(20, 20)
        surface.fill_rect(0, 0, 20, 20, (0, 0, 255, 255))
        surface.fill_circle(10, 10, 5, (255, 0, 0, 128))

        r, g, b, a = surface.pixel(10, 10)
        assert 120 < r < 136 and 120 < b < 136
        assert a == 255
        assert surface.pixel(1, 1) == (0, 0, 255, 255)

    def test_fill_polygon_triangle(self):
        surface = PixelSurface(20, 20)
        surface.fill_polygon([(10, 0), (20, 20), (0, 20)], RED)

        assert surface.pixel(10, 15) == RED
        assert surface.pixel(1, 1) == (0, 0, 0, 0)
        assert surface.pixel(18, 2) == (0, 0, 0, 0)

    def test_degenerate_polygon_is_ignored(self):
        surface = PixelSurface(10, 10)
        surface.fill_polygon([(0, 0), (5, 5)], RED)

        assert not surface.buffer.any()


class TestPixelBlocks:

    def test_rgb_block_is_opaque(self):
        surface = PixelSurface(4, 4)
        block = np.full((2, 2, 3), 200, dtype=np.uint8)
        surface.put_pixel_block(block, 1, 1)

        assert surface.pixel(1, 1) == (200, 200, 200, 255)
        assert surface.pixel(0, 0) == (0, 0, 0, 0)

    def test_block_is_clipped(self):
        surface = PixelSurface(4, 4)
        block = np.full((4, 4, 4), 9, dtype=np.uint8)
        surface.put_pixel_block(block, 2, 2)

        assert surface.pixel(3, 3) == (9, 9, 9, 9)
        assert surface.pixel(1, 1) == (0, 0, 0, 0)

    def test_bad_shape(self):
        surface = PixelSurface(4, 4)
        with pytest.raises(ValueError):
            surface.put_pixel_block(np.zeros((4, 4), dtype=np.uint8), 0, 0)


class TestLifecycle:

    def test_resize_clears(self):
        surface = PixelSurface(4, 4)
        surface.fill_rect(0, 0, 4, 4, RED)
        surface.resize(8, 2)

        assert (surface.size.width, surface.size.height) == (8, 2)
        assert surface.buffer.shape == (2, 8, 4)
        assert not surface.buffer.any()

    def test_negative_size_is_zero(self):
        surface = PixelSurface(-3, 5)

        assert surface.size.width == 0
        assert not surface.size.is_drawable

    def test_present_keeps_a_copy(self):
        surface = PixelSurface(4, 4)
        surface.fill_rect(0, 0, 4, 4, RED)
        surface.present()
        surface.clear()

        assert surface.frames_presented == 1
        assert tuple(surface.last_frame[0, 0]) == RED

    def test_save_png(self, tmp_path):
        surface = PixelSurface(6, 3)
        surface.fill_rect(0, 0, 3, 3, RED)
        path = surface.save_png(tmp_path / "out" / "frame.png")

        with Image.open(path) as image:
            assert image.size == (6, 3)
            assert image.getpixel((0, 0)) == (255, 0, 0)
            # transparent pixels are written as black
            assert image.getpixel((5, 0)) == (0, 0, 0)

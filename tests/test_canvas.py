"""Unit tests for the output canvas."""

import numpy as np
import pytest

from whitted.core.canvas import Canvas
from whitted.core.color import Color


class TestCanvas:
    """Tests for pixel storage."""

    def test_new_canvas_is_black(self):
        canvas = Canvas(10, 20)
        assert canvas.width == 10
        assert canvas.height == 20
        assert canvas.to_numpy().shape == (20, 10, 3)
        assert np.all(canvas.to_numpy() == 0.0)

    def test_write_and_read_pixel(self):
        canvas = Canvas(10, 20)
        canvas.write_pixel(2, 3, Color(1, 0, 0))
        assert canvas.pixel_at(2, 3) == Color(1, 0, 0)
        assert canvas.pixel_at(3, 2) == Color(0, 0, 0)

    def test_values_are_not_clamped(self):
        canvas = Canvas(2, 2)
        canvas.write_pixel(0, 0, Color(1.5, -0.5, 2.0))
        assert canvas.pixel_at(0, 0) == Color(1.5, -0.5, 2.0)

    def test_write_row(self):
        canvas = Canvas(3, 2)
        canvas.write_row(1, [(0.1, 0.2, 0.3), (0.4, 0.5, 0.6), (0.7, 0.8, 0.9)])
        assert canvas.pixel_at(1, 1) == Color(0.4, 0.5, 0.6)
        assert canvas.pixel_at(1, 0) == Color(0, 0, 0)

    def test_write_row_wrong_length(self):
        canvas = Canvas(3, 2)
        with pytest.raises(ValueError):
            canvas.write_row(0, [(0.1, 0.2, 0.3)])

    @pytest.mark.parametrize("x,y", [(-1, 0), (10, 0), (0, 20), (0, -1)])
    def test_out_of_bounds(self, x, y):
        canvas = Canvas(10, 20)
        with pytest.raises(ValueError):
            canvas.write_pixel(x, y, Color(1, 1, 1))
        with pytest.raises(ValueError):
            canvas.pixel_at(x, y)

    @pytest.mark.parametrize("width,height", [(0, 10), (10, 0), (-1, 5)])
    def test_invalid_size(self, width, height):
        with pytest.raises(ValueError):
            Canvas(width, height)

    def test_to_numpy_is_a_copy(self):
        canvas = Canvas(2, 2)
        data = canvas.to_numpy()
        data[0, 0] = (1.0, 1.0, 1.0)
        assert canvas.pixel_at(0, 0) == Color(0, 0, 0)

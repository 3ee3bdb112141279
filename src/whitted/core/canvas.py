"""Output pixel buffer.

The canvas stores unclamped linear colors in a row-major float64 array of
shape (height, width, 3). Encoders in ``whitted.preview`` map the values to
an output range.
"""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
import numpy.typing as npt

from whitted.core.color import Color


class Canvas:
    """A width x height grid of colors, initially black.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = width
        self._height = height
        self._pixels = np.zeros((height, width, 3), dtype=np.float64)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise ValueError(
                f"Pixel ({x}, {y}) is outside the {self._width}x{self._height} canvas"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Store ``color`` at column x, row y."""
        self._check_bounds(x, y)
        self._pixels[y, x] = (color.r, color.g, color.b)

    def pixel_at(self, x: int, y: int) -> Color:
        """Return the color at column x, row y."""
        self._check_bounds(x, y)
        r, g, b = self._pixels[y, x].tolist()
        return Color(r, g, b)

    def write_row(
        self,
        y: int,
        row: npt.NDArray[np.float64] | Sequence[tuple[float, float, float]],
    ) -> None:
        """Store a whole row of (r, g, b) values.

        Raises:
            ValueError: If the row index or row length does not fit the canvas.
        """
        self._check_bounds(0, y)
        values = np.asarray(row, dtype=np.float64)
        if values.shape != (self._width, 3):
            raise ValueError(
                f"Row must have shape ({self._width}, 3), got {values.shape}"
            )
        self._pixels[y] = values

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Return a copy of the pixel data, shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

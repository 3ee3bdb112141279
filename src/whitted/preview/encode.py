"""Conversion of linear canvas colors to integer output channels.

Every channel goes through the same mapping onto ``[0, max_value]``:

    v < 0 (or NaN)  ->  0
    v >= 1          ->  max_value
    otherwise       ->  floor(v * (max_value + 1)), capped at max_value

so that the full ``[0, 1)`` range is split into ``max_value + 1`` equal
buckets. The mapping runs as a Taichi kernel over the whole image; Taichi
must be initialized (``ti.init``) before the first call.

Example:
    >>> import taichi as ti
    >>> from whitted.preview.encode import canvas_to_rgb8
    >>> ti.init(arch=ti.cpu)
    >>> pixels = canvas_to_rgb8(canvas)  # (height, width, 3) uint8
"""

from typing import TYPE_CHECKING

import numpy as np
import numpy.typing as npt
import taichi as ti
import taichi.math as tm

if TYPE_CHECKING:
    from whitted.core.canvas import Canvas

# Largest channel value of 8-bit output
COLOR_MAXVAL = 255


# =============================================================================
# Kernels
# =============================================================================


@ti.kernel
def _quantize_kernel(
    src: ti.types.ndarray(dtype=ti.f64, ndim=3),
    dst: ti.types.ndarray(dtype=ti.i32, ndim=3),
    max_value: ti.i32,
):
    """Map each channel of ``src`` onto ``[0, max_value]`` in ``dst``."""
    for i, j, c in ti.ndrange(src.shape[0], src.shape[1], src.shape[2]):
        v = src[i, j, c]
        out = 0
        if tm.isnan(v) or v < 0.0:
            out = 0
        elif v >= 1.0:
            out = max_value
        else:
            out = ti.min(ti.cast(ti.floor(v * (max_value + 1)), ti.i32), max_value)
        dst[i, j, c] = out


# =============================================================================
# Public API
# =============================================================================


def quantize(
    image: npt.ArrayLike,
    max_value: int = COLOR_MAXVAL,
) -> npt.NDArray[np.int32]:
    """Quantize an image of linear colors.

    Args:
        image: Array of shape (H, W, C) with unclamped float channels.
        max_value: Largest output value (255 for 8-bit output).

    Returns:
        Integer array of the same shape with values in ``[0, max_value]``.

    Raises:
        ValueError: If the image is not 3-dimensional or max_value < 1.
    """
    if max_value < 1:
        raise ValueError(f"max_value must be at least 1, got {max_value}")

    src = np.ascontiguousarray(image, dtype=np.float64)
    if src.ndim != 3:
        raise ValueError(f"Expected an (H, W, C) image, got shape {src.shape}")

    dst = np.zeros(src.shape, dtype=np.int32)
    if src.size:
        _quantize_kernel(src, dst, max_value)
    return dst


def canvas_to_rgb8(canvas: "Canvas") -> npt.NDArray[np.uint8]:
    """Encode a canvas as 8-bit RGB, shape (height, width, 3)."""
    return quantize(canvas.to_numpy()).astype(np.uint8)


def row_to_rgba8(row: npt.ArrayLike) -> npt.NDArray[np.uint8]:
    """Encode one row of colors as flat RGBA bytes with opaque alpha.

    Args:
        row: Array of shape (W, 3) with unclamped colors.

    Returns:
        Array of shape (W * 4,) laid out as r, g, b, a per pixel.
    """
    values = np.asarray(row, dtype=np.float64)
    if values.ndim != 2 or values.shape[1] != 3:
        raise ValueError(f"Expected a (W, 3) row, got shape {values.shape}")

    rgb = quantize(values[np.newaxis]).astype(np.uint8)[0]
    rgba = np.full((rgb.shape[0], 4), COLOR_MAXVAL, dtype=np.uint8)
    rgba[:, :3] = rgb
    return rgba.reshape(-1)


def canvas_to_rgba8(canvas: "Canvas") -> npt.NDArray[np.uint8]:
    """Encode a canvas as 8-bit RGBA, shape (height, width, 4)."""
    rgb = canvas_to_rgb8(canvas)
    rgba = np.full((canvas.height, canvas.width, 4), COLOR_MAXVAL, dtype=np.uint8)
    rgba[..., :3] = rgb
    return rgba

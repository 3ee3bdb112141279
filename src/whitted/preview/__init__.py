"""Preview module: encoding and saving rendered canvases.

Components:
    encode: Taichi quantization of linear colors to integer channels
    export: PPM and PNG writers

Example:
    >>> from whitted.preview import save_png
    >>> save_png(canvas, "render.png")
"""

from .encode import (
    COLOR_MAXVAL,
    canvas_to_rgb8,
    canvas_to_rgba8,
    quantize,
    row_to_rgba8,
)
from .export import canvas_to_ppm, save_png, save_ppm

__all__ = [
    "COLOR_MAXVAL",
    "quantize",
    "canvas_to_rgb8",
    "canvas_to_rgba8",
    "row_to_rgba8",
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
]

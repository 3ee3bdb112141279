"""Pinhole camera with per-pixel ray generation.

The camera sits at the origin of its own space looking toward -z, with the
canvas one unit in front of it. ``transform`` is the world-to-camera
transform (typically built with ``view_transform``); rays are produced by
mapping the canvas point and the eye through its inverse.

The canvas extent is derived once at construction from the field of view
and the aspect ratio:

    half_view = tan(field_of_view / 2)
    aspect >= 1:  half_width = half_view,           half_height = half_view / aspect
    aspect <  1:  half_width = half_view * aspect,  half_height = half_view
    pixel_size = 2 * half_width / width

Example:
    >>> import math
    >>> from whitted.camera.pinhole import Camera
    >>> from whitted.core.matrix import view_transform
    >>> from whitted.core.tuples import Point, Vector
    >>> camera = Camera(100, 50, math.pi / 3)
    >>> camera.transform = view_transform(
    ...     Point(0, 1.5, -5), Point(0, 1, 0), Vector(0, 1, 0)
    ... )
    >>> ray = camera.ray_for_pixel(50, 25)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Point

if TYPE_CHECKING:
    from whitted.core.canvas import Canvas
    from whitted.core.render import ProgressCallback, RenderSettings
    from whitted.scene.world import World


class Camera:
    """A pinhole camera.

    Attributes:
        width: Horizontal size of the canvas in pixels.
        height: Vertical size of the canvas in pixels.
        field_of_view: Angle (radians) covered by the wider canvas side.
        transform: World-to-camera transform. Its inverse is computed when
            assigned.
        pixel_size: World-space size of one pixel on the canvas plane.
        half_width: Half of the canvas width in world units.
        half_height: Half of the canvas height in world units.
    """

    def __init__(
        self,
        width: int,
        height: int,
        field_of_view: float,
        transform: Matrix = IDENTITY,
    ) -> None:
        if width <= 0 or height <= 0:
            raise ValueError(f"Camera dimensions must be positive, got {width}x{height}")

        self.width = width
        self.height = height
        self.field_of_view = field_of_view
        self.transform = transform

        half_view = math.tan(field_of_view / 2.0)
        aspect = width / height
        if aspect >= 1.0:
            self.half_width = half_view
            self.half_height = half_view / aspect
        else:
            self.half_width = half_view * aspect
            self.half_height = half_view
        self.pixel_size = (self.half_width * 2.0) / width

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._inverse = value.inverse()
        self._transform = value

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Build the ray from the eye through the centre of pixel (px, py).

        Pixel (0, 0) is the top-left corner; the camera looks toward -z, so
        +x in camera space is to the left on the canvas.
        """
        x_offset = (px + 0.5) * self.pixel_size
        y_offset = (py + 0.5) * self.pixel_size

        world_x = self.half_width - x_offset
        world_y = self.half_height - y_offset

        pixel = self._inverse @ Point(world_x, world_y, -1.0)
        origin = self._inverse @ Point(0.0, 0.0, 0.0)
        direction = (pixel - origin).normalize()
        return Ray(origin, direction)

    def render(
        self,
        world: World,
        settings: RenderSettings | None = None,
        callback: ProgressCallback | None = None,
    ) -> Canvas:
        """Render ``world`` through this camera.

        See ``whitted.core.render.render`` for the options.
        """
        # Imported here to avoid a circular import with the render loop
        from whitted.core.render import render

        return render(world, self, settings, callback=callback)

    def __repr__(self) -> str:
        return (
            f"Camera(width={self.width}, height={self.height}, "
            f"field_of_view={self.field_of_view})"
        )

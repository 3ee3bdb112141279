"""Camera module for primary ray generation.

Components:
    pinhole: Perspective pinhole camera positioned with a view transform

Example:
    >>> from whitted.camera import Camera
    >>> camera = Camera(160, 120, 1.0471975512)
    >>> ray = camera.ray_for_pixel(80, 60)
"""

from .pinhole import Camera

__all__ = ["Camera"]

"""Geometry module for canonical shape primitives.

Every shape lives at the origin in its own object space and has unit size:

Components:
    sphere: Unit sphere centred on the origin
    plane: The infinite x-z plane (y = 0)
    cube: Axis-aligned cube with corners at +/-1
    cylinder: Unit-radius cylinder about the y axis, optionally truncated and capped

Kernels receive a ray that has already been transformed into object space
and follow the same pattern:

    ts = intersect_<shape>(ray)          # tuple of 0, 2 (or up to 4) t values
    normal = <shape>_normal_at(point)    # object-space normal, not normalized

``Shape`` is the closed union of the four shape dataclasses.
"""

from .cube import Cube, cube_normal_at, intersect_cube
from .cylinder import Cylinder, cylinder_normal_at, intersect_cylinder
from .plane import Plane, intersect_plane, plane_normal_at
from .sphere import Sphere, intersect_sphere, sphere_normal_at

Shape = Sphere | Plane | Cube | Cylinder

__all__ = [
    "Shape",
    "Sphere",
    "intersect_sphere",
    "sphere_normal_at",
    "Plane",
    "intersect_plane",
    "plane_normal_at",
    "Cube",
    "intersect_cube",
    "cube_normal_at",
    "Cylinder",
    "intersect_cylinder",
    "cylinder_normal_at",
]

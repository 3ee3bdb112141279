"""Axis-aligned cube primitive.

The cube spans -1..1 on every axis. Intersection uses the slab method: each
axis contributes the interval of ``t`` during which the ray lies between
that axis' two faces, and the ray hits the cube where all three intervals
overlap.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector


@dataclass(frozen=True)
class Cube:
    """An axis-aligned cube with corners at (-1, -1, -1) and (1, 1, 1)."""


def _check_axis(origin: float, direction: float, scale: float) -> tuple[float, float]:
    """Return the (tmin, tmax) interval for one pair of slabs.

    A direction component that is near zero relative to ``scale`` (the
    length of the whole direction) is treated as parallel to the slabs:
    the interval becomes unbounded (or empty when the origin lies outside)
    instead of dividing by zero.
    """
    tmin_numerator = -1.0 - origin
    tmax_numerator = 1.0 - origin

    if abs(direction) > EPSILON * scale:
        tmin = tmin_numerator / direction
        tmax = tmax_numerator / direction
    else:
        tmin = math.copysign(math.inf, tmin_numerator)
        tmax = math.copysign(math.inf, tmax_numerator)

    if tmin > tmax:
        tmin, tmax = tmax, tmin
    return tmin, tmax


def intersect_cube(ray: Ray) -> tuple[float, ...]:
    """Intersect an object-space ray with the unit cube.

    Returns:
        ``(tmin, tmax)``, or an empty tuple when the ray misses or has no
        direction.
    """
    scale = ray.direction.magnitude()
    xtmin, xtmax = _check_axis(ray.origin.x, ray.direction.x, scale)
    ytmin, ytmax = _check_axis(ray.origin.y, ray.direction.y, scale)
    ztmin, ztmax = _check_axis(ray.origin.z, ray.direction.z, scale)

    tmin = max(xtmin, ytmin, ztmin)
    tmax = min(xtmax, ytmax, ztmax)
    # A zero direction leaves the interval unbounded
    if tmin > tmax or not (math.isfinite(tmin) and math.isfinite(tmax)):
        return ()
    return (tmin, tmax)


def cube_normal_at(point: Point) -> Vector:
    """Normal of the face whose axis has the largest absolute coordinate.

    Ties (edges and corners) resolve in x, y, z order.
    """
    ax, ay, az = abs(point.x), abs(point.y), abs(point.z)
    maxc = max(ax, ay, az)
    if maxc == ax:
        return Vector(point.x, 0.0, 0.0)
    if maxc == ay:
        return Vector(0.0, point.y, 0.0)
    return Vector(0.0, 0.0, point.z)

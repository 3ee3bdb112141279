"""Unit sphere primitive.

The sphere has radius 1 and is centred on the object-space origin; size and
position in the world come from the owning object's transform.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vector
    >>> intersect_sphere(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
    (4.0, 6.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import ORIGIN, Point, Vector


@dataclass(frozen=True)
class Sphere:
    """A unit sphere at the origin (stateless)."""


def intersect_sphere(ray: Ray) -> tuple[float, ...]:
    """Intersect an object-space ray with the unit sphere.

    Solves ``a*t^2 + b*t + c = 0`` where:

        a = dot(direction, direction)
        b = 2 * dot(direction, origin - center)
        c = dot(origin - center, origin - center) - 1

    Args:
        ray: The ray in object space.

    Returns:
        ``(t0, t1)`` with ``t0 <= t1`` (equal for a tangent hit), or an empty
        tuple when the ray misses.
    """
    sphere_to_ray = ray.origin - ORIGIN
    a = ray.direction.dot(ray.direction)
    b = 2.0 * ray.direction.dot(sphere_to_ray)
    c = sphere_to_ray.dot(sphere_to_ray) - 1.0

    discriminant = b * b - 4.0 * a * c
    if discriminant < 0.0:
        return ()

    sqrt_d = math.sqrt(discriminant)
    t0 = (-b - sqrt_d) / (2.0 * a)
    t1 = (-b + sqrt_d) / (2.0 * a)
    return (t0, t1)


def sphere_normal_at(point: Point) -> Vector:
    """Object-space normal: the vector from the centre to the point."""
    return point - ORIGIN

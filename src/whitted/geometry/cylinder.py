"""Cylinder primitive about the y axis.

The cylinder has radius 1. By default it is infinitely long; ``minimum`` and
``maximum`` truncate it (both bounds exclusive) and ``closed`` adds end caps
at the truncation planes.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vector
    >>> intersect_cylinder(Ray(Point(0, 0, -5), Vector(0, 0, 1)), Cylinder())
    (4.0, 6.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector


@dataclass(frozen=True)
class Cylinder:
    """A unit-radius cylinder about the y axis.

    Attributes:
        minimum: Lower y bound (exclusive). Defaults to -infinity.
        maximum: Upper y bound (exclusive). Defaults to +infinity.
        closed: Whether the truncated ends are capped.
    """

    minimum: float = -math.inf
    maximum: float = math.inf
    closed: bool = False


def _within_radius(ray: Ray, t: float) -> bool:
    """Check whether the ray at ``t`` lies inside the unit circle in x-z."""
    x = ray.origin.x + t * ray.direction.x
    z = ray.origin.z + t * ray.direction.z
    return x * x + z * z <= 1.0


def _intersect_caps(ray: Ray, cylinder: Cylinder) -> list[float]:
    # Caps are only reachable when the ray has a y component
    if not cylinder.closed or abs(ray.direction.y) <= EPSILON * ray.direction.magnitude():
        return []

    hits = []
    for cap_y in (cylinder.minimum, cylinder.maximum):
        t = (cap_y - ray.origin.y) / ray.direction.y
        if _within_radius(ray, t):
            hits.append(t)
    return hits


def intersect_cylinder(ray: Ray, cylinder: Cylinder) -> tuple[float, ...]:
    """Intersect an object-space ray with a cylinder.

    The body is the 2-D circle quadratic in x and z:

        a = dx^2 + dz^2
        b = 2 * (ox * dx + oz * dz)
        c = ox^2 + oz^2 - 1

    ``a ~ 0`` (relative to the squared direction length) means the ray is
    parallel to the axis and cannot hit the body.
    Each root is kept only if its y value lies strictly between the bounds.

    Args:
        ray: The ray in object space.
        cylinder: The cylinder's bounds and cap flag.

    Returns:
        The sorted hit parameters: up to two from the body and up to two
        from the caps.
    """
    hits: list[float] = []

    dx, dz = ray.direction.x, ray.direction.z
    ox, oz = ray.origin.x, ray.origin.z
    a = dx * dx + dz * dz

    if a > EPSILON * ray.direction.dot(ray.direction):
        b = 2.0 * (ox * dx + oz * dz)
        c = ox * ox + oz * oz - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant >= 0.0:
            sqrt_d = math.sqrt(discriminant)
            t0 = (-b - sqrt_d) / (2.0 * a)
            t1 = (-b + sqrt_d) / (2.0 * a)
            if t0 > t1:
                t0, t1 = t1, t0

            for t in (t0, t1):
                y = ray.origin.y + t * ray.direction.y
                if cylinder.minimum < y < cylinder.maximum:
                    hits.append(t)

    hits.extend(_intersect_caps(ray, cylinder))
    return tuple(sorted(hits))


def cylinder_normal_at(point: Point, cylinder: Cylinder) -> Vector:
    """Object-space normal on the body or on a cap.

    On a closed cylinder, points inside the unit circle and within EPSILON of
    a bound are on a cap. An open cylinder has no caps.
    """
    dist = point.x * point.x + point.z * point.z
    on_cap = cylinder.closed and dist < 1.0

    if on_cap and point.y >= cylinder.maximum - EPSILON:
        return Vector(0.0, 1.0, 0.0)
    if on_cap and point.y <= cylinder.minimum + EPSILON:
        return Vector(0.0, -1.0, 0.0)
    return Vector(point.x, 0.0, point.z)

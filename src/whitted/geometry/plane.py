"""Infinite x-z plane primitive."""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector

_PLANE_NORMAL = Vector(0.0, 1.0, 0.0)


@dataclass(frozen=True)
class Plane:
    """The plane y = 0 in object space (stateless)."""


def intersect_plane(ray: Ray) -> tuple[float, ...]:
    """Intersect an object-space ray with the plane y = 0.

    A ray parallel to the plane (including one lying in it) misses. The
    parallel test is relative to the direction length, since object-space
    directions are not normalized.

    Returns:
        The single hit reported twice as ``(t, t)``, or an empty tuple.
    """
    if abs(ray.direction.y) <= EPSILON * ray.direction.magnitude():
        return ()
    t = -ray.origin.y / ray.direction.y
    return (t, t)


def plane_normal_at(point: Point) -> Vector:
    """The plane's normal is constant."""
    return _PLANE_NORMAL

"""Ray data structure.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vector
    >>> ray = Ray(Point(2.0, 3.0, 4.0), Vector(1.0, 0.0, 0.0))
    >>> ray.position(2.5)
    Point(x=4.5, y=3.0, z=4.0)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from whitted.core.tuples import Point, Vector

if TYPE_CHECKING:
    from whitted.core.matrix import Matrix


@dataclass(frozen=True)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction of the ray. Camera rays are normalized;
            rays transformed into object space generally are not, which keeps
            ``t`` values comparable across spaces.
    """

    origin: Point
    direction: Vector

    def position(self, t: float) -> Point:
        """Compute the point along the ray at parameter t."""
        return self.origin + self.direction * t

    def transform(self, matrix: Matrix) -> Ray:
        """Return the ray with origin and direction transformed by ``matrix``."""
        return Ray(matrix @ self.origin, matrix @ self.direction)

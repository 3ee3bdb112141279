"""Affine points and vectors.

Points and vectors are kept as distinct types so the affine rules are
enforced by the operators themselves: ``Point - Point`` is a ``Vector``,
``Point + Vector`` is a ``Point`` and translation never moves a ``Vector``
(see ``Matrix.__matmul__``).

Equality is approximate, using ``EPSILON``.

Example:
    >>> from whitted.core.tuples import Point, Vector
    >>> p = Point(3.0, 2.0, 1.0)
    >>> v = Vector(5.0, 6.0, 7.0)
    >>> p - v
    Point(x=-2.0, y=-4.0, z=-6.0)
"""

from __future__ import annotations

import math
from dataclasses import dataclass

# Tolerance for approximate float comparisons and acne offsets
EPSILON = 1e-5


def approx_eq(a: float, b: float, epsilon: float = EPSILON) -> bool:
    """Compare two floats with an absolute tolerance.

    Exactly equal values (including matching infinities) compare equal.
    """
    return a == b or abs(a - b) < epsilon


@dataclass(frozen=True, eq=False)
class Point:
    """A position in space (homogeneous w = 1)."""

    x: float
    y: float
    z: float

    w = 1.0

    def __add__(self, other: Vector) -> Point:
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: Point | Vector) -> Point | Vector:
        if isinstance(other, Point):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Point):
            return NotImplemented
        return (
            approx_eq(self.x, other.x)
            and approx_eq(self.y, other.y)
            and approx_eq(self.z, other.z)
        )

    __hash__ = None  # type: ignore[assignment]

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return the homogeneous (x, y, z, 1) tuple."""
        return (self.x, self.y, self.z, 1.0)


@dataclass(frozen=True, eq=False)
class Vector:
    """A direction in space (homogeneous w = 0)."""

    x: float
    y: float
    z: float

    w = 0.0

    def __add__(self, other: Vector | Point) -> Vector | Point:
        if isinstance(other, Vector):
            return Vector(self.x + other.x, self.y + other.y, self.z + other.z)
        if isinstance(other, Point):
            return Point(self.x + other.x, self.y + other.y, self.z + other.z)
        return NotImplemented

    def __sub__(self, other: Vector) -> Vector:
        if isinstance(other, Vector):
            return Vector(self.x - other.x, self.y - other.y, self.z - other.z)
        return NotImplemented

    def __neg__(self) -> Vector:
        return Vector(-self.x, -self.y, -self.z)

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar, self.z * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: float) -> Vector:
        return Vector(self.x / scalar, self.y / scalar, self.z / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Vector):
            return NotImplemented
        return (
            approx_eq(self.x, other.x)
            and approx_eq(self.y, other.y)
            and approx_eq(self.z, other.z)
        )

    __hash__ = None  # type: ignore[assignment]

    def magnitude(self) -> float:
        """Return the Euclidean length of the vector."""
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalize(self) -> Vector:
        """Return the unit vector in the same direction.

        A zero-length vector is not guarded against; the result is NaN.
        """
        magnitude = self.magnitude()
        if magnitude == 0.0:
            return Vector(math.nan, math.nan, math.nan)
        return self / magnitude

    def dot(self, other: Vector) -> float:
        """Return the dot product with ``other``."""
        return self.x * other.x + self.y * other.y + self.z * other.z

    def cross(self, other: Vector) -> Vector:
        """Return the right-handed cross product ``self x other``."""
        return Vector(
            self.y * other.z - self.z * other.y,
            self.z * other.x - self.x * other.z,
            self.x * other.y - self.y * other.x,
        )

    def as_tuple(self) -> tuple[float, float, float, float]:
        """Return the homogeneous (x, y, z, 0) tuple."""
        return (self.x, self.y, self.z, 0.0)


def reflect(incident: Vector, normal: Vector) -> Vector:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction.
        normal: The surface normal (should be normalized).

    Returns:
        ``incident - normal * 2 * dot(incident, normal)``.
    """
    return incident - normal * (2.0 * incident.dot(normal))


ORIGIN = Point(0.0, 0.0, 0.0)

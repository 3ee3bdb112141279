"""Spatial color patterns.

A pattern maps a point in pattern space to a color. Pattern space is
reached from world space through the object's inverse transform followed by
the pattern's own inverse transform, so patterns move, scale and rotate with
the object they are applied to.

Pattern types dispatch on ``PatternType``:

    SINGLE    always ``a``
    STRIPE    alternates a/b along x on unit intervals
    GRADIENT  blends a -> b linearly along each unit interval of x
    RING      alternates a/b on concentric unit rings in x-z
    CHECKER   alternates a/b on a 3-D unit checkerboard
    TEST      returns the pattern-space point as a color (for testing)
"""

from __future__ import annotations

import math
from enum import IntEnum
from typing import TYPE_CHECKING

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.tuples import Point

if TYPE_CHECKING:
    from whitted.scene.object import Object


class PatternType(IntEnum):
    """Enumeration of supported pattern types."""

    SINGLE = 0
    STRIPE = 1
    GRADIENT = 2
    RING = 3
    CHECKER = 4
    TEST = 5


class Pattern:
    """A color function over two base colors and an optional transform.

    Attributes:
        kind: The pattern type.
        a: First base color (the only color of a SINGLE pattern).
        b: Second base color.
        transform: Pattern-to-object transform. Its inverse is computed when
            assigned, so a singular transform raises ``SingularMatrixError``
            immediately.
    """

    def __init__(
        self,
        kind: PatternType = PatternType.SINGLE,
        a: Color = WHITE,
        b: Color = BLACK,
        transform: Matrix = IDENTITY,
    ) -> None:
        self.kind = PatternType(kind)
        self.a = a
        self.b = b
        self.transform = transform

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        self._inverse = value.inverse()
        self._transform = value

    @property
    def inverse(self) -> Matrix:
        return self._inverse

    # =========================================================================
    # Constructors
    # =========================================================================

    @classmethod
    def single(cls, color: Color) -> Pattern:
        return cls(PatternType.SINGLE, color, color)

    @classmethod
    def stripe(cls, a: Color, b: Color, transform: Matrix = IDENTITY) -> Pattern:
        return cls(PatternType.STRIPE, a, b, transform)

    @classmethod
    def gradient(cls, a: Color, b: Color, transform: Matrix = IDENTITY) -> Pattern:
        return cls(PatternType.GRADIENT, a, b, transform)

    @classmethod
    def ring(cls, a: Color, b: Color, transform: Matrix = IDENTITY) -> Pattern:
        return cls(PatternType.RING, a, b, transform)

    @classmethod
    def checker(cls, a: Color, b: Color, transform: Matrix = IDENTITY) -> Pattern:
        return cls(PatternType.CHECKER, a, b, transform)

    @classmethod
    def test(cls, transform: Matrix = IDENTITY) -> Pattern:
        return cls(PatternType.TEST, WHITE, BLACK, transform)

    # =========================================================================
    # Evaluation
    # =========================================================================

    def pattern_at(self, point: Point) -> Color:
        """Evaluate the pattern at a point already in pattern space."""
        kind = self.kind

        if kind == PatternType.SINGLE:
            return self.a

        if kind == PatternType.STRIPE:
            return self.a if math.floor(point.x) % 2 == 0 else self.b

        if kind == PatternType.GRADIENT:
            fraction = point.x - math.floor(point.x)
            return self.a + (self.b - self.a) * fraction

        if kind == PatternType.RING:
            radius = math.sqrt(point.x * point.x + point.z * point.z)
            return self.a if math.floor(radius) % 2 == 0 else self.b

        if kind == PatternType.CHECKER:
            total = math.floor(point.x) + math.floor(point.y) + math.floor(point.z)
            return self.a if total % 2 == 0 else self.b

        if kind == PatternType.TEST:
            return Color(point.x, point.y, point.z)

        raise ValueError(f"Unknown pattern type: {kind!r}")

    def pattern_at_object(self, obj: Object, world_point: Point) -> Color:
        """Evaluate the pattern on ``obj`` at a world-space point."""
        object_point = obj.inverse @ world_point
        pattern_point = self._inverse @ object_point
        return self.pattern_at(pattern_point)

    # =========================================================================
    # Comparison
    # =========================================================================

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Pattern):
            return NotImplemented
        return (
            self.kind == other.kind
            and self.a == other.a
            and self.b == other.b
            and self.transform == other.transform
        )

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Pattern(kind={self.kind.name}, a={self.a!r}, b={self.b!r})"

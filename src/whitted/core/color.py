"""Linear RGB color.

Components are unbounded during shading; they are only clamped when a
canvas is encoded for output (see ``whitted.preview.encode``).
"""

from __future__ import annotations

from dataclasses import dataclass

from whitted.core.tuples import approx_eq


@dataclass(frozen=True, eq=False)
class Color:
    """An RGB triple supporting componentwise arithmetic.

    Attributes:
        r: Red component.
        g: Green component.
        b: Blue component.
    """

    r: float
    g: float
    b: float

    def __add__(self, other: Color) -> Color:
        return Color(self.r + other.r, self.g + other.g, self.b + other.b)

    def __sub__(self, other: Color) -> Color:
        return Color(self.r - other.r, self.g - other.g, self.b - other.b)

    def __mul__(self, other: Color | float) -> Color:
        # Hadamard product for colors, scaling for numbers
        if isinstance(other, Color):
            return Color(self.r * other.r, self.g * other.g, self.b * other.b)
        return Color(self.r * other, self.g * other, self.b * other)

    def __rmul__(self, scalar: float) -> Color:
        return Color(self.r * scalar, self.g * scalar, self.b * scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Color):
            return NotImplemented
        return (
            approx_eq(self.r, other.r)
            and approx_eq(self.g, other.g)
            and approx_eq(self.b, other.b)
        )

    __hash__ = None  # type: ignore[assignment]

    def clamp(self, low: float = 0.0, high: float = 1.0) -> Color:
        """Return a copy with every component clamped to [low, high]."""
        return Color(
            min(max(self.r, low), high),
            min(max(self.g, low), high),
            min(max(self.b, low), high),
        )

    def as_tuple(self) -> tuple[float, float, float]:
        """Return the (r, g, b) tuple."""
        return (self.r, self.g, self.b)


BLACK = Color(0.0, 0.0, 0.0)
WHITE = Color(1.0, 1.0, 1.0)

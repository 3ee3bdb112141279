"""Phong surface material.

Example:
    >>> from whitted.core.color import Color
    >>> from whitted.materials.material import Material
    >>> glass = Material(transparency=1.0, refractive_index=1.5)
    >>> red = Material().with_color(Color(1.0, 0.0, 0.0))
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from whitted.core.color import WHITE, Color
from whitted.core.tuples import approx_eq
from whitted.materials.patterns import Pattern

# Common refractive indices
VACUUM = 1.0
AIR = 1.00029
WATER = 1.333
GLASS = 1.52
DIAMOND = 2.417


@dataclass(eq=False)
class Material:
    """Surface response parameters for the Phong model.

    Attributes:
        ambient: Fraction of the light's color contributed regardless of
            geometry.
        diffuse: Weight of the Lambertian term.
        specular: Weight of the highlight term.
        shininess: Highlight exponent; larger means a smaller, sharper
            highlight.
        reflective: 0 for no reflection, 1 for a perfect mirror.
        transparency: 0 for opaque, 1 for fully transparent.
        refractive_index: Index of refraction (>= 1).
        pattern: Surface color function.
    """

    ambient: float = 0.1
    diffuse: float = 0.9
    specular: float = 0.9
    shininess: float = 200.0
    reflective: float = 0.0
    transparency: float = 0.0
    refractive_index: float = VACUUM
    pattern: Pattern = field(default_factory=lambda: Pattern.single(WHITE))

    def with_color(self, color: Color) -> Material:
        """Return a copy using a single-color pattern."""
        return replace(self, pattern=Pattern.single(color))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Material):
            return NotImplemented
        return (
            self.pattern == other.pattern
            and approx_eq(self.ambient, other.ambient)
            and approx_eq(self.diffuse, other.diffuse)
            and approx_eq(self.specular, other.specular)
            and approx_eq(self.shininess, other.shininess)
            and approx_eq(self.reflective, other.reflective)
            and approx_eq(self.transparency, other.transparency)
            and approx_eq(self.refractive_index, other.refractive_index)
        )

    __hash__ = None  # type: ignore[assignment]

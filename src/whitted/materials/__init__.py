"""Materials module for surface appearance.

Components:
    patterns: Spatial color functions evaluated in pattern space
    material: Phong material parameters plus reflection/refraction controls
    phong: Point lights and the Phong lighting function

Example:
    >>> from whitted.materials import Material, Pattern, PointLight, lighting
    >>> from whitted.core.color import Color
    >>> floor = Material(
    ...     pattern=Pattern.checker(Color(1, 1, 1), Color(0, 0, 0)),
    ...     reflective=0.2,
    ... )
"""

from .material import AIR, DIAMOND, GLASS, VACUUM, WATER, Material
from .patterns import Pattern, PatternType
from .phong import PointLight, lighting

__all__ = [
    "Pattern",
    "PatternType",
    "Material",
    "VACUUM",
    "AIR",
    "WATER",
    "GLASS",
    "DIAMOND",
    "PointLight",
    "lighting",
]

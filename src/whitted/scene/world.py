"""World composition and recursive color resolution.

The world is a list of lights and a list of objects. ``color_at`` is the
entry point for a ray: it finds the visible hit, builds its shading context
and calls ``shade_hit``, which sums Phong lighting over every light and then
recurses into ``reflected_color`` and ``refracted_color``.

Recursion is bounded by ``remaining``: every reflective or refractive bounce
decrements it and a branch that reaches 0 contributes black. This is the
only thing that stops rays bouncing forever between mutually reflective
surfaces, so it must be finite.

Example:
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vector
    >>> from whitted.scene.world import default_world
    >>> world = default_world()
    >>> color = world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)), remaining=5)
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field

from whitted.core.color import BLACK, Color
from whitted.core.matrix import scaling
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point
from whitted.geometry import Sphere
from whitted.materials.material import Material
from whitted.materials.patterns import Pattern
from whitted.materials.phong import PointLight, lighting
from whitted.scene.computations import Computations, prepare_computations
from whitted.scene.intersection import Intersections
from whitted.scene.object import Object

# Default recursion budget for reflection/refraction
DEFAULT_DEPTH = 5

# Color returned for rays that escape the scene
BACKGROUND_COLOR = BLACK


@dataclass
class World:
    """A scene: point lights and objects, in insertion order.

    The world is treated as read-only while rendering.

    Attributes:
        lights: The point lights; their contributions are summed.
        objects: The objects every ray is tested against.
    """

    lights: list[PointLight] = field(default_factory=list)
    objects: list[Object] = field(default_factory=list)

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect ``ray`` with every object.

        Returns:
            All intersections, sorted by ``t``.
        """
        intersections = Intersections()
        for obj in self.objects:
            intersections.intersect(ray, obj)
        return intersections

    def is_shadowed(self, point: Point, light: PointLight) -> bool:
        """Check whether any object lies between ``point`` and ``light``."""
        v = light.position - point
        distance = v.magnitude()
        ray = Ray(point, v.normalize())

        hit = self.intersect(ray).hit()
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: Computations, remaining: int = DEFAULT_DEPTH) -> Color:
        """Color of a prepared hit: local lighting plus secondary rays."""
        material = comps.object.material
        surface = BLACK
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            surface = surface + lighting(
                material,
                comps.object,
                light,
                comps.point,
                comps.eye_v,
                comps.normal_v,
                shadowed,
            )

        reflected = self.reflected_color(comps, remaining)
        refracted = self.refracted_color(comps, remaining)
        return surface + reflected + refracted

    def reflected_color(self, comps: Computations, remaining: int = DEFAULT_DEPTH) -> Color:
        """Color seen along the mirror direction, scaled by ``reflective``."""
        reflective = comps.object.material.reflective
        if remaining <= 0 or abs(reflective) < EPSILON:
            return BLACK

        reflect_ray = Ray(comps.over_point, comps.reflective_v)
        return self.color_at(reflect_ray, remaining - 1) * reflective

    def refracted_color(self, comps: Computations, remaining: int = DEFAULT_DEPTH) -> Color:
        """Color seen through the surface, scaled by ``transparency``.

        Uses Snell's law with ``n1``/``n2`` from the shading context. Total
        internal reflection contributes black.
        """
        transparency = comps.object.material.transparency
        if remaining <= 0 or abs(transparency) < EPSILON:
            return BLACK

        n_ratio = comps.n1 / comps.n2
        cos_i = comps.eye_v.dot(comps.normal_v)
        sin2_t = n_ratio * n_ratio * (1.0 - cos_i * cos_i)
        if sin2_t > 1.0:
            return BLACK

        cos_t = math.sqrt(1.0 - sin2_t)
        direction = comps.normal_v * (n_ratio * cos_i - cos_t) - comps.eye_v * n_ratio
        refract_ray = Ray(comps.under_point, direction)
        return self.color_at(refract_ray, remaining - 1) * transparency

    def color_at(self, ray: Ray, remaining: int = DEFAULT_DEPTH) -> Color:
        """Trace ``ray`` into the world and return the color it sees.

        Args:
            ray: The ray to trace.
            remaining: Recursion budget for reflection and refraction.

        Raises:
            ValueError: If ``remaining`` is negative.
        """
        if remaining < 0:
            raise ValueError(f"Recursion depth must be non-negative, got {remaining}")

        intersections = self.intersect(ray)
        hit = intersections.hit()
        if hit is None:
            return BACKGROUND_COLOR

        comps = prepare_computations(hit, ray, intersections)
        return self.shade_hit(comps, remaining)


def default_world() -> World:
    """Return the reference two-sphere world.

    One white light at (-10, 10, -10), a unit sphere with a green-yellow
    material and a concentric sphere of radius 0.5 with the default material.
    """
    outer = Object(
        Sphere(),
        material=Material(
            diffuse=0.7,
            specular=0.2,
            pattern=Pattern.single(Color(0.8, 1.0, 0.6)),
        ),
    )
    inner = Object(Sphere(), transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(Point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))
    return World(lights=[light], objects=[outer, inner])

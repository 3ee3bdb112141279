"""Scene module: objects, intersections, shading context and the world.

Components:
    object: Shapes placed in the world with a transform and material
    intersection: Intersection records and the sorted collection with hit()
    computations: Precomputed shading context, refractive-index tracking, Schlick
    world: Lights + objects and the recursive color resolver
    demo: Built-in demonstration scenes

Example:
    >>> from whitted.scene import World, Object, default_world
    >>> from whitted.core.ray import Ray
    >>> from whitted.core.tuples import Point, Vector
    >>> world = default_world()
    >>> color = world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
"""

from .computations import Computations, prepare_computations
from .intersection import Intersection, Intersections
from .object import Object, glass_sphere
from .world import BACKGROUND_COLOR, DEFAULT_DEPTH, World, default_world

__all__ = [
    "Object",
    "glass_sphere",
    "Intersection",
    "Intersections",
    "Computations",
    "prepare_computations",
    "World",
    "default_world",
    "DEFAULT_DEPTH",
    "BACKGROUND_COLOR",
]

"""Built-in demonstration scenes.

Each builder returns a ``(World, Camera)`` pair ready to render and is used
by the example script and the end-to-end tests.

Scenes:
    shadow_scene: Three spheres casting shadows onto a floor plane
    material_scene: Patterns, a mirror floor and a glass sphere with an air bubble
    shapes_scene: Cubes and capped cylinders on a checkered floor
"""

from __future__ import annotations

import math
from collections.abc import Callable

from whitted.camera.pinhole import Camera
from whitted.core.color import Color
from whitted.core.matrix import (
    rotation_x,
    rotation_y,
    scaling,
    translation,
    view_transform,
)
from whitted.core.tuples import Point, Vector
from whitted.geometry import Cube, Cylinder, Plane, Sphere
from whitted.materials.material import AIR, GLASS, Material
from whitted.materials.patterns import Pattern
from whitted.materials.phong import PointLight
from whitted.scene.object import Object
from whitted.scene.world import World

SceneBuilder = Callable[..., tuple[World, Camera]]


def shadow_scene(width: int = 200, height: int = 100) -> tuple[World, Camera]:
    """Three matte spheres resting above a floor, lit from the upper left."""
    base = Material(specular=0.0).with_color(Color(1.0, 0.9, 0.9))

    floor = Object(Plane(), material=base)

    middle = Object(
        Sphere(),
        transform=translation(-0.5, 1.0, 0.5),
        material=Material(diffuse=0.7, specular=0.3).with_color(Color(0.1, 1.0, 0.5)),
    )
    right = Object(
        Sphere(),
        transform=translation(1.2, 0.5, 0.7) @ scaling(0.5, 0.5, 0.5),
        material=Material(diffuse=0.7, specular=0.3).with_color(Color(0.5, 1.0, 0.1)),
    )
    left = Object(
        Sphere(),
        transform=translation(-1.5, 1.77, -0.75) @ scaling(0.33, 0.33, 0.33),
        material=Material(diffuse=0.7, specular=0.3).with_color(Color(1.0, 0.8, 0.1)),
    )

    world = World(
        lights=[PointLight(Point(-10.0, 10.0, -10.0), Color(1.0, 1.0, 1.0))],
        objects=[floor, middle, right, left],
    )
    camera = Camera(
        width,
        height,
        math.pi / 3.0,
        view_transform(Point(0.0, 1.5, -5.0), Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0)),
    )
    return world, camera


def material_scene(width: int = 200, height: int = 100) -> tuple[World, Camera]:
    """Patterns, reflection and nested refraction in one scene."""
    floor = Object(
        Plane(),
        material=Material(
            specular=0.0,
            reflective=0.3,
            pattern=Pattern.checker(
                Color(0.35, 0.35, 0.35),
                Color(0.65, 0.65, 0.65),
            ),
        ),
    )
    wall = Object(
        Plane(),
        transform=translation(0.0, 0.0, 10.0) @ rotation_x(math.pi / 2.0),
        material=Material(
            specular=0.0,
            pattern=Pattern.stripe(
                Color(0.45, 0.45, 0.45),
                Color(0.55, 0.55, 0.55),
                rotation_y(math.pi / 2.0) @ scaling(0.5, 0.5, 0.5),
            ),
        ),
    )
    gradient_ball = Object(
        Sphere(),
        transform=translation(-2.0, 0.7, 1.5) @ scaling(0.7, 0.7, 0.7),
        material=Material(
            pattern=Pattern.gradient(
                Color(1.0, 0.2, 0.2),
                Color(0.2, 0.2, 1.0),
                translation(-1.0, 0.0, 0.0) @ scaling(2.0, 1.0, 1.0),
            ),
        ),
    )
    ring_ball = Object(
        Sphere(),
        transform=translation(2.0, 0.6, 1.0) @ scaling(0.6, 0.6, 0.6),
        material=Material(
            pattern=Pattern.ring(
                Color(0.9, 0.9, 0.2),
                Color(0.2, 0.6, 0.2),
                scaling(0.2, 0.2, 0.2),
            ),
        ),
    )
    glass = Object(
        Sphere(),
        transform=translation(0.0, 1.0, 0.5),
        material=Material(
            ambient=0.0,
            diffuse=0.1,
            specular=1.0,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=GLASS,
        ).with_color(Color(0.05, 0.05, 0.1)),
    )
    bubble = Object(
        Sphere(),
        transform=translation(0.0, 1.0, 0.5) @ scaling(0.5, 0.5, 0.5),
        material=Material(
            ambient=0.0,
            diffuse=0.0,
            specular=0.9,
            shininess=300.0,
            reflective=0.9,
            transparency=0.9,
            refractive_index=AIR,
        ),
    )

    world = World(
        lights=[PointLight(Point(-4.9, 4.9, -1.0), Color(1.0, 1.0, 1.0))],
        objects=[floor, wall, gradient_ball, ring_ball, glass, bubble],
    )
    camera = Camera(
        width,
        height,
        0.9,
        view_transform(Point(0.0, 2.0, -5.0), Point(0.0, 1.0, 0.0), Vector(0.0, 1.0, 0.0)),
    )
    return world, camera


def shapes_scene(width: int = 200, height: int = 100) -> tuple[World, Camera]:
    """A cube, an open tube and a capped cylinder on a checkered floor."""
    floor = Object(
        Plane(),
        material=Material(
            specular=0.0,
            pattern=Pattern.checker(Color(1.0, 1.0, 1.0), Color(0.2, 0.2, 0.2)),
        ),
    )
    box = Object(
        Cube(),
        transform=translation(-1.5, 0.5, 1.0) @ rotation_y(math.pi / 6.0) @ scaling(0.5, 0.5, 0.5),
        material=Material(reflective=0.2).with_color(Color(0.8, 0.3, 0.2)),
    )
    tube = Object(
        Cylinder(minimum=0.0, maximum=1.5),
        transform=translation(0.0, 0.0, 2.0) @ scaling(0.6, 1.0, 0.6),
        material=Material().with_color(Color(0.2, 0.5, 0.9)),
    )
    drum = Object(
        Cylinder(minimum=0.0, maximum=0.5, closed=True),
        transform=translation(1.5, 0.0, 0.5) @ scaling(0.7, 1.0, 0.7),
        material=Material(transparency=0.6, refractive_index=GLASS, reflective=0.1).with_color(
            Color(0.1, 0.3, 0.1)
        ),
    )

    world = World(
        lights=[
            PointLight(Point(-5.0, 8.0, -6.0), Color(0.8, 0.8, 0.8)),
            PointLight(Point(6.0, 4.0, -4.0), Color(0.3, 0.3, 0.3)),
        ],
        objects=[floor, box, tube, drum],
    )
    camera = Camera(
        width,
        height,
        math.pi / 3.0,
        view_transform(Point(0.0, 2.5, -4.5), Point(0.0, 0.5, 1.0), Vector(0.0, 1.0, 0.0)),
    )
    return world, camera


SCENES: dict[str, SceneBuilder] = {
    "shadows": shadow_scene,
    "materials": material_scene,
    "shapes": shapes_scene,
}

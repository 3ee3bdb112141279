"""Unit tests for the world and recursive color resolution.

Tests cover:
- The reference world and world intersection
- Shadow queries
- shade_hit (outside, inside, in shadow)
- color_at (miss, hit, hit behind the eye)
- Reflection, including bounded recursion between parallel mirrors
- Refraction, including total internal reflection
"""

import math
from dataclasses import replace

import pytest

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.matrix import translation
from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vector
from whitted.geometry import Plane, Sphere
from whitted.materials.material import Material
from whitted.materials.patterns import Pattern
from whitted.materials.phong import PointLight
from whitted.scene.computations import prepare_computations
from whitted.scene.intersection import Intersection, Intersections
from whitted.scene.object import Object
from whitted.scene.world import DEFAULT_DEPTH, World

SQRT2_2 = math.sqrt(2.0) / 2.0


def assert_color(actual, expected, tol=1e-4):
    assert actual.r == pytest.approx(expected[0], abs=tol)
    assert actual.g == pytest.approx(expected[1], abs=tol)
    assert actual.b == pytest.approx(expected[2], abs=tol)


class TestWorldBasics:
    """Tests for world construction and intersection."""

    def test_empty_world(self):
        world = World()
        assert world.objects == []
        assert world.lights == []
        assert world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1))) == BLACK

    def test_default_world(self, world):
        assert world.lights == [PointLight(Point(-10, 10, -10), WHITE)]
        outer, inner = world.objects
        assert outer.material.pattern == Pattern.single(Color(0.8, 1.0, 0.6))
        assert outer.material.diffuse == 0.7
        assert outer.material.specular == 0.2
        assert inner.material == Material()
        assert inner.normal_at(Point(0.5, 0, 0)) == Vector(1, 0, 0)

    def test_intersect_world(self, world):
        xs = world.intersect(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert [i.t for i in xs] == pytest.approx([4, 4.5, 5.5, 6])


class TestShadows:
    """Tests for shadow rays toward a light."""

    @pytest.mark.parametrize(
        "point,shadowed",
        [
            (Point(0, 10, 0), False),
            (Point(10, -10, 10), True),
            (Point(-20, 20, -20), False),
            (Point(-2, 2, -2), False),
        ],
    )
    def test_is_shadowed(self, world, point, shadowed):
        assert world.is_shadowed(point, world.lights[0]) is shadowed

    def test_shade_hit_in_shadow(self):
        s1 = Object()
        s2 = Object(Sphere(), translation(0, 0, 10))
        world = World(lights=[PointLight(Point(0, 0, -10), WHITE)], objects=[s1, s2])
        ray = Ray(Point(0, 0, 5), Vector(0, 0, 1))
        comps = prepare_computations(Intersection(4, s2), ray)
        assert world.shade_hit(comps) == Color(0.1, 0.1, 0.1)


class TestShading:
    """Tests for shade_hit and color_at."""

    def test_shade_hit_outside(self, world):
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        comps = prepare_computations(Intersection(4, world.objects[0]), ray)
        assert_color(world.shade_hit(comps), (0.38066, 0.47583, 0.2855))

    def test_shade_hit_inside(self, world):
        world.lights = [PointLight(Point(0, 0.25, 0), WHITE)]
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        comps = prepare_computations(Intersection(0.5, world.objects[1]), ray)
        assert_color(world.shade_hit(comps), (0.90498, 0.90498, 0.90498))

    def test_multiple_lights_sum(self, world):
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        single = world.color_at(ray)
        world.lights = world.lights * 2
        double = world.color_at(ray)
        assert_color(double, (2 * single.r, 2 * single.g, 2 * single.b))

    def test_color_at_miss(self, world):
        assert world.color_at(Ray(Point(0, 0, -5), Vector(0, 1, 0))) == BLACK

    def test_color_at_hit(self, world):
        color = world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert_color(color, (0.38066, 0.47583, 0.2855))

    def test_color_at_hit_behind_ray(self, world):
        outer, inner = world.objects
        outer.material = replace(outer.material, ambient=1.0)
        inner.material = replace(inner.material, ambient=1.0)
        ray = Ray(Point(0, 0, 0.75), Vector(0, 0, -1))
        assert world.color_at(ray) == inner.material.pattern.a

    def test_negative_depth_rejected(self, world):
        with pytest.raises(ValueError):
            world.color_at(Ray(Point(0, 0, -5), Vector(0, 0, 1)), -1)

    def test_default_depth(self):
        assert DEFAULT_DEPTH == 5


class TestReflection:
    """Tests for reflected_color."""

    @pytest.fixture
    def mirror_floor(self, world):
        floor = Object(Plane(), translation(0, -1, 0), Material(reflective=0.5))
        world.objects.append(floor)
        ray = Ray(Point(0, 0, -3), Vector(0, -SQRT2_2, SQRT2_2))
        comps = prepare_computations(Intersection(math.sqrt(2), floor), ray)
        return world, comps

    def test_non_reflective_material(self, world):
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        inner = world.objects[1]
        inner.material = replace(inner.material, ambient=1.0)
        comps = prepare_computations(Intersection(1, inner), ray)
        assert world.reflected_color(comps) == BLACK

    def test_reflective_material(self, mirror_floor):
        world, comps = mirror_floor
        assert_color(world.reflected_color(comps), (0.19033, 0.23791, 0.14274))

    def test_shade_hit_includes_reflection(self, mirror_floor):
        world, comps = mirror_floor
        assert_color(world.shade_hit(comps), (0.87677, 0.92436, 0.82918))

    def test_no_budget_left(self, mirror_floor):
        world, comps = mirror_floor
        assert world.reflected_color(comps, 0) == BLACK

    def test_parallel_mirrors_terminate(self):
        """Rays bouncing between two mirrors stop when the budget runs out."""
        lower = Object(Plane(), translation(0, -1, 0), Material(reflective=1.0))
        upper = Object(Plane(), translation(0, 1, 0), Material(reflective=1.0))
        world = World(lights=[PointLight(Point(0, 0, 0), WHITE)], objects=[lower, upper])
        ray = Ray(Point(0, 0, 0), Vector(0, 1, 0))

        # Every level adds 0.1 ambient + 0.9 diffuse + 0.9 specular
        color = world.color_at(ray, 99)
        assert color.r == pytest.approx(190.0, rel=1e-6)
        assert color.g == pytest.approx(190.0, rel=1e-6)


class TestRefraction:
    """Tests for refracted_color."""

    def test_opaque_surface(self, world):
        shape = world.objects[0]
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        xs = Intersections([Intersection(4, shape), Intersection(6, shape)])
        comps = prepare_computations(xs[0], ray, xs)
        assert world.refracted_color(comps, 5) == BLACK

    def test_no_budget_left(self, world):
        shape = world.objects[0]
        shape.material = replace(shape.material, transparency=1.0, refractive_index=1.5)
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        xs = Intersections([Intersection(4, shape), Intersection(6, shape)])
        comps = prepare_computations(xs[0], ray, xs)
        assert world.refracted_color(comps, 0) == BLACK

    def test_total_internal_reflection(self, world):
        shape = world.objects[0]
        shape.material = replace(shape.material, transparency=1.0, refractive_index=1.5)
        ray = Ray(Point(0, 0, SQRT2_2), Vector(0, 1, 0))
        xs = Intersections([Intersection(-SQRT2_2, shape), Intersection(SQRT2_2, shape)])
        comps = prepare_computations(xs[1], ray, xs)
        assert world.refracted_color(comps, 5) == BLACK

    def test_refracted_ray(self, world):
        a, b = world.objects
        a.material = replace(a.material, ambient=1.0, pattern=Pattern.test())
        b.material = replace(b.material, transparency=1.0, refractive_index=1.5)
        ray = Ray(Point(0, 0, 0.1), Vector(0, 1, 0))
        xs = world.intersect(ray)
        assert [i.object for i in xs] == [a, b, b, a]
        comps = prepare_computations(xs[2], ray, xs)
        assert_color(world.refracted_color(comps, 5), (0.0, 0.99888, 0.04725), tol=1e-3)

    def test_shade_hit_with_transparent_floor(self, world):
        floor = Object(
            Plane(),
            translation(0, -1, 0),
            Material(transparency=0.5, refractive_index=1.5),
        )
        ball = Object(
            Sphere(),
            translation(0, -3.5, -0.5),
            Material(ambient=0.5).with_color(Color(1, 0, 0)),
        )
        world.objects.extend([floor, ball])
        ray = Ray(Point(0, 0, -3), Vector(0, -SQRT2_2, SQRT2_2))
        xs = world.intersect(ray)
        comps = prepare_computations(xs.hit(), ray, xs)
        assert comps.object is floor
        assert_color(world.shade_hit(comps, 5), (0.93642, 0.68642, 0.68642))

"""Unit tests for the shading context.

Tests cover:
- Point, eye and normal vectors (outside and inside hits)
- Acne offsets for shadow and refraction rays
- Reflection vector
- Refractive indices through nested transparent volumes
- Schlick reflectance
"""

import math

import pytest

from whitted.core.matrix import scaling, translation
from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector
from whitted.geometry import Plane
from whitted.scene.computations import prepare_computations
from whitted.scene.intersection import Intersection, Intersections
from whitted.scene.object import Object, glass_sphere

SQRT2_2 = math.sqrt(2.0) / 2.0


class TestPrepareComputations:
    """Tests for the geometric part of the context."""

    def test_outside_hit(self):
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        shape = Object()
        comps = prepare_computations(Intersection(4, shape), ray)
        assert comps.t == 4
        assert comps.object is shape
        assert comps.point == Point(0, 0, -1)
        assert comps.eye_v == Vector(0, 0, -1)
        assert comps.normal_v == Vector(0, 0, -1)
        assert comps.inside is False

    def test_inside_hit_flips_normal(self):
        ray = Ray(Point(0, 0, 0), Vector(0, 0, 1))
        comps = prepare_computations(Intersection(1, Object()), ray)
        assert comps.point == Point(0, 0, 1)
        assert comps.eye_v == Vector(0, 0, -1)
        assert comps.inside is True
        assert comps.normal_v == Vector(0, 0, -1)

    def test_over_point(self):
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        shape = Object(transform=translation(0, 0, 1))
        comps = prepare_computations(Intersection(5, shape), ray)
        assert comps.over_point.z < -EPSILON / 2
        assert comps.point.z > comps.over_point.z

    def test_under_point(self):
        ray = Ray(Point(0, 0, -5), Vector(0, 0, 1))
        shape = glass_sphere(transform=translation(0, 0, 1))
        i = Intersection(5, shape)
        comps = prepare_computations(i, ray, Intersections([i]))
        assert comps.under_point.z > EPSILON / 2
        assert comps.point.z < comps.under_point.z

    def test_reflective_vector(self):
        shape = Object(Plane())
        ray = Ray(Point(0, 1, -1), Vector(0, -SQRT2_2, SQRT2_2))
        comps = prepare_computations(Intersection(math.sqrt(2), shape), ray)
        assert comps.reflective_v == Vector(0, SQRT2_2, SQRT2_2)


class TestRefractiveIndices:
    """Tests for n1/n2 bookkeeping."""

    @pytest.fixture
    def nested(self):
        a = glass_sphere(1.5, scaling(2, 2, 2))
        b = glass_sphere(2.0, translation(0, 0, -0.25))
        c = glass_sphere(2.5, translation(0, 0, 0.25))
        ray = Ray(Point(0, 0, -4), Vector(0, 0, 1))
        xs = Intersections(
            [
                Intersection(2, a),
                Intersection(2.75, b),
                Intersection(3.25, c),
                Intersection(4.75, b),
                Intersection(5.25, c),
                Intersection(6, a),
            ]
        )
        return ray, xs

    @pytest.mark.parametrize(
        "index,n1,n2",
        [
            (0, 1.0, 1.5),
            (1, 1.5, 2.0),
            (2, 2.0, 2.5),
            (3, 2.5, 2.5),
            (4, 2.5, 1.5),
            (5, 1.5, 1.0),
        ],
    )
    def test_nested_glass(self, nested, index, n1, n2):
        ray, xs = nested
        comps = prepare_computations(xs[index], ray, xs)
        assert comps.n1 == n1
        assert comps.n2 == n2

    def test_hit_defaults_to_vacuum_without_list(self):
        glass = glass_sphere()
        comps = prepare_computations(Intersection(4, glass), Ray(Point(0, 0, -5), Vector(0, 0, 1)))
        assert comps.n1 == 1.0
        assert comps.n2 == 1.5

    def test_hit_missing_from_list(self):
        glass = glass_sphere()
        other = Intersections([Intersection(1, Object())])
        comps = prepare_computations(
            Intersection(4, glass), Ray(Point(0, 0, -5), Vector(0, 0, 1)), other
        )
        assert (comps.n1, comps.n2) == (1.0, 1.0)


class TestSchlick:
    """Tests for the Fresnel approximation."""

    def test_total_internal_reflection(self):
        shape = glass_sphere()
        ray = Ray(Point(0, 0, SQRT2_2), Vector(0, 1, 0))
        xs = Intersections([Intersection(-SQRT2_2, shape), Intersection(SQRT2_2, shape)])
        comps = prepare_computations(xs[1], ray, xs)
        assert comps.schlick() == 1.0

    def test_perpendicular_viewing(self):
        shape = glass_sphere()
        ray = Ray(Point(0, 0, 0), Vector(0, 1, 0))
        xs = Intersections([Intersection(-1, shape), Intersection(1, shape)])
        comps = prepare_computations(xs[1], ray, xs)
        assert comps.schlick() == pytest.approx(0.04, abs=1e-5)

    def test_small_angle_with_denser_second_medium(self):
        shape = glass_sphere()
        ray = Ray(Point(0, 0.99, -2), Vector(0, 0, 1))
        xs = Intersections([Intersection(1.8589, shape)])
        comps = prepare_computations(xs[0], ray, xs)
        assert comps.schlick() == pytest.approx(0.48873, abs=1e-4)

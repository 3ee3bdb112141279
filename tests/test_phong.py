"""Unit tests for materials, point lights and Phong lighting."""

import math

import pytest

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.tuples import Point, Vector
from whitted.materials.material import Material
from whitted.materials.patterns import Pattern
from whitted.materials.phong import PointLight, lighting
from whitted.scene.object import Object

SQRT2_2 = math.sqrt(2.0) / 2.0


class TestMaterial:
    """Tests for material defaults and helpers."""

    def test_defaults(self):
        m = Material()
        assert m.pattern == Pattern.single(WHITE)
        assert m.ambient == 0.1
        assert m.diffuse == 0.9
        assert m.specular == 0.9
        assert m.shininess == 200.0
        assert m.reflective == 0.0
        assert m.transparency == 0.0
        assert m.refractive_index == 1.0

    def test_with_color_returns_copy(self):
        base = Material(ambient=0.3)
        red = base.with_color(Color(1, 0, 0))
        assert red.pattern == Pattern.single(Color(1, 0, 0))
        assert red.ambient == 0.3
        assert base.pattern == Pattern.single(WHITE)

    def test_equality_is_approximate(self):
        assert Material(ambient=0.1) == Material(ambient=0.1 + 1e-7)
        assert Material() != Material(reflective=0.5)


class TestPointLight:
    """Tests for point lights."""

    def test_position_and_intensity(self):
        light = PointLight(Point(0, 0, 0), Color(1, 1, 1))
        assert light.position == Point(0, 0, 0)
        assert light.intensity == WHITE

    def test_default_intensity_is_white(self):
        light = PointLight(Point(0, 0, 0))
        assert light.intensity == WHITE


class TestLighting:
    """Tests for the Phong reflection model."""

    @pytest.fixture
    def setup(self):
        return Material(), Object(), Point(0, 0, 0)

    def test_eye_between_light_and_surface(self, setup):
        m, obj, position = setup
        light = PointLight(Point(0, 0, -10), WHITE)
        result = lighting(m, obj, light, position, Vector(0, 0, -1), Vector(0, 0, -1))
        assert result == Color(1.9, 1.9, 1.9)

    def test_eye_offset_45_degrees(self, setup):
        m, obj, position = setup
        light = PointLight(Point(0, 0, -10), WHITE)
        eye_v = Vector(0, SQRT2_2, -SQRT2_2)
        result = lighting(m, obj, light, position, eye_v, Vector(0, 0, -1))
        assert result == Color(1.0, 1.0, 1.0)

    def test_light_offset_45_degrees(self, setup):
        m, obj, position = setup
        light = PointLight(Point(0, 10, -10), WHITE)
        result = lighting(m, obj, light, position, Vector(0, 0, -1), Vector(0, 0, -1))
        assert result.r == pytest.approx(0.7364, abs=1e-4)
        assert result.g == pytest.approx(0.7364, abs=1e-4)

    def test_eye_in_reflection_path(self, setup):
        m, obj, position = setup
        light = PointLight(Point(0, 10, -10), WHITE)
        eye_v = Vector(0, -SQRT2_2, -SQRT2_2)
        result = lighting(m, obj, light, position, eye_v, Vector(0, 0, -1))
        assert result.r == pytest.approx(1.6364, abs=1e-4)

    def test_light_behind_surface(self, setup):
        m, obj, position = setup
        light = PointLight(Point(0, 0, 10), WHITE)
        result = lighting(m, obj, light, position, Vector(0, 0, -1), Vector(0, 0, -1))
        assert result == Color(0.1, 0.1, 0.1)

    def test_in_shadow_only_ambient(self, setup):
        m, obj, position = setup
        light = PointLight(Point(0, 0, -10), WHITE)
        result = lighting(m, obj, light, position, Vector(0, 0, -1), Vector(0, 0, -1), True)
        assert result == Color(0.1, 0.1, 0.1)

    def test_light_intensity_scales_result(self, setup):
        m, obj, position = setup
        light = PointLight(Point(0, 0, -10), Color(0.5, 0.5, 0.5))
        result = lighting(m, obj, light, position, Vector(0, 0, -1), Vector(0, 0, -1))
        assert result == Color(0.95, 0.95, 0.95)

    def test_pattern_applied(self):
        m = Material(ambient=1, diffuse=0, specular=0, pattern=Pattern.stripe(WHITE, BLACK))
        obj = Object()
        light = PointLight(Point(0, 0, -10), WHITE)
        eye_v = Vector(0, 0, -1)
        normal_v = Vector(0, 0, -1)
        assert lighting(m, obj, light, Point(0.9, 0, 0), eye_v, normal_v) == WHITE
        assert lighting(m, obj, light, Point(1.1, 0, 0), eye_v, normal_v) == BLACK

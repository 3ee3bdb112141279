"""Unit tests for rays."""

from whitted.core.matrix import scaling, translation
from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vector


class TestRay:
    """Tests for the Ray data structure."""

    def test_creation(self):
        ray = Ray(Point(1, 2, 3), Vector(4, 5, 6))
        assert ray.origin == Point(1, 2, 3)
        assert ray.direction == Vector(4, 5, 6)

    def test_position(self):
        ray = Ray(Point(2, 3, 4), Vector(1, 0, 0))
        assert ray.position(0) == Point(2, 3, 4)
        assert ray.position(1) == Point(3, 3, 4)
        assert ray.position(-1) == Point(1, 3, 4)
        assert ray.position(2.5) == Point(4.5, 3, 4)

    def test_translate(self):
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        moved = ray.transform(translation(3, 4, 5))
        assert moved.origin == Point(4, 6, 8)
        assert moved.direction == Vector(0, 1, 0)

    def test_scale_leaves_direction_unnormalized(self):
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        scaled = ray.transform(scaling(2, 3, 4))
        assert scaled.origin == Point(2, 6, 12)
        assert scaled.direction == Vector(0, 3, 0)

    def test_transform_returns_new_ray(self):
        ray = Ray(Point(1, 2, 3), Vector(0, 1, 0))
        ray.transform(translation(3, 4, 5))
        assert ray.origin == Point(1, 2, 3)

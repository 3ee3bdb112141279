"""Pytest configuration for raytracer tests.

This module provides shared fixtures for all test modules, including
Taichi initialization which must happen once per session.
"""

import math

import pytest
import taichi as ti

from whitted.camera.pinhole import Camera
from whitted.core.matrix import view_transform
from whitted.core.tuples import Point, Vector
from whitted.scene.world import default_world


@pytest.fixture(scope="session", autouse=True)
def init_taichi_session():
    """Initialize Taichi once for the entire test session.

    Only the output encoder uses Taichi; repeated ti.init() calls reset the
    runtime, so it happens once here.
    """
    ti.init(arch=ti.cpu)
    yield


@pytest.fixture
def world():
    """A fresh reference world: two concentric spheres and one light."""
    return default_world()


@pytest.fixture
def small_camera():
    """An 11x11 camera looking at the origin from z = -5."""
    return Camera(
        11,
        11,
        math.pi / 2.0,
        view_transform(Point(0, 0, -5), Point(0, 0, 0), Vector(0, 1, 0)),
    )

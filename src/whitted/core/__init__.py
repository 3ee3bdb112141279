"""Core rendering module.

This module contains the fundamental building blocks for ray tracing:

Components:
    tuples: Affine points and vectors with approximate equality
    color: Linear RGB colors
    matrix: Square matrices, inversion and affine transform builders
    ray: Ray data structure
    canvas: The output pixel buffer
    render: Parallel row-based render loop and render settings

Note: render is NOT imported here because it depends on the scene package.
Import it directly from whitted.core.render.
"""

from .canvas import Canvas
from .color import BLACK, WHITE, Color
from .matrix import (
    IDENTITY,
    Matrix,
    SingularMatrixError,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray
from .tuples import EPSILON, ORIGIN, Point, Vector, approx_eq, reflect

__all__ = [
    "EPSILON",
    "ORIGIN",
    "Point",
    "Vector",
    "approx_eq",
    "reflect",
    "Color",
    "BLACK",
    "WHITE",
    "Matrix",
    "IDENTITY",
    "SingularMatrixError",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "view_transform",
    "Ray",
    "Canvas",
]

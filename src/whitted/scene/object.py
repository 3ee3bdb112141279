"""Placed, materialed shapes.

An ``Object`` binds a canonical shape to a transform (object space to world
space) and a material. All ray and point math against an object goes through
the inverse transform first; normals come back to world space through the
inverse transpose, which keeps them perpendicular under non-uniform scaling.

Example:
    >>> from whitted.core.matrix import scaling
    >>> from whitted.geometry import Sphere
    >>> from whitted.scene.object import Object
    >>> big = Object(Sphere(), transform=scaling(2, 2, 2))
"""

from __future__ import annotations

from dataclasses import replace

from whitted.core.matrix import IDENTITY, Matrix
from whitted.core.ray import Ray
from whitted.core.tuples import Point, Vector
from whitted.geometry import (
    Cube,
    Cylinder,
    Plane,
    Shape,
    Sphere,
    cube_normal_at,
    cylinder_normal_at,
    intersect_cube,
    intersect_cylinder,
    intersect_plane,
    intersect_sphere,
    plane_normal_at,
    sphere_normal_at,
)
from whitted.materials.material import Material


class Object:
    """A shape placed in the world with a material.

    Objects compare by identity: two objects with equal fields are still
    distinct scene members, which the refraction bookkeeping relies on.

    Attributes:
        shape: The canonical shape.
        transform: Object-to-world transform. Assigning it computes the
            inverse, so a singular transform raises ``SingularMatrixError``
            at scene-construction time.
        material: The surface material.
    """

    def __init__(
        self,
        shape: Shape | None = None,
        transform: Matrix = IDENTITY,
        material: Material | None = None,
    ) -> None:
        self.shape: Shape = Sphere() if shape is None else shape
        self.transform = transform
        self.material = Material() if material is None else material

    @property
    def transform(self) -> Matrix:
        return self._transform

    @transform.setter
    def transform(self, value: Matrix) -> None:
        inverse = value.inverse()
        self._transform = value
        self._inverse = inverse
        self._normal_transform = inverse.transpose()

    @property
    def inverse(self) -> Matrix:
        """The cached world-to-object transform."""
        return self._inverse

    def with_transform(self, transform: Matrix) -> Object:
        """Return a new object with the same shape and a copied material."""
        return Object(self.shape, transform, replace(self.material))

    def with_material(self, material: Material) -> Object:
        """Return a new object with the same shape and transform."""
        return Object(self.shape, self._transform, material)

    def intersect(self, ray: Ray) -> tuple[float, ...]:
        """Intersect a world-space ray with this object.

        Returns:
            The hit parameters along ``ray`` (valid in world space because the
            object-space direction is deliberately left unnormalized).
        """
        local_ray = ray.transform(self._inverse)
        shape = self.shape

        if isinstance(shape, Sphere):
            return intersect_sphere(local_ray)
        if isinstance(shape, Plane):
            return intersect_plane(local_ray)
        if isinstance(shape, Cube):
            return intersect_cube(local_ray)
        if isinstance(shape, Cylinder):
            return intersect_cylinder(local_ray, shape)
        raise TypeError(f"Unsupported shape: {type(shape).__name__}")

    def normal_at(self, world_point: Point) -> Vector:
        """Return the unit world-space normal at a point on the surface."""
        local_point = self._inverse @ world_point
        shape = self.shape

        if isinstance(shape, Sphere):
            local_normal = sphere_normal_at(local_point)
        elif isinstance(shape, Plane):
            local_normal = plane_normal_at(local_point)
        elif isinstance(shape, Cube):
            local_normal = cube_normal_at(local_point)
        elif isinstance(shape, Cylinder):
            local_normal = cylinder_normal_at(local_point, shape)
        else:
            raise TypeError(f"Unsupported shape: {type(shape).__name__}")

        world_normal = self._normal_transform @ local_normal
        return world_normal.normalize()

    def __repr__(self) -> str:
        return (
            f"Object(shape={self.shape!r}, transform={self._transform!r}, "
            f"material={self.material!r})"
        )


def glass_sphere(refractive_index: float = 1.5, transform: Matrix = IDENTITY) -> Object:
    """Return a fully transparent sphere with the given refractive index."""
    material = Material(transparency=1.0, refractive_index=refractive_index)
    return Object(Sphere(), transform, material)

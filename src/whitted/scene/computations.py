"""Precomputed shading context for a chosen intersection.

``prepare_computations`` gathers everything the shading code needs about a
hit: the world point and its acne-offset copies, the eye, normal and
reflection vectors, whether the ray started inside the object, and the
refractive indices on either side of the surface.

The refractive indices come from walking the sorted intersections while
maintaining the list of objects the ray is currently inside. Each
intersection toggles its object's membership; ``n1`` is read from the last
container before the toggle for the target intersection and ``n2`` after it
(1.0 when no container is open). This handles nested and overlapping
transparent volumes.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from whitted.core.ray import Ray
from whitted.core.tuples import EPSILON, Point, Vector, reflect
from whitted.scene.intersection import Intersection
from whitted.scene.object import Object


@dataclass(frozen=True)
class Computations:
    """Surface-local context of an intersection.

    Attributes:
        t: The intersection's ray parameter.
        object: The intersected object (a shared reference into the scene).
        point: World-space hit point.
        eye_v: Unit vector from the point back toward the ray origin.
        normal_v: Unit normal, flipped to face the eye when ``inside``.
        inside: True if the ray hit the surface from within the object.
        over_point: ``point`` nudged along the normal, used as the origin of
            shadow and reflection rays.
        under_point: ``point`` nudged against the normal, used as the origin
            of refraction rays.
        reflective_v: The ray direction reflected about the normal.
        n1: Refractive index of the medium being left.
        n2: Refractive index of the medium being entered.
    """

    t: float
    object: Object
    point: Point
    eye_v: Vector
    normal_v: Vector
    inside: bool
    over_point: Point
    under_point: Point
    reflective_v: Vector
    n1: float = 1.0
    n2: float = 1.0

    def schlick(self) -> float:
        """Approximate the Fresnel reflectance with Schlick's formula.

        Returns:
            The fraction of light reflected, in [0, 1]. Total internal
            reflection returns 1.
        """
        cos = self.eye_v.dot(self.normal_v)

        # Total internal reflection is only possible leaving a denser medium
        if self.n1 > self.n2:
            n = self.n1 / self.n2
            sin2_t = n * n * (1.0 - cos * cos)
            if sin2_t > 1.0:
                return 1.0
            cos = (1.0 - sin2_t) ** 0.5

        r0 = ((self.n1 - self.n2) / (self.n1 + self.n2)) ** 2
        return r0 + (1.0 - r0) * (1.0 - cos) ** 5


def _refractive_indices(
    hit: Intersection, intersections: Iterable[Intersection]
) -> tuple[float, float]:
    n1 = n2 = 1.0
    containers: list[Object] = []

    for intersection in intersections:
        is_target = intersection == hit
        if is_target:
            n1 = containers[-1].material.refractive_index if containers else 1.0

        for index, container in enumerate(containers):
            if container is intersection.object:
                del containers[index]
                break
        else:
            containers.append(intersection.object)

        if is_target:
            n2 = containers[-1].material.refractive_index if containers else 1.0
            break

    return n1, n2


def prepare_computations(
    hit: Intersection,
    ray: Ray,
    intersections: Iterable[Intersection] | None = None,
) -> Computations:
    """Precompute the shading context of ``hit``.

    Args:
        hit: The intersection being shaded.
        ray: The ray that produced it.
        intersections: All intersections along ``ray`` in sorted order, used
            to derive ``n1``/``n2``. Defaults to just ``hit``.

    Returns:
        The populated ``Computations``. If ``hit`` does not occur in
        ``intersections``, both indices default to 1.0.
    """
    if intersections is None:
        intersections = (hit,)

    point = ray.position(hit.t)
    eye_v = -ray.direction
    normal_v = hit.object.normal_at(point)

    inside = normal_v.dot(eye_v) < 0.0
    if inside:
        normal_v = -normal_v

    offset = normal_v * EPSILON
    n1, n2 = _refractive_indices(hit, intersections)

    return Computations(
        t=hit.t,
        object=hit.object,
        point=point,
        eye_v=eye_v,
        normal_v=normal_v,
        inside=inside,
        over_point=point + offset,
        under_point=point - offset,
        reflective_v=reflect(ray.direction, normal_v),
        n1=n1,
        n2=n2,
    )

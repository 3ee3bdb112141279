"""Point lights and the Phong reflection model.

Phong shading sums three terms for each light:

    ambient  = surface * intensity * material.ambient
    diffuse  = surface * intensity * material.diffuse * dot(light_v, normal_v)
    specular = intensity * material.specular * dot(reflect_v, eye_v) ** shininess

Diffuse and specular vanish when the light is behind the surface, and only
the ambient term survives in shadow.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from whitted.core.color import BLACK, WHITE, Color
from whitted.core.tuples import Point, Vector, reflect
from whitted.materials.material import Material

if TYPE_CHECKING:
    from whitted.scene.object import Object


@dataclass(frozen=True)
class PointLight:
    """A point light source with no size.

    Attributes:
        position: Light position in world space.
        intensity: Light color and brightness.
    """

    position: Point
    intensity: Color = field(default_factory=lambda: WHITE)


def lighting(
    material: Material,
    obj: Object,
    light: PointLight,
    point: Point,
    eye_v: Vector,
    normal_v: Vector,
    in_shadow: bool = False,
) -> Color:
    """Shade a surface point with the Phong reflection model.

    Args:
        material: The surface material.
        obj: The object being shaded (places the material's pattern).
        light: The light source.
        point: The world-space point being shaded.
        eye_v: Unit vector from the point toward the eye.
        normal_v: Unit surface normal at the point.
        in_shadow: Whether the light is occluded from the point.

    Returns:
        The sum of the ambient, diffuse and specular contributions.
    """
    surface_color = material.pattern.pattern_at_object(obj, point)
    effective_color = surface_color * light.intensity
    ambient = effective_color * material.ambient

    if in_shadow:
        return ambient

    light_v = (light.position - point).normalize()
    light_dot_normal = light_v.dot(normal_v)

    if light_dot_normal < 0.0:
        # Light is on the other side of the surface
        diffuse = BLACK
        specular = BLACK
    else:
        diffuse = effective_color * material.diffuse * light_dot_normal

        reflect_v = reflect(-light_v, normal_v)
        reflect_dot_eye = reflect_v.dot(eye_v)
        if reflect_dot_eye <= 0.0:
            specular = BLACK
        else:
            factor = reflect_dot_eye**material.shininess
            specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular

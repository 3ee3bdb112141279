"""CPU Whitted-style ray tracer.

This package renders scenes of transformed primitives lit by point lights,
with Phong shading, hard shadows, mirror reflection and refraction through
nested transparent volumes.

Subpackages:
    core: Tuples, colors, 4x4 transforms, rays, the canvas and the render loop
    geometry: Canonical shape primitives and their intersection kernels
    materials: Patterns, Phong materials and point lights
    scene: Objects, intersection bookkeeping, shading context and the world
    camera: Pinhole camera with per-pixel ray generation
    preview: Pixel encoding (Taichi) and PPM/PNG export
"""

__version__ = "0.1.0"

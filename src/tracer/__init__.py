"""Phong-model ray tracer core.

This package turns a scene of shapes lit by point lights into an image:
- Hit selection over scene-wide intersection sets
- Shading geometry derivation (eye vector, normal, acne offset)
- Phong lighting with optional surface patterns
- Pinhole camera with batched primary-ray generation and a render loop

Subpackages:
    core: Tuple and matrix math, rays
    geometry: Shape base class and primitives (sphere, plane)
    materials: Phong materials and surface patterns
    scene: Intersections, point lights, and the world container
    camera: Camera model and render loop
    preview: Canvas, display conversion, and image export
"""

__version__ = "0.1.0"

"""Scene module for intersections, lights, and the world.

Components:
    intersection: Intersection records, hit selection and shading geometry
    light: Point light source
    world: Shape/light container computing the color seen along a ray

The world gathers intersections from all shapes into one sorted set per
ray, so the visible surface is selected scene-wide.
"""

from .intersection import Intersection, Intersections, PrecomputedData
from .light import PointLight

# Note: world is NOT imported here to avoid circular imports (shapes import
# scene.intersection). Import it directly from src.tracer.scene.world:
#   from src.tracer.scene.world import World, default_world

__all__ = [
    "Intersection",
    "Intersections",
    "PrecomputedData",
    "PointLight",
]

"""Geometry module for shape primitives.

Components:
    shape: Base class with transform handling and world/object conversion
    sphere: Unit sphere
    plane: Infinite xz plane

Every shape exposes ``intersect(ray)`` returning an ``Intersections`` set
and ``normal_at(point)`` returning a unit world-space normal.
"""

from .plane import Plane
from .shape import Shape
from .sphere import Sphere

__all__ = [
    "Shape",
    "Sphere",
    "Plane",
]

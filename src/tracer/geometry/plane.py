"""Infinite plane primitive.

In object space the plane is the xz plane (y = 0) with normal +y.
"""

from src.tracer.core.ray import Ray
from src.tracer.core.tuples import EPSILON, Tuple4, vector
from src.tracer.geometry.shape import Shape


class Plane(Shape):
    """The xz plane of its object space."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        # Parallel or coplanar rays never register a hit
        if abs(local_ray.direction[1]) < EPSILON:
            return []
        return [-local_ray.origin[1] / local_ray.direction[1]]

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        return vector(0.0, 1.0, 0.0)

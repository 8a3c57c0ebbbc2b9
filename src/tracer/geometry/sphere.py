"""Unit sphere primitive.

The sphere is centered at the object-space origin with radius 1; position
and size in the world come from the shape transform.

Example:
    >>> from src.tracer.core.matrix import scaling
    >>> from src.tracer.geometry.sphere import Sphere
    >>> sphere = Sphere(transform=scaling(2.0, 2.0, 2.0))
"""

import math

from src.tracer.core.ray import Ray
from src.tracer.core.tuples import ORIGIN, Tuple4, dot
from src.tracer.geometry.shape import Shape


class Sphere(Shape):
    """A unit sphere at the origin of its object space."""

    def local_intersect(self, local_ray: Ray) -> list[float]:
        """Solve |origin + t * direction|^2 = 1 for t.

        Returns:
            Both roots in ascending order, or an empty list on a miss.
            A tangent ray yields two equal roots.
        """
        sphere_to_ray = local_ray.origin - ORIGIN
        a = dot(local_ray.direction, local_ray.direction)
        b = 2.0 * dot(local_ray.direction, sphere_to_ray)
        c = dot(sphere_to_ray, sphere_to_ray) - 1.0
        discriminant = b * b - 4.0 * a * c

        if discriminant < 0.0:
            return []

        sqrt_d = math.sqrt(discriminant)
        return [(-b - sqrt_d) / (2.0 * a), (-b + sqrt_d) / (2.0 * a)]

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        return local_point - ORIGIN

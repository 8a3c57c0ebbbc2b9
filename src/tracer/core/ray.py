"""Ray data structure.

Example:
    >>> from src.tracer.core.ray import Ray
    >>> from src.tracer.core.tuples import point, vector
    >>> ray = Ray(origin=point(0, 0, 0), direction=vector(0, 0, -1))
    >>> p = ray.position(5.0)  # Point 5 units along the ray
"""

from dataclasses import dataclass

from src.tracer.core.matrix import Matrix4
from src.tracer.core.tuples import Tuple4


@dataclass(frozen=True, eq=False)
class Ray:
    """A ray with an origin point and direction vector.

    Attributes:
        origin: The starting point of the ray.
        direction: The direction vector of the ray. Not normalized by the
            ray itself; object-space rays are generally not unit length.
    """

    origin: Tuple4
    direction: Tuple4

    def position(self, t: float) -> Tuple4:
        """Compute the point along the ray at parameter t.

        Args:
            t: The parameter value. Positive values are in front of the origin.

        Returns:
            The point origin + t * direction.
        """
        return self.origin + self.direction * t

    def transform(self, m: Matrix4) -> "Ray":
        """Return a new ray with origin and direction multiplied by ``m``."""
        return Ray(origin=m @ self.origin, direction=m @ self.direction)

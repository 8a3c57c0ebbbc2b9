"""Shape base class.

A shape owns a transform placing it in the world and a Phong material.
Subclasses describe the primitive in its own object space by implementing
``local_intersect`` and ``local_normal_at``; this base class handles the
world/object conversions shared by every primitive.

The inverse transform is computed when the transform is assigned, so a
singular transform is rejected immediately instead of surfacing as NaNs
during rendering.

Shapes compare by identity. An ``Intersection`` refers to its shape by
reference, and two intersections are equal only if they refer to the
very same shape object.
"""

from __future__ import annotations

import numpy as np

from src.tracer.core.matrix import Matrix4, identity, inverse
from src.tracer.core.ray import Ray
from src.tracer.core.tuples import Tuple4, normalize
from src.tracer.materials.material import Material
from src.tracer.scene.intersection import Intersection, Intersections


class Shape:
    """Base class for ray-intersectable primitives.

    Attributes:
        transform: Object-to-world transform (identity by default).
        material: Surface material used for shading.
    """

    def __init__(self, transform: Matrix4 | None = None, material: Material | None = None) -> None:
        self.transform = transform if transform is not None else identity()
        self.material = material if material is not None else Material()

    @property
    def transform(self) -> Matrix4:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix4) -> None:
        m = np.asarray(m, dtype=np.float64)
        # Raises NonInvertibleTransformError before any state changes
        inv = inverse(m)
        self._transform = m
        self._inverse = inv

    @property
    def inverse_transform(self) -> Matrix4:
        return self._inverse

    def world_to_object(self, world_point: Tuple4) -> Tuple4:
        """Convert a world-space point into this shape's object space."""
        return self._inverse @ world_point

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a world-space ray with this shape.

        Args:
            ray: The ray in world space.

        Returns:
            An Intersections set holding one entry per distance along
            ``ray`` at which it crosses the surface.
        """
        local_ray = ray.transform(self._inverse)
        return Intersections(Intersection(t, self) for t in self.local_intersect(local_ray))

    def normal_at(self, world_point: Tuple4) -> Tuple4:
        """Compute the unit surface normal at a world-space point.

        The object-space normal is mapped back to world space with the
        transpose of the inverse transform, which keeps it perpendicular
        to the surface under non-uniform scaling.
        """
        local_normal = self.local_normal_at(self.world_to_object(world_point))
        world_normal = self._inverse.T @ local_normal
        world_normal[3] = 0.0
        return normalize(world_normal)

    def local_intersect(self, local_ray: Ray) -> list[float]:
        raise NotImplementedError("local_intersect() must be implemented by subclasses.")

    def local_normal_at(self, local_point: Tuple4) -> Tuple4:
        raise NotImplementedError("local_normal_at() must be implemented by subclasses.")

    def __repr__(self) -> str:
        return f"{type(self).__name__}(material={self.material!r})"

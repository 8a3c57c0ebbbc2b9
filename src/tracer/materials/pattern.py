"""Surface patterns: functions from a point to a color.

A pattern has its own transform, applied on top of the transform of the
shape it decorates. ``pattern_at_shape`` converts a world-space point to
object space (via the shape) and then to pattern space before evaluating
``pattern_at``, so patterns move, scale and rotate with their shape.

Variants:
    StripePattern: alternates between two colors on integer steps of x
    GradientPattern: linear blend from a to b across each unit of x
    RingPattern: concentric rings in the xz plane
    CheckerPattern: 3D checkerboard of unit cubes

Example:
    >>> from src.tracer.core.tuples import BLACK, WHITE
    >>> from src.tracer.materials.pattern import StripePattern
    >>> stripes = StripePattern(WHITE, BLACK)
"""

from __future__ import annotations

import math
from typing import TYPE_CHECKING

import numpy as np

from src.tracer.core.matrix import Matrix4, identity, inverse
from src.tracer.core.tuples import Color, Tuple4

if TYPE_CHECKING:
    from src.tracer.geometry.shape import Shape


class Pattern:
    """Base class for patterns.

    Attributes:
        transform: Object-to-pattern-space placement (identity by default).
    """

    def __init__(self, transform: Matrix4 | None = None) -> None:
        self.transform = transform if transform is not None else identity()

    @property
    def transform(self) -> Matrix4:
        return self._transform

    @transform.setter
    def transform(self, m: Matrix4) -> None:
        m = np.asarray(m, dtype=np.float64)
        inv = inverse(m)
        self._transform = m
        self._inverse = inv

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        raise NotImplementedError("pattern_at() must be implemented by subclasses.")

    def pattern_at_shape(self, shape: Shape, world_point: Tuple4) -> Color:
        """Evaluate the pattern at a world-space point on ``shape``.

        Args:
            shape: The shape the pattern decorates.
            world_point: A point in world space.

        Returns:
            The pattern color at that point.
        """
        object_point = shape.world_to_object(world_point)
        return self.pattern_at(self._inverse @ object_point)


class _TwoColorPattern(Pattern):
    def __init__(self, a: Color, b: Color, transform: Matrix4 | None = None) -> None:
        super().__init__(transform)
        self.a = a
        self.b = b

    def __repr__(self) -> str:
        return f"{type(self).__name__}(a={self.a!r}, b={self.b!r})"


class StripePattern(_TwoColorPattern):
    """Stripes along x: ``a`` where floor(x) is even, ``b`` otherwise."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        if math.floor(pattern_point[0]) % 2 == 0:
            return self.a
        return self.b


class GradientPattern(_TwoColorPattern):
    """Linear blend from ``a`` to ``b``, repeating every unit of x."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        x = pattern_point[0]
        fraction = x - math.floor(x)
        return self.a + (self.b - self.a) * fraction


class RingPattern(_TwoColorPattern):
    """Concentric rings around the y axis."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        x, z = pattern_point[0], pattern_point[2]
        if math.floor(math.sqrt(x * x + z * z)) % 2 == 0:
            return self.a
        return self.b


class CheckerPattern(_TwoColorPattern):
    """Alternating unit cubes in all three dimensions."""

    def pattern_at(self, pattern_point: Tuple4) -> Color:
        total = sum(math.floor(c) for c in pattern_point[:3])
        if total % 2 == 0:
            return self.a
        return self.b

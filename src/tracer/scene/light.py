"""Point light source."""

from dataclasses import dataclass

from src.tracer.core.tuples import Color, Tuple4


@dataclass(frozen=True, eq=False)
class PointLight:
    """A light with no size, emitting from a single point.

    Attributes:
        position: Light position in world space (a point).
        intensity: Emitted color; may exceed 1.0 per channel.
    """

    position: Tuple4
    intensity: Color

"""Points, vectors, and colors as NumPy arrays.

Points and vectors are homogeneous 4-component ``float64`` arrays: the
fourth component ``w`` is 1.0 for points and 0.0 for vectors, so that
translation affects points but not directions. Colors are plain
3-component ``float64`` arrays combined component-wise.

Example:
    >>> from src.tracer.core.tuples import point, vector, normalize
    >>> p = point(1.0, 2.0, 3.0)
    >>> v = normalize(vector(0.0, 0.0, 2.0))  # (0, 0, 1, 0)
    >>> q = p + v * 2.0                       # still a point
"""

import numpy as np
import numpy.typing as npt

# Type alias for tuples and colors
Tuple4 = npt.NDArray[np.float64]
Color = npt.NDArray[np.float64]

# Tolerance used for approximate comparison and for surface offsets
EPSILON = 1e-5


def point(x: float, y: float, z: float) -> Tuple4:
    """Create a point (w = 1)."""
    return np.array([x, y, z, 1.0], dtype=np.float64)


def vector(x: float, y: float, z: float) -> Tuple4:
    """Create a vector (w = 0)."""
    return np.array([x, y, z, 0.0], dtype=np.float64)


def color(r: float, g: float, b: float) -> Color:
    """Create an RGB color. Components are not clamped."""
    return np.array([r, g, b], dtype=np.float64)


BLACK = color(0.0, 0.0, 0.0)
WHITE = color(1.0, 1.0, 1.0)
ORIGIN = point(0.0, 0.0, 0.0)


def is_point(t: Tuple4) -> bool:
    return bool(t[3] == 1.0)


def is_vector(t: Tuple4) -> bool:
    return bool(t[3] == 0.0)


def dot(a: Tuple4, b: Tuple4) -> float:
    """Compute the dot product of two tuples."""
    return float(np.dot(a, b))


def magnitude(v: Tuple4) -> float:
    """Compute the Euclidean length of a vector."""
    return float(np.sqrt(np.dot(v, v)))


def normalize(v: Tuple4) -> Tuple4:
    """Normalize a vector to unit length.

    Args:
        v: The input vector.

    Returns:
        A unit vector in the same direction as v.

    Raises:
        ValueError: If v has zero length.
    """
    length = magnitude(v)
    if length == 0.0:
        raise ValueError("Cannot normalize a zero-length vector")
    return v / length


def cross(a: Tuple4, b: Tuple4) -> Tuple4:
    """Compute the cross product of two vectors.

    Only the x, y, z components take part; the result is a vector.
    """
    c = np.cross(a[:3], b[:3])
    return vector(c[0], c[1], c[2])


def reflect(incident: Tuple4, normal: Tuple4) -> Tuple4:
    """Reflect an incident vector about a normal.

    Args:
        incident: The incoming direction vector (pointing toward the surface).
        normal: The surface normal (should be normalized).

    Returns:
        The reflected direction vector.
    """
    return incident - normal * 2.0 * dot(incident, normal)


def approx_equal(a, b, eps: float = EPSILON) -> bool:
    """Compare scalars or arrays component-wise within ``eps``."""
    return bool(np.all(np.abs(np.asarray(a, dtype=np.float64) - np.asarray(b, dtype=np.float64)) < eps))

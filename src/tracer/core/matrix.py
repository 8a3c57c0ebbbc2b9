"""Affine transforms as 4x4 NumPy matrices.

Transforms act on the homogeneous tuples from ``core.tuples`` by left
multiplication (``m @ p``). Composition therefore reads right to left;
``chain`` takes transforms in the order they should be applied instead.

Example:
    >>> import math
    >>> from src.tracer.core.matrix import chain, rotation_y, translation
    >>> m = chain(translation(0.0, -2.0, 5.0), rotation_y(math.pi / 4))
"""

import math

import numpy as np
import numpy.typing as npt

from src.tracer.core.tuples import Tuple4, cross, normalize

# Type alias for 4x4 transform matrices
Matrix4 = npt.NDArray[np.float64]

# Determinants smaller than this are treated as singular
_SINGULAR_TOLERANCE = 1e-12


class NonInvertibleTransformError(ValueError):
    """Raised when a transform has no inverse."""


def identity() -> Matrix4:
    """Create a 4x4 identity matrix."""
    return np.identity(4, dtype=np.float64)


def translation(x: float, y: float, z: float) -> Matrix4:
    m = identity()
    m[0, 3] = x
    m[1, 3] = y
    m[2, 3] = z
    return m


def scaling(x: float, y: float, z: float) -> Matrix4:
    return np.diag([x, y, z, 1.0]).astype(np.float64)


def rotation_x(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[1, 1], m[1, 2] = c, -s
    m[2, 1], m[2, 2] = s, c
    return m


def rotation_y(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0], m[0, 2] = c, s
    m[2, 0], m[2, 2] = -s, c
    return m


def rotation_z(radians: float) -> Matrix4:
    c, s = math.cos(radians), math.sin(radians)
    m = identity()
    m[0, 0], m[0, 1] = c, -s
    m[1, 0], m[1, 1] = s, c
    return m


def shearing(xy: float, xz: float, yx: float, yz: float, zx: float, zy: float) -> Matrix4:
    """Create a shearing transform.

    Each argument moves one component in proportion to another, e.g. ``xy``
    moves x in proportion to y.
    """
    m = identity()
    m[0, 1], m[0, 2] = xy, xz
    m[1, 0], m[1, 2] = yx, yz
    m[2, 0], m[2, 1] = zx, zy
    return m


def chain(*transforms: Matrix4) -> Matrix4:
    """Compose transforms so that the first argument is applied first."""
    result = identity()
    for m in transforms:
        result = m @ result
    return result


def inverse(m: Matrix4) -> Matrix4:
    """Invert a transform.

    Args:
        m: A 4x4 transform matrix.

    Returns:
        The inverse matrix.

    Raises:
        NonInvertibleTransformError: If the matrix is singular.
    """
    if abs(np.linalg.det(m)) < _SINGULAR_TOLERANCE:
        raise NonInvertibleTransformError(f"Transform is not invertible:\n{m}")
    try:
        return np.linalg.inv(m)
    except np.linalg.LinAlgError as e:
        raise NonInvertibleTransformError(str(e)) from e


def view_transform(from_point: Tuple4, to_point: Tuple4, up: Tuple4) -> Matrix4:
    """Build the transform that orients the world relative to an eye.

    The resulting matrix moves the world so that an eye at ``from_point``
    looks down -z toward ``to_point``, with ``up`` roughly pointing along +y.

    Args:
        from_point: Eye position in world space.
        to_point: Point the eye looks at.
        up: Approximate up direction (need not be normalized or orthogonal).

    Returns:
        The view transform, suitable as a camera transform.
    """
    forward = normalize(to_point - from_point)
    left = cross(forward, normalize(up))
    true_up = cross(left, forward)
    orientation = np.array(
        [
            [left[0], left[1], left[2], 0.0],
            [true_up[0], true_up[1], true_up[2], 0.0],
            [-forward[0], -forward[1], -forward[2], 0.0],
            [0.0, 0.0, 0.0, 1.0],
        ],
        dtype=np.float64,
    )
    return orientation @ translation(-from_point[0], -from_point[1], -from_point[2])

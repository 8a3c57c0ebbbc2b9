"""Core math module.

Components:
    tuples: Points, vectors and colors, with dot/cross/normalize/reflect
    matrix: 4x4 affine transforms, inversion and the view transform
    ray: Ray data structure with position evaluation and transformation

Everything here is plain NumPy on the host. Data-parallel work (primary
ray generation, canvas quantization) lives with the camera and preview
modules as Taichi kernels.
"""

from .matrix import (
    Matrix4,
    NonInvertibleTransformError,
    chain,
    identity,
    inverse,
    rotation_x,
    rotation_y,
    rotation_z,
    scaling,
    shearing,
    translation,
    view_transform,
)
from .ray import Ray
from .tuples import (
    BLACK,
    EPSILON,
    ORIGIN,
    WHITE,
    Color,
    Tuple4,
    approx_equal,
    color,
    cross,
    dot,
    is_point,
    is_vector,
    magnitude,
    normalize,
    point,
    reflect,
    vector,
)

__all__ = [
    "Ray",
    "Tuple4",
    "Color",
    "Matrix4",
    "EPSILON",
    "BLACK",
    "WHITE",
    "ORIGIN",
    "point",
    "vector",
    "color",
    "is_point",
    "is_vector",
    "dot",
    "cross",
    "magnitude",
    "normalize",
    "reflect",
    "approx_equal",
    "NonInvertibleTransformError",
    "identity",
    "translation",
    "scaling",
    "rotation_x",
    "rotation_y",
    "rotation_z",
    "shearing",
    "chain",
    "inverse",
    "view_transform",
]

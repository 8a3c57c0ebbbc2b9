"""Materials module for surface appearance.

Components:
    material: Phong material and the lighting function
    pattern: Point-to-color patterns (stripe, gradient, ring, checker)

A material either uses its flat color or delegates to a pattern evaluated
in the shaded shape's object space.
"""

from .material import (
    DEFAULT_AMBIENT,
    DEFAULT_DIFFUSE,
    DEFAULT_SHININESS,
    DEFAULT_SPECULAR,
    Material,
)
from .pattern import (
    CheckerPattern,
    GradientPattern,
    Pattern,
    RingPattern,
    StripePattern,
)

__all__ = [
    "Material",
    "DEFAULT_AMBIENT",
    "DEFAULT_DIFFUSE",
    "DEFAULT_SPECULAR",
    "DEFAULT_SHININESS",
    "Pattern",
    "StripePattern",
    "GradientPattern",
    "RingPattern",
    "CheckerPattern",
]

"""Phong material and the lighting function.

The Phong model sums three terms for a point lit by one point light:

    ambient  = effective_color * ambient
    diffuse  = effective_color * diffuse * (lightv . normalv)
    specular = intensity * specular * (reflectv . eyev) ^ shininess

where ``effective_color`` is the surface color (flat or from a pattern)
multiplied component-wise by the light intensity. Diffuse and specular
vanish when the light is behind the surface, specular also vanishes when
the reflection points away from the eye, and a shadowed point keeps only
the ambient term.

Colors are not clamped here; converting to a displayable range happens
when the canvas is exported.

Example:
    >>> from src.tracer.core.tuples import point, vector, WHITE
    >>> from src.tracer.geometry.sphere import Sphere
    >>> from src.tracer.scene.light import PointLight
    >>> m = Material()
    >>> shape = Sphere()
    >>> light = PointLight(point(0, 0, -10), WHITE)
    >>> c = m.lighting(shape, light, point(0, 0, 0), vector(0, 0, -1), vector(0, 0, -1))
    >>> # c is approximately (1.9, 1.9, 1.9)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from src.tracer.core.tuples import BLACK, WHITE, Color, Tuple4, dot, normalize, reflect
from src.tracer.materials.pattern import Pattern

if TYPE_CHECKING:
    from src.tracer.geometry.shape import Shape
    from src.tracer.scene.light import PointLight

# Default Phong coefficients
DEFAULT_AMBIENT = 0.1
DEFAULT_DIFFUSE = 0.9
DEFAULT_SPECULAR = 0.9
DEFAULT_SHININESS = 200.0


@dataclass(eq=False)
class Material:
    """Phong surface properties.

    Attributes:
        color: Flat surface color, used when no pattern is set.
        ambient: Fraction of light reflected regardless of light direction.
        diffuse: Fraction of light reflected from matte surfaces.
        specular: Strength of the specular highlight.
        shininess: Highlight tightness; larger is smaller and sharper.
        pattern: Optional pattern overriding ``color``.
    """

    color: Color = field(default_factory=WHITE.copy)
    ambient: float = DEFAULT_AMBIENT
    diffuse: float = DEFAULT_DIFFUSE
    specular: float = DEFAULT_SPECULAR
    shininess: float = DEFAULT_SHININESS
    pattern: Pattern | None = None

    def __post_init__(self) -> None:
        for name in ("ambient", "diffuse", "specular"):
            if getattr(self, name) < 0.0:
                raise ValueError(f"Material {name} must be non-negative, got {getattr(self, name)}")
        if self.shininess <= 0.0:
            raise ValueError(f"Material shininess must be positive, got {self.shininess}")

    def lighting(
        self,
        object: Shape,
        light: PointLight,
        point: Tuple4,
        eyev: Tuple4,
        normalv: Tuple4,
        in_shadow: bool = False,
    ) -> Color:
        """Shade a surface point with the Phong model.

        Args:
            object: The shape being shaded; patterns are evaluated in its
                object space.
            light: The light source.
            point: World-space point being shaded.
            eyev: Unit vector toward the eye.
            normalv: Unit surface normal.
            in_shadow: Whether the light is occluded from ``point``.

        Returns:
            The unclamped RGB color.

        Raises:
            ValueError: If the light sits exactly at ``point``, leaving no
                direction toward it.
        """
        if self.pattern is not None:
            base_color = self.pattern.pattern_at_shape(object, point)
        else:
            base_color = self.color

        effective_color = base_color * light.intensity
        lightv = normalize(light.position - point)
        ambient = effective_color * self.ambient

        light_dot_normal = dot(lightv, normalv)
        if light_dot_normal < 0.0:
            diffuse = BLACK
            specular = BLACK
        else:
            diffuse = effective_color * self.diffuse * light_dot_normal
            reflectv = reflect(-lightv, normalv)
            reflect_dot_eye = dot(reflectv, eyev)
            if reflect_dot_eye <= 0.0:
                specular = BLACK
            else:
                factor = reflect_dot_eye**self.shininess
                specular = light.intensity * self.specular * factor

        if in_shadow:
            return ambient
        return ambient + diffuse + specular

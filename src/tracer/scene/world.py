"""World container: shapes, lights, and per-ray shading.

The world is the collaborator the camera renders against. For each ray it
gathers every shape's intersections into one ``Intersections`` set, takes
the scene-wide hit, derives the shading geometry, and sums the Phong
contribution of each light, testing shadows from the hit's over_point.

Example:
    >>> from src.tracer.core.ray import Ray
    >>> from src.tracer.core.tuples import point, vector
    >>> from src.tracer.scene.world import default_world
    >>> world = default_world()
    >>> c = world.color_at(Ray(point(0, 0, -5), vector(0, 0, 1)))
    >>> # c is approximately (0.38066, 0.47583, 0.2855)
"""

from __future__ import annotations

import logging
from collections.abc import Iterable

from src.tracer.core.matrix import scaling
from src.tracer.core.ray import Ray
from src.tracer.core.tuples import BLACK, WHITE, Color, Tuple4, color, magnitude, normalize, point
from src.tracer.geometry.shape import Shape
from src.tracer.geometry.sphere import Sphere
from src.tracer.materials.material import Material
from src.tracer.scene.intersection import Intersections, PrecomputedData
from src.tracer.scene.light import PointLight

logger = logging.getLogger(__name__)

# Color returned for rays that hit nothing
DEFAULT_BACKGROUND = BLACK


class World:
    """A collection of shapes and point lights.

    Shapes and lights are read-only during rendering, so a world may be
    shared by threads rendering different pixels.

    Attributes:
        objects: Shapes in the scene.
        lights: Point lights illuminating the scene.
        background: Color for rays that escape the scene.
    """

    def __init__(
        self,
        objects: Iterable[Shape] | None = None,
        lights: Iterable[PointLight] | None = None,
        background: Color | None = None,
    ) -> None:
        self.objects: list[Shape] = list(objects) if objects is not None else []
        self.lights: list[PointLight] = list(lights) if lights is not None else []
        self.background = background if background is not None else DEFAULT_BACKGROUND.copy()

    def add_object(self, shape: Shape) -> Shape:
        self.objects.append(shape)
        return shape

    def add_light(self, light: PointLight) -> PointLight:
        self.lights.append(light)
        return light

    def intersect(self, ray: Ray) -> Intersections:
        """Intersect a ray with every shape in the world.

        Returns:
            A single sorted Intersections set whose hit is the nearest
            visible surface across all shapes.
        """
        xs = Intersections()
        for shape in self.objects:
            xs.extend(shape.intersect(ray))
        return xs

    def is_shadowed(self, world_point: Tuple4, light: PointLight) -> bool:
        """Test whether anything blocks the path from a point to a light.

        Args:
            world_point: The point being shaded (normally an over_point).
            light: The light to test against.

        Returns:
            True if a hit lies strictly between the point and the light.

        Raises:
            ValueError: If ``world_point`` coincides with the light position.
        """
        to_light = light.position - world_point
        distance = magnitude(to_light)
        hit = self.intersect(Ray(world_point, normalize(to_light))).hit()
        return hit is not None and hit.t < distance

    def shade_hit(self, comps: PrecomputedData) -> Color:
        """Sum the Phong contribution of every light at a precomputed hit."""
        material = comps.object.material
        result = BLACK.copy()
        for light in self.lights:
            shadowed = self.is_shadowed(comps.over_point, light)
            result = result + material.lighting(
                comps.object,
                light,
                comps.point,
                comps.eyev,
                comps.normalv,
                shadowed,
            )
        return result

    def color_at(self, ray: Ray) -> Color:
        """Compute the color seen along a ray.

        A ray that hits nothing returns the background color.
        """
        hit = self.intersect(ray).hit()
        if hit is None:
            return self.background
        return self.shade_hit(hit.prepare_computations(ray))

    def __repr__(self) -> str:
        return f"World(objects={len(self.objects)}, lights={len(self.lights)})"


def default_world() -> World:
    """Create the two-sphere reference scene.

    Contains a white point light at (-10, 10, -10), a unit sphere with a
    greenish diffuse material, and a concentric sphere scaled by 0.5 with
    the default material.
    """
    outer = Sphere(
        material=Material(color=color(0.8, 1.0, 0.6), diffuse=0.7, specular=0.2),
    )
    inner = Sphere(transform=scaling(0.5, 0.5, 0.5))
    light = PointLight(point(-10.0, 10.0, -10.0), WHITE.copy())
    logger.debug("Created default world with %d objects", 2)
    return World(objects=[outer, inner], lights=[light])

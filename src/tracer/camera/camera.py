"""Camera model mapping a pixel grid to world-space rays.

The camera sits at the origin of its own space looking down -z at a
canvas one unit away. The canvas spans ``2 * half_width`` by
``2 * half_height`` units, derived from the field of view and the aspect
ratio so that pixels are always square:

    half_view = tan(field_of_view / 2)
    aspect >= 1:  half_width = half_view,          half_height = half_view / aspect
    aspect <  1:  half_width = half_view * aspect, half_height = half_view
    pixel_size = 2 * half_width / hsize

Pixel (0, 0) is the top-left corner; x grows to the right and y grows
downward, so in camera space x and y decrease as the pixel indices grow.
The camera transform places the camera in the world (usually a
``view_transform``); rays are mapped through its inverse.

Primary rays for the whole grid are generated at once by a Taichi kernel.
Shading is done by the world collaborator, one ``color_at`` call per pixel,
optionally spread across a thread pool by rows. Taichi must be initialized
(``ti.init(...)``) before ``primary_rays`` or ``render`` are called.

Example:
    >>> import math
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.tracer.camera.camera import Camera
    >>> from src.tracer.core.matrix import view_transform
    >>> from src.tracer.core.tuples import point, vector
    >>> from src.tracer.scene.world import default_world
    >>> camera = Camera(
    ...     11, 11, math.pi / 2,
    ...     view_transform(point(0, 0, -5), point(0, 0, 0), vector(0, 1, 0)),
    ... )
    >>> canvas = camera.render(default_world())
"""

import logging
import math
import numbers
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Protocol

import numpy as np
import numpy.typing as npt
import taichi as ti

from src.tracer.core.matrix import Matrix4, identity, inverse
from src.tracer.core.ray import Ray
from src.tracer.core.tuples import Color, normalize, point, vector
from src.tracer.preview.canvas import Canvas

logger = logging.getLogger(__name__)


class ColorSource(Protocol):
    """Anything that can report the color seen along a ray (e.g. a World)."""

    def color_at(self, ray: Ray) -> Color: ...


# =============================================================================
# Batched Ray Generation (Taichi kernel)
# =============================================================================


@ti.kernel
def _primary_rays_kernel(
    inverse_transform: ti.types.ndarray(),
    origins: ti.types.ndarray(),
    directions: ti.types.ndarray(),
    pixel_size: ti.f64,
    half_width: ti.f64,
    half_height: ti.f64,
):
    """Compute the origin and unit direction of every pixel's ray.

    The camera-space target (world_x, world_y, -1) and the camera origin
    are both mapped through the inverse transform; the direction is their
    normalized difference.
    """
    for py, px in ti.ndrange(directions.shape[0], directions.shape[1]):
        world_x = half_width - (ti.cast(px, ti.f64) + 0.5) * pixel_size
        world_y = half_height - (ti.cast(py, ti.f64) + 0.5) * pixel_size

        origin = ti.Vector(
            [inverse_transform[0, 3], inverse_transform[1, 3], inverse_transform[2, 3]],
            dt=ti.f64,
        )
        target = ti.Vector(
            [
                inverse_transform[0, 0] * world_x
                + inverse_transform[0, 1] * world_y
                - inverse_transform[0, 2]
                + inverse_transform[0, 3],
                inverse_transform[1, 0] * world_x
                + inverse_transform[1, 1] * world_y
                - inverse_transform[1, 2]
                + inverse_transform[1, 3],
                inverse_transform[2, 0] * world_x
                + inverse_transform[2, 1] * world_y
                - inverse_transform[2, 2]
                + inverse_transform[2, 3],
            ],
            dt=ti.f64,
        )
        direction = (target - origin).normalized()

        for c in ti.static(range(3)):
            origins[py, px, c] = origin[c]
            directions[py, px, c] = direction[c]


# =============================================================================
# Camera
# =============================================================================


class Camera:
    """A pinhole camera with a square-pixel canvas one unit in front of it.

    All derived values are computed once at construction.

    Attributes:
        hsize: Horizontal size of the canvas in pixels.
        vsize: Vertical size of the canvas in pixels.
        field_of_view: Angle (radians) spanned by the larger canvas dimension.
        transform: Camera placement in the world.
        pixel_size: World-space size of one pixel on the canvas.
        half_width: Half the canvas width in camera-space units.
        half_height: Half the canvas height in camera-space units.
    """

    def __init__(
        self,
        hsize: int,
        vsize: int,
        field_of_view: float,
        transform: Matrix4 | None = None,
    ) -> None:
        """Create a camera.

        Args:
            hsize: Canvas width in pixels (positive integer).
            vsize: Canvas height in pixels (positive integer).
            field_of_view: Field of view in radians, in the open interval (0, pi).
            transform: Camera transform; identity when omitted.

        Raises:
            ValueError: If the canvas size or field of view is out of range.
            NonInvertibleTransformError: If ``transform`` has no inverse.
        """
        if not (isinstance(hsize, numbers.Integral) and isinstance(vsize, numbers.Integral)):
            raise ValueError(f"Camera size must be integers, got {hsize!r}x{vsize!r}")
        if hsize <= 0 or vsize <= 0:
            raise ValueError(f"Camera size must be positive integers, got {hsize}x{vsize}")
        if not 0.0 < field_of_view < math.pi:
            raise ValueError(f"Field of view must be in (0, pi), got {field_of_view}")

        self._hsize = int(hsize)
        self._vsize = int(vsize)
        self._field_of_view = float(field_of_view)

        transform = identity() if transform is None else np.asarray(transform, dtype=np.float64)
        self._inverse = inverse(transform)
        self._transform = transform

        half_view = math.tan(self._field_of_view / 2.0)
        aspect_ratio = self._hsize / self._vsize
        if aspect_ratio >= 1.0:
            self._half_width = half_view
            self._half_height = half_view / aspect_ratio
        else:
            self._half_width = half_view * aspect_ratio
            self._half_height = half_view
        self._pixel_size = self._half_width * 2.0 / self._hsize

    @property
    def hsize(self) -> int:
        return self._hsize

    @property
    def vsize(self) -> int:
        return self._vsize

    @property
    def field_of_view(self) -> float:
        return self._field_of_view

    @property
    def transform(self) -> Matrix4:
        return self._transform

    @property
    def pixel_size(self) -> float:
        return self._pixel_size

    @property
    def half_width(self) -> float:
        return self._half_width

    @property
    def half_height(self) -> float:
        return self._half_height

    def ray_for_pixel(self, px: int, py: int) -> Ray:
        """Compute the world-space ray through the center of a pixel.

        Args:
            px: Pixel column (0 = left).
            py: Pixel row (0 = top).

        Returns:
            A ray from the camera position with a unit direction.
        """
        xoffset = (px + 0.5) * self._pixel_size
        yoffset = (py + 0.5) * self._pixel_size

        world_x = self._half_width - xoffset
        world_y = self._half_height - yoffset

        pixel = self._inverse @ point(world_x, world_y, -1.0)
        origin = self._inverse @ point(0.0, 0.0, 0.0)
        direction = normalize(pixel - origin)

        return Ray(origin, direction)

    def primary_rays(self) -> tuple[npt.NDArray[np.float64], npt.NDArray[np.float64]]:
        """Generate every pixel's ray in one data-parallel pass.

        Returns:
            Tuple of (origins, directions), each of shape (vsize, hsize, 3).
            Entry [py, px] matches ``ray_for_pixel(px, py)``.
        """
        origins = np.zeros((self._vsize, self._hsize, 3), dtype=np.float64)
        directions = np.zeros((self._vsize, self._hsize, 3), dtype=np.float64)
        _primary_rays_kernel(
            np.ascontiguousarray(self._inverse),
            origins,
            directions,
            self._pixel_size,
            self._half_width,
            self._half_height,
        )
        return origins, directions

    def render(self, world: ColorSource, workers: int = 1) -> Canvas:
        """Render a world into a new canvas.

        Every pixel is written exactly once. Pixels are independent, so with
        ``workers > 1`` rows are shaded concurrently by a thread pool; the
        world must not be mutated while rendering.

        Args:
            world: The scene collaborator providing ``color_at(ray)``.
            workers: Number of threads shading rows (1 renders serially).

        Returns:
            A canvas of size hsize x vsize.

        Raises:
            ValueError: If ``workers`` is less than 1.
        """
        if workers < 1:
            raise ValueError(f"workers must be at least 1, got {workers}")

        logger.info("Rendering %dx%d image with %d worker(s)", self._hsize, self._vsize, workers)
        start_time = time.perf_counter()

        image = Canvas(self._hsize, self._vsize)
        origins, directions = self.primary_rays()

        def shade_row(py: int) -> None:
            row = np.empty((self._hsize, 3), dtype=np.float64)
            for px in range(self._hsize):
                o = origins[py, px]
                d = directions[py, px]
                ray = Ray(point(o[0], o[1], o[2]), vector(d[0], d[1], d[2]))
                row[px] = world.color_at(ray)
            image.write_row(py, row)
            logger.debug("Finished row %d/%d", py + 1, self._vsize)

        rows = range(self._vsize)
        if workers == 1:
            for py in rows:
                shade_row(py)
        else:
            with ThreadPoolExecutor(max_workers=workers) as pool:
                # Consume results so exceptions raised in workers propagate
                for _ in pool.map(shade_row, rows):
                    pass

        logger.info("Render finished in %.2fs", time.perf_counter() - start_time)
        return image

    def __repr__(self) -> str:
        return (
            f"Camera(hsize={self._hsize}, vsize={self._vsize}, "
            f"field_of_view={self._field_of_view})"
        )

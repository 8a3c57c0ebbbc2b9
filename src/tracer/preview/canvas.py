"""Canvas: the pixel grid a camera renders into.

Pixels are stored as linear, unclamped RGB in a NumPy array of shape
(height, width, 3), indexed by (x, y) with (0, 0) at the top-left corner
and y increasing downward, matching the camera's pixel convention.

Example:
    >>> from src.tracer.core.tuples import color
    >>> canvas = Canvas(10, 20)
    >>> canvas.write_pixel(2, 3, color(1.0, 0.0, 0.0))
    >>> canvas.pixel_at(2, 3)
    array([1., 0., 0.])
"""

import numpy as np
import numpy.typing as npt

from src.tracer.core.tuples import BLACK, Color


class Canvas:
    """A width x height grid of RGB colors.

    Different pixels may be written from different threads; each cell is
    an independent slot in the buffer.

    Attributes:
        width: Canvas width in pixels.
        height: Canvas height in pixels.
    """

    def __init__(self, width: int, height: int, fill: Color = BLACK) -> None:
        """Create a canvas.

        Args:
            width: Width in pixels (must be positive).
            height: Height in pixels (must be positive).
            fill: Initial color of every pixel.

        Raises:
            ValueError: If either dimension is not positive.
        """
        if width <= 0 or height <= 0:
            raise ValueError(f"Canvas dimensions must be positive, got {width}x{height}")
        self._width = int(width)
        self._height = int(height)
        self._pixels = np.empty((self._height, self._width, 3), dtype=np.float64)
        self._pixels[:, :] = fill

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    def _check_bounds(self, x: int, y: int) -> None:
        if not (0 <= x < self._width and 0 <= y < self._height):
            raise IndexError(
                f"Pixel ({x}, {y}) outside canvas of size {self._width}x{self._height}"
            )

    def write_pixel(self, x: int, y: int, color: Color) -> None:
        """Set the color of pixel (x, y).

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        self._pixels[y, x] = color

    def pixel_at(self, x: int, y: int) -> Color:
        """Get a copy of the color at pixel (x, y).

        Raises:
            IndexError: If (x, y) lies outside the canvas.
        """
        self._check_bounds(x, y)
        return self._pixels[y, x].copy()

    def write_row(self, y: int, colors: npt.NDArray[np.float64]) -> None:
        """Set a whole row at once from an array of shape (width, 3).

        Raises:
            IndexError: If row y lies outside the canvas.
            ValueError: If ``colors`` does not have shape (width, 3).
        """
        self._check_bounds(0, y)
        colors = np.asarray(colors, dtype=np.float64)
        if colors.shape != (self._width, 3):
            raise ValueError(f"Row must have shape ({self._width}, 3), got {colors.shape}")
        self._pixels[y, :] = colors

    def to_numpy(self) -> npt.NDArray[np.float64]:
        """Get a copy of the pixel buffer, shape (height, width, 3)."""
        return self._pixels.copy()

    def __repr__(self) -> str:
        return f"Canvas(width={self._width}, height={self._height})"

"""Display conversion for rendered canvases.

Lighting produces unclamped linear colors. Before an image can be shown
or saved it is optionally tone mapped and gamma corrected, then clamped to
[0, 1] and quantized to 8 bits. Quantization runs as a Taichi kernel over
every channel of every pixel.

Taichi must be initialized (``ti.init(...)``) before ``to_uint8`` is called.

Example:
    >>> import taichi as ti
    >>> ti.init(arch=ti.cpu)
    >>> from src.tracer.preview.display import process_image_for_display, to_uint8
    >>> image = process_image_for_display(canvas.to_numpy(), tone_map="none", gamma=1.0)
    >>> pixels = to_uint8(image)
"""

from typing import Literal

import numpy as np
import numpy.typing as npt
import taichi as ti

# Type alias for tone mapping options
ToneMapMethod = Literal["none", "reinhard"]

# Largest 8-bit channel value
MAX_CHANNEL_VALUE = 255


@ti.kernel
def _quantize_kernel(
    image: ti.types.ndarray(),
    out: ti.types.ndarray(),
    scale: ti.f64,
):
    """Clamp each channel to [0, 1], scale, and round to the nearest integer."""
    for y, x, c in ti.ndrange(image.shape[0], image.shape[1], image.shape[2]):
        v = ti.min(ti.max(ti.cast(image[y, x, c], ti.f64), 0.0), 1.0)
        out[y, x, c] = ti.cast(ti.floor(v * scale + 0.5), ti.i32)


def to_uint8(image: npt.NDArray[np.floating]) -> npt.NDArray[np.uint8]:
    """Quantize a linear image to 8 bits per channel.

    Values below 0 become 0, values above 1 become 255, and everything in
    between is scaled by 255 and rounded half up.

    Args:
        image: Image array of shape (H, W, 3).

    Returns:
        Array of shape (H, W, 3) with dtype uint8.
    """
    src = np.ascontiguousarray(image, dtype=np.float64)
    out = np.zeros(src.shape, dtype=np.int32)
    _quantize_kernel(src, out, float(MAX_CHANNEL_VALUE))
    return out.astype(np.uint8)


def tone_map_reinhard(image: npt.NDArray[np.float64]) -> npt.NDArray[np.float64]:
    """Apply Reinhard tone mapping: c / (1 + c), after clamping negatives."""
    image = np.maximum(image, 0.0)
    return image / (1.0 + image)


def apply_gamma(image: npt.NDArray[np.float64], gamma: float = 2.2) -> npt.NDArray[np.float64]:
    """Encode linear values with a display gamma.

    Args:
        image: Linear image with values in [0, 1].
        gamma: Gamma value; 1.0 leaves the image unchanged.

    Returns:
        Gamma corrected image.
    """
    if gamma == 1.0:
        return image
    # Clamp first so negative values do not produce NaN
    image = np.clip(image, 0.0, 1.0)
    return np.power(image, 1.0 / gamma)


def process_image_for_display(
    image: npt.NDArray[np.float64],
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
) -> npt.NDArray[np.float64]:
    """Apply tone mapping, gamma correction and a final clamp to [0, 1].

    Raises:
        ValueError: If ``tone_map`` is not a known method.
    """
    result = np.array(image, dtype=np.float64, copy=True)

    if tone_map == "reinhard":
        result = tone_map_reinhard(result)
    elif tone_map != "none":
        raise ValueError(f"Unknown tone mapping method: {tone_map}")

    result = apply_gamma(result, gamma)
    return np.clip(result, 0.0, 1.0)

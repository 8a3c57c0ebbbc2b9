"""Image export for rendered canvases.

Supported formats:
    - Plain PPM (P3 text)
    - PNG (8-bit via Pillow)

Both go through ``display.to_uint8`` for clamping and quantization.

Example:
    >>> from src.tracer.preview.export import canvas_to_ppm, save_png
    >>> text = canvas_to_ppm(canvas)
    >>> save_png(canvas, "render.png")
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from PIL import Image as PILImage

from src.tracer.preview.display import ToneMapMethod, process_image_for_display, to_uint8

if TYPE_CHECKING:
    from src.tracer.preview.canvas import Canvas

# Plain PPM lines must not exceed this many characters
PPM_LINE_LIMIT = 70


def canvas_to_ppm(canvas: Canvas) -> str:
    """Serialize a canvas as plain PPM text.

    Channels are clamped to [0, 1] and scaled to 0..255. Each pixel row
    starts a new line, and lines are wrapped so none exceeds 70 characters.
    The text ends with a newline.

    Args:
        canvas: The canvas to serialize.

    Returns:
        The PPM file contents.
    """
    pixels = to_uint8(canvas.to_numpy())
    lines = ["P3", f"{canvas.width} {canvas.height}", "255"]

    for row in pixels:
        line = ""
        for value in row.reshape(-1):
            token = str(int(value))
            if not line:
                line = token
            elif len(line) + 1 + len(token) > PPM_LINE_LIMIT:
                lines.append(line)
                line = token
            else:
                line = f"{line} {token}"
        lines.append(line)

    return "\n".join(lines) + "\n"


def save_ppm(canvas: Canvas, filepath: str) -> None:
    """Write a canvas to a plain PPM file."""
    with open(filepath, "w", encoding="ascii") as f:
        f.write(canvas_to_ppm(canvas))


def save_png(
    canvas: Canvas,
    filepath: str,
    *,
    tone_map: ToneMapMethod = "none",
    gamma: float = 1.0,
) -> None:
    """Save a canvas as an 8-bit PNG file.

    Args:
        canvas: The canvas to save.
        filepath: Output file path (should end in .png).
        tone_map: Tone mapping method ("none" or "reinhard").
        gamma: Gamma correction value (default 1.0, i.e. linear).
    """
    processed = process_image_for_display(canvas.to_numpy(), tone_map=tone_map, gamma=gamma)
    pil_image = PILImage.fromarray(to_uint8(processed))
    pil_image.save(filepath)

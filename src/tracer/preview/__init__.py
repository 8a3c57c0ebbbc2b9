"""Preview module for the canvas and image output.

Components:
    canvas: Pixel grid the camera renders into
    display: Tone mapping, gamma, and 8-bit quantization (Taichi kernel)
    export: Plain PPM and PNG output

Lighting leaves colors unclamped; clamping to the displayable range only
happens here, on the way out.
"""

from .canvas import Canvas
from .display import (
    ToneMapMethod,
    apply_gamma,
    process_image_for_display,
    to_uint8,
    tone_map_reinhard,
)
from .export import canvas_to_ppm, save_png, save_ppm

__all__ = [
    "Canvas",
    "ToneMapMethod",
    "apply_gamma",
    "tone_map_reinhard",
    "process_image_for_display",
    "to_uint8",
    "canvas_to_ppm",
    "save_ppm",
    "save_png",
]

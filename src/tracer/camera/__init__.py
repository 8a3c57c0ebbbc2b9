"""Camera module for view and ray generation.

Components:
    camera: Pinhole camera with per-pixel and batched ray generation and
        the render loop

Ray generation convention:
    px in [0, hsize): left to right across the image
    py in [0, vsize): top to bottom across the image
    Rays pass through pixel centers; there is no jitter or supersampling.
"""

from .camera import Camera, ColorSource

__all__ = [
    "Camera",
    "ColorSource",
]

"""
Rendering utilities for identicons.

This module rasterizes the pixel map of an identicon onto a fixed 250x250
canvas and moves the encoded result to storage. Functions that can fail are
designed for railway-oriented programming pipelines, returning Result/IOResult
containers for safe error handling.

Notes
-----
- The canvas background is opaque white; it is drawn even when no cell survives
- Rectangles are filled inclusive of both corners, clipped at the canvas edge
- Output images are RGB PNGs
"""

from .image_io import draw_image, encode_png, save_image
from .raster import blank_canvas, fill_rectangles


__all__ = (
    "blank_canvas",
    "draw_image",
    "encode_png",
    "fill_rectangles",
    "save_image",
)

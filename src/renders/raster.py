from collections.abc import Iterable

import numpy as np

from constants import BACKGROUND_COLOR, CANVAS_SIZE
from container_models.base import Color, ImageRGB, Rectangle


def blank_canvas(
    size: int = CANVAS_SIZE, background: tuple[int, int, int] = BACKGROUND_COLOR
) -> ImageRGB:
    """Allocate a square RGB canvas filled with the background color."""
    return np.full((size, size, 3), background, dtype=np.uint8)


def fill_rectangles(canvas: ImageRGB, color: Color, rectangles: Iterable[Rectangle]) -> ImageRGB:
    """
    Fill every rectangle on a copy of the canvas with a solid color.

    Both corners are inclusive, so neighbouring 50x50 cells share their border
    pixels. Pixels that fall beyond the canvas edge are clipped.

    :param canvas: Array with shape (Height, Width, 3).
    :param color: The fill color.
    :param rectangles: Rectangles in canvas coordinates.
    :returns: A new array with the rectangles drawn.
    """
    filled = canvas.copy()
    for (left, top), (right, bottom) in rectangles:
        filled[top : bottom + 1, left : right + 1] = color
    return filled

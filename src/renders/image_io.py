from io import BytesIO
from pathlib import Path

from PIL.Image import fromarray
from returns.io import impure_safe
from returns.result import safe

from container_models import IdenticonImage
from container_models.base import ImageRGB
from exceptions import StorageError
from renders.raster import blank_canvas, fill_rectangles
from utils.logger import SuccessLevel, log_railway_function


def encode_png(canvas: ImageRGB) -> bytes:
    """Encode an RGB array as PNG bytes."""
    buffer = BytesIO()
    fromarray(canvas).save(buffer, format="PNG")
    return buffer.getvalue()


@log_railway_function("Failed to draw identicon", "Identicon drawn", success_level=SuccessLevel.DEBUG)
@safe
def draw_image(image: IdenticonImage) -> bytes:
    """
    Rasterize the pixel map of an identicon and encode it as PNG.

    :param image: An `IdenticonImage` with `color` and `pixel_map` set.
    :returns: The encoded 250x250 PNG image.
    :raises ValueError: If the color or pixel map has not been set.
    """
    if image.color is None or image.pixel_map is None:
        raise ValueError("Color and pixel map must be set before drawing")
    return encode_png(fill_rectangles(blank_canvas(), image.color, image.pixel_map))


@log_railway_function("Failed to save image")
@impure_safe
def save_image(data: bytes, output_path: Path) -> Path:
    """
    Write encoded image bytes to disk.

    :param data: The encoded image.
    :param output_path: The path where the image should be written.
    :returns: The path to the saved image.
    :raises StorageError: If the file cannot be written.
    """
    try:
        output_path.write_bytes(data)
    except OSError as error:
        raise StorageError(f"Unable to write {output_path}: {error}") from error
    return output_path

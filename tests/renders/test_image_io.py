from io import BytesIO
from pathlib import Path

import pytest
from PIL import Image
from returns.pipeline import flow, is_successful
from returns.pointfree import bind
from returns.unsafe import unsafe_perform_io

from container_models import IdenticonImage
from exceptions import StorageError
from mutations import BuildGrid, BuildPixelMap, FilterOddSquares, PickColor
from renders import blank_canvas, draw_image, encode_png, save_image
from tests.constants import WHITE


def _complete(image: IdenticonImage) -> IdenticonImage:
    return flow(
        image,
        PickColor(),
        bind(BuildGrid()),
        bind(FilterOddSquares()),
        bind(BuildPixelMap()),
    ).unwrap()


def test_encode_png_produces_png():
    data = encode_png(blank_canvas())
    with Image.open(BytesIO(data)) as image:
        assert image.format == "PNG"
        assert image.size == (250, 250)
        assert image.mode == "RGB"


class TestDrawImage:
    def test_draws_only_foreground_and_background(self, banana: IdenticonImage):
        # Arrange
        image = _complete(banana)
        # Act
        data = draw_image(image).unwrap()
        # Assert
        with Image.open(BytesIO(data)) as png:
            colors = {color for _, color in png.getcolors()}
        assert colors <= {WHITE, image.color}

    def test_all_odd_digest_draws_blank_canvas(self, odd_image: IdenticonImage):
        data = draw_image(_complete(odd_image)).unwrap()
        with Image.open(BytesIO(data)) as png:
            assert png.getcolors() == [(250 * 250, WHITE)]

    def test_incomplete_record_is_a_failure(self, banana: IdenticonImage):
        assert not is_successful(draw_image(banana))


class TestSaveImage:
    def test_writes_bytes(self, tmp_path: Path):
        # Act
        result = save_image(b"identicon", tmp_path / "Banana.png")
        # Assert
        assert is_successful(result)
        assert (tmp_path / "Banana.png").read_bytes() == b"identicon"

    def test_write_error_is_storage_failure(self, tmp_path: Path):
        # Act
        result = save_image(b"identicon", tmp_path / "missing" / "Banana.png")
        # Assert
        assert not is_successful(result)
        error = unsafe_perform_io(result.failure())
        assert isinstance(error, StorageError)
        assert isinstance(error.__cause__, OSError)

    def test_failure_is_logged(self, tmp_path: Path, caplog: pytest.LogCaptureFixture):
        _ = save_image(b"identicon", tmp_path / "missing" / "Banana.png")
        assert "Failed to save image" in caplog.text

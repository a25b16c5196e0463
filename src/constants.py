from enum import StrEnum
from pathlib import Path
from typing import Final

PROJECT_ROOT = Path(__file__).parent.parent

GRID_SIZE: Final[int] = 5
GRID_CELLS: Final[int] = GRID_SIZE * GRID_SIZE
CELL_SIZE: Final[int] = 50
CANVAS_SIZE: Final[int] = GRID_SIZE * CELL_SIZE
DIGEST_LENGTH: Final[int] = 16
ROW_SOURCE_BYTES: Final[int] = 3
BACKGROUND_COLOR: Final[tuple[int, int, int]] = (255, 255, 255)
IMAGE_SUFFIX: Final[str] = ".png"
IMAGE_MEDIA_TYPE: Final[str] = "image/png"


class RoutePrefix(StrEnum):
    IDENTICON = "identicon"


class IdenticonEndpoint(StrEnum):
    ROOT = ""
    IMAGE = "/{text}"

from collections.abc import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

from constants import CELL_SIZE, GRID_SIZE, ROW_SOURCE_BYTES
from container_models.base import Cell, Pair, Rectangle


def chunk_rows(values: Sequence[int], width: int = ROW_SOURCE_BYTES) -> NDArray[np.uint8]:
    """
    Split values into rows of `width`, dropping an incomplete trailing row.

    :param values: The byte values to split.
    :param width: Number of values per row.
    :returns: Array with shape (len(values) // width, width).
    """
    n_rows = len(values) // width
    return np.asarray(values[: n_rows * width], dtype=np.uint8).reshape(n_rows, width)


def mirror_rows(rows: NDArray[np.uint8]) -> NDArray[np.uint8]:
    """Append the second and first column to every row: [a, b, c] -> [a, b, c, b, a]."""
    return np.hstack([rows, rows[:, 1::-1]])


def build_cells(hash_bytes: Sequence[int]) -> tuple[Cell, ...]:
    """
    Build the symmetric grid of an identicon.

    Every three consecutive bytes become one mirrored row of five values. The rows
    are flattened in row-major order and each value is paired with its position.
    With a 16 byte digest the last byte does not fill a row and is unused.

    :param hash_bytes: The digest bytes.
    :returns: One `Cell` per grid position.
    """
    values = mirror_rows(chunk_rows(hash_bytes)).ravel()
    return tuple(Cell(value, index) for index, value in enumerate(values.tolist()))


def even_cells(cells: Iterable[Cell]) -> tuple[Cell, ...]:
    """Keep the cells with an even value, in order and with their original index."""
    return tuple(cell for cell in cells if cell.value % 2 == 0)


def cell_rectangle(index: int) -> Rectangle:
    """Map a row-major grid index to the canvas rectangle it covers."""
    row, column = divmod(index, GRID_SIZE)
    top_left = Pair(column, row) * CELL_SIZE
    return Rectangle(top_left, top_left + CELL_SIZE)

"""
Grid Mutations
==============

This module contains the stages that build and narrow the logical 5x5 grid
of an identicon.

- :class:`BuildGrid` turns the digest into 25 mirrored cells, giving every
  row left-right symmetry.
- :class:`FilterOddSquares` keeps the even-valued cells. Indices are not
  renumbered, the gaps they leave are the visible pattern.
"""

from loguru import logger

from computations.grid import build_cells, even_cells
from constants import GRID_CELLS
from container_models import IdenticonImage
from mutations.base import IdenticonMutation


class BuildGrid(IdenticonMutation):
    requires = ("hash_bytes",)

    def apply_on_image(self, image: IdenticonImage) -> IdenticonImage:
        """
        Build the mirrored grid from the digest bytes.

        :returns: New IdenticonImage with exactly 25 cells in its grid.
        :raises ValueError: If the digest does not yield exactly 25 cells.
        """
        cells = build_cells(image.hash_bytes)
        if len(cells) != GRID_CELLS:
            raise ValueError(f"Expected {GRID_CELLS} grid cells, but got {len(cells)}")
        return image.evolve(grid=cells)


class FilterOddSquares(IdenticonMutation):
    requires = ("grid",)

    def apply_on_image(self, image: IdenticonImage) -> IdenticonImage:
        cells = even_cells(image.grid)
        if not cells:
            logger.debug("No even cells left, identicon will be blank")
        return image.evolve(grid=cells)

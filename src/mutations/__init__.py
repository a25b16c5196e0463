"""
Identicon Stages Module
=======================

This package contains all `IdenticonMutation` implementations.

Each stage represents a single, well-defined step of the identicon
pipeline. Stages are composable and are chained together with the
`returns` library (e.g. `returns.pipeline.flow` with `bind`).
"""

from .color import PickColor
from .grid import BuildGrid, FilterOddSquares
from .pixel_map import BuildPixelMap


__all__ = ["BuildGrid", "BuildPixelMap", "FilterOddSquares", "PickColor"]

from collections.abc import Callable, Sized
from functools import partial
from operator import add, mul
from typing import Annotated, NamedTuple

from numpy import uint8
from numpy.typing import NDArray
from pydantic import AfterValidator, Field

from constants import DIGEST_LENGTH, GRID_CELLS


class Pair[T](NamedTuple):
    x: T
    y: T

    def _apply(self, op: Callable, other: "Pair[T] | T") -> "Pair[T]":
        if isinstance(other, Pair):
            return Pair(*map(op, self, other))
        return Pair(op(self.x, other), op(self.y, other))

    def __add__(self, other: "Pair[T] | T") -> "Pair[T]":
        return self._apply(add, other)

    def __mul__(self, other: "Pair[T] | T") -> "Pair[T]":
        return self._apply(mul, other)


def validate_length[S: Sized](length: int, value: S) -> S:
    if (actual := len(value)) != length:
        raise ValueError(f"Length mismatch, expected {length} element(s), but got {actual}")
    return value


# Tier 1: Scalars
type UInt8 = Annotated[int, Field(ge=0, le=255)]
type GridIndex = Annotated[int, Field(ge=0, lt=GRID_CELLS)]
type Point = Pair[int]


# Tier 2: Records
class Color(NamedTuple):
    r: UInt8
    g: UInt8
    b: UInt8


class Cell(NamedTuple):
    value: UInt8
    index: GridIndex


class Rectangle(NamedTuple):
    top_left: Point
    bottom_right: Point


# Tier 3: Semantic context
type HashBytes = Annotated[
    tuple[UInt8, ...], AfterValidator(partial(validate_length, DIGEST_LENGTH))
]
type Grid = Annotated[tuple[Cell, ...], Field(max_length=GRID_CELLS)]
type PixelMap = Annotated[tuple[Rectangle, ...], Field(max_length=GRID_CELLS)]
type ImageRGB = NDArray[uint8]  # Shape: (H, W, 3)

"""Identicon record architecture.

This module defines the single record threaded through the identicon
pipeline.

Architecture
------------
::

    +--------------------------------------+
    |            IdenticonImage            |
    |--------------------------------------|
    | hash_bytes : HashBytes  (Hasher)     |
    | color      : Color      (PickColor)  |
    | grid       : Grid       (BuildGrid)  |
    | pixel_map  : PixelMap   (PixelMap)   |
    +--------------------------------------+
    | from_text(text) -> cls               |
    | evolve(**changes) -> cls             |
    +--------------------------------------+

- :class:`IdenticonImage` is frozen. Every stage returns a new record through
  :meth:`IdenticonImage.evolve`, which re-runs validation.
- Fields are filled in pipeline order. Once set, ``hash_bytes``, ``color``
  and ``pixel_map`` never change; ``grid`` may only be narrowed.
"""

from __future__ import annotations
from hashlib import md5
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, model_validator

from container_models.base import Color, Grid, HashBytes, PixelMap

_WRITE_ONCE = ("hash_bytes", "color", "pixel_map")


def _encode(text: str) -> bytes:
    """
    Encode `text` as UTF-8 without failing on lone surrogates.

    Escaped surrogates (``\\udc80`` to ``\\udcff``, as produced when decoding
    command line arguments or file names that are not valid UTF-8) map back to
    their raw byte. Any other lone surrogate is encoded as its three byte
    UTF-8 form.
    """
    try:
        return text.encode("utf-8", "surrogateescape")
    except UnicodeEncodeError:
        return text.encode("utf-8", "surrogatepass")


def md5_bytes(text: str) -> tuple[int, ...]:
    """Return the MD5 digest of the UTF-8 encoded text as unsigned byte values."""
    return tuple(md5(_encode(text)).digest())


class IdenticonImage(BaseModel):
    hash_bytes: HashBytes
    color: Color | None = None
    grid: Grid | None = None
    pixel_map: PixelMap | None = None

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        regex_engine="rust-regex",
    )

    @model_validator(mode="after")
    def _check_cells(self) -> Self:
        if self.grid is not None:
            indices = [cell.index for cell in self.grid]
            if indices != sorted(set(indices)):
                raise ValueError("Grid indices must be unique and in ascending order")
        if self.pixel_map is not None and len(self.pixel_map) != len(self.grid or ()):
            raise ValueError(
                f"Pixel map has {len(self.pixel_map)} rectangle(s) "
                f"for {len(self.grid or ())} grid cell(s)"
            )
        return self

    @classmethod
    def from_text(cls, text: str) -> IdenticonImage:
        """
        Start a new record from an input string.

        :param text: Any string, the empty string included.
        :returns: An `IdenticonImage` with only `hash_bytes` set.
        """
        return cls(hash_bytes=md5_bytes(text))

    def evolve(self, **changes: Any) -> IdenticonImage:
        """
        Return a validated copy of this record with `changes` applied.

        :raises ValueError: If a change would revise a field set by an earlier stage,
            or add cells to the grid.
        """
        for field in _WRITE_ONCE:
            if field in changes and getattr(self, field) is not None:
                raise ValueError(f"Field '{field}' is already set")
        if "grid" in changes and self.grid is not None:
            if not set(changes["grid"]) <= set(self.grid):
                raise ValueError("Grid can only be narrowed once built")
        return type(self)(**(dict(self) | changes))

"""
Identicon Stages Architecture
=============================

This module defines how the stages of the identicon pipeline are structured
and applied.

- :class:`~container_models.identicon.IdenticonImage` is the record passed
  between stages.
- :class:`IdenticonMutation` is an abstract interface for one stage.
- Concrete stages live in the ``mutations`` folder.
- Stateless functionality (grid arithmetic) lives in the ``computations``
  folder.

High-level Design
-----------------

                        +---------------------------------+
                        |          IdenticonImage         |
                        |---------------------------------|
                        | hash_bytes, color, grid,        |
                        | pixel_map                       |
                        +---------------+-----------------+
                                        |
                                        v
                    +-------------------+----------------------+
                    |              <<abstract>>                |
                    |            IdenticonMutation             |
                    |------------------------------------------|
                    | + requires: tuple[str, ...]              |
                    | + apply_on_image(T) -> T                 |
                    +--------------------+---------------------+
                                         ^
                                         |
        +------------------+-------------+------+---------------------+
        |                  |                    |                     |
+-------+-------+  +-------+-------+  +---------+--------+  +---------+-------+
|   PickColor   |  |   BuildGrid   |  | FilterOddSquares |  |  BuildPixelMap  |
|---------------|  |---------------|  |------------------|  |-----------------|
| reads  bytes  |  | reads  bytes  |  | reads  grid      |  | reads  grid     |
| sets   color  |  | sets   grid   |  | narrows grid     |  | sets pixel_map  |
+---------------+  +---------------+  +------------------+  +-----------------+


Example
-------

    from container_models import IdenticonImage
    from returns.pipeline import flow
    from returns.pointfree import bind
    from mutations import BuildGrid, BuildPixelMap, FilterOddSquares, PickColor

    result = flow(
        IdenticonImage.from_text("Banana"),
        PickColor(),
        bind(BuildGrid()),
        bind(FilterOddSquares()),
        bind(BuildPixelMap()),
    )
"""

from abc import ABC, abstractmethod
from typing import ClassVar

from loguru import logger
from returns.result import safe

from container_models import IdenticonImage


class IdenticonMutation(ABC):
    """
    Represents a single stage applied to an :class:`~container_models.identicon.IdenticonImage`.

    After one `IdenticonMutation`, the resulting `IdenticonImage` must be valid
    input for the next stage. The fields a stage reads are listed in `requires`;
    calling a stage on a record that lacks one of them is a programming error.
    """

    requires: ClassVar[tuple[str, ...]] = ()

    @safe
    def __call__(self, image: IdenticonImage) -> IdenticonImage:
        """
        Callable interface used by pipelines (e.g. `flow(...)` from
        the `returns` library).

        :param image:
            The `IdenticonImage` to build upon.
        :return IdenticonImage:
            A new record with this stage's field set.
        :raises ValueError:
            If a required field is missing or the result breaks an invariant.
        """
        if missing := [field for field in self.requires if getattr(image, field) is None]:
            raise ValueError(
                f"{type(self).__name__} requires {', '.join(missing)} to be set first"
            )
        image = self.apply_on_image(image)
        logger.debug(f"Applied {type(self).__name__}")
        return image

    @abstractmethod
    def apply_on_image(self, image: IdenticonImage) -> IdenticonImage:
        """
        Applies the stage to the given `IdenticonImage`.

        This method must be implemented by concrete stages and is
        called internally by `__call__` to support pipeline composition.
        """

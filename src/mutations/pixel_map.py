from computations.grid import cell_rectangle
from container_models import IdenticonImage
from mutations.base import IdenticonMutation


class BuildPixelMap(IdenticonMutation):
    requires = ("grid",)

    def apply_on_image(self, image: IdenticonImage) -> IdenticonImage:
        """
        Map every grid cell to the 50x50 canvas rectangle it covers.

        :returns: New IdenticonImage with one rectangle per cell, in grid order.
        """
        return image.evolve(
            pixel_map=tuple(cell_rectangle(cell.index) for cell in image.grid)
        )

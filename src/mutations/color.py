from container_models import IdenticonImage
from container_models.base import Color
from mutations.base import IdenticonMutation


class PickColor(IdenticonMutation):
    """Use the first three digest bytes as the red, green and blue channel."""

    requires = ("hash_bytes",)

    def apply_on_image(self, image: IdenticonImage) -> IdenticonImage:
        red, green, blue, *_ = image.hash_bytes
        return image.evolve(color=Color(red, green, blue))

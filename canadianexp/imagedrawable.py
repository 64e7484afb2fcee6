"""Drawables that show an image file."""

from __future__ import annotations

import math
import os
from typing import TYPE_CHECKING

from PIL import Image

from .drawable import Drawable
from .geometry import Point

if TYPE_CHECKING:
    from .graphics import Graphics

# Pixels with alpha below this count as transparent for hit testing.
ALPHA_THRESHOLD = 128


class ImageDrawable(Drawable):
    """A drawable drawn as an image, rotated about its center pixel."""

    def __init__(self, name: str, filename: str | os.PathLike[str]) -> None:
        super().__init__(name)
        self.center = Point(0, 0)
        with Image.open(filename) as source:
            self.image = source.convert("RGBA")

    def draw(self, graphics: Graphics) -> None:
        """Draw the image at its placed position and rotation."""
        graphics.draw_image(self.image, self.placed_position, self.placed_rotation, self.center)

    def hit_test(self, pos: Point) -> bool:
        """True if ``pos`` lands on a non-transparent pixel of the image."""
        x = pos.x - self.placed_position.x
        y = pos.y - self.placed_position.y

        sn = math.sin(self.placed_rotation)
        cs = math.cos(self.placed_rotation)

        x, y = cs * x - sn * y + self.center.x, sn * x + cs * y + self.center.y

        width, height = self.image.size
        if x < 0 or y < 0 or x >= width or y >= height:
            return False
        return self.image.getpixel((int(x), int(y)))[3] >= ALPHA_THRESHOLD
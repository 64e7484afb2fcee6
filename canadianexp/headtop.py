"""The movable top of a head, drawn with eyes and eyebrows."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

from .geometry import Point, rotate_point
from .graphics import BLACK
from .imagedrawable import ImageDrawable

if TYPE_CHECKING:
    from .graphics import Graphics

EYE_WIDTH = 15.0
EYE_HEIGHT = 20.0
EYEBROW_WIDTH = 2

# Locations on the head image.
EYES = (Point(40, 80), Point(70, 80))
EYEBROWS = (
    (Point(32, 60), Point(47, 62)),
    (Point(62, 63), Point(77, 60)),
)


class HeadTop(ImageDrawable):
    """An image of the top of a head that can be dragged on its own."""

    def __init__(self, name: str, filename: str | os.PathLike[str]) -> None:
        super().__init__(name, filename)

    def is_movable(self) -> bool:
        """A head top is always movable."""
        return True

    def draw(self, graphics: Graphics) -> None:
        """Draw the head image, then the eyes and eyebrows on top of it."""
        super().draw(graphics)
        self._draw_eyes(graphics)
        self._draw_eyebrows(graphics)

    def _draw_eyes(self, graphics: Graphics) -> None:
        for eye in EYES:
            graphics.draw_ellipse(
                self.transform_point(eye),
                EYE_WIDTH,
                EYE_HEIGHT,
                self.placed_rotation,
                BLACK,
            )

    def _draw_eyebrows(self, graphics: Graphics) -> None:
        for start, end in EYEBROWS:
            graphics.stroke_line(
                self.transform_point(start),
                self.transform_point(end),
                BLACK,
                EYEBROW_WIDTH,
            )

    def transform_point(self, p: Point) -> Point:
        """Map a location on the head image to a location in the picture."""
        relative = p - self.center
        return rotate_point(relative, self.placed_rotation) + self.placed_position
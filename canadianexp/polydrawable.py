"""Drawables that are filled polygons."""

from __future__ import annotations

from typing import TYPE_CHECKING, Sequence

from .drawable import Drawable
from .geometry import Point, rotate_point
from .graphics import BLACK

if TYPE_CHECKING:
    from .graphics import Graphics


def _contains(polygon: Sequence[Point], pos: Point) -> bool:
    """Even-odd test of ``pos`` against a closed polygon."""
    inside = False
    for a, b in zip(polygon, [*polygon[1:], *polygon[:1]]):
        if (a.y > pos.y) != (b.y > pos.y):
            cross_x = a.x + (pos.y - a.y) * (b.x - a.x) / (b.y - a.y)
            if pos.x < cross_x:
                inside = not inside
    return inside


class PolyDrawable(Drawable):
    """A drawable drawn as a filled polygon through its points."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.color: tuple[int, ...] = BLACK
        self._points: list[Point] = []
        self._path: list[Point] = []

    @property
    def points(self) -> tuple[Point, ...]:
        """The polygon points relative to the drawable."""
        return tuple(self._points)

    def add_point(self, point: Point) -> None:
        """Append a point to the polygon."""
        self._points.append(point)

    def draw(self, graphics: Graphics) -> None:
        """Fill the polygon at its placed position and rotation."""
        if not self._points:
            return
        self._path = [
            rotate_point(p, self.placed_rotation) + self.placed_position
            for p in self._points
        ]
        graphics.fill_polygon(self._path, self.color)

    def hit_test(self, pos: Point) -> bool:
        """True if ``pos`` is inside the polygon as last drawn."""
        return _contains(self._path, pos)
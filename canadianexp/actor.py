"""Actors: named groups of drawables that make up one character or object."""

from __future__ import annotations

from typing import TYPE_CHECKING

from .geometry import Point

if TYPE_CHECKING:
    from .drawable import Drawable
    from .graphics import Graphics
    from .picture import Picture


class Actor:
    """A graphical object made of drawables, drawn in the order they were added."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._drawables: list[Drawable] = []
        self.enabled = True
        self.clickable = True
        self.position = Point(0, 0)
        self.root: Drawable | None = None
        self.picture: Picture | None = None

    @property
    def name(self) -> str:
        """The actor name."""
        return self._name

    @property
    def drawables(self) -> tuple[Drawable, ...]:
        """The drawables in drawing order."""
        return tuple(self._drawables)

    def add_drawable(self, drawable: Drawable) -> None:
        """Add ``drawable`` to the end of the drawing order."""
        self._drawables.append(drawable)
        drawable.actor = self

    def draw(self, graphics: Graphics) -> None:
        """Place the drawable tree at the actor position and draw it."""
        if not self.enabled:
            return
        if self.root is not None:
            self.root.place(self.position, 0)
        for drawable in self._drawables:
            drawable.draw(graphics)

    def hit_test(self, pos: Point) -> Drawable | None:
        """Return the topmost drawable under ``pos``, or None."""
        if not self.clickable or not self.enabled:
            return None
        for drawable in reversed(self._drawables):
            if drawable.hit_test(pos):
                return drawable
        return None
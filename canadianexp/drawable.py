"""Drawable parts of an actor, arranged as a tree."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .geometry import Point, rotate_point

if TYPE_CHECKING:
    from .actor import Actor
    from .graphics import Graphics


class Drawable(ABC):
    """One part of an actor that can be placed, moved and rotated."""

    def __init__(self, name: str) -> None:
        self._name = name
        self._children: list[Drawable] = []
        self.position = Point(0, 0)
        self.rotation = 0.0
        self.actor: Actor | None = None
        self.parent: Drawable | None = None
        self.placed_position = Point(0, 0)
        self.placed_rotation = 0.0

    @property
    def name(self) -> str:
        """The drawable name."""
        return self._name

    @property
    def children(self) -> tuple[Drawable, ...]:
        """The child drawables in the order they were added."""
        return tuple(self._children)

    def place(self, offset: Point, rotate: float) -> None:
        """Place this drawable and its children relative to a parent transform."""
        self.placed_position = offset + rotate_point(self.position, rotate)
        self.placed_rotation = self.rotation + rotate
        for child in self._children:
            child.place(self.placed_position, self.placed_rotation)

    def add_child(self, child: Drawable) -> None:
        """Attach ``child`` below this drawable."""
        self._children.append(child)
        child.parent = self

    def move(self, delta: Point) -> None:
        """Move by ``delta`` pixels given in screen orientation."""
        if self.parent is not None:
            self.position = self.position + rotate_point(delta, -self.parent.placed_rotation)
        else:
            self.position = self.position + delta

    @abstractmethod
    def draw(self, graphics: Graphics) -> None:
        """Draw this drawable on ``graphics``."""

    @abstractmethod
    def hit_test(self, pos: Point) -> bool:
        """Return True if ``pos`` falls on this drawable."""

    def is_movable(self) -> bool:
        """Whether dragging moves this drawable rather than its actor."""
        return False
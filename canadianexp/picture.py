"""The picture: all actors plus the observers that display them."""

from __future__ import annotations

import contextlib
from typing import TYPE_CHECKING, Iterator

if TYPE_CHECKING:
    from .actor import Actor
    from .graphics import Graphics
    from .observer import PictureObserver

DEFAULT_SIZE = (1500, 800)


class Picture:
    """The picture being drawn, holding every actor in drawing order."""

    def __init__(self) -> None:
        self.size: tuple[int, int] = DEFAULT_SIZE
        self._observers: list[PictureObserver] = []
        self._actors: list[Actor] = []

    def add_observer(self, observer: PictureObserver) -> None:
        """Register ``observer`` for change notifications."""
        self._observers.append(observer)

    def remove_observer(self, observer: PictureObserver) -> None:
        """Unregister ``observer``; unknown observers are ignored."""
        with contextlib.suppress(ValueError):
            self._observers.remove(observer)

    def update_observers(self) -> None:
        """Tell every observer that the picture has changed."""
        for observer in list(self._observers):
            observer.update_observer()

    def add_actor(self, actor: Actor) -> None:
        """Add ``actor`` on top of the existing actors."""
        self._actors.append(actor)
        actor.picture = self

    def draw(self, graphics: Graphics) -> None:
        """Draw every actor in order."""
        for actor in self._actors:
            actor.draw(graphics)

    def __iter__(self) -> Iterator[Actor]:
        return iter(self._actors)

    def __len__(self) -> int:
        return len(self._actors)
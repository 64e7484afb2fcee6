"""Mouse-driven editing of a picture: selecting, moving and rotating drawables."""

from __future__ import annotations

import enum
from typing import TYPE_CHECKING, Callable

from PIL import Image

from .geometry import Point
from .graphics import WHITE, Graphics
from .observer import PictureObserver

if TYPE_CHECKING:
    from .actor import Actor
    from .drawable import Drawable
    from .picture import Picture

# Converts vertical mouse motion in pixels to rotation in radians.
ROTATION_SCALING = 0.02


class Mode(enum.Enum):
    """What dragging the mouse does to the selected drawable."""

    MOVE = "move"
    ROTATE = "rotate"


class EditController(PictureObserver):
    """Edits the picture in response to mouse events given in picture coordinates."""

    def __init__(self, picture: Picture) -> None:
        super().__init__()
        self.mode = Mode.MOVE
        self.last_mouse = Point(0, 0)
        self.selected_actor: Actor | None = None
        self.selected_drawable: Drawable | None = None
        self.on_change: Callable[[], None] | None = None
        self.observe(picture)

    def _require_picture(self) -> Picture:
        if self.picture is None:
            raise RuntimeError("the editor is not attached to a picture")
        return self.picture

    def on_left_down(self, pos: Point) -> None:
        """Select the topmost drawable under ``pos``, if any."""
        picture = self._require_picture()
        self.last_mouse = pos
        picture.update_observers()

        hit_actor: Actor | None = None
        hit_drawable: Drawable | None = None
        # Actors are in drawing order, so the last hit is the one on top.
        for actor in picture:
            drawable = actor.hit_test(pos)
            if drawable is not None:
                hit_actor = actor
                hit_drawable = drawable

        if hit_actor is not None:
            self.selected_actor = hit_actor
            self.selected_drawable = hit_drawable

    def on_mouse_move(self, pos: Point, left_down: bool) -> None:
        """Drag the selection by the motion since the last event."""
        picture = self._require_picture()
        delta = pos - self.last_mouse
        self.last_mouse = pos

        if not left_down:
            self.selected_drawable = None
            self.selected_actor = None
            return

        drawable = self.selected_drawable
        if drawable is None:
            return

        if self.mode is Mode.MOVE:
            if drawable.is_movable():
                drawable.move(delta)
            elif self.selected_actor is not None:
                self.selected_actor.position = self.selected_actor.position + delta
            picture.update_observers()
        elif self.mode is Mode.ROTATE:
            drawable.rotation = drawable.rotation + delta.y * ROTATION_SCALING
            picture.update_observers()

    def on_left_up(self, pos: Point) -> None:
        """Finish a drag; the button is no longer held."""
        self.on_mouse_move(pos, False)

    def update_observer(self) -> None:
        """Ask whoever displays this editor to redraw."""
        if self.on_change is not None:
            self.on_change()

    def render(self) -> Image.Image:
        """Draw the picture on a white canvas of the picture's size."""
        picture = self._require_picture()
        graphics = Graphics(picture.size, WHITE)
        picture.draw(graphics)
        return graphics.image
"""The timeline strip shown below the editing area."""

from __future__ import annotations

from datetime import datetime
from typing import Callable

from PIL import Image

from .geometry import Point
from .graphics import BLACK, WHITE, Graphics
from .observer import PictureObserver

HEIGHT = 90
FRAME_COLOR = (0, 128, 0)
FRAME = (10, 10, 200, 60)
TITLE = "Timeline!"
TITLE_POSITION = Point(15, 15)
TIME_POSITION = Point(15, 40)


def timestamp(now: datetime) -> str:
    """Format ``now`` as the locale date followed by the time of day."""
    return now.strftime("%x %H:%M:%S")


class Timeline(PictureObserver):
    """Renders the timeline strip and redraws when the picture changes."""

    def __init__(self, width: int) -> None:
        super().__init__()
        if width <= 0:
            raise ValueError(f"timeline width must be positive, got {width}")
        self.width = width
        self.on_change: Callable[[], None] | None = None

    def update_observer(self) -> None:
        """Ask whoever displays the timeline to redraw."""
        if self.on_change is not None:
            self.on_change()

    def render(self, now: datetime | None = None) -> Image.Image:
        """Draw the timeline strip, stamped with ``now`` (default: current time)."""
        if now is None:
            now = datetime.now()
        graphics = Graphics((self.width, HEIGHT), WHITE)
        graphics.draw_rectangle(*FRAME, FRAME_COLOR)
        graphics.draw_text(TITLE, TITLE_POSITION, BLACK)
        graphics.draw_text(timestamp(now), TIME_POSITION, BLACK)
        return graphics.image
"""Builds the picture with its background and characters."""

from __future__ import annotations

import os
from pathlib import Path

from .actor import Actor
from .geometry import Point
from .harold import create_harold
from .imagedrawable import ImageDrawable
from .jim import create_jim
from .picture import Picture

HAROLD_START = Point(300, 500)
JIM_START = Point(500, 500)


def create_picture(images_dir: str | os.PathLike[str]) -> Picture:
    """Create the picture from the images in ``images_dir``."""
    images = Path(images_dir)
    picture = Picture()

    background = Actor("Background")
    background.clickable = False
    background.position = Point(0, 0)
    background_image = ImageDrawable("Background", images / "Background.jpg")
    background.add_drawable(background_image)
    background.root = background_image
    picture.add_actor(background)

    harold = create_harold(images)
    harold.position = HAROLD_START
    picture.add_actor(harold)

    jim = create_jim(images)
    jim.position = JIM_START
    picture.add_actor(jim)

    return picture
"""Builds the Harold character."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable

from .actor import Actor
from .geometry import Point
from .headtop import HeadTop
from .imagedrawable import ImageDrawable
from .polydrawable import PolyDrawable

SLEEVE_COLOR = (60, 174, 184)
SKIN_COLOR = (253, 218, 180)

_ARM_OUTLINE = (Point(-7, -7), Point(-7, 96), Point(8, 96), Point(8, -7))
_HAND_OUTLINE = (Point(-12, -2), Point(-12, 17), Point(11, 17), Point(11, -2))


def _image(
    cls: type[ImageDrawable], name: str, path: Path, center: Point, position: Point
) -> ImageDrawable:
    drawable = cls(name, path)
    drawable.center = center
    drawable.position = position
    return drawable


def _poly(
    name: str, color: tuple[int, int, int], position: Point, points: Iterable[Point]
) -> PolyDrawable:
    drawable = PolyDrawable(name)
    drawable.color = color
    drawable.position = position
    for point in points:
        drawable.add_point(point)
    return drawable


def create_harold(images_dir: str | os.PathLike[str]) -> Actor:
    """Create the Harold actor from the images in ``images_dir``."""
    images = Path(images_dir)
    actor = Actor("Harold")

    shirt = _image(ImageDrawable, "Shirt", images / "harold_shirt.png", Point(44, 138), Point(0, -114))
    actor.root = shirt

    vest = _image(ImageDrawable, "Vest", images / "harold_vest.png", Point(44, 138), Point(0, 0))
    shirt.add_child(vest)

    lleg = _image(ImageDrawable, "Left Leg", images / "harold_lleg.png", Point(11, 9), Point(27, 0))
    shirt.add_child(lleg)

    rleg = _image(ImageDrawable, "Right Leg", images / "harold_rleg.png", Point(39, 9), Point(-27, 0))
    shirt.add_child(rleg)

    headb = _image(ImageDrawable, "Head Bottom", images / "harold_headb.png", Point(44, 31), Point(0, -130))
    shirt.add_child(headb)

    headt = _image(HeadTop, "Head Top", images / "harold_headt_blank.png", Point(55, 109), Point(0, -31))
    headb.add_child(headt)

    larm = _poly("Left Arm", SLEEVE_COLOR, Point(50, -130), _ARM_OUTLINE)
    shirt.add_child(larm)

    rarm = _poly("Right Arm", SLEEVE_COLOR, Point(-45, -130), _ARM_OUTLINE)
    shirt.add_child(rarm)

    lhand = _poly("Left Hand", SKIN_COLOR, Point(0, 96), _HAND_OUTLINE)
    larm.add_child(lhand)

    rhand = _poly("Right Hand", SKIN_COLOR, Point(0, 96), _HAND_OUTLINE)
    rarm.add_child(rhand)

    for drawable in (larm, rarm, rhand, lhand, rleg, lleg, shirt, vest, headb, headt):
        actor.add_drawable(drawable)

    return actor
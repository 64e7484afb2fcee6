"""A raster drawing surface for pictures, built on Pillow."""

from __future__ import annotations

import math
from typing import Iterable, Sequence

from PIL import Image, ImageDraw

from .geometry import Point

BLACK = (0, 0, 0)
WHITE = (255, 255, 255)

_ELLIPSE_SEGMENTS = 64


def _rgba(color: Sequence[int]) -> tuple[int, int, int, int]:
    if len(color) == 3:
        return (color[0], color[1], color[2], 255)
    return (color[0], color[1], color[2], color[3])


class Graphics:
    """An RGBA canvas that drawables paint themselves on.

    Rotations are in radians and follow the same convention as
    :func:`canadianexp.geometry.rotate_point`.
    """

    def __init__(self, size: tuple[int, int], background: Sequence[int] = WHITE) -> None:
        width, height = size
        self.image = Image.new("RGBA", (width, height), _rgba(background))
        self._draw = ImageDraw.Draw(self.image)

    @property
    def size(self) -> tuple[int, int]:
        """Canvas size as (width, height)."""
        return self.image.size

    def draw_image(
        self,
        image: Image.Image,
        position: Point,
        rotation: float = 0.0,
        center: Point = Point(0, 0),
    ) -> None:
        """Draw ``image`` with its ``center`` pixel at ``position``, rotated."""
        cs = math.cos(rotation)
        sn = math.sin(rotation)
        px, py = position.x, position.y
        cx, cy = center.x, center.y
        # Maps canvas coordinates back to source image coordinates.
        coefficients = (
            cs,
            -sn,
            cx - cs * px + sn * py,
            sn,
            cs,
            cy - sn * px - cs * py,
        )
        layer = image.convert("RGBA").transform(
            self.image.size,
            Image.Transform.AFFINE,
            coefficients,
            resample=Image.Resampling.BILINEAR,
        )
        self.image.alpha_composite(layer)

    def fill_polygon(self, points: Iterable[Point], color: Sequence[int] = BLACK) -> None:
        """Fill the closed polygon through ``points``."""
        vertices = [(p.x, p.y) for p in points]
        if len(vertices) < 2:
            return
        self._draw.polygon(vertices, fill=_rgba(color))

    def draw_ellipse(
        self,
        center: Point,
        width: float,
        height: float,
        rotation: float = 0.0,
        color: Sequence[int] = BLACK,
    ) -> None:
        """Fill an ellipse of the given size centred on ``center``, rotated."""
        cs = math.cos(rotation)
        sn = math.sin(rotation)
        vertices = []
        for step in range(_ELLIPSE_SEGMENTS):
            t = 2 * math.pi * step / _ELLIPSE_SEGMENTS
            x = width / 2 * math.cos(t)
            y = height / 2 * math.sin(t)
            vertices.append((center.x + cs * x + sn * y, center.y - sn * x + cs * y))
        self._draw.polygon(vertices, fill=_rgba(color))

    def stroke_line(
        self,
        start: Point,
        end: Point,
        color: Sequence[int] = BLACK,
        width: int = 1,
    ) -> None:
        """Draw a straight line from ``start`` to ``end``."""
        self._draw.line([(start.x, start.y), (end.x, end.y)], fill=_rgba(color), width=width)

    def draw_rectangle(
        self,
        left: int,
        top: int,
        width: int,
        height: int,
        color: Sequence[int] = BLACK,
    ) -> None:
        """Outline a rectangle."""
        self._draw.rectangle(
            [left, top, left + width, top + height], outline=_rgba(color)
        )

    def draw_text(self, text: str, position: Point, color: Sequence[int] = BLACK) -> None:
        """Draw ``text`` with its top-left corner at ``position``."""
        self._draw.text((position.x, position.y), text, fill=_rgba(color))
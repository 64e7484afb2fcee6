"""Integer points in picture coordinates and the rotation used by drawables."""

from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class Point:
    """An integer point (or offset) in picture coordinates, y pointing down."""

    x: int = 0
    y: int = 0

    def __add__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        if not isinstance(other, Point):
            return NotImplemented
        return Point(self.x - other.x, self.y - other.y)


def rotate_point(point: Point, angle: float) -> Point:
    """Rotate ``point`` by ``angle`` radians, truncating the result to integers."""
    cos_a = math.cos(angle)
    sin_a = math.sin(angle)
    return Point(
        int(cos_a * point.x + sin_a * point.y),
        int(-sin_a * point.x + cos_a * point.y),
    )
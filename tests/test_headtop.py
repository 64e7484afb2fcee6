import math

import pytest
from PIL import Image

from canadianexp.geometry import Point
from canadianexp.graphics import Graphics
from canadianexp.headtop import EYES, EYEBROWS, HeadTop
from canadianexp.imagedrawable import ImageDrawable

RED = (200, 30, 30, 255)
BLACK = (0, 0, 0, 255)


@pytest.fixture
def head_file(tmp_path):
    path = tmp_path / "head.png"
    Image.new("RGBA", (120, 160), RED).save(path)
    return path


@pytest.fixture
def head(head_file):
    headt = HeadTop("Head Top", head_file)
    headt.center = Point(55, 109)
    headt.position = Point(200, 200)
    headt.place(Point(0, 0), 0)
    return headt


def test_name_and_movable(head_file):
    headt = HeadTop("Head Top", head_file)
    assert headt.name == "Head Top"
    assert headt.is_movable() is True
    assert ImageDrawable("Plain", head_file).is_movable() is False


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        HeadTop("Head Top", tmp_path / "missing.png")


def test_center_maps_to_placed_position(head):
    assert head.placed_position == Point(200, 200)
    assert head.transform_point(head.center) == head.placed_position


def test_unrotated_transform_is_translation(head):
    for p in (Point(40, 80), Point(0, 0), Point(77, 60)):
        assert head.transform_point(p) - head.transform_point(head.center) == p - head.center


def test_rotated_transform_keeps_center_fixed_and_distances(head):
    head.rotation = math.pi / 3
    head.place(Point(0, 0), 0)
    assert head.transform_point(head.center) == head.placed_position
    p = Point(40, 80)
    moved = head.transform_point(p) - head.placed_position
    rel = p - head.center
    assert math.hypot(moved.x, moved.y) == pytest.approx(math.hypot(rel.x, rel.y), abs=2)


def test_draw_paints_eyes_black(head):
    graphics = Graphics((400, 400))
    head.draw(graphics)
    for eye in EYES:
        spot = head.transform_point(eye)
        assert graphics.image.getpixel((spot.x, spot.y)) == BLACK
    corner = head.transform_point(Point(10, 10))
    assert graphics.image.getpixel((corner.x, corner.y)) == RED


def test_draw_paints_eyebrows(head):
    graphics = Graphics((400, 400))
    head.draw(graphics)
    for start, end in EYEBROWS:
        a = head.transform_point(start)
        b = head.transform_point(end)
        box = (
            min(a.x, b.x) - 1,
            min(a.y, b.y) - 1,
            max(a.x, b.x) + 2,
            max(a.y, b.y) + 2,
        )
        colors = {color for _, color in graphics.image.crop(box).getcolors()}
        assert BLACK in colors


def test_plain_image_has_no_eyes(head_file):
    plain = ImageDrawable("Plain", head_file)
    plain.center = Point(55, 109)
    plain.position = Point(200, 200)
    plain.place(Point(0, 0), 0)
    graphics = Graphics((400, 400))
    plain.draw(graphics)
    x = 200 + EYES[0].x - 55
    y = 200 + EYES[0].y - 109
    assert graphics.image.getpixel((x, y)) == RED
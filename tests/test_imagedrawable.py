import math

import pytest
from PIL import Image

from canadianexp.geometry import Point
from canadianexp.graphics import Graphics
from canadianexp.imagedrawable import ImageDrawable

RED = (255, 0, 0, 255)


@pytest.fixture
def shirt_path(tmp_path):
    image = Image.new("RGBA", (10, 10), (0, 0, 0, 0))
    for x in range(5):
        for y in range(10):
            image.putpixel((x, y), RED)
    path = tmp_path / "harold_shirt.png"
    image.save(path)
    return path


def test_center(shirt_path):
    drawable = ImageDrawable("Shirt", shirt_path)
    assert drawable.name == "Shirt"
    assert drawable.center.x == 0
    assert drawable.center.y == 0

    drawable.center = Point(234, 569)
    assert drawable.center.x == 234
    assert drawable.center.y == 569


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        ImageDrawable("Shirt", tmp_path / "missing.png")


def test_image_loaded(shirt_path):
    drawable = ImageDrawable("Shirt", shirt_path)
    assert drawable.image.size == (10, 10)
    assert drawable.image.getpixel((1, 1)) == RED


def test_hit_test_unplaced(shirt_path):
    drawable = ImageDrawable("Shirt", shirt_path)
    assert drawable.hit_test(Point(2, 2)) is True
    assert drawable.hit_test(Point(7, 2)) is False
    assert drawable.hit_test(Point(-1, 0)) is False
    assert drawable.hit_test(Point(10, 0)) is False


def test_hit_test_with_center_and_placement(shirt_path):
    drawable = ImageDrawable("Shirt", shirt_path)
    drawable.center = Point(5, 5)
    drawable.place(Point(100, 100), 0)
    assert drawable.hit_test(Point(97, 100)) is True
    assert drawable.hit_test(Point(102, 100)) is False


def test_hit_test_rotated(shirt_path):
    drawable = ImageDrawable("Shirt", shirt_path)
    drawable.center = Point(5, 5)
    drawable.place(Point(100, 100), math.pi)
    assert drawable.hit_test(Point(103, 100)) is True
    assert drawable.hit_test(Point(97, 100)) is False


def test_not_movable(shirt_path):
    assert ImageDrawable("Shirt", shirt_path).is_movable() is False


def test_draw(shirt_path):
    drawable = ImageDrawable("Shirt", shirt_path)
    drawable.position = Point(5, 5)
    drawable.place(Point(0, 0), 0)
    g = Graphics((20, 20))
    drawable.draw(g)
    assert g.image.getpixel((6, 6))[:3] == (255, 0, 0)
    assert g.image.getpixel((13, 6))[:3] == (255, 255, 255)
    assert g.image.getpixel((2, 2))[:3] == (255, 255, 255)
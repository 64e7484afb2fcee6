import pytest
from PIL import Image

from canadianexp.geometry import Point
from canadianexp.graphics import Graphics
from canadianexp.picturefactory import HAROLD_START, JIM_START, create_picture

CHARACTER_IMAGES = (
    "harold_shirt.png",
    "harold_vest.png",
    "harold_lleg.png",
    "harold_rleg.png",
    "harold_headb.png",
    "harold_headt_blank.png",
    "jim_shirt.png",
    "jim_lleg.png",
    "jim_rleg.png",
    "jim_headb.png",
    "jim_headt.png",
)

GREEN = (10, 120, 10)


@pytest.fixture
def images_dir(tmp_path):
    for name in CHARACTER_IMAGES:
        Image.new("RGBA", (120, 160), (90, 90, 200, 255)).save(tmp_path / name)
    Image.new("RGB", (200, 100), GREEN).save(tmp_path / "Background.jpg")
    return tmp_path


@pytest.fixture
def picture(images_dir):
    return create_picture(images_dir)


def test_actor_order(picture):
    assert [a.name for a in picture] == ["Background", "Harold", "Harold"]


def test_actor_positions(picture):
    background, harold, jim = list(picture)
    assert background.position == Point(0, 0)
    assert harold.position == HAROLD_START == Point(300, 500)
    assert jim.position == JIM_START == Point(500, 500)


def test_actors_belong_to_picture(picture):
    assert all(actor.picture is picture for actor in picture)


def test_background_setup(picture):
    background = next(iter(picture))
    assert background.clickable is False
    assert [d.name for d in background.drawables] == ["Background"]
    assert background.root is background.drawables[0]


def test_background_is_not_hit(picture):
    picture.draw(Graphics(picture.size))
    background = next(iter(picture))
    assert background.hit_test(Point(5, 5)) is None


def test_draw_shows_background(picture):
    graphics = Graphics(picture.size)
    picture.draw(graphics)
    r, g, b, a = graphics.image.getpixel((5, 5))
    assert a == 255
    assert g > r and g > b


def test_characters_drawn_at_their_positions(picture):
    picture.draw(Graphics(picture.size))
    _, harold, jim = list(picture)
    assert harold.root.placed_position == harold.position + harold.root.position
    assert jim.root.placed_position == jim.position + jim.root.position


def test_missing_background_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        create_picture(tmp_path)
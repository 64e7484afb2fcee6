from canadianexp.actor import Actor
from canadianexp.drawable import Drawable
from canadianexp.picture import Picture


class RecordingDrawable(Drawable):
    def __init__(self, name, log):
        super().__init__(name)
        self.log = log

    def draw(self, graphics):
        self.log.append(self.name)

    def hit_test(self, pos):
        return False


def test_size():
    picture = Picture()
    width, height = picture.size
    assert width == 1500
    assert height == 800

    picture.size = (123, 456)
    width, height = picture.size
    assert width == 123
    assert height == 456


def test_iterator_empty():
    picture = Picture()
    assert list(picture) == []
    assert len(picture) == 0


def test_iterator():
    picture = Picture()
    actor1 = Actor("Bob")
    actor2 = Actor("Ted")
    actor3 = Actor("Carol")
    actor4 = Actor("Alice")

    assert actor1.picture is None

    for actor in (actor1, actor2, actor3, actor4):
        picture.add_actor(actor)

    assert actor1.picture is picture
    assert actor2.picture is picture
    assert actor3.picture is picture
    assert actor4.picture is picture

    it = iter(picture)
    assert next(it) is actor1
    assert next(it) is actor2
    assert next(it) is actor3
    assert next(it) is actor4
    assert next(it, None) is None


def test_draw_draws_actors_in_order():
    log = []
    picture = Picture()
    for name in ("Background", "Harold"):
        actor = Actor(name)
        actor.add_drawable(RecordingDrawable(name, log))
        picture.add_actor(actor)
    picture.draw(None)
    assert log == ["Background", "Harold"]


def test_remove_unknown_observer_is_ignored():
    class Counter:
        def __init__(self):
            self.count = 0

        def update_observer(self):
            self.count += 1

    picture = Picture()
    counter = Counter()
    picture.add_observer(counter)
    picture.remove_observer(Counter())
    picture.update_observers()
    assert counter.count == 1
# canadianexp

A small picture editor in which cartoon actors are posed on a background.
Each actor is a tree of drawable parts (images and filled polygons) that
can be dragged and rotated with the mouse. Moving a parent part carries its
children with it, and rotations combine down the tree.

The bundled scene has a background and two characters, Harold and Jim,
built from image files in an images directory.

## Installing

```
pip install .
```

Pillow is the only dependency. The window uses tkinter, which must be
available in your Python installation.

## Running the editor

```
canadian-experience
canadian-experience --images path/to/images
```

`--images` names the directory holding the picture's images; it defaults to
`images` in the current directory. If the directory does not exist the
command prints an error and exits with status 1. The directory must contain
`Background.jpg`, the Harold images (`harold_shirt.png`, `harold_vest.png`,
`harold_lleg.png`, `harold_rleg.png`, `harold_headb.png`,
`harold_headt_blank.png`) and the Jim images (`jim_shirt.png`,
`jim_lleg.png`, `jim_rleg.png`, `jim_headb.png`, `jim_headt.png`).

The main window has a scrollable edit view above a timeline strip, and a
menu bar with **File > Exit**, **Edit > Move / Rotate** and
**Help > About...**. In the edit view:

- **Move mode**: dragging a part that can move on its own (a head top)
  moves just that part; dragging any other part moves the whole actor.
- **Rotate mode**: dragging up or down rotates the part under the mouse,
  0.02 radians per pixel of vertical motion.

The background cannot be clicked. Image parts are hit only on pixels that
are not transparent.

## Using the library

The model can be built and edited without the window:

```python
from canadianexp.picturefactory import create_picture
from canadianexp.editing import EditController, Mode
from canadianexp.geometry import Point

picture = create_picture("path/to/images")

for actor in picture:
    print(actor.name)

controller = EditController(picture)
controller.render()            # places every part; returns a PIL image
controller.on_left_down(Point(300, 400))
controller.on_mouse_move(Point(320, 400), True)
controller.on_left_up(Point(320, 400))

controller.mode = Mode.ROTATE
image = controller.render()
image.save("picture.png")
```

Parts are positioned when the picture is drawn, so render once before
hit testing; polygon parts are hit-tested against the shape as last drawn.

Modules:

- `canadianexp.geometry`: `Point` and `rotate_point`.
- `canadianexp.graphics`: `Graphics`, an RGBA canvas on Pillow.
- `canadianexp.drawable`: `Drawable`, the abstract part with `place`,
  `add_child`, `move`, `draw`, `hit_test` and `is_movable`.
- `canadianexp.polydrawable`: `PolyDrawable`, a filled polygon.
- `canadianexp.imagedrawable`: `ImageDrawable`, an image rotated about its
  `center`.
- `canadianexp.headtop`: `HeadTop`, a movable head image with eyes and
  eyebrows drawn on it.
- `canadianexp.actor`: `Actor`, a group of parts with a `root` and a
  drawing order.
- `canadianexp.picture`: `Picture`, the actors plus their observers.
- `canadianexp.observer`: `PictureObserver`; subclass it, implement
  `update_observer`, and call `observe(picture)` (and `detach()` to stop).
- `canadianexp.harold`, `canadianexp.jim`, `canadianexp.picturefactory`:
  `create_harold`, `create_jim` and `create_picture` build the scene.
  The actor built by `create_jim` is named "Harold".
- `canadianexp.editing`: `Mode` and `EditController`.
- `canadianexp.timeline`: `Timeline`, which renders the timeline strip.
- `canadianexp.app`: `MainWindow`, `parse_args` and `main`.

## What it does not do

The timeline strip only shows a "Timeline!" caption and the current date
and time; there are no keyframes or animation playback. Pictures cannot be
saved or loaded, and the scene is always the one `create_picture` builds.
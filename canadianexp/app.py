"""The main window and the command that opens it."""

from __future__ import annotations

import argparse
import os
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

from .editing import EditController, Mode
from .geometry import Point
from .picturefactory import create_picture
from .timeline import HEIGHT as TIMELINE_HEIGHT
from .timeline import Timeline

if TYPE_CHECKING:
    import tkinter

TITLE = "Canadian Experience"
ABOUT_TITLE = "About the Canadian Experience"
ABOUT_TEXT = "Welcome to the Canadian Experience!"
DEFAULT_IMAGES_DIR = Path("images")
MIN_TIMELINE_WIDTH = 100


class MainWindow:
    """Top-level window: an editing area above a timeline, with a menu bar."""

    def __init__(self, root: tkinter.Tk, images_dir: str | os.PathLike[str]) -> None:
        import tkinter as tk

        self.root = root
        self.picture = create_picture(images_dir)
        width, height = self.picture.size
        root.title(TITLE)

        self._mode = tk.StringVar(root, value=Mode.MOVE.value)
        self._build_menu(tk)

        frame = tk.Frame(root)
        frame.pack(fill=tk.BOTH, expand=True)
        self.edit_canvas = tk.Canvas(
            frame,
            background="white",
            scrollregion=(0, 0, width, height),
            highlightthickness=0,
        )
        xscroll = tk.Scrollbar(frame, orient=tk.HORIZONTAL, command=self.edit_canvas.xview)
        yscroll = tk.Scrollbar(frame, orient=tk.VERTICAL, command=self.edit_canvas.yview)
        self.edit_canvas.configure(xscrollcommand=xscroll.set, yscrollcommand=yscroll.set)
        self.edit_canvas.grid(row=0, column=0, sticky="nsew")
        yscroll.grid(row=0, column=1, sticky="ns")
        xscroll.grid(row=1, column=0, sticky="ew")
        frame.rowconfigure(0, weight=1)
        frame.columnconfigure(0, weight=1)

        self.timeline_canvas = tk.Canvas(
            root,
            height=TIMELINE_HEIGHT,
            background="white",
            highlightthickness=1,
            highlightbackground="black",
        )
        self.timeline_canvas.pack(fill=tk.X)

        self._edit_item = self.edit_canvas.create_image(0, 0, anchor=tk.NW)
        self._timeline_item = self.timeline_canvas.create_image(0, 0, anchor=tk.NW)
        self._edit_photo = None
        self._timeline_photo = None

        self.controller = EditController(self.picture)
        self.controller.on_change = self._refresh_edit
        self.timeline = Timeline(max(width, MIN_TIMELINE_WIDTH))
        self.timeline.on_change = self._refresh_timeline
        self.timeline.observe(self.picture)

        canvas = self.edit_canvas
        canvas.bind("<ButtonPress-1>", lambda e: self.controller.on_left_down(self._scene_point(e)))
        canvas.bind("<B1-Motion>", lambda e: self.controller.on_mouse_move(self._scene_point(e), True))
        canvas.bind("<Motion>", lambda e: self.controller.on_mouse_move(self._scene_point(e), False))
        canvas.bind("<ButtonRelease-1>", lambda e: self.controller.on_left_up(self._scene_point(e)))
        self.timeline_canvas.bind("<Configure>", self._on_timeline_resize)
        root.protocol("WM_DELETE_WINDOW", self.on_exit)

        self._refresh_edit()
        self._refresh_timeline()

    def _build_menu(self, tk) -> None:
        menubar = tk.Menu(self.root)

        file_menu = tk.Menu(menubar, tearoff=False)
        file_menu.add_command(label="Exit", command=self.on_exit)
        menubar.add_cascade(label="File", menu=file_menu)

        edit_menu = tk.Menu(menubar, tearoff=False)
        for mode, label in ((Mode.MOVE, "Move"), (Mode.ROTATE, "Rotate")):
            edit_menu.add_radiobutton(
                label=label,
                variable=self._mode,
                value=mode.value,
                command=self._on_mode_change,
            )
        menubar.add_cascade(label="Edit", menu=edit_menu)

        help_menu = tk.Menu(menubar, tearoff=False)
        help_menu.add_command(label="About...", command=self.on_about)
        menubar.add_cascade(label="Help", menu=help_menu)

        self.root.config(menu=menubar)

    def _on_mode_change(self) -> None:
        self.controller.mode = Mode(self._mode.get())

    def _scene_point(self, event) -> Point:
        return Point(
            int(self.edit_canvas.canvasx(event.x)),
            int(self.edit_canvas.canvasy(event.y)),
        )

    def _on_timeline_resize(self, event) -> None:
        self.timeline.width = max(event.width, 1)
        self._refresh_timeline()

    def _refresh_edit(self) -> None:
        from PIL import ImageTk

        self._edit_photo = ImageTk.PhotoImage(self.controller.render())
        self.edit_canvas.itemconfigure(self._edit_item, image=self._edit_photo)

    def _refresh_timeline(self) -> None:
        from PIL import ImageTk

        self._timeline_photo = ImageTk.PhotoImage(self.timeline.render())
        self.timeline_canvas.itemconfigure(self._timeline_item, image=self._timeline_photo)

    def on_exit(self) -> None:
        """Stop observing the picture and close the window."""
        self.controller.detach()
        self.timeline.detach()
        self.root.destroy()

    def on_about(self) -> None:
        """Show the about box."""
        from tkinter import messagebox

        messagebox.showinfo(ABOUT_TITLE, ABOUT_TEXT, parent=self.root)


def parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    """Parse the command line."""
    parser = argparse.ArgumentParser(prog="canadianexp", description="Edit the Canadian Experience picture.")
    parser.add_argument(
        "--images",
        type=Path,
        default=DEFAULT_IMAGES_DIR,
        help="directory holding the picture's images (default: %(default)s)",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Open the main window and run until it is closed."""
    args = parse_args(argv)
    images = args.images
    if not images.is_dir():
        print(f"canadianexp: images directory not found: {images}", file=sys.stderr)
        return 1

    import tkinter as tk

    root = tk.Tk()
    MainWindow(root, images)
    root.mainloop()
    return 0


if __name__ == "__main__":
    sys.exit(main())
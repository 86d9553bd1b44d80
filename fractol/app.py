"""Interactive window that shows a fractal and the command that starts it."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from fractol.controls import Key, handle_key, handle_mouse
from fractol.fractal import Fractal, render, resolve_kind

TITLE = "Fract-ol"
USAGE = "Usage: fractol <mandelbrot|julia>"

_KEYSYMS = {
    "Escape": Key.ESCAPE,
    "Left": Key.LEFT,
    "Right": Key.RIGHT,
    "Up": Key.UP,
    "Down": Key.DOWN,
}


def _photo_rows(pixels: Sequence[int], width: int) -> str:
    """Format row-major colours as image data for a Tk photo image."""
    rows = (
        "{" + " ".join(f"#{p & 0xFFFFFF:06x}" for p in pixels[start:start + width]) + "}"
        for start in range(0, len(pixels), width)
    )
    return " ".join(rows)


class FractalWindow:
    """A Tk window that draws a fractal and reacts to keys and the mouse wheel."""

    def __init__(self, fractal: Fractal, title: str = TITLE) -> None:
        import tkinter

        self.fractal = fractal
        self.root = tkinter.Tk()
        self.root.title(title)
        self.root.resizable(False, False)
        self.canvas = tkinter.Canvas(
            self.root, width=fractal.width, height=fractal.height, highlightthickness=0
        )
        self.canvas.pack()
        self.image = tkinter.PhotoImage(width=fractal.width, height=fractal.height)
        self.canvas.create_image(0, 0, anchor="nw", image=self.image)
        self.root.bind("<Key>", self._on_key)
        self.root.bind("<Button>", self._on_button)
        self.root.bind("<MouseWheel>", self._on_wheel)
        self.root.protocol("WM_DELETE_WINDOW", self.close)

    def redraw(self) -> None:
        """Render the current view into the window."""
        pixels = render(self.fractal)
        self.image.put(_photo_rows(pixels, self.fractal.width), to=(0, 0))

    def run(self) -> None:
        """Draw the fractal and process events until the window closes."""
        self.redraw()
        self.root.mainloop()

    def close(self) -> None:
        self.root.destroy()

    def _on_key(self, event) -> None:
        code = _KEYSYMS.get(event.keysym, event.keycode)
        if handle_key(self.fractal, code):
            self.redraw()
        else:
            self.close()

    def _on_button(self, event) -> None:
        if handle_mouse(self.fractal, event.num, event.x, event.y):
            self.redraw()

    def _on_wheel(self, event) -> None:
        button = 4 if event.delta > 0 else 5
        if handle_mouse(self.fractal, button, event.x, event.y):
            self.redraw()


def main(argv: Sequence[str] | None = None) -> int:
    """Open a window showing the fractal named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(USAGE, file=sys.stderr)
        return 1
    name = args[0]
    try:
        resolve_kind(name)
    except ValueError as error:
        print(error, file=sys.stderr)
        return 1
    FractalWindow(Fractal(name=name)).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
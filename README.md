# fractol

A small interactive fractal viewer. It draws the Mandelbrot set or a Julia
set in a 600 × 600 Tk window. You pan with the arrow keys and zoom with the
mouse wheel.

## Requirements

Python 3.10 or newer, with Tk support (the standard library's `tkinter`).
There are no third-party dependencies.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```
fractol mandelbrot
fractol julia
```

Give exactly one fractal name. With none, or more than one, the command
prints `Usage: fractol <mandelbrot|julia>` to standard error and exits with
status 1. The name `mandelbrot` must match exactly. Any name that starts with
`julia` selects the Julia set. Any other name prints `Invalid fractal name`
to standard error and exits with status 1.

### Controls

| Input             | Action                                                   |
|-------------------|----------------------------------------------------------|
| Arrow keys        | Pan the view by 5 % of the width of its real axis        |
| Mouse wheel up    | Zoom in (×0.9), keeping the point under the pointer fixed |
| Mouse wheel down  | Zoom out (×1.1), keeping the point under the pointer fixed |
| Escape            | Close the window and quit                                |
| Window close box  | Quit                                                     |

The view is drawn again after every key press other than Escape, and after
every wheel event.

### Defaults

- The view spans −2 … 2 on both the real and the imaginary axis.
- Each point is iterated at most 100 times. Points that reach that limit are
  drawn in black. Other points are coloured by their iteration count times
  `0x001122` (Mandelbrot) or `0x330033` (Julia).
- The Julia set uses the constant c = −0.7 + 0.27015i.

## Library use

`fractol.fractal` does the computation and needs no display:

```python
from fractol.fractal import Fractal, mandelbrot_iterations, get_color, render

mandelbrot_iterations(0.0, 0.0, 100)   # -> 100: the origin never escapes
get_color(100, 100, 0)                 # -> 0 (black)

view = Fractal(name="julia", width=60, height=60)
pixels = render(view)                  # 3600 row-major colour values
```

- `fractol.fractal` holds the view state (`Fractal`, with
  `pixel_to_complex`), `FractalKind` and `resolve_kind`, the iteration
  counters (`mandelbrot_iterations`, `julia_iterations`), the renderers
  (`render`, `render_mandelbrot`, `render_julia`) and helpers that change a
  view: `zoom` re-centres it on a pixel, `set_random_julia` picks a random
  Julia constant, `change_iterations` adjusts the iteration limit (never
  below 10). `get_color` maps an iteration count to a 24-bit colour.
- `fractol.controls` applies key codes (`Key`, `handle_key`) and mouse wheel
  buttons (`handle_mouse`) to a view.
- `fractol.app` has the window (`FractalWindow`, with `redraw` and `run`)
  and `main`, the function behind the `fractol` command.
- `fractol.textops` and `fractol.chars` are small string and byte helpers
  that follow C library conventions (`atoi`, `itoa`, `split`, `strtrim`,
  `substr`, `strnstr`, `strncmp`, `strchr`, `strrchr`; `isalnum`, `isalpha`,
  `isascii`, `isdigit`, `isprint`, `tolower`, `toupper`, `memchr`, `memcmp`).

## What it does not do

The window only pans, zooms and quits. `zoom`, `set_random_julia`,
`change_iterations` and `get_color` are available to library code but are
not bound to any key. The viewer cannot save images, and the window cannot be
resized.
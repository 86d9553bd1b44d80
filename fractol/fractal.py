"""Fractal view state, escape-time iteration and view manipulation."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum
from typing import Callable

from fractol.textops import strncmp

WIDTH = 600
HEIGHT = 600

MANDELBROT_PALETTE = 0x001122
JULIA_PALETTE = 0x330033
MIN_ITERATIONS = 10


class FractalKind(Enum):
    """The fractals that can be drawn."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


def resolve_kind(name: str) -> FractalKind:
    """Map a command-line name to a fractal kind.

    "mandelbrot" must match exactly; any name starting with "julia" selects
    the Julia set. Anything else raises ValueError.
    """
    if strncmp(name, "mandelbrot", 11) == 0:
        return FractalKind.MANDELBROT
    if strncmp(name, "julia", 5) == 0:
        return FractalKind.JULIA
    raise ValueError("Invalid fractal name")


@dataclass
class Fractal:
    """The visible region of the complex plane and the drawing parameters."""

    name: str = FractalKind.MANDELBROT.value
    width: int = WIDTH
    height: int = HEIGHT
    min_re: float = -2.0
    max_re: float = 2.0
    min_im: float = -2.0
    max_im: float = 2.0
    max_iter: int = 100
    color_shift: int = 0
    c_re: float = -0.7
    c_im: float = 0.27015

    def pixel_to_complex(self, x: float, y: float) -> tuple[float, float]:
        """Return the point of the complex plane shown at pixel (x, y)."""
        re = self.min_re + x * (self.max_re - self.min_re) / self.width
        im = self.min_im + y * (self.max_im - self.min_im) / self.height
        return re, im


def _escape(zx: float, zy: float, c_re: float, c_im: float, max_iter: int) -> int:
    iteration = 0
    while zx * zx + zy * zy < 4 and iteration < max_iter:
        zx, zy = zx * zx - zy * zy + c_re, 2 * zx * zy + c_im
        iteration += 1
    return iteration


def mandelbrot_iterations(cx: float, cy: float, max_iter: int) -> int:
    """Count iterations of z = z*z + c from z = 0 before |z| reaches 2."""
    return _escape(0.0, 0.0, cx, cy, max_iter)


def julia_iterations(zx: float, zy: float, c_re: float, c_im: float, max_iter: int) -> int:
    """Count iterations of z = z*z + c from the given z before |z| reaches 2."""
    return _escape(zx, zy, c_re, c_im, max_iter)


def _render(fractal: Fractal, iterations: Callable[[float, float], int], palette: int) -> list[int]:
    def color(x: int, y: int) -> int:
        count = iterations(*fractal.pixel_to_complex(x, y))
        return 0x000000 if count == fractal.max_iter else count * palette

    return [color(x, y) for y in range(fractal.height) for x in range(fractal.width)]


def render_mandelbrot(fractal: Fractal) -> list[int]:
    """Return the Mandelbrot image as row-major pixel colours."""
    return _render(
        fractal,
        lambda re, im: mandelbrot_iterations(re, im, fractal.max_iter),
        MANDELBROT_PALETTE,
    )


def render_julia(fractal: Fractal) -> list[int]:
    """Return the Julia image for the fractal's constant as row-major pixel colours."""
    return _render(
        fractal,
        lambda re, im: julia_iterations(re, im, fractal.c_re, fractal.c_im, fractal.max_iter),
        JULIA_PALETTE,
    )


def render(fractal: Fractal) -> list[int]:
    """Render whichever fractal the view's name selects."""
    if resolve_kind(fractal.name) is FractalKind.MANDELBROT:
        return render_mandelbrot(fractal)
    return render_julia(fractal)


def get_color(iteration: int, max_iter: int, shift: int) -> int:
    """Map an iteration count to a 24-bit colour; points in the set are black."""
    if iteration == max_iter:
        return 0x000000
    return (iteration * 0xABCDEF >> shift) & 0xFFFFFF


def zoom(fractal: Fractal, zoom_factor: float, x: int, y: int) -> None:
    """Scale the view by ``zoom_factor`` and centre it on pixel (x, y)."""
    mouse_re = fractal.min_re + x / fractal.width * (fractal.max_re - fractal.min_re)
    mouse_im = fractal.min_im + y / fractal.height * (fractal.max_im - fractal.min_im)
    range_re = (fractal.max_re - fractal.min_re) * zoom_factor
    range_im = (fractal.max_im - fractal.min_im) * zoom_factor
    fractal.min_re = mouse_re - range_re / 2
    fractal.max_re = mouse_re + range_re / 2
    fractal.min_im = mouse_im - range_im / 2
    fractal.max_im = mouse_im + range_im / 2


def set_random_julia(fractal: Fractal, rng: random.Random | None = None) -> None:
    """Pick a Julia constant with both parts uniform in [-1, 1]."""
    source = rng if rng is not None else random.Random()
    fractal.c_re = source.random() * 2.0 - 1.0
    fractal.c_im = source.random() * 2.0 - 1.0


def change_iterations(fractal: Fractal, change: int) -> None:
    """Adjust the iteration limit, never letting it drop below 10."""
    fractal.max_iter = max(fractal.max_iter + change, MIN_ITERATIONS)
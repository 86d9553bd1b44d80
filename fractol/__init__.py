"""Interactive Mandelbrot and Julia set viewer, with its fractal computation and string helpers."""

__version__ = "1.0.0"
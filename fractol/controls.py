"""Keyboard panning and mouse-wheel zooming of a fractal view."""

from __future__ import annotations

from enum import IntEnum

from fractol.fractal import Fractal

PAN_FRACTION = 0.05
ZOOM_IN_FACTOR = 0.9
ZOOM_OUT_FACTOR = 1.1


class Key(IntEnum):
    """Key codes the view responds to."""

    ESCAPE_MAC = 53
    ESCAPE = 65307
    LEFT = 123
    RIGHT = 124
    DOWN = 125
    UP = 126


class Button(IntEnum):
    """Mouse buttons that zoom the view."""

    WHEEL_UP = 4
    WHEEL_DOWN = 5


def handle_key(fractal: Fractal, keycode: int) -> bool:
    """Apply a key press to the view.

    Arrow keys pan by 5% of the real-axis width. Returns False when the key
    asks to quit, True when the view should be redrawn.
    """
    if keycode in (Key.ESCAPE, Key.ESCAPE_MAC):
        return False
    shift = (fractal.max_re - fractal.min_re) * PAN_FRACTION
    if keycode == Key.LEFT:
        fractal.min_re -= shift
        fractal.max_re -= shift
    elif keycode == Key.RIGHT:
        fractal.min_re += shift
        fractal.max_re += shift
    elif keycode == Key.UP:
        fractal.min_im += shift
        fractal.max_im += shift
    elif keycode == Key.DOWN:
        fractal.min_im -= shift
        fractal.max_im -= shift
    return True


def handle_mouse(fractal: Fractal, button: int, x: int, y: int) -> bool:
    """Zoom about pixel (x, y) on a wheel event, keeping that point fixed.

    Returns True when the view changed and should be redrawn.
    """
    if button not in (Button.WHEEL_UP, Button.WHEEL_DOWN):
        return False
    factor = ZOOM_IN_FACTOR if button == Button.WHEEL_UP else ZOOM_OUT_FACTOR
    mouse_re, mouse_im = fractal.pixel_to_complex(x, y)
    new_width = (fractal.max_re - fractal.min_re) * factor
    new_height = (fractal.max_im - fractal.min_im) * factor
    fractal.min_re = mouse_re - (mouse_re - fractal.min_re) * factor
    fractal.max_re = fractal.min_re + new_width
    fractal.min_im = mouse_im - (mouse_im - fractal.min_im) * factor
    fractal.max_im = fractal.min_im + new_height
    return True
import pytest

from fractol.controls import Key, handle_key, handle_mouse
from fractol.fractal import Fractal


def view(f):
    return (f.min_re, f.max_re, f.min_im, f.max_im)


@pytest.mark.parametrize("code", [53, 65307])
def test_escape_requests_quit(code):
    f = Fractal()
    before = view(f)
    assert handle_key(f, code) is False
    assert view(f) == before


def test_right_pans_real_axis_by_five_percent():
    f = Fractal()
    width = f.max_re - f.min_re
    assert handle_key(f, Key.RIGHT) is True
    assert f.min_re == pytest.approx(-2.0 + 0.05 * width)
    assert f.max_re - f.min_re == pytest.approx(width)
    assert (f.min_im, f.max_im) == (-2.0, 2.0)


def test_left_undoes_right():
    f = Fractal()
    before = view(f)
    handle_key(f, Key.RIGHT)
    handle_key(f, Key.LEFT)
    assert view(f) == pytest.approx(before)


def test_up_and_down_move_imaginary_axis():
    f = Fractal()
    handle_key(f, Key.UP)
    assert f.min_im > -2.0
    assert (f.min_re, f.max_re) == (-2.0, 2.0)
    handle_key(f, Key.DOWN)
    assert (f.min_im, f.max_im) == pytest.approx((-2.0, 2.0))


def test_unknown_key_redraws_without_moving():
    f = Fractal()
    before = view(f)
    assert handle_key(f, 97) is True
    assert view(f) == before


@pytest.mark.parametrize("button, factor", [(4, 0.9), (5, 1.1)])
def test_wheel_scales_view(button, factor):
    f = Fractal()
    assert handle_mouse(f, button, 300, 300) is True
    assert f.max_re - f.min_re == pytest.approx(4.0 * factor)
    assert f.max_im - f.min_im == pytest.approx(4.0 * factor)


@pytest.mark.parametrize("button", [4, 5])
@pytest.mark.parametrize("x, y", [(0, 0), (150, 420), (599, 10)])
def test_wheel_keeps_point_under_cursor(button, x, y):
    f = Fractal()
    before = f.pixel_to_complex(x, y)
    handle_mouse(f, button, x, y)
    assert f.pixel_to_complex(x, y) == pytest.approx(before)


@pytest.mark.parametrize("button", [1, 2, 3])
def test_other_buttons_ignored(button):
    f = Fractal()
    before = view(f)
    assert handle_mouse(f, button, 10, 10) is False
    assert view(f) == before
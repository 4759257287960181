import random

import pytest

from fractview.controls import (
    COLOR_STEP,
    ZOOM_FACTOR,
    Key,
    MouseButton,
    change_iterations,
    handle_key,
    handle_mouse,
    random_c,
    zoom,
)
from fractview.state import (
    ITERATION_STEP,
    MAX_ITERATIONS,
    MAX_ZOOM,
    MIN_ITERATIONS,
    MIN_ZOOM,
    Fractal,
    FractalKind,
)


def _fractal(kind=FractalKind.MANDELBROT):
    return Fractal(kind)


def _point_under(fractal, x, y):
    return (x / fractal.zoom + fractal.offset_x, y / fractal.zoom + fractal.offset_y)


@pytest.mark.parametrize("direction", [1, -1])
def test_zoom_keeps_point_under_cursor(direction):
    fractal = _fractal()
    before = _point_under(fractal, 350, 200)
    assert zoom(fractal, 350, 200, direction) is True
    after = _point_under(fractal, 350, 200)
    assert after[0] == pytest.approx(before[0])
    assert after[1] == pytest.approx(before[1])


def test_zoom_in_and_out_scale_by_factor():
    fractal = _fractal()
    old = fractal.zoom
    zoom(fractal, 0, 0, 1)
    assert fractal.zoom / old == pytest.approx(ZOOM_FACTOR)
    zoom(fractal, 0, 0, -1)
    assert fractal.zoom == pytest.approx(old)


def test_zoom_limits():
    fractal = _fractal()
    fractal.zoom = MAX_ZOOM
    assert zoom(fractal, 10, 10, 1) is False
    assert fractal.zoom == MAX_ZOOM
    fractal.zoom = MIN_ZOOM
    assert zoom(fractal, 10, 10, -1) is False
    assert fractal.zoom == MIN_ZOOM


def test_zoom_ignores_other_directions():
    fractal = _fractal()
    assert zoom(fractal, 10, 10, 0) is False
    assert fractal == _fractal()


def test_change_iterations_steps_and_bounds():
    fractal = _fractal()
    start = fractal.max_iterations
    change_iterations(fractal, Key.P)
    assert fractal.max_iterations == start + ITERATION_STEP
    change_iterations(fractal, Key.M)
    assert fractal.max_iterations == start
    fractal.max_iterations = MIN_ITERATIONS
    change_iterations(fractal, Key.M)
    assert fractal.max_iterations == MIN_ITERATIONS
    fractal.max_iterations = MAX_ITERATIONS
    change_iterations(fractal, Key.P)
    assert fractal.max_iterations == MAX_ITERATIONS


def test_random_c_range_and_determinism():
    values = [random_c(random.Random(7)) for _ in range(3)]
    assert values[0] == values[1] == values[2]
    rng = random.Random(1)
    assert all(-1.5 <= random_c(rng) <= 1.5 for _ in range(200))


def test_escape_asks_to_quit():
    fractal = _fractal()
    assert handle_key(fractal, Key.ESC) is False
    assert handle_key(fractal, Key.LEFT) is True


def test_arrow_keys_move_and_return():
    fractal = _fractal()
    x, y = fractal.offset_x, fractal.offset_y
    handle_key(fractal, Key.LEFT)
    assert fractal.offset_x < x
    handle_key(fractal, Key.RIGHT)
    assert fractal.offset_x == pytest.approx(x)
    handle_key(fractal, Key.UP)
    assert fractal.offset_y < y
    handle_key(fractal, Key.DOWN)
    assert fractal.offset_y == pytest.approx(y)


def test_color_key_adds_step():
    fractal = _fractal()
    start = fractal.color
    handle_key(fractal, Key.C)
    handle_key(fractal, Key.C)
    assert fractal.color == start + 2 * COLOR_STEP


def test_julia_key_picks_random_constant():
    fractal = _fractal(FractalKind.JULIA)
    handle_key(fractal, Key.J, random.Random(3))
    reference = random.Random(3)
    assert fractal.cx == random_c(reference)
    assert fractal.cy == random_c(reference)


def test_reset_key_restores_view():
    fractal = _fractal()
    handle_key(fractal, Key.LEFT)
    handle_key(fractal, Key.P)
    handle_key(fractal, Key.R)
    assert fractal == _fractal()


@pytest.mark.parametrize("key", [Key.H, 0, 12345])
def test_unhandled_keys_change_nothing(key):
    fractal = _fractal()
    assert handle_key(fractal, key) is True
    assert fractal == _fractal()


def test_mouse_wheel_zooms():
    fractal = _fractal()
    start = fractal.zoom
    handle_mouse(fractal, MouseButton.SCROLL_UP, 100, 100)
    assert fractal.zoom > start
    handle_mouse(fractal, MouseButton.SCROLL_DOWN, 100, 100)
    handle_mouse(fractal, MouseButton.SCROLL_DOWN, 100, 100)
    assert fractal.zoom < start


def test_other_mouse_buttons_change_nothing():
    fractal = _fractal()
    handle_mouse(fractal, 1, 100, 100)
    assert fractal == _fractal()
"""Responses to key presses and mouse wheel events."""

from __future__ import annotations

import random
from enum import IntEnum
from typing import Optional

from fractview.state import (
    ITERATION_STEP,
    MAX_ITERATIONS,
    MAX_ZOOM,
    MIN_ITERATIONS,
    MIN_ZOOM,
    MOVE_STEP,
    Fractal,
)

ZOOM_FACTOR = 1.42
COLOR_STEP = (255 * 255 * 255) // 100


class Key(IntEnum):
    """X11 key codes the viewer reacts to."""

    ESC = 65307
    UP = 65362
    DOWN = 65364
    LEFT = 65361
    RIGHT = 65363
    R = 114
    C = 99
    H = 104
    J = 106
    P = 112
    M = 109


class MouseButton(IntEnum):
    """X11 mouse button numbers of the scroll wheel."""

    SCROLL_UP = 4
    SCROLL_DOWN = 5


def zoom(fractal: Fractal, x: int, y: int, direction: int) -> bool:
    """Zoom in (direction 1) or out (-1) keeping the point under pixel
    (x, y) fixed. Returns False when the zoom limit stops the change."""
    if direction == 1:
        new_zoom = fractal.zoom * ZOOM_FACTOR
        if new_zoom > MAX_ZOOM:
            return False
    elif direction == -1:
        new_zoom = fractal.zoom / ZOOM_FACTOR
        if new_zoom < MIN_ZOOM:
            return False
    else:
        return False
    fractal.offset_x = (x / fractal.zoom + fractal.offset_x) - (x / new_zoom)
    fractal.offset_y = (y / fractal.zoom + fractal.offset_y) - (y / new_zoom)
    fractal.zoom = new_zoom
    return True


def change_iterations(fractal: Fractal, key: int) -> None:
    """Lower (M) or raise (P) the iteration limit by one step within bounds."""
    if key == Key.M:
        if fractal.max_iterations > MIN_ITERATIONS:
            fractal.max_iterations -= ITERATION_STEP
    elif key == Key.P:
        if fractal.max_iterations < MAX_ITERATIONS:
            fractal.max_iterations += ITERATION_STEP


def random_c(rng: Optional[random.Random] = None) -> float:
    """A random constant component in the range [-1.5, 1.5]."""
    source = rng if rng is not None else random
    return source.random() * 3.0 - 1.5


def handle_key(fractal: Fractal, key: int, rng: Optional[random.Random] = None) -> bool:
    """Apply a key press to ``fractal``. Returns False when the key asks to quit."""
    if key == Key.ESC:
        return False
    step = MOVE_STEP / fractal.zoom
    if key == Key.LEFT:
        fractal.offset_x -= step
    elif key == Key.RIGHT:
        fractal.offset_x += step
    elif key == Key.UP:
        fractal.offset_y -= step
    elif key == Key.DOWN:
        fractal.offset_y += step
    elif key == Key.R:
        fractal.reset()
    elif key == Key.C:
        fractal.color += COLOR_STEP
    elif key == Key.J:
        fractal.cx = random_c(rng)
        fractal.cy = random_c(rng)
    elif key in (Key.M, Key.P):
        change_iterations(fractal, key)
    return True


def handle_mouse(fractal: Fractal, button: int, x: int, y: int) -> None:
    """Zoom around pixel (x, y) for a scroll wheel button."""
    if button == MouseButton.SCROLL_UP:
        zoom(fractal, x, y, 1)
    elif button == MouseButton.SCROLL_DOWN:
        zoom(fractal, x, y, -1)
"""Command line entry point and the interactive window."""

from __future__ import annotations

import random
import sys
from collections.abc import Sequence
from typing import Optional

import numpy as np

from fractview.controls import Key, handle_key, handle_mouse
from fractview.numbers import is_valid_decimal, parse_decimal
from fractview.render import render
from fractview.state import DEFAULT_JULIA_C, SIZE, Fractal, parse_kind

_AVAILABLE = "Available fractals: mandelbrot, julia"
_USAGE = f"Usage: fractview <fractal> [cx cy]\n{_AVAILABLE}"


def parse_args(argv: Sequence[str]) -> Fractal:
    """Build the initial state from the arguments after the program name.

    Raises ValueError with a message for the user on bad arguments.
    """
    args = list(argv)
    if len(args) not in (1, 3):
        raise ValueError(_USAGE)
    if len(args) == 3 and not (is_valid_decimal(args[1]) and is_valid_decimal(args[2])):
        raise ValueError("Error: cx and cy must be valid decimal numbers")
    try:
        kind = parse_kind(args[0])
    except ValueError:
        raise ValueError(f"Error: Invalid fractal name\n{_AVAILABLE}") from None
    if len(args) == 3:
        cx, cy = parse_decimal(args[1]), parse_decimal(args[2])
    else:
        cx, cy = DEFAULT_JULIA_C
    return Fractal(kind, cx=cx, cy=cy)


def _to_rgb(pixels: np.ndarray) -> np.ndarray:
    """Turn a [y, x] array of packed colours into an [x, y, 3] RGB array."""
    rgb = np.stack(
        [(pixels >> 16) & 0xFF, (pixels >> 8) & 0xFF, pixels & 0xFF], axis=-1
    ).astype(np.uint8)
    return rgb.transpose(1, 0, 2)


def _run(fractal: Fractal) -> None:
    import pygame

    pygame.init()
    try:
        screen = pygame.display.set_mode((SIZE, SIZE))
        pygame.display.set_caption("Fract-ol")
        keys = {
            pygame.K_ESCAPE: Key.ESC,
            pygame.K_UP: Key.UP,
            pygame.K_DOWN: Key.DOWN,
            pygame.K_LEFT: Key.LEFT,
            pygame.K_RIGHT: Key.RIGHT,
            pygame.K_r: Key.R,
            pygame.K_c: Key.C,
            pygame.K_h: Key.H,
            pygame.K_j: Key.J,
            pygame.K_p: Key.P,
            pygame.K_m: Key.M,
        }
        rng = random.Random()

        def draw() -> None:
            surface = pygame.surfarray.make_surface(_to_rgb(render(fractal, SIZE)))
            screen.blit(surface, (0, 0))
            pygame.display.flip()

        draw()
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                break
            if event.type == pygame.KEYDOWN:
                key = keys.get(event.key)
                if key is not None and not handle_key(fractal, key, rng):
                    break
                draw()
            elif event.type == pygame.MOUSEBUTTONDOWN:
                x, y = event.pos
                handle_mouse(fractal, event.button, x, y)
                draw()
    finally:
        pygame.quit()


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the viewer; returns the process exit status."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        fractal = parse_args(args)
    except ValueError as exc:
        print(exc)
        return 1
    _run(fractal)
    return 0
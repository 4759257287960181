"""Viewer state: which fractal is shown and how the view is placed."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

SIZE = 700
MOVE_STEP = 0.5
INITIAL_ITERATIONS = 42
ITERATION_STEP = 42
MIN_ITERATIONS = 42
MAX_ITERATIONS = 4200
INITIAL_ZOOM = 250.0
MIN_ZOOM = 0.1
MAX_ZOOM = 1e10
ESCAPE_RADIUS_SQ = 4.0
BLACK = 0x000000
INITIAL_COLOR = 0xFCBE11
INITIAL_OFFSET_X = -1.85
INITIAL_OFFSET_Y = -1.35
DEFAULT_JULIA_C = (-0.745429, 0.05)


class FractalKind(Enum):
    """The fractals the viewer can draw."""

    MANDELBROT = "mandelbrot"
    JULIA = "julia"


def parse_kind(name: str) -> FractalKind:
    """The fractal kind with exactly this name; ValueError for any other."""
    try:
        return FractalKind(name)
    except ValueError:
        available = ", ".join(kind.value for kind in FractalKind)
        raise ValueError(
            f"invalid fractal name {name!r}; available fractals: {available}"
        ) from None


@dataclass
class Fractal:
    """The parameters that determine one rendered frame.

    ``zoom`` is the number of pixels per unit of the complex plane and
    ``offset_x``/``offset_y`` the complex coordinates of the top-left pixel.
    """

    kind: FractalKind
    cx: float = 0.0
    cy: float = 0.0
    color: int = INITIAL_COLOR
    zoom: float = INITIAL_ZOOM
    offset_x: float = INITIAL_OFFSET_X
    offset_y: float = INITIAL_OFFSET_Y
    max_iterations: int = INITIAL_ITERATIONS

    def reset(self) -> None:
        """Restore the initial view; a Julia set keeps its constant."""
        if self.kind is not FractalKind.JULIA:
            self.cx = 0.0
            self.cy = 0.0
        self.color = INITIAL_COLOR
        self.zoom = INITIAL_ZOOM
        self.offset_x = INITIAL_OFFSET_X
        self.offset_y = INITIAL_OFFSET_Y
        self.max_iterations = INITIAL_ITERATIONS
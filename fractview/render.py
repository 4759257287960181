"""Escape-time iteration and rendering of a whole frame."""

from __future__ import annotations

import numpy as np

from fractview.state import BLACK, ESCAPE_RADIUS_SQ, SIZE, Fractal, FractalKind

_MASK32 = 0xFFFFFFFF


def _iterate(zx: float, zy: float, cx: float, cy: float, max_iterations: int) -> int:
    i = 1
    while i < max_iterations:
        zx, zy = zx * zx - zy * zy + cx, 2.0 * zx * zy + cy
        if zx * zx + zy * zy >= ESCAPE_RADIUS_SQ:
            break
        i += 1
    return i


def mandelbrot_iterations(cx: float, cy: float, max_iterations: int) -> int:
    """Iterations until z -> z*z + c, from z = 0, escapes.

    Returns ``max_iterations`` for a point that never escapes.
    """
    return _iterate(0.0, 0.0, cx, cy, max_iterations)


def julia_iterations(zx: float, zy: float, cx: float, cy: float, max_iterations: int) -> int:
    """Iterations until z -> z*z + c, from the given z, escapes.

    Returns ``max_iterations`` for a point that never escapes.
    """
    return _iterate(zx, zy, cx, cy, max_iterations)


def pixel_color(iterations: int, max_iterations: int, color: int) -> int:
    """Black for a point in the set, otherwise ``color`` scaled by the
    iteration count, wrapped to 32 bits."""
    if iterations == max_iterations:
        return BLACK
    return (color * iterations) & _MASK32


def _escape_counts(zx, zy, cx, cy, max_iterations: int) -> np.ndarray:
    counts = np.full(zx.size, max(max_iterations, 1), dtype=np.int64)
    index = np.arange(zx.size)
    for i in range(1, max_iterations):
        if index.size == 0:
            break
        new_x = zx * zx - zy * zy + cx
        new_y = 2.0 * zx * zy + cy
        escaped = new_x * new_x + new_y * new_y >= ESCAPE_RADIUS_SQ
        counts[index[escaped]] = i
        keep = ~escaped
        index = index[keep]
        zx = new_x[keep]
        zy = new_y[keep]
        cx = cx[keep]
        cy = cy[keep]
    return counts


def render(fractal: Fractal, size: int = SIZE) -> np.ndarray:
    """Colours of a ``size`` x ``size`` frame as a uint32 array indexed [y, x]."""
    if size < 1:
        raise ValueError(f"size must be positive, got {size}")
    coords = np.arange(size, dtype=np.float64)
    real = coords / fractal.zoom + fractal.offset_x
    imag = coords / fractal.zoom + fractal.offset_y
    real_grid, imag_grid = np.meshgrid(real, imag)
    real_flat = real_grid.ravel()
    imag_flat = imag_grid.ravel()
    if fractal.kind is FractalKind.JULIA:
        zx, zy = real_flat.copy(), imag_flat.copy()
        cx = np.full(real_flat.size, fractal.cx, dtype=np.float64)
        cy = np.full(real_flat.size, fractal.cy, dtype=np.float64)
    else:
        zx = np.zeros(real_flat.size, dtype=np.float64)
        zy = np.zeros(real_flat.size, dtype=np.float64)
        cx, cy = real_flat.copy(), imag_flat.copy()
    counts = _escape_counts(zx, zy, cx, cy, fractal.max_iterations)
    color = fractal.color & _MASK32
    pixels = np.where(
        counts == fractal.max_iterations, BLACK, (counts * color) & _MASK32
    )
    return pixels.reshape(size, size).astype(np.uint32)
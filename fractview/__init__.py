"""Interactive Mandelbrot and Julia set viewer, with its rendering core and small text and data helpers."""

__version__ = "0.1.0"
# fractview

An interactive viewer for the Mandelbrot set and Julia sets. It opens a
700 × 700 window and redraws the fractal as you pan, zoom and change the
iteration depth.

## Installing

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Running

```
fractview mandelbrot
fractview julia
fractview julia -0.8 0.156
```

The first argument is the fractal to show: `mandelbrot` or `julia`.
A Julia set can take its constant `c` as two decimal numbers, the real part
and then the imaginary part. Without them it uses `c = -0.745429 + 0.05i`.
Both numbers must be plain decimals: an optional sign, digits and at most
one point, such as `-0.4`, `+1` or `0.6`. A number that begins with a bare
point (`.5` or `-.5`) is not accepted.

Any other number of arguments, an unknown fractal name or a malformed number
prints a message and exits with status 1.

## Controls

| Input            | Action                                                  |
|------------------|---------------------------------------------------------|
| Arrow keys       | Move the view                                           |
| Mouse wheel up   | Zoom in towards the cursor (factor 1.42)                |
| Mouse wheel down | Zoom out from the cursor                                |
| `p`              | Raise the iteration limit by 42 (up to 4200)            |
| `m`              | Lower the iteration limit by 42 (down to 42)            |
| `c`              | Shift the colour palette                                |
| `j`              | Pick a random Julia constant, each part in [-1.5, 1.5]  |
| `r`              | Reset position, zoom, colour and iterations             |
| `Esc`            | Quit                                                    |

Closing the window also quits. A reset keeps the current Julia constant.

Points that stay bounded up to the iteration limit are drawn black; points
that escape are coloured by the palette colour times the number of
iterations they took.

## Using it as a library

The rendering core works without opening a window:

```python
from fractview.state import Fractal, FractalKind
from fractview.render import render, mandelbrot_iterations

fractal = Fractal(kind=FractalKind.MANDELBROT)
pixels = render(fractal, 700)   # uint32 array indexed [y, x] of 0xRRGGBB colours

mandelbrot_iterations(0.0, 0.0, 42)   # a point inside the set: 42
```

- `fractview.state` holds `Fractal`, `FractalKind` and `parse_kind`.
- `fractview.render` holds `mandelbrot_iterations`, `julia_iterations`,
  `pixel_color` and `render`.
- `fractview.controls` applies input to a `Fractal`: `handle_key`,
  `handle_mouse`, `zoom`, `change_iterations` and `random_c`, with the
  `Key` and `MouseButton` codes.
- `fractview.numbers` checks and parses command-line decimals:
  `is_valid_decimal` and `parse_decimal`.
- `fractview.app` holds `parse_args` and the `main` entry point.

The package also has small text and data helpers: `fractview.strings`,
`fractview.chars`, `fractview.memory`, `fractview.linked_list`,
`fractview.output` and a minimal `fractview.printf` formatter supporting
`%c %s %d %i %u %x %X %p %%`.

## What it does not do

There is no way to save a rendered frame to a file and no on-screen help;
the `h` key is recognised but does nothing.
[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "fractview"
version = "0.1.0"
description = "Interactive Mandelbrot and Julia set viewer with keyboard and mouse navigation"
requires-python = ">=3.10"
keywords = ["fractal", "mandelbrot", "julia", "viewer", "graphics"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Multimedia :: Graphics :: Viewers",
    "Topic :: Scientific/Engineering :: Mathematics",
]
dependencies = [
    "numpy",
    "pygame",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
fractview = "fractview.app:main"

[tool.hatch.build.targets.wheel]
packages = ["fractview"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"

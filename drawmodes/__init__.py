"""Interactive drawing modes: sketch, fractal, points, averaging, geometry and Bezier."""

__version__ = "0.1.0"

"""Minimal Whitted-style ray tracer: spheres, a ground plane and Phong lighting."""

__version__ = "0.1.0"

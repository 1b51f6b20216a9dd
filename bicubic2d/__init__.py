"""Bicubic interpolation of functions of two variables on rectangular grids, with a 3D viewer."""

__version__ = "0.1.0"
__all__ = ["functions", "grid", "method1", "method2", "interpolation", "scene", "cli"]
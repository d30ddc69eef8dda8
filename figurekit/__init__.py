"""Triangles and quadrilaterals validated on construction, with a sample-report command."""

__version__ = "0.1.0"
__all__ = ["shapes", "cli"]
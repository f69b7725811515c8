"""Exact 3D convex hull construction on an integer grid, with vector and scalar helpers."""

__version__ = "0.1.0"
__all__ = ["builder", "exact", "scalar", "vector"]
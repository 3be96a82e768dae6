"""Polygonal mesh import from CSV, degenerate-cell checks and UCD export."""

__version__ = "1.0.0"
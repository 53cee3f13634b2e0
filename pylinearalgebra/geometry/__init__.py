"""
Geometric primitives built on Vector.

Public API:
    Line    point + direction, with point-to-line distance
"""

from pylinearalgebra.geometry.line import Line

__all__ = ["Line"]

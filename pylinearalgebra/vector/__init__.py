"""
Vector value type.

Public API:
    Vector                 immutable fixed-dimension vector
    cross_product(*vs)     vector orthogonal to n-1 vectors of dimension n
    compute_barycenter()   weighted average of points

Example:
    >>> from pylinearalgebra.vector import Vector
    >>> v = Vector(3.0, 4.0)
    >>> v.norm
    np.float64(5.0)
    >>> Vector.product(Vector(1, 0, 0), Vector(0, 1, 0)) == (0, 0, 1)
    True
"""

from pylinearalgebra.vector.vector import Vector
from pylinearalgebra.vector._product import cross_product
from pylinearalgebra.vector._barycenter import compute_barycenter

__all__ = [
    "Vector",
    "cross_product",
    "compute_barycenter",
]

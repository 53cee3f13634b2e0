"""
Matrix value type.

Public API:
    Matrix            immutable dense matrix with cached structure and determinant
    StructureFlags    result of a structural scan
    scan_structure()  classify a 2-D array as triangular / diagonal / identity

Example:
    >>> from pylinearalgebra.matrix import Matrix
    >>> m = Matrix([[1, 2], [3, 4]])
    >>> m.determinant
    np.float64(-2.0)
"""

from pylinearalgebra.matrix.matrix import Matrix
from pylinearalgebra.matrix._structure import StructureFlags, scan_structure

__all__ = [
    "Matrix",
    "StructureFlags",
    "scan_structure",
]

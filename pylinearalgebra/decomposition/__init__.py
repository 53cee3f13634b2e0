"""
Decomposition engine.

Public API:
    lu_decompose(m)   LU factorization with partial pivoting -> LUResult
    determinant(m)    signed product of the pivots (0 for singular input)
    invert(m)         inverse by Gauss-Jordan elimination
    LUResult          L, U, permutation, sign
    RowOperations     elementary row operations over a group of matrices

All functions leave their input untouched and raise NotSquareError for
non-square input.
"""

from pylinearalgebra.decomposition._row_operations import RowOperations
from pylinearalgebra.decomposition.lu import (
    LUResult,
    compute_determinant,
    determinant,
    lu_decompose,
)
from pylinearalgebra.decomposition.inverse import invert

__all__ = [
    "LUResult",
    "RowOperations",
    "compute_determinant",
    "determinant",
    "invert",
    "lu_decompose",
]

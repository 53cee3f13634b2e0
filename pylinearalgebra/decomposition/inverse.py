"""
Matrix inversion by Gauss-Jordan elimination.

The matrix is copied into a scratch work matrix, alongside an accumulator
that starts as the identity. Forward elimination with partial pivoting
turns the work matrix into U while the accumulator, receiving the same
swaps and eliminations, becomes inv(L) @ P. Back-substitution then scales
each pivot row to one and clears the entries above it; replayed on the
accumulator, this leaves the inverse.
"""

from __future__ import annotations

import numpy as np

from pylinearalgebra.core.validation import check_square
from pylinearalgebra.decomposition._row_operations import RowOperations
from pylinearalgebra.decomposition.lu import _forward_elimination
from pylinearalgebra.matrix import Matrix


def _back_substitution(work: Matrix, accumulator: Matrix) -> None:
    """Reduce an upper triangular scratch matrix to the identity in place."""
    ops = RowOperations(work, accumulator)
    u = work._data
    for k in range(work.rows - 1, -1, -1):
        ops.scale(k, 1 / u[k, k])
        work._set_entry(k, k, 1)
        for i in range(k):
            factor = u[i, k]
            if factor != 0:
                ops.add_multiple(i, k, -factor)
            work._set_entry(i, k, 0)


def invert(matrix: Matrix, name: str = 'matrix') -> Matrix:
    """
    Inverse of a square matrix.

    Args:
        matrix: Matrix to invert (not modified)
        name: Name used in error messages

    Returns:
        New Matrix M_inv with matrix @ M_inv close to the identity

    Raises:
        NotSquareError: If the matrix is not square
        SingularMatrixError: If elimination meets an exact-zero pivot
    """
    check_square(matrix.shape, name)
    if matrix.is_identity:
        return matrix.copy()

    n = matrix.rows
    work = Matrix._scratch(matrix.to_numpy())
    inverse = Matrix._scratch(np.eye(n, dtype=matrix.dtype))

    _, sign = _forward_elimination(work, accumulators=(inverse,), name=name)
    pivot_product = sign * np.prod(np.diagonal(work._data))

    _back_substitution(work, inverse)

    inverse._determinant = 1 / pivot_product
    return inverse._freeze()

"""
LU decomposition with partial pivoting.

Doolittle elimination: at step k the row at or below k with the largest
absolute entry in column k becomes the pivot row (first one on ties). The
rows below the pivot are reduced to zero in column k, and the multipliers
are recorded in a unit lower triangular L, so that

    P @ A == L @ U

where P is the row permutation applied by the pivoting. Every swap flips
the determinant's sign; the determinant is sign * prod(diag(U)).

Only an exact-zero pivot is singular. There is no tolerance: a nearly
singular matrix decomposes, with the loss of precision that implies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np

from pylinearalgebra.core.exceptions import SingularMatrixError
from pylinearalgebra.core.validation import check_square
from pylinearalgebra.decomposition._row_operations import RowOperations
from pylinearalgebra.matrix import Matrix


@dataclass(frozen=True)
class LUResult:
    """
    Result of LU decomposition.

    Attributes:
        L: Unit lower triangular factor (n x n)
        U: Upper triangular factor (n x n)
        permutation: Row i of P @ A is row permutation[i] of A
        sign: Parity of the permutation, +1 or -1
    """
    L: Matrix
    U: Matrix
    permutation: tuple[int, ...]
    sign: int

    @property
    def P(self) -> Matrix:
        """Permutation matrix with P @ A == L @ U."""
        n = len(self.permutation)
        data = np.zeros((n, n), dtype=self.U.dtype)
        data[np.arange(n), self.permutation] = 1
        return Matrix._from_trusted(data, determinant=self.U.dtype.type(self.sign))

    @property
    def determinant(self) -> np.floating:
        return self.sign * np.prod(np.diagonal(self.U._data))


def _forward_elimination(
    work: Matrix,
    lower: Matrix | None = None,
    accumulators: Sequence[Matrix] = (),
    name: str = 'matrix',
) -> tuple[tuple[int, ...], int]:
    """
    Reduce a square scratch matrix to upper triangular form in place.

    Every swap and elimination applied to `work` is replayed on each of
    `accumulators`. If `lower` is given, it must start as the identity; it
    receives the multipliers, and only its first k columns follow a swap
    at step k.

    Returns:
        (permutation, sign)

    Raises:
        SingularMatrixError: If a pivot is exactly zero
    """
    n = work.rows
    full = RowOperations(work, *accumulators)
    partial = RowOperations(lower) if lower is not None else None
    u = work._data
    permutation = list(range(n))
    sign = 1

    for k in range(n):
        pivot = k + int(np.argmax(np.abs(u[k:, k])))
        if u[pivot, k] == 0:
            raise SingularMatrixError(
                f"{name}: matrix is singular, zero pivot in column {k}",
                matrix_name=name,
                pivot_index=k,
            )

        if pivot != k:
            full.swap(k, pivot)
            if partial is not None:
                partial.swap(k, pivot, limit=k)
            permutation[k], permutation[pivot] = permutation[pivot], permutation[k]
            sign = -sign

        for i in range(k + 1, n):
            factor = u[i, k] / u[k, k]
            if factor != 0:
                full.add_multiple(i, k, -factor)
            # Exact zero below the pivot, whatever the round-off
            work._set_entry(i, k, 0)
            if lower is not None:
                lower._set_entry(i, k, factor)

    return tuple(permutation), sign


def lu_decompose(matrix: Matrix, name: str = 'matrix') -> LUResult:
    """
    LU decomposition with partial pivoting.

    Args:
        matrix: Square matrix to decompose (not modified)
        name: Name used in error messages

    Returns:
        LUResult with L, U, permutation and sign

    Raises:
        NotSquareError: If the matrix is not square
        SingularMatrixError: If an exact-zero pivot is met
    """
    check_square(matrix.shape, name)
    n = matrix.rows

    upper = Matrix._scratch(matrix.to_numpy())
    lower = Matrix._scratch(np.eye(n, dtype=matrix.dtype))
    permutation, sign = _forward_elimination(upper, lower, name=name)

    return LUResult(
        L=lower._freeze(),
        U=upper._freeze(),
        permutation=permutation,
        sign=sign,
    )


def compute_determinant(matrix: Matrix, name: str = 'matrix') -> Any:
    """
    Determinant from forward elimination, bypassing the matrix's cache.

    A zero pivot means a zero determinant rather than an error.

    Raises:
        NotSquareError: If the matrix is not square
    """
    check_square(matrix.shape, name)
    work = Matrix._scratch(matrix.to_numpy())
    try:
        _, sign = _forward_elimination(work, name=name)
    except SingularMatrixError:
        return matrix.field.zero
    return sign * np.prod(np.diagonal(work._data))


def determinant(matrix: Matrix) -> Any:
    """
    Determinant of a square matrix; cached on the matrix.

    Raises:
        NotSquareError: If the matrix is not square
    """
    return matrix.determinant

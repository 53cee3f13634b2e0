"""
Elementary row operations replayed over several matrices.

Gaussian elimination and Gauss-Jordan inversion apply each row operation
to the matrix being reduced and to one or more companion accumulators.
RowOperations holds that ordered group and applies every operation to all
of its members, resetting each member's cached structure and determinant.

Members must be writable scratch matrices (Matrix._scratch).
"""

from __future__ import annotations

from typing import Any

from pylinearalgebra.core.validation import check_count
from pylinearalgebra.matrix import Matrix


class RowOperations:
    """Apply the same row operation to an ordered group of matrices."""

    __slots__ = ('_matrices',)

    def __init__(self, *matrices: Matrix):
        check_count(len(matrices), 1, 'matrices')
        self._matrices = matrices

    @property
    def matrices(self) -> tuple[Matrix, ...]:
        return self._matrices

    def swap(self, row1: int, row2: int, limit: int | None = None) -> None:
        """
        Exchange two rows.

        Args:
            row1, row2: Rows to exchange
            limit: If given, only the first `limit` columns are exchanged
        """
        if row1 == row2:
            return
        columns = slice(None) if limit is None else slice(0, limit)
        for matrix in self._matrices:
            data = matrix._data
            data[[row1, row2], columns] = data[[row2, row1], columns]
            matrix._invalidate()

    def scale(self, row: int, factor: Any) -> None:
        """Multiply a row by factor."""
        for matrix in self._matrices:
            matrix._data[row] *= factor
            matrix._invalidate()

    def add_multiple(self, target: int, source: int, factor: Any) -> None:
        """Add factor times row `source` to row `target`."""
        for matrix in self._matrices:
            data = matrix._data
            data[target] += factor * data[source]
            matrix._invalidate()

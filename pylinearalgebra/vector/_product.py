"""
Generalized cross product.

For n-1 vectors of dimension n, the result is the vector orthogonal to all
of them, obtained by cofactor expansion along the first row of

    | e_0   e_1   ...  e_{n-1}   |
    | v_1                        |
    | ...                        |
    | v_{n-1}                    |

so that result[c] = (-1)^c * det(V without column c). With this sign
convention product((1,0,0), (0,1,0)) == (0,0,1).

The minors are evaluated recursively over shrinking column subsets. The
cost is combinatorial in n; fine for n up to about 8.
"""

from __future__ import annotations

from typing import Any

import numpy as np
from numpy.typing import NDArray

from pylinearalgebra.core.exceptions import DimensionError
from pylinearalgebra.core.validation import check_count
from pylinearalgebra.vector.vector import Vector


def cross_product(*vectors: Vector) -> Vector:
    """
    Vector orthogonal to n-1 vectors of dimension n.

    Args:
        *vectors: n-1 vectors, each of dimension n

    Returns:
        Vector of dimension n

    Raises:
        ValidationError: If no vector is given
        DimensionError: If a vector does not have dimension len(vectors) + 1
    """
    check_count(len(vectors), 1, 'vectors')
    dimension = len(vectors) + 1
    for i, vector in enumerate(vectors):
        if vector.dimension != dimension:
            raise DimensionError(
                f"vectors[{i}]: expected dimension {dimension} for "
                f"{len(vectors)} vectors, got {vector.dimension}"
            )

    rows = np.stack([vector.to_numpy() for vector in vectors])
    memo: dict[tuple[int, ...], Any] = {}
    columns = tuple(range(dimension))

    result = np.empty(dimension, dtype=rows.dtype)
    sign = 1
    for column in columns:
        remaining = tuple(c for c in columns if c != column)
        result[column] = sign * _minor(rows, remaining, memo)
        sign = -sign
    return Vector._wrap(result)


def _minor(
    rows: NDArray[np.floating[Any]],
    columns: tuple[int, ...],
    memo: dict[tuple[int, ...], Any],
) -> Any:
    """
    Determinant of the last len(columns) rows restricted to columns.

    The row depth is implied by the size of the column subset, so the
    subset alone keys the memo.
    """
    if columns in memo:
        return memo[columns]

    depth = rows.shape[0] - len(columns)
    row = rows[depth]
    if len(columns) == 1:
        value = row[columns[0]]
    else:
        value = rows.dtype.type(0)
        sign = 1
        for column in columns:
            entry = row[column]
            if entry != 0:
                remaining = tuple(c for c in columns if c != column)
                value += sign * entry * _minor(rows, remaining, memo)
            sign = -sign
    memo[columns] = value
    return value

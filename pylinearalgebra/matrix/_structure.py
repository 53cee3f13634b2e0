"""
Structural analysis of square matrices.

One pass over the grid answers three questions at once: is the matrix
triangular (upper or lower), diagonal (both), and the identity (diagonal
with ones on the diagonal).
"""

from dataclasses import dataclass
from typing import Any

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class StructureFlags:
    """Result of a structural scan."""
    is_triangular: bool
    is_diagonal: bool
    is_identity: bool


NOT_SQUARE = StructureFlags(is_triangular=False, is_diagonal=False, is_identity=False)


def scan_structure(data: NDArray[np.floating[Any]]) -> StructureFlags:
    """
    Classify a 2-D array.

    Non-square arrays are reported as neither triangular, diagonal nor
    identity.
    """
    rows, columns = data.shape
    if rows != columns:
        return NOT_SQUARE

    upper = not np.any(np.tril(data, k=-1))
    lower = not np.any(np.triu(data, k=1))
    diagonal = upper and lower
    identity = diagonal and bool(np.all(np.diagonal(data) == 1))
    return StructureFlags(
        is_triangular=upper or lower,
        is_diagonal=diagonal,
        is_identity=identity,
    )


def is_normal_space(data: NDArray[np.floating[Any]]) -> bool:
    """True when the array is square and its last row is [0, ..., 0, 1]."""
    rows, columns = data.shape
    if rows != columns:
        return False
    last = data[-1]
    return bool(np.all(last[:-1] == 0)) and bool(last[-1] == 1)

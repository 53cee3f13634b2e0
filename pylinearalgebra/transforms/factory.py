"""
Builders for transformation matrices in homogeneous coordinates.

Transforms act on row vectors extended with a trailing 1
(Vector.to_normal_space), so the translation part sits in the last row.
A builder taking n coefficients returns an (n + 1) x (n + 1) matrix unless
stated otherwise.

Where the structure of the result is known by construction (identity,
diagonal, scaling, translation), the returned matrix carries its
structural flags and determinant, so they are never recomputed by a scan.

The identity master for each (size, dtype) is kept in an LRU cache. The
master array is read-only and every call returns a fresh copy, so callers
never share state.
"""

from __future__ import annotations

import math
from functools import lru_cache
from typing import Any

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylinearalgebra.core.exceptions import ValidationError
from pylinearalgebra.core.scalar import resolve_dtype, scalar_field
from pylinearalgebra.core.validation import check_1d, check_array, check_count
from pylinearalgebra.matrix import Matrix

_IDENTITY_CACHE_SIZE = 64


@lru_cache(maxsize=_IDENTITY_CACHE_SIZE)
def _identity_master(dimension: int, dtype_str: str) -> NDArray[np.floating[Any]]:
    master = np.eye(dimension, dtype=np.dtype(dtype_str))
    master.flags.writeable = False
    return master


def _identity_array(dimension: int, dtype: np.dtype) -> NDArray[np.floating[Any]]:
    """Writable copy of the cached identity."""
    return _identity_master(dimension, dtype.str).copy()


def _check_dimension(dimension: Any, name: str) -> int:
    if isinstance(dimension, (bool, np.bool_)) or not isinstance(dimension, (int, np.integer)):
        raise ValidationError(
            f"{name}: must be an integer, got {type(dimension).__name__}"
        )
    if dimension < 1:
        raise ValidationError(f"{name}: must be >= 1, got {dimension}")
    return int(dimension)


def _coefficients(values: tuple[Any, ...], name: str, dtype: np.dtype) -> NDArray[np.floating[Any]]:
    """Varargs, or a single sequence, as a 1-D array of the target dtype."""
    if len(values) == 1 and isinstance(values[0], (list, tuple, np.ndarray)):
        values = values[0]
    array = check_array(values, name, dtype=dtype)
    check_1d(array, name)
    return array


def identity(dimension: int, *, dtype: DTypeLike | None = None) -> Matrix:
    """
    Identity matrix of the given size.

    Raises:
        ValidationError: If dimension is not an integer >= 1
    """
    dimension = _check_dimension(dimension, 'dimension')
    resolved = resolve_dtype(dtype)
    return Matrix._from_trusted(
        _identity_array(dimension, resolved),
        is_triangular=True,
        is_diagonal=True,
        is_identity=True,
        determinant=resolved.type(1),
    )


def diagonal(*values: float, dtype: DTypeLike | None = None) -> Matrix:
    """
    Square matrix with values on the diagonal and zeros elsewhere.

    Raises:
        ValidationError: If no value is given
    """
    resolved = resolve_dtype(dtype)
    entries = _coefficients(values, 'values', resolved)
    check_count(entries.shape[0], 1, 'values')
    return Matrix._from_trusted(
        np.diag(entries),
        is_triangular=True,
        is_diagonal=True,
        is_identity=bool(np.all(entries == 1)),
        determinant=np.prod(entries),
    )


def scaling(*coefficients: float, dtype: DTypeLike | None = None) -> Matrix:
    """
    Homogeneous scaling along each axis.

    Example:
        scaling(2, 3) -> [[2, 0, 0], [0, 3, 0], [0, 0, 1]]
    """
    resolved = resolve_dtype(dtype)
    entries = _coefficients(coefficients, 'coefficients', resolved)
    check_count(entries.shape[0], 1, 'coefficients')
    n = entries.shape[0]

    data = _identity_array(n + 1, resolved)
    data[np.arange(n), np.arange(n)] = entries
    return Matrix._from_trusted(
        data,
        is_triangular=True,
        is_diagonal=True,
        is_identity=bool(np.all(entries == 1)),
        determinant=np.prod(entries),
    )


def _pair_count(count: int, ordered: bool) -> int | None:
    """
    Solve count == k(k-1) (ordered) or k(k-1)/2 (unordered) for k >= 1.

    Returns None when count has no such form.
    """
    target = count if ordered else 2 * count
    k = (1 + math.isqrt(1 + 4 * target)) // 2
    return k if k * (k - 1) == target else None


def skew(*angles: float, dtype: DTypeLike | None = None) -> Matrix:
    """
    Homogeneous skew (shear) transform.

    For k axes, k(k-1) angles are expected: for each row x < k, the k-1
    off-diagonal columns of the top-left k x k block receive tan(angle),
    in order.

    Raises:
        ValidationError: If the number of angles is not k(k-1)
    """
    resolved = resolve_dtype(dtype)
    field = scalar_field(resolved)
    values = _coefficients(angles, 'angles', resolved)
    k = _pair_count(values.shape[0], ordered=True)
    if k is None:
        raise ValidationError(
            f"angles: expected k*(k-1) angles for k axes, got {values.shape[0]}"
        )

    data = _identity_array(k + 1, resolved)
    index = 0
    for x in range(k):
        for y in range(k):
            if y == x:
                continue
            data[x, y] = field.tan(values[index])
            index += 1
    return Matrix._from_trusted(data)


def rotation(*angles: float, dtype: DTypeLike | None = None) -> Matrix:
    """
    Homogeneous rotation, composed of one plane rotation per pair of axes.

    For k axes, k(k-1)/2 angles are expected, one for each plane
    (dim1, dim2) with dim1 < dim2, ordered by dim1 then dim2. Each plane
    rotation has cos on both diagonal entries, -sin at [dim1, dim2] and
    sin at [dim2, dim1]; they are multiplied left to right.

    Example:
        rotation(theta) -> [[cos, -sin, 0], [sin, cos, 0], [0, 0, 1]]

    Raises:
        ValidationError: If the number of angles is not k(k-1)/2
    """
    resolved = resolve_dtype(dtype)
    field = scalar_field(resolved)
    values = _coefficients(angles, 'angles', resolved)
    k = _pair_count(values.shape[0], ordered=False)
    if k is None:
        raise ValidationError(
            f"angles: expected k*(k-1)/2 angles for k axes, got {values.shape[0]}"
        )

    result = _identity_array(k + 1, resolved)
    index = 0
    for dim1 in range(k):
        for dim2 in range(dim1 + 1, k):
            cos = field.cos(values[index])
            sin = field.sin(values[index])
            plane = _identity_array(k + 1, resolved)
            plane[dim1, dim1] = cos
            plane[dim2, dim2] = cos
            plane[dim1, dim2] = -sin
            plane[dim2, dim1] = sin
            result = result @ plane
            index += 1
    return Matrix._from_trusted(result)


def translation(*values: float, dtype: DTypeLike | None = None) -> Matrix:
    """
    Homogeneous translation, offsets in the last row.

    Example:
        translation(4, 5) -> [[1, 0, 0], [0, 1, 0], [4, 5, 1]]
    """
    resolved = resolve_dtype(dtype)
    offsets = _coefficients(values, 'values', resolved)
    check_count(offsets.shape[0], 1, 'values')
    n = offsets.shape[0]

    data = _identity_array(n + 1, resolved)
    data[n, :n] = offsets
    unmoved = bool(np.all(offsets == 0))
    return Matrix._from_trusted(
        data,
        is_triangular=True,
        is_diagonal=unmoved,
        is_identity=unmoved,
        determinant=resolved.type(1),
    )


def transform(*values: float, dtype: DTypeLike | None = None) -> Matrix:
    """
    Raw affine transform of size d from d(d-1) values.

    The first d-1 columns are filled row by row; the last column stays
    [0, ..., 0, 1].

    Example:
        transform(a, b, c, d, tx, ty) -> [[a, b, 0], [c, d, 0], [tx, ty, 1]]

    Raises:
        ValidationError: If the number of values is not d(d-1) for d >= 2
    """
    resolved = resolve_dtype(dtype)
    entries = _coefficients(values, 'values', resolved)
    d = _pair_count(entries.shape[0], ordered=True)
    if d is None or d < 2:
        raise ValidationError(
            f"values: expected d*(d-1) values for d >= 2, got {entries.shape[0]}"
        )

    data = _identity_array(d, resolved)
    data[:, :d - 1] = entries.reshape(d, d - 1)
    return Matrix._from_trusted(data)

"""
Input validation utilities for PyLinearAlgebra.

These validators follow the "fail fast, fail loud" principle. They raise
immediately with clear error messages rather than silently correcting
or making assumptions about user intent.

Design principles:
    - No silent type coercion (except np.asarray on array-likes)
    - No default handling of edge cases
    - Clear, actionable error messages with actual values
    - Each function validates ONE thing
    - Parameter names included in all error messages
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray
from typing import Any

from pylinearalgebra.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    NotSquareError,
    ValidationError,
)


def check_array(
    array: ArrayLike,
    name: str,
    dtype: np.dtype | None = None,
) -> NDArray[np.floating[Any]]:
    """
    Validate and convert input to numpy array.

    Accepts any array-like and converts to numpy array. Rejects inputs
    that result in object dtype (indicating mixed types or non-numeric data).
    The result is always a fresh array owned by the caller.

    Args:
        array: Input to validate
        name: Parameter name for error messages
        dtype: Target floating dtype. If None, floating input keeps its
               dtype and other numeric input is promoted to float64.

    Returns:
        numpy.ndarray with floating dtype

    Raises:
        ValidationError: If input cannot be converted to numeric array
    """
    try:
        result = np.array(array)
    except (ValueError, TypeError) as e:
        raise ValidationError(f"{name}: cannot convert to array: {e}") from e

    if result.dtype == object:
        raise ValidationError(
            f"{name}: converted to object dtype, indicating mixed types or non-numeric data"
        )

    # Reject non-numeric dtypes (strings, bytes, datetime, etc.)
    if not np.issubdtype(result.dtype, np.number) or np.issubdtype(result.dtype, np.complexfloating):
        raise ValidationError(
            f"{name}: non-numeric dtype {result.dtype}, expected real numeric data"
        )

    if dtype is not None:
        result = result.astype(dtype)
    elif not np.issubdtype(result.dtype, np.floating):
        result = result.astype(np.float64)

    return result


def check_ndim(array: NDArray[np.floating[Any]], ndim: int, name: str) -> None:
    """
    Verify array has exactly the specified number of dimensions.

    Args:
        array: Array to check
        ndim: Required number of dimensions
        name: Parameter name for error messages

    Raises:
        DimensionError: If array has wrong number of dimensions
    """
    if array.ndim != ndim:
        raise DimensionError(
            f"{name}: expected {ndim}D array, got {array.ndim}D with shape {array.shape}"
        )


def check_1d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 1-dimensional."""
    check_ndim(array, 1, name)


def check_2d(array: NDArray[np.floating[Any]], name: str) -> None:
    """Verify array is 2-dimensional."""
    check_ndim(array, 2, name)


def check_not_empty(array: NDArray[np.floating[Any]], name: str) -> None:
    """
    Verify array holds at least one element.

    Args:
        array: Array to check
        name: Parameter name for error messages

    Raises:
        ValidationError: If any axis has length zero
    """
    if array.size == 0:
        raise ValidationError(
            f"{name}: dimension cannot be 0, got shape {array.shape}"
        )


def check_square(shape: tuple[int, int], name: str) -> None:
    """
    Verify a matrix shape is square.

    Args:
        shape: (rows, columns)
        name: Parameter name for error messages

    Raises:
        NotSquareError: If rows != columns
    """
    rows, columns = shape
    if rows != columns:
        raise NotSquareError(
            f"{name}: matrix must be square, got {rows}x{columns}",
            shape=(rows, columns),
        )


def check_same_dimension(
    *dimensions: int,
    names: tuple[str, ...]
) -> None:
    """
    Verify all operands share the same dimension.

    Args:
        *dimensions: Dimensions to compare
        names: Parameter names for error messages (must match number of dimensions)

    Raises:
        ValueError: If number of names doesn't match number of dimensions
        DimensionError: If dimensions differ
    """
    if len(dimensions) != len(names):
        raise ValueError(
            f"Number of dimensions ({len(dimensions)}) must match number of names ({len(names)})"
        )

    if len(set(dimensions)) > 1:
        details = ", ".join(f"{name}={dim}" for name, dim in zip(names, dimensions))
        raise DimensionError(f"Inconsistent dimensions: {details}")


def check_index(index: Any, bounds: int, name: str) -> int:
    """
    Verify an element index lies in [0, bounds).

    Negative indices are rejected rather than wrapped.

    Args:
        index: Index to check
        bounds: Exclusive upper bound
        name: Parameter name for error messages

    Returns:
        The index as a plain int

    Raises:
        ValidationError: If index is not an integer
        IndexOutOfBoundsError: If index is outside [0, bounds)
    """
    if isinstance(index, (bool, np.bool_)) or not isinstance(index, (int, np.integer)):
        raise ValidationError(
            f"{name}: index must be an integer, got {type(index).__name__}"
        )
    index = int(index)
    if not 0 <= index < bounds:
        raise IndexOutOfBoundsError(
            f"{name}: index {index} out of range [0, {bounds})",
            index=index,
            bounds=bounds,
        )
    return index


def check_count(count: int, minimum: int, name: str) -> None:
    """
    Verify a number of arguments reaches a minimum.

    Args:
        count: Number of items supplied
        minimum: Minimum number required
        name: Parameter name for error messages

    Raises:
        ValidationError: If count is not an integer or is below minimum
    """
    if isinstance(count, (bool, np.bool_)) or not isinstance(count, (int, np.integer)):
        raise ValidationError(
            f"{name}: must be an integer, got {type(count).__name__}"
        )
    if count < minimum:
        raise ValidationError(
            f"{name}: requires at least {minimum} item(s), got {count}"
        )

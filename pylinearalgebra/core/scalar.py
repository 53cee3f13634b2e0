"""
Scalar capability set for PyLinearAlgebra.

Vectors and matrices are parameterized over a numeric scalar. Rather than
hard-wiring float64, every value type carries a numpy floating dtype and
reaches the arithmetic and transcendental functions it needs through a
ScalarField. The protocol names the capability set; NumpyScalarField
realizes it for any numpy floating dtype.

We use Protocol (structural typing) rather than ABC (nominal typing) so
that alternative scalar implementations only have to provide the methods.
"""

from dataclasses import dataclass
from functools import lru_cache
from typing import Any, Protocol, runtime_checkable

import numpy as np
from numpy.typing import DTypeLike

from pylinearalgebra.core.exceptions import ValidationError


# Scalar type used when no dtype is requested
DEFAULT_DTYPE = np.dtype(np.float64)


@runtime_checkable
class ScalarField(Protocol):
    """
    Capability set required from a scalar type.

    Every operation accepts and returns scalars (or arrays) of the field's
    dtype. compare() returns -1, 0 or 1.
    """

    @property
    def dtype(self) -> np.dtype:
        ...

    @property
    def zero(self) -> Any:
        ...

    @property
    def one(self) -> Any:
        ...

    def add(self, a: Any, b: Any) -> Any: ...
    def sub(self, a: Any, b: Any) -> Any: ...
    def mul(self, a: Any, b: Any) -> Any: ...
    def div(self, a: Any, b: Any) -> Any: ...
    def compare(self, a: Any, b: Any) -> int: ...
    def abs(self, a: Any) -> Any: ...
    def sqrt(self, a: Any) -> Any: ...
    def sin(self, a: Any) -> Any: ...
    def cos(self, a: Any) -> Any: ...
    def tan(self, a: Any) -> Any: ...
    def asin(self, a: Any) -> Any: ...
    def acos(self, a: Any) -> Any: ...
    def atan2(self, y: Any, x: Any) -> Any: ...


@dataclass(frozen=True)
class NumpyScalarField:
    """
    ScalarField backed by numpy ufuncs for one floating dtype.

    Attributes:
        dtype: The numpy floating dtype (float16, float32, float64, longdouble)
    """
    dtype: np.dtype

    @property
    def zero(self) -> np.floating:
        return self.dtype.type(0)

    @property
    def one(self) -> np.floating:
        return self.dtype.type(1)

    @property
    def epsilon(self) -> float:
        """Machine epsilon for the dtype."""
        return float(np.finfo(self.dtype).eps)

    def add(self, a, b):
        return np.add(a, b, dtype=self.dtype)

    def sub(self, a, b):
        return np.subtract(a, b, dtype=self.dtype)

    def mul(self, a, b):
        return np.multiply(a, b, dtype=self.dtype)

    def div(self, a, b):
        return np.divide(a, b, dtype=self.dtype)

    def compare(self, a, b) -> int:
        if a < b:
            return -1
        if a > b:
            return 1
        return 0

    def abs(self, a):
        return np.abs(a)

    def sqrt(self, a):
        return np.sqrt(a, dtype=self.dtype)

    def sin(self, a):
        return np.sin(a, dtype=self.dtype)

    def cos(self, a):
        return np.cos(a, dtype=self.dtype)

    def tan(self, a):
        return np.tan(a, dtype=self.dtype)

    def asin(self, a):
        return np.arcsin(a, dtype=self.dtype)

    def acos(self, a):
        return np.arccos(a, dtype=self.dtype)

    def atan2(self, y, x):
        return np.arctan2(y, x, dtype=self.dtype)


def resolve_dtype(dtype: DTypeLike | None) -> np.dtype:
    """
    Normalize a dtype-like to a floating numpy dtype.

    Args:
        dtype: Anything np.dtype() accepts, or None for DEFAULT_DTYPE

    Returns:
        numpy.dtype of a floating kind

    Raises:
        ValidationError: If the dtype is not a real floating type
    """
    if dtype is None:
        return DEFAULT_DTYPE
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"dtype: not a numpy dtype: {dtype!r}") from e
    if not np.issubdtype(resolved, np.floating):
        raise ValidationError(
            f"dtype: expected a floating dtype, got {resolved}"
        )
    return resolved


def is_real_scalar(value: Any) -> bool:
    """True for Python and numpy real numbers; bools are not scalars here."""
    if isinstance(value, (bool, np.bool_)):
        return False
    return isinstance(value, (int, float, np.integer, np.floating))


@lru_cache(maxsize=None)
def _field_for(dtype: np.dtype) -> NumpyScalarField:
    return NumpyScalarField(dtype=dtype)


def scalar_field(dtype: DTypeLike | None = None) -> NumpyScalarField:
    """
    Get the ScalarField for a dtype.

    Fields are memoized, so repeated lookups return the same instance.

    Args:
        dtype: Floating dtype, or None for DEFAULT_DTYPE

    Returns:
        NumpyScalarField for the resolved dtype
    """
    return _field_for(resolve_dtype(dtype))

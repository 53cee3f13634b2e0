"""
Core infrastructure for PyLinearAlgebra.

This module provides shared abstractions and utilities used by the value
types and algorithms (vector, matrix, decomposition, transforms, geometry).

Key components:
    exceptions: Exception hierarchy
    validation: Input validators
    scalar: Scalar capability set and dtype resolution
    tolerances: Tolerance tiers for approximate comparison
"""

from pylinearalgebra.core.exceptions import (
    PyLinearAlgebraError,
    ValidationError,
    IndexOutOfBoundsError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)
from pylinearalgebra.core.scalar import (
    DEFAULT_DTYPE,
    NumpyScalarField,
    ScalarField,
    resolve_dtype,
    scalar_field,
)
from pylinearalgebra.core.tolerances import ToleranceTier, select_tolerance

__all__ = [
    # Exceptions
    "PyLinearAlgebraError",
    "ValidationError",
    "IndexOutOfBoundsError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
    # Scalars
    "DEFAULT_DTYPE",
    "NumpyScalarField",
    "ScalarField",
    "resolve_dtype",
    "scalar_field",
    # Tolerances
    "ToleranceTier",
    "select_tolerance",
]

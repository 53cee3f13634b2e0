"""
Exception hierarchy for PyLinearAlgebra.

All exceptions inherit from PyLinearAlgebraError to allow catching any
library-specific error. Domain-specific exceptions should inherit from
the appropriate base class here.

Design principles:
    - Exceptions carry diagnostic information as attributes
    - Error messages are actionable with actual vs expected values
    - Never catch and re-raise with less information
"""


class PyLinearAlgebraError(Exception):
    """Base exception for all PyLinearAlgebra errors."""
    pass


class ValidationError(PyLinearAlgebraError):
    """
    Input validation failed.

    Raised when user-provided inputs fail validation checks: empty
    component lists, non-numeric data, or argument counts that do not
    match the packing formula of a transformation builder.
    """
    pass


class IndexOutOfBoundsError(ValidationError, IndexError):
    """
    Element access outside the valid index range.

    Also an IndexError so that sequence protocols behave as expected.

    Attributes:
        index: The offending index
        bounds: Exclusive upper bound of the valid range
    """

    def __init__(
        self,
        message: str,
        index: int | None = None,
        bounds: int | None = None
    ):
        super().__init__(message)
        self.index = index
        self.bounds = bounds


class DimensionError(ValidationError):
    """
    Vector lengths or matrix shapes are incompatible.

    Raised when the dimensions of operands don't match what the
    requested operation needs.
    """
    pass


class NotSquareError(DimensionError):
    """
    A square matrix was required.

    Raised by determinant, LU decomposition and inversion.

    Attributes:
        shape: (rows, columns) of the offending matrix
    """

    def __init__(self, message: str, shape: tuple[int, int] | None = None):
        super().__init__(message)
        self.shape = shape


class NumericalError(PyLinearAlgebraError):
    """
    Numerical computation failed.

    Base class for errors arising from numerical issues during computation.
    """
    pass


class SingularMatrixError(NumericalError):
    """
    Matrix is singular.

    Raised when Gaussian elimination meets an exact-zero pivot. No
    tolerance is applied: nearly singular matrices are decomposed.

    Attributes:
        matrix_name: Name/description of the problematic matrix
        pivot_index: Elimination step at which the zero pivot was found
    """

    def __init__(
        self,
        message: str,
        matrix_name: str | None = None,
        pivot_index: int | None = None
    ):
        super().__init__(message)
        self.matrix_name = matrix_name
        self.pivot_index = pivot_index

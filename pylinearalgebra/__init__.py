"""
PyLinearAlgebra: generic dense linear algebra for Python.

Immutable vector and matrix value types over a numpy floating dtype,
exact LU decomposition with partial pivoting, inversion and determinant,
and builders for affine transformation matrices in homogeneous
coordinates.

Submodules:
    vector: Vector value type, generalized cross product, barycenter
    matrix: Matrix value type with cached structure and determinant
    decomposition: LU factorization, determinant, inversion
    transforms: Identity, scaling, skew, rotation, translation builders
    geometry: Line
"""

__version__ = "0.1.0"

from pylinearalgebra.core import (
    PyLinearAlgebraError,
    ValidationError,
    IndexOutOfBoundsError,
    DimensionError,
    NotSquareError,
    NumericalError,
    SingularMatrixError,
)
from pylinearalgebra.vector import Vector
from pylinearalgebra.matrix import Matrix
from pylinearalgebra.geometry import Line
from pylinearalgebra import decomposition
from pylinearalgebra import transforms

__all__ = [
    "__version__",
    "Vector",
    "Matrix",
    "Line",
    "decomposition",
    "transforms",
    # Exceptions
    "PyLinearAlgebraError",
    "ValidationError",
    "IndexOutOfBoundsError",
    "DimensionError",
    "NotSquareError",
    "NumericalError",
    "SingularMatrixError",
]

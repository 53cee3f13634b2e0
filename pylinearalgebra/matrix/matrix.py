"""
Matrix value type.

A Matrix is a dense rows x columns grid of floating scalars. Public
instances are immutable: the backing array is read-only and every
operation returns a new Matrix.

Derived properties are cached:
    - structural flags (triangular, diagonal, identity) as a tri-state
      None/True/False, computed together in one scan on first query
    - determinant
    - hash

Internal algorithms (LU decomposition, inversion, the transformation
factory) work on private scratch matrices created with _scratch(). Every
in-place write goes through _set_entry() or RowOperations, both of which
call _invalidate() to reset the caches to unknown. Scratch matrices are
frozen before they are handed to a caller.
"""

from __future__ import annotations

import warnings
from typing import Any, Sequence, TYPE_CHECKING

import numpy as np
from numpy.typing import ArrayLike, DTypeLike, NDArray

from pylinearalgebra.core.exceptions import DimensionError, ValidationError
from pylinearalgebra.core.formatting import (
    DEFAULT_MATRIX_DECIMALS,
    format_matrix,
    parse_format_spec,
)
from pylinearalgebra.core.scalar import NumpyScalarField, is_real_scalar, resolve_dtype, scalar_field
from pylinearalgebra.core.tolerances import select_tolerance
from pylinearalgebra.core.validation import (
    check_2d,
    check_array,
    check_count,
    check_index,
    check_not_empty,
)
from pylinearalgebra.matrix._structure import is_normal_space, scan_structure
from pylinearalgebra.vector import Vector

if TYPE_CHECKING:
    from pylinearalgebra.decomposition.lu import LUResult


class Matrix:
    """
    Dense numeric matrix.

    Construction:
        Matrix([[1, 2], [3, 4]])            # full 2-D grid (copied)
        Matrix([[1, 2], [3]])               # ragged: padded with zeros, warns
        Matrix(other)                       # copy, cached metadata included
        Matrix.zeros(2, 3)                  # zero-filled
        Matrix.from_vectors(v1, v2)         # vectors become columns
        Matrix.identity(3), Matrix.rotation(theta), ...   # see transforms

    Equality is exact. Use is_close() for a tolerant comparison.
    """

    __slots__ = (
        '_data',
        '_is_triangular',
        '_is_diagonal',
        '_is_identity',
        '_determinant',
        '_hash',
    )

    # Make numpy defer to our reflected operators (np.float64 * Matrix)
    __array_ufunc__ = None

    def __init__(self, data: Matrix | ArrayLike, *, dtype: DTypeLike | None = None):
        if isinstance(data, Matrix):
            if dtype is None:
                self._adopt(data._data.copy())
                self._copy_metadata(data)
            else:
                self._adopt(data._data.astype(resolve_dtype(dtype)))
            self._freeze()
            return

        if isinstance(data, (list, tuple)) and data and all(isinstance(v, Vector) for v in data):
            array = _columns_from_vectors(data, dtype)
        else:
            if isinstance(data, (list, tuple)) and _is_ragged(data):
                data = _pad_ragged(data)
            array = check_array(
                data, 'data',
                dtype=resolve_dtype(dtype) if dtype is not None else None,
            )
            check_2d(array, 'data')
            check_not_empty(array, 'data')
        self._adopt(array)
        self._freeze()

    # ------------------------------------------------------------------
    # Internal construction and mutation
    # ------------------------------------------------------------------

    def _adopt(self, array: NDArray[np.floating[Any]]) -> None:
        self._data = array
        self._invalidate()

    def _copy_metadata(self, other: Matrix) -> None:
        self._is_triangular = other._is_triangular
        self._is_diagonal = other._is_diagonal
        self._is_identity = other._is_identity
        self._determinant = other._determinant
        self._hash = other._hash

    def _invalidate(self) -> None:
        """Reset structural flags, determinant and hash to unknown."""
        self._is_triangular = None
        self._is_diagonal = None
        self._is_identity = None
        self._determinant = None
        self._hash = None

    def _freeze(self) -> Matrix:
        self._data.flags.writeable = False
        return self

    def _set_entry(self, row: int, column: int, value: Any) -> None:
        self._data[row, column] = value
        self._invalidate()

    @classmethod
    def _scratch(cls, array: NDArray[np.floating[Any]]) -> Matrix:
        """Writable matrix owning array, for in-place algorithms."""
        matrix = cls.__new__(cls)
        matrix._adopt(array)
        return matrix

    @classmethod
    def _from_trusted(
        cls,
        array: NDArray[np.floating[Any]],
        *,
        is_triangular: bool | None = None,
        is_diagonal: bool | None = None,
        is_identity: bool | None = None,
        determinant: Any = None,
    ) -> Matrix:
        """
        Frozen matrix owning array, with structure known by construction.

        Skips validation and the structural scan. Used by the
        transformation factory and the decomposition engine.
        """
        matrix = cls.__new__(cls)
        matrix._adopt(array)
        matrix._is_triangular = is_triangular
        matrix._is_diagonal = is_diagonal
        matrix._is_identity = is_identity
        matrix._determinant = determinant
        return matrix._freeze()

    # ------------------------------------------------------------------
    # Alternate constructors
    # ------------------------------------------------------------------

    @classmethod
    def zeros(cls, rows: int, columns: int, *, dtype: DTypeLike | None = None) -> Matrix:
        """Zero-filled matrix of the given size."""
        check_count(rows, 1, 'rows')
        check_count(columns, 1, 'columns')
        return cls._from_trusted(np.zeros((rows, columns), dtype=resolve_dtype(dtype)))

    @classmethod
    def from_vectors(cls, *vectors: Vector, dtype: DTypeLike | None = None) -> Matrix:
        """
        Matrix whose columns are the given vectors.

        Raises:
            ValidationError: If no vector is given
            DimensionError: If the vectors differ in dimension
        """
        return cls._from_trusted(_columns_from_vectors(vectors, dtype))

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def rows(self) -> int:
        return self._data.shape[0]

    @property
    def columns(self) -> int:
        return self._data.shape[1]

    @property
    def shape(self) -> tuple[int, int]:
        return self._data.shape

    @property
    def dtype(self) -> np.dtype:
        return self._data.dtype

    @property
    def field(self) -> NumpyScalarField:
        """Scalar capability set of this matrix's dtype."""
        return scalar_field(self._data.dtype)

    def __getitem__(self, index: tuple[int, int]) -> np.floating:
        if not isinstance(index, tuple) or len(index) != 2:
            raise ValidationError(
                f"index: expected (row, column), got {index!r}"
            )
        row = check_index(index[0], self.rows, 'row')
        column = check_index(index[1], self.columns, 'column')
        return self._data[row, column]

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the grid."""
        return self._data.copy()

    def to_lists(self) -> list[list[float]]:
        return self._data.tolist()

    def to_vectors(self) -> list[Vector]:
        """Columns as vectors."""
        return [Vector._wrap(self._data[:, j].copy()) for j in range(self.columns)]

    def copy(self) -> Matrix:
        return Matrix(self)

    # ------------------------------------------------------------------
    # Structure
    # ------------------------------------------------------------------

    @property
    def is_square(self) -> bool:
        return self.rows == self.columns

    def _ensure_structure(self) -> None:
        if self._is_triangular is None or self._is_diagonal is None or self._is_identity is None:
            flags = scan_structure(self._data)
            self._is_triangular = flags.is_triangular
            self._is_diagonal = flags.is_diagonal
            self._is_identity = flags.is_identity

    @property
    def is_triangular(self) -> bool:
        """Upper or lower triangular."""
        self._ensure_structure()
        return self._is_triangular

    @property
    def is_diagonal(self) -> bool:
        self._ensure_structure()
        return self._is_diagonal

    @property
    def is_identity(self) -> bool:
        self._ensure_structure()
        return self._is_identity

    @property
    def is_normal_space(self) -> bool:
        """Square with last row [0, ..., 0, 1] (homogeneous transform)."""
        return is_normal_space(self._data)

    # ------------------------------------------------------------------
    # Decomposition
    # ------------------------------------------------------------------

    @property
    def determinant(self) -> np.floating:
        """
        Determinant, from the LU factorization; cached.

        Raises:
            NotSquareError: If the matrix is not square
        """
        if self._determinant is None:
            from pylinearalgebra.decomposition.lu import compute_determinant
            self._determinant = compute_determinant(self)
        return self._determinant

    def decompose(self) -> LUResult:
        """LU factorization with permutation and sign."""
        from pylinearalgebra.decomposition.lu import lu_decompose
        return lu_decompose(self)

    def diagonalize_lu(self) -> tuple[Matrix, Matrix]:
        """
        LU factorization with partial pivoting.

        Returns:
            (L, U) with L unit lower triangular and U upper triangular,
            L @ U equal to this matrix with its rows permuted

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If an exact-zero pivot is met
        """
        result = self.decompose()
        return result.L, result.U

    def invert(self) -> Matrix:
        """
        Inverse matrix.

        Raises:
            NotSquareError: If the matrix is not square
            SingularMatrixError: If the matrix is singular
        """
        from pylinearalgebra.decomposition.inverse import invert
        return invert(self)

    # ------------------------------------------------------------------
    # Reshaping
    # ------------------------------------------------------------------

    def transpose(self) -> Matrix:
        transposed = Matrix._from_trusted(
            self._data.T.copy(),
            is_triangular=self._is_triangular,
            is_diagonal=self._is_diagonal,
            is_identity=self._is_identity,
            determinant=self._determinant,
        )
        return transposed

    @property
    def T(self) -> Matrix:
        return self.transpose()

    def pad(self, rows: int, columns: int) -> Matrix:
        """
        Matrix of the given shape holding this one's top-left block.

        Extra cells are zero; cells beyond the new shape are dropped.
        """
        check_count(rows, 1, 'rows')
        check_count(columns, 1, 'columns')
        padded = np.zeros((rows, columns), dtype=self.dtype)
        r = min(rows, self.rows)
        c = min(columns, self.columns)
        padded[:r, :c] = self._data[:r, :c]
        return Matrix._from_trusted(padded)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def _check_same_shape(self, other: Matrix, operation: str) -> None:
        if self.shape != other.shape:
            raise DimensionError(
                f"{operation}: shapes differ, {self.rows}x{self.columns} "
                f"and {other.rows}x{other.columns}"
            )

    def __add__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'addition')
        return Matrix._from_trusted(self._data + other._data)

    def __sub__(self, other: Any) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        self._check_same_shape(other, 'subtraction')
        return Matrix._from_trusted(self._data - other._data)

    def __neg__(self) -> Matrix:
        return Matrix._from_trusted(-self._data)

    def __pos__(self) -> Matrix:
        return self.copy()

    def __mul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, (Matrix, Vector)):
            return self.__matmul__(other)
        if is_real_scalar(other):
            return Matrix._from_trusted(self._data * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Matrix:
        if is_real_scalar(other):
            return Matrix._from_trusted(other * self._data)
        return NotImplemented

    def __truediv__(self, other: Any) -> Matrix:
        if is_real_scalar(other):
            return Matrix._from_trusted(self._data / other)
        return NotImplemented

    def __matmul__(self, other: Any) -> Matrix | Vector:
        if isinstance(other, Matrix):
            if self.columns != other.rows:
                raise DimensionError(
                    f"multiplication: inner dimensions differ, {self.rows}x{self.columns} "
                    f"times {other.rows}x{other.columns}"
                )
            return Matrix._from_trusted(self._data @ other._data)
        if isinstance(other, Vector):
            if self.columns != other.dimension:
                raise DimensionError(
                    f"multiplication: matrix has {self.columns} columns, "
                    f"vector has dimension {other.dimension}"
                )
            return Vector._wrap(self._data @ other.to_numpy())
        return NotImplemented

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Matrix):
            if other is self:
                return True
            if self.shape != other.shape:
                return False
            if self._hash is not None and other._hash is not None and self._hash != other._hash:
                return False
            return bool(np.array_equal(self._data, other._data))
        if isinstance(other, (list, tuple)) and other and all(isinstance(v, Vector) for v in other):
            return self._equals_columns(other)
        if isinstance(other, (list, tuple, np.ndarray)):
            return self._equals_grid(other)
        return NotImplemented

    def _equals_grid(self, other: Sequence[Sequence[Any]] | np.ndarray) -> bool:
        if isinstance(other, (list, tuple)) and _is_ragged(other):
            return False
        try:
            grid = np.asarray(other)
        except ValueError:
            return False
        if not np.issubdtype(grid.dtype, np.number):
            return False
        return grid.shape == self.shape and bool(np.array_equal(self._data, grid))

    def _equals_columns(self, vectors: Sequence[Vector]) -> bool:
        if len(vectors) != self.columns:
            return False
        for j, vector in enumerate(vectors):
            if vector.dimension != self.rows:
                return False
            if not np.array_equal(self._data[:, j], vector.to_numpy()):
                return False
        return True

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.shape, tuple(self._data.ravel().tolist())))
        return self._hash

    def is_close(
        self,
        other: Matrix | ArrayLike,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Tolerant comparison.

        Defaults come from the tolerance tier of this matrix's dtype.
        Matrices of different shape are never close.
        """
        if isinstance(other, Matrix):
            grid = other._data
        else:
            if isinstance(other, (list, tuple)) and _is_ragged(other):
                return False
            try:
                grid = np.asarray(other)
            except ValueError:
                return False
            if not np.issubdtype(grid.dtype, np.number):
                return False
        if grid.shape != self.shape:
            return False
        tier = select_tolerance(self.dtype)
        return bool(np.allclose(
            self._data, grid,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Matrix({self._data.tolist()!r})"

    def __str__(self) -> str:
        return format_matrix(self._data)

    def __format__(self, format_spec: str) -> str:
        layout, decimals = parse_format_spec(format_spec)
        return format_matrix(
            self._data, layout,
            DEFAULT_MATRIX_DECIMALS if decimals is None else decimals,
        )

    # ------------------------------------------------------------------
    # Transformation builders
    # ------------------------------------------------------------------

    @staticmethod
    def identity(dimension: int, *, dtype: DTypeLike | None = None) -> Matrix:
        from pylinearalgebra.transforms.factory import identity
        return identity(dimension, dtype=dtype)

    @staticmethod
    def diagonal(*values: float, dtype: DTypeLike | None = None) -> Matrix:
        from pylinearalgebra.transforms.factory import diagonal
        return diagonal(*values, dtype=dtype)

    @staticmethod
    def scaling(*coefficients: float, dtype: DTypeLike | None = None) -> Matrix:
        from pylinearalgebra.transforms.factory import scaling
        return scaling(*coefficients, dtype=dtype)

    @staticmethod
    def skew(*angles: float, dtype: DTypeLike | None = None) -> Matrix:
        from pylinearalgebra.transforms.factory import skew
        return skew(*angles, dtype=dtype)

    @staticmethod
    def rotation(*angles: float, dtype: DTypeLike | None = None) -> Matrix:
        from pylinearalgebra.transforms.factory import rotation
        return rotation(*angles, dtype=dtype)

    @staticmethod
    def translation(*values: float, dtype: DTypeLike | None = None) -> Matrix:
        from pylinearalgebra.transforms.factory import translation
        return translation(*values, dtype=dtype)

    @staticmethod
    def transform(*values: float, dtype: DTypeLike | None = None) -> Matrix:
        from pylinearalgebra.transforms.factory import transform
        return transform(*values, dtype=dtype)


def _is_ragged(rows: Sequence[Any]) -> bool:
    """True for a sequence of row sequences of unequal lengths."""
    if not all(isinstance(row, (list, tuple, np.ndarray)) for row in rows):
        return False
    return len({len(row) for row in rows}) > 1


def _pad_ragged(rows: Sequence[Sequence[Any]]) -> list[list[Any]]:
    width = max(len(row) for row in rows)
    warnings.warn(
        f"data: ragged rows padded with zeros to shape ({len(rows)}, {width})",
        stacklevel=3,
    )
    return [list(row) + [0] * (width - len(row)) for row in rows]


def _columns_from_vectors(
    vectors: Sequence[Vector],
    dtype: DTypeLike | None,
) -> NDArray[np.floating[Any]]:
    check_count(len(vectors), 1, 'vectors')
    dimension = vectors[0].dimension
    for i, vector in enumerate(vectors):
        if vector.dimension != dimension:
            raise DimensionError(
                f"vectors[{i}]: expected dimension {dimension}, got {vector.dimension}"
            )
    array = np.column_stack([vector.to_numpy() for vector in vectors])
    if dtype is not None:
        array = array.astype(resolve_dtype(dtype))
    return array

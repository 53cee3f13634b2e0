"""
Vector value type.

A Vector is an immutable, fixed-dimension tuple of floating components.
Components live in a read-only numpy array; the Euclidean norm and the
hash are computed on first use and cached.
"""

from __future__ import annotations

from typing import Any, Iterable, Iterator, TYPE_CHECKING

import numpy as np
from numpy.typing import DTypeLike, NDArray

from pylinearalgebra.core.exceptions import ValidationError
from pylinearalgebra.core.formatting import format_vector, parse_format_spec
from pylinearalgebra.core.scalar import NumpyScalarField, is_real_scalar, resolve_dtype, scalar_field
from pylinearalgebra.core.tolerances import select_tolerance
from pylinearalgebra.core.validation import (
    check_1d,
    check_array,
    check_index,
    check_not_empty,
    check_same_dimension,
)

if TYPE_CHECKING:
    from pylinearalgebra.vector._barycenter import WeightLike


class Vector:
    """
    Fixed-dimension numeric vector.

    Construction:
        Vector(3.0, 4.0)                  # explicit components
        Vector([3.0, 4.0])                # one sequence or numpy array
        Vector(other)                     # copy
        Vector(1, 2, dtype=np.float32)    # explicit scalar type

    Equality is exact, component by component. Use is_close() for a
    tolerant comparison.
    """

    __slots__ = ('_components', '_norm', '_hash')

    # Make numpy defer to our reflected operators (np.float64 * Vector)
    __array_ufunc__ = None

    def __init__(self, *components: Any, dtype: DTypeLike | None = None):
        if len(components) == 1:
            single = components[0]
            if isinstance(single, Vector):
                source = single._components
                array = source.copy() if dtype is None else source.astype(resolve_dtype(dtype))
                self._set(array)
                if dtype is None:
                    self._norm = single._norm
                return
            if isinstance(single, (list, tuple, np.ndarray)):
                components = single

        array = check_array(
            components, 'components',
            dtype=resolve_dtype(dtype) if dtype is not None else None,
        )
        check_1d(array, 'components')
        check_not_empty(array, 'components')
        self._set(array)

    def _set(self, array: NDArray[np.floating[Any]]) -> None:
        array.flags.writeable = False
        self._components = array
        self._norm = None
        self._hash = None

    @classmethod
    def _wrap(cls, array: NDArray[np.floating[Any]]) -> Vector:
        """Adopt an already validated 1-D floating array without copying."""
        vector = cls.__new__(cls)
        vector._set(array)
        return vector

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    @property
    def dimension(self) -> int:
        return self._components.shape[0]

    @property
    def dtype(self) -> np.dtype:
        return self._components.dtype

    @property
    def field(self) -> NumpyScalarField:
        """Scalar capability set of this vector's dtype."""
        return scalar_field(self._components.dtype)

    def __len__(self) -> int:
        return self._components.shape[0]

    def __getitem__(self, index: int) -> np.floating:
        return self._components[check_index(index, self.dimension, 'index')]

    def __iter__(self) -> Iterator[np.floating]:
        return iter(self._components)

    def to_numpy(self) -> NDArray[np.floating[Any]]:
        """Writable copy of the components."""
        return self._components.copy()

    def to_list(self) -> list[float]:
        return self._components.tolist()

    # ------------------------------------------------------------------
    # Metric
    # ------------------------------------------------------------------

    @property
    def norm(self) -> np.floating:
        """Euclidean norm, computed once."""
        if self._norm is None:
            c = self._components
            self._norm = self.field.sqrt(np.sum(c * c))
        return self._norm

    def normalize(self) -> Vector:
        """
        Vector scaled to unit norm.

        The result is non-finite for a zero vector; callers guard against
        that case themselves.
        """
        return self / self.norm

    def dot(self, other: Vector) -> np.floating:
        """Scalar product."""
        if not isinstance(other, Vector):
            raise ValidationError(
                f"other: expected Vector, got {type(other).__name__}"
            )
        check_same_dimension(self.dimension, other.dimension, names=('self', 'other'))
        return np.dot(self._components, other._components)

    # ------------------------------------------------------------------
    # Arithmetic
    # ------------------------------------------------------------------

    def __add__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_dimension(self.dimension, other.dimension, names=('left', 'right'))
        return Vector._wrap(self._components + other._components)

    def __sub__(self, other: Any) -> Vector:
        if not isinstance(other, Vector):
            return NotImplemented
        check_same_dimension(self.dimension, other.dimension, names=('left', 'right'))
        return Vector._wrap(self._components - other._components)

    def __neg__(self) -> Vector:
        return Vector._wrap(-self._components)

    def __pos__(self) -> Vector:
        return Vector(self)

    def __mul__(self, other: Any) -> Vector | np.floating:
        if isinstance(other, Vector):
            return self.dot(other)
        if is_real_scalar(other):
            return Vector._wrap(self._components * other)
        return NotImplemented

    def __rmul__(self, other: Any) -> Vector:
        if is_real_scalar(other):
            return Vector._wrap(other * self._components)
        return NotImplemented

    def __truediv__(self, other: Any) -> Vector:
        if is_real_scalar(other):
            return Vector._wrap(self._components / other)
        return NotImplemented

    # ------------------------------------------------------------------
    # Homogeneous coordinates
    # ------------------------------------------------------------------

    def to_normal_space(self) -> Vector:
        """Append a trailing 1 so affine transforms apply as linear maps."""
        return Vector._wrap(np.append(self._components, self.field.one))

    def from_normal_space(self) -> Vector:
        """
        Drop the trailing homogeneous component.

        When that component is not 1 the vector is first divided by it
        (perspective divide).

        Raises:
            ValidationError: If the vector has a single component
        """
        if self.dimension < 2:
            raise ValidationError(
                f"vector: homogeneous vector needs at least 2 components, got {self.dimension}"
            )
        components = self._components
        last = components[-1]
        if last != self.field.one:
            components = components / last
        return Vector._wrap(components[:-1].copy())

    # ------------------------------------------------------------------
    # Multi-vector operations
    # ------------------------------------------------------------------

    @staticmethod
    def product(*vectors: Vector) -> Vector:
        """Generalized cross product of n-1 vectors of dimension n."""
        from pylinearalgebra.vector._product import cross_product
        return cross_product(*vectors)

    @staticmethod
    def barycenter(
        points: Iterable[Vector],
        weights: WeightLike | None = None,
    ) -> tuple[np.floating, Vector]:
        """Weighted average of points; returns (total_weight, point)."""
        from pylinearalgebra.vector._barycenter import compute_barycenter
        return compute_barycenter(points, weights)

    # ------------------------------------------------------------------
    # Comparison
    # ------------------------------------------------------------------

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Vector):
            if other is self:
                return True
            other_components = other._components
        elif isinstance(other, (list, tuple, np.ndarray)):
            try:
                other_components = np.asarray(other)
            except ValueError:
                return False
            if not np.issubdtype(other_components.dtype, np.number):
                return False
        else:
            return NotImplemented
        return (
            self._components.shape == other_components.shape
            and bool(np.array_equal(self._components, other_components))
        )

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.dimension, tuple(self._components.tolist())))
        return self._hash

    def is_close(
        self,
        other: Vector,
        rtol: float | None = None,
        atol: float | None = None,
    ) -> bool:
        """
        Tolerant comparison.

        Defaults come from the tolerance tier of this vector's dtype.
        Vectors of different dimension are never close.
        """
        if isinstance(other, Vector):
            other_components = other._components
        else:
            try:
                other_components = np.asarray(other)
            except ValueError:
                return False
            if not np.issubdtype(other_components.dtype, np.number):
                return False
        if self._components.shape != other_components.shape:
            return False
        tier = select_tolerance(self.dtype)
        return bool(np.allclose(
            self._components, other_components,
            rtol=tier.rtol if rtol is None else rtol,
            atol=tier.atol if atol is None else atol,
        ))

    # ------------------------------------------------------------------
    # Display
    # ------------------------------------------------------------------

    def __repr__(self) -> str:
        return f"Vector({', '.join(str(c) for c in self._components)})"

    def __str__(self) -> str:
        return format_vector(self._components)

    def __format__(self, format_spec: str) -> str:
        _, decimals = parse_format_spec(format_spec)
        return format_vector(self._components, decimals)

"""
Tests for the Vector value type.

Validates:
    - Construction from components, sequences and other vectors
    - Immutability of the component storage
    - Norm, normalize, dot product, arithmetic
    - Homogeneous (normal space) conversions
    - Exact equality, hashing, tolerant is_close
    - Diagnostic formatting
"""

import numpy as np
import pytest

from pylinearalgebra import Vector
from pylinearalgebra.core.exceptions import (
    DimensionError,
    IndexOutOfBoundsError,
    ValidationError,
)


# ═══════════════════════════════════════════════════════════════════════
# Construction
# ═══════════════════════════════════════════════════════════════════════


class TestConstruction:

    def test_from_components(self):
        v = Vector(1, 2, 3)
        assert v.dimension == 3
        assert v.dtype == np.float64
        assert v.to_list() == [1.0, 2.0, 3.0]

    def test_from_sequence(self):
        assert Vector([1, 2]) == Vector(1, 2)
        assert Vector((1, 2)) == Vector(1, 2)
        assert Vector(np.array([1.0, 2.0])) == Vector(1, 2)

    def test_single_component(self):
        v = Vector(5)
        assert v.dimension == 1
        assert v[0] == 5.0

    def test_empty_rejected(self):
        with pytest.raises(ValidationError, match="dimension cannot be 0"):
            Vector()

    def test_empty_sequence_rejected(self):
        with pytest.raises(ValidationError, match="dimension cannot be 0"):
            Vector([])

    def test_nested_rejected(self):
        with pytest.raises(DimensionError):
            Vector([[1, 2], [3, 4]])

    def test_non_numeric_rejected(self):
        with pytest.raises(ValidationError):
            Vector("a", "b")

    def test_explicit_dtype(self):
        v = Vector(1, 2, dtype=np.float32)
        assert v.dtype == np.float32

    def test_copy_is_equal_and_distinct(self):
        v = Vector(1, 2)
        w = Vector(v)
        assert w == v
        assert w is not v

    def test_copy_with_dtype(self):
        w = Vector(Vector(1, 2), dtype=np.float32)
        assert w.dtype == np.float32

    def test_caller_array_not_aliased(self):
        data = np.array([1.0, 2.0])
        v = Vector(data)
        data[0] = 99.0
        assert v[0] == 1.0


class TestImmutability:

    def test_components_read_only(self):
        v = Vector(1, 2)
        with pytest.raises(ValueError):
            v._components[0] = 5.0

    def test_to_numpy_is_writable_copy(self):
        v = Vector(1, 2)
        arr = v.to_numpy()
        arr[0] = 5.0
        assert v[0] == 1.0


# ═══════════════════════════════════════════════════════════════════════
# Element access
# ═══════════════════════════════════════════════════════════════════════


class TestElementAccess:

    def test_getitem(self):
        v = Vector(3, 4)
        assert v[0] == 3.0
        assert v[1] == 4.0

    def test_out_of_range(self):
        with pytest.raises(IndexOutOfBoundsError):
            Vector(3, 4)[2]

    def test_negative_index_rejected(self):
        with pytest.raises(IndexOutOfBoundsError):
            Vector(3, 4)[-1]

    def test_iteration_and_len(self):
        v = Vector(1, 2, 3)
        assert len(v) == 3
        assert list(v) == [1.0, 2.0, 3.0]


# ═══════════════════════════════════════════════════════════════════════
# Norm and dot product
# ═══════════════════════════════════════════════════════════════════════


class TestNorm:

    def test_norm_3_4_5(self):
        assert Vector(3, 4).norm == 5.0

    def test_norm_cached(self):
        v = Vector(3, 4)
        assert v.norm is v.norm

    def test_norm_non_negative(self, rng):
        for _ in range(10):
            v = Vector(rng.standard_normal(4))
            assert v.norm >= 0

    def test_normalize_unit_norm(self, rng):
        v = Vector(rng.standard_normal(5))
        assert v.normalize().norm == pytest.approx(1.0)

    def test_normalize_zero_vector_non_finite(self):
        with np.errstate(invalid='ignore', divide='ignore'):
            result = Vector(0, 0).normalize()
        assert not np.all(np.isfinite(result.to_numpy()))


class TestDot:

    def test_dot(self):
        assert Vector(1, 2, 3).dot(Vector(4, 5, 6)) == 32.0

    def test_star_between_vectors_is_dot(self):
        assert Vector(1, 2, 3) * Vector(4, 5, 6) == 32.0

    def test_dimension_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent dimensions"):
            Vector(1, 2).dot(Vector(1, 2, 3))

    def test_non_vector_rejected(self):
        with pytest.raises(ValidationError, match="expected Vector"):
            Vector(1, 2).dot([1, 2])


# ═══════════════════════════════════════════════════════════════════════
# Arithmetic
# ═══════════════════════════════════════════════════════════════════════


class TestArithmetic:

    def test_add(self):
        assert Vector(1, 2) + Vector(3, 4) == Vector(4, 6)

    def test_subtract(self):
        assert Vector(5, 5) - Vector(3, 4) == Vector(2, 1)

    def test_add_then_subtract_round_trips(self):
        v = Vector(1, -2, 3)
        w = Vector(7, 8, -9)
        assert (v + w) - w == v

    def test_add_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            Vector(1, 2) + Vector(1, 2, 3)

    def test_subtract_dimension_mismatch(self):
        with pytest.raises(DimensionError):
            Vector(1, 2) - Vector(1, 2, 3)

    def test_negate(self):
        assert -Vector(1, -2) == Vector(-1, 2)

    def test_unary_plus_copies(self):
        v = Vector(1, 2)
        w = +v
        assert w == v and w is not v

    def test_scalar_multiply_both_sides(self):
        assert Vector(1, 2) * 3 == Vector(3, 6)
        assert 3 * Vector(1, 2) == Vector(3, 6)

    def test_numpy_scalar_multiply(self):
        assert np.float64(2.0) * Vector(1, 2) == Vector(2, 4)

    def test_scalar_divide(self):
        assert Vector(2, 4) / 2 == Vector(1, 2)

    def test_add_non_vector_is_type_error(self):
        with pytest.raises(TypeError):
            Vector(1, 2) + 1

    def test_operands_untouched(self):
        v = Vector(1, 2)
        w = Vector(3, 4)
        _ = v + w
        assert v == Vector(1, 2)
        assert w == Vector(3, 4)


# ═══════════════════════════════════════════════════════════════════════
# Homogeneous coordinates
# ═══════════════════════════════════════════════════════════════════════


class TestNormalSpace:

    def test_to_normal_space_appends_one(self):
        assert Vector(2, 3).to_normal_space() == Vector(2, 3, 1)

    def test_from_normal_space_drops_one(self):
        assert Vector(2, 3, 1).from_normal_space() == Vector(2, 3)

    def test_from_normal_space_perspective_divide(self):
        assert Vector(4, 6, 2).from_normal_space() == Vector(2, 3)

    def test_round_trip(self):
        v = Vector(1.5, -2.5, 3.0)
        assert v.to_normal_space().from_normal_space() == v

    def test_single_component_rejected(self):
        with pytest.raises(ValidationError, match="at least 2 components"):
            Vector(1).from_normal_space()


# ═══════════════════════════════════════════════════════════════════════
# Equality and hashing
# ═══════════════════════════════════════════════════════════════════════


class TestEquality:

    def test_exact_equality(self):
        assert Vector(1, 2) == Vector(1.0, 2.0)

    def test_round_off_not_equal(self):
        assert Vector(0.1 + 0.2) != Vector(0.3)

    def test_equal_to_sequence(self):
        assert Vector(1, 2) == (1, 2)
        assert Vector(1, 2) == [1, 2]
        assert Vector(1, 2) == np.array([1.0, 2.0])

    def test_different_dimension_not_equal(self):
        assert Vector(1, 2) != Vector(1, 2, 0)
        assert Vector(1, 2) != (1, 2, 0)

    def test_not_equal_to_other_types(self):
        assert Vector(1, 2) != "(1, 2)"
        assert Vector(1, 2) != ("a", "b")

    def test_ragged_sequence_not_equal(self):
        assert Vector(1, 2) != [[1, 2], [3]]

    def test_hash_consistent_with_equality(self):
        assert hash(Vector(1, 2)) == hash(Vector(1.0, 2.0))
        assert len({Vector(1, 2), Vector(1, 2), Vector(2, 1)}) == 2

    def test_negative_zero_hashes_like_zero(self):
        v = Vector(0.0, 1.0)
        w = Vector(-0.0, 1.0)
        assert v == w
        assert hash(v) == hash(w)


class TestIsClose:

    def test_round_off_is_close(self):
        assert Vector(0.1 + 0.2).is_close(Vector(0.3))

    def test_far_is_not_close(self):
        assert not Vector(1, 2).is_close(Vector(1, 2.1))

    def test_custom_tolerance(self):
        assert Vector(1, 2).is_close(Vector(1, 2.1), atol=0.2)

    def test_dimension_mismatch_not_close(self):
        assert not Vector(1, 2).is_close(Vector(1, 2, 3))

    def test_against_sequence(self):
        assert Vector(1, 2).is_close((1, 2))

    def test_ragged_sequence_not_close(self):
        assert not Vector(1, 2).is_close([[1, 2], [3]])

    def test_non_numeric_sequence_not_close(self):
        assert not Vector(1, 2).is_close(["a", "b"])


# ═══════════════════════════════════════════════════════════════════════
# Display
# ═══════════════════════════════════════════════════════════════════════


class TestDisplay:

    def test_str(self):
        assert str(Vector(1, 2.5)) == "(1.0, 2.5)"

    def test_repr(self):
        assert repr(Vector(1, 2)) == "Vector(1.0, 2.0)"

    def test_format_decimals(self):
        assert f"{Vector(1.234, 5.678):.1}" == "(1.2, 5.7)"

    def test_format_bad_spec(self):
        with pytest.raises(ValidationError):
            format(Vector(1, 2), "Q")

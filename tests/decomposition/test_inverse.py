"""
Tests for matrix inversion.
"""

import numpy as np
import pytest

from pylinearalgebra import Matrix
from pylinearalgebra.core.exceptions import NotSquareError, SingularMatrixError
from pylinearalgebra.decomposition import invert


class TestInvert:

    def test_scaled_identity(self):
        assert Matrix([[2, 0], [0, 2]]).invert() == [[0.5, 0], [0, 0.5]]

    def test_2x2(self):
        m = Matrix([[4, 7], [2, 6]])
        expected = np.array([[0.6, -0.7], [-0.2, 0.4]])
        np.testing.assert_allclose(invert(m).to_numpy(), expected, rtol=1e-12)

    def test_input_not_mutated(self):
        m = Matrix([[4, 7], [2, 6]])
        m.invert()
        assert m == [[4, 7], [2, 6]]

    def test_identity_returns_copy(self):
        m = Matrix.identity(3)
        inverse = m.invert()
        assert inverse == m
        assert inverse is not m

    def test_product_is_identity(self, square_matrix):
        product = square_matrix * square_matrix.invert()
        assert product.is_close(Matrix.identity(square_matrix.rows))

    def test_left_inverse_too(self, square_matrix):
        product = square_matrix.invert() * square_matrix
        assert product.is_close(Matrix.identity(square_matrix.rows))

    def test_double_inverse(self, square_matrix):
        assert square_matrix.invert().invert().is_close(square_matrix)

    def test_requires_pivoting(self):
        m = Matrix([[0, 1], [1, 0]])
        assert m.invert() == [[0, 1], [1, 0]]

    def test_triangular(self):
        m = Matrix([[2, 1], [0, 4]])
        np.testing.assert_allclose(m.invert().to_numpy(), [[0.5, -0.125], [0, 0.25]])

    def test_inverse_determinant(self):
        m = Matrix([[4, 7], [2, 6]])
        inverse = m.invert()
        np.testing.assert_allclose(inverse.determinant, 1 / m.determinant, rtol=1e-12)

    def test_rotation_inverse_is_transpose(self):
        r = Matrix.rotation(0.3, 0.5, 0.7)
        assert r.invert().is_close(r.transpose())

    def test_keeps_dtype(self):
        inverse = Matrix([[4, 7], [2, 6]], dtype=np.float32).invert()
        assert inverse.dtype == np.float32
        assert (inverse * Matrix([[4, 7], [2, 6]], dtype=np.float32)).is_close(
            Matrix.identity(2, dtype=np.float32)
        )

    def test_singular(self):
        with pytest.raises(SingularMatrixError):
            Matrix([[1, 2], [2, 4]]).invert()

    def test_zero_matrix(self):
        with pytest.raises(SingularMatrixError):
            Matrix.zeros(2, 2).invert()

    def test_non_square(self):
        with pytest.raises(NotSquareError):
            Matrix([[1, 2, 3], [4, 5, 6]]).invert()

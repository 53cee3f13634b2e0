"""
pytest configuration and shared fixtures.
"""

import pytest
import numpy as np

from pylinearalgebra import Matrix


@pytest.fixture
def rng():
    """Seeded random number generator for reproducible tests."""
    return np.random.default_rng(42)


@pytest.fixture
def square_data(rng):
    """Well-conditioned 5x5 array (diagonally dominant)."""
    n = 5
    A = rng.standard_normal((n, n))
    A += n * np.eye(n)
    return A


@pytest.fixture
def square_matrix(square_data):
    return Matrix(square_data)


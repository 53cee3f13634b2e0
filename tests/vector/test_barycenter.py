"""
Tests for the weighted barycenter.
"""

import numpy as np
import pytest

from pylinearalgebra import Vector
from pylinearalgebra.core.exceptions import DimensionError, ValidationError
from pylinearalgebra.vector import compute_barycenter


class TestBarycenter:

    def test_unweighted_is_mean(self):
        total, center = Vector.barycenter([Vector(0, 0), Vector(2, 0), Vector(1, 3)])
        assert total == 3.0
        assert center == Vector(1, 1)

    def test_weighted(self):
        total, center = compute_barycenter([Vector(0, 0), Vector(4, 8)], weights=[3, 1])
        assert total == 4.0
        assert center == Vector(1, 2)

    def test_single_point(self):
        total, center = compute_barycenter([Vector(5, -1)])
        assert total == 1.0
        assert center == Vector(5, -1)

    def test_matches_numpy_average(self, rng):
        points = rng.standard_normal((6, 3))
        weights = rng.uniform(0.5, 2.0, size=6)
        total, center = compute_barycenter([Vector(p) for p in points], weights)
        assert total == pytest.approx(weights.sum())
        np.testing.assert_allclose(
            center.to_numpy(), np.average(points, axis=0, weights=weights), rtol=1e-12
        )

    def test_accepts_sequences_as_points(self):
        _, center = compute_barycenter([(0, 0), (2, 2)])
        assert center == Vector(1, 1)

    def test_no_points(self):
        with pytest.raises(ValidationError, match="at least 1"):
            compute_barycenter([])

    def test_mixed_dimensions(self):
        with pytest.raises(DimensionError, match=r"points\[1\]"):
            compute_barycenter([Vector(1, 2), Vector(1, 2, 3)])

    def test_weight_count_mismatch(self):
        with pytest.raises(DimensionError, match="Inconsistent dimensions"):
            compute_barycenter([Vector(1, 2), Vector(3, 4)], weights=[1, 2, 3])

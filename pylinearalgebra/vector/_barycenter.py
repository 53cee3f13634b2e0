"""
Barycenter (weighted average) of a set of points.
"""

from __future__ import annotations

from typing import Any, Iterable, Sequence, Union

import numpy as np
from numpy.typing import NDArray

from pylinearalgebra.core.exceptions import DimensionError
from pylinearalgebra.core.validation import (
    check_1d,
    check_array,
    check_count,
    check_same_dimension,
)
from pylinearalgebra.vector.vector import Vector

WeightLike = Union[Sequence[float], NDArray[np.floating[Any]]]


def compute_barycenter(
    points: Iterable[Vector],
    weights: WeightLike | None = None,
) -> tuple[np.floating, Vector]:
    """
    Weighted average position of points.

    Args:
        points: One or more vectors of a common dimension
        weights: One weight per point. If None, every point weighs 1.

    Returns:
        (total_weight, barycenter)

    Raises:
        ValidationError: If no point is given
        DimensionError: If points differ in dimension or weights don't
            match the number of points

    Note:
        A zero total weight gives a non-finite barycenter; the caller
        guards against it, as with Vector.normalize().
    """
    points = [p if isinstance(p, Vector) else Vector(p) for p in points]
    check_count(len(points), 1, 'points')

    dimension = points[0].dimension
    for i, point in enumerate(points):
        if point.dimension != dimension:
            raise DimensionError(
                f"points[{i}]: expected dimension {dimension}, got {point.dimension}"
            )

    stacked = np.stack([point.to_numpy() for point in points])

    if weights is None:
        w = np.ones(len(points), dtype=stacked.dtype)
    else:
        w = check_array(weights, 'weights')
        check_1d(w, 'weights')
        check_same_dimension(len(points), w.shape[0], names=('points', 'weights'))

    total_weight = np.sum(w)
    averaged = np.sum(w[:, np.newaxis] * stacked, axis=0) / total_weight
    return total_weight, Vector._wrap(averaged)

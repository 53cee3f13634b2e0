"""
Tolerance tiers for approximate comparison.

Default equality on vectors and matrices is exact. Round-off from
inversion, rotation and normalization makes mathematically equal values
compare unequal, so the value types also expose is_close(), whose default
tolerances come from the tier matching their dtype:
- FP64: double precision (float64 and longdouble)
- FP32: single precision
- FP16: half precision

Used by is_close() and by the test suite.
"""

from dataclasses import dataclass

import numpy as np
from numpy.typing import DTypeLike

from pylinearalgebra.core.scalar import resolve_dtype


@dataclass(frozen=True)
class ToleranceTier:
    """Tolerance specification for numerical comparison."""
    rtol: float
    atol: float
    name: str
    description: str


FP64 = ToleranceTier(
    rtol=1e-10,
    atol=1e-12,
    name='fp64',
    description='Double precision, round-off of O(n^3) elimination on small matrices',
)

FP32 = ToleranceTier(
    rtol=1e-4,
    atol=1e-5,
    name='fp32',
    description='Single precision',
)

FP16 = ToleranceTier(
    rtol=1e-2,
    atol=1e-3,
    name='fp16',
    description='Half precision',
)


def select_tolerance(dtype: DTypeLike | None = None) -> ToleranceTier:
    """Select the tolerance tier for a floating dtype."""
    resolved = resolve_dtype(dtype)
    if resolved.itemsize >= np.dtype(np.float64).itemsize:
        return FP64
    if resolved == np.float32:
        return FP32
    return FP16

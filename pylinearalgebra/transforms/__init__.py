"""
Transformation factory.

Public API:
    identity(n)            n x n identity (cached master, copy per call)
    diagonal(*values)      diagonal matrix
    scaling(*coefs)        homogeneous scaling
    skew(*angles)          homogeneous shear, k(k-1) angles
    rotation(*angles)      homogeneous rotation, k(k-1)/2 angles
    translation(*values)   homogeneous translation (last row)
    transform(*values)     raw affine transform, d(d-1) values

Every builder accepts dtype= (default float64).
"""

from pylinearalgebra.transforms.factory import (
    diagonal,
    identity,
    rotation,
    scaling,
    skew,
    transform,
    translation,
)

__all__ = [
    "diagonal",
    "identity",
    "rotation",
    "scaling",
    "skew",
    "transform",
    "translation",
]

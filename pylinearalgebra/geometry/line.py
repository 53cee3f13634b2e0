"""
Lines in n-dimensional space.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

import numpy as np

from pylinearalgebra.core.exceptions import DimensionError
from pylinearalgebra.vector import Vector


@dataclass(frozen=True)
class Line:
    """
    Line through `point` along `direction`.

    Attributes:
        point: A point on the line
        direction: Direction vector, same dimension as point

    Raises:
        DimensionError: If point and direction differ in dimension
    """
    point: Vector
    direction: Vector

    def __post_init__(self):
        point = self.point if isinstance(self.point, Vector) else Vector(self.point)
        direction = self.direction if isinstance(self.direction, Vector) else Vector(self.direction)
        if point.dimension != direction.dimension:
            raise DimensionError(
                f"direction: expected dimension {point.dimension} to match point, "
                f"got {direction.dimension}"
            )
        object.__setattr__(self, 'point', point)
        object.__setattr__(self, 'direction', direction)

    @property
    def dimension(self) -> int:
        return self.point.dimension

    def distance_to(self, point: Vector | Any) -> np.floating:
        """
        Shortest distance from a point to the line.

        The point is projected orthogonally onto the line; the result is
        the norm of the remaining offset. A zero direction gives a
        non-finite result.

        Raises:
            DimensionError: If the point's dimension differs from the line's
        """
        if not isinstance(point, Vector):
            point = Vector(point)
        if point.dimension != self.dimension:
            raise DimensionError(
                f"point: expected dimension {self.dimension}, got {point.dimension}"
            )
        offset = point - self.point
        t = offset.dot(self.direction) / self.direction.dot(self.direction)
        closest = self.point + t * self.direction
        return (point - closest).norm

    def copy(self) -> Line:
        return Line(Vector(self.point), Vector(self.direction))

    def __str__(self) -> str:
        return f"Point: {self.point}, Direction: {self.direction}"

"""Point domain model.

A two-dimensional integer coordinate with value semantics: use copy()
to obtain an independent instance before mutating.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, replace

from sample_types.domain.errors.point import DistanceOverflowError


@dataclass(eq=True)
class Point:
    """Two-dimensional integer point.

    Attributes:
        x: Horizontal coordinate (any integer, including negative).
        y: Vertical coordinate (any integer, including negative).
    """

    x: int
    y: int

    def distance(self) -> float:
        """Return the Euclidean distance from the origin.

        Coordinates are converted to float before squaring, so the result
        is exact for Pythagorean triples such as (3, 4).

        Returns:
            sqrt(x**2 + y**2) as a float.

        Raises:
            DistanceOverflowError: If a coordinate exceeds float range.
        """
        try:
            result = math.hypot(self.x, self.y)
        except OverflowError as exc:
            raise DistanceOverflowError(self.x, self.y) from exc
        if math.isinf(result):
            raise DistanceOverflowError(self.x, self.y)
        return result

    def copy(self) -> Point:
        """Return an independent copy of this point."""
        return replace(self)

"""Point arithmetic domain errors."""

from __future__ import annotations

from sample_types.domain.exceptions import SampleTypesError


class DistanceOverflowError(SampleTypesError):
    """Raised when a distance cannot be represented as a float.

    Attributes:
        x: The x coordinate of the offending point.
        y: The y coordinate of the offending point.
    """

    def __init__(self, x: int, y: int) -> None:
        self.x = x
        self.y = y
        super().__init__(
            "Point coordinates are too large for floating-point distance"
        )

"""Domain errors for sample_types.

Available errors:
- InvalidNameError: Entity name missing, not a string, or blank
- InvalidIdentifierError: Entity identifier is not an integer
- DistanceOverflowError: Point coordinates exceed float range
"""

from sample_types.domain.errors.entity import (
    InvalidIdentifierError,
    InvalidNameError,
)
from sample_types.domain.errors.point import DistanceOverflowError

__all__: list[str] = [
    "DistanceOverflowError",
    "InvalidIdentifierError",
    "InvalidNameError",
]

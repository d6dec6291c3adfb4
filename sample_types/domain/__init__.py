"""
Domain layer - Pure types for sample_types.

This layer contains:
- Domain models (NamedEntity, Description, Point, TitledDescription)
- Ports (CapabilityProtocol)
- Domain exceptions

CRITICAL: This layer must NOT import from application, infrastructure, or config.
Only stdlib and typing imports are allowed.
"""

from sample_types.domain.errors import (
    DistanceOverflowError,
    InvalidIdentifierError,
    InvalidNameError,
)
from sample_types.domain.exceptions import SampleTypesError
from sample_types.domain.models import (
    Description,
    NamedEntity,
    Point,
    TitledDescription,
)
from sample_types.domain.ports import CapabilityProtocol

__all__: list[str] = [
    "CapabilityProtocol",
    "Description",
    "DistanceOverflowError",
    "InvalidIdentifierError",
    "InvalidNameError",
    "NamedEntity",
    "Point",
    "SampleTypesError",
    "TitledDescription",
]

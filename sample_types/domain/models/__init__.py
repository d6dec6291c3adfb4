"""Domain models for sample_types."""

from sample_types.domain.models.description import Description
from sample_types.domain.models.named_entity import NamedEntity
from sample_types.domain.models.point import Point
from sample_types.domain.models.titled_description import TitledDescription

__all__: list[str] = [
    "Description",
    "NamedEntity",
    "Point",
    "TitledDescription",
]

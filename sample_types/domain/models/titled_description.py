"""TitledDescription domain model.

Usage:
    first = TitledDescription(title="Title", description="Body")
    second = TitledDescription(title="Title", description="Body")
    assert first == second
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, eq=True)
class TitledDescription:
    """Immutable title and description pair.

    Two instances are equal when both fields are equal. The model is
    frozen, so it is also hashable.

    Attributes:
        title: Short heading.
        description: Body text.
    """

    title: str
    description: str

    def to_dict(self) -> dict[str, str]:
        """Serialize to a plain dictionary."""
        return {
            "title": self.title,
            "description": self.description,
        }

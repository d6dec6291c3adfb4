"""Named entity domain errors.

This module defines errors raised while constructing or mutating a
NamedEntity:
- InvalidNameError: name is not a non-blank string
- InvalidIdentifierError: identifier is not an integer
"""

from __future__ import annotations

from typing import Any

from sample_types.domain.exceptions import SampleTypesError


class InvalidNameError(SampleTypesError):
    """Raised when an entity is constructed without a usable name.

    Attributes:
        name: The rejected value (may be None or a non-string).
    """

    def __init__(self, name: Any) -> None:
        self.name = name
        super().__init__(f"Entity name must be a non-blank string, got {name!r}")


class InvalidIdentifierError(SampleTypesError):
    """Raised when an entity identifier is set to a non-integer value.

    Attributes:
        identifier: The rejected value.
    """

    def __init__(self, identifier: Any) -> None:
        self.identifier = identifier
        super().__init__(
            f"Entity identifier must be an int, got {type(identifier).__name__}"
        )

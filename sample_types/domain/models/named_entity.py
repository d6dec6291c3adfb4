"""NamedEntity domain model.

An entity carrying a mutable integer identifier and a name that is fixed
at construction. The name has a public read accessor only; there is no
setter.

Usage:
    entity = NamedEntity("Alice")
    entity.id = 5
    entity.display()  # Id: 5, Name: Alice
"""

from __future__ import annotations

import sys
from typing import TextIO

from sample_types.domain.errors.entity import (
    InvalidIdentifierError,
    InvalidNameError,
)


class NamedEntity:
    """Entity with a settable identifier and a read-only name.

    Attributes:
        id: Integer identifier, 0 until assigned.
        name: Name given at construction (read-only).

    Raises:
        InvalidNameError: If name is not a non-blank string.
    """

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidNameError(name)
        self._name = name
        self._id = 0

    @property
    def id(self) -> int:
        return self._id

    @id.setter
    def id(self, value: int) -> None:
        # bool is an int subclass but never a meaningful identifier
        if not isinstance(value, int) or isinstance(value, bool):
            raise InvalidIdentifierError(value)
        self._id = value

    @property
    def name(self) -> str:
        return self._name

    def format(self) -> str:
        """Return the display line without a trailing line break."""
        return f"Id: {self._id}, Name: {self._name}"

    def display(self, stream: TextIO | None = None) -> None:
        """Write the identifier and name as one line.

        Args:
            stream: Text stream to write to. Defaults to sys.stdout.
        """
        print(self.format(), file=stream if stream is not None else sys.stdout)

    def __repr__(self) -> str:
        return f"NamedEntity(id={self._id!r}, name={self._name!r})"

"""Description domain model.

A free-form, mutable text holder. It has no link to NamedEntity even
though both describe the same subject; it is created independently.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import TextIO


@dataclass
class Description:
    """Mutable description text.

    Attributes:
        description: Current text. None until set.
    """

    description: str | None = None

    def display(self, stream: TextIO | None = None) -> None:
        """Write the description as one line; an unset value writes an empty line.

        Args:
            stream: Text stream to write to. Defaults to sys.stdout.
        """
        text = self.description if self.description is not None else ""
        print(text, file=stream if stream is not None else sys.stdout)

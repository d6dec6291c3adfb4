"""Showcase runner configuration.

This module defines the inputs for the showcase run with environment
variable overrides.

Environment Variables:
- SHOWCASE_ENTITY_NAME: Name given to the demonstration entity (default: Alice)
- SHOWCASE_ENTITY_ID: Identifier assigned after construction (default: 1)
- SHOWCASE_POINT_X: Point x coordinate (default: 3)
- SHOWCASE_POINT_Y: Point y coordinate (default: 4)
- SHOWCASE_ENVIRONMENT: Logging mode, development or production (default: development)
"""

from __future__ import annotations

import os
from dataclasses import dataclass


def _get_int_env(key: str, default: int) -> int:
    """Get integer environment variable with default.

    Args:
        key: Environment variable name.
        default: Default value if not set or invalid.

    Returns:
        Parsed integer value or default.
    """
    value = os.environ.get(key)
    if value is None:
        return default
    try:
        return int(value)
    except ValueError:
        return default


DEFAULT_ENTITY_NAME = "Alice"
DEFAULT_ENTITY_ID = 1
DEFAULT_POINT_X = 3
DEFAULT_POINT_Y = 4
DEFAULT_ENVIRONMENT = "development"

VALID_ENVIRONMENTS: frozenset[str] = frozenset({"development", "production"})


@dataclass(frozen=True)
class ShowcaseConfig:
    """Configuration for a showcase run.

    Attributes:
        entity_name: Name passed to the NamedEntity constructor.
        entity_id: Identifier set on the entity after construction.
        point_x: Point x coordinate.
        point_y: Point y coordinate.
        environment: 'development' (console logs) or 'production' (JSON logs).
    """

    entity_name: str = DEFAULT_ENTITY_NAME
    entity_id: int = DEFAULT_ENTITY_ID
    point_x: int = DEFAULT_POINT_X
    point_y: int = DEFAULT_POINT_Y
    environment: str = DEFAULT_ENVIRONMENT

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not self.entity_name.strip():
            raise ValueError("entity_name must be non-blank")
        if self.environment not in VALID_ENVIRONMENTS:
            raise ValueError(
                f"environment must be one of {sorted(VALID_ENVIRONMENTS)}, "
                f"got {self.environment!r}"
            )

    @classmethod
    def from_environment(cls) -> ShowcaseConfig:
        """Create config from environment variables with defaults.

        Returns:
            ShowcaseConfig with values from environment or defaults.
        """
        return cls(
            entity_name=os.environ.get("SHOWCASE_ENTITY_NAME", DEFAULT_ENTITY_NAME),
            entity_id=_get_int_env("SHOWCASE_ENTITY_ID", DEFAULT_ENTITY_ID),
            point_x=_get_int_env("SHOWCASE_POINT_X", DEFAULT_POINT_X),
            point_y=_get_int_env("SHOWCASE_POINT_Y", DEFAULT_POINT_Y),
            environment=os.environ.get("SHOWCASE_ENVIRONMENT", DEFAULT_ENVIRONMENT),
        )


DEFAULT_SHOWCASE_CONFIG = ShowcaseConfig()

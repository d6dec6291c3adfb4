"""Configuration module for sample_types.

Available Configurations:
- ShowcaseConfig: Inputs and logging mode for the showcase runner
"""

from sample_types.config.showcase_config import (
    DEFAULT_SHOWCASE_CONFIG,
    ShowcaseConfig,
)

__all__ = [
    "ShowcaseConfig",
    "DEFAULT_SHOWCASE_CONFIG",
]

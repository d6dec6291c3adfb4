"""Unit tests for ShowcaseConfig."""

import os
from unittest.mock import patch

import pytest

from sample_types.config import DEFAULT_SHOWCASE_CONFIG, ShowcaseConfig


class TestShowcaseConfigDefaults:
    """Tests for default values."""

    def test_defaults(self) -> None:
        assert DEFAULT_SHOWCASE_CONFIG.entity_name == "Alice"
        assert DEFAULT_SHOWCASE_CONFIG.entity_id == 1
        assert (DEFAULT_SHOWCASE_CONFIG.point_x, DEFAULT_SHOWCASE_CONFIG.point_y) == (3, 4)
        assert DEFAULT_SHOWCASE_CONFIG.environment == "development"

    def test_is_frozen(self) -> None:
        with pytest.raises(AttributeError):
            DEFAULT_SHOWCASE_CONFIG.entity_id = 2  # type: ignore[misc]


class TestShowcaseConfigValidation:
    """Tests for __post_init__ validation."""

    def test_rejects_blank_name(self) -> None:
        with pytest.raises(ValueError, match="entity_name"):
            ShowcaseConfig(entity_name="  ")

    def test_rejects_unknown_environment(self) -> None:
        with pytest.raises(ValueError, match="environment"):
            ShowcaseConfig(environment="staging")


class TestShowcaseConfigFromEnvironment:
    """Tests for from_environment()."""

    def test_reads_overrides(self) -> None:
        env = {
            "SHOWCASE_ENTITY_NAME": "Bob",
            "SHOWCASE_ENTITY_ID": "9",
            "SHOWCASE_POINT_X": "-6",
            "SHOWCASE_POINT_Y": "8",
            "SHOWCASE_ENVIRONMENT": "production",
        }
        with patch.dict(os.environ, env, clear=True):
            config = ShowcaseConfig.from_environment()

        assert config == ShowcaseConfig(
            entity_name="Bob",
            entity_id=9,
            point_x=-6,
            point_y=8,
            environment="production",
        )

    def test_invalid_integer_falls_back_to_default(self) -> None:
        with patch.dict(os.environ, {"SHOWCASE_POINT_X": "three"}, clear=True):
            config = ShowcaseConfig.from_environment()

        assert config.point_x == 3

    def test_empty_environment_gives_defaults(self) -> None:
        with patch.dict(os.environ, {}, clear=True):
            assert ShowcaseConfig.from_environment() == DEFAULT_SHOWCASE_CONFIG

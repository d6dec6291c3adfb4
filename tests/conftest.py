"""
Pytest configuration and shared fixtures for sample_types tests.

Testing Standards:
- Unit tests go in tests/unit/, mirroring the package layout
- Use capsys for stdout assertions
- Use structlog.testing.capture_logs for log assertions
"""

from collections.abc import Iterator

import pytest
import structlog

from sample_types.config import ShowcaseConfig
from sample_types.infrastructure.stubs import CapabilityStub


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from sample_types import __version__

    return __version__


@pytest.fixture
def capability_stub() -> CapabilityStub:
    """Provide a fresh capability stub."""
    return CapabilityStub(label="test-capability")


@pytest.fixture
def showcase_config() -> ShowcaseConfig:
    """Provide a showcase config with the classic 3-4-5 point."""
    return ShowcaseConfig(entity_name="Bob", entity_id=1, point_x=3, point_y=4)


@pytest.fixture(autouse=True)
def reset_structlog() -> Iterator[None]:
    """Restore structlog defaults so a configured output stream never outlives its test."""
    yield
    structlog.reset_defaults()

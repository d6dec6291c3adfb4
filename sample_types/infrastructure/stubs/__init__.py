"""Stub implementations of domain ports for tests and local runs."""

from sample_types.infrastructure.stubs.capability_stub import (
    DEFAULT_CAPABILITY_LABEL,
    CapabilityStub,
)

__all__: list[str] = ["CapabilityStub", "DEFAULT_CAPABILITY_LABEL"]

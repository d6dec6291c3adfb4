"""Capability Stub - Test implementation of CapabilityProtocol.

Usage:
    capability = CapabilityStub(label="printer")
    capability.perform_action()
    assert capability.action_count == 1

    # Clean up for next test
    capability.clear()
"""

from __future__ import annotations

from sample_types.domain.ports.capability import CapabilityProtocol

DEFAULT_CAPABILITY_LABEL: str = "capability-stub"


class CapabilityStub(CapabilityProtocol):
    """Stub implementation of CapabilityProtocol.

    Records each perform_action() call so tests can assert on it.
    Optionally raises a configured error instead of performing the action.
    """

    def __init__(self, label: str = DEFAULT_CAPABILITY_LABEL) -> None:
        self._label = label
        self._action_count = 0
        self._error: Exception | None = None

    @property
    def label(self) -> str:
        return self._label

    @property
    def action_count(self) -> int:
        """Number of completed perform_action() calls."""
        return self._action_count

    def set_error(self, error: Exception | None) -> None:
        """Make the next perform_action() calls raise error (None to reset)."""
        self._error = error

    def perform_action(self) -> None:
        if self._error is not None:
            raise self._error
        self._action_count += 1

    def clear(self) -> None:
        """Reset recorded calls and configured error."""
        self._action_count = 0
        self._error = None

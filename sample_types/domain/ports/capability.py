"""Capability port - contract for types that can perform an action.

A conforming type supplies two members:
- perform_action(): run the action for its side effects
- label: read-only string attribute

No production adapter ships with the package. CapabilityStub in
infrastructure/stubs is the conforming test double.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class CapabilityProtocol(Protocol):
    """Abstract interface for an actionable capability.

    Note:
        runtime_checkable only verifies that the members exist, not their
        signatures.
    """

    def perform_action(self) -> None:
        """Perform the capability's action."""
        ...

    @property
    def label(self) -> str:
        """Read-only label describing the capability."""
        ...

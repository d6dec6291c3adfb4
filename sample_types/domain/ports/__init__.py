"""
Ports (interfaces) for sample_types.

Ports define abstract interfaces that infrastructure adapters implement.
"""

from sample_types.domain.ports.capability import CapabilityProtocol

__all__: list[str] = ["CapabilityProtocol"]

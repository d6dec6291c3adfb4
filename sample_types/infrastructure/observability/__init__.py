"""Observability infrastructure for structured logging.

Usage:
    from sample_types.infrastructure.observability import configure_structlog

    configure_structlog(environment="production")
"""

from sample_types.infrastructure.observability.logging import (
    configure_structlog,
    get_logger_for_service,
)

__all__: list[str] = [
    "configure_structlog",
    "get_logger_for_service",
]

"""Infrastructure layer - logging configuration and stub adapters."""

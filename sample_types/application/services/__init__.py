"""Application services for sample_types."""

from sample_types.application.services.showcase_service import (
    ShowcaseResult,
    ShowcaseService,
)

__all__: list[str] = ["ShowcaseResult", "ShowcaseService"]

"""Showcase service - runs each demonstration type once.

The service builds every domain type from a ShowcaseConfig, writes the
display lines to a stream and reports a summary. Each step is logged;
domain errors are logged and re-raised to the caller.

Flow:
    run()
      ├─ NamedEntity(name) -> set id -> display()
      ├─ Description() -> display() unset, then set -> display()
      ├─ Point(x, y) -> distance()
      ├─ TitledDescription equality check
      └─ capability.perform_action()
"""

from __future__ import annotations

import io
import sys
from dataclasses import dataclass
from typing import TextIO

from sample_types.config.showcase_config import ShowcaseConfig
from sample_types.domain.exceptions import SampleTypesError
from sample_types.domain.models import (
    Description,
    NamedEntity,
    Point,
    TitledDescription,
)
from sample_types.domain.ports.capability import CapabilityProtocol
from sample_types.infrastructure.observability import get_logger_for_service

SAMPLE_DESCRIPTION = "A nested description, created on its own"
SAMPLE_TITLE = "Title"
SAMPLE_BODY = "Body"


@dataclass(frozen=True)
class ShowcaseResult:
    """Summary of a showcase run.

    Attributes:
        entity: The entity that was displayed.
        lines: Every line written to the output stream, in order.
        distance: Point distance from the origin.
        records_equal: Whether two identical TitledDescription values compared equal.
        records_differ: Whether TitledDescription values with different bodies compared unequal.
        capability_label: Label read from the capability after its action ran.
    """

    entity: NamedEntity
    lines: tuple[str, ...]
    distance: float
    records_equal: bool
    records_differ: bool
    capability_label: str


class ShowcaseService:
    """Application service that exercises every demonstration type.

    Usage:
        service = ShowcaseService(config, CapabilityStub())
        result = service.run()
    """

    def __init__(
        self,
        config: ShowcaseConfig,
        capability: CapabilityProtocol,
        stream: TextIO | None = None,
    ) -> None:
        """Initialize the service.

        Args:
            config: Inputs for the run.
            capability: Capability whose action is performed at the end.
            stream: Destination for display lines. Defaults to sys.stdout.
        """
        self._config = config
        self._capability = capability
        self._stream = stream
        self._log = get_logger_for_service(self.__class__.__name__)

    def run(self) -> ShowcaseResult:
        """Run the showcase.

        Returns:
            ShowcaseResult summarizing what was displayed and computed.

        Raises:
            SampleTypesError: If any domain type rejects the configured input.
        """
        log = self._log.bind(
            entity_name=self._config.entity_name,
            point=(self._config.point_x, self._config.point_y),
        )
        log.info("showcase_started")

        # Display into a buffer first so the result can report the lines.
        buffer = io.StringIO()
        try:
            entity = NamedEntity(self._config.entity_name)
            entity.id = self._config.entity_id
            entity.display(buffer)
            log.debug("showcase_step_completed", step="named_entity", entity_id=entity.id)

            description = Description()
            description.display(buffer)
            description.description = SAMPLE_DESCRIPTION
            description.display(buffer)
            log.debug("showcase_step_completed", step="description")

            distance = Point(self._config.point_x, self._config.point_y).distance()
            log.debug("showcase_step_completed", step="point", distance=distance)

            first = TitledDescription(SAMPLE_TITLE, SAMPLE_BODY)
            second = TitledDescription(SAMPLE_TITLE, SAMPLE_BODY)
            other = TitledDescription(SAMPLE_TITLE, SAMPLE_BODY + " (edited)")
            log.debug("showcase_step_completed", step="titled_description")

            self._capability.perform_action()
            log.debug(
                "showcase_step_completed",
                step="capability",
                label=self._capability.label,
            )
        except SampleTypesError as exc:
            log.error(
                "showcase_failed",
                error_type=type(exc).__name__,
                error=str(exc),
            )
            raise

        output = buffer.getvalue()
        target = self._stream if self._stream is not None else sys.stdout
        target.write(output)

        result = ShowcaseResult(
            entity=entity,
            lines=tuple(output.splitlines()),
            distance=distance,
            records_equal=first == second,
            records_differ=first != other,
            capability_label=self._capability.label,
        )
        log.info("showcase_completed", lines=len(result.lines), distance=distance)
        return result

from typing import Iterable

import structlog

from ..application.interfaces import IDomainEventPublisher
from ..domain.events import DomainEvent
from .metrics import domain_events_published_total

logger = structlog.get_logger(__name__)


class LoggingEventPublisher(IDomainEventPublisher):
    """In-process publisher: records each event in the log and metrics."""

    async def publish(self, events: Iterable[DomainEvent]) -> None:
        for event in events:
            name = type(event).__name__
            domain_events_published_total.labels(event=name).inc()
            logger.info("domain_event_published", event_type=name, **_event_fields(event))


def _event_fields(event: DomainEvent) -> dict:
    return {k: str(v) for k, v in vars(event).items()}

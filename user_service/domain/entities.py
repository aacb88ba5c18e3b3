from dataclasses import dataclass, field
from uuid import UUID

from .events import DomainEvent


@dataclass
class User:
    id: UUID
    email: str
    first_name: str
    last_name: str
    password_hash: str
    _domain_events: list[DomainEvent] = field(
        default_factory=list, init=False, repr=False, compare=False
    )

    @property
    def domain_events(self) -> tuple[DomainEvent, ...]:
        return tuple(self._domain_events)

    def raise_event(self, event: DomainEvent) -> None:
        self._domain_events.append(event)

    def pull_domain_events(self) -> list[DomainEvent]:
        """Return pending events and clear them; the caller becomes the owner."""
        events, self._domain_events = self._domain_events, []
        return events

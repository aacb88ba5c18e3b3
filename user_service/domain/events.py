from dataclasses import dataclass, field
from datetime import datetime, timezone
from uuid import UUID


@dataclass(frozen=True)
class DomainEvent:
    """Marker base for facts recorded by an entity."""


@dataclass(frozen=True)
class UserRegistered(DomainEvent):
    user_id: UUID
    occurred_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

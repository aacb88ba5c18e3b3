from typing import Iterable
from uuid import UUID

from ..domain.entities import User
from ..domain.events import DomainEvent


class IUserRepository:
    async def add(self, user: User) -> None: ...
    async def get_by_id(self, user_id: UUID) -> User | None: ...
    async def get_by_email(self, email: str) -> User | None: ...


class IPasswordHasher:
    def hash(self, plain: str) -> str: ...
    def verify(self, plain: str, hashed: str) -> bool: ...


class ITokenProvider:
    def create(self, user: User) -> str: ...


class IUserContext:
    @property
    def user_id(self) -> UUID: ...


class IDomainEventPublisher:
    async def publish(self, events: Iterable[DomainEvent]) -> None: ...

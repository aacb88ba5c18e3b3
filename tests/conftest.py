import os
import sys
from dataclasses import replace

import pytest
import pytest_asyncio

CURRENT_DIR = os.path.dirname(__file__)
SERVICE_ROOT = os.path.dirname(CURRENT_DIR)
if SERVICE_ROOT not in sys.path:
    sys.path.insert(0, SERVICE_ROOT)

# settings are read at import time
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///./test_users.db")
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")
os.environ.setdefault("SECRET_KEY", "test-secret")

from user_service.application.exceptions import DuplicateEmailError
from user_service.application.interfaces import (
    IDomainEventPublisher, IPasswordHasher, IUserContext, IUserRepository,
)
from user_service.infrastructure.db import build_engine, build_session_factory
from user_service.infrastructure.models import Base


class InMemoryUserRepository(IUserRepository):
    """Dict-backed store; hands out copies so callers can't mutate stored users."""

    def __init__(self):
        self.users = {}
        self.add_calls = 0

    async def add(self, user):
        self.add_calls += 1
        if any(u.email == user.email for u in self.users.values()):
            raise DuplicateEmailError(user.email)
        self.users[user.id] = replace(user)

    async def get_by_id(self, user_id):
        u = self.users.get(user_id)
        return replace(u) if u else None

    async def get_by_email(self, email):
        for u in self.users.values():
            if u.email == email:
                return replace(u)
        return None


class FakeHasher(IPasswordHasher):
    def hash(self, plain): return f"hashed::{plain[::-1]}"
    def verify(self, plain, hashed): return hashed == self.hash(plain)


class FixedUserContext(IUserContext):
    def __init__(self, user_id):
        self._user_id = user_id

    @property
    def user_id(self):
        return self._user_id


class RecordingPublisher(IDomainEventPublisher):
    def __init__(self):
        self.published = []

    async def publish(self, events):
        self.published.extend(events)


@pytest.fixture
def repo():
    return InMemoryUserRepository()


@pytest.fixture
def hasher():
    return FakeHasher()


@pytest_asyncio.fixture
async def engine(tmp_path):
    """Engine on a throwaway file database with the schema created."""
    engine = build_engine(f"sqlite+aiosqlite:///{tmp_path / 'users.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return build_session_factory(engine)

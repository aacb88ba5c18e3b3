from uuid import UUID

import structlog
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from .metrics import db_queries_total
from .models import UserORM
from ..application.exceptions import DuplicateEmailError, StorageError
from ..application.interfaces import IDomainEventPublisher, IUserRepository
from ..domain.entities import User

logger = structlog.get_logger(__name__)


def to_domain(u: UserORM) -> User:
    return User(
        id=u.id,
        email=u.email,
        first_name=u.first_name,
        last_name=u.last_name,
        password_hash=u.password_hash,
    )


# sqlite names the column, postgres the unique index
EMAIL_CONSTRAINT_MARKERS = ("users.email", "ix_users_email")


def _is_email_conflict(e: IntegrityError) -> bool:
    message = str(e.orig)
    return any(marker in message for marker in EMAIL_CONSTRAINT_MARKERS)


class UserRepository(IUserRepository):
    """SQLAlchemy-backed user store.

    Reads return fresh User objects built from the row; nothing handed out is
    tracked by the session, so mutating a returned User never reaches the
    database.
    """

    def __init__(self, db: AsyncSession, publisher: IDomainEventPublisher | None = None):
        self.db = db
        self.publisher = publisher

    async def add(self, user: User) -> None:
        row = UserORM(
            id=user.id,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
            password_hash=user.password_hash,
        )
        db_queries_total.labels(operation="insert").inc()
        try:
            self.db.add(row)
            await self.db.commit()
        except IntegrityError as e:
            await self.db.rollback()
            if not _is_email_conflict(e):
                logger.error("user_insert_failed", user_id=str(user.id), error=str(e.orig))
                raise StorageError("Integrity constraint violated", "insert") from e
            logger.info("user_insert_conflict", user_id=str(user.id))
            raise DuplicateEmailError(user.email) from e
        except OperationalError as e:
            await self.db.rollback()
            logger.error("user_insert_failed", user_id=str(user.id), error=str(e))
            raise StorageError("Connection or operational error", "insert") from e
        except SQLAlchemyError as e:
            await self.db.rollback()
            logger.error("user_insert_failed", user_id=str(user.id), error=str(e))
            raise StorageError("Database operation failed", "insert") from e
        self.db.expunge(row)

        if self.publisher is not None:
            await self.publisher.publish(user.pull_domain_events())

    async def get_by_id(self, user_id: UUID) -> User | None:
        return await self._first(select(UserORM).where(UserORM.id == user_id))

    async def get_by_email(self, email: str) -> User | None:
        return await self._first(select(UserORM).where(UserORM.email == email))

    async def _first(self, stmt) -> User | None:
        db_queries_total.labels(operation="select").inc()
        try:
            result = await self.db.execute(stmt)
            row = result.scalar_one_or_none()
            if row is None:
                return None
            user = to_domain(row)
            self.db.expunge(row)
            return user
        except SQLAlchemyError as e:
            logger.error("user_query_failed", error=str(e))
            raise StorageError("Database query failed", "select") from e

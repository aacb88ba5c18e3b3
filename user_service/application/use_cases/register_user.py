from uuid import UUID, uuid4

import structlog

from ...domain.entities import User
from ...domain.errors import UserErrors
from ...domain.events import UserRegistered
from ...domain.result import Result
from ..dto import RegisterUserCommand
from ..exceptions import DuplicateEmailError
from ..interfaces import IPasswordHasher, IUserRepository

logger = structlog.get_logger(__name__)


class RegisterUser:
    def __init__(self, repo: IUserRepository, hasher: IPasswordHasher):
        self.repo = repo
        self.hasher = hasher

    async def execute(self, command: RegisterUserCommand) -> Result[UUID]:
        if await self.repo.get_by_email(command.email) is not None:
            logger.info("registration_rejected", reason="email_not_unique")
            return Result.failure(UserErrors.EMAIL_NOT_UNIQUE)

        user = User(
            id=uuid4(),
            email=command.email,
            first_name=command.first_name,
            last_name=command.last_name,
            password_hash=self.hasher.hash(command.password),
        )
        user.raise_event(UserRegistered(user_id=user.id))

        try:
            await self.repo.add(user)
        except DuplicateEmailError:
            # lost a race with a concurrent registration between lookup and insert
            logger.info("registration_rejected", reason="email_not_unique_on_insert")
            return Result.failure(UserErrors.EMAIL_NOT_UNIQUE)

        logger.info("user_registered", user_id=str(user.id))
        return Result.success(user.id)

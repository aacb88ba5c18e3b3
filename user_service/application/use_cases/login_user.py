import structlog

from ...domain.errors import UserErrors
from ...domain.result import Result
from ..dto import LoginUserCommand
from ..interfaces import IPasswordHasher, ITokenProvider, IUserRepository

logger = structlog.get_logger(__name__)


class LoginUser:
    def __init__(
        self,
        repo: IUserRepository,
        hasher: IPasswordHasher,
        tokens: ITokenProvider,
    ):
        self.repo = repo
        self.hasher = hasher
        self.tokens = tokens

    async def execute(self, command: LoginUserCommand) -> Result[str]:
        user = await self.repo.get_by_email(command.email)
        # same failure for unknown email and bad password
        if user is None or not self.hasher.verify(command.password, user.password_hash):
            return Result.failure(UserErrors.INVALID_CREDENTIALS)

        logger.info("user_logged_in", user_id=str(user.id))
        return Result.success(self.tokens.create(user))

import structlog

from ...domain.errors import UserErrors
from ...domain.result import Result
from ..dto import GetUserByIdQuery, UserResponse
from ..interfaces import IUserContext, IUserRepository

logger = structlog.get_logger(__name__)


class GetUserById:
    def __init__(self, repo: IUserRepository, user_context: IUserContext):
        self.repo = repo
        self.user_context = user_context

    async def execute(self, query: GetUserByIdQuery) -> Result[UserResponse]:
        if query.user_id != self.user_context.user_id:
            logger.warning(
                "user_lookup_denied",
                caller_id=str(self.user_context.user_id),
                target_id=str(query.user_id),
            )
            return Result.failure(UserErrors.UNAUTHORIZED)

        user = await self.repo.get_by_id(query.user_id)
        if user is None:
            return Result.failure(UserErrors.not_found(query.user_id))

        return Result.success(UserResponse.from_user(user))

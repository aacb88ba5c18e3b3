import structlog

from ...domain.errors import UserErrors
from ...domain.result import Result
from ..dto import GetUserByEmailQuery, UserResponse
from ..interfaces import IUserContext, IUserRepository

logger = structlog.get_logger(__name__)


class GetUserByEmail:
    """Returns the caller's own profile, looked up by email.

    Only the owner may read it: a match belonging to somebody else is
    reported as Unauthorized, not as the other user's data.
    """

    def __init__(self, repo: IUserRepository, user_context: IUserContext):
        self.repo = repo
        self.user_context = user_context

    async def execute(self, query: GetUserByEmailQuery) -> Result[UserResponse]:
        user = await self.repo.get_by_email(query.email)
        if user is None:
            return Result.failure(UserErrors.NOT_FOUND_BY_EMAIL)

        if user.id != self.user_context.user_id:
            logger.warning(
                "user_lookup_denied",
                caller_id=str(self.user_context.user_id),
                target_id=str(user.id),
            )
            return Result.failure(UserErrors.UNAUTHORIZED)

        return Result.success(UserResponse.from_user(user))

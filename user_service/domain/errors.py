from dataclasses import dataclass
from enum import Enum
from uuid import UUID


class ErrorType(str, Enum):
    FAILURE = "failure"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"


@dataclass(frozen=True)
class Error:
    code: str
    description: str
    type: ErrorType = ErrorType.FAILURE


class UserErrors:
    EMAIL_NOT_UNIQUE = Error(
        "Users.EmailNotUnique",
        "The provided email is not unique",
        ErrorType.CONFLICT,
    )
    NOT_FOUND_BY_EMAIL = Error(
        "Users.NotFoundByEmail",
        "The user with the specified email was not found",
        ErrorType.NOT_FOUND,
    )
    UNAUTHORIZED = Error(
        "Users.Unauthorized",
        "You are not authorized to perform this action",
        ErrorType.FORBIDDEN,
    )
    INVALID_CREDENTIALS = Error(
        "Users.InvalidCredentials",
        "Email or password is incorrect",
        ErrorType.UNAUTHORIZED,
    )

    @staticmethod
    def not_found(user_id: UUID) -> Error:
        return Error(
            "Users.NotFound",
            f"The user with the Id = '{user_id}' was not found",
            ErrorType.NOT_FOUND,
        )

from dataclasses import dataclass
from uuid import UUID

from ..domain.entities import User


@dataclass(frozen=True)
class RegisterUserCommand:
    email: str
    first_name: str
    last_name: str
    password: str

    def __repr__(self) -> str:
        return (
            f"RegisterUserCommand(email={self.email!r}, first_name={self.first_name!r}, "
            f"last_name={self.last_name!r}, password='***')"
        )


@dataclass(frozen=True)
class LoginUserCommand:
    email: str
    password: str

    def __repr__(self) -> str:
        return f"LoginUserCommand(email={self.email!r}, password='***')"


@dataclass(frozen=True)
class GetUserByEmailQuery:
    email: str


@dataclass(frozen=True)
class GetUserByIdQuery:
    user_id: UUID


@dataclass(frozen=True)
class UserResponse:
    id: UUID
    first_name: str
    last_name: str
    email: str

    @classmethod
    def from_user(cls, user: User) -> "UserResponse":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
        )

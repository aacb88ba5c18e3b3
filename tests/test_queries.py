from dataclasses import asdict
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest

from conftest import FixedUserContext
from user_service.application.dto import (
    GetUserByEmailQuery, GetUserByIdQuery, LoginUserCommand, RegisterUserCommand,
)
from user_service.application.use_cases.get_user_by_email import GetUserByEmail
from user_service.application.use_cases.get_user_by_id import GetUserById
from user_service.application.use_cases.login_user import LoginUser
from user_service.application.use_cases.register_user import RegisterUser
from user_service.domain.errors import ErrorType, UserErrors


async def register(repo, hasher, email="a@x.com", first="A", last="B", password="pw1"):
    result = await RegisterUser(repo, hasher).execute(
        RegisterUserCommand(email=email, first_name=first, last_name=last, password=password)
    )
    return result.value


# --- GetUserByEmail

@pytest.mark.asyncio
async def test_get_by_email_unknown_email(repo):
    uc = GetUserByEmail(repo, FixedUserContext(uuid4()))
    result = await uc.execute(GetUserByEmailQuery(email="nobody@x.com"))
    assert result.is_failure
    assert result.error == UserErrors.NOT_FOUND_BY_EMAIL


@pytest.mark.asyncio
async def test_get_by_email_other_users_record_is_unauthorized(repo, hasher):
    await register(repo, hasher)
    uc = GetUserByEmail(repo, FixedUserContext(uuid4()))

    result = await uc.execute(GetUserByEmailQuery(email="a@x.com"))

    assert result.is_failure
    assert result.error == UserErrors.UNAUTHORIZED


@pytest.mark.asyncio
async def test_get_by_email_own_record_returns_projection(repo, hasher):
    user_id = await register(repo, hasher)
    uc = GetUserByEmail(repo, FixedUserContext(user_id))

    result = await uc.execute(GetUserByEmailQuery(email="a@x.com"))

    assert result.is_success
    assert asdict(result.value) == {
        "id": user_id, "first_name": "A", "last_name": "B", "email": "a@x.com",
    }
    assert not hasattr(result.value, "password_hash")


@pytest.mark.asyncio
async def test_get_by_email_has_no_side_effects():
    repo = AsyncMock()
    repo.get_by_email.return_value = None
    await GetUserByEmail(repo, FixedUserContext(uuid4())).execute(GetUserByEmailQuery(email="a@x.com"))
    repo.add.assert_not_called()


@pytest.mark.asyncio
async def test_worked_example(repo, hasher):
    register_uc = RegisterUser(repo, hasher)
    first = await register_uc.execute(RegisterUserCommand("a@x.com", "A", "B", "pw1"))
    second = await register_uc.execute(RegisterUserCommand("a@x.com", "C", "D", "pw2"))
    assert first.is_success
    assert second.error == UserErrors.EMAIL_NOT_UNIQUE

    id1 = first.value
    own = await GetUserByEmail(repo, FixedUserContext(id1)).execute(GetUserByEmailQuery("a@x.com"))
    assert (own.value.id, own.value.first_name, own.value.last_name, own.value.email) == (
        id1, "A", "B", "a@x.com",
    )

    other = await GetUserByEmail(repo, FixedUserContext(uuid4())).execute(GetUserByEmailQuery("a@x.com"))
    assert other.error == UserErrors.UNAUTHORIZED


# --- GetUserById

@pytest.mark.asyncio
async def test_get_by_id_own_record(repo, hasher):
    user_id = await register(repo, hasher)
    result = await GetUserById(repo, FixedUserContext(user_id)).execute(GetUserByIdQuery(user_id))
    assert result.is_success
    assert result.value.email == "a@x.com"


@pytest.mark.asyncio
async def test_get_by_id_checks_identity_before_lookup():
    repo = AsyncMock()
    result = await GetUserById(repo, FixedUserContext(uuid4())).execute(GetUserByIdQuery(uuid4()))
    assert result.error == UserErrors.UNAUTHORIZED
    repo.get_by_id.assert_not_called()


@pytest.mark.asyncio
async def test_get_by_id_missing_user(repo):
    user_id = uuid4()
    result = await GetUserById(repo, FixedUserContext(user_id)).execute(GetUserByIdQuery(user_id))
    assert result.error.code == "Users.NotFound"
    assert result.error.type is ErrorType.NOT_FOUND


# --- LoginUser

class StubTokens:
    def create(self, user):
        return f"token-for-{user.id}"


@pytest.mark.asyncio
async def test_login_issues_token(repo, hasher):
    user_id = await register(repo, hasher, password="pw1")
    result = await LoginUser(repo, hasher, StubTokens()).execute(LoginUserCommand("a@x.com", "pw1"))
    assert result.value == f"token-for-{user_id}"


@pytest.mark.asyncio
async def test_login_wrong_password_and_unknown_email_fail_alike(repo, hasher):
    await register(repo, hasher, password="pw1")
    uc = LoginUser(repo, hasher, StubTokens())

    wrong = await uc.execute(LoginUserCommand("a@x.com", "nope"))
    unknown = await uc.execute(LoginUserCommand("z@x.com", "pw1"))

    assert wrong.error == unknown.error == UserErrors.INVALID_CREDENTIALS

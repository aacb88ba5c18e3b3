from dataclasses import asdict
from uuid import UUID

from fastapi import APIRouter, Depends, Query, Request, status
from pydantic import EmailStr
from sqlalchemy.ext.asyncio import AsyncSession

from ....application.dto import (
    GetUserByEmailQuery, GetUserByIdQuery, LoginUserCommand, RegisterUserCommand,
)
from ....application.use_cases.get_user_by_email import GetUserByEmail
from ....application.use_cases.get_user_by_id import GetUserById
from ....application.use_cases.login_user import LoginUser
from ....application.use_cases.register_user import RegisterUser
from ....config import settings
from ....domain.errors import ErrorType
from ....infrastructure.db import get_db
from ....infrastructure.events import LoggingEventPublisher
from ....infrastructure.metrics import registration_conflicts_total, users_registered_total
from ....infrastructure.repositories import UserRepository
from ....infrastructure.security import JwtTokenProvider, PasswordHasher
from ..authz import UserContext, get_user_context
from ..errors import problem
from ..rate_limit import limiter
from ..schemas import LoginReq, RegisterReq, RegisteredResp, TokenResp, UserResp

router = APIRouter(prefix="/api/users", tags=["users"])

@router.get("/health")
def health():
    return {"status": "ok"}

@router.post("/register", response_model=RegisteredResp, status_code=status.HTTP_201_CREATED)
@limiter.limit(f"{settings.RATE_LIMIT_PER_MINUTE}/minute")
async def register(request: Request, payload: RegisterReq, db: AsyncSession = Depends(get_db)):
    uc = RegisterUser(
        repo=UserRepository(db, publisher=LoggingEventPublisher()),
        hasher=PasswordHasher(),
    )
    result = await uc.execute(RegisterUserCommand(
        email=payload.email,
        first_name=payload.first_name,
        last_name=payload.last_name,
        password=payload.password,
    ))
    if result.is_failure:
        if result.error.type is ErrorType.CONFLICT:
            registration_conflicts_total.inc()
        raise problem(result.error)
    users_registered_total.inc()
    return RegisteredResp(id=result.value)

# brute-force protection: stricter than registration
@router.post("/login", response_model=TokenResp)
@limiter.limit(f"{settings.LOGIN_RATE_LIMIT_PER_MINUTE}/minute")
async def login(request: Request, payload: LoginReq, db: AsyncSession = Depends(get_db)):
    uc = LoginUser(repo=UserRepository(db), hasher=PasswordHasher(), tokens=JwtTokenProvider())
    result = await uc.execute(LoginUserCommand(email=payload.email, password=payload.password))
    if result.is_failure:
        raise problem(result.error)
    return TokenResp(access_token=result.value)

@router.get("/by-email", response_model=UserResp)
async def get_by_email(
    email: EmailStr = Query(...),
    ctx: UserContext = Depends(get_user_context),
    db: AsyncSession = Depends(get_db),
):
    result = await GetUserByEmail(UserRepository(db), ctx).execute(GetUserByEmailQuery(email=email))
    if result.is_failure:
        raise problem(result.error)
    return UserResp(**asdict(result.value))

@router.get("/{user_id}", response_model=UserResp)
async def get_by_id(
    user_id: UUID,
    ctx: UserContext = Depends(get_user_context),
    db: AsyncSession = Depends(get_db),
):
    result = await GetUserById(UserRepository(db), ctx).execute(GetUserByIdQuery(user_id=user_id))
    if result.is_failure:
        raise problem(result.error)
    return UserResp(**asdict(result.value))

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

class RegisterReq(BaseModel):
    email: EmailStr
    first_name: str = Field(min_length=1, max_length=100)
    last_name: str = Field(min_length=1, max_length=100)
    password: str = Field(min_length=8)

class LoginReq(BaseModel):
    email: EmailStr
    password: str

class RegisteredResp(BaseModel):
    id: UUID

class UserResp(BaseModel):
    id: UUID
    first_name: str
    last_name: str
    email: str

class TokenResp(BaseModel):
    access_token: str
    token_type: str = "bearer"

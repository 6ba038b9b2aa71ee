# tutorhub/schemas/auth.py
from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    # plain str: a malformed address must fail exactly like an unknown one
    email: str
    password: str


class RefreshRequest(BaseModel):
    refresh_token: str


class TokenPair(BaseModel):
    token: str
    refresh_token: str
    token_type: str = "bearer"


class AccessToken(BaseModel):
    token: str
    token_type: str = "bearer"


class UserPublic(BaseModel):
    id: int
    email: str
    name: str

    model_config = ConfigDict(from_attributes=True)


class StudentIdentity(BaseModel):
    id: int
    email: str | None = None
    name: str
    level: str
    enrollment_date: date | None = None

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(TokenPair):
    user: UserPublic


class StudentLoginResponse(TokenPair):
    student: StudentIdentity


class PasswordChange(BaseModel):
    current_password: str
    new_password: str = Field(min_length=6)

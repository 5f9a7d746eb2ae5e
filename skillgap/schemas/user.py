# user.py
from datetime import datetime
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

from skillgap.schemas.base import CamelModel


# "admin" is never self-assigned at registration.
SelfServiceRole = Literal["student", "job_seeker", "professional"]


def _validate_email_like(v: str) -> str:
    value = (v or "").strip().lower()
    if "@" not in value:
        raise ValueError("email must contain '@'")
    left, right = value.split("@", 1)
    if not left or not right:
        raise ValueError("email must have text before and after '@'")
    return value


class UserCreate(BaseModel):
    email: str
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)
    role: SelfServiceRole = "job_seeker"

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        return _validate_email_like(v)

    @field_validator("name")
    @classmethod
    def _strip_name(cls, v: str) -> str:
        value = v.strip()
        if not value:
            raise ValueError("name must not be blank")
        return value


class UserLogin(BaseModel):
    email: str
    password: str

    @field_validator("email")
    @classmethod
    def _check_email(cls, v: str) -> str:
        return _validate_email_like(v)


class UserRead(CamelModel):
    id: int
    email: str
    name: str
    role: str
    created_at: Optional[datetime] = None


class UserProfileResponse(BaseModel):
    success: bool = True
    user: UserRead


class Token(BaseModel):
    access_token: str
    token_type: str


class TokenData(BaseModel):
    user_id: int

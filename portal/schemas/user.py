"""User request/response contracts."""

from typing import Literal, Optional

from pydantic import BaseModel, EmailStr, Field

from portal.schemas.common import UtcDatetime

USER_ROLES = ("admin", "editor")
UserRole = Literal["admin", "editor"]


class UserCreate(BaseModel):
    username: str = Field(min_length=3)
    email: EmailStr
    password: str = Field(min_length=6)
    role: UserRole


class UserUpdate(BaseModel):
    username: Optional[str] = Field(default=None, min_length=3)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=6)
    role: Optional[UserRole] = None
    is_active: Optional[bool] = None


class UserOut(BaseModel):
    """User as exposed by listing and read-by-id; ``password_hash`` is always scrubbed."""

    id: int
    username: str
    email: str
    password_hash: str = ""
    role: UserRole
    is_active: bool
    created_at: UtcDatetime
    updated_at: UtcDatetime


class UserWithSecretOut(UserOut):
    model_config = {"from_attributes": True}


class LoginRequest(BaseModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class TokenResponse(BaseModel):
    access_token: str
    token_type: str = "bearer"
    user: UserOut

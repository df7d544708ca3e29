"""
Pydantic schemas for user endpoints.

The password hash never appears in a response schema.
"""
from typing import Optional
from pydantic import EmailStr, Field, field_validator

from jobly.schemas.common import CamelModel, RequestModel


class UserCreate(RequestModel):
    """Admin-only user creation; may create admins."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr
    is_admin: bool = False

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Validate password length in bytes (bcrypt limit is 72 bytes)."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be 72 bytes or fewer")
        return v


class UserUpdate(RequestModel):
    """Self-service profile update. Username and role cannot change."""
    password: Optional[str] = Field(None, min_length=5)
    first_name: Optional[str] = Field(None, min_length=1, max_length=30)
    last_name: Optional[str] = Field(None, min_length=1, max_length=30)
    email: Optional[EmailStr] = None

    @field_validator("first_name", "last_name", "email")
    @classmethod
    def not_null(cls, v):
        if v is None:
            raise ValueError("Field cannot be null")
        return v

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: Optional[str]) -> Optional[str]:
        if v is None:
            raise ValueError("Field cannot be null")
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be 72 bytes or fewer")
        return v


class UserResponse(CamelModel):
    username: str
    first_name: str
    last_name: str
    email: str
    is_admin: bool


class UserDetail(UserResponse):
    """User with the ids of the jobs they applied to."""
    jobs: list[int] = Field(default_factory=list)


class UserEnvelope(CamelModel):
    user: UserResponse


class UserDetailEnvelope(CamelModel):
    user: UserDetail


class UserCreatedResponse(CamelModel):
    user: UserResponse
    token: str


class UserListResponse(CamelModel):
    users: list[UserResponse]

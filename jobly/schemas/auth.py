"""
Pydantic schemas for authentication endpoints.
"""
from pydantic import EmailStr, Field, field_validator

from jobly.schemas.common import CamelModel, RequestModel


class TokenRequest(RequestModel):
    """Request schema for exchanging credentials for a token."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "example": {"username": "alice", "password": "password1"}
        }
    }


class RegisterRequest(RequestModel):
    """Request schema for self-registration. New users are never admins."""
    username: str = Field(..., min_length=1, max_length=25)
    password: str = Field(..., min_length=5)
    first_name: str = Field(..., min_length=1, max_length=30)
    last_name: str = Field(..., min_length=1, max_length=30)
    email: EmailStr

    @field_validator("password")
    @classmethod
    def validate_password_length(cls, v: str) -> str:
        """Validate password length in bytes (bcrypt limit is 72 bytes)."""
        if len(v.encode("utf-8")) > 72:
            raise ValueError("Password must be 72 bytes or fewer")
        return v


class TokenResponse(CamelModel):
    token: str

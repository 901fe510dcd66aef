"""Authentication schemas."""

from datetime import datetime

from pydantic import BaseModel, EmailStr, Field, field_validator

from accounts_api.schemas.user import check_password_characters


class UserLogin(BaseModel):
    """User login request."""

    email: EmailStr = Field(..., max_length=255)
    password: str = Field(..., min_length=1, max_length=128)

    @field_validator("password")
    @classmethod
    def password_hashable(cls, value: str) -> str:
        return check_password_characters(value)


class LoginResponse(BaseModel):
    """JWT issued on successful login."""

    message: str = "Login successful"
    access_token: str
    token_type: str = "bearer"  # noqa: S105
    expires_in: int


class ClaimsResponse(BaseModel):
    """Identity recovered from a verified token."""

    user_id: str
    name: str
    issued_at: datetime
    expires_at: datetime


class ProfileResponse(BaseModel):
    """Profile of the authenticated caller."""

    message: str = "Profile access granted"
    claims: ClaimsResponse

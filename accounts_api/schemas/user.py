"""User schemas."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator


def check_password_characters(value: str) -> str:
    """bcrypt cannot hash passwords containing NUL characters."""
    if "\x00" in value:
        raise ValueError("Password must not contain NUL characters")
    return value


class UserBase(BaseModel):
    """Fields shared by registration and update requests."""

    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr = Field(..., max_length=255)

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("Name is required")
        return value


class UserRegister(UserBase):
    """User registration request."""

    password: str = Field(..., min_length=8, max_length=128)

    @field_validator("password")
    @classmethod
    def password_hashable(cls, value: str) -> str:
        return check_password_characters(value)


class UserUpdate(UserBase):
    """Update a user's name and email. The password is not changed here."""


class UserResponse(BaseModel):
    """Public user projection; never includes the password hash."""

    model_config = ConfigDict(from_attributes=True)

    id: str
    name: str
    email: str
    created_at: datetime

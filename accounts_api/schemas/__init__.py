"""Pydantic schemas for API requests and responses."""

from accounts_api.schemas.auth import ClaimsResponse, LoginResponse, ProfileResponse, UserLogin
from accounts_api.schemas.error import ErrorResponse
from accounts_api.schemas.message import MessageCreate, MessageResponse
from accounts_api.schemas.user import UserRegister, UserResponse, UserUpdate

__all__ = [
    "UserRegister",
    "UserUpdate",
    "UserResponse",
    "UserLogin",
    "LoginResponse",
    "ClaimsResponse",
    "ProfileResponse",
    "MessageCreate",
    "MessageResponse",
    "ErrorResponse",
]

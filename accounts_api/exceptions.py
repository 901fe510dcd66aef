"""Application error taxonomy.

Services raise these exceptions; the handlers registered in ``main.py``
turn them into ``{"error": code, "detail": detail}`` JSON responses with
the matching HTTP status.
"""

from fastapi import status


class AccountsAPIError(Exception):
    """Base exception for all domain errors surfaced to API callers."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "internal_error"
    default_detail: str = "Internal server error"

    def __init__(self, detail: str | None = None):
        self.detail = detail or self.default_detail
        super().__init__(self.detail)


class ValidationError(AccountsAPIError):
    """Raised when request input is missing or malformed."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "validation_error"
    default_detail = "Invalid request data"


class DuplicateEmail(AccountsAPIError):
    """Raised when an email is already registered to another user."""

    status_code = status.HTTP_400_BAD_REQUEST
    code = "duplicate_email"
    default_detail = "Email already registered"


class NotFound(AccountsAPIError):
    """Raised when a requested record does not exist."""

    status_code = status.HTTP_404_NOT_FOUND
    code = "not_found"
    default_detail = "Not found"


class InvalidCredentials(AccountsAPIError):
    """Raised when a password does not match the stored digest."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "invalid_credentials"
    default_detail = "Incorrect password"


class AuthError(AccountsAPIError):
    """Base class for bearer token failures."""


class Unauthenticated(AuthError):
    """Raised when a protected route is called without a token."""

    status_code = status.HTTP_401_UNAUTHORIZED
    code = "unauthenticated"
    default_detail = "Access denied. No token provided"


class InvalidToken(AuthError):
    """Raised when a token is malformed, badly signed or expired.

    Answered with 400 rather than 401 so clients can tell a missing token
    from a rejected one.
    """

    status_code = status.HTTP_400_BAD_REQUEST
    code = "invalid_token"
    default_detail = "Invalid token"


class InternalError(AccountsAPIError):
    """Raised for storage or other unexpected failures."""

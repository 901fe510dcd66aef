"""FastAPI dependencies for authentication and database."""

import logging
from functools import lru_cache
from typing import Annotated

from fastapi import Depends, Header, Request
from sqlalchemy.orm import Session

from accounts_api.config import get_settings
from accounts_api.database import get_db
from accounts_api.exceptions import AuthError, Unauthenticated
from accounts_api.services.auth import AuthService
from accounts_api.services.messages import MessageStore
from accounts_api.services.passwords import PasswordHasher
from accounts_api.services.tokens import TokenClaims, TokenService
from accounts_api.services.users import UserStore

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "


@lru_cache
def get_token_service() -> TokenService:
    """Get the process-wide token service."""
    return TokenService.from_settings(get_settings())


@lru_cache
def get_password_hasher() -> PasswordHasher:
    """Get the process-wide password hasher."""
    return PasswordHasher()


def get_user_store(
    db: Annotated[Session, Depends(get_db)],
) -> UserStore:
    """Get user store bound to the request session."""
    return UserStore(db)


def get_message_store(
    db: Annotated[Session, Depends(get_db)],
) -> MessageStore:
    """Get message store bound to the request session."""
    return MessageStore(db)


def get_auth_service(
    users: Annotated[UserStore, Depends(get_user_store)],
    hasher: Annotated[PasswordHasher, Depends(get_password_hasher)],
    tokens: Annotated[TokenService, Depends(get_token_service)],
) -> AuthService:
    """Get auth service with dependencies."""
    return AuthService(users, hasher, tokens)


def authenticate(authorization: str | None, tokens: TokenService) -> TokenClaims:
    """Turn a raw Authorization header value into verified claims.

    A leading ``Bearer `` is stripped when present; any other value is
    treated as the bare token.

    Raises:
        Unauthenticated: If no header value was sent.
        InvalidToken: If the token fails verification.
    """
    if not authorization:
        raise Unauthenticated()

    token = authorization
    if token.startswith(BEARER_PREFIX):
        token = token[len(BEARER_PREFIX) :]
    return tokens.verify(token.strip())


def get_current_claims(
    request: Request,
    tokens: Annotated[TokenService, Depends(get_token_service)],
    authorization: Annotated[str | None, Header()] = None,
) -> TokenClaims:
    """Require a valid bearer token and expose its claims to the handler."""
    try:
        claims = authenticate(authorization, tokens)
    except AuthError as e:
        logger.debug(f"Rejected {request.method} {request.url.path}: {e.code}")
        raise

    request.state.claims = claims
    return claims

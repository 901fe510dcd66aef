"""Authentication API endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends

from accounts_api.api.dependencies import get_auth_service, get_current_claims
from accounts_api.schemas.auth import ClaimsResponse, LoginResponse, ProfileResponse, UserLogin
from accounts_api.services.auth import AuthService
from accounts_api.services.tokens import TokenClaims

router = APIRouter(tags=["auth"])


@router.post("/login", response_model=LoginResponse)
def login(
    credentials: UserLogin,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Login with email and password."""
    access_token = auth.login(credentials.email, credentials.password)
    return LoginResponse(
        access_token=access_token,
        expires_in=int(auth.tokens.lifetime.total_seconds()),
    )


@router.get("/profile", response_model=ProfileResponse)
def get_profile(
    claims: Annotated[TokenClaims, Depends(get_current_claims)],
):
    """Get the identity carried by the caller's token."""
    return ProfileResponse(
        claims=ClaimsResponse(
            user_id=claims.user_id,
            name=claims.name,
            issued_at=claims.issued_at,
            expires_at=claims.expires_at,
        )
    )

"""User API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, status

from accounts_api.api.dependencies import get_auth_service, get_current_claims, get_user_store
from accounts_api.schemas.user import UserRegister, UserResponse, UserUpdate
from accounts_api.services.auth import AuthService
from accounts_api.services.tokens import TokenClaims
from accounts_api.services.users import UserStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
def register(
    user_data: UserRegister,
    auth: Annotated[AuthService, Depends(get_auth_service)],
):
    """Register a new user."""
    return auth.register(user_data.name, user_data.email, user_data.password)


@router.get("", response_model=list[UserResponse])
def get_users(
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Get all registered users."""
    return users.list_all()


@router.put("/{user_id}", response_model=UserResponse)
def update_user(
    user_id: str,
    user_data: UserUpdate,
    current: Annotated[TokenClaims, Depends(get_current_claims)],
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Update a user's name and email."""
    user = users.update(user_id, user_data.name, user_data.email)
    logger.info(f"User {user_id} updated by {current.user_id}")
    return user


@router.delete("/{user_id}", response_model=UserResponse)
def delete_user(
    user_id: str,
    current: Annotated[TokenClaims, Depends(get_current_claims)],
    users: Annotated[UserStore, Depends(get_user_store)],
):
    """Delete a user and return the removed record."""
    user = users.get_or_404(user_id)
    deleted = UserResponse.model_validate(user)
    users.delete(user)
    logger.info(f"User {user_id} deleted by {current.user_id}")
    return deleted

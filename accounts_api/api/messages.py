"""Message log API endpoints."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request

from accounts_api.api.dependencies import get_current_claims, get_message_store
from accounts_api.schemas.message import MessageCreate, MessageResponse
from accounts_api.services.messages import MessageStore

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/messages",
    tags=["messages"],
    dependencies=[Depends(get_current_claims)],
)


@router.post("", response_model=MessageResponse)
def create_message(
    request: Request,
    message_data: MessageCreate,
    messages: Annotated[MessageStore, Depends(get_message_store)],
):
    """Store a message."""
    message = messages.create(message_data.text)
    # Claims were attached to the request by the router-level auth dependency
    logger.info(f"Message {message.id} logged by {request.state.claims.user_id}")
    return message


@router.get("", response_model=list[MessageResponse])
def get_messages(
    messages: Annotated[MessageStore, Depends(get_message_store)],
):
    """Get all stored messages."""
    return messages.list_all()

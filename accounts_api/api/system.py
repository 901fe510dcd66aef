"""Service status endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse

from accounts_api.config import Settings, get_settings

router = APIRouter(tags=["system"])


@router.get("/", response_class=PlainTextResponse)
async def root():
    """Plain-text banner confirming the server is up."""
    return "Accounts API is running"


@router.get("/health")
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
):
    """Health check endpoint."""
    return {"status": "healthy", "environment": settings.environment}


@router.get("/client-ip")
async def client_ip(request: Request):
    """Report the caller's address as seen behind a proxy."""
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        ip = forwarded.split(",")[0].strip()
    elif request.client:
        ip = request.client.host
    else:
        ip = None
    return {"ip": ip}

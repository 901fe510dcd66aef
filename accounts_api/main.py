"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager
from typing import Any

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from accounts_api import __version__
from accounts_api.api import auth, messages, system, users
from accounts_api.config import get_settings
from accounts_api.database import init_db
from accounts_api.exceptions import (
    AccountsAPIError,
    InternalError,
    Unauthenticated,
    ValidationError,
)
from accounts_api.logging_config import configure_logging
from accounts_api.schemas.error import ErrorResponse

settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

HTTP_ERROR_CODES = {
    404: "not_found",
    405: "method_not_allowed",
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Handle application startup and shutdown events."""
    init_db()
    logger.info(f"Accounts API started ({settings.environment})")
    yield
    logger.info("Accounts API shutting down")


app = FastAPI(
    title="Accounts API",
    description="User registration, JWT authentication and message logging",
    version=__version__,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_allowed_origins,
    allow_credentials="*" not in settings.cors_allowed_origins,
    allow_methods=["*"],
    allow_headers=["*"],
)


def error_response(
    error: AccountsAPIError,
    errors: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Build the JSON body shared by every error status."""
    body = ErrorResponse(error=error.code, detail=error.detail, errors=errors)
    headers = dict(headers or {})
    if isinstance(error, Unauthenticated):
        headers["WWW-Authenticate"] = "Bearer"
    return JSONResponse(
        status_code=error.status_code,
        content=jsonable_encoder(body, exclude_none=True),
        headers=headers or None,
    )


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    """Give routing errors such as 404 and 405 the same JSON shape."""
    error = AccountsAPIError(exc.detail if isinstance(exc.detail, str) else None)
    error.status_code = exc.status_code
    error.code = HTTP_ERROR_CODES.get(exc.status_code, "http_error")
    return error_response(error, headers=exc.headers)


@app.exception_handler(AccountsAPIError)
async def accounts_api_error_handler(request: Request, exc: AccountsAPIError):
    """Render domain errors as structured JSON."""
    return error_response(exc)


@app.exception_handler(RequestValidationError)
async def validation_error_handler(request: Request, exc: RequestValidationError):
    """Report malformed request bodies as 400 validation errors."""
    errors = [
        {"loc": list(error["loc"]), "msg": error["msg"], "type": error["type"]}
        for error in exc.errors()
    ]
    return error_response(ValidationError(), errors)


@app.exception_handler(Exception)
async def unhandled_error_handler(request: Request, exc: Exception):
    """Hide unexpected failures behind a generic 500."""
    logger.exception(f"Unhandled error on {request.method} {request.url.path}")
    return error_response(InternalError())


# Register routers
app.include_router(system.router)
app.include_router(users.router)
app.include_router(auth.router)
app.include_router(messages.router)

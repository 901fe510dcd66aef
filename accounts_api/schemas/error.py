"""Error response schema."""

from typing import Any

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body of every non-2xx JSON response."""

    error: str
    detail: str
    errors: list[dict[str, Any]] | None = None

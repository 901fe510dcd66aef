"""Message schemas."""

from pydantic import BaseModel, ConfigDict, Field


class MessageCreate(BaseModel):
    """Log a message."""

    text: str = Field(...)


class MessageResponse(BaseModel):
    """Stored message."""

    model_config = ConfigDict(from_attributes=True)

    id: int
    text: str

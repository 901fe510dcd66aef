"""SQLAlchemy models."""

from accounts_api.models.message import Message
from accounts_api.models.user import User

__all__ = [
    "User",
    "Message",
]

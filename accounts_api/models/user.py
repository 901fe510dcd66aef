"""User model."""

import uuid

from sqlalchemy import Column, String

from accounts_api.database import Base
from accounts_api.models.mixins import TimestampMixin


def generate_user_id() -> str:
    """Generate an opaque user identifier."""
    return str(uuid.uuid4())


class User(Base, TimestampMixin):
    """Registered account; email is the login key."""

    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=generate_user_id)
    name = Column(String(255), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)

"""Message log storage."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from accounts_api.exceptions import InternalError
from accounts_api.models.message import Message


class MessageStore:
    """Append-only store for logged messages."""

    def __init__(self, db: Session):
        self.db = db

    def create(self, text: str) -> Message:
        """Store a message and return it with its assigned id."""
        message = Message(text=text)
        self.db.add(message)
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise InternalError("Failed to save message") from e
        self.db.refresh(message)
        return message

    def list_all(self) -> list[Message]:
        """Get all messages in insertion order."""
        try:
            return self.db.query(Message).order_by(Message.id).all()
        except SQLAlchemyError as e:
            raise InternalError("Failed to load messages") from e

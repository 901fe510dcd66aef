"""Message model."""

from sqlalchemy import Column, Integer, Text

from accounts_api.database import Base


class Message(Base):
    """Free-form text logged by an authenticated caller."""

    __tablename__ = "messages"

    id = Column(Integer, primary_key=True, autoincrement=True)
    text = Column(Text, nullable=False)

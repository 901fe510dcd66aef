"""Credential store for user records."""

import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session

from accounts_api.exceptions import DuplicateEmail, InternalError, NotFound
from accounts_api.models.user import User

logger = logging.getLogger(__name__)


class UserStore:
    """Persist users; email uniqueness is enforced by the database."""

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: str) -> User | None:
        """Get a user by id."""
        return self.db.query(User).filter(User.id == user_id).first()

    def get_or_404(self, user_id: str) -> User:
        """Get a user by id or raise NotFound."""
        user = self.get(user_id)
        if user is None:
            raise NotFound("User not found")
        return user

    def get_by_email(self, email: str) -> User | None:
        """Get a user by email."""
        return self.db.query(User).filter(User.email == email).first()

    def list_all(self) -> list[User]:
        """Get every user, oldest first."""
        try:
            return self.db.query(User).order_by(User.created_at, User.id).all()
        except SQLAlchemyError as e:
            raise InternalError("Failed to load users") from e

    def create(self, name: str, email: str, password_hash: str) -> User:
        """Insert a new user.

        Raises:
            DuplicateEmail: If another user already holds ``email``.
        """
        user = User(name=name, email=email, password_hash=password_hash)
        self.db.add(user)
        self._commit()
        self.db.refresh(user)
        return user

    def update(self, user_id: str, name: str, email: str) -> User:
        """Overwrite a user's name and email."""
        user = self.get_or_404(user_id)
        user.name = name
        user.email = email
        self._commit()
        self.db.refresh(user)
        return user

    def delete(self, user: User) -> None:
        """Remove a user."""
        self.db.delete(user)
        self.db.commit()

    def _commit(self) -> None:
        try:
            self.db.commit()
        except IntegrityError:
            self.db.rollback()
            raise DuplicateEmail() from None

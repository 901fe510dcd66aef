"""Registration and login flows."""

import logging

from accounts_api.exceptions import DuplicateEmail, InvalidCredentials, NotFound
from accounts_api.models.user import User
from accounts_api.services.passwords import PasswordHasher
from accounts_api.services.tokens import TokenService
from accounts_api.services.users import UserStore

logger = logging.getLogger(__name__)


class AuthService:
    """Combine the credential store, password hasher and token service."""

    def __init__(self, users: UserStore, hasher: PasswordHasher, tokens: TokenService):
        self.users = users
        self.hasher = hasher
        self.tokens = tokens

    def register(self, name: str, email: str, password: str) -> User:
        """Create a new user with a hashed password."""
        if self.users.get_by_email(email):
            raise DuplicateEmail()

        user = self.users.create(name, email, self.hasher.hash(password))
        logger.info(f"Registered user {user.id}")
        return user

    def authenticate(self, email: str, password: str) -> User:
        """Authenticate a user by email and password."""
        user = self.users.get_by_email(email)
        if user is None:
            raise NotFound("User not found")
        if not self.hasher.verify(password, user.password_hash):
            logger.warning(f"Failed login for {email}")
            raise InvalidCredentials()
        return user

    def login(self, email: str, password: str) -> str:
        """Authenticate a user and issue an access token."""
        user = self.authenticate(email, password)
        return self.tokens.issue(user.id, user.name)

"""Password hashing with bcrypt."""

import logging

from passlib.context import CryptContext
from passlib.exc import PasswordValueError

logger = logging.getLogger(__name__)

# Fixed work factor; raising it slows every register and login request
BCRYPT_ROUNDS = 10


class PasswordHasher:
    """One-way salted hash and constant-time verify for passwords."""

    def __init__(self, rounds: int = BCRYPT_ROUNDS):
        self._context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds)

    def hash(self, password: str) -> str:
        """Hash a password with a fresh random salt."""
        return self._context.hash(password)

    def verify(self, password: str, password_hash: str) -> bool:
        """Verify a password against its hash.

        Returns False on mismatch, for passwords bcrypt cannot hash and for
        digests bcrypt does not recognize.
        """
        try:
            return self._context.verify(password, password_hash)
        except PasswordValueError:
            logger.warning("Rejected password bcrypt cannot hash")
            return False
        except ValueError:
            logger.warning("Stored password hash has an unrecognized format")
            return False

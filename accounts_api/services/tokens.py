"""Signed, time-limited bearer tokens (JWT)."""

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt
from jose.constants import ALGORITHMS

from accounts_api.config import Settings
from accounts_api.exceptions import InvalidToken

DEFAULT_LIFETIME = timedelta(hours=1)


@dataclass(frozen=True)
class TokenClaims:
    """Identity carried by a verified token."""

    user_id: str
    name: str
    issued_at: datetime
    expires_at: datetime


class TokenService:
    """Issue and verify HMAC-signed JWTs with a single shared secret."""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        lifetime: timedelta = DEFAULT_LIFETIME,
    ):
        if not secret:
            raise ValueError("Token signing secret must not be empty")
        if algorithm not in ALGORITHMS.HMAC:
            raise ValueError(f"Unsupported token algorithm {algorithm!r}; use HS256, HS384 or HS512")
        if lifetime <= timedelta(0):
            raise ValueError("Token lifetime must be positive")
        self._secret = secret
        self.algorithm = algorithm
        self.lifetime = lifetime

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        """Build a token service from application settings."""
        return cls(
            secret=settings.jwt_secret,
            algorithm=settings.jwt_algorithm,
            lifetime=timedelta(minutes=settings.jwt_expiration_minutes),
        )

    def issue(self, user_id: str, name: str, now: datetime | None = None) -> str:
        """Create a signed token for a user, valid for ``lifetime`` from ``now``."""
        issued_at = now or datetime.now(UTC)
        to_encode = {
            "sub": str(user_id),
            "name": name,
            "iat": issued_at,
            "exp": issued_at + self.lifetime,
        }
        return jwt.encode(to_encode, self._secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        """Decode and validate a token.

        Only the configured algorithm is accepted, so unsigned (``alg: none``)
        or differently signed tokens are rejected along with expired ones.

        Raises:
            InvalidToken: If the token cannot be trusted for any reason.
        """
        try:
            payload = jwt.decode(
                token,
                self._secret,
                algorithms=[self.algorithm],
                options={"require_exp": True, "require_iat": True, "require_sub": True},
            )
        except JWTError as e:
            raise InvalidToken() from e

        name = payload.get("name")
        if not isinstance(name, str):
            raise InvalidToken()

        return TokenClaims(
            user_id=payload["sub"],
            name=name,
            issued_at=datetime.fromtimestamp(payload["iat"], UTC),
            expires_at=datetime.fromtimestamp(payload["exp"], UTC),
        )

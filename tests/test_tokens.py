"""Token issuer/verifier tests."""

import base64
import json
from datetime import UTC, datetime, timedelta

import pytest
from jose import jwt

from accounts_api.config import Settings
from accounts_api.exceptions import InvalidToken
from accounts_api.services.tokens import TokenService


def _b64(data: dict) -> str:
    raw = json.dumps(data).encode()
    return base64.urlsafe_b64encode(raw).rstrip(b"=").decode()


def test_issued_token_verifies(tokens):
    """A freshly issued token verifies and carries the identity."""
    token = tokens.issue("user-1", "Ann")
    claims = tokens.verify(token)
    assert claims.user_id == "user-1"
    assert claims.name == "Ann"
    assert claims.expires_at - claims.issued_at == timedelta(hours=1)


def test_expired_token_rejected(tokens):
    """A token past its expiry fails even though the signature is valid."""
    issued = datetime.now(UTC) - timedelta(hours=2)
    token = tokens.issue("user-1", "Ann", now=issued)
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_token_from_other_secret_rejected(tokens):
    """Tokens signed with a different secret never verify."""
    other = TokenService("another-secret")
    token = other.issue("user-1", "Ann")
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_unsigned_token_rejected(tokens):
    """An ``alg: none`` token is refused."""
    now = int(datetime.now(UTC).timestamp())
    header = _b64({"alg": "none", "typ": "JWT"})
    payload = _b64({"sub": "user-1", "name": "Ann", "iat": now, "exp": now + 3600})
    with pytest.raises(InvalidToken):
        tokens.verify(f"{header}.{payload}.")


def test_other_algorithm_rejected(tokens):
    """Only the configured algorithm is accepted, even with the right secret."""
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "user-1", "name": "Ann", "iat": now, "exp": now + timedelta(hours=1)},
        "test-secret",
        algorithm="HS512",
    )
    with pytest.raises(InvalidToken):
        tokens.verify(token)


@pytest.mark.parametrize("token", ["", "garbage", "a.b.c", "Bearer"])
def test_malformed_token_rejected(tokens, token):
    """Structurally invalid tokens raise InvalidToken."""
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_token_missing_name_rejected(tokens):
    """Tokens without the display name claim are not trusted."""
    now = datetime.now(UTC)
    token = jwt.encode(
        {"sub": "user-1", "iat": now, "exp": now + timedelta(hours=1)},
        "test-secret",
        algorithm="HS256",
    )
    with pytest.raises(InvalidToken):
        tokens.verify(token)


def test_from_settings():
    """Secret, algorithm and lifetime come from settings."""
    settings = Settings(jwt_secret="configured", jwt_expiration_minutes=15)
    service = TokenService.from_settings(settings)
    assert service.algorithm == "HS256"
    assert service.lifetime == timedelta(minutes=15)
    assert TokenService("configured").verify(service.issue("u", "Ann")).user_id == "u"


def test_empty_secret_refused():
    """A token service cannot be built without a secret."""
    with pytest.raises(ValueError):
        TokenService("")


@pytest.mark.parametrize("algorithm", ["RS256", "ES256", "none"])
def test_non_hmac_algorithm_refused(algorithm):
    """Only shared-secret HMAC algorithms can be configured."""
    with pytest.raises(ValueError, match="Unsupported token algorithm"):
        TokenService("configured", algorithm=algorithm)


@pytest.mark.parametrize("algorithm", ["HS384", "HS512"])
def test_other_hmac_algorithms_accepted(algorithm):
    service = TokenService("configured", algorithm=algorithm)
    assert service.verify(service.issue("user-1", "Ann")).user_id == "user-1"

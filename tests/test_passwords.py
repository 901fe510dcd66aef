"""Password hasher tests."""

import logging

from accounts_api.services.passwords import BCRYPT_ROUNDS


def test_hash_is_not_plaintext(hasher):
    """The digest never contains the password itself."""
    digest = hasher.hash("longenough")
    assert digest != "longenough"
    assert "longenough" not in digest


def test_same_password_hashes_differently(hasher):
    """Each hash gets its own salt, and both digests still verify."""
    first = hasher.hash("longenough")
    second = hasher.hash("longenough")
    assert first != second
    assert hasher.verify("longenough", first)
    assert hasher.verify("longenough", second)


def test_verify_wrong_password(hasher):
    """A mismatch returns False instead of raising."""
    digest = hasher.hash("longenough")
    assert hasher.verify("not-the-password", digest) is False


def test_verify_unrecognized_hash(hasher):
    """A digest bcrypt cannot parse is treated as a mismatch."""
    assert hasher.verify("longenough", "plaintext-not-a-hash") is False


def test_work_factor_is_fixed(hasher):
    """Digests are produced at the configured bcrypt cost."""
    digest = hasher.hash("longenough")
    assert digest.startswith("$2b$")
    assert digest.split("$")[2] == f"{BCRYPT_ROUNDS:02d}"


def test_verify_password_with_nul(hasher, caplog):
    """A password bcrypt cannot hash is a mismatch, not a bad stored digest."""
    digest = hasher.hash("longenough")
    with caplog.at_level(logging.WARNING, logger="accounts_api.services.passwords"):
        assert hasher.verify("longenough\x00x", digest) is False
    assert "cannot hash" in caplog.text
    assert "unrecognized format" not in caplog.text

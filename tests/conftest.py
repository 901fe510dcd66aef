"""Pytest configuration and fixtures."""

import os

import pytest

# Use test database - PostgreSQL when TEST_DATABASE_URL is set, SQLite locally
SQLALCHEMY_DATABASE_URL = os.getenv("TEST_DATABASE_URL", "sqlite:///./test.db")

# Settings are read on first import, so point the app at the test database first
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from accounts_api.database import Base, build_engine, get_db  # noqa: E402
from accounts_api.main import app  # noqa: E402
from accounts_api.services.passwords import PasswordHasher  # noqa: E402
from accounts_api.services.tokens import TokenService  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the authenticated user's id and email."""

    def __init__(self, *args, user_id: str | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


engine = build_engine(SQLALCHEMY_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    if "postgresql" in SQLALCHEMY_DATABASE_URL:
        from sqlalchemy_utils import create_database, database_exists

        if not database_exists(SQLALCHEMY_DATABASE_URL):
            create_database(SQLALCHEMY_DATABASE_URL)

    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function", autouse=True)
def db():
    """Create a fresh database session for each test with cleanup."""
    session = TestingSessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(scope="function")
def client(db):
    """Create a test client with database override."""

    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def hasher():
    """Password hasher at the production work factor."""
    return PasswordHasher()


@pytest.fixture
def tokens():
    """Token service with a test-only secret."""
    return TokenService("test-secret")


@pytest.fixture
def auth_headers(client):
    """Register and log in a user, returning auth headers with user info."""
    email = "test@example.com"
    response = client.post(
        "/users",
        json={"name": "Test User", "email": email, "password": "testpass123"},
    )
    assert response.status_code == 201
    user_id = response.json()["id"]

    response = client.post("/login", json={"email": email, "password": "testpass123"})
    assert response.status_code == 200
    token = response.json()["access_token"]

    return AuthHeaders({"Authorization": f"Bearer {token}"}, user_id=user_id, email=email)

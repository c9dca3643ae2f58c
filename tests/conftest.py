"""Pytest configuration and fixtures."""

import os

# Use test database - PostgreSQL in Docker, SQLite locally. Must be set before
# taskboard is imported, since settings and the engine are built at import time.
if os.getenv("DATABASE_URL"):
    # Running in Docker - use PostgreSQL test database
    SQLALCHEMY_DATABASE_URL = os.getenv("DATABASE_URL").replace("/taskboard", "/taskboard_test")
else:
    # Running locally - use SQLite
    SQLALCHEMY_DATABASE_URL = "sqlite:///./test.db"
os.environ["DATABASE_URL"] = SQLALCHEMY_DATABASE_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402

from taskboard.database import Base, SessionLocal, engine, get_db  # noqa: E402
from taskboard.main import app  # noqa: E402
from taskboard.rate_limit import limiter  # noqa: E402


class AuthHeaders(dict):
    """Dict subclass that also stores the user's id and email."""

    def __init__(self, *args, user_id: int | None = None, email: str | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.user_id = user_id
        self.email = email


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
    session = SessionLocal()

    yield session

    # Clean up all data after test
    session.rollback()
    for table in reversed(Base.metadata.sorted_tables):
        session.execute(table.delete())
    session.commit()
    session.close()


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Rate limit counters are in-memory and would leak between tests."""
    limiter.reset()
    yield


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


def register(client, name: str, email: str, password: str = "testpass123") -> AuthHeaders:
    """Register a user and return auth headers for it."""
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    data = response.json()
    return AuthHeaders(
        {"Authorization": f"Bearer {data['token']}"},
        user_id=data["user"]["id"],
        email=email,
    )


@pytest.fixture
def auth_headers(client):
    """Create a user and return auth headers with user info."""
    return register(client, "Test User", "test@example.com")


@pytest.fixture
def other_auth_headers(client):
    """A second, unrelated user."""
    return register(client, "Other User", "other@example.com")


@pytest.fixture
def make_task(client, auth_headers):
    """Create a task for the default user and return its JSON."""

    def _make_task(headers=None, **payload):
        payload.setdefault("title", "Task")
        response = client.post("/api/tasks", headers=headers or auth_headers, json=payload)
        assert response.status_code == 201, response.text
        return response.json()["task"]

    return _make_task


@pytest.fixture
def make_category(client, auth_headers):
    """Create a category for the default user and return its JSON."""

    def _make_category(name, headers=None, **payload):
        response = client.post(
            "/api/categories", headers=headers or auth_headers, json={"name": name, **payload}
        )
        assert response.status_code == 201, response.text
        return response.json()["category"]

    return _make_category

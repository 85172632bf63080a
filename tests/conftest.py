"""
Pytest configuration and shared fixtures for testing.

Provides reusable test fixtures:
- test_db: In-memory SQLite database for isolated testing
- test_client: FastAPI TestClient for API integration tests
- test_user / other_user: Users owning separate records
- auth_headers / other_headers: Bearer headers for those users
- ms: Helper turning (year, month, day) into a local-midnight epoch ms
"""

import datetime
import os
import sys
from pathlib import Path

import pytest

# Keep the module-level engine off the on-disk database during tests
os.environ.setdefault("DATABASE_URL", "sqlite://")

from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

# Add project root to path for imports
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# ruff: noqa: E402
from app.auth.auth import create_access_token, get_password_hash
from app.core.time_utils import local_date_to_ms
from app.database.database import Base, User, get_db
from app.main import app


@pytest.fixture(scope="function")
def test_db():
    """
    Create an in-memory SQLite database for testing.

    StaticPool keeps one connection, so the test thread and the TestClient
    thread see the same in-memory database. Destroyed after each test.

    Yields:
        SQLAlchemy Session: Database session for test use
    """
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)

    Base.metadata.create_all(bind=engine)

    db = TestingSessionLocal()

    try:
        yield db
    finally:
        db.close()
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(scope="function")
def test_client(test_db):
    """
    FastAPI TestClient using the in-memory test database.

    Yields:
        TestClient: FastAPI test client for API testing
    """

    def override_get_db():
        try:
            yield test_db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as client:
        yield client

    app.dependency_overrides.clear()


def _create_user(db, user_id: int, username: str, password: str, name: str) -> User:
    user = User(
        id=user_id,
        username=username,
        password_hash=get_password_hash(password),
        name=name,
    )
    db.add(user)
    db.commit()
    db.refresh(user)
    return user


@pytest.fixture(scope="function")
def test_user(test_db):
    """
    Test user: username ``testuser``, password ``testpass123``.
    """
    return _create_user(test_db, 1, "testuser", "testpass123", "Test User")


@pytest.fixture(scope="function")
def other_user(test_db):
    """Second user, used to check that records stay private."""
    return _create_user(test_db, 2, "otheruser", "otherpass123", "Other User")


@pytest.fixture(scope="function")
def auth_headers(test_user):
    """
    JWT bearer headers for the test user.

    Returns:
        dict: Headers with Authorization bearer token
    """
    token = create_access_token(data={"sub": str(test_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture(scope="function")
def other_headers(other_user):
    token = create_access_token(data={"sub": str(other_user.id)})
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def ms():
    """Local-midnight epoch milliseconds for a calendar date."""

    def _ms(year: int, month: int, day: int) -> int:
        return local_date_to_ms(datetime.date(year, month, day))

    return _ms

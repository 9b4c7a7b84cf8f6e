"""Pytest configuration and fixtures."""

import os

# Always run against a dedicated test database, never an exported DATABASE_URL.
# Must happen before crm reads its settings.
TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL", "sqlite:///./test.db")
os.environ["DATABASE_URL"] = TEST_DATABASE_URL

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from crm.database import Base, create_db_engine, get_db  # noqa: E402
from crm.main import app  # noqa: E402

engine = create_db_engine(TEST_DATABASE_URL)
TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="session", autouse=True)
def setup_test_database():
    """Create test database schema once at the start of the test session."""
    Base.metadata.create_all(bind=engine)
    yield
    # Don't drop database - just leave it for next run (each test cleans up after itself)


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
def contact(client):
    """Create a contact through the API and return its JSON."""
    response = client.post(
        "/api/contacts",
        json={"first_name": "Sarah", "last_name": "Chen", "email": "sarah@techcorp.io"},
    )
    assert response.status_code == 201
    return response.json()


@pytest.fixture
def create_task(client):
    """Factory that creates a task through the API and returns its JSON."""

    def _create(title: str, category: str = "work", **fields):
        response = client.post("/api/tasks", json={"title": title, "category": category, **fields})
        assert response.status_code == 201, response.text
        return response.json()

    return _create

"""Shared fixtures: in-memory SQLite database and FastAPI test client.

Every test gets a fresh database; the get_db dependency is overridden so
routes and services share the same session factory.
"""
import os

# Must be set before app modules read settings
os.environ.setdefault("DATABASE_URL", "sqlite:///./test.db")
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from app.db.database import Base, get_db
from app.main import app
from app.models import Profile, User  # noqa: F401
from tests.helpers import bearer, register


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(session_factory):
    """FastAPI test client with DB dependency overridden."""
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    # No context manager: lifespan would create tables on the configured engine
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def token(client):
    return register(client)


@pytest.fixture
def auth_headers(token):
    return bearer(token)


@pytest.fixture
def profile(client, auth_headers):
    response = client.post(
        "/api/profile",
        json={"status": "Developer", "skills": "python, sql", "company": "Acme"},
        headers=auth_headers,
    )
    assert response.status_code == 200, response.text
    return response.json()

"""Shared fixtures"""

import os

os.environ.setdefault("ACCESS_TOKEN_SECRET", "test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite:///:memory:")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from querynest.main import app
from querynest.models.base import Base
from querynest.utils.auth import create_access_token
from querynest.utils.database import get_db


@pytest.fixture
def engine():
    """In-memory database shared across threads"""

    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    Base.metadata.create_all(engine)

    yield engine

    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine)


@pytest.fixture
def db_session(session_factory):
    """Create a test database session"""

    session = session_factory()

    yield session

    session.close()


@pytest.fixture
def client(session_factory):
    """Create a test client"""

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db

    yield TestClient(app)

    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    """Attach a session cookie for ``email`` to the test client"""

    def _login(email: str):
        client.cookies.set("token", create_access_token({"email": email}))
        return client

    return _login

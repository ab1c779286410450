"""
Pytest fixtures and configuration for Product API tests

This file provides shared fixtures that can be used across all test modules.
Every test gets its own in-memory SQLite database, so no external database
is needed.
"""
import os

# Must be set before product_api reads its settings
os.environ["DATABASE_URL"] = "sqlite://"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from product_api.core.database import get_db, get_engine, init_db
from product_api.core.session import get_session_store
from product_api.main import create_app
from product_api.services.session_store import SessionStore


class FakeClock:
    """Manually advanced clock for session expiry tests"""

    def __init__(self, now: float = 1_000_000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now

    def advance(self, seconds: float) -> None:
        self.now += seconds


@pytest.fixture(scope="function")
def engine():
    """
    Provides a fresh in-memory SQLite engine with all tables created

    Scope: function (new database per test)
    StaticPool keeps the single in-memory connection shared between the
    test and the TestClient threadpool.
    """
    test_engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db_session(session_factory):
    """
    Provides a SQLAlchemy session bound to the test database

    Automatically closes the session after the test
    """
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def session_store(clock):
    return SessionStore(timeout_seconds=1800, sweep_interval_seconds=60, clock=clock)


@pytest.fixture
def app(engine, session_factory, session_store):
    """
    Provides the FastAPI app wired to the test database and session store
    """
    application = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    application.dependency_overrides[get_db] = override_get_db
    application.dependency_overrides[get_engine] = lambda: engine
    application.dependency_overrides[get_session_store] = lambda: session_store
    return application


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def sample_product_data():
    """
    Provides sample product data for tests
    """
    return {
        "name": "Pen",
        "description": "Blue pen",
        "price": 1.5,
    }


@pytest.fixture
def sample_user_data():
    """
    Provides sample user data for tests
    """
    return {
        "name": "Ada Lovelace",
        "email": "ada@example.com",
        "age": 36,
    }

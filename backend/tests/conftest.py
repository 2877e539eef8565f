"""Pytest configuration and fixtures."""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from api.prices import get_quote_provider
from database import Base, get_db, get_session_factory
from main import app
# Pytest fixtures - imported to make them available to tests
from tests.fixtures import holding  # noqa: F401
from tests.fixtures.mocks import MockQuoteProvider, SAMPLE_QUOTES


@pytest.fixture(name="engine")
def engine_fixture():
    """Create an in-memory SQLite engine shared by all sessions in a test."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    try:
        yield engine
    finally:
        Base.metadata.drop_all(bind=engine)
        engine.dispose()


@pytest.fixture(name="session_factory")
def session_factory_fixture(engine):
    """Sessionmaker bound to the test engine, used for background writes."""
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(name="db")
def db_fixture(session_factory):
    """Create a session on the in-memory database for testing."""
    session = session_factory()
    try:
        yield session
    finally:
        session.close()


def _make_client(db, session_factory, provider):
    def override_get_db():
        try:
            yield db
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_quote_provider] = lambda: provider
    return TestClient(app)


@pytest.fixture(name="mock_provider")
def mock_provider_fixture():
    """A quote provider that knows the sample quotes."""
    return MockQuoteProvider(quotes=SAMPLE_QUOTES)


@pytest.fixture(name="failing_provider")
def failing_provider_fixture():
    """A quote provider that always fails with a connection error."""
    return MockQuoteProvider(should_fail=True, failure_type="connection")


@pytest.fixture(name="client")
def client_fixture(db, session_factory, mock_provider):
    """Create a test client with the test database and a working provider."""
    client = _make_client(db, session_factory, mock_provider)
    yield client
    app.dependency_overrides.clear()


@pytest.fixture(name="client_with_failing_provider")
def client_with_failing_provider_fixture(db, session_factory, failing_provider):
    """Create a test client whose quote provider is unreachable."""
    client = _make_client(db, session_factory, failing_provider)
    yield client
    app.dependency_overrides.clear()

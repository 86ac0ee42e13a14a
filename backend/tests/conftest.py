import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, SQLModel, create_engine

from session_catalog.config import Settings
from session_catalog.database import get_session
from session_catalog.main import create_app
from session_catalog.models.session import ConferenceSession  # noqa: F401

TEST_DATABASE_URL = "sqlite:///:memory:"
TEST_API_KEY = "test-secret"

# ============================================================================
# Test Database Setup with StaticPool
# ============================================================================
# 1. sqlite:///:memory: with StaticPool so all sessions share one database
# 2. check_same_thread=False because TestClient runs sync routes in a threadpool
# 3. A fresh engine per test, so ids always start at 1
# 4. get_session overridden before TestClient() is created


@pytest.fixture(name="test_engine")
def test_engine_fixture():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)
    yield engine
    engine.dispose()


@pytest.fixture(name="session")
def session_fixture(test_engine):
    """Provide a test database session"""
    with Session(test_engine) as session:
        yield session


@pytest.fixture(name="settings")
def settings_fixture():
    return Settings(api_key=TEST_API_KEY, database_url=TEST_DATABASE_URL)


@pytest.fixture(name="app")
def app_fixture(settings, test_engine):
    app = create_app(settings)

    def override_get_session():
        with Session(test_engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_get_session
    yield app
    app.dependency_overrides.clear()


@pytest.fixture(name="client")
def client_fixture(app):
    """Test client that sends the configured API key on every request"""
    with TestClient(app, headers={"X-API-Key": TEST_API_KEY}) as client:
        yield client


@pytest.fixture(name="anon_client")
def anon_client_fixture(app):
    """Test client without an API key"""
    with TestClient(app) as client:
        yield client

import pytest
from unittest.mock import AsyncMock
from fastapi.testclient import TestClient

from relay.app.config import Settings
from relay.app.main import create_app

TEST_API_KEY = "test-api-key-1234567890"


@pytest.fixture
def mock_settings():
    """Settings with a known API key, isolated from any local .env file"""
    return Settings(API_KEY=TEST_API_KEY, _env_file=None)


@pytest.fixture
def mock_deploy_client():
    """Create mock deploy service HTTP client"""
    return AsyncMock()


@pytest.fixture
def app(mock_settings, mock_deploy_client):
    """
    Creates a fresh FastAPI app per test with the deploy client mocked.
    The lifespan is not run, so the mock stays in place.
    """
    app = create_app(mock_settings)
    app.state.deploy_client = mock_deploy_client
    return app


@pytest.fixture
def client(app):
    """Create test client"""
    return TestClient(app)


@pytest.fixture
def auth_headers():
    """Headers carrying the configured API key"""
    return {
        "x-api-key": TEST_API_KEY,
        "Content-Type": "application/json"
    }

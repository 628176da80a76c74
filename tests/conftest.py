import pytest
from fastapi.testclient import TestClient

from api_playground.app.core.config import Settings
from api_playground.app.main import create_app

BEARER_TOKEN = "secret-token-123"
API_KEY = "my-secret-api-key"


@pytest.fixture
def settings():
    return Settings(
        bearer_token=BEARER_TOKEN,
        api_key=API_KEY,
        slow_default_delay_ms=10,
        slow_max_delay_ms=50,
    )


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def store(app):
    return app.state.store


@pytest.fixture
def client(app):
    with TestClient(app) as test_client:
        yield test_client

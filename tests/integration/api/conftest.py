"""Pytest fixtures for API integration tests."""

import pytest
from httpx import ASGITransport, AsyncClient

from rede.presentation.api.app import API_PREFIX, create_app
from rede.presentation.api.dependencies import get_db_session
from rede_config.settings import Settings


@pytest.fixture
def users_url() -> str:
    return f"{API_PREFIX}/users"


@pytest.fixture
def api_settings(database_url) -> Settings:
    """Test API settings with debug enabled."""
    return Settings(
        database_dsn=database_url,
        api_host="127.0.0.1",
        api_debug=True,
        api_cors_origins="http://localhost:3000",
        password_hash_rounds=4,
    )


def _build_app(settings: Settings, session_maker):
    app = create_app(settings=settings)

    async def override_get_db_session():
        async with session_maker() as session:
            yield session

    app.dependency_overrides[get_db_session] = override_get_db_session
    return app


@pytest.fixture
async def test_client(api_settings, test_session_maker):
    """Async client against the app, backed by the per-test SQLite file."""
    app = _build_app(api_settings, test_session_maker)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def hidden_hash_client(api_settings, test_session_maker):
    """Client for a deployment that keeps password hashes out of responses."""
    settings = api_settings.model_copy(update={"api_expose_password_hash": False})
    app = _build_app(settings, test_session_maker)
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture
async def created_user(test_client, users_url, create_payload) -> dict:
    """Register the default user and return the response body."""
    response = await test_client.post(users_url, json=create_payload)
    assert response.status_code == 201
    return response.json()

"""Shared test fixtures for Framebase backend tests."""

import pytest
from unittest.mock import AsyncMock, MagicMock

from fastapi.testclient import TestClient

from common.utils import RateLimiter, rate_limiter

from framebase.ai import reset_openai_client
from framebase.config import settings
from framebase.dependencies import (
    get_auth_provider,
    get_db,
    get_rate_limiter,
    reset_auth_provider,
)

USER_ID = "11111111-1111-4111-8111-111111111111"
OTHER_USER_ID = "22222222-2222-4222-8222-222222222222"
PROJECT_ID = "33333333-3333-4333-8333-333333333333"
PAGE_ID = "44444444-4444-4444-8444-444444444444"
VALID_TOKEN = "valid-token"


@pytest.fixture(autouse=True)
def _isolate_globals(monkeypatch):
    """Fresh process-wide state for every test."""
    monkeypatch.setattr(settings, "NODE_ENV", "development")
    reset_openai_client()
    reset_auth_provider()
    rate_limiter.reset()
    yield
    reset_openai_client()
    reset_auth_provider()
    rate_limiter.reset()


@pytest.fixture
def sample_user():
    return {
        "id": USER_ID,
        "email": "ada@example.com",
        "user_metadata": {"full_name": "Ada Lovelace"},
    }


@pytest.fixture
def mock_auth_provider(sample_user):
    provider = MagicMock()

    async def _get_user(token):
        return sample_user if token == VALID_TOKEN else None

    provider.get_user = AsyncMock(side_effect=_get_user)
    provider.sign_up = AsyncMock()
    provider.sign_in_with_password = AsyncMock()
    provider.reset_password_for_email = AsyncMock(return_value=None)
    provider.admin_update_user = AsyncMock(return_value={})
    provider.admin_list_users = AsyncMock(return_value=[])
    return provider


@pytest.fixture
def mock_db():
    db = MagicMock()
    db.select = AsyncMock(return_value=[])
    db.insert = AsyncMock()
    db.update = AsyncMock()
    db.upsert = AsyncMock()
    db.delete = AsyncMock(return_value=None)
    db.upload = AsyncMock()
    db.create_signed_url = AsyncMock(return_value="https://storage.example/signed")
    return db


@pytest.fixture
def limiter():
    return RateLimiter()


@pytest.fixture
def app(mock_auth_provider, mock_db, limiter):
    from api import create_app

    application = create_app()
    application.dependency_overrides[get_auth_provider] = lambda: mock_auth_provider
    application.dependency_overrides[get_db] = lambda: mock_db
    application.dependency_overrides[get_rate_limiter] = lambda: limiter
    return application


@pytest.fixture
def client(app):
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


@pytest.fixture
def owned_project():
    return {"id": PROJECT_ID, "user_id": USER_ID, "name": "My App"}

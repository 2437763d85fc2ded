"""Tests for application-wide behaviour: headers, errors, health."""

from fastapi.testclient import TestClient
from unittest.mock import AsyncMock

from framebase.config import settings
from framebase.dependencies import get_auth_provider, get_db
from framebase.middleware import security_headers


class TestSecurityHeaders:

    def test_headers_in_development(self, client):
        response = client.get("/health")

        assert response.headers["x-frame-options"] == "DENY"
        assert response.headers["x-content-type-options"] == "nosniff"
        assert response.headers["referrer-policy"] == "strict-origin-when-cross-origin"
        assert response.headers["permissions-policy"] == "camera=(), microphone=(), geolocation=()"
        assert "strict-transport-security" not in response.headers

    def test_hsts_in_production(self, monkeypatch):
        monkeypatch.setattr(settings, "NODE_ENV", "production")
        from api import create_app

        app = create_app()
        response = TestClient(app).get("/health")

        assert response.headers["strict-transport-security"] == "max-age=63072000; includeSubDomains; preload"

    def test_security_headers_helper(self):
        assert "Strict-Transport-Security" not in security_headers(False)
        assert "Strict-Transport-Security" in security_headers(True)


class TestErrorEnvelope:

    def test_unknown_route(self, client):
        response = client.get("/api/nope")
        assert response.status_code == 404
        assert response.json() == {"success": False, "error": "Not Found"}

    def test_unhandled_error_is_generic(self, client, auth_headers, mock_db):
        mock_db.select = AsyncMock(side_effect=KeyError("secret detail"))

        response = client.get("/api/projects", headers=auth_headers)

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Something went wrong."}
        assert response.headers["x-frame-options"] == "DENY"
        assert response.headers["permissions-policy"] == "camera=(), microphone=(), geolocation=()"

    def test_unhandled_error_carries_hsts_in_production(self, monkeypatch):
        monkeypatch.setattr(settings, "NODE_ENV", "production")
        from api import create_app

        app = create_app()

        @app.get("/boom")
        async def boom():
            raise RuntimeError("kaboom")

        response = TestClient(app, raise_server_exceptions=False).get("/boom")

        assert response.status_code == 500
        assert response.json() == {"success": False, "error": "Something went wrong."}
        assert response.headers["x-frame-options"] == "DENY"
        assert response.headers["x-content-type-options"] == "nosniff"
        assert "strict-transport-security" in response.headers

    def test_database_not_configured(self, client, auth_headers, app):
        del app.dependency_overrides[get_db]

        response = client.get("/api/projects", headers=auth_headers)

        assert response.status_code == 503
        assert response.json() == {"success": False, "error": "Database is not configured."}

    def test_auth_not_configured(self, client, app, monkeypatch):
        del app.dependency_overrides[get_auth_provider]
        monkeypatch.setattr(settings, "SUPABASE_URL", None)

        response = client.get("/api/auth/me")

        assert response.status_code == 503


class TestHealth:

    def test_health(self, client):
        response = client.get("/health")
        assert response.json()["data"]["status"] == "ok"


class TestSettings:

    def test_missing_supabase_settings(self, monkeypatch):
        monkeypatch.setattr(settings, "SUPABASE_URL", "https://demo.supabase.co")
        monkeypatch.setattr(settings, "SUPABASE_ANON_KEY", None)
        monkeypatch.setattr(settings, "SUPABASE_SERVICE_ROLE_KEY", "")

        assert settings.missing_supabase_settings() == ["SUPABASE_ANON_KEY", "SUPABASE_SERVICE_ROLE_KEY"]
        assert not settings.supabase_configured()

    def test_cors_origins(self, monkeypatch):
        monkeypatch.setattr(settings, "CORS_ORIGINS", "https://a.example, ,https://b.example")
        assert settings.get_cors_origins() == ["https://a.example", "https://b.example"]

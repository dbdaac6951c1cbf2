"""Tests for caller resolution, error envelopes and the status endpoint."""

from datetime import timedelta

from fastapi.testclient import TestClient

from rental_admin.api import dependencies


class TestCurrentUser:
    """Session cookie handling."""

    def test_anonymous_caller_gets_anonymous_features(self, client):
        """Anonymous callers lack read:devices."""
        response = client.get("/api/v1/devices")

        assert response.status_code == 403
        body = response.json()
        assert body["success"] is False
        assert body["data"] is None
        assert body["errors"][0]["name"] == "ForbiddenError"
        assert body["errors"][0]["status_code"] == 403
        assert "read:devices" in body["errors"][0]["action"]

    def test_unknown_session_is_unauthorized(self, app):
        client = TestClient(app, cookies={"session_id": "not-a-session"})

        response = client.get("/api/v1/devices")

        assert response.status_code == 401
        assert response.json()["errors"][0]["name"] == "UnauthorizedError"

    def test_expired_session_is_unauthorized(self, app, make_user, session_repository):
        user = make_user("admin")
        session = session_repository.open(user.id, expires_in=timedelta(seconds=-1))
        client = TestClient(app, cookies={"session_id": session.token})

        response = client.get("/api/v1/devices")

        assert response.status_code == 401

    def test_valid_session_resolves_user(self, client_for):
        client, _ = client_for("admin")

        response = client.get("/api/v1/devices")

        assert response.status_code == 200
        assert response.json() == []


class TestStatus:
    """Health endpoint."""

    def test_status_healthy(self, client):
        response = client.get("/api/v1/status")

        assert response.status_code == 200
        body = response.json()
        assert body["status"] == "healthy"
        assert body["database"] == "healthy"
        assert body["environment"] == "testing"

    def test_status_unhealthy(self, app, client, database):
        database.healthy = False

        response = client.get("/api/v1/status")

        assert response.json()["database"] == "unhealthy"


class TestErrorEnvelope:
    """Unexpected errors are wrapped without leaking details in production."""

    def test_unexpected_error_returns_500(self, app):
        async def broken_repository():
            raise RuntimeError("boom")

        app.dependency_overrides[dependencies.get_device_repository] = broken_repository
        client = TestClient(app, raise_server_exceptions=False)
        app.dependency_overrides[dependencies.get_current_user] = lambda: _Admin()

        response = client.get("/api/v1/devices")

        assert response.status_code == 500
        assert response.json()["success"] is False


class _Admin:
    id = "admin"
    username = "admin"
    features = ["read:devices"]

"""Tests for session endpoints."""

import httpx
import pytest
from fastapi.testclient import TestClient

from api import create_app

from fakes import FakeBackend, create_test_token, envelope, user_payload


@pytest.fixture
def client(container):
    with TestClient(create_app()) as test_client:
        yield test_client


class TestSessionState:
    def test_anonymous_after_startup(self, client, backend: FakeBackend):
        """Without a stored token the startup check makes no request."""
        response = client.get("/api/session")

        assert response.status_code == 200
        assert response.json() == {"is_authenticated": False, "is_loading": False, "user": None}
        assert backend.requests == []

    def test_session_restored_on_startup(self, container, backend: FakeBackend, token_store):
        token_store.set(create_test_token(role="admin"))
        backend.add("GET", "/auth/profile", envelope(data=user_payload(role="admin")))

        with TestClient(create_app()) as client:
            data = client.get("/api/session").json()

        assert data["is_authenticated"] is True
        assert data["user"]["role"] == "admin"
        assert backend.paths() == ["/api/auth/profile"]

    def test_expired_session_dropped_on_startup(self, container, backend: FakeBackend, token_store):
        token_store.set(create_test_token(expired=True))
        backend.add("GET", "/auth/profile", envelope(success=False, message="Token expired"), 401)

        with TestClient(create_app()) as client:
            data = client.get("/api/session").json()

        assert data["is_authenticated"] is False
        assert token_store.get() is None


class TestLogin:
    def test_login_success(self, client, backend: FakeBackend, token_store):
        token = create_test_token()
        backend.add("POST", "/auth/login", {
            "success": True, "message": "Login successful", "token": token, "user": user_payload(),
        })

        response = client.post(
            "/api/session/login", json={"identifier": "jdoe", "password": "secret"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["success"] is True
        assert data["user"]["username"] == "jdoe"
        assert token_store.get() == token
        assert client.get("/api/session").json()["is_authenticated"] is True

    def test_login_rejected(self, client, backend: FakeBackend, token_store):
        backend.add("POST", "/auth/login", {"success": False, "message": "Invalid credentials"}, 401)

        response = client.post(
            "/api/session/login", json={"identifier": "jdoe", "password": "wrong"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Invalid credentials"
        assert token_store.get() is None

    def test_login_backend_down(self, client, backend: FakeBackend):
        backend.add("POST", "/auth/login", httpx.ConnectError)

        response = client.post(
            "/api/session/login", json={"identifier": "jdoe", "password": "secret"}
        )

        assert response.status_code == 401
        assert response.json()["detail"] == "Login failed. Please try again."

    def test_login_requires_fields(self, client):
        response = client.post("/api/session/login", json={"identifier": "jdoe"})
        assert response.status_code == 422


class TestLogout:
    def test_logout_clears_session(self, client, backend: FakeBackend, token_store):
        backend.add("POST", "/auth/login", {
            "success": True, "token": "tok", "user": user_payload(),
        })
        client.post("/api/session/login", json={"identifier": "jdoe", "password": "secret"})
        request_count = len(backend.requests)

        response = client.post("/api/session/logout")

        assert response.status_code == 204
        assert token_store.get() is None
        assert client.get("/api/session").json()["user"] is None
        assert len(backend.requests) == request_count

"""Tests for the auth context."""

import json

import httpx
import pytest

from modules.auth import (
    AuthAPI,
    AuthContext,
    IAuthContext,
    MemoryTokenStore,
    NotAuthenticatedError,
    ProfileUpdate,
    Role,
)
from modules.client import ApiClient

from fakes import TEST_API_BASE, FakeBackend, create_test_token, envelope, user_payload


def login_ok(role: str = "member", token: str = "new-token") -> dict:
    return {
        "success": True,
        "message": "Login successful",
        "token": token,
        "user": user_payload(role=role),
    }


class TestAuthContext:
    @pytest.fixture
    def auth(self, api_client, token_store) -> AuthContext:
        return AuthContext(AuthAPI(api_client), token_store)

    def test_satisfies_interface(self, auth):
        assert isinstance(auth, IAuthContext)

    def test_initial_state(self, auth):
        """Before the first check: no user and loading."""
        assert auth.user is None
        assert auth.is_loading is True
        assert auth.is_authenticated is False

    # check_auth

    @pytest.mark.asyncio
    async def test_check_auth_without_token_makes_no_request(self, auth, backend: FakeBackend):
        await auth.check_auth()

        assert backend.requests == []
        assert auth.user is None
        assert auth.is_loading is False

    @pytest.mark.asyncio
    async def test_check_auth_restores_session(self, auth, backend: FakeBackend, token_store):
        token = create_test_token()
        token_store.set(token)
        backend.add("GET", "/auth/profile", envelope(data=user_payload(role="admin")))

        await auth.check_auth()

        assert auth.user.role is Role.ADMIN
        assert auth.is_authenticated is True
        assert auth.is_loading is False
        assert backend.last_request.headers["authorization"] == f"Bearer {token}"
        assert token_store.get() == token

    @pytest.mark.asyncio
    async def test_rejected_token_is_deleted(self, auth, backend: FakeBackend, token_store):
        """An expired or invalid token is dropped on a failed profile fetch."""
        token_store.set(create_test_token(expired=True))
        backend.add(
            "GET", "/auth/profile", envelope(success=False, message="Invalid token"), 401
        )

        await auth.check_auth()

        assert auth.user is None
        assert token_store.get() is None
        assert auth.is_loading is False

    @pytest.mark.asyncio
    async def test_check_auth_keeps_token_for_local_email_domain(self, auth, backend: FakeBackend, token_store):
        token_store.set("tok")
        backend.add("GET", "/auth/profile", envelope(data=user_payload(email="pastor@localhost")))

        await auth.check_auth()

        assert auth.user.email == "pastor@localhost"
        assert token_store.get() == "tok"

    @pytest.mark.asyncio
    async def test_network_error_during_check_is_not_raised(self, auth, backend: FakeBackend, token_store):
        token_store.set("tok")
        backend.add("GET", "/auth/profile", httpx.ConnectError)

        await auth.check_auth()

        assert auth.user is None
        assert token_store.get() is None
        assert auth.is_loading is False

    @pytest.mark.asyncio
    async def test_start_checks_only_once(self, auth, backend: FakeBackend, token_store):
        token_store.set("tok")
        backend.add("GET", "/auth/profile", envelope(data=user_payload()))

        await auth.start()
        await auth.start()

        assert backend.paths() == ["/api/auth/profile"]

    @pytest.mark.asyncio
    async def test_close_keeps_token_and_rearms(self, auth, backend: FakeBackend, token_store):
        token_store.set("tok")
        backend.add("GET", "/auth/profile", envelope(data=user_payload()))
        await auth.start()

        await auth.close()

        assert auth.user is None
        assert auth.is_loading is True
        assert token_store.get() == "tok"

        await auth.start()
        assert auth.is_authenticated is True
        assert len(backend.requests) == 2

    # login

    @pytest.mark.asyncio
    async def test_login_success_persists_token(self, auth, backend: FakeBackend, token_store):
        token = create_test_token()
        backend.add("POST", "/auth/login", login_ok(token=token))

        result = await auth.login("jdoe", "secret")

        assert result.success is True
        assert result.message == "Login successful"
        assert result.user.username == "jdoe"
        assert auth.user == result.user
        assert token_store.get() == token

    @pytest.mark.asyncio
    async def test_login_with_local_email_domain(self, auth, backend: FakeBackend, token_store):
        backend.add("POST", "/auth/login", {
            "success": True,
            "token": "tok",
            "user": user_payload(role="admin", email="admin@church.local"),
        })

        result = await auth.login("admin", "secret")

        assert result.success is True
        assert result.user.email == "admin@church.local"
        assert token_store.get() == "tok"

    @pytest.mark.asyncio
    async def test_login_sends_identifier_as_username(self, auth, backend: FakeBackend):
        """The backend accepts a username or an email in the username field."""
        backend.add("POST", "/auth/login", login_ok())

        await auth.login("jdoe@example.com", "secret")

        body = json.loads(backend.last_request.content)
        assert body == {"username": "jdoe@example.com", "password": "secret"}

    @pytest.mark.asyncio
    async def test_login_rejected_returns_backend_message(self, auth, backend: FakeBackend, token_store):
        backend.add(
            "POST", "/auth/login", {"success": False, "message": "Invalid credentials"}, 401
        )

        result = await auth.login("jdoe", "wrong")

        assert result.success is False
        assert result.message == "Invalid credentials"
        assert auth.user is None
        assert token_store.get() is None

    @pytest.mark.asyncio
    async def test_login_rejected_without_message(self, auth, backend: FakeBackend):
        backend.add("POST", "/auth/login", {"success": False}, 401)

        result = await auth.login("jdoe", "wrong")

        assert result.message == "Login failed"

    @pytest.mark.asyncio
    async def test_login_success_without_token_is_failure(self, auth, backend: FakeBackend, token_store):
        backend.add("POST", "/auth/login", {"success": True, "user": user_payload()})

        result = await auth.login("jdoe", "secret")

        assert result.success is False
        assert token_store.get() is None

    @pytest.mark.asyncio
    async def test_login_network_error(self, auth, backend: FakeBackend):
        backend.add("POST", "/auth/login", httpx.ConnectError)

        result = await auth.login("jdoe", "secret")

        assert result.success is False
        assert result.message == "Login failed. Please try again."

    @pytest.mark.asyncio
    async def test_login_malformed_response(self, auth, backend: FakeBackend):
        backend.add("POST", "/auth/login", "Internal Server Error", 500)

        result = await auth.login("jdoe", "secret")

        assert result.success is False
        assert result.message == "Login failed. Please try again."

    # logout

    @pytest.mark.asyncio
    async def test_logout_clears_user_and_token(self, auth, backend: FakeBackend, token_store):
        backend.add("POST", "/auth/login", login_ok())
        await auth.login("jdoe", "secret")

        auth.logout()

        assert auth.user is None
        assert auth.is_authenticated is False
        assert token_store.get() is None

    def test_logout_makes_no_request(self, auth, backend: FakeBackend, token_store):
        token_store.set("tok")
        auth.logout()
        assert backend.requests == []

    # profile

    @pytest.mark.asyncio
    async def test_update_profile_replaces_user(self, auth, backend: FakeBackend):
        backend.add("POST", "/auth/login", login_ok())
        backend.add("PUT", "/auth/profile", envelope(data=user_payload(first_name="Janet")))
        await auth.login("jdoe", "secret")

        response = await auth.update_profile(ProfileUpdate(first_name="Janet"))

        assert response.success is True
        assert auth.user.first_name == "Janet"
        assert json.loads(backend.last_request.content) == {"first_name": "Janet"}

    @pytest.mark.asyncio
    async def test_update_profile_failure_keeps_user(self, auth, backend: FakeBackend):
        backend.add("POST", "/auth/login", login_ok())
        backend.add("PUT", "/auth/profile", envelope(success=False, message="Email taken"), 400)
        await auth.login("jdoe", "secret")

        response = await auth.update_profile(ProfileUpdate(email="taken@example.com"))

        assert response.success is False
        assert auth.user.first_name == "Jane"

    @pytest.mark.asyncio
    async def test_update_profile_requires_session(self, auth):
        with pytest.raises(NotAuthenticatedError):
            await auth.update_profile(ProfileUpdate(first_name="x"))

    @pytest.mark.asyncio
    async def test_change_password(self, auth, backend: FakeBackend):
        backend.add("POST", "/auth/login", login_ok())
        backend.add("PUT", "/auth/change-password", envelope(message="Password changed"))
        await auth.login("jdoe", "secret")

        response = await auth.change_password("secret", "better-secret")

        assert response.message == "Password changed"
        assert json.loads(backend.last_request.content) == {
            "current_password": "secret",
            "new_password": "better-secret",
        }


class TestSharedTokenStore:
    @pytest.mark.asyncio
    async def test_two_contexts_share_session_through_store(self, backend: FakeBackend):
        """A login in one process is restored by another using the same store."""
        store = MemoryTokenStore()
        backend.add("POST", "/auth/login", login_ok(token="shared"))
        backend.add("GET", "/auth/profile", envelope(data=user_payload()))

        client = ApiClient(TEST_API_BASE, store, transport=backend.transport)
        first = AuthContext(AuthAPI(client), store)
        await first.login("jdoe", "secret")

        second = AuthContext(AuthAPI(client), store)
        await second.check_auth()

        assert second.user.username == "jdoe"
        assert backend.last_request.headers["authorization"] == "Bearer shared"

"""
Auth context implementation.

Holds the current user for the process and keeps the persisted session
token in step with it.
"""

import logging
from typing import Any, Optional

from modules.client import ApiClientError
from shared.models import ApiResponse

from .client import AuthAPI
from .exceptions import NotAuthenticatedError
from .interfaces import IAuthContext
from .models import AuthState, LoginRequest, LoginResult, ProfileUpdate, User
from .token_store import ITokenStore

logger = logging.getLogger(__name__)

LOGIN_FAILED_MESSAGE = "Login failed"
LOGIN_ERROR_MESSAGE = "Login failed. Please try again."


class AuthContext(IAuthContext):
    """
    Process-wide authentication state.

    State is ``user`` and ``is_loading``; ``is_authenticated`` is derived.
    ``is_loading`` starts True and flips to False once, when the first
    session check finishes.
    """

    def __init__(self, auth_api: AuthAPI, token_store: ITokenStore):
        self._api = auth_api
        self._tokens = token_store
        self._user: Optional[User] = None
        self._is_loading = True
        self._started = False

    @property
    def user(self) -> Optional[User]:
        return self._user

    @property
    def is_loading(self) -> bool:
        return self._is_loading

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    @property
    def state(self) -> AuthState:
        return AuthState(user=self._user, is_loading=self._is_loading)

    async def start(self) -> None:
        if self._started:
            return
        self._started = True
        await self.check_auth()

    async def close(self) -> None:
        # The persisted token survives so the next mount can restore the session.
        self._user = None
        self._is_loading = True
        self._started = False

    def _invalidate(self) -> None:
        self._tokens.delete()
        self._user = None

    async def check_auth(self) -> None:
        try:
            if self._tokens.get() is None:
                self._user = None
                return

            response = await self._api.get_profile()
            if response.success and response.data is not None:
                self._user = response.data
            else:
                logger.info(f"Stored session rejected by backend: {response.message}")
                self._invalidate()
        except ApiClientError as e:
            logger.warning(f"Auth check failed: {e.message}")
            self._invalidate()
        finally:
            self._is_loading = False

    async def login(self, identifier: str, secret: str) -> LoginResult:
        try:
            response = await self._api.login(
                LoginRequest(username=identifier, password=secret)
            )
            if response.success and response.token and response.user:
                self._tokens.set(response.token)
                self._user = response.user
                logger.info(f"Logged in as {response.user.username} ({response.user.role.value})")
                return LoginResult(success=True, message="Login successful", user=response.user)
        except (ApiClientError, OSError) as e:
            logger.warning(f"Login error: {e}")
            return LoginResult(success=False, message=LOGIN_ERROR_MESSAGE)

        return LoginResult(success=False, message=response.message or LOGIN_FAILED_MESSAGE)

    def logout(self) -> None:
        self._tokens.delete()
        self._user = None

    def require_user(self) -> User:
        """Return the current user or raise NotAuthenticatedError."""
        if self._user is None:
            raise NotAuthenticatedError()
        return self._user

    async def update_profile(self, changes: ProfileUpdate) -> ApiResponse[User]:
        """Send a profile update; on success the returned record replaces ``user``."""
        self.require_user()
        response = await self._api.update_profile(changes)
        if response.success and response.data is not None:
            self._user = response.data
        return response

    async def change_password(self, current_password: str, new_password: str) -> ApiResponse[Any]:
        self.require_user()
        return await self._api.change_password(current_password, new_password)


# Verify the implementation satisfies the interface
def _verify_interface(auth_api: AuthAPI, token_store: ITokenStore) -> IAuthContext:
    """Type check that AuthContext implements IAuthContext."""
    return AuthContext(auth_api, token_store)

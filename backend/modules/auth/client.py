"""Wire calls for the ``/auth`` endpoints."""

from typing import Any

from modules.client import IApiClient, MalformedResponseError

from .models import LoginRequest, LoginResponse, ProfileUpdate, RegisterRequest, User
from shared.models import ApiResponse


class AuthAPI:
    """Thin façade over the ``/auth`` endpoints."""

    def __init__(self, api: IApiClient):
        self._api = api

    async def login(self, credentials: LoginRequest) -> LoginResponse:
        payload = await self._api.request(
            "/auth/login", method="POST", body=credentials.model_dump()
        )
        try:
            return LoginResponse.model_validate(payload)
        except ValueError as e:
            raise MalformedResponseError(self._api.url_for("/auth/login"), str(e)) from e

    async def register(self, data: RegisterRequest) -> ApiResponse[User]:
        return await self._api.envelope(
            "/auth/register", User, method="POST", body=data.model_dump(exclude_none=True)
        )

    async def get_profile(self) -> ApiResponse[User]:
        return await self._api.envelope("/auth/profile", User)

    async def update_profile(self, changes: ProfileUpdate) -> ApiResponse[User]:
        return await self._api.envelope(
            "/auth/profile", User, method="PUT", body=changes.model_dump(exclude_none=True)
        )

    async def change_password(self, current_password: str, new_password: str) -> ApiResponse[Any]:
        return await self._api.envelope(
            "/auth/change-password",
            method="PUT",
            body={"current_password": current_password, "new_password": new_password},
        )

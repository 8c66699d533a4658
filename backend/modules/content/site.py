"""Site-wide endpoints: admin dashboard counters and backend health."""

from typing import Any

from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import DashboardStats


class DashboardClient(BaseResourceClient):
    resource_path = "/dashboard"

    async def stats(self) -> ApiResponse[DashboardStats]:
        return await self._api.get(f"{self.resource_path}/stats", DashboardStats)


class HealthClient(BaseResourceClient):
    resource_path = "/health"

    async def check(self) -> ApiResponse[Any]:
        return await self._api.get(self.resource_path)

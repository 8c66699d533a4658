"""Visitor analytics for the admin dashboard. All endpoints need an admin session."""

from datetime import date
from typing import Optional, Union

from modules.client import with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import ActiveVisitor, AnalyticsDashboard, DetailedAnalytics

DETAILED_PARAMS = ("startDate", "endDate", "page", "limit")


def _day(value: Union[date, str, None]) -> Optional[str]:
    if isinstance(value, date):
        return value.isoformat()
    return value


class AnalyticsClient(BaseResourceClient):
    resource_path = "/analytics"

    async def dashboard_stats(self, days: int = 30) -> ApiResponse[AnalyticsDashboard]:
        """Traffic totals, today's numbers and daily series over the last ``days`` days."""
        path = with_query(f"{self.resource_path}/dashboard-stats", {"days": days})
        return await self._api.get(path, AnalyticsDashboard)

    async def detailed(
        self,
        start_date: Union[date, str, None] = None,
        end_date: Union[date, str, None] = None,
        page: Optional[int] = None,
        limit: Optional[int] = None,
    ) -> ApiResponse[DetailedAnalytics]:
        """
        Visitor sessions between two days, newest first.

        The backend defaults to the last 30 days, 50 sessions per page.
        """
        params = {
            "startDate": _day(start_date),
            "endDate": _day(end_date),
            "page": page,
            "limit": limit,
        }
        path = with_query(f"{self.resource_path}/detailed", params, DETAILED_PARAMS)
        return await self._api.get(path, DetailedAnalytics)

    async def active_users(self) -> ApiResponse[list[ActiveVisitor]]:
        """Visitors seen in the last 30 minutes."""
        return await self._api.get(f"{self.resource_path}/active-users", list[ActiveVisitor])

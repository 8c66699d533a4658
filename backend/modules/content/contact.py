"""Contact form submissions and the admin inbox."""

from typing import Any, Optional

from modules.client import with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import ContactMessage, ContactRequest, UnreadCount


class ContactClient(BaseResourceClient):
    resource_path = "/contact"

    async def submit(self, message: ContactRequest) -> ApiResponse[Any]:
        return await self._api.post(
            self.resource_path, message.model_dump(mode="json", exclude_none=True)
        )

    async def get_all(
        self,
        unread: Optional[bool] = None,
        limit: Optional[int] = None,
    ) -> ApiResponse[list[ContactMessage]]:
        path = with_query(self.resource_path, {"unread": unread, "limit": limit}, ("unread", "limit"))
        return await self._api.get(path, list[ContactMessage])

    async def get(self, message_id: int) -> ApiResponse[ContactMessage]:
        return await self._api.get(self._item_path(message_id), ContactMessage)

    async def mark_read(self, message_id: int) -> ApiResponse[Any]:
        return await self._api.put(f"{self._item_path(message_id)}/read")

    async def delete(self, message_id: int) -> ApiResponse[Any]:
        return await self._api.delete(self._item_path(message_id))

    async def unread_count(self) -> ApiResponse[UnreadCount]:
        return await self._api.get(f"{self.resource_path}/unread/count", UnreadCount)

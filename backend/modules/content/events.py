"""Events resource client. Images travel as base64 inside the JSON body."""

from typing import Any, Optional

from modules.client import FileUpload, with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import CreateEventRequest, Event, EventType, UpdateEventRequest

LIST_PARAMS = ("featured", "type", "limit")


class EventsClient(BaseResourceClient):
    resource_path = "/events"

    async def get_all(
        self,
        featured: Optional[bool] = None,
        event_type: Optional[EventType | str] = None,
        limit: Optional[int] = None,
    ) -> ApiResponse[list[Event]]:
        path = with_query(
            self.resource_path,
            {"featured": featured, "type": event_type, "limit": limit},
            LIST_PARAMS,
        )
        return await self._api.get(path, list[Event])

    async def get(self, event_id: int) -> ApiResponse[Event]:
        return await self._api.get(self._item_path(event_id), Event)

    async def upcoming(self, limit: Optional[int] = None) -> ApiResponse[list[Event]]:
        path = with_query(f"{self.resource_path}/upcoming/events", {"limit": limit})
        return await self._api.get(path, list[Event])

    async def create(
        self,
        data: CreateEventRequest,
        image: Optional[FileUpload] = None,
    ) -> ApiResponse[Event]:
        body: dict[str, Any] = data.model_dump(mode="json", exclude_none=True)
        if image is not None:
            body.update(self._inline_image(image))
        return await self._api.post(self.resource_path, body, Event)

    async def update(
        self,
        event_id: int,
        data: UpdateEventRequest,
        image: Optional[FileUpload] = None,
        remove_image: bool = False,
    ) -> ApiResponse[Event]:
        """
        Update an event.

        A new ``image`` wins over ``remove_image``; removal sends the three
        image columns as null.
        """
        body: dict[str, Any] = data.model_dump(mode="json", exclude_none=True)
        if image is not None:
            body.update(self._inline_image(image))
        elif remove_image:
            body.update(image_data=None, image_type=None, image_name=None)
        return await self._api.put(self._item_path(event_id), body, Event)

    async def delete(self, event_id: int) -> ApiResponse[Any]:
        return await self._api.delete(self._item_path(event_id))

    def get_image_url(self, event_id: int) -> str:
        return self._asset_url(f"{self.resource_path}/{event_id}/image")

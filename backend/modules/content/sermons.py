"""Sermons client, including uploaded sermon media."""

from typing import Any, Optional
from urllib.parse import quote

from modules.client import FileUpload, to_base64, with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import Sermon, SermonMediaType, SermonRequest

LIST_PARAMS = ("featured", "preacher", "limit")


class SermonsClient(BaseResourceClient):
    resource_path = "/sermons"

    async def get_all(
        self,
        featured: Optional[bool] = None,
        preacher: Optional[str] = None,
        limit: Optional[int] = None,
    ) -> ApiResponse[list[Sermon]]:
        params = {"featured": featured, "preacher": preacher, "limit": limit}
        return await self._api.get(
            with_query(self.resource_path, params, LIST_PARAMS), list[Sermon]
        )

    async def get(self, sermon_id: int) -> ApiResponse[Sermon]:
        return await self._api.get(self._item_path(sermon_id), Sermon)

    async def latest(self, limit: Optional[int] = None) -> ApiResponse[list[Sermon]]:
        path = with_query(f"{self.resource_path}/latest/sermons", {"limit": limit})
        return await self._api.get(path, list[Sermon])

    async def by_preacher(
        self, preacher: str, limit: Optional[int] = None
    ) -> ApiResponse[list[Sermon]]:
        path = with_query(
            f"{self.resource_path}/preacher/{quote(preacher, safe='')}", {"limit": limit}
        )
        return await self._api.get(path, list[Sermon])

    async def create(self, data: SermonRequest) -> ApiResponse[Sermon]:
        return await self._api.post(
            self.resource_path, data.model_dump(mode="json", exclude_none=True), Sermon
        )

    async def update(self, sermon_id: int, data: SermonRequest) -> ApiResponse[Sermon]:
        return await self._api.put(
            self._item_path(sermon_id), data.model_dump(mode="json", exclude_none=True), Sermon
        )

    async def delete(self, sermon_id: int) -> ApiResponse[Any]:
        return await self._api.delete(self._item_path(sermon_id))

    async def upload_media(
        self,
        sermon_id: int,
        media_type: SermonMediaType | str,
        media: FileUpload,
    ) -> ApiResponse[Any]:
        media = self._require_content(media)
        body = {
            "mediaType": SermonMediaType(media_type).value,
            "mediaData": to_base64(media),
            "mimeType": media.content_type,
            "fileName": media.filename,
        }
        return await self._api.post(f"/files/sermons/{sermon_id}/media", body)

    def get_media_url(self, sermon_id: int, media_type: SermonMediaType | str) -> str:
        return self._asset_url(f"/files/sermons/{sermon_id}/{SermonMediaType(media_type).value}")

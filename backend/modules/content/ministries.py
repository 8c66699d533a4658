"""Ministries resource client. Writes are multipart with a ``featured_image`` part."""

from typing import Any, Optional
from urllib.parse import quote

from modules.client import FileUpload, MultipartForm, with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import CreateMinistryRequest, Ministry, MinistryStatus, UpdateMinistryRequest


class MinistriesClient(BaseResourceClient):
    resource_path = "/ministries"

    async def get_all(
        self,
        page: int = 1,
        limit: int = 10,
        status: Optional[MinistryStatus | str] = MinistryStatus.ACTIVE,
    ) -> ApiResponse[list[Ministry]]:
        path = with_query(
            self.resource_path,
            {"page": page, "limit": limit, "status": status},
            ("page", "limit", "status"),
        )
        return await self._api.get(path, list[Ministry])

    async def get_by_slug(self, slug: str) -> ApiResponse[Ministry]:
        return await self._api.get(self._item_path(quote(slug, safe="")), Ministry)

    def _form(
        self,
        data: CreateMinistryRequest | UpdateMinistryRequest,
        image: Optional[FileUpload],
    ) -> MultipartForm:
        form = MultipartForm()
        for name, value in data.model_dump(exclude_none=True).items():
            form.add_field(name, value)
        if image is not None:
            form.add_file("featured_image", self._require_content(image))
        return form

    async def create(
        self,
        data: CreateMinistryRequest,
        image: Optional[FileUpload] = None,
    ) -> ApiResponse[Ministry]:
        return await self._api.post(self.resource_path, self._form(data, image), Ministry)

    async def update(
        self,
        ministry_id: int,
        data: UpdateMinistryRequest,
        image: Optional[FileUpload] = None,
        remove_image: bool = False,
    ) -> ApiResponse[Ministry]:
        form = self._form(data, image)
        if remove_image and image is None:
            form.add_field("remove_image", True)
        return await self._api.put(self._item_path(ministry_id), form, Ministry)

    async def delete(self, ministry_id: int) -> ApiResponse[Any]:
        return await self._api.delete(self._item_path(ministry_id))

    def get_image_url(self, ministry_id: int) -> str:
        return self._asset_url(f"{self.resource_path}/{ministry_id}/image")

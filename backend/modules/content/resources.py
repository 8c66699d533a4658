"""Resources (downloadable files) client. Files travel as base64 inside the JSON body."""

from typing import Any, Optional

from modules.client import FileUpload, to_base64, with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import Resource, ResourceCategory, ResourceUpload, UpdateResourceRequest

LIST_PARAMS = ("page", "limit", "category", "search", "featured")


def _file_fields(upload: FileUpload) -> dict[str, Any]:
    return {
        "fileData": to_base64(upload),
        "mimeType": upload.content_type,
        "fileName": upload.filename,
        "fileSize": upload.size,
    }


class ResourcesClient(BaseResourceClient):
    resource_path = "/resources"

    async def get_all(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        category: Optional[ResourceCategory | str] = None,
        search: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> ApiResponse[list[Resource]]:
        params = {
            "page": page,
            "limit": limit,
            "category": category,
            "search": search,
            "featured": featured,
        }
        return await self._api.get(
            with_query(self.resource_path, params, LIST_PARAMS), list[Resource]
        )

    async def get(self, resource_id: int) -> ApiResponse[Resource]:
        return await self._api.get(self._item_path(resource_id), Resource)

    async def create(self, data: ResourceUpload, file: FileUpload) -> ApiResponse[Resource]:
        body = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        body.update(_file_fields(self._require_content(file)))
        return await self._api.post(self.resource_path, body, Resource)

    async def update(
        self,
        resource_id: int,
        data: UpdateResourceRequest,
        file: Optional[FileUpload] = None,
    ) -> ApiResponse[Resource]:
        body = data.model_dump(mode="json", by_alias=True, exclude_none=True)
        if file is not None:
            body.update(_file_fields(self._require_content(file)))
        return await self._api.put(self._item_path(resource_id), body, Resource)

    async def delete(self, resource_id: int) -> ApiResponse[Any]:
        return await self._api.delete(self._item_path(resource_id))

    async def download(self, resource_id: int) -> ApiResponse[Any]:
        """Record a download; the file itself is served from ``get_file_url``."""
        return await self._api.post(f"{self._item_path(resource_id)}/download")

    async def categories(self) -> ApiResponse[list[str]]:
        return await self._api.get(f"{self.resource_path}/categories", list[str])

    def get_file_url(self, resource_id: int) -> str:
        return self._asset_url(f"/files/resources/{resource_id}")

"""
Gallery client.

The gallery lives under ``/files/gallery`` and mixes two kinds of entries:
collections (several images) and legacy single images. Uploads send the
images as base64 inside the JSON body.
"""

from typing import Any, Optional, Sequence

from modules.client import FileUpload, to_base64, with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .exceptions import InvalidUploadError
from .models import GalleryCategory, GalleryCollection, GalleryItem, GalleryItemUpdate

LIST_PARAMS = ("page", "limit", "category", "search")


def _image_fields(upload: FileUpload) -> dict[str, str]:
    return {
        "imageData": to_base64(upload),
        "imageType": upload.content_type,
        "imageName": upload.filename,
    }


class GalleryClient(BaseResourceClient):
    resource_path = "/files/gallery"

    async def get_all(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        category: Optional[GalleryCategory | str] = None,
        search: Optional[str] = None,
    ) -> ApiResponse[list[GalleryItem]]:
        # "all" is the UI's no-filter value; the backend ignores it too.
        if category == "all":
            category = None
        params = {"page": page, "limit": limit, "category": category, "search": search}
        return await self._api.get(
            with_query(self.resource_path, params, LIST_PARAMS), list[GalleryItem]
        )

    async def get_collection(self, collection_id: int) -> ApiResponse[GalleryCollection]:
        return await self._api.get(
            f"{self.resource_path}/collections/{collection_id}", GalleryCollection
        )

    async def upload(
        self,
        title: str,
        image: FileUpload,
        category: GalleryCategory | str = GalleryCategory.GENERAL,
        description: Optional[str] = None,
    ) -> ApiResponse[Any]:
        """Upload a single image. The new id comes back as a top-level ``id``."""
        body: dict[str, Any] = {
            "title": title,
            "category": GalleryCategory(category).value,
            **_image_fields(self._require_content(image)),
        }
        if description is not None:
            body["description"] = description
        return await self._api.post(self.resource_path, body)

    async def upload_collection(
        self,
        title: str,
        images: Sequence[FileUpload],
        category: GalleryCategory | str = GalleryCategory.GENERAL,
        description: Optional[str] = None,
    ) -> ApiResponse[Any]:
        if not images:
            raise InvalidUploadError("a collection needs at least one image")
        body: dict[str, Any] = {
            "title": title,
            "category": GalleryCategory(category).value,
            "images": [_image_fields(self._require_content(image)) for image in images],
        }
        if description is not None:
            body["description"] = description
        return await self._api.post(f"{self.resource_path}/collections", body)

    async def update(self, item_id: int, data: GalleryItemUpdate) -> ApiResponse[Any]:
        return await self._api.put(self._item_path(item_id), data.model_dump(mode="json"))

    async def delete(self, item_id: int) -> ApiResponse[Any]:
        """Delete a collection (with its images) or a single image."""
        return await self._api.delete(self._item_path(item_id))

    def get_image_url(self, image_id: int) -> str:
        return self._asset_url(f"{self.resource_path}/{image_id}")

    def get_collection_image_url(self, image_id: int) -> str:
        return self._asset_url(f"{self.resource_path}/images/{image_id}")

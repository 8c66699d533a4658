"""Posts resource client. Writes are multipart with a ``featured_image`` part."""

from typing import Any, Optional

from modules.client import FileUpload, MultipartForm, with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import CreatePostRequest, Post, PostStatus, UpdatePostRequest

LIST_PARAMS = ("page", "limit", "status", "category", "search", "featured", "author_id")
PUBLISHED_PARAMS = ("status", "page", "limit", "category", "search", "featured")


class PostsClient(BaseResourceClient):
    resource_path = "/posts"

    async def get_all(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        status: Optional[PostStatus | str] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        featured: Optional[bool] = None,
        author_id: Optional[int] = None,
    ) -> ApiResponse[list[Post]]:
        params = {
            "page": page,
            "limit": limit,
            "status": status,
            "category": category,
            "search": search,
            "featured": featured,
            "author_id": author_id,
        }
        return await self._api.get(with_query(self.resource_path, params, LIST_PARAMS), list[Post])

    async def published(
        self,
        page: Optional[int] = None,
        limit: Optional[int] = None,
        category: Optional[str] = None,
        search: Optional[str] = None,
        featured: Optional[bool] = None,
    ) -> ApiResponse[list[Post]]:
        """Public listing; always filters on ``status=published``."""
        params = {
            "status": PostStatus.PUBLISHED,
            "page": page,
            "limit": limit,
            "category": category,
            "search": search,
            "featured": featured,
        }
        return await self._api.get(
            with_query(self.resource_path, params, PUBLISHED_PARAMS), list[Post]
        )

    async def get(self, post_id: int | str) -> ApiResponse[Post]:
        """Fetch a post by numeric id or by slug."""
        return await self._api.get(self._item_path(post_id), Post)

    async def categories(self) -> ApiResponse[list[str]]:
        return await self._api.get(f"{self.resource_path}/categories", list[str])

    def _form(
        self,
        data: CreatePostRequest | UpdatePostRequest,
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
        data: CreatePostRequest,
        image: Optional[FileUpload] = None,
    ) -> ApiResponse[Post]:
        return await self._api.post(self.resource_path, self._form(data, image), Post)

    async def update(
        self,
        post_id: int,
        data: UpdatePostRequest,
        image: Optional[FileUpload] = None,
        remove_image: bool = False,
    ) -> ApiResponse[Post]:
        form = self._form(data, image)
        if remove_image:
            form.add_field("remove_image", True)
        return await self._api.put(self._item_path(post_id), form, Post)

    async def delete(self, post_id: int) -> ApiResponse[Any]:
        return await self._api.delete(self._item_path(post_id))

    def get_image_url(self, post_id: int) -> str:
        return self._asset_url(f"{self.resource_path}/{post_id}/image")

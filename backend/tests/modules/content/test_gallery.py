"""Tests for the gallery client."""

import json

import pytest

from modules.client import FileUpload
from modules.content import GalleryClient, InvalidUploadError
from modules.content.models import GalleryCategory, GalleryItemUpdate

from fakes import TEST_API_BASE, FakeBackend, envelope


@pytest.fixture
def gallery(api_client) -> GalleryClient:
    return GalleryClient(api_client)


@pytest.fixture
def photo() -> FileUpload:
    return FileUpload("baptism.jpg", "image/jpeg", b"jpeg-bytes")


class TestGalleryClient:
    @pytest.mark.asyncio
    async def test_listing_mixes_collections_and_singles(self, gallery, backend: FakeBackend):
        backend.add("GET", "/files/gallery", envelope(data=[
            {"id": 1, "title": "Camp", "type": "collection", "image_count": 12},
            {"id": 2, "title": "Choir", "type": "single"},
        ]))

        response = await gallery.get_all(category="all", page=1)

        assert backend.last_request.url.query == b"page=1"
        assert response.data[0].is_collection is True
        assert response.data[1].is_collection is False

    @pytest.mark.asyncio
    async def test_upload_single_returns_top_level_id(self, gallery, backend: FakeBackend, photo):
        backend.add("POST", "/files/gallery", envelope(message="Image uploaded", id=42))

        response = await gallery.upload("Baptism", photo, category=GalleryCategory.SERVICES)

        body = json.loads(backend.last_request.content)
        assert body["category"] == "services"
        assert body["imageName"] == "baptism.jpg"
        assert "description" not in body
        assert response.model_extra["id"] == 42

    @pytest.mark.asyncio
    async def test_upload_collection(self, gallery, backend: FakeBackend, photo):
        backend.add("POST", "/files/gallery/collections", envelope(message="Collection created", id=5))

        await gallery.upload_collection("Camp 2025", [photo, photo], description="Summer camp")

        body = json.loads(backend.last_request.content)
        assert len(body["images"]) == 2
        assert body["description"] == "Summer camp"

    @pytest.mark.asyncio
    async def test_empty_collection_rejected(self, gallery, backend: FakeBackend):
        with pytest.raises(InvalidUploadError):
            await gallery.upload_collection("Empty", [])
        assert backend.requests == []

    @pytest.mark.asyncio
    async def test_get_collection(self, gallery, backend: FakeBackend):
        backend.add("GET", "/files/gallery/collections/5", envelope(data={
            "id": 5, "title": "Camp", "images": [{"id": 50, "sort_order": 0}, {"id": 51, "sort_order": 1}],
        }))

        response = await gallery.get_collection(5)

        assert [image.id for image in response.data.images] == [50, 51]

    @pytest.mark.asyncio
    async def test_update(self, gallery, backend: FakeBackend):
        backend.add("PUT", "/files/gallery/5", envelope(message="Updated"))

        await gallery.update(5, GalleryItemUpdate(title="Camp", category="youth"))

        assert json.loads(backend.last_request.content) == {
            "title": "Camp", "description": None, "category": "youth",
        }

    def test_image_urls(self, gallery, backend: FakeBackend):
        assert gallery.get_image_url(2) == f"{TEST_API_BASE}/files/gallery/2"
        assert gallery.get_collection_image_url(50) == f"{TEST_API_BASE}/files/gallery/images/50"
        assert backend.requests == []

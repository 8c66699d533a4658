"""Tests for the ministries client."""

import pytest

from modules.client import FileUpload
from modules.content import MinistriesClient
from modules.content.models import CreateMinistryRequest, UpdateMinistryRequest

from fakes import TEST_API_BASE, FakeBackend, envelope


def ministry_payload(ministry_id: int = 1, **overrides):
    payload = {
        "id": ministry_id,
        "name": "Youth Ministry",
        "slug": "youth-ministry",
        "description": "For young people",
        "status": "active",
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def ministries(api_client) -> MinistriesClient:
    return MinistriesClient(api_client)


class TestMinistriesClient:
    @pytest.mark.asyncio
    async def test_default_listing_is_active_only(self, ministries, backend: FakeBackend):
        backend.add("GET", "/ministries", envelope(data=[ministry_payload()]))

        response = await ministries.get_all()

        assert backend.last_request.url.query == b"page=1&limit=10&status=active"
        assert response.data[0].slug == "youth-ministry"

    @pytest.mark.asyncio
    async def test_listing_without_status_filter(self, ministries, backend: FakeBackend):
        backend.add("GET", "/ministries", envelope(data=[]))

        await ministries.get_all(page=2, limit=5, status=None)

        assert backend.last_request.url.query == b"page=2&limit=5"

    @pytest.mark.asyncio
    async def test_listing_reads_ministries_pagination_keys(self, ministries, backend: FakeBackend):
        """The ministries listing names its pagination fields differently."""
        backend.add(
            "GET",
            "/ministries",
            envelope(
                data=[ministry_payload()],
                pagination={"currentPage": 2, "totalPages": 3, "totalItems": 21, "itemsPerPage": 10},
            ),
        )

        response = await ministries.get_all(page=2)

        assert response.success is True
        assert response.pagination.page == 2
        assert response.pagination.pages == 3
        assert response.pagination.total == 21
        assert response.pagination.limit == 10

    @pytest.mark.asyncio
    async def test_get_by_slug(self, ministries, backend: FakeBackend):
        backend.add("GET", "/ministries/youth-ministry", envelope(data=ministry_payload()))

        response = await ministries.get_by_slug("youth-ministry")

        assert response.data.name == "Youth Ministry"

    @pytest.mark.asyncio
    async def test_create_multipart_with_image(self, ministries, backend: FakeBackend):
        backend.add("POST", "/ministries", envelope(data=ministry_payload(3)))

        await ministries.create(
            CreateMinistryRequest(name="Choir", description="Music ministry"),
            image=FileUpload("choir.jpg", "image/jpeg", b"jpeg"),
        )

        request = backend.last_request
        assert request.headers["content-type"].startswith("multipart/form-data")
        assert b"Choir" in request.content
        assert b'filename="choir.jpg"' in request.content

    @pytest.mark.asyncio
    async def test_update_remove_image_only_without_new_image(self, ministries, backend: FakeBackend):
        backend.add("PUT", "/ministries/3", envelope(data=ministry_payload(3)))

        await ministries.update(
            3,
            UpdateMinistryRequest(),
            image=FileUpload("new.jpg", "image/jpeg", b"jpeg"),
            remove_image=True,
        )

        assert b'name="remove_image"' not in backend.last_request.content

    @pytest.mark.asyncio
    async def test_update_remove_image(self, ministries, backend: FakeBackend):
        backend.add("PUT", "/ministries/3", envelope(data=ministry_payload(3)))

        await ministries.update(3, UpdateMinistryRequest(leader_name="Sam"), remove_image=True)

        assert b'name="remove_image"' in backend.last_request.content
        assert b"Sam" in backend.last_request.content

    def test_image_url(self, ministries):
        assert ministries.get_image_url(3) == f"{TEST_API_BASE}/ministries/3/image"

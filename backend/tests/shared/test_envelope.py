"""
Tests for shared models.
"""

import pytest
from typing import Any

from shared.models import ApiResponse, Pagination, parse_envelope
from modules.content.models import Event


class TestApiResponse:
    """Tests for the response envelope."""

    def test_success_with_data(self):
        """Should expose data on a successful envelope."""
        response = parse_envelope({"success": True, "data": [1, 2, 3]}, list[int])
        assert response.success is True
        assert response.data == [1, 2, 3]
        assert response.ok is True

    def test_failure_without_data(self):
        """A failed envelope should carry its message and no data."""
        response = parse_envelope({"success": False, "message": "Event not found"})
        assert response.success is False
        assert response.message == "Event not found"
        assert response.data is None
        assert response.ok is False

    def test_pagination(self):
        """List endpoints should expose their pagination block."""
        response = parse_envelope({
            "success": True,
            "data": [],
            "pagination": {"page": 2, "limit": 10, "total": 35, "pages": 4},
        })
        assert response.pagination == Pagination(page=2, limit=10, total=35, pages=4)

    def test_pagination_with_item_counts_naming(self):
        """currentPage/itemsPerPage/totalItems/totalPages map onto the same fields."""
        response = parse_envelope({
            "success": True,
            "data": [],
            "pagination": {"currentPage": 2, "itemsPerPage": 10, "totalItems": 35, "totalPages": 4},
        })
        assert response.pagination == Pagination(page=2, limit=10, total=35, pages=4)

    def test_errors_list(self):
        """Validation failures should keep the backend's error list."""
        response = parse_envelope({
            "success": False,
            "message": "Validation failed",
            "errors": [{"msg": "Title is required", "param": "title"}],
        })
        assert response.errors == [{"msg": "Title is required", "param": "title"}]

    def test_extra_keys_preserved(self):
        """Upload endpoints return an id next to the envelope fields."""
        response = parse_envelope({"success": True, "message": "Uploaded", "id": 42})
        assert response.model_extra["id"] == 42

    def test_typed_data(self):
        """Data should be validated into the declared type."""
        response = parse_envelope(
            {"success": True, "data": {"id": 3, "title": "Vespers", "event_date": "2025-02-01"}},
            Event,
        )
        assert isinstance(response.data, Event)
        assert response.data.title == "Vespers"

    def test_generic_parameterization(self):
        """ApiResponse should be usable as ApiResponse[T] directly."""
        response = ApiResponse[int](success=True, data=5)
        assert response.data == 5


class TestParseEnvelope:
    def test_missing_success_is_rejected(self):
        """A body without 'success' is not an envelope."""
        with pytest.raises(ValueError):
            parse_envelope({"data": []})

    def test_non_object_is_rejected(self):
        """A JSON array is not an envelope."""
        with pytest.raises(ValueError):
            parse_envelope([1, 2, 3])

    def test_wrong_data_shape_is_rejected(self):
        """Data that does not match the declared type should fail."""
        with pytest.raises(ValueError):
            parse_envelope({"success": True, "data": "not-a-list"}, list[Event])

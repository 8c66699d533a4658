"""
Base class for resource clients.

Every resource client wraps the shared API client and builds asset URLs
the same way.
"""

from typing import Any, Optional

from modules.client import FileUpload, IApiClient, to_base64

from .exceptions import InvalidUploadError


class BaseResourceClient:
    """
    Common plumbing for one backend resource.

    Subclasses set ``resource_path`` (e.g. "/events") and expose typed
    operations built on ``self._api``.

    Example:
        class EventsClient(BaseResourceClient):
            resource_path = "/events"

            async def get(self, event_id: int) -> ApiResponse[Event]:
                return await self._api.get(self._item_path(event_id), Event)
    """

    resource_path: str = ""

    def __init__(self, api: IApiClient) -> None:
        """
        Initialize the resource client.

        Args:
            api: Shared API client (carries base URL and session token).
        """
        self._api = api

    def _item_path(self, item_id: Any) -> str:
        return f"{self.resource_path}/{item_id}"

    def _asset_url(self, path: str) -> str:
        # Pure: no request is made and the asset may not exist.
        return self._api.url_for(path)

    @staticmethod
    def _require_content(upload: Optional[FileUpload]) -> FileUpload:
        if upload is None:
            raise InvalidUploadError("no file provided")
        if not upload.content:
            raise InvalidUploadError(f"{upload.filename} is empty")
        return upload

    @classmethod
    def _inline_image(cls, upload: FileUpload) -> dict[str, str]:
        """Image fields for endpoints that take the file as base64 JSON."""
        upload = cls._require_content(upload)
        return {
            "image_data": to_base64(upload),
            "image_type": upload.content_type,
            "image_name": upload.filename,
        }

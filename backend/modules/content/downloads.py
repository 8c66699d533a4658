"""
Download tracking.

Reports file downloads to the backend and reads the download counters
shown on the admin dashboard.
"""

import logging
import uuid
from pathlib import PurePosixPath
from typing import Any, Optional
from urllib.parse import unquote, urlparse

from modules.client import IApiClient, with_query
from shared.models import ApiResponse

from .base import BaseResourceClient
from .models import DownloadAnalytics, DownloadEvent, DownloadRecord, DownloadStats

logger = logging.getLogger(__name__)

DEFAULT_FILE_TYPE = "Document"

FILE_TYPE_LABELS = {
    "pdf": "PDF Document",
    "doc": "Word Document",
    "docx": "Word Document",
    "xls": "Excel Spreadsheet",
    "xlsx": "Excel Spreadsheet",
    "ppt": "PowerPoint Presentation",
    "pptx": "PowerPoint Presentation",
    "mp3": "Audio File",
    "mp4": "Video File",
    "jpg": "Image",
    "jpeg": "Image",
    "png": "Image",
    "gif": "Image",
    "txt": "Text File",
    "zip": "Compressed File",
    "rar": "Compressed File",
}


def describe_file_type(file_name: str) -> str:
    """Human label for a file, from its extension."""
    suffix = PurePosixPath(file_name).suffix.lower().lstrip(".")
    return FILE_TYPE_LABELS.get(suffix, DEFAULT_FILE_TYPE)


def file_name_from_url(file_url: str) -> str:
    return unquote(PurePosixPath(urlparse(file_url).path).name)


class DownloadsClient(BaseResourceClient):
    resource_path = "/downloads"

    def __init__(
        self,
        api: IApiClient,
        session_id: Optional[str] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        """
        Initialize the downloads client.

        Args:
            api: Shared API client
            session_id: Groups the downloads of one visit; generated when omitted
            user_agent: Reported with every tracked download
        """
        super().__init__(api)
        self.session_id = session_id or f"session_{uuid.uuid4().hex}"
        self.user_agent = user_agent

    async def track(self, event: DownloadEvent) -> ApiResponse[Any]:
        """Record one download. Session and user agent default to this client's."""
        updates = {}
        if event.session_id is None:
            updates["session_id"] = self.session_id
        if event.user_agent is None and self.user_agent:
            updates["user_agent"] = self.user_agent
        if updates:
            event = event.model_copy(update=updates)
        body = event.model_dump(mode="json", by_alias=True, exclude_none=True)
        return await self._api.post(f"{self.resource_path}/track", body)

    async def track_file(
        self,
        file_url: str,
        file_name: Optional[str] = None,
        referrer: Optional[str] = None,
        user_id: Optional[int | str] = None,
    ) -> ApiResponse[Any]:
        """Record a download of ``file_url``, naming and typing it from the URL when needed."""
        name = file_name or file_name_from_url(file_url)
        logger.debug(f"Tracking download of {name}")
        return await self.track(DownloadEvent(
            file_name=name,
            file_url=file_url,
            file_type=describe_file_type(name),
            referrer=referrer,
            user_id=user_id,
        ))

    async def sync(self, events: list[DownloadEvent]) -> ApiResponse[Any]:
        """Upload downloads recorded while the backend was unreachable."""
        body = [
            event.model_dump(mode="json", by_alias=True, exclude_none=True)
            for event in events
        ]
        return await self._api.post(f"{self.resource_path}/sync", body)

    async def analytics(self) -> ApiResponse[DownloadAnalytics]:
        return await self._api.get(f"{self.resource_path}/analytics", DownloadAnalytics)

    async def recent(self, limit: int = 10) -> ApiResponse[list[DownloadRecord]]:
        path = with_query(f"{self.resource_path}/recent", {"limit": limit})
        return await self._api.get(path, list[DownloadRecord])

    async def stats(self) -> ApiResponse[DownloadStats]:
        """Today, this week and this month counts plus the most downloaded files."""
        return await self._api.get(f"{self.resource_path}/stats", DownloadStats)

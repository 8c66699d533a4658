"""
File payloads for upload endpoints.

Some endpoints take the file inline as a base64 string inside a JSON body,
others take a multipart form. Both start from a FileUpload.
"""

import asyncio
import base64
import mimetypes
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Any, Union

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass(frozen=True)
class FileUpload:
    """An in-memory file ready to be sent to the backend.

    Attributes:
        filename: Name reported to the backend
        content_type: MIME type (e.g. "image/jpeg")
        content: Raw file bytes
    """

    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


def _read_upload(path: Path) -> FileUpload:
    content_type, _ = mimetypes.guess_type(path.name)
    return FileUpload(
        filename=path.name,
        content_type=content_type or DEFAULT_CONTENT_TYPE,
        content=path.read_bytes(),
    )


async def load_upload(path: Union[str, Path]) -> FileUpload:
    """Read a file from disk without blocking the event loop."""
    return await asyncio.to_thread(_read_upload, Path(path))


def to_base64(upload: FileUpload) -> str:
    """Encode the file as a bare base64 string (no ``data:`` URL prefix)."""
    return base64.b64encode(upload.content).decode("ascii")


def _form_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


@dataclass
class MultipartForm:
    """A multipart/form-data body.

    The client never sets a Content-Type for these; the transport adds
    the header together with the boundary.
    """

    fields: dict[str, str] = field(default_factory=dict)
    files: dict[str, FileUpload] = field(default_factory=dict)

    def add_field(self, name: str, value: Any) -> None:
        """Add a text field; ``None`` values are skipped."""
        if value is None:
            return
        self.fields[name] = _form_value(value)

    def add_file(self, name: str, upload: FileUpload) -> None:
        self.files[name] = upload

    def httpx_files(self) -> list[tuple[str, tuple]]:
        """All parts in the form httpx expects for a multipart body.

        Text fields are sent as parts without a filename so the body is
        multipart even when no file is attached.
        """
        parts: list[tuple[str, tuple]] = [
            (name, (None, value)) for name, value in self.fields.items()
        ]
        parts.extend(
            (name, (upload.filename, upload.content, upload.content_type))
            for name, upload in self.files.items()
        )
        return parts

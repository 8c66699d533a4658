"""
Durable storage for the session token.

The token lives under a single fixed key. It is written only by login,
logout and a failed session check; the API client reads it on every request.
"""

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Optional, Protocol, runtime_checkable

logger = logging.getLogger(__name__)

AUTH_TOKEN_KEY = "authToken"


@runtime_checkable
class ITokenStore(Protocol):
    """Key-value storage for the bearer token."""

    def get(self) -> Optional[str]:
        """Return the stored token, or None."""
        ...

    def set(self, token: str) -> None:
        """Persist the token, replacing any previous one."""
        ...

    def delete(self) -> None:
        """Remove the token. Idempotent."""
        ...


class MemoryTokenStore:
    """Process-local store, used by tests and throwaway sessions."""

    def __init__(self, token: Optional[str] = None):
        self._values: dict[str, str] = {}
        if token:
            self._values[AUTH_TOKEN_KEY] = token

    def get(self) -> Optional[str]:
        return self._values.get(AUTH_TOKEN_KEY)

    def set(self, token: str) -> None:
        self._values[AUTH_TOKEN_KEY] = token

    def delete(self) -> None:
        self._values.pop(AUTH_TOKEN_KEY, None)


class FileTokenStore:
    """
    JSON file store shared by the CLI and the portal.

    The file holds one object, e.g. ``{"authToken": "..."}``. A missing or
    unreadable file reads as "no token". Writes go through a temp file and
    an atomic replace, with owner-only permissions.
    """

    def __init__(self, path: Path):
        self._path = Path(path).expanduser()

    @property
    def path(self) -> Path:
        return self._path

    def _read(self) -> dict[str, str]:
        try:
            data = json.loads(self._path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            return {}
        except (OSError, ValueError) as e:
            logger.warning(f"Ignoring unreadable token store {self._path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=self._path.parent, prefix=".session-")
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                json.dump(data, fh)
            os.chmod(tmp_name, 0o600)
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self) -> Optional[str]:
        token = self._read().get(AUTH_TOKEN_KEY)
        return token if isinstance(token, str) and token else None

    def set(self, token: str) -> None:
        data = self._read()
        data[AUTH_TOKEN_KEY] = token
        self._write(data)

    def delete(self) -> None:
        data = self._read()
        if AUTH_TOKEN_KEY not in data:
            return
        del data[AUTH_TOKEN_KEY]
        self._write(data)

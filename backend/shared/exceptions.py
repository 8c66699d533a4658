"""
Error hierarchy for the Sanctuary client.

Three families sit under SanctuaryError:
- InvalidInputError: the caller's input can never make a valid request
- SessionError / PermissionDeniedError: no usable session, or the wrong role
- BackendError: the church backend could not be talked to

A backend envelope with ``success=false`` is data, not an error, and
never surfaces as one of these.
"""

from typing import Any, Optional


class SanctuaryError(Exception):
    """
    Root of every error raised by the client.

    ``code`` is a stable identifier for programmatic handling; it falls
    back to the class name. ``to_dict()`` is the JSON body the portal
    sends for unhandled client errors.
    """

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or type(self).__name__
        self.details = dict(details or {})

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.code, "message": self.message, "details": self.details}


class InvalidInputError(SanctuaryError):
    """Input rejected locally, before any request is sent."""


class SessionError(SanctuaryError):
    """An operation needs a logged-in user."""


class PermissionDeniedError(SanctuaryError):
    """The logged-in user's role is below what the operation requires."""


class BackendError(SanctuaryError):
    """
    The church backend did not give a usable answer.

    ``details`` always names the backend (``service``) and, when known,
    the absolute ``url`` that was requested.
    """

    service = "church-api"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        url: Optional[str] = None,
    ):
        details: dict[str, Any] = {"service": self.service}
        if url:
            details["url"] = url
        super().__init__(message, code, details)
        self.url = url

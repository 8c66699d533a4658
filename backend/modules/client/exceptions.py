"""
API client exceptions.

Only transport-level problems are raised. A well-formed envelope with
``success=false`` is returned to the caller as data.
"""

from shared.exceptions import BackendError


class ApiClientError(BackendError):
    """Base class for failures talking to the church backend."""


class ApiConnectionError(ApiClientError):
    """Raised when the request never produced a response (DNS, refused, timeout)."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Could not reach {url}: {reason}",
            code="API_UNREACHABLE",
            url=url,
        )


class MalformedResponseError(ApiClientError):
    """Raised when the response body is not a JSON API envelope."""

    def __init__(self, url: str, reason: str):
        super().__init__(
            f"Malformed response from {url}: {reason}",
            code="MALFORMED_RESPONSE",
            url=url,
        )

"""
API client interface.

Resource clients and the auth module depend on IApiClient, so tests can
swap in a client backed by a mock transport.
"""

from typing import Any, Mapping, Optional, Protocol, Union, runtime_checkable

from shared.models import ApiResponse

from .uploads import MultipartForm

RequestBody = Union[Mapping[str, Any], list, MultipartForm, None]


@runtime_checkable
class IApiClient(Protocol):
    """Interface for issuing requests against the church backend."""

    @property
    def base_url(self) -> str:
        """Absolute base URL every endpoint is relative to."""
        ...

    def url_for(self, endpoint: str) -> str:
        """Build the absolute URL for an endpoint without any I/O."""
        ...

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: RequestBody = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Issue a request and return the decoded JSON body verbatim.

        Raises:
            ApiConnectionError: If no response was received
            MalformedResponseError: If the body is not JSON
        """
        ...

    async def envelope(
        self,
        endpoint: str,
        data_type: Any = Any,
        method: str = "GET",
        body: RequestBody = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse:
        """Issue a request and validate the body as ``ApiResponse[data_type]``."""
        ...

    async def get(self, endpoint: str, data_type: Any = Any) -> ApiResponse:
        ...

    async def post(
        self, endpoint: str, body: RequestBody = None, data_type: Any = Any
    ) -> ApiResponse:
        ...

    async def put(
        self, endpoint: str, body: RequestBody = None, data_type: Any = Any
    ) -> ApiResponse:
        ...

    async def delete(self, endpoint: str, data_type: Any = Any) -> ApiResponse:
        ...

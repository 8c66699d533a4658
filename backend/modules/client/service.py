"""
API client implementation.

Wraps httpx.AsyncClient so every call to the church backend goes through
the same header, token and response handling.
"""

import json
import logging
from typing import TYPE_CHECKING, Any, Mapping, Optional

import httpx

from shared.models import ApiResponse, parse_envelope

from .interfaces import IApiClient, RequestBody
from .uploads import MultipartForm
from .exceptions import ApiConnectionError, MalformedResponseError

if TYPE_CHECKING:
    from modules.auth.token_store import ITokenStore

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"


class ApiClient(IApiClient):
    """
    Generic client for the church REST backend.

    Request handling:
    - JSON bodies get ``Content-Type: application/json``; multipart bodies get
      no explicit content type so httpx can add the boundary.
    - The persisted session token, when present, is sent as a bearer credential.
      The store is only ever read here.
    - The decoded body is handed back as-is. ``success=false`` is data, not an
      exception; only transport failures and non-JSON bodies raise.
    """

    def __init__(
        self,
        base_url: str,
        token_store: "ITokenStore",
        timeout: float = 30.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            base_url: Backend API root, e.g. "http://localhost:5000/api"
            token_store: Durable store holding the session token
            timeout: Per-request timeout in seconds
            transport: Optional httpx transport (tests use httpx.MockTransport)
        """
        self._base_url = base_url.rstrip("/")
        self._token_store = token_store
        self._client = httpx.AsyncClient(timeout=timeout, transport=transport)

    @property
    def base_url(self) -> str:
        return self._base_url

    def url_for(self, endpoint: str) -> str:
        """Build the absolute URL for an endpoint. Never performs I/O."""
        if endpoint.startswith(("http://", "https://")):
            return endpoint
        if not endpoint.startswith("/"):
            endpoint = f"/{endpoint}"
        return f"{self._base_url}{endpoint}"

    def _build_headers(
        self,
        body: RequestBody,
        headers: Optional[Mapping[str, str]],
    ) -> tuple[dict[str, str], bool]:
        request_headers: dict[str, str] = {}
        if not isinstance(body, MultipartForm):
            request_headers["Content-Type"] = JSON_CONTENT_TYPE
        if headers:
            request_headers.update(headers)

        token = self._token_store.get()
        if token:
            request_headers["Authorization"] = f"Bearer {token}"
        return request_headers, bool(token)

    async def request(
        self,
        endpoint: str,
        method: str = "GET",
        body: RequestBody = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> Any:
        """
        Issue a request and return the decoded JSON body verbatim.

        Args:
            endpoint: Path relative to the base URL, e.g. "/events?limit=3"
            method: HTTP method
            body: A JSON-serializable mapping/list, a MultipartForm, or None
            headers: Extra headers; they override the JSON content type

        Returns:
            The decoded JSON body

        Raises:
            ApiConnectionError: If the request produced no response
            MalformedResponseError: If the body is not valid JSON
        """
        url = self.url_for(endpoint)
        request_headers, has_token = self._build_headers(body, headers)

        kwargs: dict[str, Any] = {}
        if isinstance(body, MultipartForm):
            kwargs["files"] = body.httpx_files()
        elif body is not None:
            kwargs["content"] = json.dumps(body)

        logger.debug("%s %s (bearer token attached: %s)", method, url, has_token)
        try:
            response = await self._client.request(
                method, url, headers=request_headers, **kwargs
            )
        except httpx.RequestError as e:
            logger.warning("Request to %s failed: %s", url, e)
            raise ApiConnectionError(url, str(e) or e.__class__.__name__) from e

        logger.debug("%s %s -> %s", method, url, response.status_code)
        try:
            return response.json()
        except ValueError as e:
            raise MalformedResponseError(
                url, f"status {response.status_code}, body is not JSON"
            ) from e

    async def envelope(
        self,
        endpoint: str,
        data_type: Any = Any,
        method: str = "GET",
        body: RequestBody = None,
        headers: Optional[Mapping[str, str]] = None,
    ) -> ApiResponse:
        """Issue a request and validate the body as ``ApiResponse[data_type]``."""
        payload = await self.request(endpoint, method=method, body=body, headers=headers)
        try:
            return parse_envelope(payload, data_type)
        except ValueError as e:
            raise MalformedResponseError(self.url_for(endpoint), str(e)) from e

    async def get(self, endpoint: str, data_type: Any = Any) -> ApiResponse:
        return await self.envelope(endpoint, data_type)

    async def post(
        self, endpoint: str, body: RequestBody = None, data_type: Any = Any
    ) -> ApiResponse:
        return await self.envelope(endpoint, data_type, method="POST", body=body)

    async def put(
        self, endpoint: str, body: RequestBody = None, data_type: Any = Any
    ) -> ApiResponse:
        return await self.envelope(endpoint, data_type, method="PUT", body=body)

    async def delete(self, endpoint: str, data_type: Any = Any) -> ApiResponse:
        return await self.envelope(endpoint, data_type, method="DELETE")

    async def aclose(self) -> None:
        """Release pooled connections."""
        await self._client.aclose()

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

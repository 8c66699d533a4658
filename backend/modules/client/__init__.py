"""
API client module.

Single choke point for every HTTP call to the church backend.

Public API:
- ApiClient: JSON/multipart requests with bearer-token injection
- MultipartForm, FileUpload: request bodies that carry files
- Query helpers: build_query, with_query
- Client exceptions: ApiConnectionError, MalformedResponseError
"""

from .service import ApiClient
from .interfaces import IApiClient
from .query import build_query, with_query
from .uploads import FileUpload, MultipartForm, load_upload, to_base64
from .exceptions import ApiClientError, ApiConnectionError, MalformedResponseError

__all__ = [
    # Client
    "ApiClient",
    "IApiClient",
    # Request bodies
    "FileUpload",
    "MultipartForm",
    "load_upload",
    "to_base64",
    # Query strings
    "build_query",
    "with_query",
    # Exceptions
    "ApiClientError",
    "ApiConnectionError",
    "MalformedResponseError",
]

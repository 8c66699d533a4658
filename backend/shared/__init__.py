"""
Shared infrastructure for the Sanctuary backend client.

This package contains cross-cutting concerns that are used by multiple modules:
- config: Centralized settings management
- exceptions: Base exception classes
- models: The response envelope every backend call returns

Note: Business logic should NOT go here. This is for infrastructure only.
"""

from .config import Settings, get_settings
from .exceptions import (
    SanctuaryError,
    InvalidInputError,
    SessionError,
    PermissionDeniedError,
    BackendError,
)
from .models import ApiResponse, Pagination, parse_envelope

__all__ = [
    "Settings",
    "get_settings",
    "SanctuaryError",
    "InvalidInputError",
    "SessionError",
    "PermissionDeniedError",
    "BackendError",
    "ApiResponse",
    "Pagination",
    "parse_envelope",
]

"""
Authentication module.

Handles the session token, the process-wide auth context and route protection.

Public API:
- IAuthContext / AuthContext: who is logged in, login/logout/check
- AuthAPI: the /auth wire calls
- Token stores: FileTokenStore, MemoryTokenStore
- Route gate: evaluate_access, ensure_access, ProtectedRoute
- Auth exceptions: NotAuthenticatedError, InsufficientPermissionsError
"""

from .interfaces import IAuthContext
from .models import (
    AuthState,
    LoginRequest,
    LoginResponse,
    LoginResult,
    ProfileUpdate,
    RegisterRequest,
    Role,
    User,
)
from .token_store import AUTH_TOKEN_KEY, FileTokenStore, ITokenStore, MemoryTokenStore
from .client import AuthAPI
from .service import AuthContext
from .guard import (
    HOME_ROUTE,
    LOGIN_ROUTE,
    MEMBER_PORTAL_ROUTE,
    AccessDecision,
    AccessOutcome,
    ProtectedRoute,
    ensure_access,
    evaluate_access,
)
from .exceptions import InsufficientPermissionsError, NotAuthenticatedError

__all__ = [
    # Interface
    "IAuthContext",
    # Context and wire client
    "AuthContext",
    "AuthAPI",
    # Models
    "AuthState",
    "LoginRequest",
    "LoginResponse",
    "LoginResult",
    "ProfileUpdate",
    "RegisterRequest",
    "Role",
    "User",
    # Token storage
    "AUTH_TOKEN_KEY",
    "ITokenStore",
    "FileTokenStore",
    "MemoryTokenStore",
    # Route gate
    "AccessDecision",
    "AccessOutcome",
    "ProtectedRoute",
    "evaluate_access",
    "ensure_access",
    "LOGIN_ROUTE",
    "MEMBER_PORTAL_ROUTE",
    "HOME_ROUTE",
    # Exceptions
    "NotAuthenticatedError",
    "InsufficientPermissionsError",
]

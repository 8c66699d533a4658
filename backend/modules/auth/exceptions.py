"""
Authentication module exceptions.

Login and session checks report failure through LoginResult and the
auth state; these are raised by callers that need a hard stop, such
as CLI commands run without a session.
"""

from shared.exceptions import PermissionDeniedError, SessionError


class NotAuthenticatedError(SessionError):
    """Raised when an operation needs a logged-in user and there is none."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(message, code="NOT_AUTHENTICATED")


class InsufficientPermissionsError(PermissionDeniedError):
    """Raised when user lacks required permissions."""

    def __init__(self, required_role: str, user_role: str):
        super().__init__(
            f"Insufficient permissions. Required: {required_role}, has: {user_role}",
            code="INSUFFICIENT_PERMISSIONS",
            details={"required_role": required_role, "user_role": user_role},
        )

"""
Authentication module interface.

The portal and the CLI depend on IAuthContext, not the concrete
implementation. This enables testing with fakes.
"""

from typing import Protocol, Optional, runtime_checkable

from .models import AuthState, LoginResult, User


@runtime_checkable
class IAuthContext(Protocol):
    """
    Single source of truth for who is logged in.

    One instance lives at the composition root. ``start()`` is called once
    when the application mounts and ``close()`` when it unmounts.
    """

    @property
    def user(self) -> Optional[User]:
        """The current user, or None when unauthenticated."""
        ...

    @property
    def is_loading(self) -> bool:
        """True until the initial session check completes."""
        ...

    @property
    def is_authenticated(self) -> bool:
        """True when a user is present."""
        ...

    @property
    def state(self) -> AuthState:
        """Immutable snapshot for the route gate."""
        ...

    async def start(self) -> None:
        """Run the initial session check (at most once per mount)."""
        ...

    async def close(self) -> None:
        """Drop in-memory session state on unmount."""
        ...

    async def check_auth(self) -> None:
        """
        Restore the session from the persisted token.

        Never raises; an invalid token is deleted and the user left absent.
        """
        ...

    async def login(self, identifier: str, secret: str) -> LoginResult:
        """
        Log in with a username or email address.

        Returns:
            LoginResult; failures are reported in the result, never raised
        """
        ...

    def logout(self) -> None:
        """Forget the session locally. No network call, idempotent."""
        ...

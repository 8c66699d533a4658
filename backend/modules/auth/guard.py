"""
Route protection.

``evaluate_access`` is the gate every protected page goes through. It is
re-evaluated on every request and keeps no state of its own.
"""

from enum import Enum
from typing import Callable, Generic, Optional, TypeVar, Union
from urllib.parse import urlencode

from pydantic import BaseModel, ConfigDict, Field

from .exceptions import InsufficientPermissionsError, NotAuthenticatedError
from .models import AuthState, Role, User

T = TypeVar("T")

LOGIN_ROUTE = "/login"
MEMBER_PORTAL_ROUTE = "/member-portal"
HOME_ROUTE = "/"


class AccessOutcome(str, Enum):
    LOADING = "loading"
    REDIRECT = "redirect"
    RENDER = "render"


class AccessDecision(BaseModel):
    """What the gate decided for one navigation attempt."""

    model_config = ConfigDict(frozen=True)

    outcome: AccessOutcome
    redirect_to: Optional[str] = Field(None, description="Target route for redirects")
    replace: bool = Field(False, description="Replace the current history entry")
    state: dict[str, str] = Field(default_factory=dict, description="Navigation state")

    @property
    def allowed(self) -> bool:
        return self.outcome is AccessOutcome.RENDER

    @property
    def location(self) -> Optional[str]:
        """Redirect target with navigation state folded into the query string."""
        if self.redirect_to is None:
            return None
        if not self.state:
            return self.redirect_to
        return f"{self.redirect_to}?{urlencode(self.state)}"


LOADING = AccessDecision(outcome=AccessOutcome.LOADING)
RENDER = AccessDecision(outcome=AccessOutcome.RENDER)


def _redirect(to: str, **state: str) -> AccessDecision:
    return AccessDecision(
        outcome=AccessOutcome.REDIRECT, redirect_to=to, replace=True, state=state
    )


def evaluate_access(
    state: AuthState,
    location: str,
    required_role: Union[Role, str] = Role.MEMBER,
) -> AccessDecision:
    """
    Decide whether a page may render.

    Order matters:
    1. still loading -> loading placeholder
    2. no user -> /login, remembering ``location`` as ``from``
    3. admin page, non-admin user -> /member-portal
    4. member page, guest user -> /
    5. otherwise render
    """
    required = Role(required_role)

    if state.is_loading:
        return LOADING
    if state.user is None:
        return _redirect(LOGIN_ROUTE, **{"from": location})

    role = state.user.role
    if required is Role.ADMIN and role is not Role.ADMIN:
        return _redirect(MEMBER_PORTAL_ROUTE)
    if required is Role.MEMBER and role is Role.GUEST:
        return _redirect(HOME_ROUTE)
    return RENDER


def ensure_access(
    state: AuthState,
    required_role: Union[Role, str] = Role.MEMBER,
    location: str = HOME_ROUTE,
) -> User:
    """
    Non-navigating form of the gate for callers without a router.

    Raises:
        NotAuthenticatedError: If there is no session (or it is still loading)
        InsufficientPermissionsError: If the user's role is not enough
    """
    decision = evaluate_access(state, location, required_role)
    if decision.outcome is AccessOutcome.LOADING:
        raise NotAuthenticatedError("Session check has not completed")
    if state.user is None:
        raise NotAuthenticatedError()
    if not decision.allowed:
        raise InsufficientPermissionsError(Role(required_role).value, state.user.role.value)
    return state.user


class ProtectedRoute(Generic[T]):
    """
    Declarative guard around a page.

    Usage:
        admin_page = ProtectedRoute(Role.ADMIN)
        result = admin_page.resolve(auth.state, "/admin", render_dashboard)
        if isinstance(result, AccessDecision):
            ...  # loading placeholder or redirect
    """

    def __init__(self, required_role: Union[Role, str] = Role.MEMBER):
        self.required_role = Role(required_role)

    def resolve(
        self,
        state: AuthState,
        location: str,
        render: Callable[[], T],
    ) -> Union[T, AccessDecision]:
        decision = evaluate_access(state, location, self.required_role)
        if decision.allowed:
            return render()
        return decision

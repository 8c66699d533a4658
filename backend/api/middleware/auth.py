"""
Route protection for portal pages.

Wraps the auth module's gate as a FastAPI dependency. The gate is
evaluated on every request against the container's auth context.
"""

from fastapi import Depends, HTTPException, Request, status

from modules.auth.guard import AccessOutcome, evaluate_access
from modules.auth.interfaces import IAuthContext
from modules.auth.models import Role, User

from ..dependencies import get_auth_context

LOADING_RETRY_SECONDS = 1


def _requested_location(request: Request) -> str:
    if request.url.query:
        return f"{request.url.path}?{request.url.query}"
    return request.url.path


def require_role(required_role: Role = Role.MEMBER):
    """
    Build a dependency that only lets ``required_role`` through.

    - session check still running: 503 with Retry-After
    - redirect: 303 to the gate's target; login redirects carry ``?from=``
    - allowed: the current user is injected into the route

    Usage:
        @router.get("/admin")
        async def admin_page(user: User = Depends(require_role(Role.ADMIN))):
            ...
    """

    async def dependency(
        request: Request,
        auth: IAuthContext = Depends(get_auth_context),
    ) -> User:
        decision = evaluate_access(auth.state, _requested_location(request), required_role)

        if decision.outcome is AccessOutcome.LOADING:
            raise HTTPException(
                status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
                detail="Loading...",
                headers={"Retry-After": str(LOADING_RETRY_SECONDS)},
            )
        if decision.outcome is AccessOutcome.REDIRECT:
            raise HTTPException(
                status_code=status.HTTP_303_SEE_OTHER,
                detail=f"Redirecting to {decision.redirect_to}",
                headers={"Location": decision.location},
            )
        return auth.user

    return dependency


# Type aliases for cleaner route definitions
RequireMember = Depends(require_role(Role.MEMBER))
RequireAdmin = Depends(require_role(Role.ADMIN))

"""
Session endpoints.

Login and logout go through the portal's single auth context, which also
persists the session token.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from modules.auth.interfaces import IAuthContext
from modules.auth.models import LoginResult

from ..dependencies import get_auth_context
from ..models.session import LoginForm, SessionResponse

router = APIRouter()


@router.get("", response_model=SessionResponse)
async def get_session(auth: IAuthContext = Depends(get_auth_context)) -> SessionResponse:
    """Current auth state. Never contacts the backend."""
    return SessionResponse(
        is_authenticated=auth.is_authenticated,
        is_loading=auth.is_loading,
        user=auth.user,
    )


@router.post("/login", response_model=LoginResult)
async def login(
    form: LoginForm,
    auth: IAuthContext = Depends(get_auth_context),
) -> LoginResult:
    """
    Log in with a username or email address.

    Failures are reported as 401 with the backend's message.
    """
    result = await auth.login(form.identifier, form.password)
    if not result.success:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=result.message)
    return result


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(auth: IAuthContext = Depends(get_auth_context)) -> Response:
    """Forget the session locally. The backend is not notified."""
    auth.logout()
    return Response(status_code=status.HTTP_204_NO_CONTENT)

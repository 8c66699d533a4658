"""Session models exposed by the portal."""

from typing import Optional

from pydantic import BaseModel, Field

from modules.auth.models import User


class LoginForm(BaseModel):
    """Login body; ``identifier`` is a username or an email address."""

    identifier: str = Field(..., min_length=1)
    password: str = Field(..., min_length=1)


class SessionResponse(BaseModel):
    is_authenticated: bool
    is_loading: bool
    user: Optional[User] = None

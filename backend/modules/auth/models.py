"""
Authentication module data models.

These models define the data structures used by the auth module
and exposed to other modules through the interface.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, EmailStr, Field


class Role(str, Enum):
    """Capability level of a user, and of a protected route."""

    ADMIN = "admin"
    MEMBER = "member"
    GUEST = "guest"


class User(BaseModel):
    """
    An authenticated principal as returned by the backend.

    Held in memory only while the session is live; the backend owns the
    canonical record.
    """

    model_config = ConfigDict(extra="ignore", frozen=True)

    id: int = Field(..., description="Backend user ID")
    username: str = Field(..., description="Login name")
    email: str = Field(..., description="Email address as stored by the backend")
    first_name: str = Field(default="", description="Given name")
    last_name: str = Field(default="", description="Family name")
    role: Role = Field(..., description="admin, member or guest")

    phone: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[str] = None
    baptism_date: Optional[str] = None
    created_at: Optional[datetime] = Field(None, description="Account creation time")

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.username


class LoginRequest(BaseModel):
    """
    Body of ``POST /auth/login``.

    The wire field is ``username`` but the backend accepts either the
    username or the email address in it.
    """

    username: str
    password: str


class LoginResponse(BaseModel):
    """``POST /auth/login`` answers with token and user at the top level."""

    model_config = ConfigDict(extra="ignore")

    success: bool
    message: Optional[str] = None
    token: Optional[str] = None
    user: Optional[User] = None


class RegisterRequest(BaseModel):
    """Body of ``POST /auth/register``."""

    username: str
    email: EmailStr
    password: str
    first_name: str
    last_name: str
    phone: Optional[str] = None
    address: Optional[str] = None


class ProfileUpdate(BaseModel):
    """Fields a user may change on their own profile."""

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[EmailStr] = None
    phone: Optional[str] = None
    address: Optional[str] = None
    date_of_birth: Optional[str] = None


class LoginResult(BaseModel):
    """Outcome of AuthContext.login. Never raised, always returned."""

    success: bool
    message: Optional[str] = None
    user: Optional[User] = None


class AuthState(BaseModel):
    """Point-in-time view of the auth context, consumed by the route gate."""

    model_config = ConfigDict(frozen=True)

    user: Optional[User] = None
    is_loading: bool = True

    @property
    def is_authenticated(self) -> bool:
        return self.user is not None

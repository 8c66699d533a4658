"""Portal request and response models."""

from .errors import ErrorResponse
from .session import LoginForm, SessionResponse
from .pages import (
    AdminDashboardPage,
    AdminSection,
    AdminSectionPage,
    EventSummary,
    HomePage,
    LoginPage,
    MemberPortalPage,
    PostSummary,
)

__all__ = [
    "ErrorResponse",
    "LoginForm",
    "SessionResponse",
    "AdminDashboardPage",
    "AdminSection",
    "AdminSectionPage",
    "EventSummary",
    "HomePage",
    "LoginPage",
    "MemberPortalPage",
    "PostSummary",
]

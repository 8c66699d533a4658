"""
Page payloads served by the portal.

Markup is out of scope; pages are returned as JSON view models.
"""

from datetime import datetime
from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field

from modules.auth.models import User
from modules.content.models import DashboardStats, EventType
from shared.models import Pagination


class EventSummary(BaseModel):
    id: int
    title: str
    event_date: str
    event_time: Optional[str] = None
    location: Optional[str] = None
    event_type: EventType
    image_url: str


class PostSummary(BaseModel):
    id: int
    title: str
    slug: str
    excerpt: str
    author: str = ""
    published_at: Optional[datetime] = None
    image_url: str


class LoginPage(BaseModel):
    is_authenticated: bool
    redirect_after_login: str = Field("/", alias="from", serialization_alias="from")

    model_config = ConfigDict(populate_by_name=True)


class HomePage(BaseModel):
    featured_events: list[EventSummary]
    latest_posts: list[PostSummary]


class MemberPortalPage(BaseModel):
    user: User
    upcoming_events: list[EventSummary]


class AdminDashboardPage(BaseModel):
    user: User
    stats: DashboardStats


class AdminSection(str, Enum):
    EVENTS = "events"
    MINISTRIES = "ministries"
    POSTS = "posts"
    RESOURCES = "resources"
    GALLERY = "gallery"


class AdminSectionPage(BaseModel):
    section: AdminSection
    items: list[dict[str, Any]]
    pagination: Optional[Pagination] = None

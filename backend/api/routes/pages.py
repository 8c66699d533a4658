"""
Page endpoints.

Public pages, the member portal and the admin area. Protected pages sit
behind ``require_role``; the gate decides before any handler runs.
"""

from typing import Optional, TypeVar

from fastapi import APIRouter, Depends, HTTPException, Query, status

from modules.auth.interfaces import IAuthContext
from modules.auth.models import User
from modules.content import DashboardClient, EventsClient, PostsClient
from modules.content.models import Event, Post
from modules.content.text import extract_plain_text_for_sharing
from shared.models import ApiResponse

from ..dependencies import (
    ServiceContainer,
    get_auth_context,
    get_container,
    get_dashboard_client,
    get_events_client,
    get_posts_client,
)
from ..middleware.auth import RequireAdmin, RequireMember
from ..models.pages import (
    AdminDashboardPage,
    AdminSection,
    AdminSectionPage,
    EventSummary,
    HomePage,
    LoginPage,
    MemberPortalPage,
    PostSummary,
)

router = APIRouter()

T = TypeVar("T")

HOME_FEATURED_EVENTS = 3
HOME_LATEST_POSTS = 3
MEMBER_UPCOMING_EVENTS = 5
EXCERPT_LENGTH = 160


def _unwrap(response: ApiResponse[T]) -> Optional[T]:
    """Data of a successful envelope; a failed one becomes a 502."""
    if not response.success:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail=response.message or "Backend request failed",
        )
    return response.data


def _event_summary(event: Event, events: EventsClient) -> EventSummary:
    return EventSummary(
        id=event.id,
        title=event.title,
        event_date=event.event_date,
        event_time=event.event_time,
        location=event.location,
        event_type=event.event_type,
        image_url=events.get_image_url(event.id),
    )


def _post_summary(post: Post, posts: PostsClient) -> PostSummary:
    return PostSummary(
        id=post.id,
        title=post.title,
        slug=post.slug,
        excerpt=post.excerpt or extract_plain_text_for_sharing(post.content, EXCERPT_LENGTH),
        author=post.author_name,
        published_at=post.published_at,
        image_url=posts.get_image_url(post.id),
    )


@router.get("/login", response_model=LoginPage)
async def login_page(
    from_: str = Query("/", alias="from"),
    auth: IAuthContext = Depends(get_auth_context),
) -> LoginPage:
    """Login page; ``from`` is where to go back to after logging in."""
    return LoginPage(is_authenticated=auth.is_authenticated, redirect_after_login=from_)


@router.get("/", response_model=HomePage)
async def home_page(
    events: EventsClient = Depends(get_events_client),
    posts: PostsClient = Depends(get_posts_client),
) -> HomePage:
    """Public home page: featured events and the latest published posts."""
    featured = _unwrap(await events.get_all(featured=True, limit=HOME_FEATURED_EVENTS)) or []
    latest = _unwrap(await posts.published(limit=HOME_LATEST_POSTS)) or []
    return HomePage(
        featured_events=[_event_summary(e, events) for e in featured],
        latest_posts=[_post_summary(p, posts) for p in latest],
    )


@router.get("/member-portal", response_model=MemberPortalPage)
async def member_portal(
    user: User = RequireMember,
    events: EventsClient = Depends(get_events_client),
) -> MemberPortalPage:
    upcoming = _unwrap(await events.upcoming(limit=MEMBER_UPCOMING_EVENTS)) or []
    return MemberPortalPage(
        user=user,
        upcoming_events=[_event_summary(e, events) for e in upcoming],
    )


@router.get("/admin", response_model=AdminDashboardPage)
async def admin_dashboard(
    user: User = RequireAdmin,
    dashboard: DashboardClient = Depends(get_dashboard_client),
) -> AdminDashboardPage:
    stats = _unwrap(await dashboard.stats())
    if stats is None:
        raise HTTPException(
            status_code=status.HTTP_502_BAD_GATEWAY,
            detail="Dashboard statistics missing from backend response",
        )
    return AdminDashboardPage(user=user, stats=stats)


@router.get("/admin/{section}", response_model=AdminSectionPage)
async def admin_section(
    section: AdminSection,
    page: int = Query(1, ge=1),
    limit: int = Query(20, ge=1, le=100),
    user: User = RequireAdmin,
    container: ServiceContainer = Depends(get_container),
) -> AdminSectionPage:
    """List the records an admin section manages."""
    if section is AdminSection.EVENTS:
        response = await container.events.get_all(limit=limit)
    elif section is AdminSection.MINISTRIES:
        response = await container.ministries.get_all(page=page, limit=limit, status=None)
    elif section is AdminSection.POSTS:
        response = await container.posts.get_all(page=page, limit=limit)
    elif section is AdminSection.RESOURCES:
        response = await container.resources.get_all(page=page, limit=limit)
    else:
        response = await container.gallery.get_all(page=page, limit=limit)

    items = _unwrap(response) or []
    return AdminSectionPage(
        section=section,
        items=[item.model_dump(mode="json") for item in items],
        pagination=response.pagination,
    )

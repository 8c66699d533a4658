"""
Content module data models.

Plain data-transfer records for the church site's resources. The backend
owns identity and canonical state; clients hold copies only as long as a
page view needs them.
"""

from datetime import datetime
from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class EventType(str, Enum):
    SERVICE = "service"
    MEETING = "meeting"
    OUTREACH = "outreach"
    YOUTH = "youth"
    SPECIAL = "special"


class MinistryStatus(str, Enum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class PostStatus(str, Enum):
    DRAFT = "draft"
    PUBLISHED = "published"
    ARCHIVED = "archived"


class ResourceFileType(str, Enum):
    PDF = "pdf"
    DOC = "doc"
    VIDEO = "video"
    AUDIO = "audio"
    IMAGE = "image"
    ZIP = "zip"


class ResourceCategory(str, Enum):
    BULLETINS = "bulletins"
    SERMONS = "sermons"
    STUDY_GUIDES = "study-guides"
    SABBATH_SCHOOL = "sabbath-school"
    MUSIC = "music"
    HEALTH = "health"
    YOUTH = "youth"
    TRAINING = "training"
    OTHER = "other"


class GalleryCategory(str, Enum):
    EVENTS = "events"
    SERVICES = "services"
    OUTREACH = "outreach"
    YOUTH = "youth"
    GENERAL = "general"


class SermonMediaType(str, Enum):
    VIDEO = "video"
    AUDIO = "audio"
    NOTES = "notes"


class ContentModel(BaseModel):
    """Base for records read from the backend; unknown columns are ignored."""

    model_config = ConfigDict(extra="ignore")


# =============================================================================
# Events
# =============================================================================


class Event(ContentModel):
    id: int
    title: str
    description: Optional[str] = None
    event_date: str = Field(..., description="Calendar date, ISO formatted")
    event_time: Optional[str] = Field(None, description="Start time, HH:MM[:SS]")
    end_time: Optional[str] = Field(None, description="End time, HH:MM[:SS]")
    location: Optional[str] = None
    event_type: EventType = EventType.SERVICE
    is_featured: bool = False
    image_url: Optional[str] = None
    image_type: Optional[str] = None
    image_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateEventRequest(BaseModel):
    title: str
    description: Optional[str] = None
    event_date: str
    event_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    event_type: EventType = EventType.SERVICE
    is_featured: Optional[bool] = None


class UpdateEventRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    event_date: Optional[str] = None
    event_time: Optional[str] = None
    end_time: Optional[str] = None
    location: Optional[str] = None
    event_type: Optional[EventType] = None
    is_featured: Optional[bool] = None


# =============================================================================
# Ministries
# =============================================================================


class Ministry(ContentModel):
    id: int
    name: str
    slug: str
    description: str = ""
    long_description: Optional[str] = None
    featured_image_type: Optional[str] = None
    featured_image_name: Optional[str] = None
    leader_name: Optional[str] = None
    leader_email: Optional[str] = None
    leader_phone: Optional[str] = None
    meeting_time: Optional[str] = None
    meeting_location: Optional[str] = None
    contact_info: Optional[str] = None
    requirements: Optional[str] = None
    age_group: Optional[str] = None
    status: MinistryStatus = MinistryStatus.ACTIVE
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class CreateMinistryRequest(BaseModel):
    name: str
    description: str
    slug: Optional[str] = None
    long_description: Optional[str] = None
    leader_name: Optional[str] = None
    leader_email: Optional[str] = None
    leader_phone: Optional[str] = None
    meeting_time: Optional[str] = None
    meeting_location: Optional[str] = None
    contact_info: Optional[str] = None
    requirements: Optional[str] = None
    age_group: Optional[str] = None
    status: Optional[MinistryStatus] = None


class UpdateMinistryRequest(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    slug: Optional[str] = None
    long_description: Optional[str] = None
    leader_name: Optional[str] = None
    leader_email: Optional[str] = None
    leader_phone: Optional[str] = None
    meeting_time: Optional[str] = None
    meeting_location: Optional[str] = None
    contact_info: Optional[str] = None
    requirements: Optional[str] = None
    age_group: Optional[str] = None
    status: Optional[MinistryStatus] = None


# =============================================================================
# Posts
# =============================================================================


class Post(ContentModel):
    id: int
    title: str
    content: str
    excerpt: Optional[str] = None
    author_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    author_email: Optional[str] = None
    status: PostStatus = PostStatus.DRAFT
    category: str = "general"
    tags: list[str] = Field(default_factory=list)
    slug: str
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None
    view_count: int = 0
    is_featured: bool = False
    published_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def author_name(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}".strip()


class CreatePostRequest(BaseModel):
    title: str
    content: str
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[str] = Field(None, description="Comma-separated tags")
    status: Optional[PostStatus] = None
    is_featured: Optional[bool] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


class UpdatePostRequest(BaseModel):
    title: Optional[str] = None
    content: Optional[str] = None
    excerpt: Optional[str] = None
    category: Optional[str] = None
    tags: Optional[str] = None
    status: Optional[PostStatus] = None
    is_featured: Optional[bool] = None
    meta_title: Optional[str] = None
    meta_description: Optional[str] = None


# =============================================================================
# Resources
# =============================================================================


class Resource(ContentModel):
    id: int
    title: str
    description: Optional[str] = None
    file_type: ResourceFileType
    category: ResourceCategory = ResourceCategory.OTHER
    file_name: str
    file_size: int = 0
    mime_type: str
    download_count: int = 0
    is_featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class ResourceUpload(BaseModel):
    """
    Metadata sent with a resource file.

    The backend expects camelCase keys for this endpoint.
    """

    title: str
    description: Optional[str] = None
    file_type: ResourceFileType = Field(..., serialization_alias="fileType")
    category: ResourceCategory
    is_featured: Optional[bool] = Field(None, serialization_alias="isFeatured")


class UpdateResourceRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None
    file_type: Optional[ResourceFileType] = Field(None, serialization_alias="fileType")
    category: Optional[ResourceCategory] = None
    is_featured: Optional[bool] = Field(None, serialization_alias="isFeatured")


# =============================================================================
# Gallery
# =============================================================================


class GalleryItem(ContentModel):
    """A gallery listing entry: either a collection or a single legacy image."""

    id: int
    title: str
    description: Optional[str] = None
    category: GalleryCategory = GalleryCategory.GENERAL
    type: str = Field("single", description="'collection' or 'single'")
    image_count: int = 1
    thumbnail_image_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @property
    def is_collection(self) -> bool:
        return self.type == "collection"


class GalleryImage(ContentModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    image_type: Optional[str] = None
    image_name: Optional[str] = None
    sort_order: int = 0
    created_at: Optional[datetime] = None


class GalleryCollection(ContentModel):
    id: int
    title: str
    description: Optional[str] = None
    category: GalleryCategory = GalleryCategory.GENERAL
    thumbnail_image_id: Optional[int] = None
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    images: list[GalleryImage] = Field(default_factory=list)
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class GalleryItemUpdate(BaseModel):
    title: str
    description: Optional[str] = None
    category: GalleryCategory


# =============================================================================
# Sermons, contact, dashboard
# =============================================================================


class Sermon(ContentModel):
    id: int
    title: str
    preacher: str
    sermon_date: str
    scripture_reference: Optional[str] = None
    description: Optional[str] = None
    video_url: Optional[str] = None
    audio_url: Optional[str] = None
    notes_url: Optional[str] = None
    duration_minutes: Optional[int] = None
    is_featured: bool = False
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class SermonRequest(BaseModel):
    title: Optional[str] = None
    preacher: Optional[str] = None
    sermon_date: Optional[str] = None
    scripture_reference: Optional[str] = None
    description: Optional[str] = None
    video_url: Optional[str] = None
    audio_url: Optional[str] = None
    notes_url: Optional[str] = None
    duration_minutes: Optional[int] = None
    is_featured: Optional[bool] = None


class ContactMessage(ContentModel):
    id: int
    name: str
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str
    is_read: bool = False
    created_at: Optional[datetime] = None


class ContactRequest(BaseModel):
    name: str
    email: str
    phone: Optional[str] = None
    subject: Optional[str] = None
    message: str


class UnreadCount(BaseModel):
    count: int


class DashboardStats(ContentModel):
    users: int = 0
    events: int = 0
    sermons: int = 0
    ministries: int = 0
    unread_messages: int = Field(0, alias="unreadMessages")


# =============================================================================
# Site analytics
# =============================================================================


class TrafficTotals(ContentModel):
    total_sessions: int = 0
    total_visitors: int = 0
    total_page_views: int = 0


class TrafficToday(ContentModel):
    today_sessions: int = 0
    today_visitors: int = 0
    today_page_views: int = 0


class PageViewCount(ContentModel):
    page_path: str
    page_title: Optional[str] = None
    total_views: int = 0


class DeviceCount(ContentModel):
    device_type: Optional[str] = None
    count: int = 0


class DailyTraffic(ContentModel):
    date: str
    sessions: int = 0
    visitors: int = 0
    page_views: int = 0


class AnalyticsDashboard(ContentModel):
    """Visitor traffic over the last ``days`` days, as charted on the admin analytics page."""

    total: TrafficTotals = Field(default_factory=TrafficTotals)
    today: TrafficToday = Field(default_factory=TrafficToday)
    active_users: int = Field(0, alias="activeUsers")
    top_pages: list[PageViewCount] = Field(default_factory=list, alias="topPages")
    device_stats: list[DeviceCount] = Field(default_factory=list, alias="deviceStats")
    daily_stats: list[DailyTraffic] = Field(default_factory=list, alias="dailyStats")


class VisitorSession(ContentModel):
    id: str
    user_id: Optional[int] = None
    country: Optional[str] = None
    city: Optional[str] = None
    device_type: Optional[str] = None
    browser: Optional[str] = None
    os: Optional[str] = None
    start_time: Optional[datetime] = None
    end_time: Optional[datetime] = None
    duration: Optional[int] = 0
    page_count: Optional[int] = 0
    is_bounce: bool = False
    landing_page: Optional[str] = None
    exit_page: Optional[str] = None
    page_views: int = 0
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    email: Optional[str] = None


class DetailedAnalytics(ContentModel):
    """One page of visitor sessions; paging sits inside ``data`` on this endpoint."""

    sessions: list[VisitorSession] = Field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 50
    total_pages: int = Field(0, alias="totalPages")


class ActiveVisitor(ContentModel):
    session_id: str
    page_path: Optional[str] = None
    ip_address: Optional[str] = None
    last_activity: Optional[datetime] = None


# =============================================================================
# Download tracking
# =============================================================================


class DownloadEvent(BaseModel):
    """A file download as reported to ``/downloads/track``; keys go out camelCase."""

    file_name: str = Field(..., serialization_alias="fileName")
    file_url: str = Field(..., serialization_alias="fileUrl")
    file_type: str = Field(..., serialization_alias="fileType")
    file_size: Optional[int] = Field(None, serialization_alias="fileSize")
    user_agent: Optional[str] = Field(None, serialization_alias="userAgent")
    ip_address: Optional[str] = Field(None, serialization_alias="ipAddress")
    referrer: Optional[str] = None
    user_id: Optional[int | str] = Field(None, serialization_alias="userId")
    session_id: Optional[str] = Field(None, serialization_alias="sessionId")
    download_time: Optional[datetime] = Field(None, serialization_alias="downloadTime")


class DownloadRecord(ContentModel):
    """A stored download row."""

    id: int
    file_name: str
    file_url: Optional[str] = None
    file_type: Optional[str] = None
    file_size: Optional[int] = None
    user_agent: Optional[str] = None
    ip_address: Optional[str] = None
    referrer: Optional[str] = None
    user_id: Optional[int | str] = None
    session_id: Optional[str] = None
    download_time: Optional[datetime] = None


class DownloadAnalytics(ContentModel):
    total_downloads: int = Field(0, alias="totalDownloads")
    downloads_by_file: dict[str, int] = Field(default_factory=dict, alias="downloadsByFile")
    downloads_by_date: dict[str, int] = Field(default_factory=dict, alias="downloadsByDate")
    downloads_by_type: dict[str, int] = Field(default_factory=dict, alias="downloadsByType")
    recent_downloads: list[DownloadRecord] = Field(default_factory=list, alias="recentDownloads")


class FileDownloadCount(ContentModel):
    file_name: str
    count: int = 0


class DownloadStats(ContentModel):
    today: int = 0
    this_week: int = Field(0, alias="thisWeek")
    this_month: int = Field(0, alias="thisMonth")
    top_files: list[FileDownloadCount] = Field(default_factory=list, alias="topFiles")

"""
Content module.

Typed clients for the church site's resources, built on the shared API client.

Public API:
- Resource clients: EventsClient, MinistriesClient, PostsClient,
  ResourcesClient, GalleryClient, SermonsClient, ContactClient,
  DashboardClient, HealthClient, AnalyticsClient, DownloadsClient
- Calendar export: calendar_export, to_calendar_event
- Text helpers: clean_html_text, extract_plain_text_for_sharing
"""

from .base import BaseResourceClient
from .events import EventsClient
from .ministries import MinistriesClient
from .posts import PostsClient
from .resources import ResourcesClient
from .gallery import GalleryClient
from .sermons import SermonsClient
from .contact import ContactClient
from .site import DashboardClient, HealthClient
from .analytics import AnalyticsClient
from .downloads import DownloadsClient, describe_file_type
from .calendar import CalendarEvent, CalendarProvider, calendar_export, to_calendar_event
from .text import clean_html_text, extract_plain_text_for_sharing
from .exceptions import InvalidEventDateError, InvalidUploadError, UnknownCalendarProviderError

__all__ = [
    # Clients
    "BaseResourceClient",
    "EventsClient",
    "MinistriesClient",
    "PostsClient",
    "ResourcesClient",
    "GalleryClient",
    "SermonsClient",
    "ContactClient",
    "DashboardClient",
    "HealthClient",
    "AnalyticsClient",
    "DownloadsClient",
    "describe_file_type",
    # Calendar
    "CalendarEvent",
    "CalendarProvider",
    "calendar_export",
    "to_calendar_event",
    # Text
    "clean_html_text",
    "extract_plain_text_for_sharing",
    # Exceptions
    "InvalidEventDateError",
    "InvalidUploadError",
    "UnknownCalendarProviderError",
]

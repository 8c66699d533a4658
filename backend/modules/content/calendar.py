"""
Calendar export for events.

Builds "add to calendar" links for Google Calendar and Outlook and an
iCalendar (.ics) document. Everything here is pure: no network access.
"""

from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone, tzinfo
from enum import Enum
from typing import Optional, Union
from urllib.parse import quote

from dateutil import parser as date_parser
from dateutil import tz as date_tz

from .exceptions import InvalidEventDateError, UnknownCalendarProviderError
from .models import Event
from .text import extract_plain_text_for_sharing

GOOGLE_CALENDAR_URL = "https://calendar.google.com/calendar/render"
OUTLOOK_CALENDAR_URL = "https://outlook.live.com/calendar/0/deeplink/compose"
ICS_PRODID = "-//Sanctuary//Church Events//EN"
ICS_LINE_OCTETS = 75

DESCRIPTION_MAX_LENGTH = 500
DEFAULT_DURATION_HOURS = 2


class CalendarProvider(str, Enum):
    GOOGLE = "google"
    OUTLOOK = "outlook"
    ICS = "ics"


@dataclass(frozen=True)
class CalendarEvent:
    """An event reduced to what calendar apps need; times are timezone-aware."""

    title: str
    start: datetime
    end: datetime
    description: str = ""
    location: str = ""
    uid: Optional[str] = None
    timezone_name: Optional[str] = None


def _parse_date(value: str) -> date:
    try:
        return date_parser.isoparse(value).date()
    except ValueError as e:
        raise InvalidEventDateError(value) from e


def _parse_time(value: str) -> time:
    try:
        return date_parser.parse(value).time()
    except (ValueError, OverflowError) as e:
        raise InvalidEventDateError(value) from e


def resolve_timezone(name: Optional[str]) -> tzinfo:
    """IANA zone by name, or the local zone when no name is given."""
    if name:
        zone = date_tz.gettz(name)
        if zone is not None:
            return zone
    return date_tz.tzlocal()


def to_calendar_event(
    event: Event,
    default_duration_hours: int = DEFAULT_DURATION_HOURS,
    timezone_name: Optional[str] = None,
) -> CalendarEvent:
    """
    Compute the calendar window for an event.

    Start is the event date at ``event_time`` (midnight when unset). End is
    the same date at ``end_time``, or start plus the default duration.
    """
    zone = resolve_timezone(timezone_name)
    day = _parse_date(event.event_date)
    start_time = _parse_time(event.event_time) if event.event_time else time(0, 0)
    start = datetime.combine(day, start_time, tzinfo=zone)

    if event.end_time:
        end = datetime.combine(day, _parse_time(event.end_time), tzinfo=zone)
    else:
        end = start + timedelta(hours=default_duration_hours)

    return CalendarEvent(
        title=event.title,
        start=start,
        end=end,
        description=extract_plain_text_for_sharing(event.description, DESCRIPTION_MAX_LENGTH),
        location=event.location or "",
        uid=f"event-{event.id}@sanctuary",
        timezone_name=timezone_name,
    )


def format_calendar_datetime(value: datetime) -> str:
    """Compact UTC form used by Google Calendar and iCalendar, e.g. 20250105T150000Z."""
    return value.astimezone(timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def _iso_utc(value: datetime) -> str:
    return value.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


def _query(pairs: list[tuple[str, str]]) -> str:
    return "&".join(f"{key}={quote(value, safe='/')}" for key, value in pairs)


def google_calendar_url(event: CalendarEvent) -> str:
    pairs = [
        ("action", "TEMPLATE"),
        ("text", event.title),
        ("dates", f"{format_calendar_datetime(event.start)}/{format_calendar_datetime(event.end)}"),
        ("details", event.description),
        ("location", event.location),
    ]
    if event.timezone_name:
        pairs.append(("ctz", event.timezone_name))
    return f"{GOOGLE_CALENDAR_URL}?{_query(pairs)}"


def outlook_calendar_url(event: CalendarEvent) -> str:
    pairs = [
        ("subject", event.title),
        ("startdt", _iso_utc(event.start)),
        ("enddt", _iso_utc(event.end)),
        ("body", event.description),
        ("location", event.location),
    ]
    return f"{OUTLOOK_CALENDAR_URL}?{_query(pairs)}"


def _escape_ics(text: str) -> str:
    return (
        text.replace("\\", "\\\\")
        .replace(";", "\\;")
        .replace(",", "\\,")
        .replace("\r\n", "\\n")
        .replace("\n", "\\n")
    )


def _fold_ics_line(line: str) -> str:
    """Fold a content line at 75 octets; continuations start with a space."""
    parts = []
    current = ""
    size = 0
    limit = ICS_LINE_OCTETS
    for char in line:
        width = len(char.encode("utf-8"))
        if size + width > limit:
            parts.append(current)
            current = ""
            size = 0
            # The leading space of a continuation counts towards its 75.
            limit = ICS_LINE_OCTETS - 1
        current += char
        size += width
    parts.append(current)
    return "\r\n ".join(parts)


def build_ics(event: CalendarEvent, stamp: Optional[datetime] = None) -> str:
    """Single-event iCalendar document with CRLF line endings."""
    stamp = stamp or datetime.now(timezone.utc)
    lines = [
        "BEGIN:VCALENDAR",
        "VERSION:2.0",
        f"PRODID:{ICS_PRODID}",
        "BEGIN:VEVENT",
    ]
    if event.uid:
        lines.append(f"UID:{event.uid}")
    lines += [
        f"DTSTAMP:{format_calendar_datetime(stamp)}",
        f"DTSTART:{format_calendar_datetime(event.start)}",
        f"DTEND:{format_calendar_datetime(event.end)}",
        f"SUMMARY:{_escape_ics(event.title)}",
        f"DESCRIPTION:{_escape_ics(event.description)}",
        f"LOCATION:{_escape_ics(event.location)}",
        "END:VEVENT",
        "END:VCALENDAR",
    ]
    return "\r\n".join(_fold_ics_line(line) for line in lines) + "\r\n"


def calendar_export(
    event: Event,
    provider: Union[CalendarProvider, str],
    default_duration_hours: int = DEFAULT_DURATION_HOURS,
    timezone_name: Optional[str] = None,
) -> str:
    """
    Link (google, outlook) or document (ics) for adding ``event`` to a calendar.

    Raises:
        UnknownCalendarProviderError: If ``provider`` is not supported
        InvalidEventDateError: If the event's date or times do not parse
    """
    try:
        provider = CalendarProvider(provider)
    except ValueError:
        raise UnknownCalendarProviderError(
            str(provider), [p.value for p in CalendarProvider]
        ) from None

    window = to_calendar_event(event, default_duration_hours, timezone_name)
    if provider is CalendarProvider.GOOGLE:
        return google_calendar_url(window)
    if provider is CalendarProvider.OUTLOOK:
        return outlook_calendar_url(window)
    return build_ics(window)

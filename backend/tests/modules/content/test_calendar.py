"""Tests for calendar export."""

from datetime import datetime, timezone
from urllib.parse import parse_qs, urlparse

import pytest

from modules.content import (
    CalendarProvider,
    InvalidEventDateError,
    UnknownCalendarProviderError,
    calendar_export,
    to_calendar_event,
)
from modules.content.calendar import build_ics, format_calendar_datetime
from modules.content.models import Event

from fakes import event_payload


def make_event(**overrides) -> Event:
    return Event.model_validate(event_payload(**overrides))


class TestCalendarWindow:
    def test_start_and_default_duration(self):
        window = to_calendar_event(make_event(), timezone_name="UTC")
        assert window.start == datetime(2025, 1, 4, 10, 0, tzinfo=timezone.utc)
        assert window.end == datetime(2025, 1, 4, 12, 0, tzinfo=timezone.utc)

    def test_explicit_end_time(self):
        window = to_calendar_event(make_event(end_time="11:30"), timezone_name="UTC")
        assert format_calendar_datetime(window.end) == "20250104T113000Z"

    def test_custom_default_duration(self):
        window = to_calendar_event(make_event(), default_duration_hours=1, timezone_name="UTC")
        assert format_calendar_datetime(window.end) == "20250104T110000Z"

    def test_missing_time_starts_at_midnight(self):
        window = to_calendar_event(make_event(event_time=None), timezone_name="UTC")
        assert format_calendar_datetime(window.start) == "20250104T000000Z"

    def test_timezone_is_applied(self):
        window = to_calendar_event(make_event(), timezone_name="America/New_York")
        assert format_calendar_datetime(window.start) == "20250104T150000Z"

    def test_description_is_plain_text(self):
        window = to_calendar_event(make_event(), timezone_name="UTC")
        assert window.description == "Join us for worship."

    def test_long_description_is_truncated(self):
        window = to_calendar_event(make_event(description="word " * 300), timezone_name="UTC")
        assert len(window.description) <= 503
        assert window.description.endswith("...")

    def test_invalid_date(self):
        with pytest.raises(InvalidEventDateError):
            to_calendar_event(make_event(event_date="not a date"))


class TestProviders:
    def test_google_link(self):
        url = calendar_export(make_event(), CalendarProvider.GOOGLE, timezone_name="UTC")
        parsed = urlparse(url)
        query = parse_qs(parsed.query)

        assert parsed.netloc == "calendar.google.com"
        assert query["action"] == ["TEMPLATE"]
        assert query["text"] == ["Sabbath Worship"]
        assert query["dates"] == ["20250104T100000Z/20250104T120000Z"]
        assert query["location"] == ["Main Sanctuary"]
        assert query["ctz"] == ["UTC"]

    def test_outlook_link(self):
        url = calendar_export(make_event(), "outlook", timezone_name="UTC")
        query = parse_qs(urlparse(url).query)

        assert url.startswith("https://outlook.live.com/calendar/0/deeplink/compose?")
        assert query["subject"] == ["Sabbath Worship"]
        assert query["startdt"] == ["2025-01-04T10:00:00.000Z"]
        assert query["enddt"] == ["2025-01-04T12:00:00.000Z"]

    def test_ics_document(self):
        document = calendar_export(make_event(id=8), "ics", timezone_name="UTC")
        lines = document.split("\r\n")

        assert lines[0] == "BEGIN:VCALENDAR"
        assert "UID:event-8@sanctuary" in lines
        assert "DTSTART:20250104T100000Z" in lines
        assert "DTEND:20250104T120000Z" in lines
        assert "SUMMARY:Sabbath Worship" in lines
        assert document.endswith("END:VCALENDAR\r\n")

    def test_ics_escapes_text(self):
        window = to_calendar_event(
            make_event(title="Potluck; bring food, friends", location=None),
            timezone_name="UTC",
        )
        document = build_ics(window, stamp=datetime(2025, 1, 1, tzinfo=timezone.utc))

        assert "SUMMARY:Potluck\\; bring food\\, friends" in document
        assert "DTSTAMP:20250101T000000Z" in document
        assert "LOCATION:\r\n" in document

    def test_ics_long_lines_are_folded(self):
        document = calendar_export(
            make_event(description="<p>" + "Bring a dish to share. " * 20 + "</p>"),
            "ics",
            timezone_name="UTC",
        )

        physical = document.split("\r\n")
        assert all(len(line.encode("utf-8")) <= 75 for line in physical)

        unfolded = document.replace("\r\n ", "")
        description = next(line for line in unfolded.split("\r\n") if line.startswith("DESCRIPTION:"))
        assert description.startswith("DESCRIPTION:Bring a dish to share. Bring a dish")
        assert len(description) > 75

    def test_ics_folding_keeps_multibyte_characters_whole(self):
        window = to_calendar_event(make_event(title="Célébration " * 10), timezone_name="UTC")
        document = build_ics(window)

        for line in document.split("\r\n"):
            assert len(line.encode("utf-8")) <= 75
        assert "SUMMARY:" + "Célébration " * 10 in document.replace("\r\n ", "")

    def test_unknown_provider(self):
        with pytest.raises(UnknownCalendarProviderError) as exc_info:
            calendar_export(make_event(), "yahoo")
        assert exc_info.value.details["provider"] == "yahoo"

"""
Content module exceptions.

Raised before a request is sent, when the caller's input can never
produce a valid one.
"""

from shared.exceptions import InvalidInputError


class InvalidUploadError(InvalidInputError):
    """Raised when an upload has no usable file content."""

    def __init__(self, reason: str):
        super().__init__(
            f"Invalid upload: {reason}",
            code="INVALID_UPLOAD",
            details={"reason": reason},
        )


class InvalidEventDateError(InvalidInputError):
    """Raised when an event's date or time cannot be parsed."""

    def __init__(self, value: str):
        super().__init__(
            f"Cannot parse event date/time: {value!r}",
            code="INVALID_EVENT_DATE",
            details={"value": value},
        )


class UnknownCalendarProviderError(InvalidInputError):
    """Raised when a calendar link is requested for an unsupported provider."""

    def __init__(self, provider: str, valid: list[str]):
        super().__init__(
            f"Unknown calendar provider: {provider}. Valid providers: {valid}",
            code="UNKNOWN_CALENDAR_PROVIDER",
            details={"provider": provider, "valid": valid},
        )

"""Query-string helpers for list endpoints."""

from enum import Enum
from typing import Any, Iterable, Mapping, Optional
from urllib.parse import urlencode


def _is_present(value: Any) -> bool:
    # False is a real filter value (featured=false); None and "" are not.
    if value is None:
        return False
    if isinstance(value, str) and value == "":
        return False
    return True


def _format_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    return str(value)


def build_query(
    params: Optional[Mapping[str, Any]],
    allowed: Optional[Iterable[str]] = None,
) -> str:
    """Serialize the present, recognised keys of ``params`` into a query string.

    Keys are emitted in the order of ``allowed`` (or of ``params`` when no
    whitelist is given). Unrecognised keys are dropped.

    Example:
        >>> build_query({"page": 2, "limit": 10, "category": "youth", "search": None},
        ...             ["page", "limit", "category", "search"])
        'page=2&limit=10&category=youth'
    """
    if not params:
        return ""
    keys = list(allowed) if allowed is not None else list(params.keys())
    pairs = [
        (key, _format_value(params[key]))
        for key in keys
        if key in params and _is_present(params[key])
    ]
    return urlencode(pairs)


def with_query(
    path: str,
    params: Optional[Mapping[str, Any]],
    allowed: Optional[Iterable[str]] = None,
) -> str:
    """Append the serialized query to ``path``; no ``?`` when nothing is present."""
    query = build_query(params, allowed)
    return f"{path}?{query}" if query else path

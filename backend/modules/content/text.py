"""Helpers for turning stored rich-text HTML into plain text."""

import re
from typing import Optional

_TAG_RE = re.compile(r"<[^>]*>")
_WHITESPACE_RE = re.compile(r"\s+")


def clean_html_text(html_text: Optional[str], max_length: Optional[int] = None) -> str:
    """Strip tags, collapse whitespace and optionally truncate with ``...``.

    Example:
        >>> clean_html_text("<p>Join us  <b>Sunday</b></p>")
        'Join us Sunday'
    """
    if not html_text:
        return ""

    text = _TAG_RE.sub("", html_text)
    text = _WHITESPACE_RE.sub(" ", text).strip()

    if max_length and len(text) > max_length:
        text = text[:max_length].strip() + "..."
    return text


def extract_plain_text_for_sharing(html_content: Optional[str], max_length: int = 200) -> str:
    """Plain-text snippet for calendar entries and listing excerpts."""
    return clean_html_text(html_content, max_length)

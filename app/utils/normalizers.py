"""
Normalization helpers shared by the extractors.

All functions are pure and never raise on bad input: a URL that cannot be
resolved is returned unchanged and an unparseable date yields None.
"""
import re
from datetime import timezone
from typing import Optional
from urllib.parse import urljoin, urlsplit, urlunsplit

from dateutil import parser as date_parser


def make_absolute_url(url: str, base_url: str) -> str:
    """Resolve a (possibly relative) reference against the page URL."""
    try:
        return urljoin(base_url, url)
    except (ValueError, TypeError, AttributeError):
        return url


def ensure_trailing_slash(url: str) -> str:
    """
    Canonicalize a URL so its path ends with exactly one slash.

    Query string and fragment are preserved after the slash:
        https://ex.com/a?x=1#top -> https://ex.com/a/?x=1#top
    """
    try:
        parts = urlsplit(url)
    except ValueError:
        return url if url.endswith("/") else url + "/"

    path = parts.path.rstrip("/") + "/"
    return urlunsplit((parts.scheme, parts.netloc, path, parts.query, parts.fragment))


def humanize_segment(segment: str) -> str:
    """Turn a URL path segment into a display name ("b-c" -> "B C")."""
    text = segment.replace("-", " ")
    return re.sub(r"\b\w", lambda m: m.group(0).upper(), text)


def format_date(value: Optional[str]) -> Optional[str]:
    """
    Parse a date string into a canonical UTC instant.

    Output format: YYYY-MM-DDTHH:MM:SS.sssZ
    Naive values are read as UTC. Invalid input returns None.
    """
    if not value:
        return None

    value = str(value).strip()
    if not value:
        return None

    try:
        parsed = date_parser.parse(value)
        if parsed.tzinfo is None:
            parsed = parsed.replace(tzinfo=timezone.utc)
        else:
            # Offsets near datetime.min/max overflow here
            parsed = parsed.astimezone(timezone.utc)
        return parsed.isoformat(timespec="milliseconds").replace("+00:00", "Z")
    except (ValueError, OverflowError, TypeError):
        return None

"""Normalization helpers for slugs, dates, times and email addresses."""

import re
from datetime import datetime, timezone
from typing import Optional

from dateutil import parser as date_parser

_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")
_CLOCK_TIME = re.compile(r"([0-2]?[0-9]):([0-5][0-9])")
_COMPACT_TIME = re.compile(r"([0-2]?[0-9])([0-5][0-9])")
_EMAIL = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")

# Fills in components missing from partial dates such as "March 2024"
_DATE_DEFAULT = datetime(1970, 1, 1)


def slugify(value: str) -> str:
    """Create a URL-friendly identifier, e.g. "My Event! 2024" -> "my-event-2024"."""
    slug = _NON_ALPHANUMERIC.sub("-", value.strip().lower())
    return slug.strip("-")


def normalize_date(value: str) -> Optional[str]:
    """
    Parse a date string and return its UTC calendar date as YYYY-MM-DD.

    Naive values are taken as UTC. Returns None if the value cannot be parsed.
    """
    try:
        parsed = date_parser.parse(value.strip(), default=_DATE_DEFAULT)
    except (ValueError, OverflowError):
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date().isoformat()


def _format_time(match: Optional[re.Match]) -> Optional[str]:
    if match is None:
        return None
    hour = int(match.group(1))
    if hour > 23:
        return None
    return f"{hour:02d}:{match.group(2)}"


def normalize_time(value: str) -> Optional[str]:
    """
    Normalize a time string to 24h HH:mm.

    Accepts H:mm, HH:mm, Hmm and HHmm. The colon form is tried first.
    Returns None for anything else, including hours above 23.
    """
    trimmed = value.strip()

    clock = _CLOCK_TIME.fullmatch(trimmed)
    if clock:
        return _format_time(clock)

    return _format_time(_COMPACT_TIME.fullmatch(trimmed))


def is_valid_email(value: str) -> bool:
    return _EMAIL.fullmatch(value) is not None

from __future__ import annotations

import re
from datetime import date, datetime, time, timezone
from zoneinfo import ZoneInfo

_DATE_ONLY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_instant(value: str) -> datetime:
    """
    Parse an ISO-8601 date or datetime into an aware UTC datetime.
    Date-only values mean UTC midnight; naive datetimes are read as UTC.
    Raises ValueError when the value cannot be parsed.
    """
    if not isinstance(value, str) or not value.strip():
        raise ValueError("Empty date value")
    text = value.strip()
    if _DATE_ONLY_RE.match(text):
        return datetime.combine(date.fromisoformat(text), time.min, tzinfo=timezone.utc)
    parsed = datetime.fromisoformat(text.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=timezone.utc)
    return parsed.astimezone(timezone.utc)


def to_iso(value: datetime) -> str:
    """Format as UTC ISO-8601 with milliseconds, e.g. 2025-01-28T15:00:00.000Z."""
    utc = value.astimezone(timezone.utc) if value.tzinfo else value
    return utc.strftime("%Y-%m-%dT%H:%M:%S") + f".{utc.microsecond // 1000:03d}Z"


def utc_midnight(value: datetime) -> datetime:
    utc = value.astimezone(timezone.utc)
    return datetime.combine(utc.date(), time.min, tzinfo=timezone.utc)


def format_time_in_zone(value: datetime | str, time_zone: str) -> str:
    """Display time in a timezone, e.g. '9:30 AM'."""
    instant = parse_instant(value) if isinstance(value, str) else value
    local = instant.astimezone(_safe_timezone(time_zone))
    return local.strftime("%I:%M %p").lstrip("0")


def format_date(value: date) -> str:
    """Display date, e.g. 'Tuesday, January 28, 2025'."""
    return f"{value:%A}, {value:%B} {value.day}, {value.year}"


def _safe_timezone(name: str) -> ZoneInfo:
    try:
        return ZoneInfo(name)
    except Exception:
        return ZoneInfo("UTC")

"""
Timestamp formatting for the requests log.

Mirrors what a browser prints for Date.toLocaleString(locale):
- he-IL  -> 18.10.2026, 14:05:03
- en-GB  -> 18/10/2026, 14:05:03
- en-US  -> 10/18/2026, 2:05:03 PM

Inputs are ISO-8601 strings or epoch milliseconds. Date-times without an
offset are local to the display timezone; bare dates are UTC.
Anything unparseable is returned as-is.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from app.config import DEFAULT_LOCALE


def _he_il(dt: datetime) -> str:
    return f"{dt.day}.{dt.month}.{dt.year}, {dt.hour}:{dt:%M:%S}"


def _en_gb(dt: datetime) -> str:
    return f"{dt:%d/%m/%Y, %H:%M:%S}"


def _en_us(dt: datetime) -> str:
    hour = dt.hour % 12 or 12
    suffix = "AM" if dt.hour < 12 else "PM"
    return f"{dt.month}/{dt.day}/{dt.year}, {hour}:{dt:%M:%S} {suffix}"


LOCALE_FORMATTERS = {
    "he-IL": _he_il,
    "en-GB": _en_gb,
    "en-US": _en_us,
}


def parse_timestamp(value: Any, local_tz=timezone.utc) -> datetime | None:
    """
    Naive date-times are read in local_tz; date-only strings are UTC.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float)):
        try:
            return datetime.fromtimestamp(value / 1000, tz=timezone.utc)
        except (OverflowError, OSError, ValueError):
            return None

    text = str(value).strip()
    if not text:
        return None
    if text.endswith("Z"):
        text = text[:-1] + "+00:00"
    try:
        dt = datetime.fromisoformat(text)
    except ValueError:
        return None

    if dt.tzinfo is None:
        date_only = "T" not in text and " " not in text
        dt = dt.replace(tzinfo=timezone.utc if date_only else local_tz)
    return dt


def resolve_timezone(name: str):
    try:
        return ZoneInfo(name)
    except (ZoneInfoNotFoundError, ValueError):
        return timezone.utc


def format_timestamp(value: Any, locale: str = DEFAULT_LOCALE, tz_name: str = "UTC") -> str:
    tz = resolve_timezone(tz_name)
    dt = parse_timestamp(value, tz)
    if dt is None:
        return "" if value is None else str(value)

    formatter = LOCALE_FORMATTERS.get(locale, LOCALE_FORMATTERS[DEFAULT_LOCALE])
    return formatter(dt.astimezone(tz))

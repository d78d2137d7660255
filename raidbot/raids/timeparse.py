"""Parse the free-form times people type for raids ("3:45pm", "15:45", "4 PM")."""

from __future__ import annotations

import datetime
import re

_TIME_RE = re.compile(
    r"^\s*(\d{1,2})(?::(\d{2}))?(?::(\d{2}))?\s*(?:([ap])\.?\s*m?\.?)?\s*$",
    re.IGNORECASE,
)


def parse_time_of_day(
    value: str | None, now: datetime.datetime
) -> datetime.datetime | None:
    """
    Return ``value`` as a datetime on ``now``'s date, or ``None`` if invalid.

    Accepted shapes are ``h``, ``h:mm`` and ``h:mm:ss`` with an optional
    am/pm suffix. Without a suffix the hour is read on a 24-hour clock.
    """

    if not value:
        return None

    match = _TIME_RE.match(value)
    if not match:
        return None

    hour_raw, minute_raw, second_raw, meridiem = match.groups()
    hour = int(hour_raw)
    minute = int(minute_raw) if minute_raw else 0
    second = int(second_raw) if second_raw else 0

    if meridiem:
        if not 1 <= hour <= 12:
            return None
        hour %= 12
        if meridiem.lower() == "p":
            hour += 12
    elif hour > 23:
        return None

    if minute > 59 or second > 59:
        return None

    return now.replace(hour=hour, minute=minute, second=second, microsecond=0)


__all__ = ["parse_time_of_day"]

"""
Timezone utilities for the studio scheduler.

Times of day are persisted as UTC wall-clock strings (``HH:MM``, no date, no
zone suffix) and shown to staff in Pacific local time.

The UTC <-> local conversions use a fixed-offset approximation of the US DST
rule evaluated against the *current* date, not the date the time belongs to.
All of November is standard time and the fall switch is taken in October on
the day-of-month of November's first Sunday, so late October and the first
days of November read one hour off real Pacific time. A time on a past or
future date near a DST boundary can also be off by one hour. ``today_local`` is not affected: it uses the
tz database.
"""

from datetime import date, datetime, timezone
from typing import Optional, Tuple

import pytz

from .config import settings

MINUTES_PER_DAY = 24 * 60

DAYLIGHT_OFFSET_HOURS = 7  # PDT = UTC-7
STANDARD_OFFSET_HOURS = 8  # PST = UTC-8


def nth_sunday(year: int, month: int, n: int) -> int:
    """
    Return the day-of-month of the n-th Sunday of a month.

    Only the first two weeks are scanned, which covers every n the DST rule
    needs (1 and 2). Falls back to 1 when not found.
    """
    count = 0
    for day in range(1, 15):
        if date(year, month, day).weekday() == 6:
            count += 1
            if count == n:
                return day
    return 1


def is_daylight_saving_time(day: date) -> bool:
    """
    Check whether Pacific daylight time applies on a date.

    November-February are standard time and April-September daylight time.
    March switches to daylight on the day-of-month of its second Sunday.
    October stays daylight only before the day-of-month of November's first
    Sunday, so the fall switch lands early in October.
    """
    month = day.month
    if month >= 11 or month <= 2:
        return False
    if 4 <= month <= 9:
        return True
    if month == 3:
        return day.day >= nth_sunday(day.year, 3, 2)
    # October, compared against November's first Sunday
    return day.day < nth_sunday(day.year, 11, 1)


def utc_offset_hours(day: date) -> int:
    """Hours to subtract from UTC to reach Pacific time on ``day``."""
    return DAYLIGHT_OFFSET_HOURS if is_daylight_saving_time(day) else STANDARD_OFFSET_HOURS


def _reference_date(now: Optional[datetime] = None) -> date:
    current = now or datetime.now(timezone.utc)
    if current.tzinfo is None:
        # Assume UTC if no timezone info
        current = current.replace(tzinfo=timezone.utc)
    return current.astimezone(timezone.utc).date()


def _parse_wall_time(value: str) -> Optional[Tuple[int, int]]:
    parts = value.split(":")
    if len(parts) < 2:
        return None
    hours, minutes = parts[0].strip(), parts[1].strip()
    if not hours.isdigit() or not minutes.isdigit():
        return None
    return int(hours), int(minutes)


def _format_minutes(total_minutes: int) -> str:
    total_minutes %= MINUTES_PER_DAY
    return f"{total_minutes // 60:02d}:{total_minutes % 60:02d}"


def _shift(value: Optional[str], offset_minutes: int) -> Optional[str]:
    if not value:
        return None
    parsed = _parse_wall_time(value)
    if parsed is None:
        # Malformed input is passed through untouched
        return value
    hours, minutes = parsed
    return _format_minutes(hours * 60 + minutes + offset_minutes)


def to_local(utc_wall_time: Optional[str], now: Optional[datetime] = None) -> Optional[str]:
    """
    Convert a UTC ``HH:MM`` wall time to Pacific local time.

    Args:
        utc_wall_time: Time of day in UTC, or None
        now: Reference instant used for the DST decision (defaults to now)

    Returns:
        Local ``HH:MM``; None for None; malformed input unchanged
    """
    offset = utc_offset_hours(_reference_date(now))
    return _shift(utc_wall_time, -offset * 60)


def to_utc(local_wall_time: Optional[str], now: Optional[datetime] = None) -> Optional[str]:
    """
    Convert a Pacific local ``HH:MM`` wall time to UTC.

    Args:
        local_wall_time: Time of day in local time, or None
        now: Reference instant used for the DST decision (defaults to now)

    Returns:
        UTC ``HH:MM``; None for None; malformed input unchanged
    """
    offset = utc_offset_hours(_reference_date(now))
    return _shift(local_wall_time, offset * 60)


def get_local_timezone(tz_name: Optional[str] = None) -> pytz.BaseTzInfo:
    """Return the configured civil time zone as a pytz timezone."""
    return pytz.timezone(tz_name or settings.local_timezone)


def today_local(tz_name: Optional[str] = None) -> str:
    """
    Get today's date in the local civil zone as ``YYYY-MM-DD``.

    Uses real tz database rules, unlike the wall-time conversions.
    """
    return datetime.now(get_local_timezone(tz_name)).date().isoformat()


def format_time_range(
    start_utc: Optional[str], end_utc: Optional[str], now: Optional[datetime] = None
) -> str:
    """Render a stored UTC range as ``"HH:MM - HH:MM"`` local, or "" if incomplete."""
    if not start_utc or not end_utc:
        return ""
    return f"{to_local(start_utc, now)} - {to_local(end_utc, now)}"


def minutes_before(wall_time: Optional[str], minutes: int) -> Optional[str]:
    """Subtract minutes from a wall time, wrapping past midnight."""
    return _shift(wall_time, -minutes)

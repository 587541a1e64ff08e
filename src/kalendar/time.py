# SPDX-License-Identifier: MIT

import datetime
import logging
import re
from typing import Optional, cast

import pendulum

logger = logging.getLogger(__name__)

MIDNIGHT_START = "12:00 AM"
MIDNIGHT_END = "11:59 PM"

_DISPLAY_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})\s*([AaPp][Mm])\s*$")
_WIRE_TIME_PATTERN = re.compile(r"^\s*(\d{1,2}):(\d{2})(?::\d{2})?\s*$")


def __parse_display_time(display: Optional[str]) -> Optional[tuple[int, int]]:
    """
    Parse a 12-hour display time into a normalized (hour, minute) pair.

    12 AM maps to hour 0, 12 PM stays 12 and every other PM hour adds 12.
    Returns None for empty or unparseable input.
    """
    if not display:
        return None

    match = _DISPLAY_TIME_PATTERN.match(display)
    if match is None:
        logger.debug("unparseable display time %r", display)
        return None

    hour = int(match.group(1))
    minute = int(match.group(2))
    period = match.group(3).upper()

    if hour == 12:
        hour = 12 if period == "PM" else 0
    elif period == "PM":
        hour += 12

    return (hour, minute)


def to_24h(display: Optional[str]) -> str:
    """Convert "h:MM AM/PM" to "HH:MM". Empty or malformed input gives ""."""
    parsed = __parse_display_time(display)
    if parsed is None:
        return ""
    hour, minute = parsed
    return f"{hour:02d}:{minute:02d}"


def to_12h(wire: Optional[str]) -> str:
    """Convert "HH:MM" to "h:MM AM/PM". Empty or malformed input gives ""."""
    if not wire:
        return ""

    match = _WIRE_TIME_PATTERN.match(wire)
    if match is None:
        logger.debug("unparseable wire time %r", wire)
        return ""

    hour = int(match.group(1))
    minutes = match.group(2)
    period = "PM" if hour >= 12 else "AM"
    hour_12 = hour % 12 or 12
    return f"{hour_12}:{minutes} {period}"


def to_minutes(display: Optional[str]) -> int:
    """
    Minutes since midnight for a 12-hour display time.

    Every ordering and overlap comparison goes through this function.
    Missing or malformed input degrades to 0.
    """
    parsed = __parse_display_time(display)
    if parsed is None:
        return 0
    hour, minute = parsed
    return hour * 60 + minute


def today() -> pendulum.Date:
    return pendulum.today("local").date()


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string. Raises ValueError when it is not a valid date."""
    return cast(pendulum.Date, pendulum.from_format(date_str, "YYYY-MM-DD").date())


def date_from_str_optional(date_str: Optional[str]) -> Optional[pendulum.Date]:
    """Parse a 'YYYY-MM-DD' string, returning None when it is missing or invalid."""
    if not date_str:
        return None
    try:
        return date_from_str(date_str)
    except ValueError:
        logger.debug("unparseable date %r", date_str)
        return None


def date_to_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD")


def next_day_str(date_str: str) -> Optional[str]:
    date = date_from_str_optional(date_str)
    if date is None:
        return None
    return date_to_str(date.add(days=1))


def timestamp_date(timestamp: str) -> str:
    """Date part of a local 'YYYY-MM-DDTHH:MM:SS' timestamp."""
    return timestamp.split("T")[0]


def timestamp_time(timestamp: str) -> str:
    """'HH:MM' part of a local 'YYYY-MM-DDTHH:MM:SS' timestamp."""
    parts = timestamp.split("T")
    if len(parts) < 2:
        return ""
    return parts[1][:5]


def build_timestamp(date_str: str, wire_time: str) -> str:
    return f"{date_str}T{wire_time}:00"


def now_utc() -> pendulum.DateTime:
    return pendulum.now("UTC")


def datetime_to_iso_str(datetime: pendulum.DateTime) -> str:
    return datetime.isoformat()


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    return cast(pendulum.DateTime, pendulum.parse(datetime))


def datetime_to_display_local_datetime_str(datetime: pendulum.DateTime) -> str:
    return datetime.in_tz("local").format("MMM-DD ddd HH:mm")


def timestamp_from_value(value: str | datetime.datetime) -> str:
    """Local 'YYYY-MM-DDTHH:MM:SS' timestamp from a stored value.

    Unquoted timestamps in hand-edited YAML load as datetimes.
    """
    if isinstance(value, datetime.datetime):
        return value.strftime("%Y-%m-%dT%H:%M:%S")
    return value


def datetime_from_value(value: str | datetime.datetime) -> pendulum.DateTime:
    if isinstance(value, datetime.datetime):
        return pendulum.instance(value)
    return datetime_from_str(value)

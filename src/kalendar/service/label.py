# SPDX-License-Identifier: MIT

from typing import Optional, Union

from kalendar.model.event import Event, Fragment
from kalendar.time import date_from_str_optional


def __format_short(time: str) -> str:
    return " ".join(time.split())


def format_time_range(start_time: Optional[str], end_time: Optional[str]) -> str:
    """Format a time range such as "10:00 AM - 11:30 AM"."""
    if not start_time or not end_time:
        return ""
    return f"{__format_short(start_time)} - {__format_short(end_time)}"


def format_event_time_range(event: Union[Event, Fragment]) -> str:
    """
    Time range label for an event or fragment.

    Both halves of an overnight event show the full, unclipped span.
    """
    if not event.get("start_time") or not event.get("end_time"):
        return ""

    if event.get("is_overnight_part") in ("start", "end"):
        return format_time_range(
            event.get("original_start_time"), event.get("original_end_time")
        )
    return format_time_range(event["start_time"], event["end_time"])


def format_date(date_str: Optional[str]) -> str:
    """Format 'YYYY-MM-DD' as "Tuesday, June 10, 2025"."""
    if not date_str:
        return ""
    date = date_from_str_optional(date_str)
    if date is None:
        return date_str
    return date.format("dddd, MMMM D, YYYY")


def format_day_heading(date_str: str) -> str:
    """Format 'YYYY-MM-DD' as "Tuesday, Jun 10" for grouped listings."""
    date = date_from_str_optional(date_str)
    if date is None:
        return date_str
    return date.format("dddd, MMM D")

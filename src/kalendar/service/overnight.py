# SPDX-License-Identifier: MIT

from typing import Optional

from kalendar.model.event import OVERNIGHT_ID_SUFFIX, Event, Fragment
from kalendar.time import MIDNIGHT_END, MIDNIGHT_START, next_day_str, to_minutes


def is_overnight(event: Event) -> bool:
    """An event crosses midnight when its end sorts before its start."""
    return to_minutes(event["end_time"]) < to_minutes(event["start_time"])


def as_fragment(event: Event, cell_date: Optional[str] = None) -> Fragment:
    """Wrap an ordinary event as a single, unclipped fragment."""
    return Fragment(
        id=event["id"],
        date=event["date"],
        start_time=event["start_time"],
        end_time=event["end_time"],
        title=event["title"],
        description=event["description"],
        attendee=event["attendee"],
        color=event["color"],
        cell_date=cell_date if cell_date is not None else event["date"],
        is_overnight_part=None,
        original_start_time=None,
        original_end_time=None,
    )


def start_fragment(event: Event) -> Fragment:
    """The part of an overnight event from its start until midnight."""
    fragment = as_fragment(event)
    fragment["end_time"] = MIDNIGHT_END
    fragment["is_overnight_part"] = "start"
    fragment["original_start_time"] = event["start_time"]
    fragment["original_end_time"] = event["end_time"]
    return fragment


def end_fragment(event: Event, cell_date: str) -> Fragment:
    """The part of an overnight event from midnight on the following day."""
    fragment = as_fragment(event, cell_date)
    fragment["id"] = f"{event['id']}{OVERNIGHT_ID_SUFFIX}"
    fragment["start_time"] = MIDNIGHT_START
    fragment["is_overnight_part"] = "end"
    fragment["original_start_time"] = event["start_time"]
    fragment["original_end_time"] = event["end_time"]
    return fragment


def split_event(event: Event) -> list[Fragment]:
    """
    Split an event into the fragments it renders as.

    Ordinary events give one fragment on their own date. Overnight events give
    a "start" fragment on their date and an "end" fragment on the next day.
    If the next day cannot be computed (malformed date) only the start
    fragment is produced.
    """
    if not is_overnight(event):
        return [as_fragment(event)]

    fragments = [start_fragment(event)]
    next_day = next_day_str(event["date"])
    if next_day is not None:
        fragments.append(end_fragment(event, next_day))
    return fragments

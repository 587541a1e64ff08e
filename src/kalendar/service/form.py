# SPDX-License-Identifier: MIT

import re
from typing import Optional, TypedDict

from kalendar.model.event import Event
from kalendar.time import (
    build_timestamp,
    date_from_str_optional,
    next_day_str,
    to_24h,
)

_WIRE_TIME = re.compile(r"^([01]\d|2[0-3]):([0-5]\d)$")


class EventForm(TypedDict):
    """User input for creating or editing an event. Times are 24-hour 'HH:MM'."""

    title: str
    description: Optional[str]
    attendee: Optional[str]
    date: str
    start_time: str
    end_time: str
    color: Optional[str]


def form_from_event(event: Event) -> EventForm:
    """Prefill a form from a loaded event, converting display times to 24-hour."""
    return EventForm(
        title=event["title"],
        description=event["description"],
        attendee=event["attendee"],
        date=event["date"],
        start_time=to_24h(event["start_time"]),
        end_time=to_24h(event["end_time"]),
        color=event["color"],
    )


def validate_event_form(form: EventForm) -> dict[str, str]:
    """
    Check a form before it is saved.

    Returns:
        A mapping of field name to error message; empty when the form is valid.
    """
    errors: dict[str, str] = {}

    if not form["title"] or not form["title"].strip():
        errors["title"] = "Title is required"

    if not form["date"]:
        errors["date"] = "Date is required"
    elif date_from_str_optional(form["date"]) is None:
        errors["date"] = "Date must be in YYYY-MM-DD format"

    if not form["start_time"]:
        errors["start_time"] = "Start time is required"
    elif not _WIRE_TIME.match(form["start_time"]):
        errors["start_time"] = "Start time must be in HH:MM format"

    if not form["end_time"]:
        errors["end_time"] = "End time is required"
    elif not _WIRE_TIME.match(form["end_time"]):
        errors["end_time"] = "End time must be in HH:MM format"

    return errors


def ends_next_day(form: EventForm) -> bool:
    """An end time earlier than the start time means the event ends after midnight."""
    return form["end_time"] < form["start_time"]


def form_timestamps(form: EventForm) -> tuple[str, str]:
    """
    Build the stored start and end timestamps for a valid form.

    The end timestamp moves to the following day for overnight events.
    """
    start_timestamp = build_timestamp(form["date"], form["start_time"])

    end_date = form["date"]
    if ends_next_day(form):
        end_date = next_day_str(form["date"]) or form["date"]

    end_timestamp = build_timestamp(end_date, form["end_time"])
    return start_timestamp, end_timestamp

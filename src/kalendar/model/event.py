# SPDX-License-Identifier: MIT

import uuid
from typing import Literal, Optional, TypeAlias, TypedDict

import pendulum

EventId: TypeAlias = str

OvernightPart: TypeAlias = Literal["start", "end"]

OVERNIGHT_ID_SUFFIX = "_overnight"


def generate_event_id() -> EventId:
    return str(uuid.uuid4())


class EventRecord(TypedDict):
    """
    An event as it is stored.

    start_time and end_time are local timestamps in 'YYYY-MM-DDTHH:MM:SS'
    format. An overnight event has an end_time on the following day.
    """

    id: Optional[EventId]
    title: str
    description: Optional[str]
    attendee: Optional[str]
    start_time: str
    end_time: str
    color: Optional[str]
    is_recurring: bool
    created: pendulum.DateTime
    updated: pendulum.DateTime


class Event(TypedDict):
    """An event after loading, with 12-hour display times."""

    id: EventId
    date: str
    start_time: str
    end_time: str
    title: str
    description: Optional[str]
    attendee: Optional[str]
    color: str


class Fragment(Event):
    """
    A render-ready view of an event scoped to one calendar cell.

    Overnight events produce a "start" fragment clipped at 11:59 PM and an
    "end" fragment starting at 12:00 AM on the next day. Both keep the
    unclipped times in original_start_time and original_end_time.
    """

    cell_date: str
    is_overnight_part: Optional[OvernightPart]
    original_start_time: Optional[str]
    original_end_time: Optional[str]

# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from kalendar.model.event import Event
from kalendar.service.bucket import filter_events
from kalendar.time import date_from_str_optional

DEFAULT_UPCOMING_LIMIT = 10


def upcoming_events(
    events: list[Event],
    today: pendulum.Date,
    search_term: Optional[str] = None,
    limit: int = DEFAULT_UPCOMING_LIMIT,
) -> list[Event]:
    """
    Events dated today or later, ordered by date.

    Events sharing a date keep their input order. Events with an unparseable
    date are left out.
    """
    dated: list[tuple[pendulum.Date, Event]] = []
    for event in filter_events(events, search_term):
        event_date = date_from_str_optional(event["date"])
        if event_date is not None and event_date >= today:
            dated.append((event_date, event))

    dated.sort(key=lambda item: item[0])
    return [event for _, event in dated[: max(limit, 0)]]


def group_by_date(events: list[Event]) -> dict[str, list[Event]]:
    grouped: dict[str, list[Event]] = {}
    for event in events:
        if event["date"] not in grouped:
            grouped[event["date"]] = []
        grouped[event["date"]].append(event)
    return grouped

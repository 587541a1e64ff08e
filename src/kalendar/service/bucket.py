# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from kalendar.model.event import Event, Fragment
from kalendar.service.overnight import (
    as_fragment,
    end_fragment,
    is_overnight,
    start_fragment,
)
from kalendar.time import date_from_str_optional, date_to_str

logger = logging.getLogger(__name__)


def __contains(text: Optional[str], term: str) -> bool:
    if text is None:
        return False
    return term in text.lower()


def matches_search(event: Event, search_term: Optional[str]) -> bool:
    """
    Case-insensitive substring match against title, description and attendee.

    An empty or whitespace-only search term matches every event.
    """
    if search_term is None or not search_term.strip():
        return True

    term = search_term.lower()
    return (
        __contains(event["title"], term)
        or __contains(event["description"], term)
        or __contains(event["attendee"], term)
    )


def filter_events(events: list[Event], search_term: Optional[str]) -> list[Event]:
    return [event for event in events if matches_search(event, search_term)]


def __same_cell(date: pendulum.Date, day: int, month: int, year: int) -> bool:
    return date.day == day and date.month == month and date.year == year


def fragments_for_cell(
    day: int,
    month: int,
    year: int,
    events: list[Event],
    search_term: Optional[str] = None,
) -> list[Fragment]:
    """
    Collect the fragments that render in one calendar cell.

    Args:
        day: Day of the month of the cell
        month: Month of the cell (1-12)
        year: Year of the cell
        events: All loaded events
        search_term: Optional case-insensitive filter

    Returns:
        Fragments in the order their events appear in the input list. An event
        contributes its start fragment to its own date and, only when it
        crosses midnight, its end fragment to the following date.
    """
    cell_fragments: list[Fragment] = []

    for event in filter_events(events, search_term):
        event_date = date_from_str_optional(event["date"])
        if event_date is None:
            logger.debug("skipping event %s with unparseable date", event["id"])
            continue

        overnight = is_overnight(event)

        if __same_cell(event_date, day, month, year):
            if overnight:
                cell_fragments.append(start_fragment(event))
            else:
                cell_fragments.append(as_fragment(event))

        if overnight:
            next_day = event_date.add(days=1)
            if __same_cell(next_day, day, month, year):
                cell_fragments.append(end_fragment(event, date_to_str(next_day)))

    return cell_fragments


def fragments_for_date(
    date: pendulum.Date, events: list[Event], search_term: Optional[str] = None
) -> list[Fragment]:
    return fragments_for_cell(date.day, date.month, date.year, events, search_term)


def visible_fragments(
    fragments: list[Fragment], max_visible: int
) -> tuple[list[Fragment], int]:
    """
    Truncate a cell's fragments for compact views.

    Returns:
        The fragments to show and the number left out ("+N more").
    """
    if max_visible < 0:
        max_visible = 0
    shown = fragments[:max_visible]
    return shown, len(fragments) - len(shown)

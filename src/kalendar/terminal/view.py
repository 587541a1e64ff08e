# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer

from kalendar.id_map import clear_id_map_if_required
from kalendar.model.event import Event
from kalendar.repository.configuration import CONFIGURATION_REPO
from kalendar.repository.event import EVENT_REPO
from kalendar.service.bucket import filter_events
from kalendar.service.upcoming import DEFAULT_UPCOMING_LIMIT
from kalendar.terminal.custom_typer import AlphabeticalTyperGroup
from kalendar.terminal.parse import parse_date, parse_hour
from kalendar.time import date_to_str, today
from kalendar.view.views import event as event_report
from kalendar.view.views.calendar import (
    calendar_day_view,
    calendar_month_view,
    calendar_week_view,
    upcoming_view,
)

app = typer.Typer(cls=AlphabeticalTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
SEARCH_HELP = "case-insensitive match on title, description or attendee"


def _load_events() -> list[Event]:
    config = CONFIGURATION_REPO.get_config()
    return EVENT_REPO.get_all_events(config["default_event_color"])


def _hour_bounds(start: Optional[int], end: Optional[int]) -> tuple[int, int]:
    start_hour = start if start is not None else 0
    end_hour = end if end is not None else 23
    if start_hour > end_hour:
        raise typer.BadParameter(
            f"Start hour {start_hour} must not be after end hour {end_hour}"
        )
    return start_hour, end_hour


@app.command("day, d")
def day(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-D", parser=parse_date, help=DATE_HELP),
    ] = None,
    search: Annotated[
        Optional[str], typer.Option("--search", "-q", help=SEARCH_HELP)
    ] = None,
    start: Annotated[
        Optional[int],
        typer.Option(
            "--start",
            "-s",
            parser=parse_hour,
            help="First hour shown (HH:mm format, e.g., 8:00)",
        ),
    ] = None,
    end: Annotated[
        Optional[int],
        typer.Option(
            "--end",
            "-e",
            parser=parse_hour,
            help="Last hour shown (HH:mm format, e.g., 18:00)",
        ),
    ] = None,
    width: Annotated[
        int, typer.Option("--width", "-w", help="Total width in characters")
    ] = 80,
) -> None:
    start_hour, end_hour = _hour_bounds(start, end)
    calendar_day_view(
        _load_events(),
        date if date is not None else today(),
        search or "",
        start_hour,
        end_hour,
        width,
    )


@app.command("week, w")
def week(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-D",
            parser=parse_date,
            help="any day of the week to show; " + DATE_HELP,
        ),
    ] = None,
    search: Annotated[
        Optional[str], typer.Option("--search", "-q", help=SEARCH_HELP)
    ] = None,
    start: Annotated[
        Optional[int],
        typer.Option(
            "--start",
            "-s",
            parser=parse_hour,
            help="First hour shown (HH:mm format, e.g., 8:00)",
        ),
    ] = None,
    end: Annotated[
        Optional[int],
        typer.Option(
            "--end",
            "-e",
            parser=parse_hour,
            help="Last hour shown (HH:mm format, e.g., 18:00)",
        ),
    ] = None,
    day_width: Annotated[
        int,
        typer.Option(
            "--day-width", "-w", help="Width of each day column in characters"
        ),
    ] = 30,
) -> None:
    start_hour, end_hour = _hour_bounds(start, end)
    calendar_week_view(
        _load_events(),
        date if date is not None else today(),
        search or "",
        start_hour,
        end_hour,
        day_width,
    )


@app.command("month, m")
def month(
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-D",
            parser=parse_date,
            help="any day of the month to show; " + DATE_HELP,
        ),
    ] = None,
    search: Annotated[
        Optional[str], typer.Option("--search", "-q", help=SEARCH_HELP)
    ] = None,
    max_visible: Annotated[
        Optional[int],
        typer.Option(
            "--max-visible",
            "-mv",
            min=1,
            help="Events listed per day before '+N more' (defaults to config)",
        ),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()
    shown_date = date if date is not None else today()
    calendar_month_view(
        _load_events(),
        shown_date.year,
        shown_date.month,
        search or "",
        max_visible if max_visible is not None else config["max_visible_per_cell"],
    )


@app.command("upcoming, u")
def upcoming(
    search: Annotated[
        Optional[str], typer.Option("--search", "-q", help=SEARCH_HELP)
    ] = None,
    limit: Annotated[
        int, typer.Option("--limit", "-n", min=0, help="Number of events to show")
    ] = DEFAULT_UPCOMING_LIMIT,
) -> None:
    upcoming_view(_load_events(), today(), search or "", limit)


@app.command("events, es")
def events(
    search: Annotated[
        Optional[str], typer.Option("--search", "-q", help=SEARCH_HELP)
    ] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option(
            "--date",
            "-D",
            parser=parse_date,
            help="only events starting on this day; " + DATE_HELP,
        ),
    ] = None,
    no_color: Annotated[bool, typer.Option("--no-color", "-nc")] = False,
) -> None:
    clear_id_map_if_required()

    shown = filter_events(_load_events(), search)
    if date is not None:
        shown = [event for event in shown if event["date"] == date_to_str(date)]

    event_report.events_view("events", shown, not no_color, search or "")

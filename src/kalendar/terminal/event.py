# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import pendulum
import typer
from rich.console import Console

from kalendar.color import get_random_color
from kalendar.id_map import resolve_event_id
from kalendar.model.event import EventId
from kalendar.repository.configuration import CONFIGURATION_REPO
from kalendar.repository.event import EVENT_REPO
from kalendar.service.form import (
    EventForm,
    form_from_event,
    form_timestamps,
    validate_event_form,
)
from kalendar.template.event import get_event_record_template
from kalendar.terminal.custom_typer import AliasedTyperGroup
from kalendar.terminal.parse import (
    parse_color,
    parse_date,
    parse_id_list,
    parse_time,
)
from kalendar.time import date_to_str, today
from kalendar.view.views import event as event_report

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DATE_HELP = "valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1"
TIME_HELP = "valid inputs: (H)H:mm or h:mm AM/PM; an end before the start ends the next day"
COLOR_HELP = "valid inputs: hex color like #BCD8EC or a palette name like Blue"


def _raise_on_form_errors(errors: dict[str, str]) -> None:
    if errors:
        raise typer.BadParameter("; ".join(errors.values()))


def _show_event(id: EventId) -> None:
    config = CONFIGURATION_REPO.get_config()
    event = EVENT_REPO.get_event(id, config["default_event_color"])
    event_report.single_event_view(event, EVENT_REPO.get_record(id))


@app.command("add, a", no_args_is_help=True)
def add(
    title: Annotated[str, typer.Argument(help="event title")],
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_time, help=TIME_HELP),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_time, help=TIME_HELP),
    ] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-D", parser=parse_date, help=DATE_HELP),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    attendee: Annotated[Optional[str], typer.Option("--attendee", "-at")] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-col", parser=parse_color, help=COLOR_HELP),
    ] = None,
) -> None:
    config = CONFIGURATION_REPO.get_config()

    # Determine color: use provided color, or random if config enabled
    event_color = color
    if event_color is None and config["random_color_for_events"]:
        event_color = get_random_color()

    form = EventForm(
        title=title,
        description=description,
        attendee=attendee,
        date=date_to_str(date if date is not None else today()),
        start_time=start or "",
        end_time=end or "",
        color=event_color,
    )
    _raise_on_form_errors(validate_event_form(form))

    start_timestamp, end_timestamp = form_timestamps(form)

    record = get_event_record_template()
    record["title"] = form["title"].strip()
    record["description"] = form["description"]
    record["attendee"] = form["attendee"]
    record["start_time"] = start_timestamp
    record["end_time"] = end_timestamp
    record["color"] = form["color"]

    id = EVENT_REPO.save_new_event(record)
    _show_event(id)


@app.command("modify, m", no_args_is_help=True)
def modify(
    id: str,
    title: Annotated[Optional[str], typer.Option("--title", "-t")] = None,
    start: Annotated[
        Optional[str],
        typer.Option("--start", "-s", parser=parse_time, help=TIME_HELP),
    ] = None,
    end: Annotated[
        Optional[str],
        typer.Option("--end", "-e", parser=parse_time, help=TIME_HELP),
    ] = None,
    date: Annotated[
        Optional[pendulum.Date],
        typer.Option("--date", "-D", parser=parse_date, help=DATE_HELP),
    ] = None,
    description: Annotated[Optional[str], typer.Option("--description", "-d")] = None,
    attendee: Annotated[Optional[str], typer.Option("--attendee", "-at")] = None,
    color: Annotated[
        Optional[str],
        typer.Option("--color", "-col", parser=parse_color, help=COLOR_HELP),
    ] = None,
    remove_description: Annotated[
        bool, typer.Option("--remove-description", "-rd")
    ] = False,
    remove_attendee: Annotated[bool, typer.Option("--remove-attendee", "-rat")] = False,
    remove_color: Annotated[bool, typer.Option("--remove-color", "-rcol")] = False,
) -> None:
    config = CONFIGURATION_REPO.get_config()

    ids: list[int] = parse_id_list(id)
    real_ids = [resolve_event_id(event_id) for event_id in ids]

    for real_id in real_ids:
        event = EVENT_REPO.get_event(real_id, config["default_event_color"])

        form = form_from_event(event)
        if title is not None:
            form["title"] = title
        if date is not None:
            form["date"] = date_to_str(date)
        if start is not None:
            form["start_time"] = start
        if end is not None:
            form["end_time"] = end
        _raise_on_form_errors(validate_event_form(form))

        start_timestamp: Optional[str] = None
        end_timestamp: Optional[str] = None
        if date is not None or start is not None or end is not None:
            start_timestamp, end_timestamp = form_timestamps(form)

        EVENT_REPO.modify_event(
            real_id,
            title=title.strip() if title is not None else None,
            description=description,
            attendee=attendee,
            start_time=start_timestamp,
            end_time=end_timestamp,
            color=color,
            remove_description=remove_description,
            remove_attendee=remove_attendee,
            remove_color=remove_color,
        )

    for real_id in real_ids:
        _show_event(real_id)


@app.command("delete, d", no_args_is_help=True)
def delete(id: str) -> None:
    ids: list[int] = parse_id_list(id)
    real_ids = [resolve_event_id(event_id) for event_id in ids]

    console = Console()
    for event_id, real_id in zip(ids, real_ids):
        record = EVENT_REPO.get_record(real_id)
        EVENT_REPO.delete_event(real_id)
        console.print(f"Deleted event {event_id}: {record['title']}")


@app.command("show, s", no_args_is_help=True)
def show(id: int) -> None:
    _show_event(resolve_event_id(id))

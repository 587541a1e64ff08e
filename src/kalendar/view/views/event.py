# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.table import Table

from kalendar.model.event import Event, EventRecord
from kalendar.repository.id_map import ID_MAP_REPO
from kalendar.service.label import format_date, format_event_time_range
from kalendar.service.overnight import is_overnight
from kalendar.time import datetime_to_display_local_datetime_str
from kalendar.view.views.header import header


def events_view(
    report_name: str,
    events: list[Event],
    use_color: bool = True,
    search_term: str = "",
) -> None:
    header(report_name, search_term)

    events_table = Table(box=box.SIMPLE)
    for column in ["id", "date", "time", "title", "attendee"]:
        events_table.add_column(column)

    for event in events:
        time_range = format_event_time_range(event)
        if is_overnight(event):
            time_range += " (+1)"
        row = [
            str(ID_MAP_REPO.associate_id(event["id"])),
            event["date"],
            time_range,
            event["title"],
            event["attendee"] or "",
        ]
        if use_color:
            row = [f"[{event['color']}]{value}[/{event['color']}]" for value in row]
        events_table.add_row(*row)

    console = Console()
    console.print(events_table)


def single_event_view(event: Event, record: EventRecord) -> None:
    header("event")

    event_table = Table(box=box.SIMPLE)
    event_table.add_column("property")
    event_table.add_column("value")

    event_table.add_row("id", str(ID_MAP_REPO.associate_id(event["id"])))
    event_table.add_row("title", event["title"])
    event_table.add_row("date", format_date(event["date"]))
    event_table.add_row("time", format_event_time_range(event))
    event_table.add_row("overnight", str(is_overnight(event)))
    event_table.add_row("description", event["description"])
    event_table.add_row("attendee", event["attendee"])
    color = event["color"]
    event_table.add_row("color", f"[{color}]■[/{color}] {color}")
    event_table.add_row("start_time", record["start_time"])
    event_table.add_row("end_time", record["end_time"])
    event_table.add_row(
        "created", datetime_to_display_local_datetime_str(record["created"])
    )
    event_table.add_row(
        "updated", datetime_to_display_local_datetime_str(record["updated"])
    )

    console = Console()
    console.print(event_table)

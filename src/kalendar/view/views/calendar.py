# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum
from rich import box
from rich.columns import Columns
from rich.console import Console, RenderableType
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from kalendar.color import OUTSIDE_MONTH_STYLE, TODAY_STYLE
from kalendar.model.event import Event, Fragment
from kalendar.model.layout import EventLayout
from kalendar.service.bucket import (
    fragments_for_cell,
    fragments_for_date,
    visible_fragments,
)
from kalendar.service.grid import DAYS_OF_WEEK, month_weeks, week_dates
from kalendar.service.label import (
    format_day_heading,
    format_event_time_range,
)
from kalendar.service.layout import PIXELS_PER_HOUR, layout_cell
from kalendar.service.upcoming import group_by_date, upcoming_events
from kalendar.time import to_12h
from kalendar.view.views.header import header

# "12:00 AM │ " prefix on every hour row
HOUR_LABEL_WIDTH = 11


def calendar_day_view(
    events: list[Event],
    date: pendulum.Date,
    search_term: str = "",
    start_hour: int = 0,
    end_hour: int = 23,
    width: int = 80,
) -> None:
    """
    Display one day as an hourly grid.

    Args:
        events: All loaded events
        date: The day to display
        search_term: Optional case-insensitive filter
        start_hour: First hour row to draw (default 0)
        end_hour: Last hour row to draw (default 23)
        width: Total width in characters (default 80)
    """
    header("day", search_term)

    console = Console()
    fragments = fragments_for_date(date, events, search_term)

    console.print(f"\n[bold]{date.format('dddd, MMMM D, YYYY')}[/bold]\n")
    for line in _render_hour_lines(
        fragments, width - HOUR_LABEL_WIDTH, start_hour, end_hour
    ):
        console.print(line)
    console.print()


def calendar_week_view(
    events: list[Event],
    date: pendulum.Date,
    search_term: str = "",
    start_hour: int = 0,
    end_hour: int = 23,
    day_width: int = 30,
) -> None:
    """
    Display the Sunday-started week containing the given date as day columns.

    Args:
        events: All loaded events
        date: Any day within the week to display
        search_term: Optional case-insensitive filter
        start_hour: First hour row to draw (default 0)
        end_hour: Last hour row to draw (default 23)
        day_width: Width of each day column in characters (default 30)
    """
    header("week", search_term)

    console = Console()
    today = pendulum.today("local").date()

    day_columns: list[RenderableType] = []
    for current_date in week_dates(date):
        fragments = fragments_for_date(current_date, events, search_term)
        # Panel borders and padding take 4 characters
        lines = _render_hour_lines(
            fragments, day_width - 4 - HOUR_LABEL_WIDTH, start_hour, end_hour
        )

        date_str = current_date.format("ddd MM-DD")
        panel_title: RenderableType = date_str
        border_style = "bright_black"
        if current_date == today:
            panel_title = Text(date_str, style=TODAY_STYLE)
            border_style = "bold bright_cyan"

        day_columns.append(
            Panel(
                Text("\n").join(lines),
                title=panel_title,
                title_align="left",
                border_style=border_style,
                padding=(0, 1),
                width=day_width,
            )
        )

    console.print()
    console.print(Columns(day_columns, equal=False, expand=False, padding=(0, 0)))
    console.print()


def calendar_month_view(
    events: list[Event],
    year: int,
    month: int,
    search_term: str = "",
    max_visible_per_cell: int = 3,
    cell_width: int = 18,
) -> None:
    """
    Display a month grid with up to max_visible_per_cell events per day.

    Args:
        events: All loaded events
        year: Year of the month to display
        month: Month to display (1-12)
        search_term: Optional case-insensitive filter
        max_visible_per_cell: Events listed per day before "+N more"
        cell_width: Width of each day cell in characters (default 18)
    """
    header("month", search_term)

    console = Console()
    today = pendulum.today("local").date()

    month_start = pendulum.date(year, month, 1)
    console.print(f"\n[bold]{month_start.format('MMMM YYYY')}[/bold]\n")

    month_table = Table(box=box.SQUARE, show_lines=True, padding=(0, 0))
    for day_name in DAYS_OF_WEEK:
        month_table.add_column(
            day_name[:3], width=cell_width, no_wrap=True, overflow="ellipsis"
        )

    for week in month_weeks(year, month):
        row: list[RenderableType] = []
        for cell in week:
            if cell is None:
                row.append(Text(""))
                continue

            cell_text = Text()
            is_today = (
                cell["day"] == today.day
                and cell["month"] == today.month
                and cell["year"] == today.year
            )
            if is_today:
                cell_text.append(f" {cell['day']} ", style=TODAY_STYLE)
            elif not cell["in_month"]:
                cell_text.append(str(cell["day"]), style=OUTSIDE_MONTH_STYLE)
            else:
                cell_text.append(str(cell["day"]), style="bold")

            if cell["in_month"]:
                fragments = fragments_for_cell(
                    cell["day"], cell["month"], cell["year"], events, search_term
                )
                shown, hidden_count = visible_fragments(
                    fragments, max_visible_per_cell
                )
                for fragment in shown:
                    cell_text.append("\n")
                    cell_text.append("■ ", style=fragment["color"])
                    cell_text.append(_truncate(fragment["title"], cell_width - 2))
                if hidden_count > 0:
                    cell_text.append(f"\n+{hidden_count} more", style="dim")

            row.append(cell_text)
        month_table.add_row(*row)

    console.print(month_table)
    console.print()


def upcoming_view(
    events: list[Event],
    today: pendulum.Date,
    search_term: str = "",
    limit: int = 10,
) -> None:
    """Display the next events from today onward, grouped by day."""
    header("upcoming", search_term)

    console = Console()
    upcoming = upcoming_events(events, today, search_term, limit)

    if not upcoming:
        console.print("\nNo upcoming events. Add an event to see it here.\n")
        return

    for date_str, day_events in group_by_date(upcoming).items():
        console.print(f"\n[bold]{format_day_heading(date_str)}[/bold]")
        for event in day_events:
            line = Text()
            line.append("● ", style=event["color"])
            line.append(format_event_time_range(event), style="dim")
            line.append("  ")
            line.append(event["title"])
            console.print(line)
    console.print()


def _truncate(text: str, max_length: int) -> str:
    if max_length <= 0:
        return ""
    if len(text) <= max_length:
        return text
    if max_length <= 3:
        return text[:max_length]
    return text[: max_length - 3] + "..."


def _rows_spanned(layout: EventLayout) -> int:
    bottom_px = layout["top_offset_px"] + layout["height_px"]
    return max(1, math.ceil(bottom_px / PIXELS_PER_HOUR))


def _segment_bounds(layout: EventLayout, grid_width: int) -> tuple[int, int]:
    column_start = round(layout["left_offset_pct"] / 100 * grid_width)
    column_width = max(1, round(layout["width_pct"] / 100 * grid_width))
    column_end = min(grid_width, column_start + column_width)
    return column_start, column_end


def _render_hour_lines(
    fragments: list[Fragment],
    grid_width: int,
    start_hour: int = 0,
    end_hour: int = 23,
) -> list[Text]:
    """
    Render a cell's fragments onto hour rows.

    Each fragment is labelled once, in the first drawn row it covers, and
    continues as a bar through the rows its pixel height covers. Horizontal
    position and width follow the layout percentages.
    """
    grid_width = max(grid_width, 1)
    laid_out = layout_cell(fragments)

    lines: list[Text] = []
    for hour in range(start_hour, end_hour + 1):
        canvas: list[tuple[str, Optional[str]]] = [(" ", None)] * grid_width

        for fragment, layout in laid_out:
            anchor = layout["start_hour"]
            if not anchor <= hour < anchor + _rows_spanned(layout):
                continue
            label_hour = max(anchor, start_hour)

            column_start, column_end = _segment_bounds(layout, grid_width)
            segment_width = column_end - column_start
            if segment_width <= 0:
                continue

            if hour == label_hour:
                label = f"■ {fragment['title']} {format_event_time_range(fragment)}"
                segment = _truncate(label, segment_width).ljust(segment_width)
            else:
                segment = "┃".ljust(segment_width)

            for offset, char in enumerate(segment):
                canvas[column_start + offset] = (char, fragment["color"])

        line = Text()
        hour_label = to_12h(f"{hour:02d}:00")
        if hour == 12:
            line.append(f"{hour_label:>8} ", style="bold black on yellow")
        else:
            line.append(f"{hour_label:>8} ", style="dim")
        line.append("│ ", style="bright_black")
        for char, style in canvas:
            line.append(char, style=style or "")
        lines.append(line)

    return lines

# SPDX-License-Identifier: MIT

import pendulum

from kalendar.model.grid import CalendarCell, CalendarWeek

DAYS_OF_WEEK = [
    "Sunday",
    "Monday",
    "Tuesday",
    "Wednesday",
    "Thursday",
    "Friday",
    "Saturday",
]


def __sunday_index(date: pendulum.Date) -> int:
    # isoweekday: Monday=1 .. Sunday=7
    return date.isoweekday() % 7


def start_of_week(date: pendulum.Date) -> pendulum.Date:
    """The Sunday on or before the given date."""
    return date.subtract(days=__sunday_index(date))


def week_dates(date: pendulum.Date) -> list[pendulum.Date]:
    """The seven dates, Sunday first, of the week containing the given date."""
    week_start = start_of_week(date)
    return [week_start.add(days=offset) for offset in range(7)]


def month_weeks(year: int, month: int) -> list[CalendarWeek]:
    """
    Lay out a month as rows of seven cells, Sunday first.

    The first row is padded with the trailing days of the previous month
    (in_month is False). The last row is padded with None.
    """
    month_start = pendulum.date(year, month, 1)
    leading = __sunday_index(month_start)

    weeks: list[CalendarWeek] = []
    current_week: CalendarWeek = []

    for offset in range(leading, 0, -1):
        previous = month_start.subtract(days=offset)
        current_week.append(
            CalendarCell(
                day=previous.day,
                month=previous.month,
                year=previous.year,
                in_month=False,
            )
        )

    for day in range(1, month_start.days_in_month + 1):
        current_week.append(
            CalendarCell(day=day, month=month, year=year, in_month=True)
        )
        if len(current_week) == 7:
            weeks.append(current_week)
            current_week = []

    if current_week:
        while len(current_week) < 7:
            current_week.append(None)
        weeks.append(current_week)

    return weeks

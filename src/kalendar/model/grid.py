# SPDX-License-Identifier: MIT

from typing import Optional, TypeAlias, TypedDict


class CalendarCell(TypedDict):
    day: int
    month: int
    year: int
    in_month: bool


CalendarWeek: TypeAlias = list[Optional[CalendarCell]]

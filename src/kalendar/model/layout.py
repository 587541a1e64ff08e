# SPDX-License-Identifier: MIT

from typing import TypedDict


class EventLayout(TypedDict):
    top_offset_px: float
    height_px: float
    start_hour: int
    duration_minutes: int
    width_pct: float
    left_offset_pct: float

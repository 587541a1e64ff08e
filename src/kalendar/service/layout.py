# SPDX-License-Identifier: MIT

from kalendar.model.event import OVERNIGHT_ID_SUFFIX, Fragment
from kalendar.model.layout import EventLayout
from kalendar.time import to_minutes

PIXELS_PER_HOUR = 64
PIXELS_PER_MINUTE = PIXELS_PER_HOUR / 60
MIN_EVENT_HEIGHT_PX = 20
MINUTES_PER_DAY = 24 * 60


def minute_range(fragment: Fragment) -> tuple[int, int]:
    """
    Start and end minutes of a fragment.

    An end before the start means the span crosses midnight and a day is
    added to the end, except for "_overnight" fragments which the splitter
    has already clipped to a same-day range.
    """
    start_minutes = to_minutes(fragment["start_time"])
    end_minutes = to_minutes(fragment["end_time"])
    if end_minutes < start_minutes and not fragment["id"].endswith(
        OVERNIGHT_ID_SUFFIX
    ):
        end_minutes += MINUTES_PER_DAY
    return start_minutes, end_minutes


def ranges_overlap(a: tuple[int, int], b: tuple[int, int]) -> bool:
    return a[0] < b[1] and a[1] > b[0]


def fragments_overlap(a: Fragment, b: Fragment) -> bool:
    return ranges_overlap(minute_range(a), minute_range(b))


def layout_of(fragment: Fragment, cell_fragments: list[Fragment]) -> EventLayout:
    """
    Compute the grid geometry of a fragment within its calendar cell.

    Vertical placement comes from the time of day at a fixed 64px per hour:
    the fragment anchors to the row of its start hour, offset by its start
    minute, and is at least MIN_EVENT_HEIGHT_PX tall.

    Horizontal placement splits the cell width between the fragment and
    every other fragment whose time range intersects its own. The column
    index is the number of those overlapping fragments that come earlier in
    the cell list. This is fixed-column packing, not a minimal coloring:
    chains of partially overlapping events can get more columns than needed.

    Args:
        fragment: The fragment to lay out
        cell_fragments: All fragments in the same cell, in bucket order

    Returns:
        The fragment's EventLayout
    """
    start_minutes, end_minutes = minute_range(fragment)
    own_range = (start_minutes, end_minutes)

    start_hour = start_minutes // 60
    top_offset_px = (start_minutes % 60) * PIXELS_PER_MINUTE
    duration_minutes = end_minutes - start_minutes
    height_px = max(MIN_EVENT_HEIGHT_PX, duration_minutes * PIXELS_PER_MINUTE)

    overlap_index = 0
    overlapping_count = 0
    seen_self = False
    for other in cell_fragments:
        if other is fragment or (not seen_self and other["id"] == fragment["id"]):
            seen_self = True
            continue
        if ranges_overlap(own_range, minute_range(other)):
            overlapping_count += 1
            if not seen_self:
                overlap_index += 1

    total_overlapping = overlapping_count + 1
    width_pct = 100 / total_overlapping
    left_offset_pct = (overlap_index * 100) / total_overlapping

    return EventLayout(
        top_offset_px=top_offset_px,
        height_px=height_px,
        start_hour=start_hour,
        duration_minutes=duration_minutes,
        width_pct=width_pct,
        left_offset_pct=left_offset_pct,
    )


def layout_cell(
    cell_fragments: list[Fragment],
) -> list[tuple[Fragment, EventLayout]]:
    return [
        (fragment, layout_of(fragment, cell_fragments)) for fragment in cell_fragments
    ]

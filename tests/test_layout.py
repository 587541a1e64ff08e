# SPDX-License-Identifier: MIT

import pytest

from kalendar.service.bucket import fragments_for_cell
from kalendar.service.label import format_event_time_range
from kalendar.service.layout import (
    MIN_EVENT_HEIGHT_PX,
    layout_cell,
    layout_of,
    minute_range,
)
from kalendar.service.overnight import as_fragment


def test_single_event_fills_the_cell(make_event):
    fragment = as_fragment(make_event(start_time="9:00 AM", end_time="10:00 AM"))

    layout = layout_of(fragment, [fragment])

    assert layout["start_hour"] == 9
    assert layout["top_offset_px"] == 0
    assert layout["height_px"] == 64
    assert layout["duration_minutes"] == 60
    assert layout["width_pct"] == 100
    assert layout["left_offset_pct"] == 0


def test_top_offset_follows_start_minute(make_event):
    fragment = as_fragment(make_event(start_time="2:45 PM", end_time="4:15 PM"))

    layout = layout_of(fragment, [fragment])

    assert layout["start_hour"] == 14
    assert layout["top_offset_px"] == pytest.approx(48)
    assert layout["height_px"] == pytest.approx(96)


def test_short_events_are_never_shorter_than_the_floor(make_event):
    for end_time in ("9:00 AM", "9:01 AM", "9:05 AM", "9:18 AM"):
        fragment = as_fragment(make_event(start_time="9:00 AM", end_time=end_time))
        assert layout_of(fragment, [fragment])["height_px"] == MIN_EVENT_HEIGHT_PX


def test_mutually_overlapping_events_share_the_width(make_event):
    fragments = [
        as_fragment(make_event(start_time="10:00 AM", end_time="11:00 AM")),
        as_fragment(make_event(start_time="10:15 AM", end_time="11:30 AM")),
        as_fragment(make_event(start_time="10:30 AM", end_time="10:45 AM")),
    ]

    layouts = [layout for _, layout in layout_cell(fragments)]

    assert [layout["width_pct"] for layout in layouts] == pytest.approx(
        [100 / 3] * 3
    )
    assert [layout["left_offset_pct"] for layout in layouts] == pytest.approx(
        [0, 100 / 3, 200 / 3]
    )
    assert sum(layout["width_pct"] for layout in layouts) == pytest.approx(100)


def test_events_that_only_touch_do_not_overlap(make_event):
    fragments = [
        as_fragment(make_event(start_time="9:00 AM", end_time="10:00 AM")),
        as_fragment(make_event(start_time="10:00 AM", end_time="11:00 AM")),
    ]

    for _, layout in layout_cell(fragments):
        assert layout["width_pct"] == 100
        assert layout["left_offset_pct"] == 0


def test_overlap_ignores_fragments_outside_its_range(make_event):
    morning = as_fragment(make_event(start_time="8:00 AM", end_time="9:00 AM"))
    first = as_fragment(make_event(start_time="1:00 PM", end_time="3:00 PM"))
    second = as_fragment(make_event(start_time="2:00 PM", end_time="4:00 PM"))
    cell = [morning, first, second]

    assert layout_of(morning, cell)["width_pct"] == 100
    assert layout_of(first, cell)["left_offset_pct"] == 0
    assert layout_of(second, cell)["left_offset_pct"] == pytest.approx(50)
    assert layout_of(second, cell)["width_pct"] == pytest.approx(50)


def test_unsplit_overnight_range_adds_a_day(make_event):
    fragment = as_fragment(make_event(start_time="11:00 PM", end_time="1:00 AM"))

    assert minute_range(fragment) == (1380, 1500)
    layout = layout_of(fragment, [fragment])
    assert layout["duration_minutes"] == 120
    assert layout["height_px"] == pytest.approx(128)


def test_late_night_event_renders_on_both_days(make_event):
    event = make_event(
        date="2025-06-10",
        start_time="11:30 PM",
        end_time="12:30 AM",
        title="Late deploy",
    )

    (start,) = fragments_for_cell(10, 6, 2025, [event])
    (end,) = fragments_for_cell(11, 6, 2025, [event])

    start_layout = layout_of(start, [start])
    assert start_layout["start_hour"] == 23
    assert start_layout["top_offset_px"] == pytest.approx(32)
    assert start_layout["duration_minutes"] == 29
    assert start_layout["height_px"] == pytest.approx(29 * 64 / 60)

    end_layout = layout_of(end, [end])
    assert minute_range(end) == (0, 30)
    assert end_layout["start_hour"] == 0
    assert end_layout["top_offset_px"] == 0
    assert end_layout["duration_minutes"] == 30
    assert end_layout["height_px"] == pytest.approx(32)

    assert format_event_time_range(start) == "11:30 PM - 12:30 AM"
    assert format_event_time_range(end) == "11:30 PM - 12:30 AM"


def test_carried_over_fragment_shares_width_with_early_events(make_event):
    carried = make_event(date="2025-06-10", start_time="11:00 PM", end_time="1:00 AM")
    early = make_event(date="2025-06-11", start_time="12:30 AM", end_time="2:00 AM")

    cell = fragments_for_cell(11, 6, 2025, [carried, early])
    layouts = [layout for _, layout in layout_cell(cell)]

    assert [layout["width_pct"] for layout in layouts] == pytest.approx([50, 50])
    assert [layout["left_offset_pct"] for layout in layouts] == pytest.approx([0, 50])


def test_missing_times_lay_out_at_midnight_with_minimum_height(make_event):
    fragment = as_fragment(make_event(start_time="", end_time=""))

    layout = layout_of(fragment, [fragment])

    assert layout["start_hour"] == 0
    assert layout["top_offset_px"] == 0
    assert layout["height_px"] == MIN_EVENT_HEIGHT_PX
    assert layout["duration_minutes"] == 0
    assert layout["width_pct"] == 100

# SPDX-License-Identifier: MIT

from kalendar.service.overnight import as_fragment
from kalendar.view.views.calendar import HOUR_LABEL_WIDTH, _render_hour_lines


def test_overlapping_events_are_drawn_side_by_side(make_event):
    fragments = [
        as_fragment(make_event(start_time="9:00 AM", end_time="10:00 AM", title="A")),
        as_fragment(make_event(start_time="9:00 AM", end_time="10:00 AM", title="B")),
    ]

    lines = _render_hour_lines(fragments, 40, start_hour=8, end_hour=10)
    rows = [line.plain[HOUR_LABEL_WIDTH:] for line in lines]

    assert rows[0].strip() == ""
    assert rows[1][:20].startswith("■ A 9:00 AM")
    assert rows[1][20:].startswith("■ B 9:00 AM")
    assert rows[2].strip() == ""


def test_event_continues_through_the_rows_it_covers(make_event):
    fragment = as_fragment(
        make_event(start_time="9:30 AM", end_time="10:30 AM", title="Review")
    )

    lines = _render_hour_lines([fragment], 30, start_hour=9, end_hour=11)
    rows = [line.plain[HOUR_LABEL_WIDTH:] for line in lines]

    assert rows[0].startswith("■ Review")
    assert rows[1].startswith("┃")
    assert rows[2].strip() == ""


def test_event_starting_above_the_grid_is_labelled_on_the_first_row(make_event):
    fragment = as_fragment(
        make_event(start_time="7:00 AM", end_time="10:00 AM", title="Offsite")
    )

    lines = _render_hour_lines([fragment], 40, start_hour=8, end_hour=10)
    rows = [line.plain[HOUR_LABEL_WIDTH:] for line in lines]

    assert rows[0].startswith("■ Offsite 7:00 AM")
    assert rows[1].startswith("┃")
    assert rows[2].strip() == ""


def test_hour_labels_use_twelve_hour_times():
    lines = _render_hour_lines([], 10, start_hour=0, end_hour=13)

    assert lines[0].plain.startswith("12:00 AM")
    assert lines[12].plain.startswith("12:00 PM")
    assert lines[13].plain.startswith(" 1:00 PM")

# SPDX-License-Identifier: MIT

import pendulum

from kalendar.service.upcoming import group_by_date, upcoming_events

TODAY = pendulum.date(2025, 6, 10)


def test_only_today_and_later_sorted_by_date(make_event):
    past = make_event(date="2025-06-09")
    later = make_event(date="2025-06-20")
    today = make_event(date="2025-06-10")
    tomorrow = make_event(date="2025-06-11")

    assert upcoming_events([past, later, today, tomorrow], TODAY) == [
        today,
        tomorrow,
        later,
    ]


def test_same_day_events_keep_input_order(make_event):
    first = make_event(date="2025-06-12", start_time="3:00 PM", end_time="4:00 PM")
    second = make_event(date="2025-06-12", start_time="8:00 AM", end_time="9:00 AM")

    assert upcoming_events([first, second], TODAY) == [first, second]


def test_limit_and_search(make_event):
    events = [
        make_event(date=f"2025-06-{day}", title=f"Run {day}") for day in range(11, 20)
    ]
    events.append(make_event(date="2025-06-30", title="Swim"))

    assert len(upcoming_events(events, TODAY, limit=3)) == 3
    assert [event["title"] for event in upcoming_events(events, TODAY, "swim")] == [
        "Swim"
    ]
    assert upcoming_events(events, TODAY, limit=0) == []


def test_malformed_dates_are_left_out(make_event):
    assert upcoming_events([make_event(date="tbd")], TODAY) == []


def test_group_by_date(make_event):
    a = make_event(date="2025-06-10")
    b = make_event(date="2025-06-11")
    c = make_event(date="2025-06-10")

    assert group_by_date([a, b, c]) == {"2025-06-10": [a, c], "2025-06-11": [b]}

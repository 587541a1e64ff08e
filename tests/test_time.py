# SPDX-License-Identifier: MIT

import pendulum
import pytest

from kalendar.time import (
    build_timestamp,
    date_from_str_optional,
    next_day_str,
    timestamp_date,
    timestamp_time,
    to_12h,
    to_24h,
    to_minutes,
)


@pytest.mark.parametrize(
    "display, wire",
    [
        ("12:00 AM", "00:00"),
        ("12:30 AM", "00:30"),
        ("9:05 AM", "09:05"),
        ("12:00 PM", "12:00"),
        ("12:45 PM", "12:45"),
        ("1:15 PM", "13:15"),
        ("11:59 PM", "23:59"),
    ],
)
def test_to_24h_converts_display_times(display, wire):
    assert to_24h(display) == wire


@pytest.mark.parametrize(
    "wire, display",
    [
        ("00:00", "12:00 AM"),
        ("00:30", "12:30 AM"),
        ("09:05", "9:05 AM"),
        ("12:00", "12:00 PM"),
        ("13:15", "1:15 PM"),
        ("23:59", "11:59 PM"),
    ],
)
def test_to_12h_converts_wire_times(wire, display):
    assert to_12h(wire) == display


def test_to_24h_accepts_lowercase_period_and_extra_spaces():
    assert to_24h("  7:30 pm ") == "19:30"
    assert to_24h("7:30pm") == "19:30"


def test_to_12h_ignores_seconds():
    assert to_12h("23:30:00") == "11:30 PM"


def test_every_hour_survives_a_round_trip():
    for hour in range(24):
        for minute in (0, 1, 30, 59):
            wire = f"{hour:02d}:{minute:02d}"
            assert to_24h(to_12h(wire)) == wire
            assert to_minutes(to_12h(wire)) == hour * 60 + minute


@pytest.mark.parametrize("bad", [None, "", "noon", "25", "9 AM", "09:00"])
def test_to_24h_degrades_to_empty_string(bad):
    assert to_24h(bad) == ""


@pytest.mark.parametrize("bad", [None, "", "9pm", "nine"])
def test_to_12h_degrades_to_empty_string(bad):
    assert to_12h(bad) == ""


def test_to_minutes_counts_from_midnight():
    assert to_minutes("12:00 AM") == 0
    assert to_minutes("12:30 AM") == 30
    assert to_minutes("12:00 PM") == 720
    assert to_minutes("11:30 PM") == 1410
    assert to_minutes("11:59 PM") == 1439


def test_to_minutes_degrades_to_zero():
    assert to_minutes(None) == 0
    assert to_minutes("") == 0
    assert to_minutes("later") == 0


def test_to_minutes_orders_like_the_clock():
    ordered = ["12:00 AM", "6:15 AM", "11:59 AM", "12:00 PM", "1:00 PM", "11:59 PM"]
    minutes = [to_minutes(display) for display in ordered]
    assert minutes == sorted(minutes)
    assert len(set(minutes)) == len(minutes)


def test_next_day_str_crosses_month_and_year():
    assert next_day_str("2025-06-10") == "2025-06-11"
    assert next_day_str("2025-06-30") == "2025-07-01"
    assert next_day_str("2025-12-31") == "2026-01-01"
    assert next_day_str("2024-02-28") == "2024-02-29"


def test_next_day_str_of_malformed_date_is_none():
    assert next_day_str("2025-13-40") is None
    assert next_day_str("soon") is None


def test_date_from_str_optional():
    assert date_from_str_optional("2025-06-10") == pendulum.date(2025, 6, 10)
    assert date_from_str_optional("") is None
    assert date_from_str_optional("10/06/2025") is None


def test_timestamp_parts():
    timestamp = build_timestamp("2025-06-10", "23:30")
    assert timestamp == "2025-06-10T23:30:00"
    assert timestamp_date(timestamp) == "2025-06-10"
    assert timestamp_time(timestamp) == "23:30"
    assert timestamp_time("2025-06-10") == ""

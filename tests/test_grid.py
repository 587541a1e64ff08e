# SPDX-License-Identifier: MIT

import pendulum

from kalendar.service.grid import DAYS_OF_WEEK, month_weeks, start_of_week, week_dates


def test_weeks_start_on_sunday():
    assert DAYS_OF_WEEK[0] == "Sunday"
    # 2025-06-10 is a Tuesday
    assert start_of_week(pendulum.date(2025, 6, 10)) == pendulum.date(2025, 6, 8)
    assert start_of_week(pendulum.date(2025, 6, 8)) == pendulum.date(2025, 6, 8)
    assert start_of_week(pendulum.date(2025, 6, 14)) == pendulum.date(2025, 6, 8)


def test_week_dates_span_seven_days():
    dates = week_dates(pendulum.date(2025, 12, 31))

    assert len(dates) == 7
    assert dates[0] == pendulum.date(2025, 12, 28)
    assert dates[-1] == pendulum.date(2026, 1, 3)


def test_month_weeks_pads_with_previous_month_and_none():
    # June 2025 starts on a Sunday and has 30 days
    june = month_weeks(2025, 6)
    assert len(june) == 5
    assert june[0][0] == {"day": 1, "month": 6, "year": 2025, "in_month": True}
    assert june[-1][:2] == [
        {"day": 29, "month": 6, "year": 2025, "in_month": True},
        {"day": 30, "month": 6, "year": 2025, "in_month": True},
    ]
    assert june[-1][2:] == [None] * 5

    # January 2025 starts on a Wednesday
    january = month_weeks(2025, 1)
    assert january[0][:3] == [
        {"day": 29, "month": 12, "year": 2024, "in_month": False},
        {"day": 30, "month": 12, "year": 2024, "in_month": False},
        {"day": 31, "month": 12, "year": 2024, "in_month": False},
    ]
    assert january[0][3] == {"day": 1, "month": 1, "year": 2025, "in_month": True}
    assert all(len(week) == 7 for week in january)

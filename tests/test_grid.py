# SPDX-License-Identifier: MIT

import pendulum
import pytest

from calgrid.layout.calendar_math import CalendarSystem, InvalidDateError
from calgrid.layout.grid import MONTH_GRID_SIZE, month_grid, week_grid, year_grid
from calgrid.service.event import events_in_month
from conftest import make_event


@pytest.mark.parametrize("week_start", list(range(7)))
def test_month_grid_always_has_42_cells(week_start: int) -> None:
    calendar = CalendarSystem(week_start=week_start)
    first_weekdays = set()
    month_lengths = set()

    for year in range(2020, 2028):
        for month in range(1, 13):
            month_start = pendulum.date(year, month, 1)
            first_weekdays.add(int(month_start.day_of_week))
            month_lengths.add(month_start.days_in_month)

            cells = month_grid(month_start, calendar)

            assert len(cells) == MONTH_GRID_SIZE == 42
            in_period = [cell for cell in cells if cell["in_current_period"]]
            assert len(in_period) == month_start.days_in_month

    assert first_weekdays == set(range(7))
    assert month_lengths == {28, 29, 30, 31}


def test_month_grid_february_starting_on_sunday_with_monday_week() -> None:
    # 2026 is not a leap year and 2026-02-01 is a Sunday
    calendar = CalendarSystem(week_start=pendulum.MONDAY)

    cells = month_grid(pendulum.date(2026, 2, 14), calendar)

    assert len(cells) == 42
    assert cells[0]["date"] == pendulum.date(2026, 1, 26)
    assert cells[0]["date"].day_of_week == pendulum.MONDAY
    assert cells[6]["date"] == pendulum.date(2026, 2, 1)
    assert sum(1 for cell in cells if cell["in_current_period"]) == 28
    assert cells[-1]["date"] == pendulum.date(2026, 3, 8)


def test_month_grid_days_are_consecutive(utc_calendar: CalendarSystem) -> None:
    cells = month_grid(pendulum.date(2024, 9, 10), utc_calendar)
    for previous, current in zip(cells, cells[1:]):
        assert current["date"] == previous["date"].add(days=1)


def test_month_grid_in_period_cells_are_contiguous(utc_calendar: CalendarSystem) -> None:
    cells = month_grid(pendulum.date(2024, 6, 1), utc_calendar)
    flags = [cell["in_current_period"] for cell in cells]
    first = flags.index(True)
    last = len(flags) - 1 - flags[::-1].index(True)
    assert all(flags[first : last + 1])
    assert cells[first]["date"] == pendulum.date(2024, 6, 1)
    assert cells[last]["date"] == pendulum.date(2024, 6, 30)


def test_month_grid_marks_today(utc_calendar: CalendarSystem) -> None:
    now = pendulum.datetime(2024, 3, 15, 10, 0, tz="UTC")
    cells = month_grid(pendulum.date(2024, 3, 1), utc_calendar, now=now)

    today_cells = [cell for cell in cells if cell["is_today"]]
    assert [cell["date"] for cell in today_cells] == [pendulum.date(2024, 3, 15)]


def test_month_grid_today_uses_calendar_timezone() -> None:
    calendar = CalendarSystem(timezone="Asia/Tokyo")
    now = pendulum.datetime(2024, 3, 15, 20, 0, tz="UTC")
    cells = month_grid(pendulum.date(2024, 3, 1), calendar, now=now)

    assert [cell["date"] for cell in cells if cell["is_today"]] == [
        pendulum.date(2024, 3, 16)
    ]


def test_month_grid_out_of_range_raises(utc_calendar: CalendarSystem) -> None:
    with pytest.raises(InvalidDateError):
        month_grid(pendulum.date(9999, 12, 15), utc_calendar)


def test_week_grid_starts_on_first_weekday() -> None:
    now = pendulum.datetime(2024, 3, 6, 12, 0, tz="UTC")

    monday_cells = week_grid(now, CalendarSystem(week_start=pendulum.MONDAY), now=now)
    sunday_cells = week_grid(now, CalendarSystem(week_start=pendulum.SUNDAY), now=now)

    assert len(monday_cells) == 7
    assert monday_cells[0]["date"] == pendulum.date(2024, 3, 4)
    assert monday_cells[-1]["date"] == pendulum.date(2024, 3, 10)
    assert sunday_cells[0]["date"] == pendulum.date(2024, 3, 3)
    assert all(cell["in_current_period"] for cell in monday_cells)
    assert [cell["is_today"] for cell in monday_cells] == [
        False,
        False,
        True,
        False,
        False,
        False,
        False,
    ]


def test_week_grid_crossing_year_boundary(utc_calendar: CalendarSystem) -> None:
    cells = week_grid(pendulum.date(2025, 1, 1), utc_calendar)
    assert [cell["date"] for cell in cells][0] == pendulum.date(2024, 12, 30)
    assert [cell["date"] for cell in cells][-1] == pendulum.date(2025, 1, 5)


def test_year_grid_counts_events_per_month(utc_calendar: CalendarSystem) -> None:
    events = [
        make_event("a", "09:00", "10:00", day="2024-01-10"),
        make_event("b", "09:00", "10:00", day="2024-01-20"),
        make_event("c", "09:00", "10:00", day="2024-07-04"),
        make_event("d", "09:00", "10:00", day="2023-07-04"),
    ]
    now = pendulum.datetime(2024, 7, 1, tz="UTC")

    months = year_grid(pendulum.date(2024, 5, 5), utc_calendar, events, now=now)

    assert len(months) == 12
    assert months[0]["month"] == pendulum.date(2024, 1, 1)
    assert [month["event_count"] for month in months] == [2, 0, 0, 0, 0, 0, 1, 0, 0, 0, 0, 0]
    assert [month["is_current_month"] for month in months].index(True) == 6


def test_year_grid_agrees_with_month_counts() -> None:
    tokyo = CalendarSystem(timezone="Asia/Tokyo")
    # 20:00 UTC on Jan 31 is already Feb 1 in Tokyo
    events = [
        make_event("boundary", "20:00", "21:00", day="2024-01-31"),
        make_event("plain", "01:00", "02:00", day="2024-01-15"),
    ]

    months = year_grid(pendulum.date(2024, 1, 1), tokyo, events)

    assert [month["event_count"] for month in months[:3]] == [1, 1, 0]
    assert [month["event_count"] for month in months] == [
        events_in_month(events, month["month"], tokyo) for month in months
    ]

# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from calgrid.layout.calendar_math import (
    DAYS_PER_WEEK,
    CalendarSystem,
    DateLike,
    days_in_month,
    first_weekday_offset,
    resolving,
    start_of_month,
    start_of_week,
)
from calgrid.model.day_cell import DayCell, MonthCell
from calgrid.model.event import Event
from calgrid.service.event import events_in_month

MONTH_GRID_ROWS = 6
MONTH_GRID_SIZE = MONTH_GRID_ROWS * DAYS_PER_WEEK


def month_grid(
    anchor_date: DateLike,
    calendar: CalendarSystem,
    now: Optional[pendulum.DateTime] = None,
) -> list[DayCell]:
    """
    Build the fixed 6 x 7 grid of days for the month containing anchor_date.

    The month is padded with trailing days of the previous month so that the
    1st lands in its weekday column, and with leading days of the next month
    until the grid holds exactly 42 cells.

    Args:
        anchor_date: Any instant or day within the month to display
        calendar: Calendar providing the timezone and first weekday
        now: Reference instant for is_today (defaults to the current time)

    Returns:
        42 day cells in display order

    Raises:
        InvalidDateError: If a day of the grid cannot be resolved
    """
    month_start = start_of_month(anchor_date, calendar).date()
    offset = first_weekday_offset(month_start, calendar)
    length = days_in_month(month_start, calendar)
    today = calendar.today(now)

    with resolving(f"month grid for {month_start.format('YYYY-MM')}"):
        days: list[pendulum.Date] = [
            month_start.subtract(days=i) for i in range(offset, 0, -1)
        ]
        days.extend(month_start.add(days=i) for i in range(length))
        while len(days) < MONTH_GRID_SIZE:
            days.append(days[-1].add(days=1))

    return [
        {
            "date": day,
            "in_current_period": (day.year, day.month)
            == (month_start.year, month_start.month),
            "is_today": day == today,
        }
        for day in days
    ]


def week_grid(
    anchor_date: DateLike,
    calendar: CalendarSystem,
    now: Optional[pendulum.DateTime] = None,
) -> list[DayCell]:
    """The 7 days of the week containing anchor_date, from the first weekday."""
    week_start = start_of_week(anchor_date, calendar)
    today = calendar.today(now)

    with resolving(f"week grid for {week_start.to_date_string()}"):
        days = [week_start.add(days=i) for i in range(DAYS_PER_WEEK)]

    return [
        {"date": day, "in_current_period": True, "is_today": day == today}
        for day in days
    ]


def year_grid(
    anchor_date: DateLike,
    calendar: CalendarSystem,
    events: list[Event],
    now: Optional[pendulum.DateTime] = None,
) -> list[MonthCell]:
    """One cell per month of the anchor's year with the number of events starting in it."""
    year = calendar.localize(anchor_date).year
    today = calendar.today(now)

    with resolving(f"year grid for {year}"):
        months = [pendulum.date(year, month, 1) for month in range(1, 13)]

    return [
        {
            "month": month,
            "event_count": events_in_month(events, month, calendar),
            "is_current_month": (month.year, month.month) == (today.year, today.month),
        }
        for month in months
    ]

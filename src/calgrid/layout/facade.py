# SPDX-License-Identifier: MIT

"""Stateless entry point for month, week and day calendar layouts.

Every call re-derives its result from the arguments; nothing is cached.
Callers that memoize must key on the events snapshot, anchor date, calendar
and view mode.
"""

import logging
from typing import Optional

import pendulum

from calgrid.layout import day as day_engine
from calgrid.layout import grid
from calgrid.layout.calendar_math import CalendarSystem, DateLike, resolving
from calgrid.model.day_cell import DayCell
from calgrid.model.event import Event
from calgrid.model.layout import CalendarView, PixelLayout
from calgrid.model.view_mode import ViewMode

logger = logging.getLogger(__name__)


def month_grid(
    anchor_date: DateLike,
    calendar: CalendarSystem,
    now: Optional[pendulum.DateTime] = None,
) -> list[DayCell]:
    return grid.month_grid(anchor_date, calendar, now)


def week_grid(
    anchor_date: DateLike,
    calendar: CalendarSystem,
    now: Optional[pendulum.DateTime] = None,
) -> list[DayCell]:
    return grid.week_grid(anchor_date, calendar, now)


def day_layout(
    events: list[Event],
    day: DateLike,
    calendar: CalendarSystem,
    hour_height: float,
) -> list[PixelLayout]:
    return day_engine.layout(events, day, calendar, hour_height)


def layout_for_mode(
    mode: ViewMode,
    anchor_date: DateLike,
    calendar: CalendarSystem,
    events: Optional[list[Event]] = None,
    hour_height: float = 50.0,
    now: Optional[pendulum.DateTime] = None,
) -> CalendarView:
    """
    Compute the layout for a view mode.

    Month and week modes return grid cells only; day mode returns the single
    day cell together with the positioned events of that day.
    """
    logger.debug("Computing %s layout for %s", mode.value, anchor_date)

    if mode == ViewMode.MONTH:
        return {
            "mode": mode,
            "cells": month_grid(anchor_date, calendar, now),
            "items": [],
        }
    if mode == ViewMode.WEEK:
        return {
            "mode": mode,
            "cells": week_grid(anchor_date, calendar, now),
            "items": [],
        }

    day = calendar.localize(anchor_date).date()
    cell: DayCell = {
        "date": day,
        "in_current_period": True,
        "is_today": day == calendar.today(now),
    }
    return {
        "mode": mode,
        "cells": [cell],
        "items": day_layout(events or [], day, calendar, hour_height),
    }


def shift_anchor(mode: ViewMode, anchor_date: DateLike, step: int) -> DateLike:
    """Move the anchor by step months, weeks or days depending on the view mode."""
    with resolving(f"{mode.value} navigation"):
        if mode == ViewMode.MONTH:
            return anchor_date.add(months=step)
        if mode == ViewMode.WEEK:
            return anchor_date.add(weeks=step)
        return anchor_date.add(days=step)


def title_for_anchor(
    mode: ViewMode, anchor_date: DateLike, calendar: CalendarSystem
) -> str:
    local = calendar.localize(anchor_date)
    if mode == ViewMode.MONTH:
        return local.format("MMMM YYYY")
    if mode == ViewMode.WEEK:
        iso_year, iso_week, _ = local.isocalendar()
        return f"Week {iso_week}, {iso_year}"
    return local.format("dddd, MMMM D, YYYY")

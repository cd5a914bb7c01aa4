# SPDX-License-Identifier: MIT

from typing import Iterable, Optional

from calgrid.layout.calendar_math import CalendarSystem, DateLike, is_same_month
from calgrid.layout.cluster import sort_events
from calgrid.layout.day import events_starting_on
from calgrid.model.event import Event
from calgrid.model.view_mode import FilterScope


def events_on_day(
    events: list[Event], day: DateLike, calendar: CalendarSystem
) -> list[Event]:
    """Events starting on the given day, in start order."""
    return sort_events(events_starting_on(events, day, calendar))


def events_by_day(
    events: list[Event], days: Iterable[DateLike], calendar: CalendarSystem
) -> dict[str, list[Event]]:
    """
    Map each day (as a YYYY-MM-DD string) to the events starting on it.

    Args:
        events: All events to distribute
        days: Days to collect events for, e.g. the dates of a month grid
        calendar: Calendar providing the timezone

    Returns:
        Dictionary with one entry per requested day, possibly empty lists
    """
    by_day: dict[str, list[Event]] = {
        calendar.localize(day).to_date_string(): [] for day in days
    }
    for event in sort_events(events):
        key = calendar.localize(event["start"]).to_date_string()
        if key in by_day:
            by_day[key].append(event)
    return by_day


def events_in_month(
    events: list[Event], month: DateLike, calendar: CalendarSystem
) -> int:
    return sum(1 for event in events if is_same_month(event["start"], month, calendar))


def filter_events(
    events: list[Event],
    scope: FilterScope = FilterScope.ALL,
    selected_group_keys: Optional[set[str]] = None,
) -> list[Event]:
    """
    Restrict events to a filter scope.

    Personal events are the ones without a group key. In GROUPS_ONLY scope a
    non-empty selection further limits the result to the selected groups.
    """
    if scope == FilterScope.ALL:
        return list(events)
    if scope == FilterScope.PERSONAL_ONLY:
        return [event for event in events if event.get("group_key") is None]

    grouped = [event for event in events if event.get("group_key") is not None]
    if selected_group_keys:
        grouped = [
            event for event in grouped if event.get("group_key") in selected_group_keys
        ]
    return grouped

# SPDX-License-Identifier: MIT

import pendulum

from calgrid.layout.calendar_math import CalendarSystem
from calgrid.model.view_mode import FilterScope
from calgrid.service.event import (
    events_by_day,
    events_in_month,
    events_on_day,
    filter_events,
)
from conftest import make_event


def test_events_on_day_are_sorted(utc_calendar: CalendarSystem) -> None:
    events = [
        make_event("late", "15:00", "16:00"),
        make_event("other-day", "09:00", "10:00", day="2024-03-05"),
        make_event("early", "08:00", "09:00"),
    ]

    result = events_on_day(events, pendulum.date(2024, 3, 4), utc_calendar)

    assert [event["id"] for event in result] == ["early", "late"]


def test_events_by_day_has_entry_for_every_day(utc_calendar: CalendarSystem) -> None:
    days = [pendulum.date(2024, 3, 4), pendulum.date(2024, 3, 5), pendulum.date(2024, 3, 6)]
    events = [
        make_event("b", "12:00", "13:00", day="2024-03-05"),
        make_event("a", "09:00", "10:00", day="2024-03-05"),
        make_event("outside", "09:00", "10:00", day="2024-03-09"),
    ]

    by_day = events_by_day(events, days, utc_calendar)

    assert list(by_day) == ["2024-03-04", "2024-03-05", "2024-03-06"]
    assert by_day["2024-03-04"] == []
    assert [event["id"] for event in by_day["2024-03-05"]] == ["a", "b"]
    assert by_day["2024-03-06"] == []


def test_events_by_day_uses_calendar_timezone() -> None:
    calendar = CalendarSystem(timezone="Asia/Tokyo")
    event = make_event("a", "20:00", "21:00", day="2024-03-04")

    by_day = events_by_day([event], [pendulum.date(2024, 3, 4), pendulum.date(2024, 3, 5)], calendar)

    assert by_day["2024-03-04"] == []
    assert by_day["2024-03-05"] == [event]


def test_events_in_month(utc_calendar: CalendarSystem) -> None:
    events = [
        make_event("a", "09:00", "10:00", day="2024-03-01"),
        make_event("b", "09:00", "10:00", day="2024-03-31"),
        make_event("c", "09:00", "10:00", day="2024-04-01"),
        make_event("d", "09:00", "10:00", day="2023-03-15"),
    ]

    assert events_in_month(events, pendulum.date(2024, 3, 15), utc_calendar) == 2
    assert events_in_month(events, pendulum.date(2024, 4, 1), utc_calendar) == 1
    assert events_in_month(events, pendulum.date(2024, 5, 1), utc_calendar) == 0


EVENTS = [
    make_event("personal", "09:00", "10:00"),
    make_event("team", "10:00", "11:00", group_key="team"),
    make_event("family", "11:00", "12:00", group_key="family"),
]


def test_filter_all_returns_copy() -> None:
    result = filter_events(EVENTS)
    assert result == EVENTS
    assert result is not EVENTS


def test_filter_personal_only() -> None:
    result = filter_events(EVENTS, FilterScope.PERSONAL_ONLY, {"team"})
    assert [event["id"] for event in result] == ["personal"]


def test_filter_groups_only() -> None:
    result = filter_events(EVENTS, FilterScope.GROUPS_ONLY)
    assert [event["id"] for event in result] == ["team", "family"]


def test_filter_groups_only_with_selection() -> None:
    result = filter_events(EVENTS, FilterScope.GROUPS_ONLY, {"family", "unknown"})
    assert [event["id"] for event in result] == ["family"]

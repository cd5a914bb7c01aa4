# SPDX-License-Identifier: MIT

import logging
from typing import Optional

import pendulum

from calgrid.layout.calendar_math import (
    MINUTES_PER_DAY,
    CalendarSystem,
    DateLike,
    is_same_day,
    start_of_day,
    start_of_next_day,
)
from calgrid.layout.cluster import cluster_events
from calgrid.layout.column import assign_columns
from calgrid.model.event import Event
from calgrid.model.layout import PixelLayout

logger = logging.getLogger(__name__)

MINIMUM_DURATION_MINUTES = 1.0

# Offsets stay inside [0, 1440) even on 25 hour days
LATEST_OFFSET_MINUTES = MINUTES_PER_DAY - MINIMUM_DURATION_MINUTES


def _minutes_between(start: pendulum.DateTime, end: pendulum.DateTime) -> float:
    return (end.timestamp() - start.timestamp()) / 60


def events_starting_on(
    events: list[Event], day: DateLike, calendar: CalendarSystem
) -> list[Event]:
    """Events whose start falls on the given calendar day.

    Multi-day events belong to their start day only.
    """
    day_start = start_of_day(day, calendar)
    day_end = start_of_next_day(day, calendar)
    return [event for event in events if day_start <= event["start"] < day_end]


def layout(
    events: list[Event],
    day: DateLike,
    calendar: CalendarSystem,
    hour_height: float,
) -> list[PixelLayout]:
    """
    Compute the schedule layout of a single day.

    Args:
        events: Events to consider, not necessarily restricted to the day
        day: The day to lay out
        calendar: Calendar providing the timezone
        hour_height: Height of one hour in pixels

    Returns:
        One entry per event starting on the day, grouped by overlap cluster in
        start order
    """
    day_start = start_of_day(day, calendar)
    day_events = events_starting_on(events, day, calendar)

    clusters = cluster_events(day_events)
    result: list[PixelLayout] = []

    for cluster in clusters:
        for event, placement in zip(cluster, assign_columns(cluster)):
            offset_minutes = _minutes_between(day_start, event["start"])
            offset_minutes = min(max(offset_minutes, 0.0), LATEST_OFFSET_MINUTES)
            duration_minutes = max(
                _minutes_between(event["start"], event["end"]),
                MINIMUM_DURATION_MINUTES,
            )
            result.append(
                {
                    "event_id": placement["event_id"],
                    "column": placement["column"],
                    "column_count": placement["column_count"],
                    "y_offset": offset_minutes / 60 * hour_height,
                    "height": duration_minutes / 60 * hour_height,
                }
            )

    logger.debug(
        "Laid out %d events in %d clusters for %s",
        len(result),
        len(clusters),
        day_start.to_date_string(),
    )
    return result


def now_indicator_offset(
    now: pendulum.DateTime,
    day: DateLike,
    calendar: CalendarSystem,
    hour_height: float,
) -> Optional[float]:
    """Vertical offset of the current-time line, or None when now is not on day."""
    if not is_same_day(now, day, calendar):
        return None
    day_start = start_of_day(day, calendar)
    offset_minutes = min(_minutes_between(day_start, now), LATEST_OFFSET_MINUTES)
    return offset_minutes / 60 * hour_height

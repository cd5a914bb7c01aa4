# SPDX-License-Identifier: MIT

import datetime
from contextlib import contextmanager
from typing import Iterator, Union

import pendulum

MINUTES_PER_DAY = 24 * 60
DAYS_PER_WEEK = 7

WEEKDAY_NAMES = {
    "monday": pendulum.MONDAY,
    "tuesday": pendulum.TUESDAY,
    "wednesday": pendulum.WEDNESDAY,
    "thursday": pendulum.THURSDAY,
    "friday": pendulum.FRIDAY,
    "saturday": pendulum.SATURDAY,
    "sunday": pendulum.SUNDAY,
}

DateLike = Union[pendulum.DateTime, pendulum.Date]


class InvalidDateError(ValueError):
    """Raised when a calendar cannot resolve a date arithmetic operation."""


@contextmanager
def resolving(operation: str) -> Iterator[None]:
    """Translate date arithmetic failures into InvalidDateError."""
    try:
        yield
    except InvalidDateError:
        raise
    except (ValueError, OverflowError, KeyError) as e:
        raise InvalidDateError(f"Unable to resolve {operation}: {e}") from e


class CalendarSystem:
    """
    Timezone and first-weekday convention used for all date arithmetic.

    Instances are immutable and hashable so callers can use them as part of a
    memoization key.

    Args:
        timezone: IANA timezone name, or "local"
        week_start: First day of the week, pendulum numbering (Monday = 0)
    """

    __slots__ = ("_timezone_name", "_timezone", "_week_start")

    def __init__(self, timezone: str = "UTC", week_start: int = pendulum.MONDAY):
        with resolving(f"week start {week_start!r}"):
            first_weekday = int(week_start)
        if not 0 <= first_weekday < DAYS_PER_WEEK:
            raise InvalidDateError(f"week_start must be within 0..6, got {week_start}")
        with resolving(f"timezone '{timezone}'"):
            tz = pendulum.local_timezone() if timezone == "local" else pendulum.timezone(timezone)
        self._timezone_name = timezone
        self._timezone = tz
        self._week_start = first_weekday

    @classmethod
    def from_names(cls, timezone: str, week_start: str) -> "CalendarSystem":
        key = week_start.strip().lower()
        if key not in WEEKDAY_NAMES:
            raise InvalidDateError(f"Unknown first weekday '{week_start}'")
        return cls(timezone=timezone, week_start=WEEKDAY_NAMES[key])

    @property
    def timezone(self) -> pendulum.Timezone | pendulum.FixedTimezone:
        return self._timezone

    @property
    def timezone_name(self) -> str:
        return self._timezone_name

    @property
    def week_start(self) -> int:
        return self._week_start

    def localize(self, value: DateLike) -> pendulum.DateTime:
        """Return value as a DateTime in this calendar's timezone.

        Calendar days are interpreted as local midnight.
        """
        with resolving("local time"):
            if isinstance(value, pendulum.DateTime):
                return value.in_tz(self._timezone)
            if isinstance(value, datetime.datetime):
                return pendulum.instance(value).in_tz(self._timezone)
            return pendulum.datetime(
                value.year, value.month, value.day, tz=self._timezone
            )

    def today(self, now: pendulum.DateTime | None = None) -> pendulum.Date:
        if now is None:
            now = pendulum.now(self._timezone)
        return self.localize(now).date()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CalendarSystem):
            return NotImplemented
        return (
            self._timezone_name == other._timezone_name
            and self._week_start == other._week_start
        )

    def __hash__(self) -> int:
        return hash((self._timezone_name, self._week_start))

    def __repr__(self) -> str:
        return (
            f"CalendarSystem(timezone={self._timezone_name!r}, "
            f"week_start={self._week_start})"
        )


def start_of_day(instant: DateLike, calendar: CalendarSystem) -> pendulum.DateTime:
    with resolving("start of day"):
        return calendar.localize(instant).start_of("day")


def start_of_next_day(instant: DateLike, calendar: CalendarSystem) -> pendulum.DateTime:
    with resolving("start of next day"):
        day = calendar.localize(instant).date().add(days=1)
        return calendar.localize(day)


def start_of_month(instant: DateLike, calendar: CalendarSystem) -> pendulum.DateTime:
    with resolving("start of month"):
        return calendar.localize(instant).start_of("month")


def days_in_month(instant: DateLike, calendar: CalendarSystem) -> int:
    return calendar.localize(instant).days_in_month


def first_weekday_offset(month_start: DateLike, calendar: CalendarSystem) -> int:
    """Number of leading cells before the 1st of the month in a grid row."""
    first = start_of_month(month_start, calendar)
    return (int(first.day_of_week) - calendar.week_start) % DAYS_PER_WEEK


def start_of_week(instant: DateLike, calendar: CalendarSystem) -> pendulum.Date:
    day = calendar.localize(instant).date()
    offset = (int(day.day_of_week) - calendar.week_start) % DAYS_PER_WEEK
    with resolving("start of week"):
        return day.subtract(days=offset)


def is_same_day(a: DateLike, b: DateLike, calendar: CalendarSystem) -> bool:
    return calendar.localize(a).date() == calendar.localize(b).date()


def is_same_month(a: DateLike, b: DateLike, calendar: CalendarSystem) -> bool:
    local_a = calendar.localize(a)
    local_b = calendar.localize(b)
    return (local_a.year, local_a.month) == (local_b.year, local_b.month)

# SPDX-License-Identifier: MIT

import datetime
from typing import Optional, cast

import pendulum


def now_in(timezone: str) -> pendulum.DateTime:
    if timezone == "local":
        return pendulum.now("local")
    return pendulum.now(timezone)


def python_to_pendulum(python_value: datetime.datetime) -> pendulum.DateTime:
    """Convert a datetime to pendulum, treating naive values as local time."""
    if python_value.tzinfo is None:
        return pendulum.instance(python_value, tz="local")
    return pendulum.instance(python_value)


def datetime_from_str(datetime: str) -> pendulum.DateTime:
    value = pendulum.parse(datetime, tz="local")
    if not isinstance(value, pendulum.DateTime):
        raise ValueError(f"'{datetime}' is not a date and time")
    return cast(pendulum.DateTime, value)


def datetime_from_value(value: object) -> pendulum.DateTime:
    """
    Read a datetime from a YAML scalar.

    PyYAML resolves unquoted ISO timestamps to datetime objects and plain
    dates to date objects, quoted ones stay strings.
    """
    if isinstance(value, datetime.datetime):
        return python_to_pendulum(value)
    if isinstance(value, datetime.date):
        return pendulum.datetime(value.year, value.month, value.day, tz="local")
    if isinstance(value, str):
        return datetime_from_str(value)
    raise ValueError(f"Unsupported datetime value: {value!r}")


def date_from_str(date_str: str) -> pendulum.Date:
    """Parse a 'YYYY-MM-DD' string."""
    value = pendulum.parse(date_str, exact=True)
    if isinstance(value, pendulum.DateTime):
        return value.date()
    if not isinstance(value, pendulum.Date):
        raise ValueError(f"'{date_str}' is not a date")
    return value


def datetime_to_display_time_str(
    datetime: pendulum.DateTime, timezone: str = "local"
) -> str:
    return datetime.in_tz(timezone).format("HH:mm")


def time_range_to_display_str(
    start: pendulum.DateTime, end: pendulum.DateTime, timezone: str = "local"
) -> str:
    return (
        f"{datetime_to_display_time_str(start, timezone)}"
        f"–{datetime_to_display_time_str(end, timezone)}"
    )


def date_to_display_str(date: pendulum.Date) -> str:
    return date.format("YYYY-MM-DD ddd")

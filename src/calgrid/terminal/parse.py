# SPDX-License-Identifier: MIT

import re
from typing import Optional

import pendulum
import typer

from calgrid.time import date_from_str


def parse_date(date_param: Optional[str | int]) -> Optional[pendulum.Date]:
    if date_param is None:
        return None

    date = str(date_param)

    # Match YYYY-MM-DD format
    if re.match(r"^\d{4}-\d{2}-\d{2}$", date):
        try:
            return date_from_str(date)
        except ValueError as e:
            raise typer.BadParameter(f"Invalid date: {e}")

    # Match numeric input for relative days (e.g., "1", "-1", "365")
    if re.match(r"^-?\d+$", date):
        return pendulum.today("local").date().add(days=int(date))

    if date == "today" or date == "t":
        return pendulum.today("local").date()
    if date == "yesterday" or date == "y":
        return pendulum.yesterday("local").date()
    if date == "tomorrow" or date == "o":
        return pendulum.tomorrow("local").date()
    raise typer.BadParameter("Incorrect date format")


def parse_granularity(granularity_param: str | int) -> int:
    try:
        granularity = int(granularity_param)
    except ValueError:
        raise typer.BadParameter(f"Invalid granularity: {granularity_param}")
    if granularity not in (15, 30, 60):
        raise typer.BadParameter("Granularity must be 15, 30 or 60 minutes")
    return granularity


def parse_hour(hour_param: str | int) -> int:
    try:
        hour = int(hour_param)
    except ValueError:
        raise typer.BadParameter(f"Invalid hour: {hour_param}")
    if not (0 <= hour <= 24):
        raise typer.BadParameter(f"Hour must be between 0 and 24, got {hour}")
    return hour

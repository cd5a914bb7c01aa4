# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum


class DayCell(TypedDict):
    date: pendulum.Date
    in_current_period: bool
    is_today: bool


class MonthCell(TypedDict):
    month: pendulum.Date
    event_count: int
    is_current_month: bool

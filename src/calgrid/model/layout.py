# SPDX-License-Identifier: MIT

from typing import TypedDict

from calgrid.model.day_cell import DayCell
from calgrid.model.event import EventId
from calgrid.model.view_mode import ViewMode


class ColumnPlacement(TypedDict):
    event_id: EventId
    column: int
    column_count: int


class PixelLayout(TypedDict):
    event_id: EventId
    column: int
    column_count: int
    y_offset: float
    height: float


class CalendarView(TypedDict):
    mode: ViewMode
    cells: list[DayCell]
    items: list[PixelLayout]

# SPDX-License-Identifier: MIT

from calgrid.layout.calendar_math import CalendarSystem, InvalidDateError
from calgrid.layout.facade import (
    day_layout,
    layout_for_mode,
    month_grid,
    shift_anchor,
    title_for_anchor,
    week_grid,
)
from calgrid.model.view_mode import FilterScope, ViewMode

__all__ = [
    "CalendarSystem",
    "FilterScope",
    "InvalidDateError",
    "ViewMode",
    "day_layout",
    "layout_for_mode",
    "month_grid",
    "shift_anchor",
    "title_for_anchor",
    "week_grid",
]

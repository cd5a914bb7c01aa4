# SPDX-License-Identifier: MIT

import math
from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from calgrid.color import color_for_event, compact_colors
from calgrid.layout.calendar_math import DAYS_PER_WEEK, CalendarSystem
from calgrid.layout.day import now_indicator_offset
from calgrid.model.day_cell import DayCell, MonthCell
from calgrid.model.event import Event
from calgrid.model.layout import PixelLayout
from calgrid.time import time_range_to_display_str
from calgrid.view.views.header import header

WEEKDAY_ABBREVIATIONS = ["Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun"]


def weekday_headers(calendar: CalendarSystem) -> list[str]:
    """Weekday column titles rotated so the calendar's first weekday comes first."""
    start = calendar.week_start
    return WEEKDAY_ABBREVIATIONS[start:] + WEEKDAY_ABBREVIATIONS[:start]


def calendar_month_view(
    title: str,
    cells: list[DayCell],
    events_by_day: dict[str, list[Event]],
    calendar: CalendarSystem,
    palette: list[str],
    default_color: str,
    cell_width: int = 16,
    sub_header: Optional[str] = None,
) -> None:
    """
    Display a month grid with up to three events per day.

    Args:
        title: Month title, e.g. "March 2024"
        cells: The 42 cells of the month grid
        events_by_day: Events keyed by YYYY-MM-DD start day
        calendar: Calendar used to build the grid
        palette: Group color palette
        default_color: Color of personal events
        cell_width: Width of each day cell in characters
        sub_header: Optional sub-header text
    """
    console = Console()
    header(console, title, sub_header)

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name in weekday_headers(calendar):
        table.add_column(day_name, style="bold", width=cell_width)

    row: list[Text] = []
    for cell in cells:
        day_events = events_by_day.get(cell["date"].to_date_string(), [])
        row.append(
            _render_day_cell(cell, day_events, calendar, palette, default_color, cell_width)
        )
        if len(row) == DAYS_PER_WEEK:
            table.add_row(*row)
            row = []

    console.print(table)


def calendar_week_view(
    title: str,
    cells: list[DayCell],
    events_by_day: dict[str, list[Event]],
    calendar: CalendarSystem,
    palette: list[str],
    default_color: str,
    cell_width: int = 16,
    sub_header: Optional[str] = None,
) -> None:
    """Display the seven days of a week side by side with all their events."""
    console = Console()
    header(console, title, sub_header)

    table = Table(box=box.SIMPLE, show_header=True, padding=(0, 1))
    for day_name, cell in zip(weekday_headers(calendar), cells):
        style = "bold black on bright_cyan" if cell["is_today"] else "bold"
        table.add_column(
            f"{day_name} {cell['date'].day:2d}", header_style=style, width=cell_width
        )

    columns: list[Text] = []
    for cell in cells:
        content = Text()
        for event in events_by_day.get(cell["date"].to_date_string(), []):
            color = color_for_event(event, palette, default_color)
            time_str = calendar.localize(event["start"]).format("HH:mm")
            event_title = _truncate(event.get("title") or "[no title]", cell_width - 8)
            content.append("● ", style=color)
            content.append(f"{time_str} ", style="dim")
            content.append(f"{event_title}\n", style=color)
        columns.append(content)
    table.add_row(*columns)

    console.print(table)


def calendar_day_view(
    title: str,
    day: pendulum.Date,
    events: list[Event],
    items: list[PixelLayout],
    calendar: CalendarSystem,
    palette: list[str],
    default_color: str,
    granularity: int = 30,
    width: int = 60,
    start_hour: int = 0,
    end_hour: int = 24,
    now: Optional[pendulum.DateTime] = None,
    sub_header: Optional[str] = None,
) -> None:
    """
    Display a vertical timeline of a day with overlapping events side by side.

    The layout items must have been computed with an hour height of
    60 / granularity, so that offsets and heights are measured in rows.

    Args:
        title: Day title
        day: The day shown
        events: The events referenced by items
        items: Day layout measured in rows
        calendar: Calendar providing the timezone
        palette: Group color palette
        default_color: Color of personal events
        granularity: Minutes per row (15, 30 or 60)
        width: Width of the event area in characters
        start_hour: First hour shown
        end_hour: Hour at which the timeline stops
        now: Current instant, marked on the timeline when it falls on day
        sub_header: Optional sub-header text
    """
    console = Console()
    header(console, title, sub_header)

    rows_per_hour = 60 // granularity
    total_rows = 24 * rows_per_hour
    canvas: list[list[tuple[str, str]]] = [
        [(" ", "") for _ in range(width)] for _ in range(total_rows)
    ]

    events_by_id = {event["id"]: event for event in events}
    for item in items:
        event = events_by_id[item["event_id"]]
        _paint_event(
            canvas,
            event,
            item,
            color_for_event(event, palette, default_color),
            calendar.timezone_name,
            width,
        )

    now_row: Optional[int] = None
    if now is not None:
        offset = now_indicator_offset(now, day, calendar, rows_per_hour)
        if offset is not None:
            now_row = int(offset)

    for row_index in range(start_hour * rows_per_hour, end_hour * rows_per_hour):
        line = Text()
        if row_index == now_row:
            line.append(" now  ", style="bold red")
        elif row_index % rows_per_hour == 0:
            line.append(f"{row_index // rows_per_hour:02d}:00 ", style="dim")
        else:
            line.append("      ")
        line.append("│", style="dim")
        for char, style in canvas[row_index]:
            line.append(char, style=style)
        console.print(line, no_wrap=True, overflow="crop")


def day_layout_table(
    events: list[Event],
    items: list[PixelLayout],
    calendar: CalendarSystem,
    min_block_height: float,
) -> None:
    """Print the computed geometry of every event of a day."""
    console = Console()
    events_by_id = {event["id"]: event for event in events}

    table = Table(box=box.SIMPLE)
    table.add_column("ID", style="cyan")
    table.add_column("Title")
    table.add_column("Time")
    table.add_column("Column", justify="right")
    table.add_column("Y", justify="right")
    table.add_column("Height", justify="right")

    for item in items:
        event = events_by_id[item["event_id"]]
        table.add_row(
            str(item["event_id"]),
            event.get("title") or "",
            time_range_to_display_str(
                event["start"], event["end"], calendar.timezone_name
            ),
            f"{item['column'] + 1}/{item['column_count']}",
            f"{item['y_offset']:.1f}",
            f"{max(item['height'], min_block_height):.1f}",
        )

    console.print(table)


def calendar_year_view(
    title: str, month_cells: list[MonthCell], sub_header: Optional[str] = None
) -> None:
    """Display the twelve months of a year with their event counts."""
    console = Console()
    header(console, title, sub_header)

    table = Table(box=box.SIMPLE, show_header=False, padding=(0, 2))
    for _ in range(3):
        table.add_column(width=16)

    row: list[Text] = []
    for month_cell in month_cells:
        style = "bold black on bright_cyan" if month_cell["is_current_month"] else "bold"
        content = Text()
        content.append(month_cell["month"].format("MMMM"), style=style)
        content.append("\n")
        count = month_cell["event_count"]
        content.append(
            f"{count} event{'s' if count != 1 else ''}",
            style="dim" if count == 0 else "green",
        )
        row.append(content)
        if len(row) == 3:
            table.add_row(*row)
            row = []

    console.print(table)


def _render_day_cell(
    cell: DayCell,
    events: list[Event],
    calendar: CalendarSystem,
    palette: list[str],
    default_color: str,
    cell_width: int,
) -> Text:
    content = Text()
    day_num = cell["date"].day

    if not cell["in_current_period"]:
        content.append(f"{day_num:2d}\n", style="dim")
        return content

    if cell["is_today"]:
        content.append(f"{day_num:2d}", style="bold black on bright_cyan")
    else:
        content.append(f"{day_num:2d}", style="bold")

    # Color dots of the first distinct groups, like the compact mobile cell
    for color in compact_colors(events, palette, default_color):
        content.append(" •", style=color)
    content.append("\n")

    for event in events[:3]:
        color = color_for_event(event, palette, default_color)
        time_str = calendar.localize(event["start"]).format("HH:mm")
        event_title = _truncate(event.get("title") or "[no title]", cell_width - 6)
        content.append(f"{time_str} ", style="dim")
        content.append(f"{event_title}\n", style=color)

    if len(events) > 3:
        content.append(f"  +{len(events) - 3} more\n", style="dim")

    return content


def _paint_event(
    canvas: list[list[tuple[str, str]]],
    event: Event,
    item: PixelLayout,
    color: str,
    timezone: str,
    width: int,
) -> None:
    total_rows = len(canvas)
    top = min(int(item["y_offset"]), total_rows - 1)
    bottom = min(max(top + 1, math.ceil(item["y_offset"] + item["height"])), total_rows)
    left = item["column"] * width // item["column_count"]
    right = (item["column"] + 1) * width // item["column_count"]
    lane_width = right - left
    if lane_width <= 0:
        return

    style = f"black on {color}"
    labels = [
        event.get("title") or "[no title]",
        time_range_to_display_str(event["start"], event["end"], timezone),
    ]
    for offset, row_index in enumerate(range(top, bottom)):
        label = labels[offset] if offset < len(labels) else ""
        # Keep one blank character as a separator between lanes
        text = _truncate(label, lane_width - 1).ljust(lane_width - 1) + " "
        for x, char in enumerate(text[:lane_width]):
            canvas[row_index][left + x] = (char, style if x < lane_width - 1 else "")


def _truncate(value: str, max_length: int) -> str:
    if max_length <= 0:
        return ""
    if len(value) <= max_length:
        return value
    if max_length <= 3:
        return value[:max_length]
    return value[: max_length - 3] + "..."

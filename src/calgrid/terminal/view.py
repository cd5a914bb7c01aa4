# SPDX-License-Identifier: MIT

import logging
from typing import Annotated, NoReturn, Optional

import pendulum
import typer
from rich.console import Console

from calgrid import configuration
from calgrid.layout import facade
from calgrid.layout.calendar_math import CalendarSystem, InvalidDateError
from calgrid.layout.grid import year_grid
from calgrid.model.event import Event
from calgrid.model.view_mode import FilterScope, ViewMode
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.repository.event import EVENT_REPO
from calgrid.service.event import events_by_day, events_on_day, filter_events
from calgrid.terminal.completion import complete_group_key
from calgrid.terminal.custom_typer import AliasedTyperGroup
from calgrid.terminal.parse import parse_date, parse_granularity, parse_hour
from calgrid.time import date_to_display_str, now_in
from calgrid.view.views.calendar import (
    calendar_day_view,
    calendar_month_view,
    calendar_week_view,
    calendar_year_view,
    day_layout_table,
)

logger = logging.getLogger(__name__)

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)

DateOption = Annotated[
    Optional[pendulum.Date],
    typer.Option(
        "--date",
        "-d",
        parser=parse_date,
        help="valid inputs: YYYY-MM-DD, today, yesterday, tomorrow, or day offset like 1, -1",
    ),
]
ShiftOption = Annotated[
    int,
    typer.Option(
        "--shift",
        "-s",
        help="Move the anchor by this many periods (months, weeks or days)",
    ),
]
ScopeOption = Annotated[
    FilterScope,
    typer.Option("--scope", help="Show all, only personal, or only group events"),
]
GroupOption = Annotated[
    Optional[list[str]],
    typer.Option(
        "--group",
        "-g",
        help="With --scope groups_only, restrict to these group keys",
        autocompletion=complete_group_key,
    ),
]


def _calendar() -> CalendarSystem:
    config = CONFIGURATION_REPO.get_config()
    try:
        return CalendarSystem.from_names(config["timezone"], config["week_start"])
    except InvalidDateError as e:
        raise typer.BadParameter(
            f"Invalid calendar configuration in {configuration.APP_CONFIG_PATH}: {e}"
        )


def _anchor(
    mode: ViewMode, date: Optional[pendulum.Date], shift: int, calendar: CalendarSystem
) -> pendulum.Date:
    anchor = date if date is not None else calendar.today()
    if shift:
        anchor = facade.shift_anchor(mode, anchor, shift)
    return anchor


def _events(scope: FilterScope, group: Optional[list[str]]) -> list[Event]:
    events = filter_events(EVENT_REPO.get_all_events(), scope, set(group or []))
    logger.debug("Loaded %d events for scope %s", len(events), scope.value)
    return events


def _scope_sub_header(scope: FilterScope, group: Optional[list[str]]) -> Optional[str]:
    if scope == FilterScope.ALL:
        return None
    if scope == FilterScope.GROUPS_ONLY and group:
        return f"{scope.value}: {', '.join(group)}"
    return scope.value


def _fail(error: InvalidDateError) -> NoReturn:
    Console(stderr=True).print(f"[red]{error}[/red]")
    raise typer.Exit(code=1)


@app.command("month, m")
def month(
    date: DateOption = None,
    shift: ShiftOption = 0,
    scope: ScopeOption = FilterScope.ALL,
    group: GroupOption = None,
    cell_width: Annotated[
        int, typer.Option("--cell-width", "-w", help="Width of each day cell")
    ] = 16,
) -> None:
    """Display the month grid containing the date."""
    config = CONFIGURATION_REPO.get_config()
    calendar = _calendar()
    events = _events(scope, group)

    try:
        anchor = _anchor(ViewMode.MONTH, date, shift, calendar)
        cells = facade.month_grid(anchor, calendar)
    except InvalidDateError as e:
        _fail(e)

    calendar_month_view(
        facade.title_for_anchor(ViewMode.MONTH, anchor, calendar),
        cells,
        events_by_day(events, [cell["date"] for cell in cells], calendar),
        calendar,
        config["palette"],
        config["default_color"],
        cell_width,
        _scope_sub_header(scope, group),
    )


@app.command("week, w")
def week(
    date: DateOption = None,
    shift: ShiftOption = 0,
    scope: ScopeOption = FilterScope.ALL,
    group: GroupOption = None,
    cell_width: Annotated[
        int, typer.Option("--cell-width", "-w", help="Width of each day column")
    ] = 16,
) -> None:
    """Display the week containing the date."""
    config = CONFIGURATION_REPO.get_config()
    calendar = _calendar()
    events = _events(scope, group)

    try:
        anchor = _anchor(ViewMode.WEEK, date, shift, calendar)
        cells = facade.week_grid(anchor, calendar)
    except InvalidDateError as e:
        _fail(e)

    calendar_week_view(
        facade.title_for_anchor(ViewMode.WEEK, anchor, calendar),
        cells,
        events_by_day(events, [cell["date"] for cell in cells], calendar),
        calendar,
        config["palette"],
        config["default_color"],
        cell_width,
        _scope_sub_header(scope, group),
    )


@app.command("day, d")
def day(
    date: DateOption = None,
    shift: ShiftOption = 0,
    scope: ScopeOption = FilterScope.ALL,
    group: GroupOption = None,
    granularity: Annotated[
        int,
        typer.Option(
            "--granularity",
            "-r",
            parser=parse_granularity,
            help="Time interval in minutes (15, 30, or 60)",
        ),
    ] = 30,
    start_hour: Annotated[
        int,
        typer.Option("--start-hour", "-sh", parser=parse_hour, help="First hour shown"),
    ] = 0,
    end_hour: Annotated[
        int,
        typer.Option("--end-hour", "-eh", parser=parse_hour, help="Last hour shown"),
    ] = 24,
    details: Annotated[
        bool,
        typer.Option(
            "--details/--no-details",
            help="Also list each event's column and geometry",
        ),
    ] = False,
) -> None:
    """Display the schedule of a day with overlapping events side by side."""
    if end_hour <= start_hour:
        raise typer.BadParameter("--end-hour must be after --start-hour")

    config = CONFIGURATION_REPO.get_config()
    calendar = _calendar()
    events = _events(scope, group)

    try:
        anchor = _anchor(ViewMode.DAY, date, shift, calendar)
        rows_per_hour = 60 // granularity
        view = facade.layout_for_mode(
            ViewMode.DAY, anchor, calendar, events, hour_height=rows_per_hour
        )
        day_events = events_on_day(events, anchor, calendar)
    except InvalidDateError as e:
        _fail(e)

    calendar_day_view(
        facade.title_for_anchor(ViewMode.DAY, anchor, calendar),
        anchor,
        day_events,
        view["items"],
        calendar,
        config["palette"],
        config["default_color"],
        granularity=granularity,
        start_hour=start_hour,
        end_hour=end_hour,
        now=now_in(calendar.timezone_name),
        sub_header=_scope_sub_header(scope, group),
    )

    if details:
        day_layout_table(
            day_events,
            facade.day_layout(day_events, anchor, calendar, config["hour_height"]),
            calendar,
            config["min_block_height"],
        )


@app.command("year, y")
def year(
    date: DateOption = None,
    scope: ScopeOption = FilterScope.ALL,
    group: GroupOption = None,
) -> None:
    """Display the months of a year with their event counts."""
    calendar = _calendar()
    events = _events(scope, group)
    anchor = date if date is not None else calendar.today()

    try:
        month_cells = year_grid(anchor, calendar, events)
    except InvalidDateError as e:
        _fail(e)

    calendar_year_view(
        f"{anchor.year} ({date_to_display_str(anchor)})",
        month_cells,
        _scope_sub_header(scope, group),
    )

# SPDX-License-Identifier: MIT

from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.table import Table

from calgrid import configuration
from calgrid.layout.calendar_math import WEEKDAY_NAMES, CalendarSystem, InvalidDateError
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.terminal.custom_typer import AliasedTyperGroup

app = typer.Typer(cls=AliasedTyperGroup, no_args_is_help=True)


def validate_week_start(week_start: Optional[str]) -> Optional[str]:
    if week_start is None:
        return None
    if week_start.strip().lower() not in WEEKDAY_NAMES:
        raise typer.BadParameter(
            f"Week start must be one of: {', '.join(WEEKDAY_NAMES)}"
        )
    return week_start.strip().lower()


def validate_timezone(timezone: Optional[str]) -> Optional[str]:
    if timezone is None:
        return None
    try:
        CalendarSystem(timezone=timezone)
    except InvalidDateError as e:
        raise typer.BadParameter(str(e))
    return timezone


def validate_positive(value: Optional[float]) -> Optional[float]:
    if value is None:
        return None
    if value <= 0:
        raise typer.BadParameter("Value must be greater than 0")
    return value


@app.command("view, v")
def view() -> None:
    """Display current configuration settings."""
    config = CONFIGURATION_REPO.get_config()

    console = Console()
    table = Table()
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="magenta")

    table.add_row("timezone", config["timezone"])
    table.add_row("week_start", config["week_start"])
    table.add_row("hour_height", str(config["hour_height"]))
    table.add_row("min_block_height", str(config["min_block_height"]))
    table.add_row("palette", ", ".join(config["palette"]))
    table.add_row("default_color", config["default_color"])
    table.add_row(
        "show_header",
        "✓ Enabled" if config["show_header"] else "✗ Disabled",
    )
    table.add_row("events_path", str(configuration.DATA_EVENTS_PATH))
    table.add_row("log_file", config.get("log_file") or "None")

    console.print(table)


@app.command("set, s")
def set_config(
    timezone: Annotated[
        Optional[str],
        typer.Option(
            "--timezone", "-tz", callback=validate_timezone, help="IANA timezone or 'local'"
        ),
    ] = None,
    week_start: Annotated[
        Optional[str],
        typer.Option(
            "--week-start",
            "-ws",
            callback=validate_week_start,
            help="First day of the week, e.g. monday or sunday",
        ),
    ] = None,
    hour_height: Annotated[
        Optional[float],
        typer.Option(
            "--hour-height", callback=validate_positive, help="Pixels per hour"
        ),
    ] = None,
    min_block_height: Annotated[
        Optional[float],
        typer.Option(
            "--min-block-height",
            callback=validate_positive,
            help="Smallest height an event block is drawn with",
        ),
    ] = None,
    palette: Annotated[
        Optional[list[str]],
        typer.Option("--palette", "-p", help="Group colors (Rich color names)"),
    ] = None,
    default_color: Annotated[
        Optional[str],
        typer.Option("--default-color", help="Color of personal events"),
    ] = None,
    show_header: Annotated[
        Optional[bool],
        typer.Option("--show-header/--no-show-header", help="Show view headers"),
    ] = None,
    events_path: Annotated[
        Optional[str],
        typer.Option("--events-path", help="YAML file to read events from"),
    ] = None,
    remove_events_path: Annotated[
        bool,
        typer.Option("--remove-events-path", help="Use the default events file"),
    ] = False,
    log_file: Annotated[
        Optional[str],
        typer.Option("--log-file", help="Also write logs to this file"),
    ] = None,
    remove_log_file: Annotated[
        bool,
        typer.Option("--remove-log-file", help="Stop writing logs to a file"),
    ] = False,
) -> None:
    """Update configuration settings."""
    CONFIGURATION_REPO.update_config(
        timezone=timezone,
        week_start=week_start,
        hour_height=hour_height,
        min_block_height=min_block_height,
        palette=palette or None,
        default_color=default_color,
        show_header=show_header,
        events_path=events_path,
        remove_events_path=remove_events_path,
        log_file=log_file,
        remove_log_file=remove_log_file,
    )
    CONFIGURATION_REPO.flush()

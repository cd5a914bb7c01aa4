# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from calgrid.view.state import get_show_header


def header(console: Console, title: str, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: Console to print to
        title: Title of the current view, e.g. the month name
        sub_header: Optional sub-header text, e.g. the active filter
    """
    if not get_show_header():
        return

    console.print(Padding("[dark_orange]calgrid[/dark_orange]", (1, 0, 0, 1)))
    console.print(Padding(f"[plum1]{title}[/plum1]", (0, 1)))
    if sub_header is not None:
        console.print(Padding(f"[sandy_brown]{sub_header}[/sandy_brown]", (0, 1)))

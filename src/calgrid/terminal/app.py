# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer

from calgrid.logging_config import setup_logging
from calgrid.repository.configuration import CONFIGURATION_REPO
from calgrid.terminal import configuration, view
from calgrid.terminal.custom_typer import OrderedAliasedTyperGroup
from calgrid.view import state as view_state

app = typer.Typer(
    cls=OrderedAliasedTyperGroup,
    help="calgrid - Month, week and day calendar layouts in the terminal",
    no_args_is_help=True,
)
app.add_typer(view.app, name="view, v")
app.add_typer(configuration.app, name="config, c")


@app.callback()
def main_callback(
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in views",
        ),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Log debug output"),
    ] = False,
) -> None:
    """
    calgrid - Month, week and day calendar layouts in the terminal

    Global options that apply to all commands.
    """
    config = CONFIGURATION_REPO.get_config()
    setup_logging(
        logging.DEBUG if verbose else logging.WARNING, config.get("log_file")
    )
    if no_header:
        view_state.set_show_header(False)


def run() -> None:
    app()

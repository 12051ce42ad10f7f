# SPDX-License-Identifier: MIT

import logging
from typing import Annotated

import typer
from rich.console import Console

from taskmenu.configuration import get_default_configuration
from taskmenu.logging_setup import setup_logging
from taskmenu.state import AppState
from taskmenu.terminal.menu import run_menu
from taskmenu.terminal.prompt import Prompter
from taskmenu.view import state as view_state

logger = logging.getLogger(__name__)

app = typer.Typer(
    help="taskmenu - In-memory task manager for the terminal",
    add_completion=False,
)


@app.command()
def main(
    no_color: Annotated[
        bool,
        typer.Option("--no-color", help="Render without color markup"),
    ] = False,
    no_header: Annotated[
        bool,
        typer.Option(
            "--no-header",
            "-nh",
            help="Suppress header output in reports",
        ),
    ] = False,
    no_pause: Annotated[
        bool,
        typer.Option("--no-pause", help="Do not wait for Enter after each action"),
    ] = False,
    verbose: Annotated[
        bool,
        typer.Option("--verbose", "-v", help="Write debug logs to stderr"),
    ] = False,
) -> None:
    """
    Start the interactive task menu.

    Tasks live in memory only and are gone when the program exits.
    """
    config = get_default_configuration()
    config["use_color"] = not no_color
    config["show_header"] = not no_header
    config["pause_after_action"] = not no_pause
    config["verbose"] = verbose

    setup_logging(logging.DEBUG if config["verbose"] else logging.WARNING)

    view_state.set_use_color(config["use_color"])
    view_state.set_show_header(config["show_header"])

    state = AppState(config=config)
    console = Console(no_color=no_color)
    try:
        run_menu(state, Prompter(console))
    except KeyboardInterrupt:
        logger.info("Interrupted, exiting")
        console.print()


def run() -> None:
    app()

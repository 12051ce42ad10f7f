# SPDX-License-Identifier: MIT

from typing import Optional

from rich.console import Console
from rich.padding import Padding

from taskmenu.configuration import APP_NAME
from taskmenu.view.state import get_show_header
from taskmenu.view.util import colorize


def header(console: Console, sub_header: Optional[str] = None) -> None:
    """Print the application header.

    Args:
        console: The console to print to
        sub_header: Optional sub-header text to display
    """
    # Check if headers should be shown
    if not get_show_header():
        return

    console.print(Padding(colorize(APP_NAME, "dark_orange"), (1, 0, 0, 1)))
    if sub_header is not None:
        console.print(Padding(colorize(sub_header, "sandy_brown"), (0, 1)))

# SPDX-License-Identifier: MIT

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskmenu.view.views.header import header

MENU_ITEMS: list[tuple[str, str]] = [
    ("1", "Show tasks"),
    ("2", "Add task"),
    ("3", "Mark task completed"),
    ("4", "Edit task"),
    ("5", "Delete task"),
    ("6", "Search tasks"),
    ("7", "Statistics"),
    ("0", "Exit"),
]


def menu_view(console: Console) -> None:
    header(console, "task manager")

    menu_table = Table(box=box.SIMPLE, show_header=False)
    menu_table.add_column("key", justify="right")
    menu_table.add_column("action")
    for key, action in MENU_ITEMS:
        menu_table.add_row(key, action)
    console.print(menu_table)


def options_view(console: Console, title: str, options: list[str]) -> None:
    """Print a numbered option list, starting at 1."""
    console.print(escape(title))
    for number, option in enumerate(options, start=1):
        console.print(f"{number}. {escape(option)}")

# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from taskmenu.color import TITLE_COLOR
from taskmenu.model.task import Task
from taskmenu.time import date_to_str
from taskmenu.view.state import get_use_color
from taskmenu.view.util import (
    colorize,
    format_priority,
    format_title,
    overdue_marker,
    task_state,
)
from taskmenu.view.views.header import header


def single_task_view(
    console: Console,
    task: Task,
    index: Optional[int] = None,
    now: Optional[pendulum.Date] = None,
) -> None:
    prefix = f"{index}. " if index is not None else ""
    id_label = escape(f"[{task['id']}]")
    console.print(f"{prefix}{task_state(task)} {id_label} {format_title(task)}")

    task_table = Table(box=box.SIMPLE, show_header=False)
    task_table.add_column("property", style=TITLE_COLOR if get_use_color() else "")
    task_table.add_column("value")

    if task["description"].strip() != "":
        task_table.add_row("description", escape(task["description"]))
    task_table.add_row("category", escape(task["category"]))
    task_table.add_row("created", date_to_str(task["created"]))
    due = date_to_str(task["due"])
    marker = overdue_marker(task, now)
    task_table.add_row("due", f"{due} {marker}" if marker else due)
    task_table.add_row("priority", format_priority(task))

    console.print(task_table)


def tasks_by_category_view(
    console: Console,
    report_name: str,
    groups: dict[str, list[Task]],
    now: Optional[pendulum.Date] = None,
) -> None:
    """
    Render grouped tasks.

    The display index runs across the whole view, not per group.
    """
    header(console, report_name)

    index = 1
    for category, tasks in groups.items():
        console.print()
        console.print(colorize(f"{escape(category)} ({len(tasks)})", "bold"))
        for task in tasks:
            single_task_view(console, task, index, now)
            index += 1


def tasks_view(
    console: Console,
    report_name: str,
    tasks: list[Task],
    now: Optional[pendulum.Date] = None,
) -> None:
    header(console, report_name)

    for index, task in enumerate(tasks, start=1):
        single_task_view(console, task, index, now)

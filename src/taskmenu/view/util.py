# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum
from rich.markup import escape

from taskmenu.color import COMPLETED_TASK_COLOR, OVERDUE_COLOR, get_priority_color
from taskmenu.model.task import Task
from taskmenu.time import is_overdue
from taskmenu.view.state import get_use_color


def colorize(text: str, color: str) -> str:
    if not get_use_color():
        return text
    return f"[{color}]{text}[/{color}]"


def task_state(task: Task) -> str:
    """
    Get the status glyph for a task.

    Returns:
        "✅" if completed, "⏳" if still open
    """
    if task["completed"]:
        return "✅"
    return "⏳"


def overdue_marker(task: Task, now: Optional[pendulum.Date] = None) -> str:
    if is_overdue(task, now):
        return colorize("Overdue", OVERDUE_COLOR)
    return ""


def format_priority(task: Task) -> str:
    priority = escape(task["priority"])
    if task["completed"]:
        return colorize(priority, COMPLETED_TASK_COLOR)
    return colorize(priority, get_priority_color(task["priority"]))


def format_title(task: Task) -> str:
    title = escape(task["title"])
    if task["completed"]:
        return colorize(title, COMPLETED_TASK_COLOR)
    return title

# SPDX-License-Identifier: MIT

from taskmenu.model.priority import Priority

# Color constant for completed tasks
COMPLETED_TASK_COLOR = "bright_black"

OVERDUE_COLOR = "red"
SUCCESS_COLOR = "green"
WARNING_COLOR = "yellow"
ERROR_COLOR = "red"
TITLE_COLOR = "cyan"

PRIORITY_COLORS: dict[str, str] = {
    Priority.LOW: "blue",
    Priority.MEDIUM: "yellow",
    Priority.HIGH: "dark_orange",
    Priority.URGENT: "red",
}


def get_priority_color(priority: str) -> str:
    return PRIORITY_COLORS.get(priority, "default")

# SPDX-License-Identifier: MIT

from taskmenu.model.status_filter import StatusFilter
from taskmenu.model.task import Task


def filter_by_status(tasks: list[Task], status: StatusFilter) -> list[Task]:
    match status:
        case StatusFilter.ACTIVE:
            return [task for task in tasks if not task["completed"]]
        case StatusFilter.COMPLETED:
            return [task for task in tasks if task["completed"]]
    return list(tasks)


def filter_by_category(tasks: list[Task], category: str) -> list[Task]:
    return [task for task in tasks if task["category"] == category]


def filter_by_priority(tasks: list[Task], priority: str) -> list[Task]:
    return [task for task in tasks if task["priority"] == priority]


def filter_by_text(tasks: list[Task], property: str, query: str) -> list[Task]:
    """Case-insensitive substring match on a text property."""
    query_lower = query.lower()
    return [task for task in tasks if query_lower in str(task[property]).lower()]  # type: ignore[literal-required]

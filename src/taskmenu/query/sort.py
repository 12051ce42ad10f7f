# SPDX-License-Identifier: MIT

from taskmenu.model.task import Task


def sort_within_group(tasks: list[Task]) -> list[Task]:
    """Open tasks first, then by title ignoring case."""
    return sorted(tasks, key=lambda task: (task["completed"], task["title"].lower()))


def group_by_category(tasks: list[Task]) -> dict[str, list[Task]]:
    """
    Partition tasks by exact category value.

    The returned mapping iterates over categories in case-insensitive order;
    each group keeps the input order of its tasks.
    """
    groups: dict[str, list[Task]] = {}
    for task in tasks:
        groups.setdefault(task["category"], []).append(task)
    return {
        category: groups[category]
        for category in sorted(groups, key=lambda category: category.lower())
    }

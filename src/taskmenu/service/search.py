# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskmenu.model.search_field import SearchField
from taskmenu.model.task import Task
from taskmenu.query.filter import filter_by_category, filter_by_priority, filter_by_text
from taskmenu.time import is_overdue, today


def search_tasks(
    tasks: list[Task],
    field: SearchField,
    query: str = "",
    now: Optional[pendulum.Date] = None,
) -> list[Task]:
    """
    Search tasks on a single field.

    Args:
        tasks: The tasks to search
        field: Which field to match against
        query: Substring for title/description, exact value for
            category/priority, ignored for overdue
        now: Date to evaluate overdue against, defaults to today

    Returns:
        Matching tasks in their original order
    """
    match field:
        case SearchField.TITLE:
            return filter_by_text(tasks, "title", query)
        case SearchField.DESCRIPTION:
            return filter_by_text(tasks, "description", query)
        case SearchField.CATEGORY:
            return filter_by_category(tasks, query)
        case SearchField.PRIORITY:
            return filter_by_priority(tasks, query)
        case SearchField.OVERDUE:
            if now is None:
                now = today()
            return [task for task in tasks if is_overdue(task, now)]
    raise ValueError(f"Unknown search field: {field}")

# SPDX-License-Identifier: MIT

from typing import Optional

import pendulum

from taskmenu.model.category import DEFAULT_CATEGORIES
from taskmenu.model.priority import PRIORITIES
from taskmenu.model.stats import Stats
from taskmenu.model.task import Task
from taskmenu.time import is_overdue, today


def compute_stats(
    tasks: list[Task],
    categories: list[str],
    now: Optional[pendulum.Date] = None,
) -> Stats:
    if now is None:
        now = today()

    total = len(tasks)
    completed = len([task for task in tasks if task["completed"]])
    percent_complete = 0 if total == 0 else completed * 100 // total

    by_priority = {
        priority: len([task for task in tasks if task["priority"] == priority])
        for priority in PRIORITIES
    }
    by_category = {
        category: len([task for task in tasks if task["category"] == category])
        for category in (categories or DEFAULT_CATEGORIES)
    }

    return {
        "total": total,
        "completed": completed,
        "active": total - completed,
        "overdue": len([task for task in tasks if is_overdue(task, now)]),
        "percent_complete": percent_complete,
        "by_priority": by_priority,
        "by_category": by_category,
    }

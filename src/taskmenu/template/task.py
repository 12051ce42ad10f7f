# SPDX-License-Identifier: MIT

from taskmenu.model.category import DEFAULT_CATEGORIES
from taskmenu.model.priority import Priority
from taskmenu.model.task import Task
from taskmenu.model.task_id import UNSET_TASK_ID
from taskmenu.time import today


def get_task_template() -> Task:
    now = today()
    return {
        "id": UNSET_TASK_ID,
        "title": "",
        "description": "",
        "priority": Priority.LOW.value,
        "due": now,
        "completed": False,
        "category": DEFAULT_CATEGORIES[0],
        "created": now,
    }

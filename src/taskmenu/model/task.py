# SPDX-License-Identifier: MIT

from typing import TypedDict

import pendulum

from taskmenu.model.task_id import TaskId


class Task(TypedDict):
    id: TaskId
    title: str
    description: str
    priority: str
    due: pendulum.Date
    completed: bool
    category: str
    created: pendulum.Date

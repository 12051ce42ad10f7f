# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Optional

import pendulum

from taskmenu.errors import InvalidInputError, TaskCompletedError, TaskNotFoundError
from taskmenu.model.priority import PRIORITIES
from taskmenu.model.task import Task
from taskmenu.model.task_id import TASK_ID_BASE, TaskId
from taskmenu.repository.category import CategoryRepository
from taskmenu.time import today

logger = logging.getLogger(__name__)


class TaskRepository:
    def __init__(self, categories: CategoryRepository) -> None:
        self._tasks: list[Task] = []
        self._last_id: TaskId = TASK_ID_BASE
        self.categories = categories

    def next_id(self) -> TaskId:
        self._last_id += 1
        return self._last_id

    def save_new_task(self, task: Task) -> TaskId:
        if task["title"].strip() == "":
            raise InvalidInputError("Title cannot be empty")
        if task["priority"] not in PRIORITIES:
            raise InvalidInputError(f"Unknown priority: {task['priority']}")

        new_task = deepcopy(task)
        new_task["id"] = self.next_id()
        new_task["completed"] = False
        new_task["created"] = today()

        self.categories.add_category(new_task["category"])
        self._tasks.append(new_task)

        logger.debug("Added task %s: %s", new_task["id"], new_task["title"])
        return new_task["id"]

    def get_all_tasks(self) -> list[Task]:
        return list(self._tasks)

    def get_task(self, id: TaskId) -> Optional[Task]:
        for task in self._tasks:
            if task["id"] == id:
                return task
        return None

    def get_task_strict(self, id: TaskId) -> Task:
        task = self.get_task(id)
        if task is None:
            raise TaskNotFoundError(id)
        return task

    def complete_task(self, id: TaskId) -> bool:
        """
        Mark a task completed.

        Returns False if the task was already completed, in which case
        nothing changes.
        """
        task = self.get_task_strict(id)
        if task["completed"]:
            return False
        task["completed"] = True
        logger.debug("Completed task %s", id)
        return True

    def modify_task(
        self,
        id: TaskId,
        title: Optional[str] = None,
        description: Optional[str] = None,
        priority: Optional[str] = None,
        due: Optional[pendulum.Date] = None,
        category: Optional[str] = None,
    ) -> None:
        """
        Apply all given changes to a task at once.

        Every value is checked before anything is written, so a rejected
        call leaves both the task and the category set untouched.
        """
        task = self.get_task_strict(id)
        if task["completed"]:
            raise TaskCompletedError(id)
        if title is not None and title.strip() == "":
            raise InvalidInputError("Title cannot be empty")
        if priority is not None and priority not in PRIORITIES:
            raise InvalidInputError(f"Unknown priority: {priority}")
        if category is not None and category.strip() == "":
            raise InvalidInputError("Category cannot be empty")

        if title is not None:
            task["title"] = title
        if description is not None:
            task["description"] = description
        if priority is not None:
            task["priority"] = priority
        if due is not None:
            task["due"] = due
        if category is not None:
            self.categories.add_category(category)
            task["category"] = category

        logger.debug("Modified task %s", id)

    def delete_task(self, id: TaskId) -> None:
        task = self.get_task_strict(id)
        self._tasks.remove(task)
        logger.debug("Deleted task %s", id)

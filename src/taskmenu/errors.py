# SPDX-License-Identifier: MIT

from taskmenu.model.task_id import TaskId


class TaskMenuError(Exception):
    """Base class for every recoverable error a flow can report."""


class InvalidInputError(TaskMenuError):
    pass


class TaskNotFoundError(TaskMenuError):
    def __init__(self, id: TaskId) -> None:
        super().__init__(f"Task with ID {id} not found")
        self.id = id


class TaskCompletedError(TaskMenuError):
    def __init__(self, id: TaskId) -> None:
        super().__init__("A completed task cannot be edited")
        self.id = id


class EndOfInputError(Exception):
    """The input stream is exhausted; the session has to end."""
